"""State management submodules for bezierview."""

from .window import WindowState
from .curves import RenderedCurve, CurveState
from .app_state import AppState

__all__ = [
    'WindowState',
    'RenderedCurve',
    'CurveState',
    'AppState',
]

"""Raylib compatibility layer - abstracts differences between raylibpy and python-raylib."""

from __future__ import annotations
import ctypes
from typing import Any

# Try to import raylib
try:
    import raylibpy as rl
    RL_VERSION = "raylibpy"
except ImportError:
    import raylib as rl
    RL_VERSION = "python-raylib"


class _CTypesColor(ctypes.Structure):
    """Fallback Color structure for ctypes."""
    _fields_ = [
        ("r", ctypes.c_ubyte),
        ("g", ctypes.c_ubyte),
        ("b", ctypes.c_ubyte),
        ("a", ctypes.c_ubyte),
    ]


def make_color(r: int, g: int, b: int, a: int = 255) -> Any:
    """Create a raylib Color compatible with the current binding."""
    ctor = getattr(rl, "Color", None)
    if ctor:
        try:
            return ctor(int(r), int(g), int(b), int(a))
        except TypeError:
            pass
    if hasattr(rl, 'ffi'):
        c = rl.ffi.new("Color *", (int(r), int(g), int(b), int(a)))
        return c[0]
    return _CTypesColor(int(r), int(g), int(b), int(a))


def color_from(color) -> Any:
    """Convert an (r, g, b) or (r, g, b, a) tuple to a raylib Color."""
    return make_color(*color)


def init_window(w: int, h: int, title: str) -> None:
    """Open the window with title encoding fallback."""
    try:
        rl.InitWindow(w, h, title)
    except TypeError:
        rl.InitWindow(w, h, title.encode('utf-8'))


def is_window_ready() -> bool:
    """Check if the window was created. Bindings without the call assume yes."""
    fn = getattr(rl, 'IsWindowReady', None)
    return bool(fn()) if fn else True


# Re-export commonly used raylib items
__all__ = [
    'rl',
    'RL_VERSION',
    'make_color',
    'color_from',
    'init_window',
    'is_window_ready',
]

"""Composite AppState - the scene plus everything derived from it."""

from __future__ import annotations
from dataclasses import dataclass, field

from .window import WindowState
from .curves import CurveState
from ..scene import SceneConfig, default_scene


@dataclass
class AppState:
    """
    Application state for one run.

    The scene is fixed for the lifetime of the state; curves are rasterized
    from it once by build() and then only read.
    """
    scene: SceneConfig = field(default_factory=default_scene)
    window: WindowState = field(default_factory=WindowState)
    curves: CurveState = field(default_factory=CurveState)
    running: bool = False

    @classmethod
    def build(cls, scene: SceneConfig) -> AppState:
        """Create a state for scene with all curves already rasterized."""
        state = cls(scene=scene)
        state.window.screen_w, state.window.screen_h = scene.canvas_size
        state.curves.build(scene)
        return state


"""Renderer - handles all drawing operations.

The Renderer is a pure drawing layer that only reads state and draws to a
canvas. It never rasterizes curves itself: polylines are computed once when
the state is built and only redrawn here.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .canvas import Canvas
    from .state import AppState

from .types import Color, Polyline
from .view_math import polyline_to_screen
from .curves import segments


@dataclass
class Renderer:
    """
    Draws the curves held in an AppState onto a Canvas.

    Usage:
        renderer = Renderer()
        renderer.draw_scene(canvas, state)
    """

    def draw_scene(self, canvas: "Canvas", state: "AppState") -> None:
        """Clear the canvas and draw every cached curve."""
        canvas.clear(state.scene.background)
        for curve in state.curves.rendered:
            self.draw_polyline(canvas, curve.polyline, curve.spec.color)

    def draw_polyline(self, canvas: "Canvas", polyline: Polyline, color: Color) -> None:
        """Draw a polyline as straight segments between consecutive points."""
        w, h = canvas.size
        pts = polyline_to_screen(polyline, w, h)
        for a, b in segments(pts):
            canvas.draw_line(a.x, a.y, b.x, b.y, color)


# Singleton instance
_renderer = None


def get_renderer() -> Renderer:
    """Get the renderer instance."""
    global _renderer
    if _renderer is None:
        _renderer = Renderer()
    return _renderer

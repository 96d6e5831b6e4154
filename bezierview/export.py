"""Headless export - draw a scene into a PNG file without opening a window."""

from __future__ import annotations
from pathlib import Path

from .canvas import ImageCanvas
from .renderer import get_renderer
from .state import AppState


def render_image(state: AppState) -> ImageCanvas:
    """Draw the state's curves onto a fresh image canvas of the scene size."""
    w, h = state.scene.canvas_size
    canvas = ImageCanvas(w, h)
    get_renderer().draw_scene(canvas, state)
    return canvas


def export_png(state: AppState, path: str | Path) -> None:
    """Render the state and save it to path.

    Raises:
        OSError: If the file cannot be written.
    """
    render_image(state).save(path)

"""Drawing surfaces the renderer can draw onto.

The renderer only needs three operations: clear, draw a line, and the
canvas size. ImageCanvas draws into a Pillow image for headless export;
the raylib window canvas lives in window.py.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Tuple

from PIL import Image, ImageDraw

from .types import Color
from .logging import log


class Canvas(ABC):
    """A pixel surface that can be cleared and drawn on with lines."""

    @property
    @abstractmethod
    def size(self) -> Tuple[int, int]:
        """Canvas (width, height) in pixels."""

    @abstractmethod
    def clear(self, color: Color) -> None:
        pass

    @abstractmethod
    def draw_line(self, x0: float, y0: float, x1: float, y1: float, color: Color) -> None:
        """Draw a one-pixel line. Coordinates are truncated to whole pixels."""


def _rgba(color: Color) -> Tuple[int, int, int, int]:
    if len(color) == 4:
        return (color[0], color[1], color[2], color[3])
    return (color[0], color[1], color[2], 255)


class ImageCanvas(Canvas):
    """Canvas backed by an in-memory Pillow image."""

    def __init__(self, width: int, height: int):
        self.image: Image.Image = Image.new("RGBA", (width, height), (0, 0, 0, 255))
        self._draw = ImageDraw.Draw(self.image)

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size

    def clear(self, color: Color) -> None:
        self._draw.rectangle((0, 0, self.image.width, self.image.height), fill=_rgba(color))

    def draw_line(self, x0: float, y0: float, x1: float, y1: float, color: Color) -> None:
        self._draw.line((int(x0), int(y0), int(x1), int(y1)), fill=_rgba(color), width=1)

    def get_pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        return self.image.getpixel((x, y))

    def save(self, path: str | Path) -> None:
        """Save the image as PNG, dropping the alpha channel."""
        self.image.convert("RGB").save(path, format="PNG")
        log(f"[EXPORT] Wrote {self.image.width}x{self.image.height} image to {path}")

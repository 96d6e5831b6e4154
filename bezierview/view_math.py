"""Pure view calculation functions - no side effects, no state mutation."""

from __future__ import annotations
from typing import List, Tuple

from .types import Point, Polyline, ScreenPoint


def to_screen(p: Point, screen_w: int, screen_h: int) -> ScreenPoint:
    """Map a normalized point to canvas pixels.

    Args:
        p: Point in normalized space.
        screen_w: Canvas width in pixels.
        screen_h: Canvas height in pixels.

    Returns:
        ScreenPoint with x scaled by width and y by height.
    """
    return ScreenPoint(screen_w * p.x, screen_h * p.y)


def polyline_to_screen(polyline: Polyline, screen_w: int, screen_h: int) -> List[ScreenPoint]:
    """Map every point of a polyline to canvas pixels."""
    return [to_screen(p, screen_w, screen_h) for p in polyline]


def parse_size(text: str) -> Tuple[int, int]:
    """Parse a 'WxH' size string.

    Args:
        text: Size such as '400x400'.

    Returns:
        (width, height) tuple.

    Raises:
        ValueError: If text is malformed or a dimension is not positive.
    """
    parts = text.lower().split("x")
    if len(parts) != 2:
        raise ValueError(f"size must look like WxH, got {text!r}")
    w, h = int(parts[0]), int(parts[1])
    if w <= 0 or h <= 0:
        raise ValueError(f"size must be positive, got {text!r}")
    return (w, h)

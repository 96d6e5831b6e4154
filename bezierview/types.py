"""Core data types for bezierview."""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

# (r, g, b) or (r, g, b, a), components 0-255
Color = Tuple[int, ...]


@dataclass(frozen=True)
class Point:
    """A location in normalized curve space.

    Coordinates are conventionally in [0, 1] but never clamped.
    0,0 is the upper-left of the canvas and 1,1 is the lower-right.
    """
    x: float
    y: float

    @classmethod
    def of(cls, xy) -> Point:
        """Build a Point from any (x, y) pair."""
        x, y = xy
        return cls(float(x), float(y))

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


# Ordered samples along one curve, start point included
Polyline = List[Point]


@dataclass(frozen=True)
class ScreenPoint:
    """A location in canvas pixels."""
    x: float
    y: float

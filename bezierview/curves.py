"""Bezier curve evaluation - pure functions, no drawing.

A Bezier curve is evaluated by repeated linear interpolation between its
control points (de Casteljau). A quadratic curve (3 points) needs two
layers of interpolation, a cubic curve (4 points) needs three.
"""

from __future__ import annotations
from typing import Iterator, List, Sequence, Tuple, TypeVar

from .types import Point, Polyline

T = TypeVar("T")


def lerp(t: float, p0: Point, p1: Point) -> Point:
    """Linear interpolation between two points.

    At t=0 the result is p0, at t=1 it is p1, and at t=0.8 it is 80% of the
    way from p0 to p1. t is not clamped.
    """
    return Point((1 - t) * p0.x + t * p1.x,
                 (1 - t) * p0.y + t * p1.y)


def interpolate_layer(t: float, points: Sequence[Point]) -> List[Point]:
    """Interpolate each consecutive pair of points by t.

    Returns one point fewer than it was given.
    """
    return [lerp(t, a, b) for a, b in zip(points, points[1:])]


def evaluate(points: Sequence[Point], t: float) -> Point:
    """Evaluate the Bezier curve defined by points at parameter t.

    Args:
        points: Control points, first is the curve start, last is its end.
        t: Curve parameter, conventionally in [0, 1].

    Returns:
        The point B(t) on the curve.

    Raises:
        ValueError: If points is empty.
    """
    if not points:
        raise ValueError("a curve needs at least one control point")
    layer = list(points)
    while len(layer) > 1:
        layer = interpolate_layer(t, layer)
    return layer[0]


def rasterize(points: Sequence[Point], steps: int) -> Polyline:
    """Approximate a Bezier curve with a polyline of steps segments.

    Samples the curve at t = i / steps for i = 0..steps. The first sample is
    the first control point itself.

    Args:
        points: Control points (3 for quadratic, 4 for cubic).
        steps: Number of line segments, at least 1.

    Returns:
        steps + 1 points along the curve.

    Raises:
        ValueError: If points is empty or steps < 1.
    """
    if not points:
        raise ValueError("a curve needs at least one control point")
    if steps < 1:
        raise ValueError(f"steps must be at least 1, got {steps}")

    polyline: Polyline = [points[0]]
    for i in range(1, steps + 1):
        polyline.append(evaluate(points, i / steps))
    return polyline


def degree(points: Sequence[Point]) -> int:
    """Curve degree: one less than the number of control points."""
    return len(points) - 1


def segments(polyline: Sequence[T]) -> Iterator[Tuple[T, T]]:
    """Yield consecutive (start, end) pairs of a polyline, in any coordinate space."""
    return zip(polyline, polyline[1:])

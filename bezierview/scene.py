"""Scene configuration - which curves to draw, how finely, on what canvas.

A SceneConfig is built once before any rendering and passed explicitly to
the renderer and application. It can come from the built-in defaults or
from a YAML file:

    steps: 20
    canvas_size: [400, 400]
    background: [0, 0, 0]
    curves:
      - name: quadratic
        points: [[0.2, 0.2], [0.5, 0.9], [0.9, 0.1]]
        color: [0, 255, 0]

The shorthand ``points: [[[x, y], ...], ...]`` lists bare control point
sets and takes colors from the default palette.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
import math
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import yaml

from .types import Color, Point
from .config import (
    STEPS, WINDOW_W, WINDOW_H, BG_COLOR,
    QUAD_POINTS, CUBIC_POINTS, QUAD_COLOR, CUBIC_COLOR,
    CURVE_PALETTE, CURVE_POINT_COUNTS, MAX_CANVAS_DIMENSION,
)
from .logging import log
from .view_math import parse_size
from .curves import degree as curve_degree

_KNOWN_KEYS = frozenset({"steps", "canvas_size", "background", "curves", "points"})
_CURVE_KEYS = frozenset({"name", "points", "color"})


class ConfigError(ValueError):
    """Raised when a scene configuration is malformed."""


@dataclass(frozen=True)
class CurveSpec:
    """One curve: its control points and the color it is drawn in."""
    name: str
    points: Tuple[Point, ...]
    color: Color

    @property
    def degree(self) -> int:
        return curve_degree(self.points)


@dataclass(frozen=True)
class SceneConfig:
    """Everything needed to draw a scene."""
    steps: int = STEPS
    canvas_size: Tuple[int, int] = (WINDOW_W, WINDOW_H)
    background: Color = BG_COLOR
    curves: Tuple[CurveSpec, ...] = field(default_factory=tuple)

    @property
    def width(self) -> int:
        return self.canvas_size[0]

    @property
    def height(self) -> int:
        return self.canvas_size[1]

    def with_overrides(
        self,
        steps: Optional[int] = None,
        canvas_size: Optional[Tuple[int, int]] = None,
    ) -> SceneConfig:
        """Return a copy with the given values replaced (None keeps current)."""
        changes: Dict[str, Any] = {}
        if steps is not None:
            changes["steps"] = _parse_steps(steps)
        if canvas_size is not None:
            changes["canvas_size"] = _parse_canvas_size(canvas_size)
        return replace(self, **changes) if changes else self


def default_curves() -> Tuple[CurveSpec, ...]:
    """The quadratic (green) and cubic (red) curves drawn by default."""
    return (
        CurveSpec("quadratic", tuple(Point.of(p) for p in QUAD_POINTS), QUAD_COLOR),
        CurveSpec("cubic", tuple(Point.of(p) for p in CUBIC_POINTS), CUBIC_COLOR),
    )


def default_scene() -> SceneConfig:
    return SceneConfig(curves=default_curves())


# ═══════════════════════════════════════════════════════════════════════════
# Loading
# ═══════════════════════════════════════════════════════════════════════════

def load_scene(path: str | Path) -> SceneConfig:
    """Load a scene from a YAML file.

    Args:
        path: Path to the YAML file. An empty file gives the default scene.

    Returns:
        The validated SceneConfig.

    Raises:
        ConfigError: If the file is missing, unparsable or invalid.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config {path}: {e.strerror or e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e

    scene = scene_from_dict(data or {})
    log(f"[CONFIG] Loaded {len(scene.curves)} curve(s) from {path}")
    return scene


def scene_from_dict(data: Any) -> SceneConfig:
    """Validate a parsed config mapping and build a SceneConfig."""
    if not isinstance(data, dict):
        raise ConfigError("config must be a mapping")

    unknown = set(data) - _KNOWN_KEYS
    if unknown:
        raise ConfigError(f"unknown config key(s): {', '.join(sorted(map(str, unknown)))}")
    if "curves" in data and "points" in data:
        raise ConfigError("use either 'curves' or 'points', not both")

    if "curves" in data:
        curves = _parse_curves(data["curves"])
    elif "points" in data:
        curves = _parse_point_sets(data["points"])
    else:
        curves = default_curves()

    return SceneConfig(
        steps=_parse_steps(data.get("steps", STEPS)),
        canvas_size=_parse_canvas_size(data.get("canvas_size", (WINDOW_W, WINDOW_H))),
        background=_parse_color(data.get("background", BG_COLOR), "background"),
        curves=curves,
    )


# ═══════════════════════════════════════════════════════════════════════════
# Validation helpers
# ═══════════════════════════════════════════════════════════════════════════

def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _is_finite(v: Any) -> bool:
    # Integers too large for a float are not usable coordinates
    try:
        return math.isfinite(float(v))
    except OverflowError:
        return False


def _parse_steps(value: Any) -> int:
    if not _is_int(value) or value < 1:
        raise ConfigError(f"steps: expected an integer >= 1, got {value!r}")
    return value


def _parse_canvas_size(value: Any) -> Tuple[int, int]:
    if isinstance(value, str):
        try:
            value = parse_size(value)
        except ValueError as e:
            raise ConfigError(f"canvas_size: {e}") from e
    if (not isinstance(value, (list, tuple)) or len(value) != 2
            or not all(_is_int(v) and v > 0 for v in value)):
        raise ConfigError(f"canvas_size: expected [width, height] of positive integers, got {value!r}")
    if max(value) > MAX_CANVAS_DIMENSION:
        raise ConfigError(f"canvas_size: each side must be at most {MAX_CANVAS_DIMENSION}, got {value!r}")
    return (value[0], value[1])


def _parse_color(value: Any, where: str) -> Color:
    if (not isinstance(value, (list, tuple)) or len(value) not in (3, 4)
            or not all(_is_int(c) and 0 <= c <= 255 for c in value)):
        raise ConfigError(f"{where}: expected 3 or 4 integers in 0..255, got {value!r}")
    return tuple(value)


def _parse_point(value: Any, where: str) -> Point:
    if (not isinstance(value, (list, tuple)) or len(value) != 2
            or not all(_is_number(c) and _is_finite(c) for c in value)):
        raise ConfigError(f"{where}: expected [x, y] of finite numbers, got {value!r}")
    return Point.of(value)


def _parse_points(value: Any, where: str) -> Tuple[Point, ...]:
    if not isinstance(value, (list, tuple)):
        raise ConfigError(f"{where}: expected a list of points, got {value!r}")
    if len(value) not in CURVE_POINT_COUNTS:
        counts = " or ".join(str(n) for n in sorted(CURVE_POINT_COUNTS))
        raise ConfigError(f"{where}: expected {counts} control points, got {len(value)}")
    return tuple(_parse_point(p, f"{where}[{i}]") for i, p in enumerate(value))


def _default_name(points: Sequence[Point], index: int) -> str:
    kind = {3: "quadratic", 4: "cubic"}.get(len(points), "curve")
    return f"{kind}-{index}"


def _palette_color(index: int) -> Color:
    return CURVE_PALETTE[index % len(CURVE_PALETTE)]


def _parse_point_sets(value: Any) -> Tuple[CurveSpec, ...]:
    if not isinstance(value, (list, tuple)) or not value:
        raise ConfigError("points: expected a non-empty list of control point sets")
    curves: List[CurveSpec] = []
    for i, raw in enumerate(value):
        points = _parse_points(raw, f"points[{i}]")
        curves.append(CurveSpec(_default_name(points, i), points, _palette_color(i)))
    return tuple(curves)


def _parse_curves(value: Any) -> Tuple[CurveSpec, ...]:
    if not isinstance(value, (list, tuple)) or not value:
        raise ConfigError("curves: expected a non-empty list of curves")
    curves: List[CurveSpec] = []
    for i, raw in enumerate(value):
        where = f"curves[{i}]"
        if not isinstance(raw, dict):
            raise ConfigError(f"{where}: expected a mapping, got {raw!r}")
        unknown = set(raw) - _CURVE_KEYS
        if unknown:
            raise ConfigError(f"{where}: unknown key(s): {', '.join(sorted(map(str, unknown)))}")
        if "points" not in raw:
            raise ConfigError(f"{where}: missing 'points'")
        points = _parse_points(raw["points"], f"{where}.points")
        name = str(raw.get("name") or _default_name(points, i))
        color = (_parse_color(raw["color"], f"{where}.color")
                 if "color" in raw else _palette_color(i))
        curves.append(CurveSpec(name, points, color))
    return tuple(curves)

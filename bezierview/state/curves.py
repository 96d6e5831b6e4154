"""Curve state - polylines computed once per run."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from ..scene import CurveSpec, SceneConfig
from ..types import Polyline
from .. import curves as bezier
from ..logging import log


@dataclass(frozen=True)
class RenderedCurve:
    """A curve spec together with its sampled polyline."""
    spec: CurveSpec
    polyline: Polyline


@dataclass
class CurveState:
    """Cached polylines for every curve of a scene."""
    rendered: List[RenderedCurve] = field(default_factory=list)
    built: bool = False

    def build(self, scene: SceneConfig) -> None:
        """Rasterize each curve of the scene. Later calls are no-ops."""
        if self.built:
            return
        for spec in scene.curves:
            polyline = bezier.rasterize(spec.points, scene.steps)
            self.rendered.append(RenderedCurve(spec, polyline))
            log(f"[CURVES] {spec.name}: degree {spec.degree}, {len(polyline)} points")
        self.built = True

    @property
    def count(self) -> int:
        return len(self.rendered)

"""Shared test fixtures."""

from typing import List, Tuple

import pytest

from bezierview.canvas import Canvas
from bezierview.logging import set_enabled
from bezierview.types import Point


@pytest.fixture(autouse=True)
def quiet_logs():
    set_enabled(False)
    yield
    set_enabled(True)


@pytest.fixture
def quad_points():
    return [Point(0.2, 0.2), Point(0.5, 0.9), Point(0.9, 0.1)]


@pytest.fixture
def cubic_points():
    return [Point(0.1, 0.9), Point(0.3, 0.2), Point(0.5, 1.6), Point(0.8, 0.4)]


class RecordingCanvas(Canvas):
    """Canvas that remembers what was drawn on it."""

    def __init__(self, width: int = 400, height: int = 400):
        self._size = (width, height)
        self.clears: List[Tuple[int, ...]] = []
        self.lines: List[Tuple[float, float, float, float, Tuple[int, ...]]] = []

    @property
    def size(self):
        return self._size

    def clear(self, color):
        self.clears.append(color)
        self.lines.clear()

    def draw_line(self, x0, y0, x1, y1, color):
        self.lines.append((x0, y0, x1, y1, color))


@pytest.fixture
def recording_canvas():
    return RecordingCanvas()


@pytest.fixture
def canvas_factory():
    return RecordingCanvas

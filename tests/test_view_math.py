"""Normalized-to-pixel mapping tests."""

import pytest

from bezierview.types import Point, ScreenPoint
from bezierview.view_math import parse_size, polyline_to_screen, to_screen


def test_to_screen_scales_by_canvas():
    assert to_screen(Point(0.5, 0.25), 400, 200) == ScreenPoint(200.0, 50.0)


def test_to_screen_does_not_clamp():
    assert to_screen(Point(0.5, 1.6), 400, 400).y == pytest.approx(640.0)


def test_polyline_to_screen_keeps_order():
    pts = polyline_to_screen([Point(0.0, 0.0), Point(1.0, 1.0)], 10, 20)
    assert pts == [ScreenPoint(0.0, 0.0), ScreenPoint(10.0, 20.0)]


class TestParseSize:

    def test_valid(self):
        assert parse_size("640x480") == (640, 480)
        assert parse_size("10X20") == (10, 20)

    @pytest.mark.parametrize("text", ["640", "0x10", "10x-1", "axb", "1x2x3"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_size(text)

"""Raylib-facing input and canvas tests with the raylib calls replaced."""

import pytest

input_handler = pytest.importorskip('bezierview.input_handler', reason='raylib not loadable')
window = pytest.importorskip('bezierview.window', reason='raylib not loadable')

from bezierview.commands import CloseApp  # noqa: E402
from bezierview.config import KEY_CLOSE  # noqa: E402


class KeyboardStub:
    """Stands in for raylib key polling; reports the given keys as pressed."""

    def __init__(self, pressed=()):
        self.pressed = set(pressed)
        self.queried = []

    def IsKeyPressed(self, key):
        self.queried.append(key)
        return key in self.pressed


class DrawStub:
    """Records raylib draw calls."""

    def __init__(self):
        self.calls = []

    def DrawLine(self, *args):
        self.calls.append(('DrawLine', args))

    def ClearBackground(self, color):
        self.calls.append(('ClearBackground', (color,)))


class TestInputHandler:

    def test_escape_closes(self, monkeypatch):
        monkeypatch.setattr(input_handler, 'rl', KeyboardStub(pressed=[256]))
        commands = input_handler.InputHandler().poll()
        assert commands == [CloseApp(reason='escape')]

    def test_no_keys_no_commands(self, monkeypatch):
        stub = KeyboardStub()
        monkeypatch.setattr(input_handler, 'rl', stub)
        assert input_handler.InputHandler().poll() == []
        assert stub.queried == [KEY_CLOSE]

    def test_other_key_ignored(self, monkeypatch):
        monkeypatch.setattr(input_handler, 'rl', KeyboardStub(pressed=[65]))
        assert input_handler.InputHandler().poll() == []

    def test_escape_key_code(self):
        assert KEY_CLOSE == 256


class TestRaylibCanvas:

    @pytest.fixture
    def draw_stub(self, monkeypatch):
        stub = DrawStub()
        monkeypatch.setattr(window, 'rl', stub)
        monkeypatch.setattr(window, 'color_from', lambda c: ('color', tuple(c)))
        return stub

    def test_draw_line_truncates_and_converts_color(self, draw_stub):
        canvas = window.RaylibCanvas(400, 400)
        canvas.draw_line(2.9, 5.7, 6.2, 5.1, (1, 2, 3))
        assert draw_stub.calls == [('DrawLine', (2, 5, 6, 5, ('color', (1, 2, 3))))]
        assert all(type(v) is int for v in draw_stub.calls[0][1][:4])

    def test_clear_converts_color(self, draw_stub):
        window.RaylibCanvas(10, 10).clear((0, 0, 0))
        assert draw_stub.calls == [('ClearBackground', (('color', (0, 0, 0)),))]

    def test_size(self):
        assert window.RaylibCanvas(320, 200).size == (320, 200)

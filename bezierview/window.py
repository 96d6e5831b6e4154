"""Raylib window - lifecycle of the on-screen canvas."""

from __future__ import annotations
from typing import Tuple

from .canvas import Canvas
from .types import Color
from .rl_compat import rl, RL_VERSION, color_from, init_window, is_window_ready
from .config import TARGET_FPS
from .logging import log


class WindowError(RuntimeError):
    """Raised when the window cannot be created."""


class RaylibCanvas(Canvas):
    """Canvas that draws into the current raylib frame."""

    def __init__(self, width: int, height: int):
        self._size = (width, height)

    @property
    def size(self) -> Tuple[int, int]:
        return self._size

    def clear(self, color: Color) -> None:
        rl.ClearBackground(color_from(color))

    def draw_line(self, x0: float, y0: float, x1: float, y1: float, color: Color) -> None:
        rl.DrawLine(int(x0), int(y0), int(x1), int(y1), color_from(color))


class RaylibWindow:
    """Owns the raylib window from open() to close()."""

    def __init__(self, target_fps: int = TARGET_FPS):
        self.target_fps = target_fps
        self.canvas: RaylibCanvas | None = None
        self._open = False

    def open(self, width: int, height: int, title: str) -> RaylibCanvas:
        """Create the window and return its canvas.

        Raises:
            WindowError: If raylib could not create the window.
        """
        log(f"[INIT] Creating window: {width}x{height} ({RL_VERSION})")
        init_window(width, height, title)
        if not is_window_ready():
            raise WindowError("could not create window")
        self._open = True

        # Escape is handled through commands, not raylib's built-in exit key
        rl.SetExitKey(0)
        rl.SetTargetFPS(self.target_fps)

        self.canvas = RaylibCanvas(rl.GetScreenWidth(), rl.GetScreenHeight())
        log(f"[INIT] Window created: {self.canvas.size[0]}x{self.canvas.size[1]}")
        return self.canvas

    def should_close(self) -> bool:
        """True once the user asked the window manager to close the window."""
        return bool(rl.WindowShouldClose())

    def begin_frame(self) -> None:
        rl.BeginDrawing()

    def end_frame(self) -> None:
        """Present the frame; also waits to keep the target frame rate."""
        rl.EndDrawing()

    def close(self) -> None:
        if not self._open:
            return
        log("[CLEANUP] Closing window")
        rl.CloseWindow()
        self._open = False

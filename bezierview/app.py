"""Application - main loop orchestrator.

The Application class coordinates:
- Window lifecycle (via RaylibWindow)
- Input handling (via InputHandler)
- Command execution
- Rendering (via Renderer)

Curves are rasterized once before the loop starts; each frame only redraws
the cached polylines and waits for the user to close the window.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional
import traceback

from .state import AppState
from .renderer import Renderer, get_renderer
from .commands import Command
from .canvas import Canvas
from .config import EXIT_OK, EXIT_WINDOW_FAILED
from .logging import log, increment_frame, get_frame


def _default_window() -> Any:
    from .window import RaylibWindow
    return RaylibWindow()


def _default_input_handler() -> Any:
    from .input_handler import get_input_handler
    return get_input_handler()


@dataclass
class Application:
    """
    Main application orchestrator.

    Usage:
        app = Application(state=AppState.build(scene))
        if app.initialize():
            app.run()
    """

    state: AppState = field(default_factory=AppState)
    renderer: Renderer = field(default_factory=get_renderer)
    window: Any = field(default_factory=_default_window)
    input_handler: Any = field(default_factory=_default_input_handler)
    canvas: Optional[Canvas] = None

    def initialize(self) -> bool:
        """
        Open the window and make sure the curves are rasterized.

        Returns True if initialization successful.
        """
        self.state.curves.build(self.state.scene)
        w, h = self.state.scene.canvas_size
        try:
            self.canvas = self.window.open(w, h, self.state.window.title)
        except Exception as e:
            log(f"[INIT][CRITICAL] Failed to initialize window: {e!r}")
            log(f"[INIT][CRITICAL] Traceback:\n{traceback.format_exc()}")
            return False
        self.state.window.screen_w, self.state.window.screen_h = self.canvas.size
        self.state.window.ready = True
        log("[APP] Application initialized")
        return True

    def run(self) -> None:
        """Run the main loop until the window is closed."""
        self.state.running = True
        log("[APP] Starting main loop")

        try:
            while self.state.running:
                self._frame()
        except Exception as e:
            log(f"[APP][CRITICAL] Unhandled exception: {e!r}")
            log(f"[APP][CRITICAL] Traceback:\n{traceback.format_exc()}")
            raise
        finally:
            self._cleanup()

    def _frame(self) -> None:
        """Execute a single frame."""
        # Check for window close
        if self.window.should_close():
            log("[APP] Window close requested")
            self.state.running = False
            return

        # 1. Poll input and execute commands
        for cmd in self.input_handler.poll():
            self._execute_command(cmd)
            if not self.state.running:
                return

        # 2. Render cached curves
        self.window.begin_frame()
        self.renderer.draw_scene(self.canvas, self.state)
        self.window.end_frame()

        # 3. Frame bookkeeping
        increment_frame()

    def _execute_command(self, cmd: Command) -> None:
        if cmd.can_execute(self.state):
            cmd.execute(self.state)

    def _cleanup(self) -> None:
        log(f"[APP] Starting cleanup after {get_frame()} frame(s)")
        self.window.close()
        self.state.window.ready = False
        log("[APP] Cleanup complete")


def run_app(state: AppState, **kwargs: Any) -> int:
    """Show the state in a window until it is closed. Returns an exit code."""
    app = Application(state=state, **kwargs)
    if not app.initialize():
        return EXIT_WINDOW_FAILED
    app.run()
    return EXIT_OK

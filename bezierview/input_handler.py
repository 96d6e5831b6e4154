"""Input Handler - maps raylib input events to commands.

It polls input each frame and returns a list of commands to execute.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List

from .rl_compat import rl
from .commands import Command, CloseApp
from .config import KEY_CLOSE


@dataclass
class InputHandler:
    """Handles input polling and command generation."""

    key_close: int = KEY_CLOSE

    def poll(self) -> List[Command]:
        """Poll input and return commands for this frame."""
        commands: List[Command] = []
        if rl.IsKeyPressed(self.key_close):
            commands.append(CloseApp(reason="escape"))
        return commands


# Singleton instance
_input_handler = None


def get_input_handler() -> InputHandler:
    """Get the input handler instance."""
    global _input_handler
    if _input_handler is None:
        _input_handler = InputHandler()
    return _input_handler

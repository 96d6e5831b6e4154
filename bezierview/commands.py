"""Command Pattern for input handling.

Commands encapsulate actions that can be triggered by various inputs.
Each command has an execute() method and optional can_execute() for guards.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .state import AppState

from .logging import log


class Command(ABC):
    """Base class for all commands."""

    @abstractmethod
    def execute(self, state: "AppState") -> bool:
        """Execute the command. Returns True if action was taken."""
        pass

    def can_execute(self, state: "AppState") -> bool:
        """Check if command can be executed. Override for guards."""
        return True


@dataclass
class CloseApp(Command):
    """Stop the main loop."""
    reason: str = "escape"

    def can_execute(self, state: "AppState") -> bool:
        return state.running

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        log(f"[CMD] CloseApp: {self.reason}")
        state.running = False
        return True

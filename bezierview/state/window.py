"""Window state - screen dimensions and readiness."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from ..config import WINDOW_TITLE


@dataclass
class WindowState:
    """Window-related state."""
    screen_w: int = 0
    screen_h: int = 0
    title: str = WINDOW_TITLE
    ready: bool = False

    @property
    def size(self) -> Tuple[int, int]:
        """Get window size as tuple."""
        return (self.screen_w, self.screen_h)

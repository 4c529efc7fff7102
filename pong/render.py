from __future__ import annotations

"""Rendering primitives consumed by the game objects.

Entities never talk to pygame directly. They receive an object implementing
`Renderer` and issue a handful of side-effect-only calls on it. The pygame
implementation lives in `gui.gamelib`; tests use a recorder.
"""

from enum import Enum
from typing import Protocol, Tuple


Color = Tuple[int, int, int]

# Colors (R,G,B)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GRAY = (128, 128, 128)
YELLOW = (255, 255, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)


class Align(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class Renderer(Protocol):
    def set_color(self, color: Color) -> None:
        """Select the color used by the following draw calls."""

    def fill_rect(self, cx: float, cy: float, width: float, height: float) -> None:
        """Fill an axis-aligned rectangle given its center and size."""

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Draw a straight line between two points."""

    def draw_text(self, text: str, y: float, align: Align) -> None:
        """Draw one line of text at height y with the given alignment."""

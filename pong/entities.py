from __future__ import annotations

"""Walls and players: geometry plus an identifying label.

Both expose the read surface used by collision checks (center and size) and
draw themselves as filled rectangles.
"""

from dataclasses import dataclass
from enum import Enum

from .render import Color, Renderer, WHITE


class WallId(str, Enum):
    TOP = "Top"
    BOTTOM = "Bottom"
    LEFT = "Left"
    RIGHT = "Right"


class PlayerId(str, Enum):
    PLAYER_1 = "Player 1"
    PLAYER_2 = "Player 2"


def _check_size(width: float, height: float) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"width and height must be positive, got {width}x{height}")


@dataclass
class Wall:
    wall_id: WallId
    cx: float
    cy: float
    width: float
    height: float
    color: Color = WHITE

    def __post_init__(self):
        self.wall_id = WallId(self.wall_id)
        _check_size(self.width, self.height)

    @property
    def top(self) -> float:
        return self.cy - self.height / 2

    @property
    def bottom(self) -> float:
        return self.cy + self.height / 2

    @property
    def left(self) -> float:
        return self.cx - self.width / 2

    @property
    def right(self) -> float:
        return self.cx + self.width / 2

    def draw(self, lib: Renderer) -> None:
        lib.set_color(self.color)
        lib.fill_rect(self.cx, self.cy, self.width, self.height)


@dataclass
class Player:
    """A paddle controlled by one of the two players.

    Speed is in pixels per time unit, the same unit the ball uses.
    """

    player_id: PlayerId
    cx: float
    cy: float
    width: float
    height: float
    speed: float = 0.5
    color: Color = WHITE

    def __post_init__(self):
        self.player_id = PlayerId(self.player_id)
        _check_size(self.width, self.height)
        if self.speed < 0:
            raise ValueError(f"speed must be non-negative, got {self.speed}")

    @property
    def top(self) -> float:
        return self.cy - self.height / 2

    @property
    def bottom(self) -> float:
        return self.cy + self.height / 2

    @property
    def left(self) -> float:
        return self.cx - self.width / 2

    @property
    def right(self) -> float:
        return self.cx + self.width / 2

    def move(self, direction: float, delta: float, top: float, bottom: float) -> None:
        """Move vertically and keep the paddle between `top` and `bottom`.

        Direction is -1.0 for up, +1.0 for down, 0.0 to stay.
        """
        cy = self.cy + self.speed * delta * direction
        half = self.height / 2
        self.cy = max(top + half, min(bottom - half, cy))

    def draw(self, lib: Renderer) -> None:
        lib.set_color(self.color)
        lib.fill_rect(self.cx, self.cy, self.width, self.height)

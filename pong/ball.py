from __future__ import annotations

"""The ball: kinematics, collision detection and bounce response.

Motion is a fixed-step position update driven by a per-axis direction sign.
Collisions are detected after the ball has moved (it may already overlap a
wall) and resolved by setting the sign for the next frame.
"""

import logging
from typing import Tuple, Union

from .entities import Player, PlayerId, Wall, WallId
from .render import Color, Renderer, YELLOW


logger = logging.getLogger(__name__)

Target = Union[Wall, Player]

# Wall label -> (axis, new sign). Axis 0 is x, 1 is y.
WALL_BOUNCE = {
    WallId.BOTTOM: (1, -1.0),
    WallId.TOP: (1, 1.0),
    WallId.RIGHT: (0, -1.0),
    WallId.LEFT: (0, 1.0),
}


class Ball:
    def __init__(
        self,
        cx: float,
        cy: float,
        width: float,
        height: float,
        color: Color = YELLOW,
        speed: float = 0.25,
    ):
        """Create a ball centered at (cx, cy).

        Speed is a distance per time unit (pixels per millisecond in the game).
        Only the speed is configurable; the ball always starts moving down and
        to the right.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"ball size must be positive, got {width}x{height}")
        if speed < 0:
            raise ValueError(f"ball speed must be non-negative, got {speed}")
        self._cx = float(cx)
        self._cy = float(cy)
        self._width = float(width)
        self._height = float(height)
        self._color = color
        self._speed = float(speed)
        self._sx = 1.0
        self._sy = 1.0

    # --- Read surface ---
    @property
    def cx(self) -> float:
        return self._cx

    @property
    def cy(self) -> float:
        return self._cy

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def color(self) -> Color:
        return self._color

    @property
    def direction(self) -> Tuple[float, float]:
        return (self._sx, self._sy)

    # --- Motion ---
    def update(self, delta: float) -> None:
        """Advance the ball by `delta` time units along both axes."""
        self._cy += self._speed * delta * self._sy
        self._cx += self._speed * delta * self._sx

    def reset(self, cx: float, cy: float) -> None:
        """Put the ball back at (cx, cy) keeping its current direction."""
        self._cx = float(cx)
        self._cy = float(cy)

    # --- Collisions ---
    def collides_with(self, target: Target) -> bool:
        """Return True if the ball overlaps the target rectangle.

        Strict inequalities: a ball whose edge exactly touches the target does
        not collide. This has no side effects.
        """
        half_w = self._width / 2
        half_h = self._height / 2
        return (
            self._cy - half_h < target.cy + target.height / 2
            and self._cy + half_h > target.cy - target.height / 2
            and self._cx - half_w < target.cx + target.width / 2
            and self._cx + half_w > target.cx - target.width / 2
        )

    def check_collision(self, target: Target) -> bool:
        """Detect a collision with a wall or player and bounce off it.

        Returns True when the ball overlaps the target, after the matching
        handler has updated the direction.
        """
        if not self.collides_with(target):
            return False
        if isinstance(target, Wall):
            self.on_wall_collision(target.wall_id)
        elif isinstance(target, Player):
            self.on_player_collision(target.player_id)
        else:
            raise TypeError(f"cannot collide with {type(target).__name__}")
        return True

    def on_wall_collision(self, wall_id: Union[WallId, str]) -> None:
        try:
            axis, sign = WALL_BOUNCE[WallId(wall_id)]
        except ValueError:
            logger.debug("ignoring collision with unknown wall %r", wall_id)
            return
        if axis == 0:
            self._sx = sign
        else:
            self._sy = sign

    def on_player_collision(self, player_id: Union[PlayerId, str]) -> None:
        # Hitting Player 1 (left) sends the ball right, anything else sends it left
        self._sx = 1.0 if player_id == PlayerId.PLAYER_1 else -1.0

    def draw(self, lib: Renderer) -> None:
        lib.set_color(self._color)
        lib.fill_rect(self._cx, self._cy, self._width, self._height)

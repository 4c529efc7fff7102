"""
Minimal CPU paddle controller.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from .ball import Ball
from .entities import Player, PlayerId


@dataclass
class CpuConfig:
    """
    CPU difficulty settings.

    - dead_zone: how close to the aim point before the paddle stops moving
    - reaction_distance: horizontal distance at which the CPU starts tracking
    - error_margin: aim error, drawn once per approach in [-error, +error]
    """

    dead_zone: float = 10.0
    reaction_distance: float = 300.0
    error_margin: float = 70.0  # larger than half a paddle, so the CPU can miss


class CpuController:
    """
    Follows the ball's center Y while the ball is coming toward the paddle.
    """

    def __init__(
        self,
        player: Player,
        ball: Ball,
        *,
        config: Optional[CpuConfig] = None,
        seed: Optional[int] = None,
    ):
        self.player = player
        self.ball = ball
        self.config = config or CpuConfig()
        self.rng = random.Random(seed)
        self._approaching = False
        self._aim_offset_y = 0.0

    def _new_offset(self) -> float:
        m = self.config.error_margin
        return self.rng.uniform(-m, m) if m > 0 else 0.0

    def _ball_incoming(self) -> bool:
        sx, _ = self.ball.direction
        if self.player.player_id == PlayerId.PLAYER_1:
            return sx < 0
        return sx > 0

    def compute_move(self) -> float:
        """
        Decide paddle move direction:
            -1.0 = up
            0.0 = stop
            +1.0 = down
        """
        if not self._ball_incoming():
            self._approaching = False
            return 0.0

        # New aim error once per approach
        if not self._approaching:
            self._approaching = True
            self._aim_offset_y = self._new_offset()

        if abs(self.player.cx - self.ball.cx) > self.config.reaction_distance:
            return 0.0

        diff = self.ball.cy + self._aim_offset_y - self.player.cy
        if abs(diff) < self.config.dead_zone:
            return 0.0
        return 1.0 if diff > 0 else -1.0

from __future__ import annotations

"""Per-player scoreboard."""

from typing import Union

from .entities import PlayerId
from .render import Align, BLUE, GREEN, Renderer


# Vertical position of the scoreboard text (pixels from the top)
SCORE_TEXT_Y = 70


class Score:
    def __init__(self, player_id: Union[PlayerId, str]):
        self.player_id = player_id
        self._score = 0

    @property
    def score(self) -> int:
        return self._score

    def inc(self) -> None:
        """Add one point."""
        self._score += 1

    def draw(self, lib: Renderer) -> None:
        # Player 1 is shown on the left in green, the other player on the right in blue
        if self.player_id == PlayerId.PLAYER_1:
            lib.set_color(GREEN)
            lib.draw_text(f"Placar P1: {self._score}", SCORE_TEXT_Y, Align.LEFT)
        else:
            lib.set_color(BLUE)
            lib.draw_text(f"Placar P2: {self._score}", SCORE_TEXT_Y, Align.RIGHT)

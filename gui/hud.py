from __future__ import annotations

"""HUD for hints, pause state and the match result."""

from dataclasses import dataclass
from typing import Optional

from pong.render import Align, Renderer

from . import constants as C


@dataclass
class HUDState:
    hint: str = "W/S: Player 1 | Up/Down: Player 2 | P: pause | R: restart | Esc: quit"
    paused: bool = False
    winner_name: Optional[str] = None


class HUD:
    def __init__(self, height: int):
        self.height = height
        self.state = HUDState()

    def update(self, **kwargs):
        # This updates values that the HUD will present
        for k, v in kwargs.items():
            if hasattr(self.state, k):
                setattr(self.state, k, v)

    def draw(self, lib: Renderer):
        lib.set_color(C.HUD_TEXT_COLOR)
        lib.draw_text(self.state.hint, self.height - 40, Align.CENTER)
        if self.state.winner_name:
            lib.set_color(C.BANNER_COLOR)
            lib.draw_text(f"Winner: {self.state.winner_name}", self.height // 2 - 60, Align.CENTER)
            lib.draw_text("Press R to play again", self.height // 2 + 60, Align.CENTER)
        elif self.state.paused:
            lib.set_color(C.BANNER_COLOR)
            lib.draw_text("PAUSED", self.height // 2 - 60, Align.CENTER)

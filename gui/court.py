from __future__ import annotations

"""Arena decorations drawn behind the game objects."""

from pong.engine import Game
from pong.render import Renderer

from . import constants as C


class Court:
    def __init__(self, game: Game):
        self.game = game

    def draw(self, lib: Renderer):
        # Dashed net down the middle of the playable band
        top, bottom = self.game.playable_band
        cx, _ = self.game.center
        lib.set_color(C.NET_COLOR)
        y = top
        while y < bottom:
            end = min(y + C.NET_DASH_PX, bottom)
            lib.draw_line(cx, y, cx, end)
            y = end + C.NET_GAP_PX

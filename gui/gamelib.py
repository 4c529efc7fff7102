from __future__ import annotations

"""Pygame implementation of the rendering primitives.

Rectangles are given by their center, like every entity in `pong`. Text is
placed on a horizontal line: left and right alignment keep a fixed margin from
the window edge, center alignment centers it.
"""

from typing import Optional

import pygame

from pong.render import Align, Color, WHITE

from . import constants as C


class GameLib:
    def __init__(self, surf: pygame.Surface, font: Optional[pygame.font.Font] = None):
        # Fonts are created lazily so drawing shapes works without pygame.font
        self.surf = surf
        self._font = font
        self.color: Color = WHITE

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.SysFont(C.FONT_NAME, C.FONT_SIZE)
        return self._font

    @property
    def width(self) -> int:
        return self.surf.get_width()

    @property
    def height(self) -> int:
        return self.surf.get_height()

    def set_color(self, color: Color) -> None:
        self.color = color

    def clear(self, color: Color = C.BACKGROUND_COLOR) -> None:
        self.surf.fill(color)

    def fill_rect(self, cx: float, cy: float, width: float, height: float) -> None:
        rect = pygame.Rect(0, 0, int(round(width)), int(round(height)))
        rect.center = (int(round(cx)), int(round(cy)))
        pygame.draw.rect(self.surf, self.color, rect)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        pygame.draw.line(self.surf, self.color, (int(x1), int(y1)), (int(x2), int(y2)), 2)

    def draw_text(self, text: str, y: float, align: Align = Align.LEFT) -> None:
        img = self.font.render(text, True, self.color)
        if align == Align.LEFT:
            x = C.TEXT_MARGIN_PX
        elif align == Align.RIGHT:
            x = self.width - C.TEXT_MARGIN_PX - img.get_width()
        else:
            x = (self.width - img.get_width()) // 2
        self.surf.blit(img, (x, int(y) - img.get_height() // 2))

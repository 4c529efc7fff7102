"""Core of the Pong game.

Ball kinematics and collisions, scoreboards, walls and paddles, and a
frame-step driver. Nothing here imports pygame; drawing goes through the
`pong.render.Renderer` protocol.
"""

from .ball import Ball
from .engine import Game, GameConfig
from .entities import Player, PlayerId, Wall, WallId
from .score import Score

__all__ = [
    "Ball",
    "Game",
    "GameConfig",
    "Player",
    "PlayerId",
    "Score",
    "Wall",
    "WallId",
]

"""Pygame GUI for Pong.

Contains the pygame implementation of the rendering primitives, court
decorations, a HUD for hints and results, and the application entry point
(`python -m gui.app`).
"""

__all__ = [
    "constants",
    "gamelib",
    "court",
    "hud",
    "app",
]

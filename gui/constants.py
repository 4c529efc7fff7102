from __future__ import annotations

"""Constants for the pygame front-end.

Arena geometry and game speeds live in `pong.engine.GameConfig`; this module
only holds what the window and its decorations need.
"""

# Rendering
DEFAULT_WINDOW = (800, 600)
TARGET_FPS = 60
WINDOW_TITLE = "Pong"

# Colors (R,G,B)
BACKGROUND_COLOR = (0, 0, 0)
NET_COLOR = (90, 90, 90)
HUD_TEXT_COLOR = (245, 245, 245)
BANNER_COLOR = (255, 221, 0)

# Text
FONT_NAME = "arial"
FONT_SIZE = 24
TEXT_MARGIN_PX = 40  # distance from the window edge for left/right aligned text

# Dashed center line
NET_DASH_PX = 16
NET_GAP_PX = 12

# Frames longer than this (ms) are clipped, e.g. after dragging the window
MAX_FRAME_MS = 50

import os
import sys

import pytest

# Headless pygame for the GUI tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Ensure the project root (containing `pong` and `gui`) is on sys.path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


class RecordingRenderer:
    """Renderer that records every primitive call instead of drawing."""

    def __init__(self):
        self.calls = []

    def set_color(self, color):
        self.calls.append(("set_color", color))

    def fill_rect(self, cx, cy, width, height):
        self.calls.append(("fill_rect", cx, cy, width, height))

    def draw_line(self, x1, y1, x2, y2):
        self.calls.append(("draw_line", x1, y1, x2, y2))

    def draw_text(self, text, y, align):
        self.calls.append(("draw_text", text, y, align))

    def named(self, name):
        return [c for c in self.calls if c[0] == name]


@pytest.fixture()
def lib():
    return RecordingRenderer()

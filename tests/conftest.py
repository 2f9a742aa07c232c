import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest
import logger


class RecordingSurface:
    """Drawing surface that keeps every call instead of painting pixels."""

    def __init__(self, width=64, height=48):
        self.width = width
        self.height = height
        self.calls = []
        self.lines = []

    def clear(self, color):
        self.calls.append(("clear", color))

    def set_stroke(self, color, width, cap="round"):
        self.calls.append(("set_stroke", color, width, cap))

    def draw_line(self, start, end):
        self.calls.append(("draw_line", start, end))
        self.lines.append((start, end))


@pytest.fixture
def recording_surface():
    return RecordingSurface()


@pytest.fixture(autouse=True)
def reset_logger_clock():
    logger.set_time_manager(None)
    yield
    logger.set_time_manager(None)

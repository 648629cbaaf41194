"""
Pytest configuration and shared fixtures for Pixel Painter tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

import pytest

from PP_Libs.HistoryLib.history_stack import HistoryStack
from PP_Libs.RasterLib.pixel_buffer import PixelBuffer
from PP_Libs.SessionLib.engine_config import EngineConfig
from PP_Libs.SessionLib.paint_session import PaintSession
from PP_Libs.ToolsLib.tool_controller import ColorState, ToolController

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)


class FakeClock:
    """Manually advanced monotonic clock in seconds."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def buffer():
    """A blank 32x32 white buffer."""
    return PixelBuffer(32, 32, WHITE)


@pytest.fixture
def small_buffer():
    """A blank 8x8 white buffer."""
    return PixelBuffer(8, 8, WHITE)


@pytest.fixture
def controller(small_buffer, clock):
    """
    Tool controller over an 8x8 buffer with its initial state captured.

    Foreground is red and background is white.
    """
    history = HistoryStack()
    history.capture(small_buffer.snapshot())
    colors = ColorState(foreground=RED, background=WHITE)
    return ToolController(small_buffer, history, colors, debounce_ms=500, clock=clock)


@pytest.fixture
def session(clock):
    """A 16x16 session on a white background with a fake clock."""
    config = EngineConfig(width=16, height=16, background="#ffffff", foreground="#ff0000")
    return PaintSession(config, clock=clock)

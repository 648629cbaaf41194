"""
Engine configuration for Pixel Painter.

Classes:
    EngineConfig: Canvas, history and stroke-capture settings
    ViewState: Zoom and grid settings the UI reads when rendering
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict

from PP_Libs.constants import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_DEBOUNCE_MS,
    DEFAULT_FOREGROUND_COLOR,
    DEFAULT_HISTORY_CAPACITY,
    DEFAULT_SHOW_GRID,
    DEFAULT_ZOOM,
    MAX_ZOOM,
    MIN_ZOOM,
)
from PP_Libs.RasterLib.color import normalize_color


@dataclass
class EngineConfig:
    """Configuration for a painting session.

    Attributes:
        width: Canvas width in pixels (default: 32)
        height: Canvas height in pixels (default: 32)
        background: Initial canvas and eraser color (default: white)
        foreground: Initial drawing color (default: black)
        history_capacity: Maximum undo entries kept (default: 50)
        debounce_ms: Quiet period before a pencil/eraser stroke in progress
                     is captured to history (default: 500)
    """
    width: int = DEFAULT_CANVAS_WIDTH
    height: int = DEFAULT_CANVAS_HEIGHT
    background: str = DEFAULT_BACKGROUND_COLOR
    foreground: str = DEFAULT_FOREGROUND_COLOR
    history_capacity: int = DEFAULT_HISTORY_CAPACITY
    debounce_ms: int = DEFAULT_DEBOUNCE_MS

    def validate(self) -> None:
        """
        Raises:
            ValueError: If any setting is out of range or a color is malformed
        """
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Canvas dimensions must be positive, got {self.width}x{self.height}")
        if self.history_capacity < 1:
            raise ValueError(f"history_capacity must be >= 1, got {self.history_capacity}")
        if self.debounce_ms < 0:
            raise ValueError(f"debounce_ms must be >= 0, got {self.debounce_ms}")
        normalize_color(self.background)
        normalize_color(self.foreground)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineConfig":
        """Create from dictionary, ignoring unknown keys."""
        filtered = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**filtered)


@dataclass
class ViewState:
    zoom: int = DEFAULT_ZOOM
    show_grid: bool = DEFAULT_SHOW_GRID

    def zoom_in(self) -> int:
        self.zoom = min(MAX_ZOOM, self.zoom + 1)
        return self.zoom

    def zoom_out(self) -> int:
        self.zoom = max(MIN_ZOOM, self.zoom - 1)
        return self.zoom

    def toggle_grid(self) -> bool:
        self.show_grid = not self.show_grid
        return self.show_grid

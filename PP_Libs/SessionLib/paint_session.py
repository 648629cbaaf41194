"""
Editing session for Pixel Painter.

A PaintSession owns the buffer, history, clipboard, colors, palette and
tool controller for one editing session and is the only object a UI needs
to talk to. Every call is synchronous and runs to completion.

Classes:
    PaintSession: Engine boundary used by UI collaborators
"""

import logging
import time
from typing import Any, Callable, List, Optional, Sequence

from PP_Libs.constants import DEFAULT_PALETTE
from PP_Libs.exceptions import EmptyClipboardError, NoHistoryError
from PP_Libs.ClipboardLib.clipboard import Clipboard, ClipboardBlock, Selection
from PP_Libs.HistoryLib.history_stack import HistoryStack
from PP_Libs.RasterLib.color import RgbColor, default_palette, normalize_color, rgb_to_hex
from PP_Libs.RasterLib.pixel_buffer import PixelBuffer
from PP_Libs.SessionLib import image_io
from PP_Libs.SessionLib.engine_config import EngineConfig, ViewState
from PP_Libs.ToolsLib.tool_controller import (
    ColorState,
    GestureResult,
    ToolController,
    ToolPreview,
)
from PP_Libs.ToolsLib.tools import Tool

logger = logging.getLogger(__name__)


class PaintSession:
    """
    One editing session over a fixed-size canvas.

    The initial blank canvas is captured to history on construction so undo
    can always return to it.

    Example:
        >>> session = PaintSession.initialize(32, 32, "#ffffff")
        >>> session.select_tool(Tool.LINE)
        >>> session.press(0, 0)
        >>> session.release(5, 0)
        >>> session.undo()
    """

    def __init__(self, config: Optional[EngineConfig] = None, clock: Callable[[], float] = time.monotonic):
        """
        Args:
            config: Session settings (default: EngineConfig())
            clock: Monotonic clock used for stroke debouncing
        """
        self.config = config or EngineConfig()
        self.config.validate()

        self.colors = ColorState(
            foreground=normalize_color(self.config.foreground),
            background=normalize_color(self.config.background),
        )
        self.buffer = PixelBuffer(self.config.width, self.config.height, self.colors.background)
        self.history = HistoryStack(self.config.history_capacity)
        self.clipboard = Clipboard()
        self.view = ViewState()
        self.controller = ToolController(
            self.buffer,
            self.history,
            self.colors,
            debounce_ms=self.config.debounce_ms,
            clock=clock,
        )
        self._palette: List[RgbColor] = default_palette()

        self.history.capture(self.buffer.snapshot())
        logger.info(f"Initialized {self.buffer.width}x{self.buffer.height} canvas")

    @classmethod
    def initialize(cls, width: int, height: int, background: Any = "#ffffff", **options: Any) -> "PaintSession":
        """Create a session with a canvas of the given size and background."""
        if not isinstance(background, str):
            background = rgb_to_hex(normalize_color(background))
        config = EngineConfig(width=width, height=height, background=background, **options)
        return cls(config)

    # ------------------------------------------------------------------
    # Tools and colors
    # ------------------------------------------------------------------

    @property
    def active_tool(self) -> Tool:
        return self.controller.active_tool

    def select_tool(self, tool: Any) -> Tool:
        self.controller.active_tool = tool
        return self.controller.active_tool

    @property
    def foreground(self) -> RgbColor:
        return self.colors.foreground

    @property
    def background(self) -> RgbColor:
        return self.colors.background

    def set_foreground(self, color: Any) -> None:
        self.colors.foreground = normalize_color(color)

    def set_background(self, color: Any) -> None:
        self.colors.background = normalize_color(color)

    def swap_colors(self) -> None:
        self.colors.swap()

    @property
    def palette(self) -> List[RgbColor]:
        return list(self._palette)

    def set_palette(self, colors: Sequence[Any]) -> None:
        """
        Replace the palette.

        Raises:
            ValueError: If the palette is empty or contains an invalid color
        """
        normalized = [normalize_color(color) for color in colors]
        if not normalized:
            raise ValueError("Palette must contain at least one color")
        self._palette = normalized

    def set_palette_color(self, index: int, color: Any) -> None:
        if not 0 <= index < len(self._palette):
            raise IndexError(f"Palette index {index} out of range 0-{len(self._palette) - 1}")
        self._palette[index] = normalize_color(color)

    def reset_palette(self) -> None:
        self._palette = [normalize_color(color) for color in DEFAULT_PALETTE]

    # ------------------------------------------------------------------
    # Gestures
    # ------------------------------------------------------------------

    def press(self, x: int, y: int) -> GestureResult:
        return self.controller.press(x, y)

    def move(self, x: int, y: int) -> Optional[ToolPreview]:
        return self.controller.move(x, y)

    def release(self, x: int, y: int) -> GestureResult:
        return self.controller.release(x, y)

    def leave(self) -> Optional[GestureResult]:
        return self.controller.leave()

    def poll(self, now: Optional[float] = None) -> bool:
        return self.controller.poll(now)

    @property
    def selection(self) -> Optional[Selection]:
        return self.controller.selection

    def set_selection(self, selection: Optional[Selection]) -> None:
        self.controller.selection = selection

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def capture(self) -> None:
        self.history.capture(self.buffer.snapshot())

    def undo(self) -> None:
        """
        Restore the previous history entry.

        Raises:
            NoHistoryError: If already at the oldest entry; the buffer is untouched
        """
        self.controller.leave()
        entry = self.history.undo()
        self.buffer.restore(entry.snapshot)

    def redo(self) -> None:
        """
        Restore the next history entry.

        Raises:
            NoHistoryError: If already at the newest entry; the buffer is untouched
        """
        self.controller.leave()
        entry = self.history.redo()
        self.buffer.restore(entry.snapshot)

    def try_undo(self) -> bool:
        """Undo if possible. Returns False at the history boundary."""
        try:
            self.undo()
        except NoHistoryError:
            return False
        return True

    def try_redo(self) -> bool:
        try:
            self.redo()
        except NoHistoryError:
            return False
        return True

    def can_undo(self) -> bool:
        return self.history.can_undo()

    def can_redo(self) -> bool:
        return self.history.can_redo()

    # ------------------------------------------------------------------
    # Canvas operations
    # ------------------------------------------------------------------

    def clear_canvas(self) -> None:
        """Fill the canvas with the background color and capture history."""
        self.controller.leave()
        self.buffer.fill_all(self.colors.background)
        self.capture()
        logger.debug(f"Canvas cleared to {rgb_to_hex(self.colors.background)}")

    def copy_selection(self) -> ClipboardBlock:
        """
        Copy the current selection to the clipboard.

        Raises:
            EmptySelectionError: If no selection is active
        """
        return self.clipboard.copy(self.buffer, self.selection)

    def paste(self, x: int, y: int) -> int:
        """
        Paste the clipboard with its top-left at (x, y).

        History is captured only when at least one pixel was written.

        Raises:
            EmptyClipboardError: If nothing has been copied
        """
        if not self.clipboard.has_content():
            raise EmptyClipboardError("Clipboard is empty")
        self.controller.leave()
        written = self.clipboard.paste(self.buffer, (x, y))
        if written:
            self.capture()
        return written

    # ------------------------------------------------------------------
    # Import / export
    # ------------------------------------------------------------------

    def import_pixels(self, pixels: Sequence[Any], width: int, height: int) -> None:
        """
        Replace the canvas with raw row-major RGB pixels and capture history.

        Raises:
            DimensionMismatchError: If width/height differ from the canvas
            ValueError: If the pixel data is malformed
        """
        array = self.buffer.validate_pixels(pixels, width, height)
        self.controller.leave()
        self.buffer.load_array(array)
        self.capture()
        logger.info(f"Imported {width}x{height} pixels")

    def import_image(self, image: Any) -> None:
        """
        Replace the canvas with a Pillow image of exactly canvas size.

        Use ``image_io.fit_image_to_canvas`` first for other sizes.

        Raises:
            DimensionMismatchError: If the image size differs from the canvas
        """
        array = self.buffer.validate_array(
            image_io.image_to_array(image, matte=self.colors.background)
        )
        self.controller.leave()
        self.buffer.load_array(array)
        self.capture()
        logger.info(f"Imported {image.size[0]}x{image.size[1]} image")

    def export_pixels(self) -> List[RgbColor]:
        return self.buffer.export_pixels()

    def export_image(self) -> Any:
        return image_io.buffer_to_image(self.buffer)

    def save_png(self, path: Any) -> Any:
        saved = image_io.save_png(self.buffer, path)
        logger.info(f"Exported canvas to {saved}")
        return saved

    def serialize_snapshot(self) -> str:
        """Encode the current canvas as a PNG data URL."""
        return image_io.encode_data_url(self.buffer)

    def restore_snapshot(self, blob: str) -> None:
        """
        Replace the canvas with a serialized snapshot.

        The blob is decoded and checked before the buffer is touched, then
        the restored state is captured to history.

        Raises:
            ValueError: If the blob is not a PNG data URL
            DimensionMismatchError: If the snapshot size differs from the canvas
        """
        array = self.buffer.validate_array(image_io.decode_data_url(blob))
        self.controller.leave()
        self.buffer.load_array(array)
        self.capture()

    def reset_history(self) -> None:
        """Drop all history and start over from the current canvas."""
        self.history.clear()
        self.capture()

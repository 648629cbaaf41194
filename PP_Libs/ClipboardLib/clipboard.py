"""
Rectangular selection and clipboard for Pixel Painter.

Classes:
    Selection: Normalized inclusive rectangle on the canvas
    ClipboardBlock: Owned copy of a selection's pixels
    Clipboard: Holds the last copied block and pastes it back

Pasting clips any part of the block that falls outside the canvas.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

from PP_Libs.exceptions import EmptyClipboardError, EmptySelectionError, OutOfBoundsError
from PP_Libs.RasterLib.pixel_buffer import PixelBuffer, Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selection:
    """Axis-aligned inclusive rectangle with left <= right and top <= bottom."""
    left: int
    top: int
    right: int
    bottom: int

    def __post_init__(self):
        if self.left > self.right or self.top > self.bottom:
            raise ValueError(
                f"Selection corners are not normalized: "
                f"({self.left}, {self.top})-({self.right}, {self.bottom})"
            )

    @classmethod
    def from_points(cls, start: Any, end: Any) -> "Selection":
        """Build a selection from two opposite corners in any order."""
        x0, y0 = int(start[0]), int(start[1])
        x1, y1 = int(end[0]), int(end[1])
        return cls(min(x0, x1), min(y0, y1), max(x0, x1), max(y0, y1))

    @property
    def width(self) -> int:
        return self.right - self.left + 1

    @property
    def height(self) -> int:
        return self.bottom - self.top + 1

    @property
    def top_left(self) -> Point:
        return Point(self.left, self.top)

    @property
    def bottom_right(self) -> Point:
        return Point(self.right, self.bottom)

    def contains(self, x: int, y: int) -> bool:
        return self.left <= x <= self.right and self.top <= y <= self.bottom

    def clipped_to(self, width: int, height: int) -> Optional["Selection"]:
        """Intersect with a width x height canvas; None if nothing is left."""
        left = max(0, self.left)
        top = max(0, self.top)
        right = min(width - 1, self.right)
        bottom = min(height - 1, self.bottom)
        if left > right or top > bottom:
            return None
        return Selection(left, top, right, bottom)


@dataclass(frozen=True)
class ClipboardBlock:
    """Dense pixel block copied out of a buffer.

    Attributes:
        width: Block width in pixels
        height: Block height in pixels
        data: Packed RGB bytes, row-major
    """
    width: int
    height: int
    data: bytes

    def to_array(self) -> np.ndarray:
        array = np.frombuffer(self.data, dtype=np.uint8)
        return array.reshape((self.height, self.width, 3)).copy()

    def get(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBoundsError(x, y, self.width, self.height)
        offset = (y * self.width + x) * 3
        return tuple(self.data[offset:offset + 3])


class Clipboard:
    """Holds at most one copied block for the editing session."""

    def __init__(self):
        self._block: Optional[ClipboardBlock] = None

    @property
    def block(self) -> Optional[ClipboardBlock]:
        return self._block

    def has_content(self) -> bool:
        return self._block is not None

    def copy(self, buffer: PixelBuffer, selection: Optional[Selection]) -> ClipboardBlock:
        """
        Copy the pixels under a selection.

        Parts of the selection outside the canvas are ignored.

        Args:
            buffer: Source buffer
            selection: Region to copy

        Returns:
            The copied block, which replaces any previous clipboard content

        Raises:
            EmptySelectionError: If there is no selection or it lies fully off canvas
        """
        if selection is None:
            raise EmptySelectionError("No active selection to copy")

        region = selection.clipped_to(buffer.width, buffer.height)
        if region is None:
            raise EmptySelectionError(f"Selection {selection} does not overlap the canvas")

        pixels = buffer.to_array()[region.top:region.bottom + 1, region.left:region.right + 1]
        self._block = ClipboardBlock(region.width, region.height, np.ascontiguousarray(pixels).tobytes())
        logger.debug(f"Copied {region.width}x{region.height} block at ({region.left}, {region.top})")
        return self._block

    def paste(self, buffer: PixelBuffer, destination: Any) -> int:
        """
        Write the clipboard block with its top-left at ``destination``.

        Args:
            buffer: Target buffer
            destination: (x, y) of the block's top-left corner, may be off canvas

        Returns:
            Number of pixels written after clipping

        Raises:
            EmptyClipboardError: If nothing has been copied
        """
        if self._block is None:
            raise EmptyClipboardError("Clipboard is empty")

        dest_x, dest_y = int(destination[0]), int(destination[1])
        target = Selection(
            dest_x, dest_y,
            dest_x + self._block.width - 1, dest_y + self._block.height - 1,
        ).clipped_to(buffer.width, buffer.height)
        if target is None:
            return 0

        block = self._block.to_array()
        src = block[
            target.top - dest_y:target.bottom - dest_y + 1,
            target.left - dest_x:target.right - dest_x + 1,
        ]
        pixels = buffer.to_array()
        pixels[target.top:target.bottom + 1, target.left:target.right + 1] = src
        buffer.load_array(pixels)

        written = target.width * target.height
        logger.debug(f"Pasted {written} pixels at ({dest_x}, {dest_y})")
        return written

    def clear(self) -> None:
        self._block = None

"""
Pixel buffer for Pixel Painter.

The buffer owns the canvas pixels as a numpy ``uint8`` array of shape
(height, width, 3), row-major with the origin at the top-left corner.
Every coordinate access is bounds-checked; the buffer never clamps.

Classes:
    Point: Integer (x, y) pixel coordinate
    BufferSnapshot: Immutable copy of buffer contents
    PixelBuffer: The mutable canvas pixel grid
"""

from dataclasses import dataclass
from typing import Any, List, NamedTuple, Sequence

import numpy as np

from PP_Libs.constants import DEFAULT_CANVAS_WIDTH, DEFAULT_CANVAS_HEIGHT
from PP_Libs.exceptions import DimensionMismatchError, OutOfBoundsError
from PP_Libs.RasterLib.color import RgbColor, normalize_color, validate_rgb


class Point(NamedTuple):
    x: int
    y: int


@dataclass(frozen=True)
class BufferSnapshot:
    """Immutable full copy of a buffer's pixels.

    Attributes:
        width: Canvas width in pixels
        height: Canvas height in pixels
        data: Packed RGB bytes, row-major, 3 bytes per pixel
    """
    width: int
    height: int
    data: bytes

    @property
    def size(self):
        return (self.width, self.height)

    def to_array(self) -> np.ndarray:
        """Return a writable (height, width, 3) array copy of the pixels."""
        array = np.frombuffer(self.data, dtype=np.uint8)
        return array.reshape((self.height, self.width, 3)).copy()

    def get(self, x: int, y: int) -> RgbColor:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBoundsError(x, y, self.width, self.height)
        offset = (y * self.width + x) * 3
        return tuple(self.data[offset:offset + 3])


class PixelBuffer:
    """
    Fixed-size RGB pixel grid.

    Example:
        >>> buffer = PixelBuffer(32, 32, (255, 255, 255))
        >>> buffer.set(3, 4, (255, 0, 0))
        >>> buffer.get(3, 4)
        (255, 0, 0)
    """

    def __init__(
        self,
        width: int = DEFAULT_CANVAS_WIDTH,
        height: int = DEFAULT_CANVAS_HEIGHT,
        background: Any = (255, 255, 255),
    ):
        """
        Create a buffer filled with the background color.

        Args:
            width: Canvas width in pixels (>= 1)
            height: Canvas height in pixels (>= 1)
            background: Initial fill color (hex string or RGB tuple)

        Raises:
            ValueError: If a dimension is not positive or the color is invalid
        """
        width = int(width)
        height = int(height)
        if width < 1 or height < 1:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self._pixels = np.empty((height, width, 3), dtype=np.uint8)
        self.fill_all(background)

    @property
    def size(self):
        return (self.width, self.height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def clamp(self, x: int, y: int) -> Point:
        """Clamp a coordinate to the nearest in-canvas pixel."""
        return Point(
            max(0, min(self.width - 1, int(x))),
            max(0, min(self.height - 1, int(y))),
        )

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)

    def get(self, x: int, y: int) -> RgbColor:
        self._check_bounds(x, y)
        r, g, b = self._pixels[y, x]
        return (int(r), int(g), int(b))

    def set(self, x: int, y: int, color: Any) -> None:
        """
        Write one pixel.

        Raises:
            OutOfBoundsError: If (x, y) lies outside the canvas
            ValueError: If the color is not a valid hex string or RGB triple
        """
        self._check_bounds(x, y)
        self._pixels[y, x] = normalize_color(color)

    def fill_all(self, color: Any) -> None:
        """Replace every pixel with a single color."""
        self._pixels[:, :] = normalize_color(color)

    def fill_region(self, left: int, top: int, right: int, bottom: int, color: Any) -> None:
        """
        Fill the inclusive rectangle (left, top)-(right, bottom).

        Corners may be given in any order. Both corners must be in bounds.

        Raises:
            OutOfBoundsError: If either corner lies outside the canvas
        """
        self._check_bounds(left, top)
        self._check_bounds(right, bottom)
        x0, x1 = sorted((left, right))
        y0, y1 = sorted((top, bottom))
        self._pixels[y0:y1 + 1, x0:x1 + 1] = normalize_color(color)

    def snapshot(self) -> BufferSnapshot:
        return BufferSnapshot(self.width, self.height, self._pixels.tobytes())

    def restore(self, snapshot: BufferSnapshot) -> None:
        """
        Replace the entire buffer contents with a snapshot.

        Raises:
            DimensionMismatchError: If the snapshot size differs from the buffer
        """
        if snapshot.size != self.size:
            raise DimensionMismatchError(self.size, snapshot.size)
        self._pixels[:, :] = snapshot.to_array()

    def to_array(self) -> np.ndarray:
        return self._pixels.copy()

    def validate_array(self, array: Any) -> np.ndarray:
        """
        Check a (height, width, 3) array against this buffer without loading it.

        Returns:
            The pixels as a uint8 array ready for ``load_array``

        Raises:
            DimensionMismatchError: If the array size differs from the buffer
            ValueError: If the array is not RGB or has values outside 0-255
        """
        source = np.asarray(array)
        if source.ndim != 3 or source.shape[2] != 3:
            raise ValueError(f"Expected an RGB array of shape (height, width, 3), got {source.shape}")

        actual = (source.shape[1], source.shape[0])
        if actual != self.size:
            raise DimensionMismatchError(self.size, actual)

        if source.size and (source.min() < 0 or source.max() > 255):
            raise ValueError("Pixel channel values must be within 0-255")

        return source.astype(np.uint8)

    def validate_pixels(self, pixels: Sequence[Any], width: int, height: int) -> np.ndarray:
        """
        Decode a row-major list of RGB colors into an array for this buffer.

        Args:
            pixels: width * height RGB tuples in row-major order
            width: Width of the source data
            height: Height of the source data

        Raises:
            DimensionMismatchError: If (width, height) differs from the buffer
            ValueError: If the pixel count or any color is invalid
        """
        if (int(width), int(height)) != self.size:
            raise DimensionMismatchError(self.size, (width, height))

        pixels = list(pixels)
        expected_count = self.width * self.height
        if len(pixels) != expected_count:
            raise ValueError(f"Expected {expected_count} pixels, got {len(pixels)}")

        colors = [validate_rgb(color) for color in pixels]
        return np.array(colors, dtype=np.uint8).reshape((self.height, self.width, 3))

    def load_array(self, array: Any) -> None:
        """Replace the buffer contents from a (height, width, 3) array."""
        self._pixels[:, :] = self.validate_array(array)

    def load_pixels(self, pixels: Sequence[Any], width: int, height: int) -> None:
        """
        Replace the buffer contents from a row-major list of RGB colors.

        The data is fully validated before the buffer is touched.
        """
        self._pixels[:, :] = self.validate_pixels(pixels, width, height)

    def export_pixels(self) -> List[RgbColor]:
        """Return all pixels as a row-major list of RGB tuples."""
        return [tuple(int(c) for c in pixel) for pixel in self._pixels.reshape(-1, 3)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self.size == other.size and np.array_equal(self._pixels, other._pixels)

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height})"

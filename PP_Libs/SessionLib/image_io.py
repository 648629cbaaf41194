"""
Image conversion and file I/O for Pixel Painter.

This module is the boundary between the engine's PixelBuffer and Pillow
images, PNG files and PNG data URLs used for session snapshots.

Functions:
    buffer_to_image: Render a PixelBuffer into a Pillow RGB image
    image_to_array: Flatten a Pillow image into an RGB numpy array
    fit_image_to_canvas: Resample an image to canvas size (nearest neighbour)
    load_image: Open an image file from disk
    save_png: Write a PixelBuffer to a PNG file
    encode_data_url: Encode pixels as a 'data:image/png;base64,...' string
    decode_data_url: Decode a PNG data URL back into an RGB array
"""

import base64
import binascii
import io
from pathlib import Path
from typing import Any

import numpy as np
from PIL import Image, UnidentifiedImageError

from PP_Libs.constants import DATA_URL_PREFIX, DEFAULT_EXPORT_FORMAT
from PP_Libs.RasterLib.color import normalize_color
from PP_Libs.RasterLib.pixel_buffer import PixelBuffer


def buffer_to_image(buffer: PixelBuffer) -> Any:
    """
    Render a buffer into a Pillow image.

    Args:
        buffer: Source pixel buffer

    Returns:
        A new PIL Image in RGB mode with the buffer's dimensions
    """
    return Image.fromarray(buffer.to_array())


def image_to_array(image: Any, matte: Any = (255, 255, 255)) -> np.ndarray:
    """
    Convert a Pillow image into a (height, width, 3) uint8 array.

    Transparent pixels are composited over ``matte`` since the engine has
    no alpha channel.

    Args:
        image: PIL Image in any mode
        matte: Color placed behind transparent pixels (default: white)

    Returns:
        RGB numpy array

    Raises:
        TypeError: If image is not a PIL Image
    """
    if not hasattr(image, "mode"):
        raise TypeError(f"Expected PIL Image, got {type(image)}")

    if image.mode in ("RGBA", "LA", "PA") or (image.mode == "P" and "transparency" in image.info):
        rgba = image.convert("RGBA")
        backdrop = Image.new("RGBA", rgba.size, normalize_color(matte) + (255,))
        rgb = Image.alpha_composite(backdrop, rgba).convert("RGB")
    else:
        rgb = image.convert("RGB")

    return np.array(rgb, dtype=np.uint8)


def fit_image_to_canvas(image: Any, width: int, height: int) -> Any:
    """
    Stretch an image onto a width x height canvas.

    Nearest-neighbour resampling keeps hard pixel edges.

    Returns:
        The resized PIL Image (the same object if already the right size)
    """
    if not hasattr(image, "resize"):
        raise TypeError(f"Expected PIL Image, got {type(image)}")

    if image.size == (width, height):
        return image
    return image.resize((width, height), Image.Resampling.NEAREST)


def load_image(path: Path) -> Any:
    """
    Open an image file and load its pixels.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the path is not a file or not a readable image
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Image file not found: {path}")
    if not path.is_file():
        raise ValueError(f"Path is not a file: {path}")

    try:
        with Image.open(path) as image:
            image.load()
            return image.copy()
    except UnidentifiedImageError as e:
        raise ValueError(f"Not a readable image: {path}") from e


def save_png(buffer: PixelBuffer, path: Path) -> Path:
    """
    Save the buffer at its native resolution as a PNG file.

    Args:
        buffer: Source pixel buffer
        path: Destination file path

    Returns:
        The path written

    Raises:
        OSError: If the destination directory does not exist or is not writable
    """
    path = Path(path)
    if not path.parent.exists():
        raise OSError(f"Output directory does not exist: {path.parent}")

    buffer_to_image(buffer).save(path, format=DEFAULT_EXPORT_FORMAT)
    return path


def encode_data_url(buffer: PixelBuffer) -> str:
    stream = io.BytesIO()
    buffer_to_image(buffer).save(stream, format="PNG")
    return DATA_URL_PREFIX + base64.b64encode(stream.getvalue()).decode("ascii")


def decode_data_url(blob: str) -> np.ndarray:
    """
    Decode a PNG data URL produced by ``encode_data_url``.

    Returns:
        RGB numpy array of shape (height, width, 3)

    Raises:
        ValueError: If the blob is not a base64 PNG data URL
    """
    if not isinstance(blob, str) or not blob.startswith(DATA_URL_PREFIX):
        raise ValueError("Snapshot is not a PNG data URL")

    try:
        raw = base64.b64decode(blob[len(DATA_URL_PREFIX):], validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Snapshot data is not valid base64: {e}") from e

    try:
        with Image.open(io.BytesIO(raw)) as image:
            return image_to_array(image)
    except UnidentifiedImageError as e:
        raise ValueError("Snapshot data is not a PNG image") from e

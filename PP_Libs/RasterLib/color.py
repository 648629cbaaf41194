"""
Color model for Pixel Painter.

Colors are plain RGB tuples of three 8-bit channels. The engine has no
alpha channel; imported images are flattened to RGB before they reach the
buffer.

Type Aliases:
    RgbColor: A tuple of 3 integers representing RGB color values (0-255)

Functions:
    hex_to_rgb: Parse a '#RRGGBB' string into an RgbColor
    rgb_to_hex: Format an RgbColor as a lower-case '#rrggbb' string
    normalize_color: Accept either form and return a validated RgbColor
    default_palette: The 16-color VGA palette as RgbColor values
"""

import re
from typing import Any, List, Tuple

from PP_Libs.constants import DEFAULT_PALETTE

RgbColor = Tuple[int, int, int]

HEX_COLOR_PATTERN = re.compile(r'^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$', re.IGNORECASE)


def hex_to_rgb(value: str) -> RgbColor:
    """
    Parse a hex color string.

    Args:
        value: Color as 'RRGGBB' with an optional leading '#'

    Returns:
        The (r, g, b) tuple

    Raises:
        ValueError: If the string is not a 6-digit hex color
    """
    match = HEX_COLOR_PATTERN.match(str(value).strip())
    if match is None:
        raise ValueError(f"Invalid hex color: {value!r}")
    return tuple(int(group, 16) for group in match.groups())


def rgb_to_hex(color: RgbColor) -> str:
    r, g, b = validate_rgb(color)
    return f"#{r:02x}{g:02x}{b:02x}"


def validate_rgb(color: Any) -> RgbColor:
    """
    Validate an RGB sequence and return it as a tuple of ints.

    Raises:
        ValueError: If the color does not have exactly 3 channels in 0-255
    """
    try:
        channels = tuple(int(channel) for channel in color)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid RGB color: {color!r}")

    if len(channels) != 3:
        raise ValueError(f"RGB color must have 3 channels, got {len(channels)}")

    for channel in channels:
        if not 0 <= channel <= 255:
            raise ValueError(f"Color channel out of range 0-255: {channel}")

    return channels


def normalize_color(color: Any) -> RgbColor:
    """Accept a hex string or an RGB sequence and return an RgbColor."""
    if isinstance(color, str):
        return hex_to_rgb(color)
    return validate_rgb(color)


def default_palette() -> List[RgbColor]:
    return [hex_to_rgb(value) for value in DEFAULT_PALETTE]

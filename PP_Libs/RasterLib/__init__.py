"""
RasterLib - Pixel buffer and rasterization

This module provides the canvas pixel grid, the RGB color model and the
shape rasterization algorithms for the Pixel Painter engine.
"""

from PP_Libs.RasterLib.color import (
    RgbColor,
    hex_to_rgb,
    rgb_to_hex,
    normalize_color,
    default_palette,
)
from PP_Libs.RasterLib.pixel_buffer import Point, BufferSnapshot, PixelBuffer
from PP_Libs.RasterLib.rasterizer import (
    line_points,
    draw_line,
    rectangle_points,
    draw_rectangle,
    circle_points,
    draw_circle,
    flood_fill,
)

__all__ = [
    "RgbColor",
    "hex_to_rgb",
    "rgb_to_hex",
    "normalize_color",
    "default_palette",
    "Point",
    "BufferSnapshot",
    "PixelBuffer",
    "line_points",
    "draw_line",
    "rectangle_points",
    "draw_rectangle",
    "circle_points",
    "draw_circle",
    "flood_fill",
]

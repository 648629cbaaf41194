"""
Shape rasterization for Pixel Painter.

Stateless algorithms that compute which pixels a line, rectangle or circle
covers, plus an exact-color flood fill. Each shape has two forms:

- ``*_points``: pure functions returning the covered pixels, used for
  previews while a gesture is still in progress
- ``draw_*``: write the covered pixels into a PixelBuffer

Shapes drop pixels that fall outside the canvas; clipping near the edges
is expected and never reported as an error.

Functions:
    line_points / draw_line: Bresenham line
    rectangle_points / draw_rectangle: Outline or filled rectangle
    circle_points / draw_circle: Midpoint outline or filled disk
    flood_fill: 4-connected fill over exact color equality
"""

import logging
from typing import Any, List, Optional

import numpy as np

from PP_Libs.RasterLib.color import normalize_color
from PP_Libs.RasterLib.pixel_buffer import PixelBuffer, Point

logger = logging.getLogger(__name__)


# ============================================================================
# Line
# ============================================================================

def line_points(x0: int, y0: int, x1: int, y1: int) -> List[Point]:
    """
    Compute the 8-connected Bresenham path between two points.

    The path includes both endpoints and has no gaps. A zero-length line
    yields a single pixel. The path is always traced from the
    lexicographically smaller endpoint so that swapping the endpoints
    covers the same pixels.

    Args:
        x0, y0: Start point
        x1, y1: End point

    Returns:
        Points in order from start to end
    """
    if (x1, y1) < (x0, y0):
        return list(reversed(_bresenham(x1, y1, x0, y0)))
    return _bresenham(x0, y0, x1, y1)


def _bresenham(x0: int, y0: int, x1: int, y1: int) -> List[Point]:
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy

    points = []
    x, y = x0, y0
    while True:
        points.append(Point(x, y))
        if x == x1 and y == y1:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy
    return points


def draw_line(buffer: PixelBuffer, x0: int, y0: int, x1: int, y1: int, color: Any) -> int:
    """Draw a Bresenham line. Returns the number of pixels written."""
    return _plot(buffer, line_points(x0, y0, x1, y1), color)


# ============================================================================
# Rectangle
# ============================================================================

def rectangle_points(x0: int, y0: int, x1: int, y1: int, filled: bool = False) -> List[Point]:
    """
    Compute the pixels of a rectangle given two opposite corners.

    Args:
        x0, y0: First corner
        x1, y1: Opposite corner
        filled: Cover the whole closed rectangle instead of its border

    Returns:
        Covered points, each listed once
    """
    left, right = min(x0, x1), max(x0, x1)
    top, bottom = min(y0, y1), max(y0, y1)

    if filled:
        return [Point(x, y) for y in range(top, bottom + 1) for x in range(left, right + 1)]

    points = []
    for x in range(left, right + 1):
        points.append(Point(x, top))
        if bottom != top:
            points.append(Point(x, bottom))
    for y in range(top + 1, bottom):
        points.append(Point(left, y))
        if right != left:
            points.append(Point(right, y))
    return points


def draw_rectangle(
    buffer: PixelBuffer,
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    color: Any,
    filled: bool = False,
) -> int:
    return _plot(buffer, rectangle_points(x0, y0, x1, y1, filled), color)


# ============================================================================
# Circle
# ============================================================================

def circle_points(cx: int, cy: int, radius: int, filled: bool = False) -> List[Point]:
    """
    Compute the pixels of a circle.

    Filled mode keeps every offset in the bounding box with
    ``x*x + y*y <= r*r``. Outline mode uses the midpoint circle algorithm
    with decision variable ``d = 3 - 2r``.

    Args:
        cx, cy: Center point
        radius: Integer radius (>= 0)
        filled: Produce a filled disk instead of an outline

    Returns:
        Covered points without duplicates, in plotting order

    Raises:
        ValueError: If radius is negative
    """
    radius = int(radius)
    if radius < 0:
        raise ValueError(f"radius must be >= 0, got {radius}")

    if filled:
        r2 = radius * radius
        return [
            Point(cx + x, cy + y)
            for y in range(-radius, radius + 1)
            for x in range(-radius, radius + 1)
            if x * x + y * y <= r2
        ]

    seen = set()
    points = []

    def plot_octants(x: int, y: int) -> None:
        for px, py in (
            (cx + x, cy + y), (cx - x, cy + y),
            (cx + x, cy - y), (cx - x, cy - y),
            (cx + y, cy + x), (cx - y, cy + x),
            (cx + y, cy - x), (cx - y, cy - x),
        ):
            if (px, py) not in seen:
                seen.add((px, py))
                points.append(Point(px, py))

    x = 0
    y = radius
    d = 3 - 2 * radius
    plot_octants(x, y)
    while y >= x:
        x += 1
        if d > 0:
            y -= 1
            d = d + 4 * (x - y) + 10
        else:
            d = d + 4 * x + 6
        plot_octants(x, y)
    return points


def draw_circle(
    buffer: PixelBuffer,
    cx: int,
    cy: int,
    radius: int,
    color: Any,
    filled: bool = False,
) -> int:
    return _plot(buffer, circle_points(cx, cy, radius, filled), color)


# ============================================================================
# Flood Fill
# ============================================================================

def flood_fill(
    buffer: PixelBuffer,
    x: int,
    y: int,
    fill_color: Any,
    target_color: Optional[Any] = None,
) -> int:
    """
    Fill the 4-connected region of ``target_color`` containing (x, y).

    Uses an explicit stack so memory is bounded by the canvas area rather
    than the call depth. Matching is exact; near-target colors are left
    untouched.

    Args:
        buffer: Buffer to fill in place
        x, y: Seed point
        fill_color: Replacement color
        target_color: Color to replace (default: the color at the seed)

    Returns:
        Number of pixels changed (0 when target equals fill color)

    Raises:
        OutOfBoundsError: If the seed lies outside the canvas
    """
    seed_color = buffer.get(x, y)
    fill = normalize_color(fill_color)
    target = seed_color if target_color is None else normalize_color(target_color)

    if target == fill:
        return 0

    # Work on nested lists; per-pixel numpy indexing is far slower
    width, height = buffer.width, buffer.height
    pixels = buffer.to_array().tolist()
    target_pixel = list(target)
    fill_pixel = list(fill)

    changed = 0
    stack = [(x, y)]
    while stack:
        px, py = stack.pop()
        if not (0 <= px < width and 0 <= py < height):
            continue
        if pixels[py][px] != target_pixel:
            continue

        pixels[py][px] = fill_pixel
        changed += 1
        stack.append((px + 1, py))
        stack.append((px - 1, py))
        stack.append((px, py + 1))
        stack.append((px, py - 1))

    if changed:
        buffer.load_array(np.array(pixels, dtype=np.uint8))

    logger.debug(f"Flood fill at ({x}, {y}) changed {changed} pixels")
    return changed


def _plot(buffer: PixelBuffer, points: List[Point], color: Any) -> int:
    rgb = normalize_color(color)
    written = 0
    for px, py in points:
        if buffer.in_bounds(px, py):
            buffer.set(px, py, rgb)
            written += 1
    return written

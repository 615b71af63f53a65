"""Integer rasterization primitives.

Functions here are stateless and draw only through :meth:`Canvas.set_pixel`,
relying on the canvas to drop out-of-range writes. They never clip.
"""

import math
from typing import List, Tuple

from skyline_art.canvas import Canvas
from skyline_art.types import Color

Vertex = Tuple[int, int]

# A square inscribed in a circle of radius 1 has a side of length sqrt(2).
SQRT2 = 1.4142135623


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (towards +inf)."""
    return math.floor(value + 0.5)


def draw_line(
    canvas: Canvas, x1: int, y1: int, x2: int, y2: int, color: Color
) -> None:
    """Draw a line from ``(x1, y1)`` to ``(x2, y2)`` using Bresenham's algorithm.

    Both endpoints are included; a zero-length line plots a single pixel.
    """
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy

    while True:
        canvas.set_pixel(x1, y1, color)
        if x1 == x2 and y1 == y2:
            break
        e2 = err * 2
        if e2 > -dy:
            err -= dy
            x1 += sx
        if e2 < dx:
            err += dx
            y1 += sy


def square_vertices(cx: int, cy: int, size: float, angle: float) -> List[Vertex]:
    """Return the four corners of a square of side ``size`` rotated by ``angle``.

    The parametric circle ``(sin(k), cos(k))`` visits the corners of an
    inscribed square at ``k = pi/4 + angle`` and every further ``pi/2``, so the
    corners are found on a circle scaled by ``size / sqrt(2)`` and translated
    to ``(cx, cy)``. Coordinates are rounded to the nearest pixel.
    """
    radius = round_half_up(size / SQRT2)
    k = math.pi / 4 + angle
    vertices: List[Vertex] = []
    for _ in range(4):
        vertices.append(
            (
                round_half_up(math.sin(k) * radius + cx),
                round_half_up(math.cos(k) * radius + cy),
            )
        )
        k += math.pi / 2
    return vertices


def draw_square(
    canvas: Canvas, cx: int, cy: int, size: float, angle: float, color: Color
) -> None:
    """Draw the outline of a square centered at ``(cx, cy)``.

    Arguments:
        canvas: Target canvas.
        cx: Center column.
        cy: Center row.
        size: Side length in pixels.
        angle: Rotation in radians.
        color: Palette index for the outline.
    """
    vertices = square_vertices(cx, cy, size, angle)
    for j in range(4):
        x1, y1 = vertices[j]
        x2, y2 = vertices[(j + 1) % 4]
        draw_line(canvas, x1, y1, x2, y2, color)

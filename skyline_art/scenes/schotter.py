"""Georg Nees' "Schotter" (1968), redrawn on a canvas.

A grid of square outlines where the first two rows are perfectly aligned and
every following row is rotated and displaced a little more at random, as if
the squares were gravel sliding down the page. The canvas is meant for the
braille renderer, so it is twice as wide as the requested console columns.
"""

import logging

from skyline_art.canvas import Canvas, create_canvas
from skyline_art.raster import draw_square
from skyline_art.random_source import rand_unit
from skyline_art.types import Gray, RandFn

logger = logging.getLogger(__name__)


def schotter_canvas_size(
    console_cols: int, squares_per_row: int, squares_per_col: int
) -> tuple[int, int, int, float]:
    """Return ``(width, height, padding, square_side)`` for a Schotter canvas."""
    canvas_width = console_cols * 2
    padding = 2 if canvas_width > 4 else 0
    square_side = (canvas_width - padding * 2) / squares_per_row
    canvas_height = max(1, int(square_side * squares_per_col + padding * 2))
    return canvas_width, canvas_height, padding, square_side


def _signed_jitter(rand: RandFn, squares_per_col: int, row: int) -> float:
    return rand_unit(rand) / squares_per_col * row


def draw_schotter(
    console_cols: int, squares_per_row: int, squares_per_col: int, rand: RandFn
) -> Canvas:
    """Create a canvas and draw the Schotter grid of squares on it."""
    width, height, padding, square_side = schotter_canvas_size(
        console_cols, squares_per_row, squares_per_col
    )
    canvas = create_canvas(width, height, Gray.BLACK)
    logger.debug(
        "Schotter canvas %dx%d, %d x %d squares of side %.2f",
        width,
        height,
        squares_per_row,
        squares_per_col,
        square_side,
    )

    for y in range(squares_per_col):
        for x in range(squares_per_row):
            sx = int(x * square_side + square_side / 2 + padding)
            sy = int(y * square_side + square_side / 2 + padding)
            angle = 0.0
            if y > 1:
                r1 = _signed_jitter(rand, squares_per_col, y)
                r2 = _signed_jitter(rand, squares_per_col, y)
                r3 = _signed_jitter(rand, squares_per_col, y)
                if rand() % 2:
                    r1 = -r1
                if rand() % 2:
                    r2 = -r2
                if rand() % 2:
                    r3 = -r3
                angle = r1
                sx = int(sx + r2 * square_side / 3)
                sy = int(sy + r3 * square_side / 3)
            draw_square(canvas, sx, sy, square_side, angle, Gray.DARK_GRAY)
    return canvas

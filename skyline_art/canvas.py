"""Bitmap canvas shared by every scene.

A :class:`Canvas` is a fixed-size grid of palette indices stored row-major in
a flat ``numpy`` array (index ``x + y * width``). Access is bounds-checked
with a deliberately asymmetric policy:

* writes outside the grid are silently dropped, so rasterizers never need to
  clip their own output;
* reads outside the grid return ``0`` (black), so generators can sample a
  neighbouring pixel at the border without special-casing it.

Canvases are short-lived: create one, draw on it, render it, discard it.
:meth:`Canvas.destroy` (or leaving a ``with`` block) releases the storage at a
single well-defined point.
"""

from typing import Iterator, List

import numpy as np
import numpy.typing as npt

from skyline_art.types import Color, is_palette_color

PixelArray = npt.NDArray[np.uint8]


class Canvas:
    """Mutable grid of palette indices.

    Attributes:
        width (int): Number of columns.
        height (int): Number of rows.
        pixels (PixelArray): Flat row-major pixel storage of ``width * height``.
    """

    width: int
    height: int
    pixels: PixelArray

    def __init__(self, width: int, height: int, background: Color) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        if not is_palette_color(background):
            raise ValueError(f"Background {background} is not a palette color")
        self.width = width
        self.height = height
        self.pixels = np.full(width * height, background, dtype=np.uint8)

    def __repr__(self) -> str:
        return f"Canvas(width={self.width}, height={self.height})"

    def __enter__(self) -> "Canvas":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.destroy()

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Write ``color`` at ``(x, y)``; a no-op outside the grid.

        Raises:
            ValueError: If ``color`` is not a palette index.
        """
        if not is_palette_color(color):
            raise ValueError(f"Color {color} is not a palette color")
        if not self.in_bounds(x, y):
            return
        self.pixels[x + y * self.width] = color

    def get_pixel(self, x: int, y: int) -> Color:
        """Return the color at ``(x, y)``, or ``0`` outside the grid."""
        if not self.in_bounds(x, y):
            return 0
        return int(self.pixels[x + y * self.width])

    def rows(self) -> Iterator[List[Color]]:
        """Yield each row, top to bottom, as a list of ints."""
        for row in self.to_array():
            yield row.tolist()

    def to_array(self) -> PixelArray:
        """Return a ``(height, width)`` view of the pixel storage."""
        return self.pixels.reshape(self.height, self.width)

    def destroy(self) -> None:
        """Release pixel storage.

        The canvas keeps working afterwards as an empty grid: every coordinate
        is out of range, so writes are dropped and reads return ``0``.
        """
        self.pixels = np.empty(0, dtype=np.uint8)
        self.width = 0
        self.height = 0


def create_canvas(width: int, height: int, background: Color) -> Canvas:
    """Allocate a ``width`` x ``height`` canvas filled with ``background``.

    Raises:
        ValueError: If either dimension is not positive or ``background`` is
            not a palette color. Callers are expected to clamp sizes first.
    """
    return Canvas(width, height, background)

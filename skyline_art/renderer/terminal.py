"""Text renderers for canvases.

Two encodings are provided:

* :func:`render_canvas` maps every pixel to one space character painted with
  one of the four gray levels of a standard color terminal. Foreground and
  background are both set so the result looks the same across terminal
  implementations.
* :func:`render_braille` packs 2x4 blocks of pixels into Unicode braille
  glyphs, which suits line art such as the Schotter squares.

Neither output ends with a newline.
"""

from typing import List

from pyrsistent import pmap
from pyrsistent.typing import PMap

from skyline_art.canvas import Canvas
from skyline_art.types import Color, Gray

ESC = "\x1b["
RESET = f"{ESC}0m"

ANSI_GRAY_ESCAPES: PMap[Color, str] = pmap(
    {
        Gray.BLACK: "0;30;40m",
        Gray.DARK_GRAY: "0;90;100m",
        Gray.LIGHT_GRAY: "0;37;47m",
        Gray.WHITE: "0;97;107m",
    }
)

BRAILLE_BASE = 0x2800

# Bit index for each (dx, dy) inside a 2x4 braille cell.
BRAILLE_BITS: PMap[tuple[int, int], int] = pmap(
    {
        (0, 0): 0,
        (0, 1): 1,
        (0, 2): 2,
        (1, 0): 3,
        (1, 1): 4,
        (1, 2): 5,
        (0, 3): 6,
        (1, 3): 7,
    }
)


def color_escape(color: Color) -> str:
    """Return the escape sequence for ``color``; unknown colors render black."""
    return ESC + ANSI_GRAY_ESCAPES.get(color, ANSI_GRAY_ESCAPES[Gray.BLACK])


def render_canvas(canvas: Canvas) -> str:
    """Render ``canvas`` as rows of gray terminal cells."""
    lines: List[str] = []
    for row in canvas.rows():
        lines.append("".join(f"{color_escape(color)} {RESET}" for color in row))
    return "\n".join(lines)


def braille_byte(canvas: Canvas, x: int, y: int) -> int:
    """Pack the 2x4 block whose top-left pixel is ``(x, y)`` into a byte."""
    byte = 0
    for (dx, dy), bit in BRAILLE_BITS.items():
        if canvas.get_pixel(x + dx, y + dy):
            byte |= 1 << bit
    return byte


def translate_pixels_group(byte: int) -> bytes:
    """Return the UTF-8 encoding of the braille glyph for ``byte``."""
    return chr(BRAILLE_BASE + byte).encode("utf-8")


def render_braille(canvas: Canvas) -> str:
    """Render ``canvas`` as braille text, one glyph per 2x4 pixel block.

    The text needs a terminal ``width / 2`` columns wide and ``height / 4``
    rows tall (rounded up) to show without wrapping.
    """
    lines: List[str] = []
    for y in range(0, canvas.height, 4):
        lines.append(
            "".join(
                translate_pixels_group(braille_byte(canvas, x, y)).decode("utf-8")
                for x in range(0, canvas.width, 2)
            )
        )
    return "\n".join(lines)

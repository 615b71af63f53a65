"""City skyline inspired by the parallax backgrounds of 8 bit games.

The scene is painted in three passes over a white canvas, back to front, so
draw order alone gives the occlusion:

1. far background buildings in light gray, packed densely;
2. near background buildings in dark gray, spaced one pixel apart;
3. black foreground buildings with windows.

Each building is an immutable :class:`Skyscraper` value drawn by
:func:`draw_skyscraper`. Window colors are random but every window is two
pixels wide and one tall (terminal cells are not square), and both halves of a
window always share a color.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from skyline_art.canvas import Canvas
from skyline_art.types import Color, Gray, RandFn, is_palette_color

logger = logging.getLogger(__name__)

START_OFFSET = -10

BACKGROUND = Gray.WHITE

# Windows are always one of the two grays. The pair guarantees at least one
# candidate differs from any building color.
WINDOW_COLORS: Tuple[Color, Color] = (Gray.DARK_GRAY, Gray.LIGHT_GRAY)


@dataclass(frozen=True)
class Skyscraper:
    """Parameters of a single building.

    Attributes:
        xoff: Left column. May be negative or past the right edge; the canvas
            drops whatever falls outside.
        width: Width in pixels.
        height: Height in pixels, measured up from the bottom row. May be 0.
        windows: Draw a grid of windows in the inner region if True.
        color: Palette index of the walls.
    """

    xoff: int
    width: int
    height: int
    windows: bool
    color: Color

    def __post_init__(self) -> None:
        # Zero height is legal on one-row canvases; nothing gets drawn.
        if self.width <= 0 or self.height < 0:
            raise ValueError(
                f"Invalid skyscraper size {self.width}x{self.height}"
            )
        if not is_palette_color(self.color):
            raise ValueError(f"Skyscraper color {self.color} is not a palette color")


def pick_window_color(building_color: Color, rand: RandFn) -> Color:
    """Draw window colors until one differs from ``building_color``."""
    while True:
        color = WINDOW_COLORS[rand() % len(WINDOW_COLORS)]
        if color != building_color:
            return int(color)


def draw_skyscraper(canvas: Canvas, skyscraper: Skyscraper, rand: RandFn) -> None:
    """Draw one building standing on the bottom row of ``canvas``.

    The roof row is four pixels narrower than the body. When windows are
    enabled they are placed only in the inner region, two pixels away from
    the sides and the roof and bottom rows.
    """
    xoff, width = skyscraper.xoff, skyscraper.width
    starty = canvas.height - 1
    endy = starty - skyscraper.height + 1

    for y in range(starty, endy - 1, -1):
        for x in range(xoff, xoff + width):
            if y == endy and (x <= xoff + 1 or x >= xoff + width - 2):
                continue
            color = skyscraper.color
            if (
                skyscraper.windows
                and xoff + 1 < x < xoff + width - 2
                and endy + 1 < y < starty - 1
            ):
                relx = x - (xoff + 1)
                rely = y - (endy + 1)
                if (relx // 2) % 2 == 1 and rely % 2 == 1:
                    color = pick_window_color(skyscraper.color, rand)
                    # Right half of a window copies the left half.
                    if relx % 2 == 1:
                        color = canvas.get_pixel(x - 1, y)
            canvas.set_pixel(x, y, color)


def _background_pass(
    canvas: Canvas, color: Color, rand: RandFn
) -> PVector[Skyscraper]:
    drawn = []
    offset = START_OFFSET
    while offset < canvas.width:
        offset += rand() % 8
        width = 10 + rand() % 9
        if color == Gray.LIGHT_GRAY:
            height = canvas.height // 2 + (rand() % canvas.height) // 2
        else:
            height = canvas.height // 2 + (rand() % canvas.height) // 3
        skyscraper = Skyscraper(
            xoff=offset, width=width, height=height, windows=False, color=color
        )
        draw_skyscraper(canvas, skyscraper, rand)
        drawn.append(skyscraper)
        if color == Gray.LIGHT_GRAY:
            offset += width // 2
        else:
            offset += width + 1
    return pvector(drawn)


def _foreground_pass(canvas: Canvas, rand: RandFn) -> PVector[Skyscraper]:
    drawn = []
    offset = START_OFFSET
    while offset < canvas.width:
        offset += rand() % 8
        width = 5 + rand() % 14
        # Keeps the two-pixel window cells aligned inside the body.
        if width % 4:
            width += width % 3
        height = canvas.height // 3 + (rand() % canvas.height) // 2
        skyscraper = Skyscraper(
            xoff=offset, width=width, height=height, windows=True, color=Gray.BLACK
        )
        draw_skyscraper(canvas, skyscraper, rand)
        drawn.append(skyscraper)
        offset += width + 5
    return pvector(drawn)


def generate_skyline(canvas: Canvas, rand: RandFn) -> PVector[Skyscraper]:
    """Paint the full skyline onto ``canvas``.

    Returns:
        PVector[Skyscraper]: Every building drawn, in draw order.
    """
    drawn: PVector[Skyscraper] = pvector()
    for color in (Gray.LIGHT_GRAY, Gray.DARK_GRAY):
        layer = _background_pass(canvas, color, rand)
        logger.debug("Background pass color=%d drew %d buildings", color, len(layer))
        drawn = drawn.extend(layer)
    layer = _foreground_pass(canvas, rand)
    logger.debug("Foreground pass drew %d buildings", len(layer))
    return drawn.extend(layer)

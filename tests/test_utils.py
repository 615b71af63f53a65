import re
from typing import Iterable, List, Set, Tuple

from skyline_art.canvas import Canvas

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove color escape sequences, leaving the painted characters."""
    return ANSI_ESCAPE.sub("", text)


def painted_pixels(canvas: Canvas, background: int) -> Set[Tuple[int, int]]:
    """Return every ``(x, y)`` whose color differs from ``background``."""
    return {
        (x, y)
        for y in range(canvas.height)
        for x in range(canvas.width)
        if canvas.get_pixel(x, y) != background
    }


class CountingRand:
    """RandFn wrapper that records how many values were drawn."""

    def __init__(self, values: Iterable[int]):
        self.values: List[int] = list(values)
        self.calls = 0

    def __call__(self) -> int:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


def failing_rand() -> int:
    raise AssertionError("random source should not be used here")

"""Common type aliases and enumerations.

``RandFn`` is the central extension point shared by every scene generator:
any zero-argument callable returning integers in ``[0, RAND_MAX]`` can drive
the procedural layout, which keeps generators deterministic under test.
"""

from enum import IntEnum
from typing import Callable, FrozenSet


RAND_MAX = 32767

RandFn = Callable[[], int]

Color = int


class Gray(IntEnum):
    """The four gray levels of a standard color terminal."""

    BLACK = 0
    DARK_GRAY = 1
    LIGHT_GRAY = 2
    WHITE = 3


PALETTE: FrozenSet[Color] = frozenset(int(gray) for gray in Gray)


def is_palette_color(color: Color) -> bool:
    """Return True if ``color`` is one of the four gray indices."""
    return color in PALETTE

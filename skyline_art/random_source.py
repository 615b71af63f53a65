"""Random sources for scene generators.

Generators only ever call a :data:`~skyline_art.types.RandFn`: a zero-argument
callable returning uniform integers in ``[0, RAND_MAX]``. Reproducing an image
pixel for pixel requires the same sequence from the same range; any other
uniform source with this range works for everything else.
"""

import random
from typing import Iterable, Iterator, Optional

from skyline_art.types import RAND_MAX, RandFn


def make_rand(seed: Optional[int] = None) -> RandFn:
    """Return a ``RandFn`` backed by its own ``random.Random`` instance.

    A ``None`` seed draws fresh entropy, so every call site gets a different
    image unless it passes a seed.
    """
    rng = random.Random(seed)

    def rand() -> int:
        return rng.randint(0, RAND_MAX)

    return rand


def sequence_rand(values: Iterable[int]) -> RandFn:
    """Return a ``RandFn`` that replays ``values`` in a loop.

    Useful to pin down exact layouts. Values are reduced into
    ``[0, RAND_MAX]``.
    """
    pool = [value % (RAND_MAX + 1) for value in values]
    if not pool:
        raise ValueError("sequence_rand needs at least one value")

    def cycle() -> Iterator[int]:
        while True:
            yield from pool

    it = cycle()

    def rand() -> int:
        return next(it)

    return rand


def rand_unit(rand: RandFn) -> float:
    """Return a float in ``[0, 1]`` from one draw of ``rand``."""
    return rand() / RAND_MAX

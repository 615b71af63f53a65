"""Argument coercion and clamping shared by the art sources.

Scene commands accept loosely typed values (ints, floats, strings straight
from a command line, or ``None``) and never fail on them: anything missing,
unparseable or non-finite falls back to the default, and numbers outside the
allowed range are clamped.
"""

import math
import re
from typing import Optional, Union

RawValue = Union[int, float, str, None]

LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

DEFAULT_VERSION = "6"

MIN_COLUMNS = 1
MAX_COLUMNS = 1000
MIN_ROWS = 1
MAX_ROWS = 1000
MIN_SQUARES = 1
MAX_SQUARES = 200


def coerce_int(value: RawValue) -> Optional[int]:
    """Best-effort conversion of ``value`` to an int.

    Floats are truncated towards zero. Strings are read up to the end of their
    leading decimal integer, so ``"12abc"`` is 12 and ``"3.5"`` is 3. Returns
    None for missing, unparseable or non-finite input.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    match = LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1), 10)


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def resolve(value: RawValue, default: int, low: int, high: int) -> int:
    """Coerce ``value``, fall back to ``default``, then clamp to ``[low, high]``."""
    number = coerce_int(value)
    if number is None:
        number = default
    return clamp(number, low, high)

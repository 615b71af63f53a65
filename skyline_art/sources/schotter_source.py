from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from skyline_art import __version__
from skyline_art.config import (
    MAX_COLUMNS,
    MAX_SQUARES,
    MIN_COLUMNS,
    MIN_SQUARES,
    RawValue,
    resolve,
)
from skyline_art.random_source import make_rand
from skyline_art.renderer.terminal import render_braille
from skyline_art.scenes.schotter import draw_schotter
from skyline_art.types import RandFn
from .base import ArtSource, register_art_source

logger = logging.getLogger(__name__)

DEFAULT_COLUMNS = 66
DEFAULT_SQUARES_PER_ROW = 8
DEFAULT_SQUARES_PER_COL = 12

ATTRIBUTION = (
    f"Georg Nees - schotter, plotter on paper, 1968. skyline-art ver. {__version__}"
)


# -----------------------------
# Config Dataclass
# -----------------------------
@dataclass(frozen=True)
class SchotterConfig:
    columns: int = DEFAULT_COLUMNS
    squares_per_row: int = DEFAULT_SQUARES_PER_ROW
    squares_per_col: int = DEFAULT_SQUARES_PER_COL
    seed: Optional[int] = None


def build_schotter_config(
    values: Sequence[RawValue], seed: Optional[int] = None
) -> SchotterConfig:
    """Build a config from ``[columns, squares_per_row, squares_per_col]``."""
    padded = list(values[:3]) + [None] * (3 - len(values[:3]))
    return SchotterConfig(
        columns=resolve(padded[0], DEFAULT_COLUMNS, MIN_COLUMNS, MAX_COLUMNS),
        squares_per_row=resolve(
            padded[1], DEFAULT_SQUARES_PER_ROW, MIN_SQUARES, MAX_SQUARES
        ),
        squares_per_col=resolve(
            padded[2], DEFAULT_SQUARES_PER_COL, MIN_SQUARES, MAX_SQUARES
        ),
        seed=seed,
    )


# -----------------------------
# Rendering
# -----------------------------
def render_schotter(config: SchotterConfig, rand: Optional[RandFn] = None) -> str:
    rand = rand or make_rand(config.seed)
    with draw_schotter(
        config.columns, config.squares_per_row, config.squares_per_col, rand
    ) as canvas:
        logger.debug("Rendered schotter on %r", canvas)
        art = render_braille(canvas)
    return f"{art}\n{ATTRIBUTION}"


def schotter_command(
    columns: RawValue = DEFAULT_COLUMNS,
    squares_per_row: RawValue = DEFAULT_SQUARES_PER_ROW,
    squares_per_col: RawValue = DEFAULT_SQUARES_PER_COL,
    rand: Optional[RandFn] = None,
    seed: Optional[int] = None,
) -> str:
    """Render the Schotter squares; columns clamp to [1, 1000], squares to [1, 200]."""
    config = build_schotter_config([columns, squares_per_row, squares_per_col], seed)
    return render_schotter(config, rand)


register_art_source(
    ArtSource(
        version="5",
        name="Schotter",
        usage=(
            f"[columns={DEFAULT_COLUMNS}] [squares-per-row={DEFAULT_SQUARES_PER_ROW}]"
            f" [squares-per-col={DEFAULT_SQUARES_PER_COL}]"
        ),
        build_config=build_schotter_config,
        render=render_schotter,
    )
)

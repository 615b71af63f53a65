from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from skyline_art import __version__
from skyline_art.canvas import create_canvas
from skyline_art.config import (
    MAX_COLUMNS,
    MAX_ROWS,
    MIN_COLUMNS,
    MIN_ROWS,
    RawValue,
    resolve,
)
from skyline_art.random_source import make_rand
from skyline_art.renderer.terminal import render_canvas
from skyline_art.scenes.skyline import BACKGROUND, generate_skyline
from skyline_art.types import RandFn
from .base import ArtSource, register_art_source

logger = logging.getLogger(__name__)

DEFAULT_COLUMNS = 80
DEFAULT_ROWS = 20

ATTRIBUTION = (
    "Dedicated to the 8 bit game developers of past and present.\n"
    "Original 8 bit image from Plaguemon by hikikomori. "
    f"skyline-art ver. {__version__}"
)


# -----------------------------
# Config Dataclass
# -----------------------------
@dataclass(frozen=True)
class SkylineConfig:
    columns: int = DEFAULT_COLUMNS
    rows: int = DEFAULT_ROWS
    seed: Optional[int] = None


def build_skyline_config(
    values: Sequence[RawValue], seed: Optional[int] = None
) -> SkylineConfig:
    """Build a config from positional ``[columns, rows]`` values."""
    padded = list(values[:2]) + [None] * (2 - len(values[:2]))
    return SkylineConfig(
        columns=resolve(padded[0], DEFAULT_COLUMNS, MIN_COLUMNS, MAX_COLUMNS),
        rows=resolve(padded[1], DEFAULT_ROWS, MIN_ROWS, MAX_ROWS),
        seed=seed,
    )


# -----------------------------
# Rendering
# -----------------------------
def render_skyline(config: SkylineConfig, rand: Optional[RandFn] = None) -> str:
    """Draw the skyline for ``config`` and return it with the attribution."""
    rand = rand or make_rand(config.seed)
    with create_canvas(config.columns, config.rows, BACKGROUND) as canvas:
        buildings = generate_skyline(canvas, rand)
        logger.debug(
            "Rendered %dx%d skyline with %d buildings",
            config.columns,
            config.rows,
            len(buildings),
        )
        art = render_canvas(canvas)
    return f"{art}\n{ATTRIBUTION}"


def skyline_command(
    columns: RawValue = DEFAULT_COLUMNS,
    rows: RawValue = DEFAULT_ROWS,
    rand: Optional[RandFn] = None,
    seed: Optional[int] = None,
) -> str:
    """Render a ``columns`` x ``rows`` skyline; sizes are clamped to [1, 1000]."""
    return render_skyline(build_skyline_config([columns, rows], seed), rand)


register_art_source(
    ArtSource(
        version="6",
        name="Skyline",
        usage=f"[columns={DEFAULT_COLUMNS}] [rows={DEFAULT_ROWS}]",
        build_config=build_skyline_config,
        render=render_skyline,
    )
)

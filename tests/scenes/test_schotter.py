import numpy as np
import pytest

from skyline_art.random_source import make_rand
from skyline_art.scenes.schotter import draw_schotter, schotter_canvas_size
from skyline_art.types import RAND_MAX
from tests.test_utils import CountingRand, failing_rand


@pytest.mark.parametrize(
    "cols, per_row, per_col, expected",
    [
        (66, 8, 12, (132, 196, 2, 16.0)),
        (10, 2, 2, (20, 20, 2, 8.0)),
        # No padding below 5 pixels; the height never drops below one row.
        (1, 200, 1, (2, 1, 0, 0.01)),
    ],
)
def test_canvas_size(
    cols: int, per_row: int, per_col: int, expected: tuple[int, int, int, float]
) -> None:
    width, height, padding, side = schotter_canvas_size(cols, per_row, per_col)
    assert (width, height, padding) == expected[:3]
    assert side == pytest.approx(expected[3])


def test_first_two_rows_are_aligned_and_use_no_randomness() -> None:
    canvas = draw_schotter(10, 2, 2, failing_rand)
    assert (canvas.width, canvas.height) == (20, 20)
    # Square centered at (6, 6) has corners (2, 2) and (10, 10); the one at
    # (14, 14) has corners (10, 10) and (18, 18).
    for corner in [(2, 2), (10, 2), (2, 10), (10, 10), (18, 18), (18, 10)]:
        assert canvas.get_pixel(*corner) == 1
    assert canvas.get_pixel(6, 6) == 0
    assert canvas.get_pixel(14, 14) == 0
    assert set(np.unique(canvas.pixels).tolist()) == {0, 1}


def test_lower_rows_draw_six_values_per_square() -> None:
    rand = CountingRand([0])
    draw_schotter(10, 2, 4, rand)
    # Rows 2 and 3, two squares each.
    assert rand.calls == 24


def test_zero_jitter_keeps_lower_rows_on_the_grid() -> None:
    canvas = draw_schotter(10, 2, 4, CountingRand([0]))
    # Row 2 square centered at (6, 22).
    for corner in [(2, 18), (10, 18), (2, 26), (10, 26)]:
        assert canvas.get_pixel(*corner) == 1


def test_jitter_moves_lower_rows() -> None:
    still = draw_schotter(10, 2, 4, CountingRand([0]))
    shaken = draw_schotter(10, 2, 4, CountingRand([RAND_MAX]))
    assert still.pixels.shape == shaken.pixels.shape
    assert not np.array_equal(still.pixels, shaken.pixels)


@pytest.mark.parametrize("seed", [0, 1, 99])
def test_schotter_uses_only_two_colors(seed: int) -> None:
    canvas = draw_schotter(40, 6, 9, make_rand(seed))
    assert set(np.unique(canvas.pixels).tolist()) <= {0, 1}

import numpy as np
import pytest

from skyline_art.canvas import Canvas, create_canvas
from skyline_art.types import Gray


@pytest.mark.parametrize(
    "width, height, background",
    [
        (1, 1, Gray.BLACK),
        (80, 20, Gray.WHITE),
        (7, 3, Gray.DARK_GRAY),
        (3, 9, Gray.LIGHT_GRAY),
    ],
)
def test_fresh_canvas_is_filled_with_background(
    width: int, height: int, background: Gray
) -> None:
    canvas = create_canvas(width, height, background)
    assert canvas.pixels.shape == (width * height,)
    assert all(
        canvas.get_pixel(x, y) == background
        for y in range(height)
        for x in range(width)
    )


def test_set_then_get_returns_written_color() -> None:
    canvas = create_canvas(4, 3, Gray.WHITE)
    canvas.set_pixel(2, 1, Gray.DARK_GRAY)
    assert canvas.get_pixel(2, 1) == Gray.DARK_GRAY
    # Storage is row-major.
    assert canvas.pixels[2 + 1 * 4] == Gray.DARK_GRAY


@pytest.mark.parametrize(
    "x, y",
    [(-1, 0), (0, -1), (4, 0), (0, 3), (100, 100), (-5, -5)],
)
def test_out_of_range_writes_are_dropped_and_reads_are_black(x: int, y: int) -> None:
    canvas = create_canvas(4, 3, Gray.WHITE)
    before = canvas.pixels.copy()
    canvas.set_pixel(x, y, Gray.LIGHT_GRAY)
    assert np.array_equal(canvas.pixels, before)
    assert canvas.get_pixel(x, y) == 0


def test_get_pixel_returns_plain_int() -> None:
    canvas = create_canvas(2, 2, Gray.WHITE)
    assert type(canvas.get_pixel(0, 0)) is int


@pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-1, 3), (3, -7)])
def test_non_positive_size_is_rejected(width: int, height: int) -> None:
    with pytest.raises(ValueError):
        create_canvas(width, height, Gray.WHITE)


def test_background_must_be_a_palette_color() -> None:
    with pytest.raises(ValueError):
        create_canvas(2, 2, 4)


def test_rows_and_array_views() -> None:
    canvas = create_canvas(3, 2, Gray.BLACK)
    canvas.set_pixel(0, 1, Gray.WHITE)
    assert list(canvas.rows()) == [[0, 0, 0], [3, 0, 0]]
    assert canvas.to_array().shape == (2, 3)
    assert canvas.to_array()[1, 0] == Gray.WHITE


def test_destroy_releases_storage_and_keeps_access_total() -> None:
    canvas = create_canvas(5, 5, Gray.WHITE)
    canvas.destroy()
    assert canvas.pixels.size == 0
    assert (canvas.width, canvas.height) == (0, 0)
    canvas.set_pixel(0, 0, Gray.DARK_GRAY)
    assert canvas.get_pixel(0, 0) == 0
    assert list(canvas.rows()) == []
    # Idempotent.
    canvas.destroy()


def test_context_manager_destroys_on_exit() -> None:
    with create_canvas(3, 3, Gray.WHITE) as canvas:
        assert isinstance(canvas, Canvas)
        assert canvas.get_pixel(1, 1) == Gray.WHITE
    assert canvas.pixels.size == 0


@pytest.mark.parametrize("color", [-1, 4, 255, 256])
def test_set_pixel_rejects_off_palette_colors(color: int) -> None:
    canvas = create_canvas(2, 2, Gray.WHITE)
    with pytest.raises(ValueError):
        canvas.set_pixel(0, 0, color)
    with pytest.raises(ValueError):
        canvas.set_pixel(-5, 9, color)
    assert list(canvas.rows()) == [[3, 3], [3, 3]]

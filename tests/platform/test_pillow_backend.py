from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from pixeldraw.core.shapes import Circle, Line, Point, draw
from pixeldraw.platform.display.pillow_backend import PillowDisplayBackend
from pixeldraw.render.canvas import BLACK, WHITE, Color


def test_set_and_get_pixel() -> None:
    backend = PillowDisplayBackend(size=(8, 6))
    canvas = backend.begin_frame()
    assert (canvas.width, canvas.height) == (8, 6)
    canvas.set_pixel(3, 2, Color(10, 20, 30))
    assert canvas.get_pixel(3, 2) == Color(10, 20, 30)
    assert canvas.get_pixel(0, 0) == BLACK
    assert canvas.ops == 1


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (8, 0), (0, 6), (100, 100)])
def test_out_of_bounds_write_is_discarded(x: int, y: int) -> None:
    backend = PillowDisplayBackend(size=(8, 6))
    canvas = backend.begin_frame()
    before = backend.image.tobytes()
    canvas.set_pixel(x, y, WHITE)
    assert backend.image.tobytes() == before
    assert canvas.get_pixel(x, y) is None
    assert canvas.ops == 0


def test_background_and_clear() -> None:
    backend = PillowDisplayBackend(size=(4, 4), background=Color(9, 8, 7))
    canvas = backend.begin_frame()
    assert canvas.get_pixel(3, 3) == Color(9, 8, 7)
    canvas.clear(WHITE)
    assert all(
        canvas.get_pixel(x, y) == WHITE for x in range(4) for y in range(4)
    )


def test_invalid_size_rejected() -> None:
    with pytest.raises(ValueError):
        PillowDisplayBackend(size=(0, 10))


def test_save_png_round_trip(tmp_path: Path) -> None:
    backend = PillowDisplayBackend(size=(32, 32))
    canvas = backend.begin_frame()
    draw(Circle(Point(16, 16), 10), canvas, Color(255, 0, 0))
    draw(Line(Point(0, 31), Point(31, 0)), canvas, Color(0, 255, 0))
    backend.end_frame()
    out = tmp_path / "nested" / "frame.png"
    backend.save_png(str(out))
    with Image.open(out) as img:
        assert img.size == (32, 32)
        assert img.convert("RGB").getpixel((26, 16)) == (255, 0, 0)
        assert img.convert("RGB").getpixel((0, 31)) == (0, 255, 0)
        assert img.convert("RGB").getpixel((16, 16)) == (0, 0, 0)

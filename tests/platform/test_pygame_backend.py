from __future__ import annotations

import os
from pathlib import Path

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from pixeldraw.core.shapes import Circle, Point, draw  # noqa: E402
from pixeldraw.platform.display.pillow_backend import PillowDisplayBackend  # noqa: E402
from pixeldraw.platform.display.pygame_backend import PygameDisplayBackend  # noqa: E402
from pixeldraw.render.canvas import Color  # noqa: E402


def test_headless_surface_bounds(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    backend = PygameDisplayBackend(size=(10, 5))
    canvas = backend.begin_frame()
    assert backend.size() == (10, 5)
    assert not backend.has_window
    canvas.set_pixel(9, 4, Color(1, 2, 3))
    canvas.set_pixel(10, 4, Color(200, 200, 200))
    canvas.set_pixel(-1, -1, Color(200, 200, 200))
    assert canvas.get_pixel(9, 4) == Color(1, 2, 3)
    assert canvas.get_pixel(10, 4) is None
    backend.end_frame()


def test_matches_pillow_backend_pixel_for_pixel(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pgb = PygameDisplayBackend(size=(40, 40))
    pil = PillowDisplayBackend(size=(40, 40))
    shape = Circle(Point(20, 20), 15)
    draw(shape, pgb.begin_frame(), Color(0, 200, 100))
    draw(shape, pil.begin_frame(), Color(0, 200, 100))
    a, b = pgb.begin_frame(), pil.begin_frame()
    for x in range(40):
        for y in range(40):
            assert a.get_pixel(x, y) == b.get_pixel(x, y)

    out = tmp_path / "pg.png"
    pgb.save_png(str(out))
    assert out.exists() and out.stat().st_size > 0

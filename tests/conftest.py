from __future__ import annotations

from pathlib import Path

import pytest

from pixeldraw.render.canvas import Color


class RecordingCanvas:
    """In-memory canvas that remembers every accepted write, in order."""

    def __init__(self, width: int = 64, height: int = 64) -> None:
        self.width = width
        self.height = height
        self.writes: list[tuple[int, int, Color]] = []
        self.pixels: dict[tuple[int, int], Color] = {}

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self.writes.append((x, y, color))
            self.pixels[(x, y)] = color

    def get_pixel(self, x: int, y: int) -> Color | None:
        return self.pixels.get((x, y))

    def clear(self, color: Color) -> None:
        self.writes.clear()
        self.pixels.clear()

    def coords(self) -> set[tuple[int, int]]:
        return set(self.pixels)


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas(64, 64)


@pytest.fixture
def big_canvas() -> RecordingCanvas:
    return RecordingCanvas(1000, 1000)


@pytest.fixture
def red() -> Color:
    return Color(255, 0, 0)


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("PIXELDRAW_HOME", str(tmp_path / "home"))
    return tmp_path / "home"

"""Pillow-backed DisplayBackend.

Holds an RGB ``PIL.Image`` as the frame buffer. This is the default backend
used by the CLI and needs no display at all.

Example:
    backend = PillowDisplayBackend(size=(800, 600))
    canvas = backend.begin_frame()
    canvas.set_pixel(10, 10, Color(255, 0, 0))
    backend.end_frame()
    backend.save_png("/tmp/frame.png")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Tuple

from PIL import Image

from pixeldraw.render.canvas import BLACK, Color, DisplayBackend, PixelCanvas

logger = logging.getLogger(__name__)


class PillowCanvas(PixelCanvas):
    """Pixel canvas over a Pillow image, counting accepted writes."""

    def __init__(self, img: Image.Image) -> None:
        self._img = img
        self._px: Any = img.load()
        self._w, self._h = img.size
        self.ops = 0

    @property
    def width(self) -> int:
        return self._w

    @property
    def height(self) -> int:
        return self._h

    @property
    def image(self) -> Image.Image:
        return self._img

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        if 0 <= x < self._w and 0 <= y < self._h:
            self._px[x, y] = color.as_tuple()
            self.ops += 1

    def get_pixel(self, x: int, y: int) -> Color | None:
        if 0 <= x < self._w and 0 <= y < self._h:
            return Color.from_tuple(self._px[x, y])
        return None

    def clear(self, color: Color) -> None:
        self._img.paste(color.as_tuple(), (0, 0, self._w, self._h))


class PillowDisplayBackend(DisplayBackend):
    def __init__(
        self, size: Tuple[int, int] = (800, 600), *, background: Color = BLACK
    ) -> None:
        self._width, self._height = int(size[0]), int(size[1])
        if self._width <= 0 or self._height <= 0:
            raise ValueError("canvas size must be positive")
        self._background = background
        self._img = Image.new("RGB", (self._width, self._height), background.as_tuple())
        self._canvas = PillowCanvas(self._img)

    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    @property
    def image(self) -> Image.Image:
        return self._img

    def begin_frame(self) -> PillowCanvas:
        return self._canvas

    def end_frame(self) -> None:
        logger.debug("frame done: %d pixel writes", self._canvas.ops)

    def save_png(self, path: str) -> None:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        self._img.save(path, format="PNG")
        logger.info("saved %dx%d image to %s", self._width, self._height, path)

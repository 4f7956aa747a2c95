"""Pygame-based DisplayBackend with headless (offscreen) support.

Pixels are written to an offscreen ``pygame.Surface``. With
``create_window=True`` the surface is also blitted to a window on every
``end_frame``. For deterministic, headless use set the environment variable
SDL_VIDEODRIVER=dummy before constructing the backend.

Example:
    import os
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    from pixeldraw.platform.display.pygame_backend import PygameDisplayBackend

    backend = PygameDisplayBackend(size=(320, 240))
    canvas = backend.begin_frame()
    canvas.set_pixel(10, 10, Color(255, 255, 0))
    backend.end_frame()
    backend.save_png("/tmp/frame.png")
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Tuple

from pixeldraw.render.canvas import BLACK, Color, DisplayBackend, PixelCanvas

logger = logging.getLogger(__name__)

pg: Any = None
try:  # pragma: no cover - import guard for environments without SDL
    import pygame as _pg

    pg = _pg
except Exception:  # pragma: no cover
    pg = None


class _PygameCanvas(PixelCanvas):
    def __init__(self, surface: Any) -> None:
        self._surface = surface
        self._w, self._h = surface.get_size()

    @property
    def width(self) -> int:
        return self._w

    @property
    def height(self) -> int:
        return self._h

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        if 0 <= x < self._w and 0 <= y < self._h:
            self._surface.set_at((x, y), color.as_tuple())

    def get_pixel(self, x: int, y: int) -> Color | None:
        if 0 <= x < self._w and 0 <= y < self._h:
            c = self._surface.get_at((x, y))
            return Color(int(c.r), int(c.g), int(c.b))
        return None

    def clear(self, color: Color) -> None:
        self._surface.fill(color.as_tuple())


class PygameDisplayBackend(DisplayBackend):
    """Pygame implementation of DisplayBackend with offscreen surface."""

    def __init__(
        self,
        size: Tuple[int, int] = (800, 600),
        *,
        create_window: bool = False,
        background: Color = BLACK,
    ) -> None:
        local_pg = pg
        if local_pg is None:
            raise RuntimeError(
                "pygame is not available. "
                "Ensure it is installed and that SDL is configured."
            )

        if os.environ.get("SDL_VIDEODRIVER") == "dummy":
            os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

        if not local_pg.get_init():
            local_pg.init()

        self._width, self._height = int(size[0]), int(size[1])
        if self._width <= 0 or self._height <= 0:
            raise ValueError("canvas size must be positive")
        self._window_surface = None
        if create_window and os.environ.get("SDL_VIDEODRIVER") != "dummy":
            try:
                self._window_surface = local_pg.display.set_mode(
                    (self._width, self._height)
                )
                local_pg.display.set_caption("pixeldraw")
            except local_pg.error as exc:
                logger.warning(
                    "window creation failed (%s); falling back to offscreen. "
                    "Check SDL_VIDEODRIVER and display permissions.",
                    exc,
                )
                self._window_surface = None

        self._surface = local_pg.Surface((self._width, self._height))
        self._surface.fill(background.as_tuple())
        self._canvas = _PygameCanvas(self._surface)

    @property
    def has_window(self) -> bool:
        return self._window_surface is not None

    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def begin_frame(self) -> PixelCanvas:
        return self._canvas

    def end_frame(self) -> None:
        local_pg = pg
        if self._window_surface is not None and local_pg is not None:
            self._window_surface.blit(self._surface, (0, 0))
            local_pg.display.flip()

    def wait_closed(self) -> None:
        """Block until the window is closed (ESC, q or the close button)."""
        local_pg = pg
        if self._window_surface is None or local_pg is None:
            return
        clock = local_pg.time.Clock()
        while True:
            for event in local_pg.event.get():
                if event.type == local_pg.QUIT:
                    return
                if event.type == local_pg.KEYDOWN and event.key in (
                    local_pg.K_ESCAPE,
                    local_pg.K_q,
                ):
                    return
            clock.tick(30)

    def save_png(self, path: str) -> None:
        local_pg = pg
        if local_pg is None:  # pragma: no cover - should not happen at runtime
            raise RuntimeError("pygame is not available")
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        try:
            local_pg.image.save(self._surface, path)
        except local_pg.error as exc:
            raise OSError(f"could not save {path}: {exc}") from exc
        logger.info("saved %dx%d image to %s", self._width, self._height, path)

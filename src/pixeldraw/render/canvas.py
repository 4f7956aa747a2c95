"""Framework-agnostic pixel canvas and DisplayBackend protocols.

Shapes only ever talk to a :class:`PixelCanvas` through ``set_pixel`` so the
rasterizers stay independent of the storage behind them (Pillow image,
pygame surface, or a recording fake in tests).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Tuple


@dataclass(frozen=True, slots=True)
class Color:
    """An RGB color with 8-bit channels."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            v = getattr(self, name)
            if not isinstance(v, int) or not 0 <= v <= 255:
                raise ValueError(f"color channel {name} must be an int in [0, 255]")

    @classmethod
    def from_tuple(cls, rgb: Tuple[int, ...]) -> "Color":
        r, g, b = rgb[:3]
        return cls(int(r), int(g), int(b))

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


class PixelCanvas(Protocol):
    """Fixed-size grid of color pixels.

    ``set_pixel`` must silently discard coordinates outside
    ``[0, width) x [0, height)``; it never clamps and never raises.
    """

    @property
    def width(self) -> int:
        ...

    @property
    def height(self) -> int:
        ...

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        ...

    def get_pixel(self, x: int, y: int) -> Color | None:
        ...

    def clear(self, color: Color) -> None:
        ...


class DisplayBackend(Protocol):
    def size(self) -> Tuple[int, int]:
        ...

    def begin_frame(self) -> PixelCanvas:
        ...

    def end_frame(self) -> None:
        ...

    def save_png(self, path: str) -> None:
        ...


def in_bounds(canvas: PixelCanvas, x: int, y: int) -> bool:
    return 0 <= x < canvas.width and 0 <= y < canvas.height

"""Integer rasterizers.

Pixel enumeration for the two primitives every shape reduces to: straight
segments (Bresenham error-accumulation stepping) and circle outlines
(midpoint stepping with 8-way octant mirroring). Both are generators of
``(x, y)`` integer pairs and never touch a canvas; callers decide where the
pixels go.

Only integer additions, subtractions and doublings are used. There is no
division and no floating point.
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

Pixel = Tuple[int, int]

__all__ = ["Pixel", "line_pixels", "circle_pixels", "circle_octant"]


def _sign(v: int) -> int:
    if v > 0:
        return 1
    if v < 0:
        return -1
    return 0


def _step_line(x0: int, y0: int, x1: int, y1: int) -> Iterator[Pixel]:
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = _sign(x1 - x0)
    sy = _sign(y1 - y0)
    err = dx - dy
    x, y = x0, y0
    while True:
        yield (x, y)
        if x == x1 and y == y1:
            return
        # Both tests read the same e2; a diagonal step fires both.
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


def line_pixels(start: Pixel, end: Pixel) -> List[Pixel]:
    """Return the 8-connected pixel run from *start* to *end* inclusive.

    The run has exactly ``max(|dx|, |dy|) + 1`` pixels. Stepping always
    begins at the lexicographically smaller endpoint so that a segment and
    its reverse cover the same pixels; the result is still ordered from
    *start* to *end*.
    """
    x0, y0 = int(start[0]), int(start[1])
    x1, y1 = int(end[0]), int(end[1])
    if (x1, y1) < (x0, y0):
        pts = list(_step_line(x1, y1, x0, y0))
        pts.reverse()
        return pts
    return list(_step_line(x0, y0, x1, y1))


def circle_octant(radius: int) -> Iterator[Pixel]:
    """Yield ``(x, y)`` offsets of the first octant (``x >= y >= 0``).

    For each ``y`` the yielded ``x`` is the integer nearest to
    ``sqrt(radius**2 - y**2)``. A negative radius yields nothing.
    """
    x = radius
    y = 0
    d = 1 - radius
    while x >= y:
        yield (x, y)
        y += 1
        if d < 0:
            d += 2 * y + 1
        else:
            x -= 1
            d += 2 * (y - x) + 1


def circle_pixels(center: Pixel, radius: int) -> Iterator[Pixel]:
    """Yield the outline pixels of a circle.

    Each octant point is mirrored eight ways about *center*. Points on the
    axes and diagonals are yielded more than once; ``radius == 0`` yields the
    center only.
    """
    cx, cy = int(center[0]), int(center[1])
    for x, y in circle_octant(int(radius)):
        yield (cx + x, cy + y)
        yield (cx + y, cy + x)
        yield (cx - y, cy + x)
        yield (cx - x, cy + y)
        yield (cx - x, cy - y)
        yield (cx - y, cy - x)
        yield (cx + y, cy - x)
        yield (cx + x, cy - y)

"""Random shape parameter generators.

Every generator takes an explicit :class:`random.Random` so a seeded scene
is reproducible and no module-level state is shared between calls.
Coordinates are uniform over the canvas (``[0, width) x [0, height)``);
radii are uniform over inclusive ranges.
"""

from __future__ import annotations

import random
from typing import Tuple

from pixeldraw.core.shapes import Circle, Line, Pentagon, Point, Rectangle, Triangle
from pixeldraw.render.canvas import Color

__all__ = [
    "random_point",
    "random_line",
    "random_rectangle",
    "random_triangle",
    "random_circle",
    "random_pentagon",
    "random_color",
]


def random_point(width: int, height: int, rng: random.Random) -> Point:
    return Point(rng.randrange(width), rng.randrange(height))


def random_line(
    width: int,
    height: int,
    rng: random.Random,
    max_length: int | None = None,
) -> Line:
    """Return a random segment.

    Without *max_length* both endpoints are independent random points. With
    it, the end point is the start offset by up to *max_length* pixels on
    each axis, and may fall off the canvas.
    """
    start = random_point(width, height, rng)
    if max_length is None:
        return Line(start, random_point(width, height, rng))
    dx = rng.randint(-max_length, max_length)
    dy = rng.randint(-max_length, max_length)
    return Line(start, start.offset(dx, dy))


def random_rectangle(width: int, height: int, rng: random.Random) -> Rectangle:
    return Rectangle(random_point(width, height, rng), random_point(width, height, rng))


def random_triangle(width: int, height: int, rng: random.Random) -> Triangle:
    return Triangle(
        random_point(width, height, rng),
        random_point(width, height, rng),
        random_point(width, height, rng),
    )


def random_circle(
    width: int, height: int, rng: random.Random, radius_range: Tuple[int, int]
) -> Circle:
    lo, hi = radius_range
    return Circle(random_point(width, height, rng), rng.randint(lo, hi))


def random_pentagon(
    width: int, height: int, rng: random.Random, radius_range: Tuple[int, int]
) -> Pentagon:
    lo, hi = radius_range
    return Pentagon(random_point(width, height, rng), rng.randint(lo, hi))


def random_color(rng: random.Random, lo: int = 0, hi: int = 255) -> Color:
    return Color(rng.randint(lo, hi), rng.randint(lo, hi), rng.randint(lo, hi))

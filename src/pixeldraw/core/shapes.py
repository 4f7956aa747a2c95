"""Drawable shapes.

The shape set is closed: :data:`Shape` is the union of the six frozen
dataclasses below and :func:`draw` dispatches over exactly that union.
Every shape draws through ``canvas.set_pixel``; polygon composites only
reach the canvas through :class:`Line`.

Example:
    from pixeldraw.core.shapes import Circle, Point, draw
    from pixeldraw.render.canvas import Color

    draw(Circle(Point(10, 10), 5), canvas, Color(255, 0, 0))
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple, Union

from pixeldraw.core.raster import circle_pixels, line_pixels
from pixeldraw.render.canvas import Color, PixelCanvas

__all__ = [
    "POINT_SPREAD",
    "SHAPE_KINDS",
    "Point",
    "Line",
    "Rectangle",
    "Triangle",
    "Circle",
    "Pentagon",
    "Shape",
    "draw",
    "kind_of",
    "pentagon_vertices",
    "polygon_edges",
]

# A point is drawn as the (2 * POINT_SPREAD + 1)^2 block around it.
POINT_SPREAD = 1


@dataclass(frozen=True, slots=True)
class Point:
    x: int
    y: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def offset(self, dx: int, dy: int) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def draw(self, canvas: PixelCanvas, color: Color) -> None:
        for dx in range(-POINT_SPREAD, POINT_SPREAD + 1):
            for dy in range(-POINT_SPREAD, POINT_SPREAD + 1):
                canvas.set_pixel(self.x + dx, self.y + dy, color)


@dataclass(frozen=True, slots=True)
class Line:
    start: Point
    end: Point

    def pixels(self) -> list[Tuple[int, int]]:
        return line_pixels(self.start.as_tuple(), self.end.as_tuple())

    def draw(self, canvas: PixelCanvas, color: Color) -> None:
        for x, y in self.pixels():
            canvas.set_pixel(x, y, color)


def polygon_edges(vertices: Sequence[Point]) -> Iterator[Line]:
    """Yield the closed ring of edges through *vertices* (last joins first)."""
    n = len(vertices)
    for i in range(n):
        yield Line(vertices[i], vertices[(i + 1) % n])


def _draw_polygon(vertices: Sequence[Point], canvas: PixelCanvas, color: Color) -> None:
    for edge in polygon_edges(vertices):
        edge.draw(canvas, color)


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Axis-aligned rectangle outline.

    Any two opposite corners may be passed; they are normalized so that
    ``top_left`` holds the minimum coordinates and ``bottom_right`` the
    maximum ones.
    """

    top_left: Point
    bottom_right: Point

    def __post_init__(self) -> None:
        a, b = self.top_left, self.bottom_right
        object.__setattr__(self, "top_left", Point(min(a.x, b.x), min(a.y, b.y)))
        object.__setattr__(
            self, "bottom_right", Point(max(a.x, b.x), max(a.y, b.y))
        )

    def vertices(self) -> Tuple[Point, Point, Point, Point]:
        tl, br = self.top_left, self.bottom_right
        return (tl, Point(br.x, tl.y), br, Point(tl.x, br.y))

    def draw(self, canvas: PixelCanvas, color: Color) -> None:
        _draw_polygon(self.vertices(), canvas, color)


@dataclass(frozen=True, slots=True)
class Triangle:
    a: Point
    b: Point
    c: Point

    def vertices(self) -> Tuple[Point, Point, Point]:
        return (self.a, self.b, self.c)

    def draw(self, canvas: PixelCanvas, color: Color) -> None:
        _draw_polygon(self.vertices(), canvas, color)


@dataclass(frozen=True, slots=True)
class Circle:
    center: Point
    radius: int

    def pixels(self) -> Iterator[Tuple[int, int]]:
        return circle_pixels(self.center.as_tuple(), self.radius)

    def draw(self, canvas: PixelCanvas, color: Color) -> None:
        for x, y in self.pixels():
            canvas.set_pixel(x, y, color)


def pentagon_vertices(center: Point, radius: int) -> Tuple[Point, ...]:
    """Return the five vertices of a regular pentagon.

    Vertex ``k`` sits at angle ``2*pi*k/5``. Offsets are truncated toward
    zero (``int()``), not rounded, so vertex placement is reproducible
    across implementations.
    """
    out = []
    for k in range(5):
        angle = 2.0 * math.pi * k / 5.0
        out.append(
            Point(
                center.x + int(radius * math.cos(angle)),
                center.y + int(radius * math.sin(angle)),
            )
        )
    return tuple(out)


@dataclass(frozen=True, slots=True)
class Pentagon:
    center: Point
    radius: int

    def vertices(self) -> Tuple[Point, ...]:
        return pentagon_vertices(self.center, self.radius)

    def draw(self, canvas: PixelCanvas, color: Color) -> None:
        _draw_polygon(self.vertices(), canvas, color)


Shape = Union[Point, Line, Rectangle, Triangle, Circle, Pentagon]

SHAPE_KINDS: Tuple[str, ...] = (
    "point",
    "line",
    "rectangle",
    "triangle",
    "circle",
    "pentagon",
)

_SHAPE_TYPES = (Point, Line, Rectangle, Triangle, Circle, Pentagon)

_KIND_BY_TYPE = {
    Point: "point",
    Line: "line",
    Rectangle: "rectangle",
    Triangle: "triangle",
    Circle: "circle",
    Pentagon: "pentagon",
}


def kind_of(shape: Shape) -> str:
    """Return the kind name of *shape* (one of :data:`SHAPE_KINDS`)."""
    try:
        return _KIND_BY_TYPE[type(shape)]
    except KeyError:
        raise TypeError(f"not a drawable shape: {shape!r}") from None


def draw(shape: Shape, canvas: PixelCanvas, color: Color) -> None:
    """Draw any member of :data:`Shape` onto *canvas* in *color*."""
    if not isinstance(shape, _SHAPE_TYPES):
        raise TypeError(f"not a drawable shape: {shape!r}")
    shape.draw(canvas, color)

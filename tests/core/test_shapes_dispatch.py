from __future__ import annotations

import pytest

from pixeldraw.core.shapes import (
    SHAPE_KINDS,
    Circle,
    Line,
    Pentagon,
    Point,
    Rectangle,
    Triangle,
    draw,
    kind_of,
)
from pixeldraw.render.canvas import Color

from conftest import RecordingCanvas


def test_point_draws_three_by_three_block(canvas, red) -> None:
    Point(10, 20).draw(canvas, red)
    assert canvas.coords() == {(x, y) for x in (9, 10, 11) for y in (19, 20, 21)}
    assert len(canvas.writes) == 9


def test_point_in_corner_is_clipped(canvas, red) -> None:
    Point(0, 0).draw(canvas, red)
    assert canvas.coords() == {(0, 0), (0, 1), (1, 0), (1, 1)}


def test_point_is_value_type() -> None:
    assert Point(1, 2) == Point(1, 2)
    assert hash(Point(1, 2)) == hash(Point(1, 2))
    with pytest.raises(AttributeError):
        Point(1, 2).x = 5  # type: ignore[misc]


@pytest.mark.parametrize(
    "shape",
    [
        Point(5, 5),
        Line(Point(0, 0), Point(9, 3)),
        Rectangle(Point(1, 1), Point(6, 6)),
        Triangle(Point(0, 0), Point(8, 1), Point(3, 7)),
        Circle(Point(20, 20), 6),
        Pentagon(Point(30, 30), 10),
    ],
)
def test_dispatch_matches_method(shape, canvas, red) -> None:
    direct = RecordingCanvas(64, 64)
    shape.draw(direct, red)
    draw(shape, canvas, red)
    assert canvas.writes == direct.writes
    assert canvas.writes


def test_kinds_cover_the_union() -> None:
    shapes = [
        Point(0, 0),
        Line(Point(0, 0), Point(1, 1)),
        Rectangle(Point(0, 0), Point(1, 1)),
        Triangle(Point(0, 0), Point(1, 0), Point(0, 1)),
        Circle(Point(0, 0), 1),
        Pentagon(Point(0, 0), 1),
    ]
    assert tuple(kind_of(s) for s in shapes) == SHAPE_KINDS


def test_dispatch_rejects_non_shapes(canvas, red) -> None:
    with pytest.raises(TypeError):
        draw((1, 2), canvas, red)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        kind_of("circle")  # type: ignore[arg-type]


def test_last_write_wins(canvas) -> None:
    a, b = Color(1, 1, 1), Color(2, 2, 2)
    draw(Line(Point(0, 5), Point(10, 5)), canvas, a)
    draw(Line(Point(5, 0), Point(5, 10)), canvas, b)
    assert canvas.get_pixel(5, 5) == b
    assert canvas.get_pixel(4, 5) == a


def test_shapes_fully_off_canvas_write_nothing(canvas, red) -> None:
    for s in (
        Point(-10, -10),
        Circle(Point(500, 500), 20),
        Rectangle(Point(100, 100), Point(200, 200)),
        Pentagon(Point(-300, 40), 30),
    ):
        draw(s, canvas, red)
    assert canvas.writes == []


@pytest.mark.parametrize("bad", [(-1, 0, 0), (0, 256, 0), (0, 0, 300)])
def test_color_channels_validated(bad: tuple[int, int, int]) -> None:
    with pytest.raises(ValueError):
        Color(*bad)


def test_color_tuple_round_trip() -> None:
    assert Color.from_tuple((10, 20, 30, 255)) == Color(10, 20, 30)
    assert Color(10, 20, 30).as_tuple() == (10, 20, 30)

from __future__ import annotations

from pixeldraw.core.raster import line_pixels
from pixeldraw.core.shapes import Line, Point


def test_shallow_line_exact_sequence() -> None:
    assert line_pixels((0, 0), (4, 2)) == [(0, 0), (1, 0), (2, 1), (3, 1), (4, 2)]


def test_reverse_shallow_line_is_reversed_sequence() -> None:
    assert line_pixels((4, 2), (0, 0)) == [(4, 2), (3, 1), (2, 1), (1, 0), (0, 0)]


def test_degenerate_line_is_single_pixel() -> None:
    assert line_pixels((7, -3), (7, -3)) == [(7, -3)]


def test_horizontal_line_has_no_vertical_jitter() -> None:
    pts = line_pixels((2, 5), (9, 5))
    assert pts == [(x, 5) for x in range(2, 10)]


def test_vertical_line_has_no_horizontal_jitter() -> None:
    pts = line_pixels((3, 8), (3, 1))
    assert pts == [(3, y) for y in range(8, 0, -1)]


def test_exact_diagonal() -> None:
    assert line_pixels((0, 0), (-3, 3)) == [(0, 0), (-1, 1), (-2, 2), (-3, 3)]


def test_steep_line() -> None:
    # dx=1, dy=3: x advances once, at the middle of the run
    assert line_pixels((0, 0), (1, 3)) == [(0, 0), (0, 1), (1, 2), (1, 3)]


def test_tie_break_does_not_depend_on_direction() -> None:
    fwd = set(line_pixels((0, 0), (2, 1)))
    rev = set(line_pixels((2, 1), (0, 0)))
    assert fwd == rev == {(0, 0), (1, 0), (2, 1)}


def test_line_draw_writes_every_pixel_in_color(canvas, red) -> None:
    Line(Point(1, 1), Point(5, 3)).draw(canvas, red)
    assert [(x, y) for x, y, _ in canvas.writes] == line_pixels((1, 1), (5, 3))
    assert all(c == red for _, _, c in canvas.writes)


def test_line_partially_off_canvas_is_clipped_not_clamped(canvas, red) -> None:
    Line(Point(-5, 10), Point(5, 10)).draw(canvas, red)
    assert canvas.coords() == {(x, 10) for x in range(0, 6)}
    # nothing piled up on the left edge
    assert sum(1 for x, _, _ in canvas.writes if x == 0) == 1


def test_line_fully_off_canvas_draws_nothing(canvas, red) -> None:
    Line(Point(-50, -50), Point(-10, -20)).draw(canvas, red)
    assert canvas.writes == []

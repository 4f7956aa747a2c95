"""Rasterization core: integer pixel enumeration and the drawable shapes."""

from .shapes import (
    SHAPE_KINDS,
    Circle,
    Line,
    Pentagon,
    Point,
    Rectangle,
    Shape,
    Triangle,
    draw,
)

__all__ = [
    "SHAPE_KINDS",
    "Circle",
    "Line",
    "Pentagon",
    "Point",
    "Rectangle",
    "Shape",
    "Triangle",
    "draw",
]

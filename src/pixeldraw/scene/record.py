"""JSON scene records for dumping and replaying scenes.

A record stores the canvas geometry, the seed (when known) and every shape
with its color, so a scene can be re-rendered pixel-for-pixel without
re-running the random generators.

Record format (JSON):
{
  "version": 1,
  "width": 800,
  "height": 600,
  "seed": 42,
  "background": [0, 0, 0],
  "shapes": [
    {"kind": "circle", "points": [[400, 300]], "radius": 50, "color": [255, 0, 0]},
    {"kind": "line", "points": [[0, 0], [10, 4]], "radius": null, "color": [0, 255, 0]}
  ]
}
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from pixeldraw.core.shapes import (
    Circle,
    Line,
    Pentagon,
    Point,
    Rectangle,
    Shape,
    Triangle,
    kind_of,
)
from pixeldraw.render.canvas import Color, PixelCanvas

from .compose import SceneItem, render_scene

__all__ = ["ShapeRecord", "SceneRecord", "replay"]

logger = logging.getLogger(__name__)

ShapeKind = Literal["point", "line", "rectangle", "triangle", "circle", "pentagon"]

_POINT_COUNT = {
    "point": 1,
    "line": 2,
    "rectangle": 2,
    "triangle": 3,
    "circle": 1,
    "pentagon": 1,
}
_HAS_RADIUS = {"circle", "pentagon"}


def _chk_channels(v: tuple[int, int, int]) -> tuple[int, int, int]:
    if any(not 0 <= c <= 255 for c in v):
        raise ValueError("color channels must be in [0, 255]")
    return v


class ShapeRecord(BaseModel):
    """One drawn shape with the color it was drawn in."""

    kind: ShapeKind
    points: list[tuple[int, int]] = Field(..., description="Defining points")
    radius: Optional[int] = Field(None, description="Circle/pentagon radius")
    color: tuple[int, int, int]

    @field_validator("color")
    @classmethod
    def _chk_color(cls, v: tuple[int, int, int]) -> tuple[int, int, int]:
        return _chk_channels(v)

    @model_validator(mode="after")
    def _chk_shape(self) -> "ShapeRecord":
        want = _POINT_COUNT[self.kind]
        if len(self.points) != want:
            raise ValueError(f"{self.kind} needs {want} point(s), got {len(self.points)}")
        if (self.kind in _HAS_RADIUS) != (self.radius is not None):
            raise ValueError(
                f"radius must be set exactly for circle/pentagon, not {self.kind}"
            )
        return self

    @classmethod
    def from_item(cls, item: SceneItem) -> "ShapeRecord":
        s = item.shape
        radius: int | None = None
        if isinstance(s, Point):
            pts = [s]
        elif isinstance(s, Line):
            pts = [s.start, s.end]
        elif isinstance(s, Rectangle):
            pts = [s.top_left, s.bottom_right]
        elif isinstance(s, Triangle):
            pts = [s.a, s.b, s.c]
        elif isinstance(s, (Circle, Pentagon)):
            pts = [s.center]
            radius = s.radius
        else:
            raise TypeError(f"not a drawable shape: {s!r}")
        return cls(
            kind=kind_of(s),
            points=[p.as_tuple() for p in pts],
            radius=radius,
            color=item.color.as_tuple(),
        )

    def to_shape(self) -> Shape:
        pts = [Point(x, y) for x, y in self.points]
        if self.kind == "point":
            return pts[0]
        if self.kind == "line":
            return Line(pts[0], pts[1])
        if self.kind == "rectangle":
            return Rectangle(pts[0], pts[1])
        if self.kind == "triangle":
            return Triangle(pts[0], pts[1], pts[2])
        assert self.radius is not None
        if self.kind == "circle":
            return Circle(pts[0], self.radius)
        return Pentagon(pts[0], self.radius)

    def to_item(self) -> SceneItem:
        return SceneItem(self.to_shape(), Color.from_tuple(self.color))


class SceneRecord(BaseModel):
    """A complete scene: canvas geometry plus the ordered shapes."""

    version: int = 1
    width: int
    height: int
    seed: Optional[int] = None
    background: tuple[int, int, int] = (0, 0, 0)
    shapes: list[ShapeRecord] = Field(default_factory=list)

    @field_validator("width", "height")
    @classmethod
    def _chk_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("canvas dimensions must be > 0")
        return v

    @field_validator("background")
    @classmethod
    def _chk_bg(cls, v: tuple[int, int, int]) -> tuple[int, int, int]:
        return _chk_channels(v)

    @classmethod
    def from_items(
        cls,
        items: Iterable[SceneItem],
        *,
        width: int,
        height: int,
        seed: int | None = None,
        background: Color = Color(0, 0, 0),
    ) -> "SceneRecord":
        return cls(
            width=width,
            height=height,
            seed=seed,
            background=background.as_tuple(),
            shapes=[ShapeRecord.from_item(it) for it in items],
        )

    def to_items(self) -> list[SceneItem]:
        return [s.to_item() for s in self.shapes]

    def to_json(self) -> str:
        return self.model_dump_json(indent=2)

    def dump(self, path: str | Path) -> None:
        """Atomically write the record as JSON to *path*."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        tmp = p.with_suffix(p.suffix + ".tmp")
        tmp.write_text(self.to_json(), encoding="utf-8")
        os.replace(tmp, p)
        logger.info("wrote scene record with %d shapes to %s", len(self.shapes), p)

    @classmethod
    def load(cls, path: str | Path) -> "SceneRecord":
        """Read a record; raises ``OSError`` or ``pydantic.ValidationError``.

        The file is handed to pydantic as bytes so that bad encodings surface
        as validation errors too.
        """
        return cls.model_validate_json(Path(path).read_bytes())


def replay(record: SceneRecord, canvas: PixelCanvas) -> None:
    """Clear *canvas* to the record's background and draw every shape."""
    canvas.clear(Color.from_tuple(record.background))
    render_scene(canvas, record.to_items())

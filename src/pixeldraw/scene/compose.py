"""Scene composition: pick shape kinds and parameters, then draw them.

The dispatcher is the only place randomness and rasterization meet. It
builds a list of :class:`SceneItem` up front so the same scene can be
rendered to several backends or dumped with :mod:`pixeldraw.scene.record`.
"""

from __future__ import annotations

import logging
import random
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Mapping, Tuple

from pixeldraw.core.shapes import SHAPE_KINDS, Shape, draw, kind_of
from pixeldraw.render.canvas import Color, PixelCanvas

from .random_shapes import (
    random_circle,
    random_color,
    random_line,
    random_pentagon,
    random_point,
    random_rectangle,
    random_triangle,
)

__all__ = [
    "SceneItem",
    "ShapeParams",
    "pick_kind",
    "random_shape",
    "compose_scene",
    "render_scene",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SceneItem:
    shape: Shape
    color: Color


@dataclass(frozen=True, slots=True)
class ShapeParams:
    circle_radius: Tuple[int, int] = (10, 150)
    pentagon_radius: Tuple[int, int] = (30, 80)
    line_max_length: int | None = None
    color_range: Tuple[int, int] = (0, 255)


def pick_kind(rng: random.Random, weights: Mapping[str, float]) -> str:
    """Return a shape kind drawn with probability proportional to *weights*.

    Kinds missing from *weights* or weighted ``<= 0`` are never chosen.
    """
    kinds: list[str] = []
    ws: list[float] = []
    for kind in SHAPE_KINDS:
        w = float(weights.get(kind, 0.0))
        if w > 0:
            kinds.append(kind)
            ws.append(w)
    if not kinds:
        raise ValueError("at least one shape weight must be > 0")
    return rng.choices(kinds, weights=ws, k=1)[0]


def random_shape(
    kind: str,
    width: int,
    height: int,
    rng: random.Random,
    params: ShapeParams = ShapeParams(),
) -> Shape:
    if kind == "point":
        return random_point(width, height, rng)
    if kind == "line":
        return random_line(width, height, rng, params.line_max_length)
    if kind == "rectangle":
        return random_rectangle(width, height, rng)
    if kind == "triangle":
        return random_triangle(width, height, rng)
    if kind == "circle":
        return random_circle(width, height, rng, params.circle_radius)
    if kind == "pentagon":
        return random_pentagon(width, height, rng, params.pentagon_radius)
    raise ValueError(f"unknown shape kind: {kind!r}")


def compose_scene(
    count: int,
    width: int,
    height: int,
    rng: random.Random,
    weights: Mapping[str, float],
    params: ShapeParams = ShapeParams(),
) -> list[SceneItem]:
    """Build *count* random shapes, each paired with a random color."""
    items: list[SceneItem] = []
    lo, hi = params.color_range
    for _ in range(count):
        color = random_color(rng, lo, hi)
        kind = pick_kind(rng, weights)
        items.append(SceneItem(random_shape(kind, width, height, rng, params), color))
    return items


def render_scene(canvas: PixelCanvas, items: Iterable[SceneItem]) -> Counter[str]:
    """Draw *items* in order onto *canvas* and return a per-kind tally."""
    tally: Counter[str] = Counter()
    for item in items:
        draw(item.shape, canvas, item.color)
        tally[kind_of(item.shape)] += 1
        logger.debug("drew %r in %s", item.shape, item.color)
    logger.info(
        "rendered %d shapes (%s)",
        sum(tally.values()),
        ", ".join(f"{k}={tally[k]}" for k in SHAPE_KINDS if tally[k]),
    )
    return tally

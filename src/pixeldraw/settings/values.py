"""Centralized default tables loaded from YAML.

The master source is ``values.yml`` in this package. On import the YAML is
parsed and merged over hard-coded fallbacks, so a missing or malformed file
still leaves the application runnable with the historical defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

logger = logging.getLogger(__name__)

_PKG_DIR = Path(__file__).parent
_YAML_PATH = _PKG_DIR / "values.yml"

# --- Fallback literals ----------------------------------------------------
_FALLBACK_CANVAS: Dict[str, Any] = {
    "width": 800,
    "height": 600,
    "background": (0, 0, 0),
}
_FALLBACK_SCENE: Dict[str, Any] = {
    "shape_count": 100,
    "output": "image.png",
}
_FALLBACK_WEIGHTS: Dict[str, float] = {
    "point": 1.0,
    "line": 1.0,
    "rectangle": 1.0,
    "triangle": 1.0,
    "circle": 6.0,
    "pentagon": 1.0,
}
_FALLBACK_SHAPES: Dict[str, Any] = {
    "circle_radius": (10, 150),
    "pentagon_radius": (30, 80),
    "line_max_length": None,
    "color_range": (0, 255),
}


def _int_pair(v: Any) -> Tuple[int, int] | None:
    if isinstance(v, (list, tuple)) and len(v) == 2:
        try:
            return (int(v[0]), int(v[1]))
        except (TypeError, ValueError):
            return None
    return None


def _load(path: Path) -> Tuple[
    Dict[str, Any], Dict[str, Any], Dict[str, float], Dict[str, Any]
]:
    canvas = dict(_FALLBACK_CANVAS)
    scene = dict(_FALLBACK_SCENE)
    weights = dict(_FALLBACK_WEIGHTS)
    shapes = dict(_FALLBACK_SHAPES)
    if not path.exists():
        logger.warning("%s missing; using built-in defaults", path)
        return canvas, scene, weights, shapes
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("could not read %s (%s); using built-in defaults", path, exc)
        return canvas, scene, weights, shapes
    if not isinstance(raw, dict):
        return canvas, scene, weights, shapes

    cv = raw.get("canvas", {})
    if isinstance(cv, dict):
        for k in ("width", "height"):
            if isinstance(cv.get(k), int) and cv[k] > 0:
                canvas[k] = cv[k]
        bg = cv.get("background")
        if isinstance(bg, list) and len(bg) == 3 and all(isinstance(c, int) for c in bg):
            canvas["background"] = tuple(bg)

    sc = raw.get("scene", {})
    if isinstance(sc, dict):
        if isinstance(sc.get("shape_count"), int) and sc["shape_count"] >= 0:
            scene["shape_count"] = sc["shape_count"]
        if isinstance(sc.get("output"), str):
            scene["output"] = sc["output"]
        w = sc.get("weights")
        if isinstance(w, dict):
            weights.update(
                {
                    k: float(v)
                    for k, v in w.items()
                    if k in _FALLBACK_WEIGHTS and isinstance(v, (int, float))
                }
            )

    sh = raw.get("shapes", {})
    if isinstance(sh, dict):
        for k in ("circle_radius", "pentagon_radius", "color_range"):
            pair = _int_pair(sh.get(k))
            if pair is not None:
                shapes[k] = pair
        lml = sh.get("line_max_length")
        if lml is None or isinstance(lml, int):
            shapes["line_max_length"] = lml

    return canvas, scene, weights, shapes


_canvas, _scene, _weights, _shapes = _load(_YAML_PATH)

# --- Public accessors ----------------------------------------------------
CANVAS_DEFAULTS: Dict[str, Any] = dict(_canvas)
SCENE_DEFAULTS: Dict[str, Any] = dict(_scene)
SHAPE_WEIGHTS: Dict[str, float] = dict(_weights)
SHAPE_DEFAULTS: Dict[str, Any] = dict(_shapes)

__all__ = [
    "CANVAS_DEFAULTS",
    "SCENE_DEFAULTS",
    "SHAPE_WEIGHTS",
    "SHAPE_DEFAULTS",
]

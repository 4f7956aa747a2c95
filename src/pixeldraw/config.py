"""Runtime configuration helpers.

Merges three layers into one :class:`RuntimeConfig`, lowest priority first:
the ``values.yml`` tables (baked into :class:`Settings` defaults), the
persisted ``settings.json`` and CLI overrides from an argparse namespace.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .render.canvas import Color
from .scene.compose import ShapeParams
from .settings.schema import Settings
from .settings.store import SettingsStore

logger = logging.getLogger(__name__)

# CLI attribute name -> Settings field name
_CLI_OVERRIDES = {
    "width": "width",
    "height": "height",
    "count": "shape_count",
    "seed": "seed",
    "output": "output",
    "backend": "backend",
}


@dataclass(slots=True)
class RuntimeConfig:
    settings: Settings
    width: int
    height: int
    shape_count: int
    seed: int | None
    output: str
    backend: str
    background: Color
    weights: dict[str, float]
    params: ShapeParams


def settings_from_args(base: Settings, args: Optional[object]) -> Settings:
    """Return *base* updated with any non-None CLI overrides in *args*.

    The merged result is re-validated, so an out-of-range override raises
    ``pydantic.ValidationError``.
    """
    if args is None:
        return base
    update: dict[str, Any] = {}
    for attr, field in _CLI_OVERRIDES.items():
        v = getattr(args, attr, None)
        if v is not None:
            update[field] = v
    if not update:
        return base
    logger.debug("CLI overrides: %s", update)
    return Settings.model_validate({**base.model_dump(), **update})


def make_runtime_config(
    *, args: Optional[object] = None, settings: Settings | None = None
) -> RuntimeConfig:
    """Build a RuntimeConfig from persisted settings and optional CLI *args*.

    *settings* replaces the persisted settings when given (tests use this to
    avoid touching the settings directory).
    """
    base = settings if settings is not None else SettingsStore.load()
    s = settings_from_args(base, args)
    return RuntimeConfig(
        settings=s,
        width=s.width,
        height=s.height,
        shape_count=s.shape_count,
        seed=s.seed,
        output=s.output,
        backend=s.backend,
        background=Color.from_tuple(s.background),
        weights=dict(s.shape_weights),
        params=ShapeParams(
            circle_radius=s.circle_radius,
            pentagon_radius=s.pentagon_radius,
            line_max_length=s.line_max_length,
            color_range=s.color_range,
        ),
    )

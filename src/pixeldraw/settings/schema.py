"""Pydantic model for user settings."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from .values import CANVAS_DEFAULTS, SCENE_DEFAULTS, SHAPE_DEFAULTS, SHAPE_WEIGHTS

Backend = Literal["pillow", "pygame"]


class Settings(BaseModel):
    """Scene settings persisted to disk.

    Parameters
    ----------
    width, height: Canvas size in pixels.
    shape_count: Number of shapes drawn per scene.
    seed: Random seed; None draws a fresh scene on every run.
    output: Path of the PNG written by the CLI.
    backend: Canvas backend, ``pillow`` (default) or ``pygame``.
    background: Canvas fill color as ``[r, g, b]``.
    shape_weights: Relative likelihood per shape kind.
    circle_radius / pentagon_radius: Inclusive ``[lo, hi]`` radius ranges.
    line_max_length: When set, random line endpoints stay within this
        offset of the start point on each axis.
    color_range: Inclusive ``[lo, hi]`` range for random color channels.
    """

    width: int = Field(default=int(CANVAS_DEFAULTS["width"]))
    height: int = Field(default=int(CANVAS_DEFAULTS["height"]))
    shape_count: int = Field(default=int(SCENE_DEFAULTS["shape_count"]))
    seed: int | None = Field(default=None)
    output: str = Field(default=str(SCENE_DEFAULTS["output"]))
    backend: Backend = Field(default="pillow")
    background: tuple[int, int, int] = Field(
        default=tuple(CANVAS_DEFAULTS["background"])
    )
    shape_weights: dict[str, float] = Field(
        default_factory=lambda: dict(SHAPE_WEIGHTS)
    )
    circle_radius: tuple[int, int] = Field(
        default=tuple(SHAPE_DEFAULTS["circle_radius"])
    )
    pentagon_radius: tuple[int, int] = Field(
        default=tuple(SHAPE_DEFAULTS["pentagon_radius"])
    )
    line_max_length: int | None = Field(default=SHAPE_DEFAULTS["line_max_length"])
    color_range: tuple[int, int] = Field(default=tuple(SHAPE_DEFAULTS["color_range"]))

    @field_validator("width", "height")
    @classmethod
    def _chk_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("canvas dimensions must be > 0")
        return v

    @field_validator("shape_count")
    @classmethod
    def _chk_count(cls, v: int) -> int:
        if v < 0:
            raise ValueError("shape_count must be >= 0")
        return v

    @field_validator("background")
    @classmethod
    def _chk_bg(cls, v: tuple[int, int, int]) -> tuple[int, int, int]:
        if any(not 0 <= c <= 255 for c in v):
            raise ValueError("background channels must be in [0, 255]")
        return v

    @field_validator("shape_weights")
    @classmethod
    def _chk_weights(cls, v: dict[str, float]) -> dict[str, float]:
        unknown = set(v) - set(SHAPE_WEIGHTS)
        if unknown:
            raise ValueError(
                "unknown shape kinds: "
                + ", ".join(sorted(unknown))
                + " (expected one of "
                + ", ".join(SHAPE_WEIGHTS)
                + ")"
            )
        if any(w < 0 for w in v.values()):
            raise ValueError("shape weights must be >= 0")
        return v

    @field_validator("circle_radius", "pentagon_radius")
    @classmethod
    def _chk_radius(cls, v: tuple[int, int]) -> tuple[int, int]:
        lo, hi = v
        if lo < 0 or hi < lo:
            raise ValueError("radius range must satisfy 0 <= lo <= hi")
        return v

    @field_validator("color_range")
    @classmethod
    def _chk_color_range(cls, v: tuple[int, int]) -> tuple[int, int]:
        lo, hi = v
        if not 0 <= lo <= hi <= 255:
            raise ValueError("color range must satisfy 0 <= lo <= hi <= 255")
        return v

    @field_validator("line_max_length")
    @classmethod
    def _chk_line_len(cls, v: int | None) -> int | None:
        if v is not None and v < 0:
            raise ValueError("line_max_length must be >= 0 or null")
        return v

    @model_validator(mode="after")
    def _chk_weights_total(self) -> "Settings":
        if self.shape_count > 0 and not any(
            w > 0 for w in self.shape_weights.values()
        ):
            raise ValueError("at least one shape weight must be > 0")
        return self

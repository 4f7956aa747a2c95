"""Command-line interface for pixeldraw.

Draws a random scene (or replays a recorded one) onto the chosen canvas
backend and writes it to a PNG file. ``python -m pixeldraw`` and the
installed ``pixeldraw`` console script both land in :func:`main`.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from pixeldraw import __version__
from pixeldraw.config import RuntimeConfig, make_runtime_config
from pixeldraw.render.canvas import Color
from pixeldraw.scene.compose import compose_scene
from pixeldraw.scene.record import SceneRecord, replay
from pixeldraw.settings.store import SettingsStore

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    When ``argv`` is None the values are read from ``sys.argv`` as usual.
    Options left unset fall back to persisted settings, then to the
    ``values.yml`` defaults.
    """
    p = argparse.ArgumentParser(
        prog="pixeldraw",
        description="Rasterize a scene of random geometric shapes to a PNG",
    )
    p.add_argument("--width", type=int, default=None, help="Canvas width in px")
    p.add_argument("--height", type=int, default=None, help="Canvas height in px")
    p.add_argument(
        "--count", type=int, default=None, help="Number of shapes to draw"
    )
    p.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: fresh seed per run, logged at INFO)",
    )
    p.add_argument(
        "-o", "--output", type=str, default=None, help="Output PNG path"
    )
    p.add_argument(
        "--backend",
        choices=("pillow", "pygame"),
        default=None,
        help="Canvas backend (default: pillow)",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Open a pygame window with the result (implies --backend pygame)",
    )
    p.add_argument(
        "--dump-scene",
        dest="dump_scene",
        type=str,
        default=None,
        help="Write the drawn scene as JSON to this path",
    )
    p.add_argument(
        "--replay",
        type=str,
        default=None,
        help="Render a scene JSON written by --dump-scene instead of a random scene",
    )
    p.add_argument(
        "--save-settings",
        dest="save_settings",
        action="store_true",
        help="Persist the effective settings to settings.json",
    )
    p.add_argument(
        "--log-level",
        dest="log_level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity (default: INFO)",
    )
    p.add_argument("--version", action="store_true", help="Print version and exit")
    return p.parse_args(argv)


def _make_backend(
    name: str, size: tuple[int, int], background: Color, *, show: bool
) -> Any:
    if show or name == "pygame":
        from pixeldraw.platform.display.pygame_backend import PygameDisplayBackend

        return PygameDisplayBackend(
            size=size, create_window=show, background=background
        )
    from pixeldraw.platform.display.pillow_backend import PillowDisplayBackend

    return PillowDisplayBackend(size=size, background=background)


def _random_scene(cfg: RuntimeConfig) -> SceneRecord:
    seed = cfg.seed
    if seed is None:
        seed = random.SystemRandom().randrange(2**32)
    logger.info(
        "seed %d, %d shapes on %dx%d", seed, cfg.shape_count, cfg.width, cfg.height
    )
    rng = random.Random(seed)
    items = compose_scene(
        cfg.shape_count, cfg.width, cfg.height, rng, cfg.weights, cfg.params
    )
    return SceneRecord.from_items(
        items,
        width=cfg.width,
        height=cfg.height,
        seed=seed,
        background=cfg.background,
    )


def run(argv: list[str] | None = None) -> Path:
    """Render one scene and return the path of the written PNG.

    Raises ``SystemExit(1)`` when the configuration or replay file is
    invalid, when the backend cannot start, or when an output file cannot
    be written.
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = make_runtime_config(args=args)
    except ValidationError as exc:
        logger.error("invalid settings: %s", exc)
        raise SystemExit(1) from None

    if args.replay:
        try:
            record = SceneRecord.load(args.replay)
        except (OSError, ValueError) as exc:
            logger.error("cannot replay %s: %s", args.replay, exc)
            raise SystemExit(1) from None
        logger.info("replaying %d shapes from %s", len(record.shapes), args.replay)
    else:
        record = _random_scene(cfg)

    try:
        backend = _make_backend(
            cfg.backend,
            (record.width, record.height),
            Color.from_tuple(record.background),
            show=args.show,
        )
    except RuntimeError as exc:
        logger.error("cannot start display backend: %s", exc)
        raise SystemExit(1) from None
    canvas = backend.begin_frame()
    replay(record, canvas)
    backend.end_frame()

    out = Path(cfg.output)
    try:
        backend.save_png(str(out))
        if args.dump_scene:
            record.dump(args.dump_scene)
        if args.save_settings:
            SettingsStore.save(cfg.settings)
    except OSError as exc:
        logger.error("could not write output: %s", exc)
        raise SystemExit(1) from None

    if args.show:
        backend.wait_closed()
    return out


def main(argv: list[str] | None = None) -> None:
    """Synchronous entrypoint for the pixeldraw CLI."""
    args = parse_args(argv)
    if args.version:
        print(f"pixeldraw {__version__}")
        return
    try:
        run(argv)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()

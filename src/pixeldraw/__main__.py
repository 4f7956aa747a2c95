"""Console entrypoint for pixeldraw.

Delegates to :mod:`pixeldraw.cli` so that ``python -m pixeldraw`` and the
installed ``pixeldraw`` console script run the same code.
"""

from __future__ import annotations

from pixeldraw.cli import main as cli_main


def main() -> None:
    """Application entrypoint (delegates to :func:`pixeldraw.cli.main`)."""
    cli_main()


if __name__ == "__main__":
    main()

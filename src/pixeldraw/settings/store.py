"""Persisted user settings under ``$PIXELDRAW_HOME``.

The file is plain pydantic JSON. A missing, unreadable or malformed file
never stops a run: :meth:`SettingsStore.load` logs it and falls back to the
packaged defaults.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .schema import Settings

logger = logging.getLogger(__name__)

HOME_ENV = "PIXELDRAW_HOME"
DEFAULT_HOME = "~/.pixeldraw"
SETTINGS_FILE = "settings.json"


class SettingsStore:
    """Load and save :class:`Settings` to disk."""

    @staticmethod
    def home() -> Path:
        return Path(os.environ.get(HOME_ENV) or DEFAULT_HOME).expanduser()

    @classmethod
    def settings_path(cls) -> Path:
        """Return the path to the settings JSON file."""
        return cls.home() / SETTINGS_FILE

    @classmethod
    def load(cls) -> Settings:
        path = cls.settings_path()
        if not path.exists():
            return Settings()
        try:
            # bytes in: pydantic reports bad UTF-8 as a ValidationError
            raw = path.read_bytes()
            return Settings.model_validate_json(raw)
        except (OSError, ValueError) as exc:
            logger.warning("ignoring unreadable settings file %s: %s", path, exc)
            return Settings()

    @classmethod
    def save(cls, settings: Settings) -> Path:
        """Atomically write *settings* and return the file path."""
        path = cls.settings_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_name(path.name + ".tmp")
        try:
            tmp.write_text(settings.model_dump_json(indent=2), encoding="utf-8")
            os.replace(tmp, path)
        finally:
            tmp.unlink(missing_ok=True)
        logger.debug("settings saved to %s", path)
        return path

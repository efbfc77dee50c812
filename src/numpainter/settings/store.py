"""Persistence for rendering settings.

Settings live in ``settings.json`` under ``$NUMPAINTER_HOME`` (default
``~/.numpainter``). Reads never fail: a missing, unreadable or invalid file
yields the built-in defaults. Writes go through a temp file and
``os.replace`` so a crash never leaves a half-written file behind.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .schema import Settings

logger = logging.getLogger(__name__)

SETTINGS_FILE = "settings.json"


class SettingsStore:
    """Load, save and patch the rendering :class:`Settings` on disk."""

    @staticmethod
    def home() -> Path:
        home = os.environ.get("NUMPAINTER_HOME")
        return Path(home or "~/.numpainter").expanduser()

    @classmethod
    def settings_path(cls) -> Path:
        return cls.home() / SETTINGS_FILE

    @classmethod
    def load(cls) -> Settings:
        """Return the stored settings, or defaults when none can be read."""
        path = cls.settings_path()
        if not path.exists():
            return Settings()
        try:
            return Settings.model_validate(json.loads(path.read_text()))
        except (OSError, ValueError, ValidationError) as exc:
            logger.warning(
                "using default rendering settings, %s is unusable: %s", path, exc
            )
            return Settings()

    @classmethod
    def save(cls, settings: Settings) -> Path:
        """Atomically write *settings* and return the file path."""
        path = cls.settings_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(".tmp")
        tmp.write_text(settings.model_dump_json(indent=2))
        os.replace(tmp, path)
        logger.debug("saved rendering settings to %s", path)
        return path

    @classmethod
    def update(cls, **changes: Any) -> Settings:
        """Apply *changes* on top of the stored settings and persist them.

        Unknown field names raise ``ValueError`` and invalid values raise
        pydantic's ``ValidationError``, both before anything is written.
        """
        unknown = set(changes) - set(Settings.model_fields)
        if unknown:
            raise ValueError("unknown settings: " + ", ".join(sorted(unknown)))
        merged = Settings.model_validate({**cls.load().model_dump(), **changes})
        cls.save(merged)
        return merged

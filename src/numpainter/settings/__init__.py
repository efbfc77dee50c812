"""User-tunable rendering settings."""

from .schema import Settings
from .store import SettingsStore

__all__ = ["Settings", "SettingsStore"]

"""Process-wide settings accessor.

Canvases read their rendering settings from here unless they are handed a
:class:`Settings` explicitly. The first access loads the persisted settings
from :class:`SettingsStore`; :func:`update_settings` swaps them at runtime
and notifies registered listeners.
"""
from __future__ import annotations

import logging
from typing import Any, Callable

from .settings.schema import Settings
from .settings.store import SettingsStore

logger = logging.getLogger(__name__)

_SETTINGS: Settings | None = None
_LISTENERS: list[Callable[[Settings], None]] = []


def get_settings() -> Settings:
    """Return the current settings, loading them on first use."""
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = SettingsStore.load()
        logger.debug("loaded settings from %s", SettingsStore.settings_path())
    return _SETTINGS


def update_settings(settings: Settings) -> None:
    """Replace the current settings and notify listeners in registration order."""
    global _SETTINGS
    _SETTINGS = settings
    for cb in list(_LISTENERS):
        cb(settings)


def reset_settings() -> None:
    """Forget the cached settings so the next access reloads them."""
    global _SETTINGS
    _SETTINGS = None


def register_listener(cb: Callable[[Settings], None]) -> None:
    """Register a callback invoked with the new Settings on every update."""
    if cb not in _LISTENERS:
        _LISTENERS.append(cb)


def unregister_listener(cb: Callable[[Settings], None]) -> None:
    if cb in _LISTENERS:
        _LISTENERS.remove(cb)


def persist_settings(**changes: Any) -> Settings:
    """Write *changes* through :class:`SettingsStore` and make them current."""
    settings = SettingsStore.update(**changes)
    update_settings(settings)
    return settings

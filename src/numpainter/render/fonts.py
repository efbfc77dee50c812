"""Font lookup for text drawing.

Fonts are resolved through pygame and cached per ``(name, size)`` so that
repeated ``draw_text`` calls at the same size reuse one font object.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

import pygame

logger = logging.getLogger(__name__)


@lru_cache(maxsize=64)
def get_font(size_px: int, name: Optional[str] = None) -> pygame.font.Font:
    """Return a pygame font of *size_px* pixels.

    When *name* is given it is matched against system fonts; pygame falls
    back to its bundled default face when no match exists. ``None`` selects
    the bundled default directly, which keeps rendering identical across
    machines.
    """
    if not pygame.font.get_init():
        pygame.font.init()
    if name:
        logger.debug("loading system font %r at %dpx", name, size_px)
        return pygame.font.SysFont(name, size_px)
    logger.debug("loading default font at %dpx", size_px)
    return pygame.font.Font(None, size_px)

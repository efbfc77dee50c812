"""Surface allocation helpers.

Surfaces are plain ``pygame.Surface`` objects. :class:`SurfaceConfig`
names the color-channel layouts the Painter allocates and lets callers
recover the layout of an existing surface so a replacement can match it.
"""

from __future__ import annotations

import logging
from enum import Enum

import pygame

logger = logging.getLogger(__name__)


class SurfaceConfig(Enum):
    """Color-channel configuration of a surface: ``(bit depth, alpha)``."""

    ARGB_8888 = (32, True)
    RGB_565 = (16, False)

    @property
    def depth(self) -> int:
        return self.value[0]

    @property
    def has_alpha(self) -> bool:
        return self.value[1]

    @property
    def flags(self) -> int:
        return pygame.SRCALPHA if self.has_alpha else 0

    @classmethod
    def of(cls, surface: pygame.Surface) -> "SurfaceConfig":
        """Return the config that best matches *surface*.

        Anything with per-pixel alpha or a depth above 16 bits maps to
        ``ARGB_8888``.
        """
        if surface.get_flags() & pygame.SRCALPHA or surface.get_bitsize() > 16:
            return cls.ARGB_8888
        return cls.RGB_565


def create_surface(
    width: int, height: int, config: SurfaceConfig = SurfaceConfig.ARGB_8888
) -> pygame.Surface:
    """Allocate a blank surface of *width* x *height* pixels.

    Invalid dimensions are rejected by pygame and its error propagates.
    """
    surface = pygame.Surface((width, height), flags=config.flags, depth=config.depth)
    surface.fill((0, 0, 0, 0))
    logger.debug("allocated %dx%d surface (%s)", width, height, config.name)
    return surface


def create_surface_like(
    width: int, height: int, template: pygame.Surface
) -> pygame.Surface:
    """Allocate a blank surface with the pixel format and flags of *template*.

    Unlike :func:`create_surface` this keeps layouts that have no
    :class:`SurfaceConfig`, such as 24-bit or palettized surfaces.
    """
    surface = pygame.Surface(
        (width, height), template.get_flags() & pygame.SRCALPHA, template
    )
    surface.fill((0, 0, 0, 0))
    logger.debug(
        "allocated %dx%d surface like a %d-bit template",
        width,
        height,
        template.get_bitsize(),
    )
    return surface

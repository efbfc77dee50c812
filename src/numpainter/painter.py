"""Chainable drawing facade over a surface and its canvas.

A :class:`Painter` owns one surface, one canvas bound to it and one
current :class:`~numpainter.render.paint.Paint`. Every draw method sets
the paint it needs, issues exactly one canvas call, resets the paint to
the fixed defaults and returns the painter, so calls can be chained::

    painter = (
        Painter.create(100, 100)
        .draw_circle(40, 0xFF1E88E5)
        .draw_bordered_circle(48, 4, 0xFFFFFFFF)
        .draw_text("42", 30, 62, 36, 0xFFFFFFFF)
    )

Callers must not rely on paint state surviving a draw call. Errors from
the canvas or from pygame propagate unchanged.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Tuple

import pygame

from numpainter.config import get_settings
from numpainter.platform.pygame_canvas import PygameCanvas
from numpainter.render.canvas import Canvas, CanvasFactory
from numpainter.render.paint import DEFAULT_PAINT, ColorLike, Paint, PaintStyle
from numpainter.render.surface import (
    SurfaceConfig,
    create_surface,
    create_surface_like,
)

logger = logging.getLogger(__name__)


def _inset_radius(radius: float, thickness: float) -> int:
    return abs(int(math.ceil(radius - thickness / 2.0)))


class Painter:
    def __init__(
        self, surface: pygame.Surface, *, canvas_factory: CanvasFactory = PygameCanvas
    ) -> None:
        self._canvas_factory = canvas_factory
        self._paint = DEFAULT_PAINT
        self._bind(surface)

    @classmethod
    def create(
        cls,
        width: int,
        height: int,
        config: Optional[SurfaceConfig] = None,
        *,
        canvas_factory: CanvasFactory = PygameCanvas,
    ) -> "Painter":
        """Allocate a blank *width* x *height* surface and wrap it.

        *config* defaults to the ``default_config`` setting.
        """
        if config is None:
            config = get_settings().surface_config
        return cls(create_surface(width, height, config), canvas_factory=canvas_factory)

    def _bind(self, surface: pygame.Surface) -> None:
        self._surface = surface
        self._canvas: Canvas = self._canvas_factory(surface)
        w, h = surface.get_size()
        self._center_x = float(math.ceil(w / 2))
        self._center_y = float(math.ceil(h / 2))

    def _center(self, center: Optional[Tuple[float, float]]) -> Tuple[float, float]:
        if center is None:
            return self._center_x, self._center_y
        return center

    # -- shapes --------------------------------------------------------------

    def draw_circle(
        self,
        radius: float,
        color: ColorLike,
        center: Optional[Tuple[float, float]] = None,
    ) -> "Painter":
        """Fill a circle at *center*, or at the surface center when omitted."""
        cx, cy = self._center(center)
        self.set_paint_parameters(color, PaintStyle.FILL, 0, 0)
        self._canvas.circle(cx, cy, radius, self._paint)
        self.reset_paint_parameters()
        return self

    def draw_bordered_circle(
        self,
        radius: float,
        thickness: float,
        color: ColorLike,
        center: Optional[Tuple[float, float]] = None,
    ) -> "Painter":
        """Stroke a ring whose outer edge sits at roughly *radius*.

        The stroke is centered on ``abs(ceil(radius - thickness / 2))``.
        """
        cx, cy = self._center(center)
        self.set_paint_parameters(color, PaintStyle.STROKE, thickness, 0)
        self._canvas.circle(cx, cy, _inset_radius(radius, thickness), self._paint)
        self.reset_paint_parameters()
        return self

    def draw_rectangle(
        self, left: float, top: float, right: float, bottom: float, color: ColorLike
    ) -> "Painter":
        self.set_paint_parameters(color, PaintStyle.FILL, 0, 0)
        self._canvas.rect(left, top, right, bottom, self._paint)
        self.reset_paint_parameters()
        return self

    def draw_bordered_rectangle(
        self,
        left: float,
        top: float,
        right: float,
        bottom: float,
        thickness: float,
        color: ColorLike,
    ) -> "Painter":
        """Stroke a rectangle inset by half of *thickness*.

        The right and bottom edges are inset as ``abs(edge - thickness / 2)``,
        which inverts the rectangle when an edge is smaller than half the
        thickness.
        """
        self.set_paint_parameters(color, PaintStyle.STROKE, thickness, 0)
        half = thickness / 2.0
        self._canvas.rect(
            left + half, top + half, abs(right - half), abs(bottom - half), self._paint
        )
        self.reset_paint_parameters()
        return self

    def draw_rounded_rectangle(
        self,
        left: float,
        top: float,
        right: float,
        bottom: float,
        rx: float,
        ry: float,
        color: ColorLike,
    ) -> "Painter":
        self.set_paint_parameters(color, PaintStyle.FILL, 0, 0)
        self._canvas.round_rect(left, top, right, bottom, rx, ry, self._paint)
        self.reset_paint_parameters()
        return self

    def draw_bordered_rounded_rectangle(
        self,
        left: float,
        top: float,
        right: float,
        bottom: float,
        rx: float,
        ry: float,
        thickness: float,
        color: ColorLike,
    ) -> "Painter":
        self.set_paint_parameters(color, PaintStyle.STROKE, thickness, 0)
        half = thickness / 2.0
        self._canvas.round_rect(
            left + half,
            top + half,
            abs(right - half),
            abs(bottom - half),
            rx,
            ry,
            self._paint,
        )
        self.reset_paint_parameters()
        return self

    def draw_text(
        self, text: str, x: float, y: float, text_size: float, color: ColorLike
    ) -> "Painter":
        """Draw *text* with its baseline starting at (*x*, *y*)."""
        self.set_paint_parameters(color, PaintStyle.FILL, 0, text_size)
        self._canvas.text(text, x, y, self._paint)
        self.reset_paint_parameters()
        return self

    def draw_arc(
        self,
        left: float,
        top: float,
        right: float,
        bottom: float,
        start_angle: float,
        sweep_angle: float,
        use_center: bool,
        color: ColorLike,
    ) -> "Painter":
        """Fill an arc of the oval inscribed in the given bounds.

        Angles are degrees clockwise from 3 o'clock. With *use_center* the
        result is a wedge, otherwise the segment cut off by the chord.
        """
        self.set_paint_parameters(color, PaintStyle.FILL, 0, 0)
        self._canvas.arc(
            left, top, right, bottom, start_angle, sweep_angle, use_center, self._paint
        )
        self.reset_paint_parameters()
        return self

    def draw_bordered_arc(
        self,
        left: float,
        top: float,
        right: float,
        bottom: float,
        start_angle: float,
        sweep_angle: float,
        use_center: bool,
        stroke_width: float,
        color: ColorLike,
    ) -> "Painter":
        self.set_paint_parameters(color, PaintStyle.STROKE, stroke_width, 0)
        self._canvas.arc(
            left, top, right, bottom, start_angle, sweep_angle, use_center, self._paint
        )
        self.reset_paint_parameters()
        return self

    # -- surface -------------------------------------------------------------

    def scale(self, sx: float, sy: float) -> "Painter":
        """Replace the surface with a copy scaled by (*sx*, *sy*).

        The new surface is ``ceil(w * sx)`` x ``ceil(h * sy)`` with the same
        pixel format and flags. The old surface is dropped.
        """
        old = self._surface
        w, h = old.get_size()
        self.set_surface(
            create_surface_like(int(math.ceil(w * sx)), int(math.ceil(h * sy)), old)
        )
        self._canvas.draw_surface(old, sx, sy)
        logger.debug("scaled surface %dx%d by (%s, %s)", w, h, sx, sy)
        self.reset_paint_parameters()
        return self

    def set_surface(self, surface: pygame.Surface) -> "Painter":
        """Bind to *surface* with a fresh canvas and default paint."""
        self._bind(surface)
        self._paint = DEFAULT_PAINT
        return self

    def set_surface_size(
        self, width: int, height: int, config: Optional[SurfaceConfig] = None
    ) -> "Painter":
        """Bind to a newly allocated blank surface.

        *config* defaults to the ``default_config`` setting.
        """
        if config is None:
            config = get_settings().surface_config
        return self.set_surface(create_surface(width, height, config))

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    @property
    def canvas(self) -> Canvas:
        return self._canvas

    # -- canvas state --------------------------------------------------------

    def save(self) -> "Painter":
        self._canvas.save()
        return self

    def restore(self) -> "Painter":
        self._canvas.restore()
        return self

    def translate(self, dx: float, dy: float) -> "Painter":
        self._canvas.translate(dx, dy)
        return self

    def clip_rect(
        self, left: float, top: float, right: float, bottom: float
    ) -> "Painter":
        self._canvas.clip_rect(left, top, right, bottom)
        return self

    # -- paint state ---------------------------------------------------------

    @property
    def paint(self) -> Paint:
        return self._paint

    def set_color(self, color: ColorLike) -> "Painter":
        self._paint = self._paint.with_color(color)
        return self

    def reset_color(self) -> "Painter":
        return self.set_color(DEFAULT_PAINT.color)

    def set_stroke_width(self, stroke_width: float) -> "Painter":
        self._paint = self._paint.with_stroke_width(stroke_width)
        return self

    def reset_stroke_width(self) -> "Painter":
        return self.set_stroke_width(DEFAULT_PAINT.stroke_width)

    def set_text_size(self, text_size: float) -> "Painter":
        self._paint = self._paint.with_text_size(text_size)
        return self

    def reset_text_size(self) -> "Painter":
        return self.set_text_size(DEFAULT_PAINT.text_size)

    def set_paint_style(self, style: PaintStyle) -> "Painter":
        self._paint = self._paint.with_style(style)
        return self

    def reset_paint_style(self) -> "Painter":
        return self.set_paint_style(DEFAULT_PAINT.style)

    def set_paint_parameters(
        self,
        color: ColorLike,
        style: PaintStyle,
        stroke_width: float,
        text_size: float,
    ) -> "Painter":
        self._paint = Paint(color, style, stroke_width, text_size)
        return self

    def reset_paint_parameters(self) -> "Painter":
        self._paint = DEFAULT_PAINT
        return self

    # -- defaults and center -------------------------------------------------

    @property
    def default_color(self) -> ColorLike:
        return DEFAULT_PAINT.color

    @property
    def default_text_size(self) -> float:
        return DEFAULT_PAINT.text_size

    @property
    def default_stroke_width(self) -> float:
        return DEFAULT_PAINT.stroke_width

    @property
    def default_style(self) -> PaintStyle:
        return DEFAULT_PAINT.style

    @property
    def center_x(self) -> float:
        return self._center_x

    @center_x.setter
    def center_x(self, value: float) -> None:
        self._center_x = value

    @property
    def center_y(self) -> float:
        return self._center_y

    @center_y.setter
    def center_y(self, value: float) -> None:
        self._center_y = value

"""Pygame-based Canvas bound to a single ``pygame.Surface``.

``pygame.draw`` has no notion of paint styles, centered strokes, alpha
compositing or a transform stack, so this module layers those on top:

- ``FILL`` / ``STROKE`` / ``FILL_AND_STROKE`` map to one or two pygame
  draws (width 0 fills, width > 0 outlines). A stroke width of 0 is a
  one-pixel hairline.
- Strokes straddle the geometry: half the width lies outside the shape.
- Translucent colors are drawn into a scratch ``SRCALPHA`` layer and
  alpha-blended onto the target; opaque colors are drawn directly.
- ``translate``/``scale``/``clip_rect`` state is pushed and popped with
  ``save``/``restore``. The clip lives on the canvas and is applied to the
  surface only for the duration of a draw; a clip the caller set on the
  surface is the starting clip and is left in place.

It's suitable for headless use by setting SDL_VIDEODRIVER=dummy before
importing pygame; no display window is ever created.

Example:
    from numpainter.platform.pygame_canvas import PygameCanvas
    from numpainter.render.paint import Paint
    from numpainter.render.surface import create_surface

    canvas = PygameCanvas(create_surface(64, 64))
    canvas.circle(32, 32, 10, Paint(color=0xFF0000FF))
"""

from __future__ import annotations

import math
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

import pygame

from numpainter.config import get_settings
from numpainter.render.canvas import Canvas
from numpainter.render.fonts import get_font
from numpainter.render.paint import RGBA, Paint
from numpainter.settings.schema import Settings

Point = Tuple[float, float]

# (sx, sy, tx, ty, clip)
_State = Tuple[float, float, float, float, pygame.Rect]


def _sorted_rect(
    left: float, top: float, right: float, bottom: float
) -> Tuple[float, float, float, float]:
    return min(left, right), min(top, bottom), max(left, right), max(top, bottom)


def _pg_rect(left: float, top: float, right: float, bottom: float) -> pygame.Rect:
    x0, y0 = int(round(left)), int(round(top))
    x1, y1 = int(round(right)), int(round(bottom))
    return pygame.Rect(x0, y0, x1 - x0, y1 - y0)


class PygameCanvas(Canvas):
    def __init__(self, surface: pygame.Surface, settings: Optional[Settings] = None):
        self._surface = surface
        self._settings = settings if settings is not None else get_settings()
        self._sx = 1.0
        self._sy = 1.0
        self._tx = 0.0
        self._ty = 0.0
        self._stack: List[_State] = []
        # Starts from whatever clip the caller left on the surface
        self._clip = surface.get_clip().copy()

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    @property
    def save_count(self) -> int:
        return len(self._stack)

    # -- transform helpers -------------------------------------------------

    def _map(self, x: float, y: float) -> Point:
        return x * self._sx + self._tx, y * self._sy + self._ty

    def _map_rect(
        self, left: float, top: float, right: float, bottom: float
    ) -> Tuple[float, float, float, float]:
        x0, y0 = self._map(left, top)
        x1, y1 = self._map(right, bottom)
        return _sorted_rect(x0, y0, x1, y1)

    @contextmanager
    def _clipped(self) -> Iterator[None]:
        """Apply this canvas' clip for one draw, then put the surface clip back."""
        previous = self._surface.get_clip()
        self._surface.set_clip(self._clip)
        try:
            yield
        finally:
            self._surface.set_clip(previous)

    def _stroke_px(self, paint: Paint) -> int:
        w = paint.stroke_width * (abs(self._sx) + abs(self._sy)) / 2.0
        return max(1, int(round(w)))

    def _render(self, paint: Paint, draw: Callable[[pygame.Surface, RGBA], None]) -> None:
        rgba = paint.rgba
        if rgba[3] == 0:
            return
        with self._clipped():
            if rgba[3] == 255:
                draw(self._surface, rgba)
                return
            layer = pygame.Surface(self._surface.get_size(), pygame.SRCALPHA)
            draw(layer, rgba)
            self._surface.blit(layer, (0, 0))

    # -- primitives --------------------------------------------------------

    def circle(self, cx: float, cy: float, radius: float, paint: Paint) -> None:
        center = self._map(cx, cy)
        rx = radius * abs(self._sx)
        ry = radius * abs(self._sy)
        if rx == ry:
            self._render(paint, lambda t, c: self._circle(t, c, center, rx, paint))
        else:
            bounds = (center[0] - rx, center[1] - ry, center[0] + rx, center[1] + ry)
            self._render(paint, lambda t, c: self._oval(t, c, bounds, paint))

    def _circle(
        self, target: pygame.Surface, color: RGBA, center: Point, r: float, paint: Paint
    ) -> None:
        if paint.style.fills:
            pygame.draw.circle(target, color, center, r)
        if paint.style.strokes:
            px = self._stroke_px(paint)
            pygame.draw.circle(target, color, center, r + px / 2.0, px)

    def _oval(
        self,
        target: pygame.Surface,
        color: RGBA,
        bounds: Tuple[float, float, float, float],
        paint: Paint,
    ) -> None:
        left, top, right, bottom = bounds
        if paint.style.fills:
            pygame.draw.ellipse(target, color, _pg_rect(left, top, right, bottom))
        if paint.style.strokes:
            px = self._stroke_px(paint)
            h = px / 2.0
            outer = _pg_rect(left - h, top - h, right + h, bottom + h)
            pygame.draw.ellipse(target, color, outer, px)

    def rect(
        self, left: float, top: float, right: float, bottom: float, paint: Paint
    ) -> None:
        self.round_rect(left, top, right, bottom, 0.0, 0.0, paint)

    def round_rect(
        self,
        left: float,
        top: float,
        right: float,
        bottom: float,
        rx: float,
        ry: float,
        paint: Paint,
    ) -> None:
        bounds = self._map_rect(left, top, right, bottom)
        # pygame only knows circular corners
        radius = max(0.0, min(rx * abs(self._sx), ry * abs(self._sy)))

        def _draw(target: pygame.Surface, color: RGBA) -> None:
            x0, y0, x1, y1 = bounds
            if paint.style.fills:
                pygame.draw.rect(
                    target,
                    color,
                    _pg_rect(x0, y0, x1, y1),
                    0,
                    border_radius=int(round(radius)),
                )
            if paint.style.strokes:
                px = self._stroke_px(paint)
                h = px / 2.0
                corner = int(round(radius + h)) if radius > 0 else 0
                pygame.draw.rect(
                    target,
                    color,
                    _pg_rect(x0 - h, y0 - h, x1 + h, y1 + h),
                    px,
                    border_radius=corner,
                )

        self._render(paint, _draw)

    def arc(
        self,
        left: float,
        top: float,
        right: float,
        bottom: float,
        start_angle: float,
        sweep_angle: float,
        use_center: bool,
        paint: Paint,
    ) -> None:
        bounds = self._map_rect(left, top, right, bottom)
        if sweep_angle >= 360.0:
            self._render(paint, lambda t, c: self._oval(t, c, bounds, paint))
            return
        if sweep_angle < 0:
            # negative sweeps wrap instead of closing the oval
            sweep_angle = math.fmod(sweep_angle, 360.0)
        if sweep_angle == 0:
            return
        pts = self._arc_points(bounds, start_angle, sweep_angle, use_center)

        def _draw(target: pygame.Surface, color: RGBA) -> None:
            if paint.style.fills and len(pts) >= 3:
                pygame.draw.polygon(target, color, pts)
            if paint.style.strokes and len(pts) >= 2:
                pygame.draw.lines(target, color, use_center, pts, self._stroke_px(paint))

        self._render(paint, _draw)

    def _arc_points(
        self,
        bounds: Tuple[float, float, float, float],
        start_angle: float,
        sweep_angle: float,
        use_center: bool,
    ) -> Sequence[Point]:
        left, top, right, bottom = bounds
        cx, cy = (left + right) / 2.0, (top + bottom) / 2.0
        rx, ry = (right - left) / 2.0, (bottom - top) / 2.0
        steps = max(1, int(math.ceil(abs(sweep_angle) / self._settings.arc_step_deg)))
        pts: List[Point] = [(cx, cy)] if use_center else []
        for i in range(steps + 1):
            a = math.radians(start_angle + sweep_angle * i / steps)
            # screen y grows downward, so positive angles run clockwise
            pts.append((cx + rx * math.cos(a), cy + ry * math.sin(a)))
        return pts

    def text(self, s: str, x: float, y: float, paint: Paint) -> None:
        size_px = int(round(paint.text_size * abs(self._sy)))
        rgba = paint.rgba
        if not s or size_px <= 0 or rgba[3] == 0:
            return
        font = get_font(size_px, self._settings.font_name)
        glyphs = font.render(s, self._settings.antialias_text, rgba[:3])
        if rgba[3] < 255:
            glyphs.set_alpha(rgba[3])
        px, py = self._map(x, y)
        # (x, y) is the baseline origin
        origin = (int(round(px)), int(round(py - font.get_ascent())))
        with self._clipped():
            self._surface.blit(glyphs, origin)

    def draw_surface(self, src: pygame.Surface, sx: float, sy: float) -> None:
        w = int(math.ceil(src.get_width() * sx * abs(self._sx)))
        h = int(math.ceil(src.get_height() * sy * abs(self._sy)))
        if src.get_bitsize() >= 24:
            scaled = pygame.transform.smoothscale(src, (w, h))
        else:
            scaled = pygame.transform.scale(src, (w, h))
        ox, oy = self._map(0.0, 0.0)
        with self._clipped():
            self._surface.blit(scaled, (int(round(ox)), int(round(oy))))

    # -- state -------------------------------------------------------------

    def translate(self, dx: float, dy: float) -> None:
        self._tx += dx * self._sx
        self._ty += dy * self._sy

    def scale(self, sx: float, sy: float) -> None:
        self._sx *= sx
        self._sy *= sy

    def clip_rect(self, left: float, top: float, right: float, bottom: float) -> None:
        area = _pg_rect(*self._map_rect(left, top, right, bottom))
        self._clip = self._clip.clip(area)

    def save(self) -> int:
        self._stack.append(
            (self._sx, self._sy, self._tx, self._ty, self._clip.copy())
        )
        return len(self._stack)

    def restore(self) -> None:
        if not self._stack:
            raise RuntimeError("restore() called without a matching save()")
        self._sx, self._sy, self._tx, self._ty, self._clip = self._stack.pop()

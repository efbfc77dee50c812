from __future__ import annotations

import pygame
import pytest

from numpainter import Painter, SurfaceConfig
from numpainter.platform.pygame_canvas import PygameCanvas
from numpainter.render.paint import Paint, PaintStyle
from numpainter.render.surface import create_surface
from numpainter.settings.schema import Settings

BLUE = 0xFF0000FF
WHITE = 0xFFFFFFFF
CLEAR = (0, 0, 0, 0)


def _px(surface: pygame.Surface, x: int, y: int) -> tuple[int, int, int, int]:
    return tuple(surface.get_at((x, y)))  # type: ignore[return-value]


def _ink(surface: pygame.Surface) -> int:
    return pygame.mask.from_surface(surface).count()


def test_filled_circle_at_center() -> None:
    p = Painter.create(100, 100, SurfaceConfig.ARGB_8888)
    p.draw_circle(10, BLUE)
    assert p.center_x == 50
    assert _px(p.surface, 50, 50) == (0, 0, 255, 255)
    assert _px(p.surface, 50, 45) == (0, 0, 255, 255)
    assert _px(p.surface, 50, 65) == CLEAR
    assert _px(p.surface, 5, 5) == CLEAR


def test_bordered_circle_outer_edge_near_radius() -> None:
    p = Painter.create(100, 100)
    p.draw_bordered_circle(20, 4, WHITE)
    assert _px(p.surface, 68, 50) == (255, 255, 255, 255)
    assert _px(p.surface, 50, 50) == CLEAR
    assert _px(p.surface, 75, 50) == CLEAR


def test_bordered_rectangle_stroke_straddles_inset_bounds() -> None:
    p = Painter.create(60, 60)
    p.draw_bordered_rectangle(0, 0, 50, 50, 4, WHITE)
    assert _px(p.surface, 1, 25) == (255, 255, 255, 255)
    assert _px(p.surface, 3, 25) == (255, 255, 255, 255)
    assert _px(p.surface, 5, 25) == CLEAR
    assert _px(p.surface, 25, 25) == CLEAR
    assert _px(p.surface, 55, 25) == CLEAR


def test_filled_rectangle_and_rounded_corner() -> None:
    p = Painter.create(40, 40)
    p.draw_rectangle(0, 0, 10, 10, BLUE)
    p.draw_rounded_rectangle(20, 20, 40, 40, 8, 8, BLUE)
    assert _px(p.surface, 9, 9) == (0, 0, 255, 255)
    assert _px(p.surface, 10, 10) == CLEAR
    assert _px(p.surface, 30, 30) == (0, 0, 255, 255)
    # corner is cut away
    assert _px(p.surface, 20, 20) == CLEAR


def test_transparent_paint_draws_nothing() -> None:
    p = Painter.create(20, 20)
    p.draw_rectangle(0, 0, 20, 20, (0, 255, 0))
    p.draw_circle(8, 0x00000000)
    assert _px(p.surface, 10, 10) == (0, 255, 0, 255)


def test_translucent_paint_blends() -> None:
    p = Painter.create(20, 20)
    p.draw_rectangle(0, 0, 20, 20, 0xFFFF0000)
    p.draw_rectangle(0, 0, 20, 20, 0x800000FF)
    r, g, b, a = _px(p.surface, 10, 10)
    assert 100 < r < 160
    assert 100 < b < 160
    assert g == 0
    assert a == 255


def test_wedge_covers_lower_right_quadrant() -> None:
    p = Painter.create(40, 40)
    p.draw_arc(0, 0, 40, 40, 0, 90, True, WHITE)
    assert _px(p.surface, 30, 30)[3] == 255
    assert _px(p.surface, 10, 10) == CLEAR
    assert _px(p.surface, 30, 10) == CLEAR


def test_full_sweep_draws_oval() -> None:
    p = Painter.create(40, 40)
    p.draw_arc(0, 0, 40, 40, 0, 360, False, WHITE)
    assert _px(p.surface, 20, 20)[3] == 255
    assert _px(p.surface, 10, 30)[3] == 255


def test_bordered_arc_is_open() -> None:
    p = Painter.create(40, 40)
    p.draw_bordered_arc(0, 0, 40, 40, 0, 180, False, 2, WHITE)
    assert _ink(p.surface) > 0
    assert _px(p.surface, 20, 20) == CLEAR
    # upper half untouched
    assert _px(p.surface, 20, 1) == CLEAR


def test_text_renders_above_baseline() -> None:
    p = Painter.create(60, 60)
    p.draw_text("8", 10, 40, 30, WHITE)
    assert _ink(p.surface) > 0
    below = p.surface.subsurface(pygame.Rect(0, 50, 60, 10))
    assert _ink(below) == 0


def test_text_size_zero_draws_nothing() -> None:
    p = Painter.create(60, 60)
    p.draw_text("8", 10, 40, 0, WHITE)
    p.draw_text("", 10, 40, 20, WHITE)
    assert _ink(p.surface) == 0


def test_scale_copies_pixels() -> None:
    p = Painter.create(10, 10)
    p.draw_rectangle(0, 0, 10, 10, 0xFFFF0000)
    p.scale(2, 2)
    assert p.surface.get_size() == (20, 20)
    assert _px(p.surface, 10, 10) == (255, 0, 0, 255)


def test_scale_keeps_16_bit_config() -> None:
    p = Painter.create(8, 6, SurfaceConfig.RGB_565)
    p.draw_rectangle(0, 0, 8, 6, 0xFFFFFFFF)
    p.scale(0.5, 0.5)
    assert p.surface.get_size() == (4, 3)
    assert SurfaceConfig.of(p.surface) is SurfaceConfig.RGB_565
    assert _px(p.surface, 1, 1)[:3] == (255, 255, 255)


def test_save_restore_translation() -> None:
    canvas = PygameCanvas(create_surface(20, 20))
    paint = Paint(WHITE)
    assert canvas.save() == 1
    canvas.translate(10, 10)
    canvas.rect(0, 0, 2, 2, paint)
    canvas.restore()
    canvas.rect(0, 0, 2, 2, paint)
    assert _px(canvas.surface, 11, 11)[3] == 255
    assert _px(canvas.surface, 1, 1)[3] == 255
    assert _px(canvas.surface, 5, 5) == CLEAR
    assert canvas.save_count == 0


def test_clip_is_restored() -> None:
    p = Painter.create(20, 20)
    p.save().clip_rect(0, 0, 10, 10)
    p.draw_rectangle(0, 0, 20, 20, WHITE)
    assert _px(p.surface, 5, 5)[3] == 255
    assert _px(p.surface, 15, 15) == CLEAR
    p.restore().draw_rectangle(0, 0, 20, 20, BLUE)
    assert _px(p.surface, 15, 15) == (0, 0, 255, 255)


def test_canvas_scale_affects_geometry() -> None:
    canvas = PygameCanvas(create_surface(20, 20))
    canvas.scale(2, 2)
    canvas.rect(0, 0, 5, 5, Paint(WHITE))
    assert _px(canvas.surface, 9, 9)[3] == 255
    assert _px(canvas.surface, 11, 11) == CLEAR


def test_unbalanced_restore_raises() -> None:
    p = Painter.create(4, 4)
    with pytest.raises(RuntimeError):
        p.restore()


def test_fill_and_stroke_covers_both() -> None:
    canvas = PygameCanvas(create_surface(40, 40))
    canvas.circle(20, 20, 10, Paint(WHITE, PaintStyle.FILL_AND_STROKE, 4, 0))
    assert _px(canvas.surface, 20, 20)[3] == 255
    assert _px(canvas.surface, 31, 20)[3] == 255


def test_hairline_stroke_for_zero_width() -> None:
    canvas = PygameCanvas(create_surface(20, 20))
    canvas.rect(2, 2, 18, 18, Paint(WHITE, PaintStyle.STROKE, 0, 0))
    assert _ink(canvas.surface) > 0
    assert _px(canvas.surface, 10, 10) == CLEAR


def test_explicit_settings_are_used() -> None:
    coarse = Settings(arc_step_deg=45)
    canvas = PygameCanvas(create_surface(40, 40), settings=coarse)
    canvas.arc(0, 0, 40, 40, 0, 90, True, Paint(WHITE))
    # a 90 degree wedge at 45 degree steps is a triangle-ish fan
    assert _px(canvas.surface, 25, 25)[3] == 255


def test_canvas_clip_stays_off_the_surface() -> None:
    surf = create_surface(20, 20)
    first = PygameCanvas(surf)
    first.clip_rect(0, 0, 5, 5)
    first.rect(0, 0, 20, 20, Paint(BLUE))
    assert surf.get_clip() == pygame.Rect(0, 0, 20, 20)
    assert _px(surf, 15, 15) == CLEAR
    second = PygameCanvas(surf)
    second.rect(0, 0, 20, 20, Paint(WHITE))
    assert _px(surf, 15, 15)[3] == 255


def test_caller_clip_is_honored_and_kept() -> None:
    surf = create_surface(20, 20)
    surf.set_clip(pygame.Rect(0, 0, 10, 10))
    p = Painter(surf)
    p.draw_rectangle(0, 0, 20, 20, WHITE)
    assert _px(surf, 5, 5)[3] == 255
    assert _px(surf, 15, 15) == CLEAR
    assert surf.get_clip() == pygame.Rect(0, 0, 10, 10)


def test_preset_stroke_does_not_hollow_filled_circle() -> None:
    p = Painter.create(20, 20)
    p.set_paint_style(PaintStyle.STROKE).set_stroke_width(5)
    p.draw_circle(6, BLUE)
    assert _px(p.surface, 10, 10) == (0, 0, 255, 255)


def test_negative_sweep_wraps_modulo_360() -> None:
    p = Painter.create(40, 40)
    p.draw_arc(0, 0, 40, 40, 0, -400, True, WHITE)
    # -40 degree wedge: counter-clockwise from 3 o'clock
    assert _px(p.surface, 34, 15)[3] == 255
    assert _px(p.surface, 30, 30) == CLEAR
    assert _px(p.surface, 10, 20) == CLEAR


def test_negative_full_turn_draws_nothing() -> None:
    p = Painter.create(40, 40)
    p.draw_arc(0, 0, 40, 40, 0, -360, True, WHITE)
    assert _ink(p.surface) == 0


def test_scale_keeps_24_bit_pixels() -> None:
    p = Painter(pygame.Surface((10, 10), 0, 24))
    p.draw_rectangle(0, 0, 10, 10, 0xFFFF0000)
    p.scale(2, 2)
    assert p.surface.get_bitsize() == 24
    assert not p.surface.get_flags() & pygame.SRCALPHA
    assert _px(p.surface, 15, 15)[:3] == (255, 0, 0)

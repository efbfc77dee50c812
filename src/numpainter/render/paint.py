"""Paint state shared by the Painter and the drawing contexts.

A :class:`Paint` is an immutable description of how the next draw call is
rendered: its color, fill/stroke style, stroke width and text size. Colors
are accepted either as packed ``0xAARRGGBB`` integers or as RGB(A) tuples
and only converted to RGBA tuples when they reach a canvas.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple, Union

RGBA = Tuple[int, int, int, int]
ColorLike = Union[int, Tuple[int, int, int], Tuple[int, int, int, int]]

TRANSPARENT = 0x00000000


class PaintStyle(Enum):
    FILL = "fill"
    STROKE = "stroke"
    FILL_AND_STROKE = "fill_and_stroke"

    @property
    def fills(self) -> bool:
        return self is not PaintStyle.STROKE

    @property
    def strokes(self) -> bool:
        return self is not PaintStyle.FILL


def argb(a: int, r: int, g: int, b: int) -> int:
    """Pack channel values into a ``0xAARRGGBB`` integer."""
    return ((a & 0xFF) << 24) | ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def to_rgba(color: ColorLike) -> RGBA:
    """Return *color* as an ``(r, g, b, a)`` tuple.

    Integers are read as ``0xAARRGGBB``; three-element tuples are opaque.
    """
    if isinstance(color, int):
        c = color & 0xFFFFFFFF
        return (c >> 16) & 0xFF, (c >> 8) & 0xFF, c & 0xFF, (c >> 24) & 0xFF
    if len(color) == 3:
        r, g, b = color  # type: ignore[misc]
        return int(r), int(g), int(b), 255
    if len(color) == 4:
        r, g, b, a = color  # type: ignore[misc]
        return int(r), int(g), int(b), int(a)
    raise ValueError(f"color must have 3 or 4 channels, got {len(color)}")


@dataclass(frozen=True, slots=True)
class Paint:
    color: ColorLike = TRANSPARENT
    style: PaintStyle = PaintStyle.FILL
    stroke_width: float = 0
    text_size: float = 0

    @property
    def rgba(self) -> RGBA:
        return to_rgba(self.color)

    def with_color(self, color: ColorLike) -> "Paint":
        return replace(self, color=color)

    def with_style(self, style: PaintStyle) -> "Paint":
        return replace(self, style=style)

    def with_stroke_width(self, stroke_width: float) -> "Paint":
        return replace(self, stroke_width=stroke_width)

    def with_text_size(self, text_size: float) -> "Paint":
        return replace(self, text_size=text_size)


DEFAULT_PAINT = Paint()

"""Drawing-context protocol.

The Painter never touches pixels itself: every draw is issued through an
object implementing :class:`Canvas`. A canvas is bound to exactly one
surface for its whole lifetime and carries a transform/clip state stack.
Geometry is given as floats in surface coordinates before the canvas
transform is applied.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol

from .paint import Paint


class Canvas(Protocol):
    @property
    def surface(self) -> Any:
        ...

    def circle(self, cx: float, cy: float, radius: float, paint: Paint) -> None:
        ...

    def rect(
        self, left: float, top: float, right: float, bottom: float, paint: Paint
    ) -> None:
        ...

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
        ...

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
        ...

    def text(self, s: str, x: float, y: float, paint: Paint) -> None:
        ...

    def draw_surface(self, src: Any, sx: float, sy: float) -> None:
        ...

    def translate(self, dx: float, dy: float) -> None:
        ...

    def scale(self, sx: float, sy: float) -> None:
        ...

    def clip_rect(self, left: float, top: float, right: float, bottom: float) -> None:
        ...

    def save(self) -> int:
        ...

    def restore(self) -> None:
        ...


CanvasFactory = Callable[[Any], Canvas]

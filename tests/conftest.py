from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Iterator

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from numpainter import config  # noqa: E402
from numpainter.render.paint import Paint  # noqa: E402


class FakeCanvas:
    """Canvas stand-in that records every call with the paint it received."""

    def __init__(self, surface: Any) -> None:
        self.surface = surface
        self.calls: list[tuple[str, tuple, Paint | None]] = []
        self.depth = 0

    def circle(self, cx: float, cy: float, radius: float, paint: Paint) -> None:
        self.calls.append(("circle", (cx, cy, radius), paint))

    def rect(
        self, left: float, top: float, right: float, bottom: float, paint: Paint
    ) -> None:
        self.calls.append(("rect", (left, top, right, bottom), paint))

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
        self.calls.append(("round_rect", (left, top, right, bottom, rx, ry), paint))

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
        self.calls.append(
            (
                "arc",
                (left, top, right, bottom, start_angle, sweep_angle, use_center),
                paint,
            )
        )

    def text(self, s: str, x: float, y: float, paint: Paint) -> None:
        self.calls.append(("text", (s, x, y), paint))

    def draw_surface(self, src: Any, sx: float, sy: float) -> None:
        self.calls.append(("draw_surface", (src, sx, sy), None))

    def translate(self, dx: float, dy: float) -> None:
        self.calls.append(("translate", (dx, dy), None))

    def scale(self, sx: float, sy: float) -> None:  # pragma: no cover
        self.calls.append(("scale", (sx, sy), None))

    def clip_rect(self, left: float, top: float, right: float, bottom: float) -> None:
        self.calls.append(("clip_rect", (left, top, right, bottom), None))

    def save(self) -> int:
        self.depth += 1
        self.calls.append(("save", (), None))
        return self.depth

    def restore(self) -> None:
        self.depth -= 1
        self.calls.append(("restore", (), None))


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("NUMPAINTER_HOME", str(tmp_path / "home"))
    config.reset_settings()
    yield
    config.reset_settings()


@pytest.fixture
def fake_canvases() -> list[FakeCanvas]:
    return []


@pytest.fixture
def fake_factory(fake_canvases: list[FakeCanvas]) -> Any:
    def _factory(surface: Any) -> FakeCanvas:
        canvas = FakeCanvas(surface)
        fake_canvases.append(canvas)
        return canvas

    return _factory


@pytest.fixture
def fake_canvas_cls() -> type[FakeCanvas]:
    return FakeCanvas

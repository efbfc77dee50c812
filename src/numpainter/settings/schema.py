"""Pydantic model for rendering settings."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from ..render.surface import SurfaceConfig


class Settings(BaseModel):
    """Rendering settings persisted to disk.

    Parameters
    ----------
    font_name: System font used by ``draw_text``. ``None`` selects pygame's
        bundled default face.
    antialias_text: Render glyphs with antialiasing.
    arc_step_deg: Angular step used when polygonizing arcs. Smaller steps
        give smoother curves at the cost of more vertices.
    default_config: Name of the :class:`SurfaceConfig` used by
        ``Painter.create`` when no config is passed.
    """

    font_name: str | None = Field(default=None)
    antialias_text: bool = Field(default=True)
    arc_step_deg: float = Field(default=2.0)
    default_config: str = Field(default=SurfaceConfig.ARGB_8888.name)

    @field_validator("arc_step_deg")
    @classmethod
    def _chk_arc_step(cls, v: float) -> float:
        if v <= 0 or v > 45:
            raise ValueError("arc_step_deg must be in (0, 45]")
        return v

    @field_validator("default_config")
    @classmethod
    def _chk_config(cls, v: str) -> str:
        names = [c.name for c in SurfaceConfig]
        if v not in names:
            raise ValueError("invalid default_config: must be one of " + ", ".join(names))
        return v

    @property
    def surface_config(self) -> SurfaceConfig:
        return SurfaceConfig[self.default_config]

"""numpainter package root.

The project version is defined here as the single source of truth and
exposed via ``__version__``. The packaging configuration (pyproject.toml)
reads this attribute using ``version = { attr = "numpainter.__version__" }``.
"""

from numpainter.painter import Painter
from numpainter.render.paint import Paint, PaintStyle, argb
from numpainter.render.surface import SurfaceConfig

__all__ = ["Painter", "Paint", "PaintStyle", "SurfaceConfig", "argb", "__version__"]

__version__ = "0.1.0"

"""Rendering subsystem -- QPainter drawing onto QImage surfaces."""

from jointcount.rendering.background import BackgroundLoader, load_image
from jointcount.rendering.render_engine import MarkerColors, RenderEngine, new_surface

__all__ = [
    "BackgroundLoader",
    "MarkerColors",
    "RenderEngine",
    "load_image",
    "new_surface",
]

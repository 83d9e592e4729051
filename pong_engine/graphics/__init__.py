"""
Graphics module.

Exports:
- ShapeBatch, Rect: Batched flat-colored rectangles (ModernGL)
- SurfaceOverlay: Pygame surface composited over the frame
"""

from pong_engine.graphics.shapes import ShapeBatch, Rect
from pong_engine.graphics.overlay import SurfaceOverlay, create_fullscreen_quad

__all__ = [
    "ShapeBatch",
    "Rect",
    "SurfaceOverlay",
    "create_fullscreen_quad",
]

"""UI module: text rendering onto pygame surfaces."""

from pong_engine.ui.renderer import UIRenderer, FontConfig

__all__ = [
    "UIRenderer",
    "FontConfig",
]

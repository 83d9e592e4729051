"""
UI Renderer for drawing text.

Provides a simple API for UI rendering that works with pygame
surfaces while the main game uses ModernGL for GPU rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Optional

import pygame


@dataclass
class FontConfig:
    """Font configuration."""
    name: Optional[str] = None  # None = pygame default
    size: int = 16
    bold: bool = False


class UIRenderer:
    """
    Renderer for UI elements.

    Draws directly to a pygame surface. For games using ModernGL,
    the surface is composited onto the final output by a
    SurfaceOverlay.

    Usage:
        renderer = UIRenderer(overlay.surface)
        renderer.draw_text("Hello", 60, 35, color=(255, 255, 255), align="center")
    """

    def __init__(self, surface: pygame.Surface, default_font: Optional[FontConfig] = None):
        self.surface = surface
        self._fonts: dict[tuple, pygame.font.Font] = {}
        self._default_font = default_font or FontConfig()

    def set_surface(self, surface: pygame.Surface) -> None:
        """Change the target surface."""
        self.surface = surface

    def get_font(self, config: Optional[FontConfig] = None) -> pygame.font.Font:
        """Get or create a font from config."""
        if config is None:
            config = self._default_font

        key = (config.name, config.size, config.bold)

        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            if config.name:
                font = pygame.font.Font(config.name, config.size)
            else:
                font = pygame.font.SysFont(None, config.size)
            font.set_bold(config.bold)
            self._fonts[key] = font

        return self._fonts[key]

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        color: Tuple[int, ...] = (255, 255, 255),
        font_config: Optional[FontConfig] = None,
        align: str = "left",
    ) -> pygame.Rect:
        """
        Draw a single line of text.

        Args:
            text: Text to render
            x, y: Position (y is the top of the line)
            color: Text color (RGB or RGBA)
            font_config: Font settings
            align: "left", "center", or "right"

        Returns:
            Bounding rect of rendered text
        """
        font = self.get_font(font_config)
        text_surface = font.render(text, True, color[:3])
        text_rect = text_surface.get_rect()

        if align == "center":
            text_rect.centerx = int(x)
        elif align == "right":
            text_rect.right = int(x)
        else:
            text_rect.left = int(x)
        text_rect.top = int(y)

        if len(color) == 4 and color[3] < 255:
            text_surface.set_alpha(color[3])

        self.surface.blit(text_surface, text_rect)
        return text_rect

    def measure_text(
        self,
        text: str,
        font_config: Optional[FontConfig] = None,
    ) -> Tuple[int, int]:
        """Measure text dimensions."""
        font = self.get_font(font_config)
        return font.size(text)

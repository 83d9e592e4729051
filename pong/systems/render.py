"""
Render systems - shapes through ModernGL, score as text overlay.
"""

from __future__ import annotations

from pong_engine.core import Entity, RenderSystem
from pong_engine.graphics import ShapeBatch, SurfaceOverlay
from pong_engine.ui import FontConfig, UIRenderer
from pong.components import Size, Sprite, Transform
from pong.geometry import Playfield
from pong.match import MatchContext


class ShapeRenderSystem(RenderSystem):
    """Draws every entity with a Sprite as a flat rectangle."""

    required_components = [Transform, Size, Sprite]
    priority = 10

    def __init__(self, batch: ShapeBatch):
        super().__init__()
        self.batch = batch

    def pre_render(self, alpha: float) -> None:
        self.batch.begin()

    def render_entity(self, entity: Entity, alpha: float) -> None:
        transform = entity.get(Transform)
        size = entity.get(Size)
        self.batch.draw_rect(
            transform.x,
            transform.y,
            size.width,
            size.height,
            entity.get(Sprite).color,
        )

    def post_render(self, alpha: float) -> None:
        self.batch.end()


class ScoreboardRenderSystem(RenderSystem):
    """
    Displays both score counters at the top of the screen.

    The left counter is centered over the left half, the right
    counter over the right half.
    """

    priority = 0

    def __init__(
        self,
        match: MatchContext,
        renderer: UIRenderer,
        overlay: SurfaceOverlay,
        playfield: Playfield,
        font_size: int = 48,
        color: tuple[int, int, int] = (255, 255, 255),
        margin: int = 20,
    ):
        super().__init__()
        self.match = match
        self.renderer = renderer
        self.overlay = overlay
        self.playfield = playfield
        self.font = FontConfig(size=font_size)
        self.color = color
        self.margin = margin

    def render(self, alpha: float) -> None:
        if not self.enabled:
            return

        width = int(self.playfield.width)
        height = int(self.playfield.height)
        if self.overlay.size != (width, height):
            self.overlay.resize(width, height)
            self.renderer.set_surface(self.overlay.surface)

        score = self.match.score
        self.overlay.clear()
        self.renderer.draw_text(
            str(score.left), width * 0.25, self.margin,
            color=self.color, font_config=self.font, align="center",
        )
        self.renderer.draw_text(
            str(score.right), width * 0.75, self.margin,
            color=self.color, font_config=self.font, align="center",
        )
        self.overlay.draw()

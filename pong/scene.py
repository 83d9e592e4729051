"""
The match scene - builds the world and wires every system.

Usage:
    game = Game(config.game_config())
    game.scene_manager.push(PongScene(game, config))
    game.run()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pong_engine.core import Event, Scene, World
from pong_engine.graphics import ShapeBatch, SurfaceOverlay
from pong_engine.ui import FontConfig, UIRenderer
from pong.config import PongConfig
from pong.events import MatchEvent
from pong.geometry import Playfield
from pong.match import MatchContext
from pong.spawn import setup_match
from pong.systems import (
    CollisionSystem,
    ExitSystem,
    PaddleControlSystem,
    RespawnSystem,
    ScoreboardRenderSystem,
    ShapeRenderSystem,
    VelocitySystem,
)

if TYPE_CHECKING:
    from pong_engine.core import Game


logger = logging.getLogger(__name__)


class PongScene(Scene):
    """A single endless match between two paddles."""

    def __init__(self, game: Game, config: PongConfig | None = None):
        super().__init__(game)
        self.config = config or PongConfig()

        self.world = World(game.event_bus)
        self.match = MatchContext(respawn_delay=self.config.respawn_delay)
        self.playfield = Playfield(self.config.window_width, self.config.window_height)

        width, height = self.config.window_width, self.config.window_height
        self.batch = ShapeBatch(game.ctx, width, height)
        self.overlay = SurfaceOverlay(game.ctx, width, height)
        self.ui = UIRenderer(
            self.overlay.surface,
            FontConfig(size=self.config.score_font_size),
        )

        self._setup_systems()
        setup_match(self.world, self.config)

        self.world.event_bus.subscribe(MatchEvent.POINT_SCORED, self._on_point_scored)

    def _setup_systems(self) -> None:
        # Fixed schedule
        self.world.add_system(
            PaddleControlSystem(self.game.input, self.playfield, self.config.paddle_speed)
        )
        self.world.add_system(VelocitySystem(self.match))
        self.world.add_system(CollisionSystem(self.match))

        # Frame schedule
        self.world.add_system(ExitSystem(self.game.input, self.game.quit))
        self.world.add_system(RespawnSystem(self.match, self.config))

        # Render
        self.world.add_system(ShapeRenderSystem(self.batch))
        self.world.add_system(
            ScoreboardRenderSystem(
                self.match,
                self.ui,
                self.overlay,
                self.playfield,
                font_size=self.config.score_font_size,
                color=self.config.score_color,
                margin=self.config.score_margin,
            )
        )

    def _on_point_scored(self, event: Event) -> None:
        logger.info("%s scores: %s", event["side"].name.title(), event["score"])

    def on_resize(self, width: int, height: int) -> None:
        self.playfield.resize(width, height)
        self.batch.set_projection(width, height)

    def on_destroy(self) -> None:
        self.world.event_bus.unsubscribe(MatchEvent.POINT_SCORED, self._on_point_scored)
        super().on_destroy()

    def update(self, dt: float) -> None:
        pass

    def render(self, alpha: float) -> None:
        pass

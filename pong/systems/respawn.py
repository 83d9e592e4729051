"""
Respawn system - brings the ball back after a point.
"""

from __future__ import annotations

import logging

from pong_engine.core import Schedule, System
from pong.config import PongConfig
from pong.events import MatchEvent
from pong.match import MatchContext
from pong.spawn import spawn_ball


logger = logging.getLogger(__name__)


class RespawnSystem(System):
    """Counts down the respawn timer with real frame time."""

    schedule = Schedule.FRAME
    priority = 10

    def __init__(self, match: MatchContext, config: PongConfig):
        super().__init__()
        self.match = match
        self.config = config

    def update(self, dt: float) -> None:
        if not self.enabled or not self.match.tick_respawn(dt):
            return

        ball = spawn_ball(self.world, self.config)
        logger.info("Ball respawned (score %s)", self.match.score)
        self.world.event_bus.publish(MatchEvent.BALL_SPAWNED, ball=ball)

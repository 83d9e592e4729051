"""
Collision system - ball vs paddles and scoring zones.
"""

from __future__ import annotations

import logging

from pong_engine.core import Entity, System
from pong.components import Ball, Collider, ScoringZone, Size, Transform, Velocity
from pong.events import MatchEvent
from pong.geometry import bounding_box
from pong.match import MatchContext


logger = logging.getLogger(__name__)


class CollisionSystem(System):
    """
    Resolves ball contacts once per fixed tick.

    - Paddle overlap: the ball's horizontal velocity is reversed.
    - Scoring zone overlap: the ball is despawned, the zone's side
      scores and the match starts respawning.

    Every overlapping collider is handled, so a ball touching two
    colliders in the same tick gets both responses.
    """

    required_components = [Collider, Transform, Size]
    priority = 10

    def __init__(self, match: MatchContext):
        super().__init__()
        self.match = match

    def update(self, dt: float) -> None:
        if not self.enabled:
            return

        ball = self.world.single(Ball, Transform, Size, Velocity, allow_missing=True)
        if ball is None:
            return

        ball_box = bounding_box(ball)
        for collider in list(self.get_entities()):
            if ball_box.intersects(bounding_box(collider)):
                self._on_contact(ball, collider)

    def _on_contact(self, ball: Entity, collider: Entity) -> None:
        zone = collider.try_get(ScoringZone)

        if zone is None:
            velocity = ball.get(Velocity)
            velocity.vx = -velocity.vx
            self.world.event_bus.publish(MatchEvent.PADDLE_HIT, ball=ball, paddle=collider)
            return

        self.world.destroy_entity(ball)
        self.match.score_point(zone.side)
        if self.match.begin_respawn():
            logger.debug("Respawning ball in %.1fs", self.match.respawn_delay)

        self.world.event_bus.publish(
            MatchEvent.POINT_SCORED,
            side=zone.side,
            score=self.match.score,
        )

"""
Movement system - applies velocity to position.
"""

from __future__ import annotations

from pong_engine.core import Entity, System
from pong.components import Transform, Velocity
from pong.match import MatchContext


class VelocitySystem(System):
    """
    Integrates position from velocity for every moving entity.

    Frozen while the match is not PLAYING.
    """

    required_components = [Transform, Velocity]
    priority = 20

    def __init__(self, match: MatchContext):
        super().__init__()
        self.match = match

    def update(self, dt: float) -> None:
        if not self.match.is_playing:
            return
        super().update(dt)

    def process_entity(self, entity: Entity, dt: float) -> None:
        transform = entity.get(Transform)
        velocity = entity.get(Velocity)
        transform.x += velocity.vx * dt
        transform.y += velocity.vy * dt

"""
Pong components - data only.

Entity kinds are expressed by marker components:
- Paddle: Transform, Size, Paddle, Collider, Sprite
- Ball: Transform, Size, Velocity, Ball, Sprite
- Scoring zone: Transform, Size, ScoringZone, Collider (never drawn)
"""

from __future__ import annotations

from enum import Enum, auto

from pydantic import Field

from pong_engine.core.component import Component


class PaddleRole(Enum):
    """Who controls a paddle."""
    PLAYER = auto()
    OPPONENT = auto()


class Side(Enum):
    """Side of the playfield."""
    LEFT = auto()
    RIGHT = auto()


class Transform(Component):
    """
    Center position in world space.

    Attributes:
        x: Horizontal position, 0 at the middle of the playfield
        y: Vertical position, 0 at the middle, up is positive
    """
    x: float = 0.0
    y: float = 0.0


class Size(Component):
    """Full extent of an entity."""
    width: float = Field(gt=0)
    height: float = Field(gt=0)


class Velocity(Component):
    """
    Movement velocity.

    Attributes:
        vx: Horizontal velocity (pixels/second)
        vy: Vertical velocity (pixels/second)
    """
    vx: float = 0.0
    vy: float = 0.0


class Paddle(Component):
    """Marks a paddle and who moves it."""
    role: PaddleRole = PaddleRole.PLAYER


class Ball(Component):
    """Marks the ball."""


class Collider(Component):
    """Marks an entity the ball can hit."""


class ScoringZone(Component):
    """Region past a side of the playfield; touching it scores."""
    side: Side


class Sprite(Component):
    """Flat color used to draw the entity (RGBA, 0-1)."""
    color: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)

"""
Entity factories for a match.

Usage:
    setup_match(world, config)   # two paddles, two scoring zones, one ball
"""

from __future__ import annotations

import math

from pong_engine.core import Entity, World
from pong.components import (
    Ball,
    Collider,
    Paddle,
    PaddleRole,
    ScoringZone,
    Side,
    Size,
    Sprite,
    Transform,
    Velocity,
)
from pong.config import PongConfig


def spawn_paddle(world: World, config: PongConfig, role: PaddleRole) -> Entity:
    """Create a paddle at its start position, vertically centered."""
    x = config.paddle_start_x
    if role is PaddleRole.OPPONENT:
        x = -x

    paddle = world.create_entity(f"Paddle_{role.name.title()}")
    paddle.add(Transform(x=x, y=0.0))
    paddle.add(Size(width=config.paddle_width, height=config.paddle_height))
    paddle.add(Paddle(role=role))
    paddle.add(Collider())
    paddle.add(Sprite(color=config.paddle_color))
    return paddle


def spawn_ball(world: World, config: PongConfig) -> Entity:
    """Create the ball at its start position with the start velocity."""
    vx, vy = config.ball_velocity()
    x, y = config.ball_start

    ball = world.create_entity("Ball")
    ball.add(Transform(x=x, y=y))
    ball.add(Size(width=config.ball_size, height=config.ball_size))
    ball.add(Velocity(vx=vx, vy=vy))
    ball.add(Ball())
    ball.add(Sprite(color=config.ball_color))
    return ball


def spawn_scoring_zone(world: World, config: PongConfig, side: Side) -> Entity:
    """
    Create the invisible zone just outside one side of the playfield.

    Zones are unbounded vertically: there are no walls, so a ball
    drifting past the top or bottom edge still scores once it crosses.
    """
    offset = config.window_width / 2 + config.scoring_zone_width / 2
    x = -offset if side is Side.LEFT else offset

    zone = world.create_entity(f"ScoringZone_{side.name.title()}")
    zone.add(Transform(x=x, y=0.0))
    zone.add(Size(width=config.scoring_zone_width, height=math.inf))
    zone.add(ScoringZone(side=side))
    zone.add(Collider())
    return zone


def setup_match(world: World, config: PongConfig) -> None:
    """Populate a world with everything a match starts with."""
    for role in PaddleRole:
        spawn_paddle(world, config, role)
    for side in Side:
        spawn_scoring_zone(world, config, side)
    spawn_ball(world, config)

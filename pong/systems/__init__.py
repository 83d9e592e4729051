"""
Pong systems.

Fixed schedule, in order:
    PaddleControlSystem -> VelocitySystem -> CollisionSystem

Frame schedule:
    ExitSystem, RespawnSystem

Render:
    ShapeRenderSystem, ScoreboardRenderSystem
"""

from pong.systems.paddle import (
    PaddleControlSystem,
    read_direction,
    paddle_bounds,
    move_paddle,
)
from pong.systems.movement import VelocitySystem
from pong.systems.collision import CollisionSystem
from pong.systems.respawn import RespawnSystem
from pong.systems.exit import ExitSystem
from pong.systems.render import ShapeRenderSystem, ScoreboardRenderSystem

__all__ = [
    "PaddleControlSystem",
    "read_direction",
    "paddle_bounds",
    "move_paddle",
    "VelocitySystem",
    "CollisionSystem",
    "RespawnSystem",
    "ExitSystem",
    "ShapeRenderSystem",
    "ScoreboardRenderSystem",
]

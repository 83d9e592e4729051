"""
Paddle control - maps held keys to vertical paddle movement.
"""

from __future__ import annotations

from pong_engine.core import Action, Entity, System
from pong_engine.input import InputHandler
from pong.components import Paddle, PaddleRole, Size, Transform
from pong.geometry import Playfield


# role -> (up action, down action)
PADDLE_ACTIONS: dict[PaddleRole, tuple[Action, Action]] = {
    PaddleRole.PLAYER: (Action.PLAYER_UP, Action.PLAYER_DOWN),
    PaddleRole.OPPONENT: (Action.OPPONENT_UP, Action.OPPONENT_DOWN),
}


def read_direction(up: bool, down: bool) -> float:
    """
    Vertical direction from the two movement keys.

    Down is checked last, so it wins when both are held.
    """
    direction = 0.0

    if up:
        direction = 1.0

    if down:
        direction = -1.0

    return direction


def paddle_bounds(playfield_height: float, paddle_height: float) -> tuple[float, float]:
    """
    Lowest and highest center y keeping the paddle fully visible.

    A playfield shorter than the paddle pins it to the center.
    """
    upper = playfield_height / 2 - paddle_height / 2
    if upper < 0:
        return 0.0, 0.0
    return -upper, upper


def move_paddle(
    y: float,
    direction: float,
    speed: float,
    dt: float,
    lower: float,
    upper: float,
) -> float:
    """Next paddle y, clamped to [lower, upper]."""
    new_y = y + direction * speed * dt
    return min(max(new_y, lower), upper)


class PaddleControlSystem(System):
    """Moves every paddle according to the keys bound to its role."""

    required_components = [Paddle, Transform, Size]
    priority = 30

    def __init__(self, input: InputHandler, playfield: Playfield, speed: float):
        super().__init__()
        self.input = input
        self.playfield = playfield
        self.speed = speed

    def process_entity(self, entity: Entity, dt: float) -> None:
        up_action, down_action = PADDLE_ACTIONS[entity.get(Paddle).role]
        direction = read_direction(
            self.input.is_action_pressed(up_action),
            self.input.is_action_pressed(down_action),
        )

        transform = entity.get(Transform)
        lower, upper = paddle_bounds(self.playfield.height, entity.get(Size).height)
        transform.y = move_paddle(transform.y, direction, self.speed, dt, lower, upper)

"""Gameplay events published on the engine event bus."""

from enum import Enum, auto


class MatchEvent(Enum):
    """
    Match events.

    Data:
        PADDLE_HIT: ball, paddle
        POINT_SCORED: side, score
        BALL_SPAWNED: ball
    """
    PADDLE_HIT = auto()
    POINT_SCORED = auto()
    BALL_SPAWNED = auto()

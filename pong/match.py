"""
Match state: score, game state and the respawn timer.

A MatchContext is owned by the scene and handed to the systems that
read or write it, so a whole match can be driven without a window.

State machine:

    PLAYING --(ball enters a scoring zone)--> RESPAWNING
    RESPAWNING --(respawn timer elapses)--> PLAYING

The respawn timer exists only while RESPAWNING.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from pong.components import Side


class GameState(Enum):
    """Phase of the match."""
    PLAYING = auto()
    RESPAWNING = auto()


@dataclass
class Score:
    """Points per side. Counters only ever grow."""
    left: int = 0
    right: int = 0

    def increment(self, side: Side) -> int:
        """Add a point to a side and return its new total."""
        if side is Side.LEFT:
            self.left += 1
            return self.left
        self.right += 1
        return self.right

    def __str__(self) -> str:
        return f"{self.left} - {self.right}"


@dataclass
class RespawnTimer:
    """One-shot countdown."""
    duration: float
    elapsed: float = 0.0

    @property
    def finished(self) -> bool:
        return self.elapsed >= self.duration

    @property
    def remaining(self) -> float:
        return max(0.0, self.duration - self.elapsed)

    def tick(self, dt: float) -> bool:
        """Advance by dt seconds; True once the duration has passed."""
        self.elapsed += dt
        return self.finished


@dataclass
class MatchContext:
    """
    Shared match state.

    Attributes:
        respawn_delay: Seconds between a point and the next ball
        score: Running score
        state: Current phase
        respawn_timer: Active countdown, only while RESPAWNING
    """
    respawn_delay: float = 3.0
    score: Score = field(default_factory=Score)
    state: GameState = GameState.PLAYING
    respawn_timer: Optional[RespawnTimer] = None

    @property
    def is_playing(self) -> bool:
        return self.state is GameState.PLAYING

    def score_point(self, side: Side) -> int:
        """Credit a point to the counter of the given side."""
        return self.score.increment(side)

    def begin_respawn(self) -> bool:
        """
        Enter RESPAWNING and start the respawn timer.

        Returns:
            False if the match was already respawning (timer untouched)
        """
        if self.state is GameState.RESPAWNING:
            return False

        self.state = GameState.RESPAWNING
        self.respawn_timer = RespawnTimer(self.respawn_delay)
        return True

    def tick_respawn(self, dt: float) -> bool:
        """
        Advance the respawn timer.

        Returns:
            True on the tick the timer elapses; the match is then
            back in PLAYING and the caller must spawn the ball.
        """
        if self.state is not GameState.RESPAWNING or self.respawn_timer is None:
            return False

        if not self.respawn_timer.tick(dt):
            return False

        self.respawn_timer = None
        self.state = GameState.PLAYING
        return True

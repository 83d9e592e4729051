"""
Pong - a two-paddle match built on pong_engine.

Run with:
    python -m pong [settings.json]
"""

from pong.config import PongConfig
from pong.match import GameState, MatchContext, Score
from pong.scene import PongScene

__version__ = "0.1.0"

__all__ = [
    "PongConfig",
    "GameState",
    "MatchContext",
    "Score",
    "PongScene",
]

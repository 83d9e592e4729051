"""
Gameplay configuration.

All tunable constants of a match live in one pydantic model so they
are validated once at launch and can be overridden from a JSON file:

    {"paddle_speed": 500, "respawn_delay": 1.5}
"""

from __future__ import annotations

import math
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pong_engine.core.game import GameConfig


Color = tuple[float, float, float, float]


class PongConfig(BaseModel):
    """
    Match settings.

    Sizes are in pixels, speeds in pixels per second, times in seconds.
    """

    model_config = ConfigDict(extra='forbid', frozen=True)

    # Window
    title: str = "Pong"
    window_width: int = Field(800, gt=0)
    window_height: int = Field(600, gt=0)
    fixed_timestep: float = Field(1 / 64, gt=0)
    target_fps: int = Field(60, gt=0)
    background_color: tuple[float, float, float] = (0.0, 0.0, 0.0)

    # Paddles
    paddle_width: float = Field(20.0, gt=0)
    paddle_height: float = Field(120.0, gt=0)
    paddle_speed: float = Field(400.0, gt=0)
    paddle_color: Color = (1.0, 1.0, 1.0, 1.0)

    # Ball
    ball_size: float = Field(20.0, gt=0)
    ball_speed: float = Field(500.0, gt=0)
    ball_start: tuple[float, float] = (0.0, 0.0)
    ball_direction: tuple[float, float] = (-1.0, 0.0)
    ball_color: Color = (1.0, 1.0, 1.0, 1.0)

    # Scoring
    scoring_zone_width: float = Field(20.0, gt=0)
    respawn_delay: float = Field(3.0, gt=0)

    # Score display
    score_font_size: int = Field(48, gt=0)
    score_color: tuple[int, int, int] = (255, 255, 255)
    score_margin: int = Field(20, ge=0)

    @field_validator('ball_direction')
    @classmethod
    def _direction_reaches_a_side(cls, value: tuple[float, float]) -> tuple[float, float]:
        # vx never becomes zero, so the ball always reaches a scoring zone
        if value[0] == 0:
            raise ValueError("ball_direction must have a horizontal component")
        return value

    @classmethod
    def from_file(cls, path: Path | str) -> PongConfig:
        """
        Load settings from a JSON file; missing keys keep their defaults.

        Raises:
            FileNotFoundError: If the file does not exist
            pydantic.ValidationError: If a value is invalid
        """
        return cls.model_validate_json(Path(path).read_text())

    @property
    def paddle_start_x(self) -> float:
        """Center x of the player paddle; the opponent is mirrored."""
        return -self.window_width / 2 + self.paddle_width + self.paddle_width / 2

    def ball_velocity(self) -> tuple[float, float]:
        """Start velocity: normalized start direction times ball speed."""
        dx, dy = self.ball_direction
        length = math.hypot(dx, dy)
        return (dx / length * self.ball_speed, dy / length * self.ball_speed)

    def game_config(self) -> GameConfig:
        """Engine configuration for this match."""
        return GameConfig(
            title=self.title,
            width=self.window_width,
            height=self.window_height,
            target_fps=self.target_fps,
            fixed_timestep=self.fixed_timestep,
            clear_color=self.background_color,
        )

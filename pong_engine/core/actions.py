"""
Input action definitions.

Actions abstract raw keys into semantic actions.
Game logic should use Actions, not raw keys. This enables:
- Key rebinding
- Cleaner game code

Usage:
    # Check if action is held
    if input.is_action_pressed(Action.PLAYER_UP):
        ...

    # Check if action was just pressed this frame
    if input.is_action_just_pressed(Action.QUIT):
        ...
"""

from enum import Enum, auto

import pygame


class Action(Enum):
    """Semantic input actions."""

    # Left paddle
    PLAYER_UP = auto()
    PLAYER_DOWN = auto()

    # Right paddle
    OPPONENT_UP = auto()
    OPPONENT_DOWN = auto()

    # System
    QUIT = auto()


# Default key bindings (can be customized)
DEFAULT_KEY_BINDINGS: dict[Action, list[int]] = {
    Action.PLAYER_UP: [pygame.K_w],
    Action.PLAYER_DOWN: [pygame.K_s],
    Action.OPPONENT_UP: [pygame.K_UP],
    Action.OPPONENT_DOWN: [pygame.K_DOWN],
    Action.QUIT: [pygame.K_q],
}

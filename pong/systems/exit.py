"""
Exit system - quits the game on the quit key.
"""

from __future__ import annotations

import logging
from typing import Callable

from pong_engine.core import Action, Schedule, System
from pong_engine.input import InputHandler


logger = logging.getLogger(__name__)


class ExitSystem(System):
    """Calls the quit callback when Q is pressed."""

    schedule = Schedule.FRAME
    priority = 100

    def __init__(self, input: InputHandler, quit: Callable[[], None]):
        super().__init__()
        self.input = input
        self._quit = quit

    def update(self, dt: float) -> None:
        if self.enabled and self.input.is_action_just_pressed(Action.QUIT):
            logger.info("User pressed Q key. Exiting...")
            self._quit()

"""Input handling module."""

from pong_engine.input.handler import InputHandler, InputState, InputEvent

__all__ = [
    "InputHandler",
    "InputState",
    "InputEvent",
]

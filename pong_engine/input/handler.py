"""
Input handler with action-based abstraction.

Translates raw keyboard events into semantic Actions for game logic.

Usage:
    if input.is_action_pressed(Action.PLAYER_UP):
        direction = 1.0

    if input.is_action_just_pressed(Action.QUIT):
        game.quit()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import pygame

from pong_engine.core.actions import Action, DEFAULT_KEY_BINDINGS
from pong_engine.core.events import EventBus


class InputEvent(Enum):
    """Input-specific events."""
    ACTION_PRESSED = "input.action_pressed"
    ACTION_RELEASED = "input.action_released"


@dataclass
class InputState:
    """Complete input state for current frame."""
    # Action states
    actions_pressed: set[Action] = field(default_factory=set)
    actions_just_pressed: set[Action] = field(default_factory=set)
    actions_just_released: set[Action] = field(default_factory=set)

    # Raw key states (for edge cases)
    keys_pressed: set[int] = field(default_factory=set)
    keys_just_pressed: set[int] = field(default_factory=set)


class InputHandler:
    """
    Handles keyboard input processing.

    Key events are folded into the held state as they arrive;
    update() then derives the just-pressed/just-released sets once
    per frame.
    """

    def __init__(self, event_bus: EventBus | None = None):
        self.event_bus = event_bus

        # Current and previous frame states
        self._state = InputState()
        self._prev_actions: set[Action] = set()
        self._prev_keys: set[int] = set()

        # Key bindings (action -> list of keys)
        self._key_bindings = {
            action: list(keys) for action, keys in DEFAULT_KEY_BINDINGS.items()
        }
        self._reverse_key_bindings: dict[int, list[Action]] = {}
        self._rebuild_reverse_bindings()

    def _rebuild_reverse_bindings(self) -> None:
        """Build reverse lookup: key -> actions."""
        self._reverse_key_bindings.clear()
        for action, keys in self._key_bindings.items():
            for key in keys:
                self._reverse_key_bindings.setdefault(key, []).append(action)

    # Public API

    def is_action_pressed(self, action: Action) -> bool:
        """Check if an action is currently held down."""
        return action in self._state.actions_pressed

    def is_action_just_pressed(self, action: Action) -> bool:
        """Check if an action was just pressed this frame."""
        return action in self._state.actions_just_pressed

    def is_action_just_released(self, action: Action) -> bool:
        """Check if an action was just released this frame."""
        return action in self._state.actions_just_released

    def is_key_pressed(self, key: int) -> bool:
        """Check if a raw key is pressed."""
        return key in self._state.keys_pressed

    # Key binding management

    def bind_key(self, action: Action, key: int) -> None:
        """Add a key binding for an action."""
        keys = self._key_bindings.setdefault(action, [])
        if key not in keys:
            keys.append(key)
        self._rebuild_reverse_bindings()

    def unbind_key(self, action: Action, key: int) -> None:
        """Remove a key binding for an action."""
        if key in self._key_bindings.get(action, []):
            self._key_bindings[action].remove(key)
        self._rebuild_reverse_bindings()

    def get_bindings(self, action: Action) -> list[int]:
        """Get all key bindings for an action."""
        return self._key_bindings.get(action, []).copy()

    # Frame update

    def process_event(self, event: pygame.event.Event) -> None:
        """Process a pygame event."""
        if event.type == pygame.KEYDOWN:
            self._on_key_down(event.key)

        elif event.type == pygame.KEYUP:
            self._on_key_up(event.key)

        elif event.type == pygame.WINDOWFOCUSLOST:
            # Key-up events are not delivered while unfocused
            self._state.keys_pressed.clear()
            self._state.actions_pressed.clear()

    def update(self) -> None:
        """
        Update input state for new frame.

        Call this once per frame, after events were processed.
        """
        self._state.actions_just_pressed = self._state.actions_pressed - self._prev_actions
        self._state.actions_just_released = self._prev_actions - self._state.actions_pressed
        self._state.keys_just_pressed = self._state.keys_pressed - self._prev_keys

        if self.event_bus:
            for action in self._state.actions_just_pressed:
                self.event_bus.publish(InputEvent.ACTION_PRESSED, action=action)
            for action in self._state.actions_just_released:
                self.event_bus.publish(InputEvent.ACTION_RELEASED, action=action)

        # Save current state for next frame
        self._prev_actions = self._state.actions_pressed.copy()
        self._prev_keys = self._state.keys_pressed.copy()

    def _on_key_down(self, key: int) -> None:
        """Handle key press."""
        self._state.keys_pressed.add(key)

        for action in self._reverse_key_bindings.get(key, []):
            self._state.actions_pressed.add(action)

    def _on_key_up(self, key: int) -> None:
        """Handle key release."""
        self._state.keys_pressed.discard(key)

        # Unmap from actions (only if no other keys for that action are pressed)
        for action in self._reverse_key_bindings.get(key, []):
            still_pressed = any(
                other_key != key and other_key in self._state.keys_pressed
                for other_key in self._key_bindings.get(action, [])
            )
            if not still_pressed:
                self._state.actions_pressed.discard(action)

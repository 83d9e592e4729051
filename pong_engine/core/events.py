"""
Typed event bus for decoupled communication.

Uses Enums for event types to prevent magic strings and enable
IDE autocomplete.

Usage:
    # Define events
    class MatchEvent(Enum):
        POINT_SCORED = auto()

    # Subscribe
    event_bus.subscribe(MatchEvent.POINT_SCORED, on_point_scored)

    # Publish
    event_bus.publish(MatchEvent.POINT_SCORED, side=Side.LEFT, score=score)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable
from weakref import WeakMethod, ref


logger = logging.getLogger(__name__)


class EngineEvent(Enum):
    """Built-in engine events."""
    # Lifecycle
    GAME_START = auto()
    GAME_QUIT = auto()

    # Window
    WINDOW_RESIZED = auto()

    # Entity
    ENTITY_CREATED = auto()
    ENTITY_DESTROYED = auto()
    COMPONENT_ADDED = auto()
    COMPONENT_REMOVED = auto()


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: The event type (Enum member)
        data: Dictionary of event-specific data
    """
    type: Enum
    data: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        """Get event data by key."""
        return self.data.get(key, default)

    def __getitem__(self, key: str) -> Any:
        """Get event data by key (dict-style)."""
        return self.data[key]


# Type alias for event handlers
EventHandler = Callable[[Event], None]


@dataclass(eq=False)
class Subscription:
    """A handler registered for one event type."""
    priority: int
    handler_ref: Any

    def resolve(self) -> EventHandler | None:
        """The live handler, or None once a weak target was collected."""
        if isinstance(self.handler_ref, (ref, WeakMethod)):
            return self.handler_ref()
        return self.handler_ref


class EventBus:
    """
    Central event bus for publish/subscribe messaging.

    Features:
    - Typed events (Enum-based)
    - Priority ordering
    - Weak references (auto-cleanup when handlers are deleted)

    Events published from inside a handler are queued and delivered
    after the current dispatch finishes.
    """

    def __init__(self):
        self._subscriptions: dict[Enum, list[Subscription]] = {}
        self._event_queue: list[Event] = []
        self._is_publishing = False

    def subscribe(
        self,
        event_type: Enum,
        handler: EventHandler,
        priority: int = 0,
        weak: bool = True,
    ) -> None:
        """
        Subscribe to an event type.

        Args:
            event_type: The event type to listen for
            handler: Callback function(event: Event)
            priority: Higher priority handlers are called first (default 0)
            weak: If True, use weak reference (handler auto-removed if deleted)
        """
        if weak:
            if hasattr(handler, '__self__'):
                handler_ref = WeakMethod(handler)
            else:
                handler_ref = ref(handler)
        else:
            handler_ref = handler

        # Insert sorted by priority (highest first), after equal priorities
        subscriptions = self._subscriptions.setdefault(event_type, [])
        insert_idx = len(subscriptions)
        for i, subscription in enumerate(subscriptions):
            if priority > subscription.priority:
                insert_idx = i
                break

        subscriptions.insert(insert_idx, Subscription(priority, handler_ref))

    def unsubscribe(self, event_type: Enum, handler: EventHandler) -> None:
        """
        Unsubscribe from an event type.

        Args:
            event_type: The event type
            handler: The handler to remove
        """
        if event_type not in self._subscriptions:
            return

        self._subscriptions[event_type] = [
            s for s in self._subscriptions[event_type]
            if s.resolve() != handler
        ]

    def handler_count(self, event_type: Enum) -> int:
        """Number of live handlers for an event type."""
        return sum(
            1 for s in self._subscriptions.get(event_type, [])
            if s.resolve() is not None
        )

    def publish(self, event_type: Enum, **data: Any) -> Event:
        """
        Publish an event.

        Args:
            event_type: The event type
            **data: Event data as keyword arguments

        Returns:
            The published Event
        """
        event = Event(type=event_type, data=data)

        if self._is_publishing:
            self._event_queue.append(event)
        else:
            self._dispatch(event)

        return event

    def clear(self, event_type: Enum | None = None) -> None:
        """
        Clear handlers.

        Args:
            event_type: If specified, only clear handlers for this type.
                       If None, clear all handlers.
        """
        if event_type is None:
            self._subscriptions.clear()
        elif event_type in self._subscriptions:
            del self._subscriptions[event_type]

    def _dispatch(self, event: Event) -> None:
        """Dispatch event to handlers."""
        self._is_publishing = True
        dead: list[Subscription] = []

        # Handlers may subscribe or unsubscribe while we iterate
        for subscription in list(self._subscriptions.get(event.type, [])):
            handler = subscription.resolve()
            if handler is None:
                dead.append(subscription)
                continue

            try:
                handler(event)
            except Exception:
                logger.exception("Error in event handler for %s", event.type)

        if dead:
            self._subscriptions[event.type] = [
                s for s in self._subscriptions.get(event.type, [])
                if s not in dead
            ]

        self._is_publishing = False

        while self._event_queue:
            self._dispatch(self._event_queue.pop(0))

"""
Scene management system.

Scenes represent different game states. The SceneManager holds a
stack of scenes; only the top scene is updated and rendered.
Stack changes are deferred until the start of the next update.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import pygame

    from pong_engine.core.game import Game
    from pong_engine.core.world import World


class Scene(ABC):
    """
    Abstract base class for game scenes.

    Each scene owns its update logic, rendering, event handling
    and optionally a World of entities and systems.

    Lifecycle:
        1. __init__: Called when scene is created
        2. on_enter: Called when scene becomes active
        3. update/frame_update/render: Called each frame while active
        4. on_exit: Called when scene is removed or covered
        5. on_destroy: Called when scene is permanently removed
    """

    def __init__(self, game: Game):
        self.game = game
        self.world: World | None = None
        self._is_active = False

    @property
    def is_active(self) -> bool:
        """Whether this scene is currently the top scene."""
        return self._is_active

    def on_enter(self) -> None:
        """Called when scene becomes active."""
        self._is_active = True

    def on_exit(self) -> None:
        """Called when scene is deactivated."""
        self._is_active = False

    def on_destroy(self) -> None:
        """Called when scene is permanently removed from the stack."""
        if self.world:
            self.world.clear()

    def on_resize(self, width: int, height: int) -> None:
        """Called when the window is resized."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """
        Update scene logic.

        Args:
            dt: Delta time in seconds (fixed timestep)
        """

    def frame_update(self, dt: float) -> None:
        """
        Per-frame update, run once per rendered frame.

        Args:
            dt: Real time since the previous frame in seconds
        """

    @abstractmethod
    def render(self, alpha: float) -> None:
        """
        Render the scene.

        Args:
            alpha: Interpolation factor (0-1) for smooth rendering
        """

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a pygame event.

        Returns:
            True if the event was consumed (don't propagate)
        """
        return False


class SceneManager:
    """Manages a stack of scenes; the top scene is the active one."""

    def __init__(self, game: Game):
        self.game = game
        self._stack: list[Scene] = []
        self._pending_operations: list[tuple[str, Any]] = []

    @property
    def current(self) -> Scene | None:
        """Get the current (top) scene."""
        return self._stack[-1] if self._stack else None

    @property
    def is_empty(self) -> bool:
        """Check if scene stack is empty."""
        return len(self._stack) == 0

    def push(self, scene: Scene) -> None:
        """Push a new scene onto the stack."""
        self._pending_operations.append(("push", scene))

    def pop(self) -> None:
        """Pop the current scene from the stack."""
        self._pending_operations.append(("pop", None))

    def clear(self) -> None:
        """Clear all scenes from the stack."""
        self._pending_operations.append(("clear", None))
        self._process_pending()

    def update(self, dt: float) -> None:
        """Run one fixed update on the current scene and its world."""
        self._process_pending()

        scene = self.current
        if scene:
            scene.update(dt)
            if scene.world:
                scene.world.update(dt)

    def frame_update(self, dt: float) -> None:
        """Run one per-frame update on the current scene and its world."""
        self._process_pending()

        scene = self.current
        if scene:
            scene.frame_update(dt)
            if scene.world:
                scene.world.frame_update(dt)

    def render(self, alpha: float) -> None:
        """Render the current scene."""
        scene = self.current
        if scene:
            scene.render(alpha)
            if scene.world:
                scene.world.render(alpha)

    def handle_event(self, event: pygame.event.Event) -> None:
        """Pass event to the current scene."""
        if self.current:
            self.current.handle_event(event)

    def on_resize(self, width: int, height: int) -> None:
        """Notify all scenes of window resize."""
        for scene in self._stack:
            scene.on_resize(width, height)

    def _process_pending(self) -> None:
        """Process pending scene operations."""
        while self._pending_operations:
            op, arg = self._pending_operations.pop(0)

            if op == "push":
                self._do_push(arg)
            elif op == "pop":
                self._do_pop()
            elif op == "clear":
                while self._stack:
                    self._do_pop()

    def _do_push(self, scene: Scene) -> None:
        """Execute push operation."""
        if self._stack:
            self._stack[-1].on_exit()
        self._stack.append(scene)
        scene.on_enter()

    def _do_pop(self) -> None:
        """Execute pop operation."""
        if self._stack:
            scene = self._stack.pop()
            scene.on_exit()
            scene.on_destroy()

            if self._stack:
                self._stack[-1].on_enter()

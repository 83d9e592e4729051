"""
Core Game class with fixed timestep game loop.

The Game class is the main entry point for the engine. It handles:
- Window creation (Pygame + ModernGL)
- Fixed timestep update loop (deterministic physics)
- Per-frame update and variable render loop
- Scene management delegation
"""

from __future__ import annotations

import logging
import time

import pygame
import moderngl

from pong_engine.core.clock import FixedTimestep
from pong_engine.core.scene import SceneManager
from pong_engine.core.events import EventBus, EngineEvent
from pong_engine.input.handler import InputHandler


logger = logging.getLogger(__name__)


class GameConfig:
    """Configuration for the game engine."""

    def __init__(
        self,
        title: str = "Pong",
        width: int = 800,
        height: int = 600,
        target_fps: int = 60,
        fixed_timestep: float = 1 / 64,
        max_frame_skip: int = 5,
        vsync: bool = True,
        fullscreen: bool = False,
        resizable: bool = True,
        clear_color: tuple[float, float, float] = (0.0, 0.0, 0.0),
    ):
        self.title = title
        self.width = width
        self.height = height
        self.target_fps = target_fps
        self.fixed_timestep = fixed_timestep
        self.max_frame_skip = max_frame_skip
        self.vsync = vsync
        self.fullscreen = fullscreen
        self.resizable = resizable
        self.clear_color = clear_color


class Game:
    """
    Main game engine class.

    Implements a fixed timestep game loop with variable rendering.
    Gameplay runs at a constant rate while per-frame work (timers,
    UI) and rendering follow the display.

    Usage:
        config = GameConfig(title="Pong", width=800, height=600)
        game = Game(config)
        game.scene_manager.push(MyStartScene(game))
        game.run()
    """

    def __init__(self, config: GameConfig | None = None):
        self.config = config or GameConfig()
        self._running = False

        pygame.init()

        # Set OpenGL attributes
        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MAJOR_VERSION, 3)
        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MINOR_VERSION, 3)
        pygame.display.gl_set_attribute(
            pygame.GL_CONTEXT_PROFILE_MASK,
            pygame.GL_CONTEXT_PROFILE_CORE
        )

        # Create window
        flags = pygame.OPENGL | pygame.DOUBLEBUF
        if self.config.fullscreen:
            flags |= pygame.FULLSCREEN
        if self.config.resizable:
            flags |= pygame.RESIZABLE

        self.screen = pygame.display.set_mode(
            (self.config.width, self.config.height),
            flags,
            vsync=int(self.config.vsync),
        )
        pygame.display.set_caption(self.config.title)

        # Create ModernGL context
        self.ctx = moderngl.create_context()
        self.ctx.enable(moderngl.BLEND)
        self.ctx.blend_func = moderngl.SRC_ALPHA, moderngl.ONE_MINUS_SRC_ALPHA

        # Core systems
        self.event_bus = EventBus()
        self.input = InputHandler(self.event_bus)
        self.scene_manager = SceneManager(self)

        # Timing
        self._clock = pygame.time.Clock()
        self._timestep = FixedTimestep(
            self.config.fixed_timestep,
            max_steps=self.config.max_frame_skip,
        )
        self._current_time = time.perf_counter()
        self._frame_count = 0
        self._fps = 0.0
        self._fps_update_time = 0.0

        # Debug info
        self.debug_mode = False

    @property
    def width(self) -> int:
        """Current window width."""
        return self.screen.get_width()

    @property
    def height(self) -> int:
        """Current window height."""
        return self.screen.get_height()

    @property
    def fps(self) -> float:
        """Current frames per second."""
        return self._fps

    @property
    def running(self) -> bool:
        """Whether the main loop is running."""
        return self._running

    def run(self) -> None:
        """
        Start the main game loop.

        Each frame: process events, latch input, run the fixed
        updates owed, run the per-frame update, then render.
        """
        self._running = True
        self._current_time = time.perf_counter()
        self.event_bus.publish(EngineEvent.GAME_START)
        logger.info("Starting %s (%sx%s)", self.config.title, self.width, self.height)

        while self._running:
            new_time = time.perf_counter()
            frame_time = new_time - self._current_time
            self._current_time = new_time

            self._process_events()
            self.input.update()

            alpha = self.step(frame_time)

            self._render(alpha)
            self._update_fps()

            # Cap framerate
            self._clock.tick(self.config.target_fps)

        self._shutdown()

    def step(self, frame_time: float) -> float:
        """
        Advance the simulation by one frame's worth of time.

        Args:
            frame_time: Real time since the previous frame in seconds

        Returns:
            Interpolation alpha for rendering
        """
        for _ in range(self._timestep.advance(frame_time)):
            self._fixed_update(self.config.fixed_timestep)

        self.scene_manager.frame_update(frame_time)
        return self._timestep.alpha

    def quit(self) -> None:
        """Request game shutdown at the end of the current frame."""
        if self._running:
            self.event_bus.publish(EngineEvent.GAME_QUIT)
        self._running = False

    def _process_events(self) -> None:
        """Process Pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.info("Window closed. Exiting...")
                self.quit()
            elif event.type == pygame.VIDEORESIZE:
                self._on_resize(event.w, event.h)
            else:
                self.input.process_event(event)
                self.scene_manager.handle_event(event)

    def _fixed_update(self, dt: float) -> None:
        """
        Fixed timestep update for physics and game logic.

        Args:
            dt: Fixed delta time (always config.fixed_timestep)
        """
        self.scene_manager.update(dt)

    def _render(self, alpha: float) -> None:
        """
        Render the current frame.

        Args:
            alpha: Interpolation factor (0-1) for smooth rendering
        """
        self.ctx.clear(*self.config.clear_color, 1.0)
        self.scene_manager.render(alpha)
        pygame.display.flip()

    def _update_fps(self) -> None:
        """Update FPS counter."""
        self._frame_count += 1
        current = time.perf_counter()

        if current - self._fps_update_time >= 1.0:
            self._fps = self._frame_count / (current - self._fps_update_time)
            self._frame_count = 0
            self._fps_update_time = current

            if self.debug_mode:
                pygame.display.set_caption(
                    f"{self.config.title} | FPS: {self._fps:.1f}"
                )

    def _on_resize(self, width: int, height: int) -> None:
        """Handle window resize."""
        self.ctx.viewport = (0, 0, width, height)
        self.event_bus.publish(EngineEvent.WINDOW_RESIZED, width=width, height=height)
        self.scene_manager.on_resize(width, height)

    def _shutdown(self) -> None:
        """Clean shutdown."""
        logger.info("Shutting down %s", self.config.title)
        self.scene_manager.clear()
        pygame.quit()

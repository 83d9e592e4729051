"""
Pong Engine

A small 2D engine for arcade games: a fixed timestep game loop,
an entity-component-system world, an event bus, keyboard input and
ModernGL shape rendering.

Quick Start:
    from pong_engine.core import Game, GameConfig, Scene

    class MyScene(Scene):
        def update(self, dt: float) -> None:
            pass

        def render(self, alpha: float) -> None:
            pass

    game = Game(GameConfig(title="My Game", width=800, height=600))
    game.scene_manager.push(MyScene(game))
    game.run()
"""

__version__ = "0.1.0"

# Re-export core components for convenience
from pong_engine.core import (
    Game,
    GameConfig,
    Scene,
    SceneManager,
    Entity,
    Component,
    System,
    RenderSystem,
    Schedule,
    World,
    QuerySingleError,
    EventBus,
    Event,
    EngineEvent,
    Action,
)

from pong_engine.input import InputHandler

__all__ = [
    # Core
    "Game",
    "GameConfig",
    "Scene",
    "SceneManager",
    # ECS
    "Entity",
    "Component",
    "System",
    "RenderSystem",
    "Schedule",
    "World",
    "QuerySingleError",
    # Events
    "EventBus",
    "Event",
    "EngineEvent",
    # Input
    "InputHandler",
    "Action",
]

"""
Core engine module.

Exports:
- Game, GameConfig: Main game class and configuration
- FixedTimestep: Fixed step accumulator used by the game loop
- Scene, SceneManager: Scene management
- Entity: Entity container
- Component: Component base
- System, RenderSystem, Schedule: System base classes
- World, QuerySingleError: Entity/system container
- EventBus, Event, EngineEvent: Event system
- Action: Input actions
"""

from pong_engine.core.game import Game, GameConfig
from pong_engine.core.clock import FixedTimestep
from pong_engine.core.scene import Scene, SceneManager
from pong_engine.core.entity import Entity
from pong_engine.core.component import Component
from pong_engine.core.system import System, RenderSystem, Schedule
from pong_engine.core.world import World, QuerySingleError
from pong_engine.core.events import EventBus, Event, EngineEvent
from pong_engine.core.actions import Action

__all__ = [
    # Game
    "Game",
    "GameConfig",
    "FixedTimestep",
    # Scene
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
    "Action",
]

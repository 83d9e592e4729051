import os
import sys
import pytest
from unittest.mock import MagicMock, patch

# Ensure engine modules can be imported
sys.path.append(os.getcwd())

@pytest.fixture(autouse=True)
def mock_pygame():
    """
    Global mock for pygame to allow headless testing.
    Autoused for all tests to prevent accidental window creation.
    """
    with patch('pygame.init'), \
         patch('pygame.quit'), \
         patch('pygame.display'), \
         patch('pygame.time'), \
         patch('pygame.image'), \
         patch('pygame.font'), \
         patch('pygame.Surface'):

        import pygame
        pygame.time.get_ticks = MagicMock(return_value=0)

        yield

@pytest.fixture
def mock_moderngl():
    """Mock moderngl context for graphics tests."""
    with patch('moderngl.create_context') as mock_create:
        ctx = MagicMock()
        mock_create.return_value = ctx
        yield ctx

@pytest.fixture
def event_bus():
    """Fresh EventBus for each test."""
    from pong_engine.core.events import EventBus
    return EventBus()

@pytest.fixture
def world(event_bus):
    """Fresh World for each test."""
    from pong_engine.core.world import World
    return World(event_bus)

@pytest.fixture
def config():
    """Default match settings."""
    from pong.config import PongConfig
    return PongConfig()

@pytest.fixture
def match(config):
    """Fresh match state in PLAYING."""
    from pong.match import MatchContext
    return MatchContext(respawn_delay=config.respawn_delay)

@pytest.fixture
def key_event():
    """Build a minimal keyboard event (type + key)."""
    from types import SimpleNamespace

    def _make(event_type, key=None):
        return SimpleNamespace(type=event_type, key=key)

    return _make

@pytest.fixture
def game(mock_moderngl):
    """Game with a mocked window and GL context."""
    from pong_engine.core.game import Game, GameConfig
    return Game(GameConfig())

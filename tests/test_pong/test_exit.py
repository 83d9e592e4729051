import logging
import pygame
from unittest.mock import MagicMock
from pong.systems.exit import ExitSystem
from pong_engine.input.handler import InputHandler

def test_q_quits(world, key_event, caplog):
    handler = InputHandler()
    quit_game = MagicMock()
    world.add_system(ExitSystem(handler, quit_game))

    handler.process_event(key_event(pygame.KEYDOWN, pygame.K_q))
    handler.update()

    with caplog.at_level(logging.INFO):
        world.frame_update(0.016)

    quit_game.assert_called_once()
    assert "User pressed Q key. Exiting..." in caplog.text

def test_quit_only_on_press(world, key_event):
    handler = InputHandler()
    quit_game = MagicMock()
    world.add_system(ExitSystem(handler, quit_game))

    handler.process_event(key_event(pygame.KEYDOWN, pygame.K_q))
    handler.update()
    handler.update()
    world.frame_update(0.016)

    quit_game.assert_not_called()

def test_other_keys_ignored(world, key_event):
    handler = InputHandler()
    quit_game = MagicMock()
    world.add_system(ExitSystem(handler, quit_game))

    handler.process_event(key_event(pygame.KEYDOWN, pygame.K_w))
    handler.update()
    world.frame_update(0.016)
    world.update(1 / 64)

    quit_game.assert_not_called()

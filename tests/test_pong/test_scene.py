import logging
import pygame
import pytest
from pong.components import Ball, Paddle, PaddleRole, Size, Transform, Velocity
from pong.config import PongConfig
from pong.events import MatchEvent
from pong.match import GameState
from pong.scene import PongScene
from pong_engine.core.events import EngineEvent

@pytest.fixture
def scene(game, config):
    scene = PongScene(game, config)
    game.scene_manager.push(scene)
    game.step(0)
    return scene

def press(game, key_event, key):
    game.input.process_event(key_event(pygame.KEYDOWN, key))
    game.input.update()

def test_scene_builds_match(scene):
    assert scene.world.entity_count == 5
    assert scene.match.state is GameState.PLAYING
    assert scene.is_active

def test_one_second_of_play(game, scene):
    for _ in range(64):
        game.step(1 / 64)

    ball = scene.world.single(Ball)
    # Reflected once by the left paddle, now heading right
    assert ball.get(Velocity).vx == 500
    assert ball.get(Transform).x > -350
    assert scene.match.score.left == scene.match.score.right == 0

def test_player_input_moves_paddle(game, scene, key_event):
    press(game, key_event, pygame.K_w)
    game.step(1 / 64)

    player = next(
        p for p in scene.world.get_entities_with(Paddle)
        if p.get(Paddle).role is PaddleRole.PLAYER
    )
    assert player.get(Transform).y == pytest.approx(400 / 64)

def test_full_point_cycle(game, scene, caplog):
    ball = scene.world.single(Ball)
    ball.get(Transform).x = -405

    with caplog.at_level(logging.INFO):
        game.step(1 / 64)

    assert scene.match.score.left == 1
    assert scene.match.state is GameState.RESPAWNING
    assert "Left scores: 1 - 0" in caplog.text

    for _ in range(12):
        game.step(0.25)

    assert scene.match.state is GameState.PLAYING
    assert len(list(scene.world.get_entities_with(Ball))) == 1

def test_q_quits_game(game, scene, key_event):
    quits = []
    handler = lambda e: quits.append(e)
    game.event_bus.subscribe(EngineEvent.GAME_QUIT, handler)
    game._running = True

    press(game, key_event, pygame.K_q)
    game.step(1 / 64)

    assert not game.running
    assert len(quits) == 1

def test_resize_updates_playfield(game, scene):
    game._on_resize(1024, 768)

    assert (scene.playfield.width, scene.playfield.height) == (1024, 768)

def test_render_does_not_fail(game, scene):
    game._render(0.0)

def test_scene_teardown(game, scene):
    game.scene_manager.clear()

    assert scene.world.entity_count == 0
    assert game.scene_manager.is_empty
    assert game.event_bus.handler_count(MatchEvent.POINT_SCORED) == 0

def test_custom_config(game):
    scene = PongScene(game, PongConfig(paddle_height=60))
    paddle = next(scene.world.get_entities_with(Paddle))
    assert paddle.get(Size).height == 60

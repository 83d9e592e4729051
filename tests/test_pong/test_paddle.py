import pygame
import pytest
from pong.components import Paddle, PaddleRole, Transform
from pong.geometry import Playfield
from pong.spawn import spawn_paddle
from pong.systems.paddle import (
    PaddleControlSystem,
    move_paddle,
    paddle_bounds,
    read_direction,
)
from pong_engine.input.handler import InputHandler

DT = 1 / 64

@pytest.fixture
def input_handler():
    return InputHandler()

@pytest.fixture
def paddle_world(world, config, input_handler):
    playfield = Playfield(config.window_width, config.window_height)
    world.add_system(PaddleControlSystem(input_handler, playfield, config.paddle_speed))
    player = spawn_paddle(world, config, PaddleRole.PLAYER)
    opponent = spawn_paddle(world, config, PaddleRole.OPPONENT)
    return world, player, opponent

def hold(handler, key_event, *keys):
    for key in keys:
        handler.process_event(key_event(pygame.KEYDOWN, key))
    handler.update()

def test_read_direction():
    assert read_direction(False, False) == 0.0
    assert read_direction(True, False) == 1.0
    assert read_direction(False, True) == -1.0

def test_down_wins_when_both_held():
    assert read_direction(True, True) == -1.0

def test_bounds():
    assert paddle_bounds(600, 120) == (-240, 240)

def test_bounds_collapse_when_playfield_shorter_than_paddle():
    lower, upper = paddle_bounds(100, 120)
    assert (lower, upper) == (0, 0)
    assert move_paddle(50, 1.0, 400, DT, lower, upper) == 0
    assert move_paddle(-50, -1.0, 400, DT, lower, upper) == 0

def test_move_paddle_clamps():
    assert move_paddle(0, 1.0, 400, DT, -240, 240) == pytest.approx(6.25)
    assert move_paddle(239, 1.0, 400, DT, -240, 240) == 240
    assert move_paddle(-239, -1.0, 400, DT, -240, 240) == -240

def test_no_input_leaves_paddles(paddle_world):
    world, player, opponent = paddle_world
    for _ in range(10):
        world.update(DT)

    assert player.get(Transform).y == 0.0
    assert opponent.get(Transform).y == 0.0

def test_player_moves_up(paddle_world, input_handler, key_event):
    world, player, opponent = paddle_world
    hold(input_handler, key_event, pygame.K_w)

    world.update(DT)

    assert player.get(Transform).y == pytest.approx(400 * DT)
    assert opponent.get(Transform).y == 0.0

def test_opponent_uses_arrow_keys(paddle_world, input_handler, key_event):
    world, player, opponent = paddle_world
    hold(input_handler, key_event, pygame.K_DOWN)

    world.update(DT)

    assert opponent.get(Transform).y == pytest.approx(-400 * DT)
    assert player.get(Transform).y == 0.0

def test_both_keys_moves_down(paddle_world, input_handler, key_event):
    world, player, _ = paddle_world
    hold(input_handler, key_event, pygame.K_w, pygame.K_s)

    world.update(DT)

    assert player.get(Transform).y == pytest.approx(-400 * DT)

def test_clamped_at_top(paddle_world, input_handler, key_event):
    world, player, _ = paddle_world
    hold(input_handler, key_event, pygame.K_w)

    # 2 seconds of holding is far more than enough to reach the edge
    for _ in range(128):
        world.update(DT)

    assert player.get(Transform).y == 240

def test_clamped_at_bottom(paddle_world, input_handler, key_event):
    world, player, _ = paddle_world
    hold(input_handler, key_event, pygame.K_s)

    for _ in range(128):
        world.update(DT)

    assert player.get(Transform).y == -240

def test_horizontal_position_fixed(paddle_world, input_handler, key_event):
    world, player, opponent = paddle_world
    hold(input_handler, key_event, pygame.K_w, pygame.K_UP)
    world.update(DT)

    assert player.get(Transform).x == -370
    assert opponent.get(Transform).x == 370
    assert player.get(Paddle).role is PaddleRole.PLAYER

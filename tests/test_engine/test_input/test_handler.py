import pygame
from pong_engine.core.actions import Action
from pong_engine.core.events import EventBus
from pong_engine.input.handler import InputEvent, InputHandler

def test_default_bindings():
    handler = InputHandler()
    assert handler.get_bindings(Action.PLAYER_UP) == [pygame.K_w]
    assert handler.get_bindings(Action.PLAYER_DOWN) == [pygame.K_s]
    assert handler.get_bindings(Action.OPPONENT_UP) == [pygame.K_UP]
    assert handler.get_bindings(Action.OPPONENT_DOWN) == [pygame.K_DOWN]
    assert handler.get_bindings(Action.QUIT) == [pygame.K_q]

def test_action_state():
    handler = InputHandler()
    # Manually inject state
    handler._state.actions_pressed.add(Action.PLAYER_UP)

    assert handler.is_action_pressed(Action.PLAYER_UP)
    assert not handler.is_action_pressed(Action.PLAYER_DOWN)

def test_key_down_held_until_key_up(key_event):
    handler = InputHandler()

    handler.process_event(key_event(pygame.KEYDOWN, pygame.K_w))
    handler.update()
    assert handler.is_action_pressed(Action.PLAYER_UP)
    assert handler.is_key_pressed(pygame.K_w)

    # Still held on the next frame
    handler.update()
    assert handler.is_action_pressed(Action.PLAYER_UP)

    handler.process_event(key_event(pygame.KEYUP, pygame.K_w))
    handler.update()
    assert not handler.is_action_pressed(Action.PLAYER_UP)

def test_just_pressed_lasts_one_frame(key_event):
    handler = InputHandler()

    handler.process_event(key_event(pygame.KEYDOWN, pygame.K_q))
    handler.update()
    assert handler.is_action_just_pressed(Action.QUIT)

    handler.update()
    assert not handler.is_action_just_pressed(Action.QUIT)
    assert handler.is_action_pressed(Action.QUIT)

def test_just_released(key_event):
    handler = InputHandler()
    handler.process_event(key_event(pygame.KEYDOWN, pygame.K_s))
    handler.update()

    handler.process_event(key_event(pygame.KEYUP, pygame.K_s))
    handler.update()

    assert handler.is_action_just_released(Action.PLAYER_DOWN)

def test_unbound_key_ignored(key_event):
    handler = InputHandler()
    handler.process_event(key_event(pygame.KEYDOWN, pygame.K_z))
    handler.update()

    assert handler.is_key_pressed(pygame.K_z)
    assert not any(handler.is_action_pressed(action) for action in Action)

def test_rebinding(key_event):
    handler = InputHandler()
    handler.bind_key(Action.PLAYER_UP, pygame.K_i)
    handler.unbind_key(Action.PLAYER_UP, pygame.K_w)

    handler.process_event(key_event(pygame.KEYDOWN, pygame.K_w))
    handler.update()
    assert not handler.is_action_pressed(Action.PLAYER_UP)

    handler.process_event(key_event(pygame.KEYDOWN, pygame.K_i))
    handler.update()
    assert handler.is_action_pressed(Action.PLAYER_UP)

def test_action_held_while_other_key_down(key_event):
    handler = InputHandler()
    handler.bind_key(Action.PLAYER_UP, pygame.K_i)

    handler.process_event(key_event(pygame.KEYDOWN, pygame.K_w))
    handler.process_event(key_event(pygame.KEYDOWN, pygame.K_i))
    handler.process_event(key_event(pygame.KEYUP, pygame.K_w))
    handler.update()

    assert handler.is_action_pressed(Action.PLAYER_UP)

def test_focus_lost_releases_everything(key_event):
    handler = InputHandler()
    handler.process_event(key_event(pygame.KEYDOWN, pygame.K_UP))
    handler.update()

    handler.process_event(key_event(pygame.WINDOWFOCUSLOST))
    handler.update()

    assert not handler.is_action_pressed(Action.OPPONENT_UP)
    assert handler.is_action_just_released(Action.OPPONENT_UP)

def test_publishes_action_events(key_event):
    bus = EventBus()
    pressed = []
    released = []
    on_pressed = lambda e: pressed.append(e["action"])
    on_released = lambda e: released.append(e["action"])
    bus.subscribe(InputEvent.ACTION_PRESSED, on_pressed)
    bus.subscribe(InputEvent.ACTION_RELEASED, on_released)

    handler = InputHandler(bus)
    handler.process_event(key_event(pygame.KEYDOWN, pygame.K_DOWN))
    handler.update()
    handler.process_event(key_event(pygame.KEYUP, pygame.K_DOWN))
    handler.update()

    assert pressed == [Action.OPPONENT_DOWN]
    assert released == [Action.OPPONENT_DOWN]

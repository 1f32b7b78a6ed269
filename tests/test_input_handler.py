import pygame
import pytest

from gamehandlers.handler import Handler, TickPoint
from gamehandlers.input_handler import InputHandler


class _Game:
    def __init__(self):
        self.handlers = []

    def add_handler(self, handler, tick_point):
        self.handlers.append((handler, tick_point))


class _Keys:
    def __init__(self, pressed):
        self._pressed = frozenset(pressed)

    def __getitem__(self, key):
        return key in self._pressed


class _Devices:
    def __init__(self):
        self.keys = set()
        self.position = (0, 0)
        self.buttons = (False, False, False)

    def keyboard(self):
        return _Keys(self.keys)

    def mouse(self):
        return self.position, self.buttons


@pytest.fixture
def game():
    linked = _Game()
    Handler.link_to_game(linked)
    yield linked
    Handler.link_to_game(None)


@pytest.fixture
def devices():
    return _Devices()


@pytest.fixture
def handler(game, devices):
    created = InputHandler(devices.keyboard, devices.mouse)
    created.initialize()
    return created


def test_registers_for_input(game, devices):
    created = InputHandler(devices.keyboard, devices.mouse)
    assert game.handlers == [(created, TickPoint.ON_INPUT)]


def test_key_pressed_after_initialize(game, devices):
    devices.keys = {pygame.K_a}
    created = InputHandler(devices.keyboard, devices.mouse)
    assert created.initialize() is True
    assert created.key_pressed(pygame.K_a) is True
    assert created.key_pressed(pygame.K_b) is False


def test_key_just_pressed_only_on_first_frame(handler, devices):
    devices.keys = {pygame.K_SPACE}
    handler.tick()
    assert handler.key_just_pressed(pygame.K_SPACE) is True
    handler.tick()
    assert handler.key_just_pressed(pygame.K_SPACE) is False
    assert handler.key_pressed(pygame.K_SPACE) is True
    devices.keys = set()
    handler.tick()
    assert handler.key_pressed(pygame.K_SPACE) is False
    devices.keys = {pygame.K_SPACE}
    handler.tick()
    assert handler.key_just_pressed(pygame.K_SPACE) is True


def test_number_keys_are_digit_keys(handler, devices):
    devices.keys = {InputHandler.NUMBER_KEYS[3]}
    handler.tick()
    assert handler.key_pressed(pygame.K_3) is True
    assert handler.key_pressed(pygame.K_4) is False


def test_mouse_position(handler, devices):
    devices.position = (17, 42)
    handler.tick()
    assert (handler.mouse_x(), handler.mouse_y()) == (17, 42)


def test_no_clicks_before_tick(handler):
    assert handler.is_lmb_press() is False
    assert handler.is_lmb_one_click() is False
    assert handler.is_rmb_one_click() is False


def test_left_click_sequence(handler, devices):
    devices.buttons = (True, False, False)
    handler.tick()
    assert handler.is_lmb_press() is True
    assert handler.is_lmb_one_click() is True
    handler.tick()
    assert handler.is_lmb_press() is True
    assert handler.is_lmb_one_click() is False
    devices.buttons = (False, False, False)
    handler.tick()
    assert handler.is_lmb_press() is False
    assert handler.is_lmb_one_click() is False


def test_right_click_sequence(handler, devices):
    devices.buttons = (False, False, True)
    handler.tick()
    assert handler.is_rmb_press() is True
    assert handler.is_rmb_one_click() is True
    assert handler.is_lmb_press() is False
    handler.tick()
    assert handler.is_rmb_one_click() is False


def test_middle_button_is_not_a_click(handler, devices):
    devices.buttons = (False, True, False)
    handler.tick()
    assert handler.is_lmb_press() is False
    assert handler.is_rmb_press() is False
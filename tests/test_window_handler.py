import pygame
import pytest

from gamehandlers.handler import Handler, TickPoint
from gamehandlers.window_handler import WindowHandler


class _Game:
    def __init__(self):
        self.handlers = []

    def add_handler(self, handler, tick_point):
        self.handlers.append((handler, tick_point))


class _Recorder:
    def __init__(self):
        self.target = None

    def set_window_target(self, window):
        self.target = window


@pytest.fixture
def game():
    linked = _Game()
    Handler.link_to_game(linked)
    yield linked
    Handler.link_to_game(None)


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.setenv("SDL_VIDEO_WINDOW_POS", "0,0")
    yield
    pygame.quit()


def test_registers_for_render(game):
    handler = WindowHandler("Demo", 0, 0, 320, 200)
    assert game.handlers == [(handler, TickPoint.ON_RENDER)]


def test_screen_size_requires_window(game):
    handler = WindowHandler("Demo", 0, 0, 320, 200)
    with pytest.raises(RuntimeError):
        handler.screen_width()
    with pytest.raises(RuntimeError):
        handler.screen_height()


def test_initialize_creates_window(game, headless):
    handler = WindowHandler("Demo", 0, 0, 320, 200)
    assert handler.initialize() is True
    assert (handler.screen_width(), handler.screen_height()) == (320, 200)
    assert pygame.display.get_caption()[0] == "Demo"


def test_centre_positions_are_symmetric(game, headless):
    handler = WindowHandler("Demo", 0, 0, 320, 200)
    handler.initialize()
    assert handler.centre_screen_x(40) * 2 + 40 == 320
    assert handler.centre_screen_y(50) * 2 + 50 == 200


def test_centre_uses_whole_half_of_screen(game, headless):
    handler = WindowHandler("Demo", 0, 0, 321, 200)
    handler.initialize()
    assert handler.centre_screen_x(0) == 160


def test_initial_position(game):
    handler = WindowHandler("Demo", 12, 34, 320, 200)
    assert (handler.window_x(), handler.window_y()) == (12, 34)


def test_set_position_without_window(game):
    handler = WindowHandler("Demo", 0, 0, 320, 200)
    handler.set_window_position(70, 80)
    assert (handler.window_x(), handler.window_y()) == (70, 80)


def test_link_without_window_raises(game):
    handler = WindowHandler("Demo", 0, 0, 320, 200)
    with pytest.raises(RuntimeError):
        handler.link_to_renderer(_Recorder())


def test_link_gives_display_surface(game, headless):
    handler = WindowHandler("Demo", 0, 0, 320, 200)
    handler.initialize()
    recorder = _Recorder()
    handler.link_to_renderer(recorder)
    assert recorder.target is handler.window
    assert recorder.target.get_size() == (320, 200)
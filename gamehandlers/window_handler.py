"""Handler that owns the game window."""

from __future__ import annotations

import os

import pygame

from .handler import Handler, TickPoint

try:
    from pygame._sdl2.video import Window as _SdlWindow
except ImportError:
    _SdlWindow = None


class WindowHandler(Handler):
    """Creates the game window and answers questions about its geometry."""

    debug_name = "Window Handler"

    def __init__(self, title, x, y, width, height):
        super().__init__(TickPoint.ON_RENDER)
        self.title = title
        self._x = x
        self._y = y
        self._width = width
        self._height = height
        self._window = None

    @property
    def window(self):
        """The window's surface, or None before initialization."""
        return self._window

    def initialize(self):
        """Open the window; return whether it could be created."""
        os.environ["SDL_VIDEO_WINDOW_POS"] = f"{self._x},{self._y}"
        try:
            pygame.init()
            self._window = pygame.display.set_mode((self._width, self._height))
        except pygame.error:
            self._window = None
            return False
        pygame.display.set_caption(self.title)
        return True

    def _require_window(self):
        if self._window is None:
            raise RuntimeError("Window handler has not been initalized.")
        return self._window

    def _native_window(self):
        if self._window is None or _SdlWindow is None:
            return None
        try:
            return _SdlWindow.from_display_module()
        except (pygame.error, AttributeError):
            return None

    def centre_screen_x(self, width):
        """Left edge that centres something of ``width`` on the screen."""
        return self.screen_width() // 2 - width / 2

    def centre_screen_y(self, height):
        """Top edge that centres something of ``height`` on the screen."""
        return self.screen_height() // 2 - height / 2

    def screen_width(self):
        return self._require_window().get_width()

    def screen_height(self):
        return self._require_window().get_height()

    def _sync_position(self):
        native = self._native_window()
        if native is not None:
            self._x, self._y = native.position

    def window_x(self):
        self._sync_position()
        return self._x

    def window_y(self):
        self._sync_position()
        return self._y

    def set_window_position(self, x, y):
        self._x, self._y = x, y
        native = self._native_window()
        if native is not None:
            native.position = (x, y)

    def link_to_renderer(self, display_handler):
        """Point a display handler at this handler's window."""
        display_handler.set_window_target(self._require_window())

    def tick(self):
        return None
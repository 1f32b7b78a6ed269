"""Handler that clears, presents and draws shapes onto the window."""

from __future__ import annotations

from typing import NamedTuple

import pygame

from .handler import Handler, TickPoint


class ColourRGBA(NamedTuple):
    """A colour with an alpha channel, each part from 0 to 255."""

    r: int
    g: int
    b: int
    a: int = 255


DEFAULT_COLOUR = ColourRGBA(231, 200, 241, 255)


class DisplayHandler(Handler):
    """Draws onto the window surface and presents it each frame."""

    debug_name = "Display Handler"

    def __init__(self, window_handler, camera_handler):
        super().__init__(TickPoint.ON_RENDER)
        self.window_handler = window_handler
        self.camera_handler = camera_handler
        self._window = None
        self._renderer = None
        self._draw_colour = DEFAULT_COLOUR

    @property
    def renderer(self):
        """The surface drawn onto, or None before initialization."""
        return self._renderer

    @property
    def draw_colour(self):
        return self._draw_colour

    def set_window_target(self, window):
        self._window = window

    def initialize(self):
        """Attach to the window; return whether there is one to draw on."""
        self.window_handler.link_to_renderer(self)
        if self._window is None:
            return False
        self._renderer = self._window
        return True

    def _require_renderer(self):
        if self._renderer is None:
            raise RuntimeError("Display handler has not been initialized.")
        return self._renderer

    def _to_screen(self, rect, relative):
        screen_rect = pygame.Rect(rect)
        if relative:
            offset = self.camera_handler.camera_offset
            screen_rect.x -= int(offset.x)
            screen_rect.y -= int(offset.y)
        return screen_rect

    def tick(self):
        target = self._require_renderer()
        self.set_draw_colour(DEFAULT_COLOUR)
        if pygame.display.get_init() and target is pygame.display.get_surface():
            pygame.display.flip()
        target.fill(self._draw_colour)
        return None

    def draw_rect(self, rect, rgba, relative, filled):
        """Draw a rectangle outline, filled if asked; return the screen rect.

        A relative rectangle is given in world space and is shifted by the
        camera offset. The caller's rectangle is left unchanged.
        """
        target = self._require_renderer()
        screen_rect = self._to_screen(rect, relative)
        self.set_draw_colour(rgba)
        colour = self._draw_colour
        if screen_rect.w <= 0 or screen_rect.h <= 0:
            return screen_rect
        if colour.a >= 255:
            pygame.draw.rect(target, colour, screen_rect, 1)
            if filled:
                pygame.draw.rect(target, colour, screen_rect)
        else:
            layer = pygame.Surface(screen_rect.size, pygame.SRCALPHA)
            local = layer.get_rect()
            pygame.draw.rect(layer, colour, local, 1)
            if filled:
                pygame.draw.rect(layer, colour, local)
            target.blit(layer, screen_rect.topleft)
        return screen_rect

    def set_draw_colour(self, rgba):
        self._draw_colour = ColourRGBA(*rgba)
"""Handler that loads images and draws them, and runs image drawers."""

from __future__ import annotations

import pygame

from .display_handler import DisplayHandler

FLIP_NONE = 0
FLIP_HORIZONTAL = 1
FLIP_VERTICAL = 2


class ImageHandler(DisplayHandler):
    """Keeps a bank of loaded images and draws them onto the window.

    Image drawers provide ``draw_order`` and ``draw()``; they are drawn each
    frame, highest draw order first once priorities have been reloaded.
    """

    debug_name = "Image Handler"

    def __init__(self, window_handler, camera_handler, workspace_path):
        super().__init__(window_handler, camera_handler)
        self.workspace_path = str(workspace_path)
        self._textures = {}
        self._drawers = []

    def initialize(self):
        if not super().initialize():
            return False
        return True

    def load_image(self, image_path):
        """Load an image from the workspace and file it under its path."""
        try:
            texture = pygame.image.load(self.workspace_path + image_path)
        except (pygame.error, OSError) as exc:
            raise FileNotFoundError(
                f"Image file at the path: {image_path} was not found!"
            ) from exc
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            texture = texture.convert_alpha()
        self._textures[image_path] = texture

    def get_image_texture(self, image_name):
        """Return a loaded image; raise KeyError for an unknown name."""
        return self._textures[image_name]

    def draw_image(self, rect, image_name, relative, flip=FLIP_NONE):
        """Draw an image stretched over ``rect``; return the screen rect.

        An image that has not been loaded draws nothing.
        """
        target = self._require_renderer()
        screen_rect = self._to_screen(rect, relative)
        texture = self._textures.get(image_name)
        if texture is None or screen_rect.w <= 0 or screen_rect.h <= 0:
            return screen_rect
        image = texture
        if image.get_size() != screen_rect.size:
            image = pygame.transform.scale(image, screen_rect.size)
        if flip:
            image = pygame.transform.flip(
                image, bool(flip & FLIP_HORIZONTAL), bool(flip & FLIP_VERTICAL)
            )
        target.blit(image, screen_rect.topleft)
        return screen_rect

    def draw_image_at(self, x, y, width, height, image_name, relative):
        return self.draw_image(pygame.Rect(x, y, width, height), image_name, relative)

    def add_image_drawer(self, drawer):
        self._drawers.append(drawer)

    def remove_image_drawer(self, drawer):
        """Remove the first registration of ``drawer``, if any."""
        for index, registered in enumerate(self._drawers):
            if registered is drawer:
                del self._drawers[index]
                return

    def reload_image_drawer_priorities(self):
        """Order drawers by descending draw order, keeping ties stable."""
        self._drawers.sort(key=lambda drawer: drawer.draw_order, reverse=True)

    def tick(self):
        super().tick()
        for drawer in tuple(self._drawers):
            drawer.draw()
        return None
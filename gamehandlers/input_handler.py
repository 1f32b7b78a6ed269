"""Handler that samples the keyboard and mouse once per frame."""

from __future__ import annotations

import pygame

from .handler import Handler, TickPoint


def _read_mouse():
    return pygame.mouse.get_pos(), pygame.mouse.get_pressed()


def _held(state, key):
    return state is not None and bool(state[key])


class InputHandler(Handler):
    """Tracks held keys, newly pressed keys, mouse position and clicks.

    ``keyboard_source`` returns a key state indexable by key code and
    defaults to ``pygame.key.get_pressed``. ``mouse_source`` returns
    ``((x, y), (left, middle, right))`` and defaults to pygame's mouse.
    """

    debug_name = "Input Handler"

    NUMBER_KEYS = (
        pygame.K_0,
        pygame.K_1,
        pygame.K_2,
        pygame.K_3,
        pygame.K_4,
        pygame.K_5,
        pygame.K_6,
        pygame.K_7,
        pygame.K_8,
        pygame.K_9,
    )

    def __init__(self, keyboard_source=None, mouse_source=None):
        super().__init__(TickPoint.ON_INPUT)
        self._keyboard_source = keyboard_source or pygame.key.get_pressed
        self._mouse_source = mouse_source or _read_mouse
        self._keys = None
        self._frame_keys = None
        self._previous_frame_keys = None
        self._mouse_position = (0, 0)
        self._left_this_frame = False
        self._left_last_frame = False
        self._right_this_frame = False
        self._right_last_frame = False

    def initialize(self):
        self._left_last_frame = False
        self._right_last_frame = False
        self._keys = self._keyboard_source()
        return True

    def tick(self):
        self._keys = self._keyboard_source()
        self._previous_frame_keys = self._frame_keys
        self._frame_keys = self._keys

        (x, y), buttons = self._mouse_source()
        self._mouse_position = (int(x), int(y))
        self._left_last_frame = self._left_this_frame
        self._right_last_frame = self._right_this_frame
        self._left_this_frame = bool(buttons[0])
        self._right_this_frame = bool(buttons[2])
        return None

    def key_pressed(self, key):
        """Whether ``key`` is held down."""
        return _held(self._keys, key)

    def key_just_pressed(self, key):
        """Whether ``key`` went down since the previous frame."""
        return _held(self._frame_keys, key) and not _held(self._previous_frame_keys, key)

    def is_lmb_press(self):
        return self._left_this_frame

    def is_rmb_press(self):
        return self._right_this_frame

    def is_lmb_one_click(self):
        """Whether the left button went down this frame."""
        return self._left_this_frame and not self._left_last_frame

    def is_rmb_one_click(self):
        """Whether the right button went down this frame."""
        return self._right_this_frame and not self._right_last_frame

    def mouse_x(self):
        return self._mouse_position[0]

    def mouse_y(self):
        return self._mouse_position[1]
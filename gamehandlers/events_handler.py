"""Dispatches window events to registered callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import pygame

from .handler import Handler, TickPoint


@dataclass(frozen=True)
class EventCallback:
    """A function to run whenever an event of ``event_type`` arrives."""

    event_type: int
    on_execute: Callable[[], None]


def _exit_game():
    Handler.game.exit_game()


class EventsHandler(Handler):
    """Polls events each frame and runs the callbacks that match them.

    ``event_source`` is a callable returning the pending events, each with a
    ``type`` attribute; it defaults to ``pygame.event.get``. A quit event
    always ends the game.
    """

    debug_name = "Events Handler"

    def __init__(self, event_source=None):
        super().__init__(TickPoint.ON_INPUT)
        self._event_source = event_source if event_source is not None else pygame.event.get
        self._callbacks = [EventCallback(pygame.QUIT, _exit_game)]

    def add_event_callback(self, trigger, callback):
        """Run ``callback`` for every event whose type equals ``trigger``."""
        self._callbacks.append(EventCallback(trigger, callback))

    def initialize(self):
        return True

    def tick(self):
        for event in self._event_source():
            for callback in tuple(self._callbacks):
                if callback.event_type == event.type:
                    callback.on_execute()
        return None
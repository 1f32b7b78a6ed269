"""Base class for game handlers and the error record they report."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, ClassVar


class TickPoint(IntEnum):
    """Stage of a frame at which a handler is ticked."""

    ON_INPUT = 0
    ON_UPDATE = 1
    ON_RENDER = 2
    NO_TICK = 3


class ErrorType(IntEnum):
    """Severity of a handler error."""

    SYSTEM_ERROR = 1
    GAME_ERROR = 2
    WARNING = 3


_ERROR_LABELS = {
    ErrorType.WARNING: "Warning",
    ErrorType.GAME_ERROR: "Game Error",
    ErrorType.SYSTEM_ERROR: "System Error",
}


class HandlerError(Exception):
    """An error raised or reported by a handler."""

    def __init__(self, error_type, message, originator):
        super().__init__(message)
        self.error_type = error_type
        self.message = message
        self.originator = originator

    def describe(self):
        """Return a one-line, human readable description of the error."""
        label = _ERROR_LABELS.get(self.error_type, "HandlerError Error")
        origin = self.originator
        return (
            f"{label} | {self.message} | "
            f"Orignating from {hex(id(origin))}"
            f"({origin.debug_name})({type(origin).__name__}) |"
        )


class Handler:
    """A component of the game loop, registered with the game on creation."""

    game: ClassVar[Any] = None
    debug_name: str = ""

    def __init__(self, tick_point):
        if Handler.game is None:
            raise RuntimeError("Handlers haven't been linked to the game instance.")
        self.tick_point = TickPoint(tick_point)
        Handler.game.add_handler(self, self.tick_point)

    @classmethod
    def link_to_game(cls, game):
        """Set the game instance that every handler registers with."""
        Handler.game = game

    def tick(self):
        """Run one frame of work; return a HandlerError or None."""
        return None

    def initialize(self):
        """Prepare the handler; return whether it succeeded."""
        return True
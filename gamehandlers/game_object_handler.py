"""Handler that owns the game objects and updates them each frame."""

from __future__ import annotations

from .handler import Handler, TickPoint


class GameObjectHandler(Handler):
    """Adds, removes, orders and updates game objects.

    Game objects provide ``debug_name``, ``update_order``, ``active``,
    ``update()`` and ``destroy()``. Objects with a higher update order are
    updated first; equal orders keep their insertion order.
    """

    debug_name = "GameObject Handler"

    def __init__(self):
        super().__init__(TickPoint.ON_UPDATE)
        self._game_objects = []
        self._pending_add = []
        self._pending_removal = []
        self._to_delete = []

    def _log(self, message):
        self.game.debug_log(message)

    def tick(self):
        self._log(f"Pending GameObjects: {len(self._pending_add)}")
        for game_object in self._pending_add:
            self._log(
                f"Pending GameObject: {game_object.debug_name} : {hex(id(game_object))}"
            )
            self._game_objects.append(game_object)

        self._log(f"trying to remove {len(self._pending_removal)} GameObjects.")
        self._log(f"There are currently {len(self._game_objects)} GameObjects.")
        if self._pending_removal:
            removed = {id(game_object) for game_object in self._pending_removal}
            self._game_objects = [
                game_object
                for game_object in self._game_objects
                if id(game_object) not in removed
            ]

        if self._pending_add or self._pending_removal:
            self.reload_priorities()
        self._pending_add.clear()
        self._pending_removal.clear()
        self._log(f"There are now {len(self._game_objects)} GameObjects.")

        self._log("--- UPDATING gameObjects ---")
        for game_object in self._game_objects:
            if game_object.active:
                self._log(f"{game_object.debug_name} : {hex(id(game_object))}")
                game_object.update()
        self._log("--- UPDATING gameObjects ---")

        self._log("--- DELETING gameObjectsToBeDeleted ---")
        for game_object in self._to_delete:
            game_object.destroy()
        self._log("--- DELETED gameObjectsToBeDeleted ---")
        self._to_delete.clear()
        return None

    def initialize(self):
        self.reload_priorities()
        return True

    def add_game_object(self, game_object):
        """Queue an object to join the update list on the next tick."""
        self._pending_add.append(game_object)

    def remove_game_object(self, game_object):
        """Queue an object to leave the update list on the next tick."""
        self._pending_removal.append(game_object)

    def delete_at_frame_end(self, game_object):
        """Destroy an object once the current tick has updated everything."""
        self._to_delete.append(game_object)

    def reload_priorities(self):
        """Order objects by descending update order, keeping ties stable."""
        self._game_objects.sort(key=lambda game_object: game_object.update_order, reverse=True)
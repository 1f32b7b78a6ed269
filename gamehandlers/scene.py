"""Scenes and the handler that loads and unloads them between frames."""

from __future__ import annotations

import logging

from .handler import Handler, TickPoint

log = logging.getLogger(__name__)


class Scene:
    """A named group of game objects built by a loader function.

    The loader receives a list and appends the scene's game objects to it.
    Game objects must provide ``set_scene_name(name)`` and ``destroy()``.
    """

    def __init__(self, name, loader):
        self.name = name
        self.loader = loader
        self._game_objects = []

    def load(self):
        """Build the scene's objects and tag them with the scene's name."""
        self.loader(self._game_objects)
        for game_object in self._game_objects:
            game_object.set_scene_name(self.name)

    def unload(self):
        """Destroy every object the scene created."""
        for game_object in self._game_objects:
            game_object.destroy()
        self._game_objects.clear()


class SceneHandler(Handler):
    """Keeps the set of known scenes and applies load requests on tick."""

    debug_name = "Scene Handler"

    def __init__(self, scenes=None):
        super().__init__(TickPoint.ON_INPUT)
        self._scenes = {}
        self._loaded = []
        self._pending_load = []
        self._pending_unload = []
        if scenes is not None:
            items = scenes.items() if hasattr(scenes, "items") else scenes
            for name, loader in items:
                self.add_scene_configuration(name, loader)

    def add_scene_configuration(self, name, loader):
        """Register a scene; a duplicate name is refused with a warning."""
        if name in self._scenes:
            log.warning("Duplicate scene name attempted to be loaded. Failed.")
            return
        self._scenes[name] = Scene(name, loader)

    def load_scene(self, name):
        """Queue a scene to be loaded on the next tick."""
        if any(scene.name == name for scene in (*self._loaded, *self._pending_load)):
            raise RuntimeError(f"Scene '{name}' was loaded twice!!")
        scene = self._scenes.get(name)
        if scene is None:
            raise RuntimeError(f"Tried to load scene '{name}' that doesn't exist!")
        self._pending_load.append(scene)

    def unload_scene(self, name):
        """Queue a loaded scene for unloading, or cancel a pending load."""
        for scene in self._loaded:
            if scene.name == name:
                log.debug("Added to scenes pending unload")
                self._pending_unload.append(scene)
                return
        for scene in self._pending_load:
            if scene.name == name:
                self._pending_load.remove(scene)
                return
        raise RuntimeError(
            f"Tried to unload scene '{name}' that isn't loaded or doesn't exist!"
        )

    def removing_scenes(self):
        """Whether any scene is waiting to be unloaded."""
        return bool(self._pending_unload)

    def unloading_scene_names(self):
        """Names of the scenes waiting to be unloaded."""
        return [scene.name for scene in self._pending_unload]

    def loaded_scene_names(self):
        """Names of loaded scenes followed by those waiting to load."""
        return [scene.name for scene in (*self._loaded, *self._pending_load)]

    def tick(self):
        for scene in self._pending_load:
            scene.load()
            self._loaded.append(scene)
        self._pending_load.clear()
        if self._pending_unload:
            kept = []
            for scene in self._loaded:
                if any(scene is pending for pending in self._pending_unload):
                    scene.unload()
                else:
                    kept.append(scene)
            self._loaded = kept
        self._pending_unload.clear()
        return None

    def close(self):
        """Unload every loaded scene."""
        for scene in self._loaded:
            log.info("Unloading Scene: %s", scene.name)
            scene.unload()
        self._loaded.clear()
"""Cameras and the handler that tracks the active one."""

from __future__ import annotations

from dataclasses import dataclass, field

from .handler import Handler, TickPoint


@dataclass(frozen=True)
class Position2:
    """A point in two dimensions."""

    x: float = 0
    y: float = 0


@dataclass
class Camera:
    """A view into the world; ``update`` returns its offset for this frame.

    ``scene_owner`` names the scene the camera belongs to, or is None.
    """

    scene_owner: str | None = None
    position: Position2 = field(default_factory=Position2)

    def update(self):
        return self.position


class CameraHandler(Handler):
    """Holds the active camera and computes the camera offset each frame."""

    debug_name = "Camera Handler"

    def __init__(self):
        super().__init__(TickPoint.ON_RENDER)
        self._default_camera = Camera()
        self._active_camera = self._default_camera
        self._camera_offset = Position2()

    @property
    def active_camera(self):
        return self._active_camera

    @active_camera.setter
    def active_camera(self, camera):
        self._active_camera = camera if camera is not None else self._default_camera

    @property
    def camera_offset(self):
        return self._camera_offset

    def tick(self):
        scene_handler = self.game.scene_handler
        if scene_handler.removing_scenes():
            owner = self._active_camera.scene_owner
            for name in scene_handler.unloading_scene_names():
                if owner is None or name == owner:
                    self._active_camera = self._default_camera
        self._camera_offset = self._active_camera.update()
        return None
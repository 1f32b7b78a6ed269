# gamehandlers

A small framework for organising a pygame game loop into *handlers*. Each
handler registers itself with your game object at a tick point (input,
update or render) and does its part of the frame when `tick()` is called.

## Installation

```
pip install gamehandlers
```

To run the test suite:

```
pip install "gamehandlers[test]"
pytest
```

## The game object you supply

The package contains the handlers, not the game itself. Before creating any
handler, link your game instance with `Handler.link_to_game(game)`; creating
a handler without a linked game raises `RuntimeError`. The handlers use
these members of the game:

- `add_handler(handler, tick_point)` – called by every handler on creation.
- `debug_log(message)` – used by `GameObjectHandler.tick()`.
- `scene_handler` – a `SceneHandler`, read by `CameraHandler.tick()`.
- `exit_game()` – called by `EventsHandler` when a quit event arrives.

## Modules

- `gamehandlers.handler`
  - `Handler`: base class with `tick()` (returns `None`) and `initialize()`
    (returns `True`). Each handler has a `debug_name` and a `tick_point`.
  - `TickPoint`: `ON_INPUT`, `ON_UPDATE`, `ON_RENDER`, `NO_TICK`.
  - `HandlerError`: an exception carrying an `ErrorType` (`SYSTEM_ERROR`,
    `GAME_ERROR`, `WARNING`), a message and the originating handler;
    `describe()` returns a one-line summary.
- `gamehandlers.scene`
  - `Scene(name, loader)`: `load()` calls `loader(list)` to build the game
    objects and calls `set_scene_name(name)` on each; `unload()` calls
    `destroy()` on each.
  - `SceneHandler(scenes=None)`: takes a mapping or pairs of name and loader.
    `load_scene()` and `unload_scene()` queue changes applied on the next
    `tick()`. Loading a scene that is loaded or pending, or an unknown scene,
    raises `RuntimeError`; unloading a pending scene cancels it. Also
    `add_scene_configuration()`, `removing_scenes()`,
    `unloading_scene_names()`, `loaded_scene_names()` and `close()`.
- `gamehandlers.game_object_handler`
  - `GameObjectHandler`: `add_game_object()`, `remove_game_object()` and
    `delete_at_frame_end()` queue work for the next `tick()`, which updates
    every object whose `active` is true, highest `update_order` first (ties
    keep insertion order), then calls `destroy()` on the objects queued for
    deletion.
- `gamehandlers.camera_handler`
  - `Position2(x, y)`, `Camera(scene_owner=None, position=Position2())`.
  - `CameraHandler`: `active_camera` (setting `None` restores the default
    camera) and `camera_offset`. On `tick()` it falls back to the default
    camera when the active camera's scene, or any scene if the camera has no
    owner, is being unloaded.
- `gamehandlers.events_handler`
  - `EventsHandler(event_source=None)`: polls `event_source()` (default
    `pygame.event.get`) each tick and runs every `EventCallback` whose
    `event_type` matches; register more with `add_event_callback()`.
- `gamehandlers.window_handler`
  - `WindowHandler(title, x, y, width, height)`: `initialize()` opens the
    pygame window; `screen_width()`, `screen_height()`, `centre_screen_x()`,
    `centre_screen_y()`, `window_x()`, `window_y()`,
    `set_window_position()` and `link_to_renderer()`.
- `gamehandlers.display_handler`
  - `ColourRGBA(r, g, b, a=255)`.
  - `DisplayHandler(window_handler, camera_handler)`: `tick()` presents the
    frame and clears to a light lilac; `draw_rect(rect, rgba, relative,
    filled)` draws a rectangle, shifted by the camera offset when `relative`,
    and returns the screen rectangle.
- `gamehandlers.image_handler`
  - `ImageHandler(window_handler, camera_handler, workspace_path)`:
    `load_image()` (raises `FileNotFoundError`), `get_image_texture()`
    (raises `KeyError`), `draw_image()` with `FLIP_NONE`,
    `FLIP_HORIZONTAL`, `FLIP_VERTICAL`, `draw_image_at()`, and image drawers
    (`add_image_drawer()`, `remove_image_drawer()`,
    `reload_image_drawer_priorities()`) whose `draw()` runs every tick.
- `gamehandlers.input_handler`
  - `InputHandler(keyboard_source=None, mouse_source=None)`: `key_pressed()`,
    `key_just_pressed()`, `is_lmb_press()`, `is_rmb_press()`,
    `is_lmb_one_click()`, `is_rmb_one_click()`, `mouse_x()`, `mouse_y()`,
    and `NUMBER_KEYS`.

## Example

```python
from gamehandlers.handler import Handler
from gamehandlers.scene import SceneHandler


class Game:
    def __init__(self):
        self.handlers = []

    def add_handler(self, handler, tick_point):
        self.handlers.append((tick_point, handler))


class Thing:
    def set_scene_name(self, name):
        self.scene = name

    def destroy(self):
        pass


Handler.link_to_game(Game())


def build_level(game_objects):
    game_objects.append(Thing())


scenes = SceneHandler({"level": build_level})
scenes.load_scene("level")
scenes.tick()                      # the scene is loaded here
print(scenes.loaded_scene_names())  # ['level']
```

## What it does not do

There is no game class, main loop or command-line program: you write the
game object that owns the handlers and calls their `initialize()` and
`tick()` in order. The package also has no scene content, game object or
image-drawer classes of its own; it only defines the members it expects
them to have.
# sodacan

The core of a small 2D scene engine and its editor logic. Nothing is drawn on
screen. The package keeps the state and makes the decisions that a windowed
editor would rely on, and it returns plain data such as matrices and draw
commands.

## What is in it

- **`sodacan.events`**: `Event` and its subclasses. These are
  `WindowResizeEvent`, `WindowCloseEvent`, `AppTickEvent`, `AppUpdateEvent`,
  `AppRenderEvent`, `KeyPressEvent`, `KeyReleaseEvent`, `KeyTypeEvent`,
  `MouseMoveEvent`, `MouseScrollEvent`, `MouseClickedEvent` and
  `MouseReleasedEvent`. The module also has the `EventType` enum and the
  `EventCategory` flags.
  - `Event.is_in_category` tests whether an event is in a category.
  - `EventDispatcher.dispatch(event_class, handler)` calls the handler only when
    the event has that type. The handler's return value becomes `event.handled`.
- **`sodacan.timestep`**: `Timestep` is a `float` subclass for a frame delta in
  seconds. It has `seconds` and `milliseconds` properties.
- **`sodacan.layers`**:
  - `Layer` has the hooks `on_attach`, `on_detach`, `on_update`,
    `on_imgui_update`, `on_event` and `on_resize`. By default each hook only
    records what it saw.
  - `LayerStack` keeps ordinary layers before overlays. Iterate over it to go
    bottom to top, or call `reversed()` on it to go top to bottom.
- **`sodacan.glmath`**: 4×4 numpy matrices built by `translate`, `rotate`,
  `scale`, `ortho`, `perspective` and `look_at`.
- **`sodacan.scene_camera`**: `SceneCamera` with a `CameraType` of
  `ORTHOGRAPHIC` or `PERSPECTIVE`. The `projection` is rebuilt whenever a
  setting property changes.
  - All scene cameras share the aspect ratio from the most recent
    `set_viewport(width, height)`.
  - A zero or missing dimension raises `ValueError`.
- **`sodacan.components`**:
  - `NameComponent`, `TagComponent`, `CameraComponent` and `ScriptComponent`.
  - `TransformComponent` gives the model matrix through `transform()`.
  - `SpriteComponent` carries a colour and an optional `Texture`.
- **`sodacan.ecs`**:
  - `Scene.create_object` gives an object a name, the tag `"NotTagged"` and a
    transform.
  - `Object` has `add_component`, `get_component`, `has_component` and
    `delete_component`. Each of these raises `ComponentError` when the
    object's state does not allow it.
  - `ScriptEntity` is the base class for scripts.
  - `Scene.on_game_update` starts and updates scripts. It then returns a list
    of `DrawCommand`s, or an empty list when there is no primary camera.
  - `Scene.on_editor_update` always returns the sprites' draw commands.
- **`sodacan.editor_camera`**: `EditorCamera` is a perspective camera that
  reads held keys and mouse buttons from an `InputState`.
  - While mouse button 1 or left Alt is held, W, A, S, D, Q and E move it.
  - Dragging with mouse button 1 turns it.
  - Scrolling changes the zoom level and the speed.
- **`sodacan.serializer`**: `SceneSerializer` has `dumps`/`loads` for YAML text
  and `serialize`/`deserialize` for `.stscn` files. Any other extension, and
  any malformed document, raises `SceneFormatError`.
  - When reading, a camera's saved primary flag is not applied.
  - A sprite texture is only restored when the entry has a `Texture` key next
    to `TexturePath`.
- **`sodacan.panels`**:
  - `Panels` holds the editor's `SceneListPanel`, which tracks the selected
    object and can delete it.
  - It also holds the `EditWindows` and `ViewWindows` toggles.
  - It has helpers to create empty, camera and 2D objects, and to add
    components to the selection.
- **`sodacan.editor`**: `EditorLayer` ties an `EditorCamera`, `Panels` and a
  `Scene` together.
  - Its update resizes its render targets to the viewport sizes you give it.
    It moves the camera while `scene_panel_hovered` is set.
  - It stores `game_draw_commands` and `editor_draw_commands`.
  - `new_scene`, `save_scene` and `open_scene` handle files.
- **`sodacan.app`**: `App` owns a headless `Window` and a `LayerStack`.
  - `run(max_frames)` calls each layer's `on_update`, skipped while minimised,
    and `on_imgui_update` once per frame.
  - `on_event` handles close and resize, then passes the event down from the
    top layer until one marks it handled.
  - Only one `App` may exist at a time. Using it as a context manager releases
    it on exit.

## Installation

```
pip install .
```

## Example

```python
from sodacan.ecs import Scene
from sodacan.components import CameraComponent, SpriteComponent, TransformComponent
from sodacan.serializer import SceneSerializer

scene = Scene()
camera = scene.create_object("Camera")
camera.add_component(CameraComponent)

quad = scene.create_object("2D Object")
quad.add_component(SpriteComponent, (1.0, 0.5, 0.2, 1.0))
quad.get_component(TransformComponent).position = (2.0, 0.0, 0.0)

scene.on_game_resize(1280, 720)
commands = scene.on_game_update(0.016)   # one DrawCommand for the quad

SceneSerializer(scene).serialize("level.stscn")

restored = Scene()
SceneSerializer(restored).deserialize("level.stscn")
```

Running frames of an application:

```python
from sodacan.app import App
from sodacan.layers import Layer

with App("Demo") as app:
    layer = Layer("Game")
    app.push_layer(layer)
    app.run(max_frames=3)
    print(layer.update_count)   # 3
```

## What it does not do

- There is no window system, renderer or GUI. `Window` only counts frames and
  forwards the events you `emit` to it.
- Draw commands are returned to you, not drawn.
- Binary scene files (`.sbscn`) are not supported. `EditorLayer.save_scene`
  writes nothing for them and returns `False`, and `open_scene` leaves the new
  scene empty.
- There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```
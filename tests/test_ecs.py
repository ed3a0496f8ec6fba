import numpy as np
import pytest

from sodacan.components import (
    CameraComponent,
    NameComponent,
    ScriptComponent,
    SpriteComponent,
    TagComponent,
    Texture,
    TransformComponent,
)
from sodacan.ecs import ComponentError, Object, Scene, ScriptEntity


def test_create_object_has_base_components():
    scene = Scene()
    obj = scene.create_object("Player")
    assert obj.get_component(NameComponent).name == "Player"
    assert obj.get_component(TagComponent).tag == "NotTagged"
    assert obj.get_component(TransformComponent) == TransformComponent()


def test_create_object_default_name():
    obj = Scene().create_object()
    assert obj.get_component(NameComponent).name == "Object"


def test_add_existing_component_raises():
    obj = Scene().create_object()
    with pytest.raises(ComponentError):
        obj.add_component(TransformComponent)


def test_add_component_passes_arguments():
    obj = Scene().create_object()
    sprite = obj.add_component(SpriteComponent, (0.5, 0.5, 0.5, 1.0))
    assert obj.get_component(SpriteComponent) is sprite
    assert sprite.color == (0.5, 0.5, 0.5, 1.0)


def test_delete_and_get_missing_component_raise():
    obj = Scene().create_object()
    with pytest.raises(ComponentError):
        obj.delete_component(CameraComponent)
    with pytest.raises(ComponentError):
        obj.get_component(CameraComponent)


def test_delete_component():
    obj = Scene().create_object()
    obj.delete_component(TransformComponent)
    assert obj.has_component(TransformComponent) is False


def test_null_object():
    null = Object()
    assert not null
    assert null == Object()
    with pytest.raises(ComponentError):
        null.has_component(NameComponent)


def test_objects_equality_and_hash():
    scene = Scene()
    a = scene.create_object("a")
    b = scene.create_object("b")
    same = Object(a.id, scene)
    assert a == same
    assert a != b
    assert len({a, same, b}) == 2
    assert Object(a.id, Scene()) != a


def test_destroy_object():
    scene = Scene()
    a = scene.create_object("a")
    b = scene.create_object("b")
    scene.destroy_object(a)
    assert list(scene.objects()) == [b]
    assert a.has_component(NameComponent) is False
    with pytest.raises(ValueError):
        scene.destroy_object(a)


def test_objects_in_creation_order():
    scene = Scene()
    names = ["one", "two", "three"]
    for name in names:
        scene.create_object(name)
    assert [o.get_component(NameComponent).name for o in scene.objects()] == names


def test_primary_camera():
    scene = Scene()
    assert not scene.primary_camera()
    secondary = scene.create_object("secondary")
    secondary.add_component(CameraComponent, primary=False)
    main = scene.create_object("main")
    main.add_component(CameraComponent)
    assert scene.primary_camera() == main


def test_game_update_without_camera_draws_nothing():
    scene = Scene()
    scene.create_object().add_component(SpriteComponent)
    assert scene.on_game_update(0.016) == []


def test_game_update_with_camera_draws_sprites():
    scene = Scene()
    scene.create_object("camera").add_component(CameraComponent)
    quad = scene.create_object("quad")
    quad.get_component(TransformComponent).position = (1.0, 2.0, 0.0)
    quad.add_component(SpriteComponent, (0.1, 0.2, 0.3, 1.0))
    commands = scene.on_game_update(0.016)
    assert len(commands) == 1
    assert commands[0].color == (0.1, 0.2, 0.3, 1.0)
    assert commands[0].texture is None
    assert np.allclose(commands[0].transform, quad.get_component(TransformComponent).transform())


def test_editor_update_draws_without_camera_and_keeps_textures():
    scene = Scene()
    plain = scene.create_object()
    plain.add_component(SpriteComponent)
    textured = scene.create_object()
    textured.add_component(SpriteComponent, (1.0, 1.0, 1.0, 1.0), Texture("cat.png"))
    textured.get_component(SpriteComponent).texture_scale = 2.0
    commands = scene.on_editor_update(0.016, None)
    assert [c.texture for c in commands] == [None, Texture("cat.png")]
    assert commands[1].texture_scale == 2.0


class _Counter(ScriptEntity):
    def __init__(self):
        super().__init__()
        self.starts = 0
        self.updates = []

    def on_start(self):
        self.starts += 1

    def on_update(self, dt):
        self.updates.append(dt)
        self.get_component(TransformComponent).position = (float(len(self.updates)), 0.0, 0.0)


def test_scripts_start_once_and_update_every_frame():
    scene = Scene()
    obj = scene.create_object()
    obj.add_component(ScriptComponent).bind(_Counter)
    scene.on_game_update(0.5)
    scene.on_game_update(0.25)
    script = obj.get_component(ScriptComponent).script
    assert script.starts == 1
    assert script.updates == [0.5, 0.25]
    assert script.object == obj
    assert obj.get_component(TransformComponent).position == (2.0, 0.0, 0.0)


def test_unbound_script_raises():
    scene = Scene()
    scene.create_object().add_component(ScriptComponent)
    with pytest.raises(ComponentError):
        scene.on_game_update(0.1)


def test_game_resize_skips_fixed_cameras():
    scene = Scene()
    free = scene.create_object().add_component(CameraComponent)
    fixed = scene.create_object().add_component(CameraComponent, fixed_aspect_ratio=True)
    free.camera.set_viewport(1, 1)
    fixed.camera.set_viewport(1, 1)
    scene.on_game_resize(8, 2)
    assert free.camera.aspect_ratio == pytest.approx(4.0)
    assert fixed.camera.aspect_ratio == pytest.approx(1.0)


class _RecordingCamera:
    def __init__(self):
        self.sizes = []

    def on_resize(self, width, height):
        self.sizes.append((width, height))


def test_editor_resize_forwards_to_camera():
    camera = _RecordingCamera()
    Scene().on_editor_resize(640, 480, camera)
    assert camera.sizes == [(640, 480)]
import math

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


def test_name_and_tag_defaults():
    assert NameComponent().name == "Object"
    assert TagComponent().tag == "None"
    assert NameComponent("Player").name == "Player"


def test_default_transform_is_identity():
    assert np.allclose(TransformComponent().transform(), np.identity(4))


def test_transform_translation_column():
    component = TransformComponent(position=(1.0, 2.0, 3.0))
    assert np.allclose(component.transform()[:3, 3], [1.0, 2.0, 3.0])


def test_transform_scale_diagonal():
    component = TransformComponent(scale=(2.0, 3.0, 4.0))
    assert np.allclose(np.diag(component.transform()), [2.0, 3.0, 4.0, 1.0])


def test_transform_rotation_about_z_turns_x_into_y():
    component = TransformComponent(rotation=(0.0, 0.0, math.pi / 2))
    point = component.transform() @ np.array([1.0, 0.0, 0.0, 1.0])
    assert np.allclose(point, [0.0, 1.0, 0.0, 1.0])


def test_transform_rotation_keeps_lengths():
    component = TransformComponent(rotation=(0.3, 1.1, -0.7))
    matrix = component.transform()[:3, :3]
    assert np.allclose(matrix @ matrix.T, np.identity(3))


def test_transform_reset():
    component = TransformComponent((1.0, 1.0, 1.0), (0.5, 0.5, 0.5), (2.0, 2.0, 2.0))
    component.reset()
    assert component == TransformComponent()


def test_sprite_reset():
    sprite = SpriteComponent((0.2, 0.3, 0.4, 0.5), Texture("cat.png"), texture_scale=3.0)
    sprite.sprite_sheet = object()
    sprite.reset()
    assert sprite.color == (1.0, 1.0, 1.0, 1.0)
    assert sprite.texture is None
    assert sprite.sprite_sheet is None
    assert sprite.texture_scale == 1.0


def test_texture_equality_by_path():
    assert Texture("a.png") == Texture("a.png")
    assert Texture("a.png").path == "a.png"


def test_camera_reset_keeps_camera():
    component = CameraComponent(primary=False, fixed_aspect_ratio=True)
    camera = component.camera
    camera.ortho_zoom = 3.0
    component.reset()
    assert component.primary is True
    assert component.fixed_aspect_ratio is False
    assert component.camera is camera
    assert component.camera.ortho_zoom == 3.0


def test_camera_components_have_separate_cameras():
    first = CameraComponent()
    second = CameraComponent()
    first.camera.ortho_zoom = 3.0
    assert first.camera.ortho_zoom == 3.0
    assert second.camera.ortho_zoom == 10.0


class _Script:
    pass


def test_script_bind_and_destroy():
    component = ScriptComponent()
    component.bind(_Script)
    component.script = component.instantiate_script()
    assert isinstance(component.script, _Script)
    component.destroy_script(component)
    assert component.script is None


def test_script_reset():
    component = ScriptComponent(script=_Script())
    component.reset()
    assert component.script is None
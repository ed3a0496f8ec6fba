import math

import numpy as np
import pytest

from sodacan.editor_camera import EditorCamera, InputState, Key, MouseButton
from sodacan.events import MouseMoveEvent, MouseScrollEvent, WindowResizeEvent


@pytest.fixture
def held():
    return InputState()


@pytest.fixture
def camera(held):
    return EditorCamera(16.0 / 9.0, input_state=held)


def test_input_state_press_and_release():
    state = InputState()
    state.press_key(Key.W)
    state.press_mouse(MouseButton.BUTTON_1)
    assert state.is_key_pressed(Key.W)
    assert state.is_mouse_clicked(MouseButton.BUTTON_1)
    state.release_key(Key.W)
    state.release_mouse(MouseButton.BUTTON_1)
    assert not state.is_key_pressed(Key.W)
    assert not state.is_mouse_clicked(MouseButton.BUTTON_1)


def test_initial_state(camera):
    assert camera.position == (0.0, 0.0, camera.zoom_level)
    assert camera.forward == (0.0, 0.0, -1.0)
    assert camera.yaw == -90.0
    assert camera.pitch == 0.0


def test_view_maps_eye_to_origin(camera):
    eye = np.array([*camera.position, 1.0])
    assert np.allclose(camera.view_matrix @ eye, [0.0, 0.0, 0.0, 1.0])


def test_view_projection_is_product(camera):
    assert np.allclose(
        camera.view_projection_matrix, camera.projection_matrix @ camera.view_matrix
    )


def test_no_movement_without_modifier(camera, held):
    held.press_key(Key.W)
    camera.on_update(0.5)
    assert camera.position == (0.0, 0.0, 10.0)


def test_forward_movement_with_mouse(camera, held):
    held.press_mouse(MouseButton.BUTTON_1)
    held.press_key(Key.W)
    camera.on_update(0.5)
    assert camera.position == pytest.approx((0.0, 0.0, 7.5))
    eye = np.array([*camera.position, 1.0])
    assert np.allclose(camera.view_matrix @ eye, [0.0, 0.0, 0.0, 1.0])


def test_up_movement_with_alt(camera, held):
    held.press_key(Key.LEFT_ALT)
    held.press_key(Key.E)
    camera.on_update(0.1)
    x, y, z = camera.position
    assert y > 0.0
    assert x == 0.0 and z == 10.0


def test_strafe_right_moves_along_x(camera, held):
    held.press_key(Key.LEFT_ALT)
    held.press_key(Key.D)
    camera.on_update(0.2)
    x, y, z = camera.position
    assert x > 0.0
    assert y == pytest.approx(0.0)
    assert z == pytest.approx(10.0)


def test_opposite_keys_cancel(camera, held):
    held.press_key(Key.LEFT_ALT)
    for key in (Key.W, Key.S, Key.A, Key.D, Key.E, Key.Q):
        held.press_key(key)
    camera.on_update(1.0)
    assert camera.position == pytest.approx((0.0, 0.0, 10.0))


def test_scroll_changes_zoom_and_speed(camera):
    event = MouseScrollEvent(0.0, 1.0)
    camera.on_event(event)
    assert camera.camera_speed == 10.0
    assert camera.zoom_level == pytest.approx(9.75)
    assert event.handled is False


def test_scroll_zoom_is_clamped(camera):
    camera.on_event(MouseScrollEvent(0.0, 1000.0))
    assert camera.zoom_level == 0.25


def test_resize_event_sets_aspect(camera):
    camera.on_event(WindowResizeEvent(800, 400))
    assert camera.aspect_ratio == pytest.approx(800 / 400)
    projection = camera.projection_matrix
    assert projection[1, 1] / projection[0, 0] == pytest.approx(800 / 400)


def test_on_resize_updates_projection(camera):
    before = camera.projection_matrix
    camera.on_resize(1000.0, 250.0)
    assert camera.aspect_ratio == pytest.approx(1000.0 / 250.0)
    assert not np.allclose(before, camera.projection_matrix)


def test_mouse_move_without_button_does_nothing(camera):
    camera.on_event(MouseMoveEvent(10.0, 10.0))
    camera.on_event(MouseMoveEvent(500.0, 300.0))
    assert camera.yaw == -90.0
    assert camera.forward == (0.0, 0.0, -1.0)


def test_mouse_drag_changes_yaw(camera, held):
    held.press_mouse(MouseButton.BUTTON_1)
    camera.on_event(MouseMoveEvent(100.0, 100.0))
    assert camera.yaw == -90.0
    camera.on_event(MouseMoveEvent(110.0, 100.0))
    assert camera.yaw == pytest.approx(-85.0)
    assert math.isclose(np.linalg.norm(camera.forward), 1.0)


def test_pitch_is_clamped(camera, held):
    held.press_mouse(MouseButton.BUTTON_1)
    camera.on_event(MouseMoveEvent(0.0, 1000.0))
    camera.on_event(MouseMoveEvent(0.0, -5000.0))
    assert camera.pitch == 89.0
    camera.on_event(MouseMoveEvent(0.0, 20000.0))
    assert camera.pitch == -89.0


def test_release_resets_first_mouse(camera, held):
    held.press_mouse(MouseButton.BUTTON_1)
    camera.on_event(MouseMoveEvent(0.0, 0.0))
    held.release_mouse(MouseButton.BUTTON_1)
    camera.on_event(MouseMoveEvent(400.0, 0.0))
    held.press_mouse(MouseButton.BUTTON_1)
    camera.on_event(MouseMoveEvent(800.0, 0.0))
    assert camera.yaw == -90.0


def test_set_near_and_far_plane(camera):
    camera.set_near_and_far_plane(0.5, 50.0)
    assert camera.near_plane == 0.5
    assert camera.far_plane == 50.0
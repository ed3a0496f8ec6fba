"""Free-flying perspective camera used by the scene editor viewport."""

from __future__ import annotations

import enum
import math
from typing import Optional

import numpy as np

from . import glmath
from .events import Event, EventDispatcher, MouseMoveEvent, MouseScrollEvent, WindowResizeEvent

_UP = np.array([0.0, 1.0, 0.0])


class Key(enum.IntEnum):
    """Keyboard key codes the editor camera reacts to."""

    A = 65
    D = 68
    E = 69
    Q = 81
    S = 83
    W = 87
    LEFT_ALT = 342


class MouseButton(enum.IntEnum):
    """Mouse button numbers."""

    BUTTON_1 = 0
    BUTTON_2 = 1
    BUTTON_3 = 2


class InputState:
    """Which keys and mouse buttons are currently held down."""

    def __init__(self) -> None:
        self._keys: set[int] = set()
        self._buttons: set[int] = set()

    def press_key(self, key: int) -> None:
        self._keys.add(int(key))

    def release_key(self, key: int) -> None:
        self._keys.discard(int(key))

    def press_mouse(self, button: int) -> None:
        self._buttons.add(int(button))

    def release_mouse(self, button: int) -> None:
        self._buttons.discard(int(button))

    def is_key_pressed(self, key: int) -> bool:
        return int(key) in self._keys

    def is_mouse_clicked(self, button: int) -> bool:
        return int(button) in self._buttons


class EditorCamera:
    """Perspective camera moved with WASD/QE and aimed by dragging the mouse.

    Movement only happens while the first mouse button or left Alt is held.
    The plain attributes (speed, sensitivity, zoom, aspect ratio, fov) take
    effect on the next update or resize.
    """

    def __init__(
        self,
        aspect_ratio: float,
        input_state: Optional[InputState] = None,
        window_size: tuple[int, int] = (1600, 900),
    ) -> None:
        self.input = input_state if input_state is not None else InputState()
        self.camera_speed = 5.0
        self.camera_sensitivity = 0.5
        self.aspect_ratio = float(aspect_ratio)
        self.fov = 45.0
        self._near_plane = 0.01
        self._far_plane = 1000.0
        self.zoom_level = 10.0
        self._forward = np.array([0.0, 0.0, -1.0])
        self._position = np.array([0.0, 0.0, self.zoom_level])
        self._projection = np.identity(4)
        self._view = np.identity(4)
        self._view_projection = np.identity(4)
        self._recalculate()
        self.yaw = -90.0
        self.pitch = 0.0
        width, height = window_size
        self._last_x = float(int(width) // 2)
        self._last_y = float(int(height) // 2)
        self._first_mouse = True

    @property
    def position(self) -> tuple[float, float, float]:
        return tuple(float(v) for v in self._position)  # type: ignore[return-value]

    @property
    def forward(self) -> tuple[float, float, float]:
        return tuple(float(v) for v in self._forward)  # type: ignore[return-value]

    @property
    def near_plane(self) -> float:
        return self._near_plane

    @property
    def far_plane(self) -> float:
        return self._far_plane

    def set_near_and_far_plane(self, near_plane: float, far_plane: float) -> None:
        self._near_plane = float(near_plane)
        self._far_plane = float(far_plane)

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view.copy()

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection.copy()

    @property
    def view_projection_matrix(self) -> np.ndarray:
        return self._view_projection.copy()

    def on_update(self, dt: float) -> None:
        """Move according to held keys, then rebuild the matrices."""
        dt = float(dt)
        held = self.input
        if held.is_mouse_clicked(MouseButton.BUTTON_1) or held.is_key_pressed(Key.LEFT_ALT):
            step = self.camera_speed * dt
            if held.is_key_pressed(Key.E):
                self._position[1] += step
            if held.is_key_pressed(Key.Q):
                self._position[1] -= step
            if held.is_key_pressed(Key.W):
                self._position += self._forward * step
            if held.is_key_pressed(Key.S):
                self._position -= self._forward * step
            side = np.cross(self._forward, _UP)
            if held.is_key_pressed(Key.A):
                self._position -= side * step
            if held.is_key_pressed(Key.D):
                self._position += side * step
        self._recalculate()

    def on_event(self, event: Event) -> None:
        dispatcher = EventDispatcher(event)
        dispatcher.dispatch(MouseScrollEvent, self._on_mouse_scrolled)
        dispatcher.dispatch(WindowResizeEvent, self._on_window_resized)
        dispatcher.dispatch(MouseMoveEvent, self._on_mouse_move)

    def on_resize(self, width: float, height: float) -> None:
        with np.errstate(divide="ignore", invalid="ignore"):
            self.aspect_ratio = float(np.float64(width) / np.float64(height))
        self._recalculate()

    def _on_mouse_scrolled(self, event: MouseScrollEvent) -> bool:
        self.camera_speed = self.zoom_level
        self.zoom_level -= event.y_offset * 0.25
        self.zoom_level = max(self.zoom_level, 0.25)
        self._recalculate()
        return False

    def _on_window_resized(self, event: WindowResizeEvent) -> bool:
        self.on_resize(float(event.width), float(event.height))
        return False

    def _on_mouse_move(self, event: MouseMoveEvent) -> bool:
        if not self.input.is_mouse_clicked(MouseButton.BUTTON_1):
            self._first_mouse = True
            return False

        if self._first_mouse:
            self._last_x = event.x
            self._last_y = event.y
            self._first_mouse = False

        x_offset = (event.x - self._last_x) * self.camera_sensitivity
        y_offset = (self._last_y - event.y) * self.camera_sensitivity
        self._last_x = event.x
        self._last_y = event.y

        self.yaw += x_offset
        self.pitch = min(max(self.pitch + y_offset, -89.0), 89.0)

        yaw, pitch = math.radians(self.yaw), math.radians(self.pitch)
        self._forward = np.array([
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        ])
        return False

    def _recalculate(self) -> None:
        self._projection = glmath.perspective(
            self.fov, self.aspect_ratio, self._near_plane, self._far_plane
        )
        self._view = glmath.look_at(self._position, self._position + self._forward, _UP)
        self._view_projection = self._projection @ self._view
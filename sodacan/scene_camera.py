"""Scene camera with switchable orthographic and perspective projections."""

from __future__ import annotations

import enum
import math
from typing import ClassVar

import numpy as np

from . import glmath


class CameraType(enum.Enum):
    """Projection kind used by a scene camera."""

    ORTHOGRAPHIC = 0
    PERSPECTIVE = 1


class SceneCamera:
    """A camera whose projection is rebuilt whenever a setting changes.

    All scene cameras share the aspect ratio set by the most recent
    :meth:`set_viewport` call with a size. New cameras, and calls with no
    size, pick that shared value up.
    """

    _common_aspect_ratio: ClassVar[float] = 0.0

    def __init__(self) -> None:
        self._camera_type = CameraType.ORTHOGRAPHIC
        self._aspect_ratio = 0.0
        self._ortho_zoom = 10.0
        self._ortho_near = 1.0
        self._ortho_far = -1.0
        self._perspective_fov = math.radians(45.0)
        self._perspective_near = 0.01
        self._perspective_far = 1000.0
        self._projection = np.identity(4)
        self.set_viewport()

    def set_ortho_camera(self, size: float, near_plane: float, far_plane: float) -> None:
        """Set every orthographic setting at once."""
        self._ortho_zoom = float(size)
        self._ortho_near = float(near_plane)
        self._ortho_far = float(far_plane)
        self._recalculate()

    def set_perspective_camera(self, fov: float, near_plane: float, far_plane: float) -> None:
        """Set every perspective setting at once; ``fov`` in radians."""
        self._perspective_fov = float(fov)
        self._perspective_near = float(near_plane)
        self._perspective_far = float(far_plane)
        self._recalculate()

    def set_viewport(self, width: int | None = None, height: int | None = None) -> None:
        """Adopt the aspect ratio of a viewport, or the shared one if no size is given."""
        if width is not None or height is not None:
            if width is None or height is None or width <= 0 or height <= 0:
                raise ValueError("0 Width And Height Gives 0 Aspect Ratio")
            SceneCamera._common_aspect_ratio = float(width) / float(height)
        self._aspect_ratio = SceneCamera._common_aspect_ratio
        self._recalculate()

    @property
    def camera_type(self) -> CameraType:
        return self._camera_type

    @camera_type.setter
    def camera_type(self, value: CameraType) -> None:
        self._camera_type = CameraType(value)
        self._recalculate()

    @property
    def ortho_zoom(self) -> float:
        return self._ortho_zoom

    @ortho_zoom.setter
    def ortho_zoom(self, value: float) -> None:
        self._ortho_zoom = float(value)
        self._recalculate()

    @property
    def ortho_near_plane(self) -> float:
        return self._ortho_near

    @ortho_near_plane.setter
    def ortho_near_plane(self, value: float) -> None:
        self._ortho_near = float(value)
        self._recalculate()

    @property
    def ortho_far_plane(self) -> float:
        return self._ortho_far

    @ortho_far_plane.setter
    def ortho_far_plane(self, value: float) -> None:
        self._ortho_far = float(value)
        self._recalculate()

    @property
    def perspective_fov(self) -> float:
        return self._perspective_fov

    @perspective_fov.setter
    def perspective_fov(self, value: float) -> None:
        self._perspective_fov = float(value)
        self._recalculate()

    @property
    def perspective_near_plane(self) -> float:
        return self._perspective_near

    @perspective_near_plane.setter
    def perspective_near_plane(self, value: float) -> None:
        self._perspective_near = float(value)
        self._recalculate()

    @property
    def perspective_far_plane(self) -> float:
        return self._perspective_far

    @perspective_far_plane.setter
    def perspective_far_plane(self, value: float) -> None:
        self._perspective_far = float(value)
        self._recalculate()

    @property
    def aspect_ratio(self) -> float:
        return self._aspect_ratio

    @property
    def projection(self) -> np.ndarray:
        """The current projection matrix (a copy)."""
        return self._projection.copy()

    def _recalculate(self) -> None:
        if self._camera_type is CameraType.ORTHOGRAPHIC:
            half_width = self._ortho_zoom * self._aspect_ratio * 0.5
            half_height = self._ortho_zoom * 0.5
            self._projection = glmath.ortho(
                -half_width, half_width, -half_height, half_height,
                self._ortho_near, self._ortho_far,
            )
        else:
            self._projection = glmath.perspective(
                self._perspective_fov, self._aspect_ratio,
                self._perspective_near, self._perspective_far,
            )
"""4x4 transform and projection matrices for column vectors (right-handed)."""

from __future__ import annotations

from typing import Sequence

import numpy as np

Vector = Sequence[float]


def _f(value: float) -> np.float64:
    return np.float64(value)


def translate(offset: Vector) -> np.ndarray:
    """Matrix moving points by ``offset``."""
    matrix = np.identity(4)
    matrix[:3, 3] = np.asarray(offset, dtype=float)
    return matrix


def rotate(angle: float, axis: Vector) -> np.ndarray:
    """Matrix rotating by ``angle`` radians about ``axis`` (normalised first)."""
    direction = np.asarray(axis, dtype=float)
    direction = direction / np.linalg.norm(direction)
    x, y, z = direction
    c, s = np.cos(angle), np.sin(angle)
    t = 1.0 - c
    matrix = np.identity(4)
    matrix[:3, :3] = [
        [c + t * x * x, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, c + t * y * y, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, c + t * z * z],
    ]
    return matrix


def scale(factors: Vector) -> np.ndarray:
    """Matrix scaling each axis by the matching factor."""
    return np.diag([*np.asarray(factors, dtype=float), 1.0])


def ortho(left: float, right: float, bottom: float, top: float, near: float, far: float) -> np.ndarray:
    """Orthographic projection onto clip space with depth in [-1, 1]."""
    with np.errstate(divide="ignore", invalid="ignore"):
        width = _f(right) - _f(left)
        height = _f(top) - _f(bottom)
        depth = _f(far) - _f(near)
        matrix = np.identity(4)
        matrix[0, 0] = 2.0 / width
        matrix[1, 1] = 2.0 / height
        matrix[2, 2] = -2.0 / depth
        matrix[0, 3] = -(right + left) / width
        matrix[1, 3] = -(top + bottom) / height
        matrix[2, 3] = -(far + near) / depth
    return matrix


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Perspective projection; ``fovy`` in radians, depth mapped to [-1, 1]."""
    with np.errstate(divide="ignore", invalid="ignore"):
        focal = 1.0 / np.tan(_f(fovy) / 2.0)
        depth = _f(far) - _f(near)
        matrix = np.zeros((4, 4))
        matrix[0, 0] = focal / _f(aspect)
        matrix[1, 1] = focal
        matrix[2, 2] = -(far + near) / depth
        matrix[2, 3] = -(2.0 * far * near) / depth
        matrix[3, 2] = -1.0
    return matrix


def look_at(eye: Vector, center: Vector, up: Vector) -> np.ndarray:
    """View matrix placing the camera at ``eye`` looking towards ``center``."""
    eye_v = np.asarray(eye, dtype=float)
    forward = np.asarray(center, dtype=float) - eye_v
    forward = forward / np.linalg.norm(forward)
    side = np.cross(forward, np.asarray(up, dtype=float))
    side = side / np.linalg.norm(side)
    upward = np.cross(side, forward)
    matrix = np.identity(4)
    matrix[0, :3] = side
    matrix[1, :3] = upward
    matrix[2, :3] = -forward
    matrix[0, 3] = -side @ eye_v
    matrix[1, 3] = -upward @ eye_v
    matrix[2, 3] = forward @ eye_v
    return matrix
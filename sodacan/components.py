"""Components that can be attached to scene objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import numpy as np

from . import glmath
from .scene_camera import SceneCamera

Vec3 = tuple[float, float, float]
Vec4 = tuple[float, float, float, float]


@dataclass(frozen=True)
class Texture:
    """A 2D texture identified by the image file it was loaded from."""

    path: str


@dataclass
class NameComponent:
    name: str = "Object"


@dataclass
class TagComponent:
    tag: str = "None"


@dataclass
class TransformComponent:
    """Position, rotation (radians, per axis) and scale of an object."""

    position: Vec3 = (0.0, 0.0, 0.0)
    rotation: Vec3 = (0.0, 0.0, 0.0)
    scale: Vec3 = (1.0, 1.0, 1.0)

    def transform(self) -> np.ndarray:
        """Model matrix: translation, then X, Y, Z rotations, then scale."""
        rx, ry, rz = self.rotation
        rotation = (
            glmath.rotate(rx, (1.0, 0.0, 0.0))
            @ glmath.rotate(ry, (0.0, 1.0, 0.0))
            @ glmath.rotate(rz, (0.0, 0.0, 1.0))
        )
        return glmath.translate(self.position) @ rotation @ glmath.scale(self.scale)

    def reset(self) -> None:
        self.position = (0.0, 0.0, 0.0)
        self.rotation = (0.0, 0.0, 0.0)
        self.scale = (1.0, 1.0, 1.0)


@dataclass
class SpriteComponent:
    """A coloured, optionally textured quad."""

    color: Vec4 = (1.0, 1.0, 1.0, 1.0)
    texture: Optional[Texture] = None
    sprite_sheet: Any = None
    texture_scale: float = 1.0

    def reset(self) -> None:
        self.color = (1.0, 1.0, 1.0, 1.0)
        self.texture_scale = 1.0
        self.texture = None
        self.sprite_sheet = None


@dataclass
class CameraComponent:
    camera: SceneCamera = field(default_factory=SceneCamera)
    primary: bool = True
    fixed_aspect_ratio: bool = False

    def reset(self) -> None:
        """Restore the flags; the camera's own settings are kept."""
        self.primary = True
        self.fixed_aspect_ratio = False


@dataclass
class ScriptComponent:
    """Holds a script instance and the hooks that create and destroy it."""

    script: Any = None
    instantiate_script: Optional[Callable[[], Any]] = None
    destroy_script: Optional[Callable[["ScriptComponent"], None]] = None

    def bind(self, script_class: Callable[[], Any]) -> None:
        """Use ``script_class`` to create this component's script when needed."""
        self.instantiate_script = script_class
        self.destroy_script = _drop_script

    def reset(self) -> None:
        self.script = None


def _drop_script(component: ScriptComponent) -> None:
    component.script = None
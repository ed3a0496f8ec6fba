"""Saving and loading scenes as YAML text files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .components import (
    CameraComponent,
    NameComponent,
    SpriteComponent,
    TagComponent,
    Texture,
    TransformComponent,
)
from .ecs import Object, Scene
from .scene_camera import CameraType

log = logging.getLogger(__name__)

TEXT_EXTENSION = ".stscn"


class SceneFormatError(Exception):
    """Raised when a scene file cannot be written or read."""


class _FlowList(list):
    pass


class _SceneDumper(yaml.SafeDumper):
    pass


def _represent_flow(dumper: yaml.SafeDumper, data: _FlowList) -> yaml.Node:
    return dumper.represent_sequence("tag:yaml.org,2002:seq", data, flow_style=True)


_SceneDumper.add_representer(_FlowList, _represent_flow)


def _vector(values: Any) -> _FlowList:
    return _FlowList(float(v) for v in values)


def _object_to_dict(obj: Object) -> dict[str, Any]:
    entry: dict[str, Any] = {"ObjectID": 69}
    if obj.has_component(NameComponent):
        entry["Name"] = obj.get_component(NameComponent).name
    if obj.has_component(TagComponent):
        entry["Tag"] = obj.get_component(TagComponent).tag
    if obj.has_component(TransformComponent):
        transform = obj.get_component(TransformComponent)
        entry["TransformComponent"] = {
            "Position": _vector(transform.position),
            "Rotation": _vector(transform.rotation),
            "Scale": _vector(transform.scale),
        }
    if obj.has_component(CameraComponent):
        component = obj.get_component(CameraComponent)
        camera = component.camera
        entry["CameraComponent"] = {
            "PrimaryCamera": bool(component.primary),
            "FixedAspectRatio": bool(component.fixed_aspect_ratio),
            "CameraType": "Orthographic"
            if camera.camera_type is CameraType.ORTHOGRAPHIC
            else "Perspective",
            "Zoom": float(camera.ortho_zoom),
            "OrthoNearPlane": float(camera.ortho_near_plane),
            "OrthoFarPlane": float(camera.ortho_far_plane),
            "FOV": float(camera.perspective_fov),
            "PersNearPlane": float(camera.perspective_near_plane),
            "PersFarPlane": float(camera.perspective_far_plane),
        }
    if obj.has_component(SpriteComponent):
        sprite = obj.get_component(SpriteComponent)
        sprite_entry: dict[str, Any] = {"Color": _vector(sprite.color)}
        if sprite.texture is not None:
            sprite_entry["TexturePath"] = sprite.texture.path
            sprite_entry["TextureScale"] = float(sprite.texture_scale)
        entry["SpriteComponent"] = sprite_entry
    return entry


def _require(node: Mapping[str, Any], key: str) -> Any:
    if not isinstance(node, Mapping) or key not in node:
        raise SceneFormatError(f"Missing '{key}'")
    return node[key]


def _as_str(node: Mapping[str, Any], key: str) -> str:
    value = _require(node, key)
    if value is None or isinstance(value, (list, dict)):
        raise SceneFormatError(f"'{key}' must be a scalar")
    return str(value)


def _as_float(node: Mapping[str, Any], key: str) -> float:
    return _to_float(_require(node, key), key)


def _to_float(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SceneFormatError(f"'{key}' must be a number")
    return float(value)


def _as_bool(node: Mapping[str, Any], key: str) -> bool:
    value = _require(node, key)
    if not isinstance(value, bool):
        raise SceneFormatError(f"'{key}' must be true or false")
    return value


def _as_int(node: Mapping[str, Any], key: str) -> int:
    value = _require(node, key)
    if isinstance(value, bool):
        raise SceneFormatError(f"'{key}' must be an unsigned integer")
    try:
        number = int(str(value))
    except ValueError as exc:
        raise SceneFormatError(f"'{key}' must be an unsigned integer") from exc
    if number < 0:
        raise SceneFormatError(f"'{key}' must be an unsigned integer")
    return number


def _as_vector(node: Mapping[str, Any], key: str, size: int) -> tuple[float, ...]:
    value = _require(node, key)
    if not isinstance(value, list) or len(value) != size:
        raise SceneFormatError(f"'{key}' must be a sequence of {size} numbers")
    return tuple(_to_float(v, key) for v in value)


def _check_extension(filepath: str | os.PathLike[str], action: str) -> Path:
    path = Path(filepath)
    if path.suffix != TEXT_EXTENSION:
        raise SceneFormatError(
            f"You Are Trying To {action} A Text Based Scene File With An "
            f"Extension Other Than '{TEXT_EXTENSION}'"
        )
    return path


class SceneSerializer:
    """Writes a scene to text and adds objects read from text to a scene."""

    def __init__(self, scene: Scene) -> None:
        self.scene = scene

    def dumps(self) -> str:
        """The scene as YAML text."""
        document = {
            "Scene": "UnNamed",
            "Objects": [_object_to_dict(obj) for obj in self.scene.objects()],
        }
        return yaml.dump(
            document, Dumper=_SceneDumper, default_flow_style=False, sort_keys=False
        )

    def loads(self, text: str) -> None:
        """Create the objects described by ``text`` in the scene.

        As in the scene format's reader, a camera's saved primary flag is not
        applied, and a sprite texture is only loaded when a ``Texture`` key is
        present alongside ``TexturePath``.
        """
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise SceneFormatError(f"Failed To Load: {exc}") from exc
        if not isinstance(data, Mapping):
            raise SceneFormatError("Failed To Load: the document is not a mapping")
        if "Scene" not in data:
            log.info("The document is not a scene file")

        objects = data.get("Objects") or []
        if not isinstance(objects, list):
            raise SceneFormatError("'Objects' must be a sequence")
        for entry in objects:
            self._load_object(entry)

    def _load_object(self, entry: Any) -> None:
        if not isinstance(entry, Mapping):
            raise SceneFormatError("Every object must be a mapping")
        uuid = _as_int(entry, "ObjectID")
        name = _as_str(entry, "Name")
        tag = _as_str(entry, "Tag")
        obj = self.scene.create_object(name)
        obj.get_component(TagComponent).tag = tag
        log.info("Deserialized An Object With ID: %d", uuid)

        if entry.get("TransformComponent"):
            node = entry["TransformComponent"]
            transform = obj.get_component(TransformComponent)
            transform.position = _as_vector(node, "Position", 3)  # type: ignore[assignment]
            transform.rotation = _as_vector(node, "Rotation", 3)  # type: ignore[assignment]
            transform.scale = _as_vector(node, "Scale", 3)  # type: ignore[assignment]

        if entry.get("CameraComponent"):
            node = entry["CameraComponent"]
            component = obj.add_component(CameraComponent)
            component.fixed_aspect_ratio = _as_bool(node, "PrimaryCamera")
            component.fixed_aspect_ratio = _as_bool(node, "FixedAspectRatio")
            camera = component.camera
            if _as_str(node, "CameraType") == "Orthographic":
                camera.camera_type = CameraType.ORTHOGRAPHIC
            else:
                camera.camera_type = CameraType.PERSPECTIVE
            camera.ortho_zoom = _as_float(node, "Zoom")
            camera.ortho_near_plane = _as_float(node, "OrthoNearPlane")
            camera.ortho_far_plane = _as_float(node, "OrthoFarPlane")
            camera.perspective_fov = _as_float(node, "FOV")
            camera.perspective_near_plane = _as_float(node, "PersNearPlane")
            camera.perspective_far_plane = _as_float(node, "PersFarPlane")

        if entry.get("SpriteComponent"):
            node = entry["SpriteComponent"]
            sprite = obj.add_component(SpriteComponent)
            sprite.color = _as_vector(node, "Color", 4)  # type: ignore[assignment]
            if node.get("Texture"):
                sprite.texture = Texture(_as_str(node, "TexturePath"))
                sprite.texture_scale = _as_float(node, "TextureScale")

    def serialize(self, filepath: str | os.PathLike[str]) -> None:
        """Write the scene to a ``.stscn`` file."""
        path = _check_extension(filepath, "Save")
        path.write_text(self.dumps(), encoding="utf-8")

    def deserialize(self, filepath: str | os.PathLike[str]) -> None:
        """Read a ``.stscn`` file into the scene."""
        path = _check_extension(filepath, "Load")
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SceneFormatError(f"Failed To Load: {path}") from exc
        self.loads(text)
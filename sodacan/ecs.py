"""Scenes made of objects that carry components, and their update logic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional, TypeVar

import numpy as np

from .components import (
    CameraComponent,
    NameComponent,
    ScriptComponent,
    SpriteComponent,
    TagComponent,
    Texture,
    TransformComponent,
)
from .timestep import Timestep

C = TypeVar("C")


class ComponentError(Exception):
    """Raised when a component operation does not fit the object's state."""


@dataclass(eq=False)
class DrawCommand:
    """One quad to be drawn for a sprite."""

    transform: np.ndarray
    color: tuple[float, float, float, float]
    texture: Optional[Texture] = None
    texture_scale: float = 1.0


class Object:
    """A handle to an entity in a scene. ``Object()`` is the null handle."""

    def __init__(self, entity: Optional[int] = None, scene: Optional["Scene"] = None) -> None:
        self._entity = entity
        self._scene = scene

    @property
    def id(self) -> Optional[int]:
        return self._entity

    @property
    def scene(self) -> Optional["Scene"]:
        return self._scene

    def _components(self) -> dict[type, Any]:
        if self._entity is None or self._scene is None:
            raise ComponentError("The Object Is Not Valid")
        return self._scene._registry.get(self._entity, {})

    def add_component(self, component_type: type[C], *args: Any, **kwargs: Any) -> C:
        """Create a component on this object and return it."""
        if self.has_component(component_type):
            raise ComponentError("The Component Already Exists")
        components = self._components()
        if self._entity not in self._scene._registry:  # type: ignore[union-attr]
            raise ComponentError("The Object Has Been Destroyed")
        component = component_type(*args, **kwargs)
        components[component_type] = component
        return component

    def delete_component(self, component_type: type) -> None:
        if not self.has_component(component_type):
            raise ComponentError("The Component Doesnt Exist")
        del self._components()[component_type]

    def get_component(self, component_type: type[C]) -> C:
        if not self.has_component(component_type):
            raise ComponentError("The Component Doesnt Exist")
        return self._components()[component_type]

    def has_component(self, component_type: type) -> bool:
        return component_type in self._components()

    def __bool__(self) -> bool:
        return self._entity is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Object):
            return NotImplemented
        return self._entity == other._entity and self._scene is other._scene

    def __hash__(self) -> int:
        return hash((self._entity, id(self._scene)))

    def __repr__(self) -> str:
        return f"Object({self._entity})"


class ScriptEntity:
    """Base for scripts attached to objects through a ScriptComponent."""

    def __init__(self) -> None:
        self.object = Object()

    def on_start(self) -> None:
        """Called on the first game update after the script is created."""

    def on_update(self, dt: Timestep) -> None:
        """Called on every game update."""

    def on_destroy(self) -> None:
        """Called when the script is torn down."""

    def get_component(self, component_type: type[C]) -> C:
        return self.object.get_component(component_type)


class Scene:
    """A collection of objects and the components attached to them."""

    def __init__(self) -> None:
        self._registry: dict[int, dict[type, Any]] = {}
        self._next_entity = 0

    def create_object(self, name: str = "Object") -> Object:
        """Create an object with a name, an untagged tag and a transform."""
        entity = self._next_entity
        self._next_entity += 1
        self._registry[entity] = {}
        obj = Object(entity, self)
        obj.add_component(NameComponent, name)
        obj.add_component(TagComponent, "NotTagged")
        obj.add_component(TransformComponent)
        return obj

    def destroy_object(self, obj: Object) -> None:
        if obj.scene is not self or obj.id not in self._registry:
            raise ValueError(f"{obj!r} does not belong to this scene")
        del self._registry[obj.id]

    def objects(self) -> Iterator[Object]:
        """Every live object, in creation order."""
        return (Object(entity, self) for entity in list(self._registry))

    def _with(self, *component_types: type) -> list[Object]:
        return [
            Object(entity, self)
            for entity, components in list(self._registry.items())
            if all(t in components for t in component_types)
        ]

    def primary_camera(self) -> Object:
        """The first object whose camera is primary, or the null object."""
        for obj in self._with(CameraComponent):
            if obj.get_component(CameraComponent).primary:
                return obj
        return Object()

    def _sprite_commands(self) -> list[DrawCommand]:
        commands = []
        for obj in self._with(TransformComponent, SpriteComponent):
            transform = obj.get_component(TransformComponent).transform()
            sprite = obj.get_component(SpriteComponent)
            if sprite.texture is not None:
                commands.append(DrawCommand(transform, sprite.color, sprite.texture, sprite.texture_scale))
            else:
                commands.append(DrawCommand(transform, sprite.color))
        return commands

    def on_editor_update(self, dt: Timestep, editor_camera: Any) -> list[DrawCommand]:
        """Draw commands for every sprite as seen from the editor camera."""
        return self._sprite_commands()

    def on_editor_resize(self, width: int, height: int, editor_camera: Any) -> None:
        editor_camera.on_resize(width, height)

    def on_game_update(self, dt: Timestep) -> list[DrawCommand]:
        """Run scripts, then return draw commands if a primary camera exists."""
        for obj in self._with(ScriptComponent):
            component = obj.get_component(ScriptComponent)
            if component.script is None:
                if component.instantiate_script is None:
                    raise ComponentError("The Script Component Has No Bound Script")
                component.script = component.instantiate_script()
                component.script.object = obj
                component.script.on_start()
            component.script.on_update(dt)

        has_camera = any(
            obj.get_component(CameraComponent).primary
            for obj in self._with(TransformComponent, CameraComponent)
        )
        if not has_camera:
            return []
        return self._sprite_commands()

    def on_game_resize(self, width: int, height: int) -> None:
        """Resize every camera that does not keep a fixed aspect ratio."""
        for obj in self._with(CameraComponent):
            component = obj.get_component(CameraComponent)
            if not component.fixed_aspect_ratio:
                component.camera.set_viewport(width, height)
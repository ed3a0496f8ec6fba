"""Editor panel state: the object list, selection and optional windows."""

from __future__ import annotations

import enum
from typing import Optional, TypeVar

from .components import CameraComponent, SpriteComponent
from .ecs import Object, Scene

C = TypeVar("C")


class EditWindows(enum.IntFlag):
    """Optional windows opened from the Edit menu."""

    NONE = 0
    SHOW_EDITOR_SETTINGS = 1 << 0


class ViewWindows(enum.IntFlag):
    """Optional windows opened from the View menu."""

    NONE = 0
    SHOW_RENDER_STATS = 1 << 0
    SHOW_PROFILER = 1 << 1


class SceneListPanel:
    """The list of a scene's objects and the one that is selected."""

    def __init__(self, scene: Optional[Scene] = None) -> None:
        self.scene = scene
        self.selected = Object()

    def select(self, obj: Object) -> None:
        self.selected = obj

    def clear_selection(self) -> None:
        self.selected = Object()

    def delete_object(self, obj: Object) -> None:
        """Destroy an object in the scene and clear the selection."""
        self._require_scene().destroy_object(obj)
        self.selected = Object()

    def reset_component(self, component_type: type) -> None:
        """Restore the selected object's component to its defaults."""
        self.selected.get_component(component_type).reset()

    def remove_component(self, component_type: type) -> None:
        """Remove a component from the selected object."""
        self.selected.delete_component(component_type)

    def _require_scene(self) -> Scene:
        if self.scene is None:
            raise RuntimeError("No scene is set")
        return self.scene


class Panels:
    """Holds every editor panel and which optional windows are shown."""

    def __init__(self) -> None:
        self.scene_list_panel = SceneListPanel()
        self.edit_windows = EditWindows.NONE
        self.view_windows = ViewWindows.NONE

    def set_scene(self, scene: Scene) -> None:
        """Show ``scene`` in the panels, dropping any selection."""
        self.scene_list_panel.scene = scene
        self.scene_list_panel.selected = Object()

    def toggle_edit_windows(self, option: EditWindows) -> None:
        self.edit_windows = EditWindows(self.edit_windows ^ option)

    def toggle_view_windows(self, option: ViewWindows) -> None:
        self.view_windows = ViewWindows(self.view_windows ^ option)

    def create_empty_object(self) -> Object:
        return self.scene_list_panel._require_scene().create_object("Empty Object")

    def create_camera_object(self) -> Object:
        obj = self.scene_list_panel._require_scene().create_object("Camera")
        obj.add_component(CameraComponent)
        return obj

    def create_2d_object(self) -> Object:
        obj = self.scene_list_panel._require_scene().create_object("2D Object")
        obj.add_component(SpriteComponent, (1.0, 1.0, 1.0, 1.0))
        return obj

    def add_component(self, component_type: type[C]) -> C:
        """Add a component to the selected object and return it."""
        selected = self.scene_list_panel.selected
        if component_type is SpriteComponent:
            return selected.add_component(component_type, (1.0, 1.0, 1.0, 1.0))
        return selected.add_component(component_type)
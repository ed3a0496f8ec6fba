"""The scene editor layer: two viewports over one scene, plus file actions."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .ecs import DrawCommand, Scene
from .editor_camera import EditorCamera, InputState
from .events import Event
from .layers import Layer
from .panels import Panels
from .serializer import TEXT_EXTENSION, SceneSerializer
from .timestep import Timestep

log = logging.getLogger(__name__)

BINARY_EXTENSION = ".sbscn"


@dataclass
class _Framebuffer:
    width: int = 16
    height: int = 9

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def needs_refresh(self, viewport: tuple[float, float]) -> bool:
        x, y = viewport
        return x > 0.0 and y > 0.0 and (self.width != x or self.height != y)

    def refresh(self, width: int, height: int) -> None:
        self.width = width
        self.height = height


class EditorLayer(Layer):
    """Edits a scene through an editor viewport and previews it in a game viewport.

    The viewport sizes and hover state are set by whatever hosts the panels;
    each update resizes the render targets and cameras to match, moves the
    editor camera while its viewport is hovered, and collects the draw
    commands for both viewports.
    """

    def __init__(self, input_state: Optional[InputState] = None) -> None:
        super().__init__("SodaCan")
        self.editor_camera = EditorCamera(16.0 / 9.0, input_state=input_state)
        self.panels = Panels()
        self.scene: Optional[Scene] = None
        self.editor_viewport_size: tuple[float, float] = (0.0, 0.0)
        self.game_viewport_size: tuple[float, float] = (0.0, 0.0)
        self.scene_panel_focused = False
        self.scene_panel_hovered = False
        self.game_panel_focused = False
        self.game_panel_hovered = False
        self.editor_draw_commands: list[DrawCommand] = []
        self.game_draw_commands: list[DrawCommand] = []
        self._editor_framebuffer = _Framebuffer()
        self._game_framebuffer = _Framebuffer()

    @property
    def editor_framebuffer_size(self) -> tuple[int, int]:
        return self._editor_framebuffer.size

    @property
    def game_framebuffer_size(self) -> tuple[int, int]:
        return self._game_framebuffer.size

    def on_attach(self) -> None:
        """Create the render targets and an empty scene."""
        self._editor_framebuffer = _Framebuffer(16, 9)
        self._game_framebuffer = _Framebuffer(16, 9)
        self.scene = Scene()
        self.panels.set_scene(self.scene)

    def _require_scene(self) -> Scene:
        if self.scene is None:
            raise RuntimeError("The editor layer has not been attached")
        return self.scene

    def on_update(self, dt: Timestep) -> None:
        """Resize to the viewports, move the camera, and render both views."""
        scene = self._require_scene()

        if self._game_framebuffer.needs_refresh(self.game_viewport_size):
            width, height = (int(v) for v in self.game_viewport_size)
            self._game_framebuffer.refresh(width, height)
            scene.on_game_resize(width, height)

        if self._editor_framebuffer.needs_refresh(self.editor_viewport_size):
            width, height = (int(v) for v in self.editor_viewport_size)
            self._editor_framebuffer.refresh(width, height)
            self.editor_camera.on_resize(*self.editor_viewport_size)
            scene.on_editor_resize(width, height, self.editor_camera)

        if self.scene_panel_hovered:
            self.editor_camera.on_update(dt)

        self.game_draw_commands = scene.on_game_update(dt)
        self.editor_draw_commands = scene.on_editor_update(dt, self.editor_camera)

    def on_event(self, event: Event) -> None:
        self.editor_camera.on_event(event)

    def set_viewport_sizes(
        self, editor_size: tuple[float, float], game_size: tuple[float, float]
    ) -> None:
        """Record the space available to the editor and game viewports."""
        ex, ey = editor_size
        gx, gy = game_size
        self.editor_viewport_size = (float(ex), float(ey))
        self.game_viewport_size = (float(gx), float(gy))

    def _replace_scene(self) -> Scene:
        self.scene = Scene()
        self.panels.set_scene(self.scene)
        return self.scene

    def _fit_scene_to_viewports(self, scene: Scene) -> None:
        ex, ey = self.editor_viewport_size
        gx, gy = self.game_viewport_size
        scene.on_editor_resize(int(ex), int(ey), self.editor_camera)
        scene.on_game_resize(int(gx), int(gy))

    def new_scene(self) -> Scene:
        """Start over with an empty scene and return it."""
        scene = self._replace_scene()
        self._fit_scene_to_viewports(scene)
        return scene

    def save_scene(self, filepath: str | os.PathLike[str]) -> bool:
        """Save the scene according to the file's extension.

        Text scenes are written; binary scenes are not supported yet and any
        other extension is ignored. Returns whether a file was written.
        """
        scene = self._require_scene()
        suffix = Path(filepath).suffix
        if suffix == TEXT_EXTENSION:
            SceneSerializer(scene).serialize(filepath)
            return True
        if suffix == BINARY_EXTENSION:
            log.warning("Binary scene files cannot be written yet")
        return False

    def open_scene(self, filepath: str | os.PathLike[str]) -> Scene:
        """Replace the scene with one read from ``filepath`` and return it."""
        scene = self._replace_scene()
        suffix = Path(filepath).suffix
        if suffix == TEXT_EXTENSION:
            SceneSerializer(scene).deserialize(filepath)
        elif suffix == BINARY_EXTENSION:
            log.warning("Binary scene files cannot be read yet")
        self._fit_scene_to_viewports(scene)
        return scene
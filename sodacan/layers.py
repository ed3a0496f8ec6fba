"""Application layers and the ordered stack that holds them."""

from __future__ import annotations

from typing import Iterator

from .events import Event
from .timestep import Timestep


class Layer:
    """A unit of application behaviour; override the hooks that are needed.

    The default hooks keep simple bookkeeping about what the layer has seen,
    so an unspecialised layer can still be inspected by its owner.
    """

    def __init__(self, name: str = "Layer") -> None:
        self.name = name
        self.attached = False
        self.update_count = 0
        self.imgui_update_count = 0
        self.last_event: Event | None = None
        self.size: tuple[int, int] | None = None

    def on_attach(self) -> None:
        """Called when the layer is pushed onto an application."""
        self.attached = True

    def on_detach(self) -> None:
        """Called when the layer is removed from an application."""
        self.attached = False

    def on_update(self, dt: Timestep) -> None:
        """Called once per frame with the elapsed time."""
        self.update_count += 1

    def on_imgui_update(self) -> None:
        """Called once per frame to build user-interface windows."""
        self.imgui_update_count += 1

    def on_event(self, event: Event) -> None:
        """Called for every event reaching this layer."""
        self.last_event = event

    def on_resize(self, width: int, height: int) -> None:
        """Called when the main window changes size."""
        self.size = (width, height)


class LayerStack:
    """Layers in order, with overlays always kept after ordinary layers."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert_index = 0

    def push_layer(self, layer: Layer) -> None:
        """Add a layer after existing layers but before any overlay."""
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1

    def push_overlay(self, overlay: Layer) -> None:
        """Add an overlay at the very end."""
        self._layers.append(overlay)

    def pop_layer(self, layer: Layer) -> None:
        """Remove a layer; does nothing if it is not in the stack."""
        if layer in self._layers:
            self._layers.remove(layer)
            self._insert_index -= 1

    def pop_overlay(self, overlay: Layer) -> None:
        """Remove an overlay; does nothing if it is not in the stack."""
        if overlay in self._layers:
            self._layers.remove(overlay)

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(self._layers)

    def __len__(self) -> int:
        return len(self._layers)

    def __contains__(self, layer: object) -> bool:
        return layer in self._layers
"""The application: a main window, a layer stack and the frame loop."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, ClassVar, Optional

from .events import Event, EventDispatcher, WindowCloseEvent, WindowResizeEvent
from .layers import Layer, LayerStack
from .timestep import Timestep

EventCallback = Callable[[Event], None]


@dataclass
class WindowInfo:
    """Title and size a window is created with."""

    name: str = "Unnamed Soda Application"
    width: int = 1600
    height: int = 900


class Window:
    """A headless main window that forwards its events to one callback."""

    def __init__(self, info: Optional[WindowInfo] = None) -> None:
        info = info if info is not None else WindowInfo()
        self.name = info.name
        self.width = info.width
        self.height = info.height
        self.vsync = False
        self.frame_count = 0
        self._callback: Optional[EventCallback] = None

    def on_update(self) -> None:
        """Finish a frame."""
        self.frame_count += 1

    def set_callback(self, callback: EventCallback) -> None:
        """Route every event this window produces to ``callback``."""
        self._callback = callback

    def emit(self, event: Event) -> None:
        """Deliver an event, keeping the window size in step with resizes."""
        if isinstance(event, WindowResizeEvent):
            self.width = event.width
            self.height = event.height
        if self._callback is not None:
            self._callback(event)


class App:
    """Owns the main window and runs every layer once per frame.

    Only one application may exist at a time; use it as a context manager,
    or leave it alive for the life of the program.
    """

    _current: ClassVar[Optional["App"]] = None

    def __init__(
        self,
        window_name: str = "Soda Application",
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        if App._current is not None:
            raise RuntimeError("App already exists!")
        App._current = self

        self._clock = clock if clock is not None else time.perf_counter
        self.window = Window(WindowInfo(window_name))
        self.window.set_callback(self.on_event)
        self.layers = LayerStack()
        self._running = True
        self._minimized = False
        self._last_frame_time = float(self._clock())

    @classmethod
    def get(cls) -> "App":
        """The application that currently exists."""
        if cls._current is None:
            raise RuntimeError("No App exists")
        return cls._current

    def __enter__(self) -> "App":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
        if App._current is self:
            App._current = None

    @property
    def running(self) -> bool:
        return self._running

    @property
    def minimized(self) -> bool:
        return self._minimized

    def close(self) -> None:
        """Stop the frame loop after the current frame."""
        self._running = False

    def run(self, max_frames: Optional[int] = None) -> int:
        """Run frames until closed, or until ``max_frames``; return frames run."""
        frames = 0
        while self._running and (max_frames is None or frames < max_frames):
            now = float(self._clock())
            dt = Timestep(now - self._last_frame_time)
            self._last_frame_time = now

            if not self._minimized:
                for layer in list(self.layers):
                    layer.on_update(dt)
            for layer in list(self.layers):
                layer.on_imgui_update()

            self.window.on_update()
            frames += 1
        return frames

    def on_event(self, event: Event) -> None:
        """Handle window events, then offer the event to layers from the top."""
        dispatcher = EventDispatcher(event)
        dispatcher.dispatch(WindowCloseEvent, self._on_window_close)
        dispatcher.dispatch(WindowResizeEvent, self._on_window_resize)

        for layer in reversed(self.layers):
            layer.on_event(event)
            if event.handled:
                break

    def push_layer(self, layer: Layer) -> None:
        self.layers.push_layer(layer)
        layer.on_attach()

    def push_overlay(self, overlay: Layer) -> None:
        self.layers.push_overlay(overlay)
        overlay.on_attach()

    def _on_window_close(self, event: WindowCloseEvent) -> bool:
        self._running = False
        return True

    def _on_window_resize(self, event: WindowResizeEvent) -> bool:
        if event.width == 0 or event.height == 0:
            self._minimized = True
            return False
        self._minimized = False
        for layer in list(self.layers):
            layer.on_resize(event.width, event.height)
        return False
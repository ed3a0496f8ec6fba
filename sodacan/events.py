"""Window, keyboard and mouse events and a dispatcher that routes them by type."""

from __future__ import annotations

import enum
from typing import Callable, ClassVar, TypeVar


class EventType(enum.Enum):
    """The concrete kind of an event."""

    NONE = 0
    WINDOW_CLOSE = 1
    WINDOW_RESIZE = 2
    WINDOW_FOCUS = 3
    WINDOW_NO_FOCUS = 4
    WINDOW_MOVE = 5
    APP_TICK = 6
    APP_UPDATE = 7
    APP_RENDER = 8
    KEY_PRESS = 9
    KEY_RELEASE = 10
    KEY_TYPED = 11
    MOUSE_CLICK = 12
    MOUSE_RELEASE = 13
    MOUSE_MOVE = 14
    MOUSE_SCROLL = 15


class EventCategory(enum.IntFlag):
    """Bit flags grouping events into broad categories."""

    NONE = 0
    APP = 1 << 0
    INPUT = 1 << 1
    KEYBOARD = 1 << 2
    MOUSE = 1 << 3
    MOUSE_BUTTON = 1 << 4


class Event:
    """Base of every event; subclasses fix the type, name and categories."""

    event_type: ClassVar[EventType] = EventType.NONE
    name: ClassVar[str] = "None"
    category: ClassVar[EventCategory] = EventCategory.NONE

    def __init__(self) -> None:
        if self.event_type is EventType.NONE:
            raise TypeError(f"{type(self).__name__} is abstract and cannot be created")
        self.handled = False

    def is_in_category(self, category: EventCategory) -> bool:
        """Return whether this event belongs to any of the given categories."""
        return bool(self.category & category)

    def __str__(self) -> str:
        return self.name


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Calls a handler for an event when the event is of the handler's type."""

    def __init__(self, event: Event) -> None:
        self.event = event

    def dispatch(self, event_class: type[E], handler: Callable[[E], bool]) -> bool:
        """Run ``handler`` if the event matches ``event_class``.

        The handler's result becomes the event's ``handled`` flag. Returns
        whether the handler was called.
        """
        wanted = event_class.event_type
        if wanted is EventType.NONE or self.event.event_type is not wanted:
            return False
        self.event.handled = bool(handler(self.event))  # type: ignore[arg-type]
        return True


# Application events

class WindowResizeEvent(Event):
    event_type = EventType.WINDOW_RESIZE
    name = "WindowResize"
    category = EventCategory.APP

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self.width = width
        self.height = height

    def __str__(self) -> str:
        return f"Window Resized To (Width: {self.width}, Height: {self.height})"


class WindowCloseEvent(Event):
    event_type = EventType.WINDOW_CLOSE
    name = "WindowClose"
    category = EventCategory.APP

    def __str__(self) -> str:
        return "Window Closed :("


class AppTickEvent(Event):
    event_type = EventType.APP_TICK
    name = "AppTick"
    category = EventCategory.APP


class AppUpdateEvent(Event):
    event_type = EventType.APP_UPDATE
    name = "AppUpdate"
    category = EventCategory.APP


class AppRenderEvent(Event):
    event_type = EventType.APP_RENDER
    name = "AppRender"
    category = EventCategory.APP


# Keyboard events

class KeyEvent(Event):
    """Base of keyboard events; carries the key code."""

    category = EventCategory.KEYBOARD | EventCategory.INPUT

    def __init__(self, key_code: int) -> None:
        super().__init__()
        self.key_code = key_code


class KeyPressEvent(KeyEvent):
    event_type = EventType.KEY_PRESS
    name = "KeyPress"

    def __init__(self, key_code: int, repeat_count: int) -> None:
        super().__init__(key_code)
        self.repeat_count = repeat_count

    def __str__(self) -> str:
        return f"KeyPressedEvent: {self.key_code} ({self.repeat_count} repeats)"


class KeyReleaseEvent(KeyEvent):
    event_type = EventType.KEY_RELEASE
    name = "KeyRelease"

    def __str__(self) -> str:
        return f"KeyReleasedEvent: {self.key_code}"


class KeyTypeEvent(KeyEvent):
    event_type = EventType.KEY_TYPED
    name = "KeyTyped"

    def __str__(self) -> str:
        return f"KeyTypedEvent: {self.key_code}"


# Mouse events

class MouseMoveEvent(Event):
    event_type = EventType.MOUSE_MOVE
    name = "MouseMove"
    category = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, x: float, y: float) -> None:
        super().__init__()
        self.x = float(x)
        self.y = float(y)

    def __str__(self) -> str:
        return f"MouseAt: (x: {self.x:g}, y: {self.y:g})"


class MouseScrollEvent(Event):
    event_type = EventType.MOUSE_SCROLL
    name = "MouseScroll"
    category = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, x_offset: float, y_offset: float) -> None:
        super().__init__()
        self.x_offset = float(x_offset)
        self.y_offset = float(y_offset)

    def __str__(self) -> str:
        return f"Mouse Scrolled at: (x: {self.x_offset:g}, y: {self.y_offset:g})"


class MouseButtonEvent(Event):
    """Base of mouse button events; carries the button number."""

    category = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, button: int) -> None:
        super().__init__()
        self.button = button


class MouseClickedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_CLICK
    name = "MouseClick"

    def __str__(self) -> str:
        return f"MouseClicked: {self.button}"


class MouseReleasedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_RELEASE
    name = "MouseRelease"

    def __str__(self) -> str:
        return f"MouseReleased: {self.button}"
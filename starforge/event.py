"""Window and input events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union


class EventType(IntEnum):
    """The kinds of window and input events."""

    UNDEFINED = -1
    CLOSED = 0
    RESIZED = 1
    LOST_FOCUS = 2
    GAINED_FOCUS = 3
    TEXT_ENTERED = 4
    KEY_PRESSED = 5
    KEY_RELEASED = 6
    MOUSE_WHEEL_MOVED = 7
    MOUSE_WHEEL_SCROLLED = 8
    MOUSE_BUTTON_PRESSED = 9
    MOUSE_BUTTON_RELEASED = 10
    MOUSE_MOVED = 11
    MOUSE_ENTERED = 12
    MOUSE_LEFT = 13
    COUNT = 14


@dataclass(frozen=True, slots=True)
class SizeEvent:
    """New window size, in pixels."""

    width: int
    height: int


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """A key press or release with the modifier state."""

    code: int
    alt: bool = False
    control: bool = False
    shift: bool = False
    system: bool = False


@dataclass(frozen=True, slots=True)
class TextEvent:
    """A character entered, as a Unicode code point."""

    unicode: int

    def character(self) -> str:
        return chr(self.unicode)


@dataclass(frozen=True, slots=True)
class MouseMoveEvent:
    x: int
    y: int


@dataclass(frozen=True, slots=True)
class MouseButtonEvent:
    button: int
    x: int
    y: int


@dataclass(frozen=True, slots=True)
class MouseWheelEvent:
    """Legacy wheel movement in whole ticks; positive is up."""

    delta: int
    x: int
    y: int


@dataclass(frozen=True, slots=True)
class MouseWheelScrollEvent:
    """Wheel movement; positive is up or left."""

    wheel: int
    delta: float
    x: int
    y: int


EventData = Union[
    SizeEvent,
    KeyEvent,
    TextEvent,
    MouseMoveEvent,
    MouseButtonEvent,
    MouseWheelEvent,
    MouseWheelScrollEvent,
    None,
]

_PAYLOADS: dict[EventType, type] = {
    EventType.RESIZED: SizeEvent,
    EventType.TEXT_ENTERED: TextEvent,
    EventType.KEY_PRESSED: KeyEvent,
    EventType.KEY_RELEASED: KeyEvent,
    EventType.MOUSE_WHEEL_MOVED: MouseWheelEvent,
    EventType.MOUSE_WHEEL_SCROLLED: MouseWheelScrollEvent,
    EventType.MOUSE_BUTTON_PRESSED: MouseButtonEvent,
    EventType.MOUSE_BUTTON_RELEASED: MouseButtonEvent,
    EventType.MOUSE_MOVED: MouseMoveEvent,
}


@dataclass(frozen=True, slots=True)
class Event:
    """An event of a given type with the payload that type carries.

    Types without data (closed, focus changes, mouse entered/left) take no
    payload; every other type requires the matching payload class.
    """

    type: EventType
    data: EventData = None

    def __post_init__(self) -> None:
        try:
            kind = EventType(self.type)
        except ValueError:
            raise ValueError(f"unknown event type {self.type!r}") from None
        if kind is EventType.COUNT:
            raise ValueError("COUNT is not an event type")
        object.__setattr__(self, "type", kind)
        expected = _PAYLOADS.get(kind)
        if expected is None:
            if self.data is not None:
                raise TypeError(f"{kind.name} events carry no data")
        elif not isinstance(self.data, expected):
            raise TypeError(f"{kind.name} events need a {expected.__name__} payload")
# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import enum
import typing

import msgspec

from .keyboard_consts import Key


class TouchPhase(enum.Enum):
    START = enum.auto()
    MOVE = enum.auto()
    END = enum.auto()


@enum.unique
class MouseButton(enum.Enum):
    UNKNOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    MIDDLE = enum.auto()
    X1 = enum.auto()
    X2 = enum.auto()


@enum.unique
class CursorShape(enum.Enum):
    ARROW = enum.auto()
    TEXT = enum.auto()
    VERTICAL_TEXT = enum.auto()
    HAND = enum.auto()
    GRAB = enum.auto()
    GRABBING = enum.auto()
    RESIZE_VERTICAL = enum.auto()
    RESIZE_HORIZONTAL = enum.auto()
    RESIZE_TOP_LEFT_BOTTOM_RIGHT = enum.auto()
    RESIZE_TOP_RIGHT_BOTTOM_LEFT = enum.auto()


### Buttons


class KeyboardButton(msgspec.Struct, frozen=True, tag=True):
    key: Key


class PointerButton(msgspec.Struct, frozen=True, tag=True):
    button: MouseButton


Button = KeyboardButton | PointerButton


### Motion

# Positions and deltas are in the centre-origin, y-up frame.


class MouseCursor(msgspec.Struct, frozen=True, tag=True):
    x: float
    y: float


class MouseRelative(msgspec.Struct, frozen=True, tag=True):
    x: float
    y: float


class Scroll(msgspec.Struct, frozen=True, tag=True):
    x: float
    y: float


class ControllerAxis(msgspec.Struct, frozen=True, tag=True):
    device: int
    axis: int
    # roughly -1.0 to 1.0
    value: float


MotionRecord = MouseCursor | MouseRelative | Scroll | ControllerAxis


class TouchRecord(msgspec.Struct, frozen=True):
    phase: TouchPhase
    id: int
    # normalized to the touch device, not the window
    xy: tuple[float, float]


### Input events


class Resize(msgspec.Struct, frozen=True, tag=True):
    width: int
    height: int


class Focus(msgspec.Struct, frozen=True, tag=True):
    focused: bool


class Text(msgspec.Struct, frozen=True, tag=True):
    text: str


class Press(msgspec.Struct, frozen=True, tag=True):
    button: Button


class Release(msgspec.Struct, frozen=True, tag=True):
    button: Button


class Touch(msgspec.Struct, frozen=True, tag=True):
    touch: TouchRecord


class Motion(msgspec.Struct, frozen=True, tag=True):
    motion: MotionRecord


Input = Resize | Focus | Text | Press | Release | Touch | Motion


class Conversion(msgspec.Struct, frozen=True):
    """The result of converting one native event.

    A native event becomes at most two input events. Only mouse motion fills ``second``;
    iterating yields whichever events are present, first before second.
    """

    first: typing.Optional[Input] = None
    second: typing.Optional[Input] = None

    def __iter__(self) -> typing.Iterator[Input]:
        if self.first is not None:
            yield self.first
        if self.second is not None:
            yield self.second


class Ui(typing.Protocol):
    def handle_event(self, event: Input) -> None:
        ...

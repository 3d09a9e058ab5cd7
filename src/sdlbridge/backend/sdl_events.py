# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""Conversion of PySDL2 ``SDL_Event`` values into canonical input events.

This is useful for single-window applications. The window width and height passed in
must be the DPI-agnostic values (the window size, NOT the drawable size).
"""
import enum
import string

import sdl2

from ..commontypes import Size
from ..input.keyboard_consts import Key
from ..input.types import (
    Conversion,
    ControllerAxis,
    CursorShape,
    Focus,
    KeyboardButton,
    Motion,
    MouseButton,
    MouseCursor,
    MouseRelative,
    PointerButton,
    Press,
    Release,
    Resize,
    Scroll,
    Text,
    Touch,
    TouchPhase,
    TouchRecord,
)

# Wheel events arrive in lines; the GUI core scrolls in points.
ARBITRARY_POINTS_PER_LINE_FACTOR = 10.0
# Axis values span [-32768, 32767]; dividing by the positive max gives ~[-1.0003, 1.0].
AXIS_MAX = 32767.0

U32_MASK = 0xFFFF_FFFF
U64_MASK = 0xFFFF_FFFF_FFFF_FFFF

NOTHING = Conversion()


class SystemCursor(enum.IntEnum):
    ARROW = sdl2.SDL_SYSTEM_CURSOR_ARROW
    IBEAM = sdl2.SDL_SYSTEM_CURSOR_IBEAM
    WAIT = sdl2.SDL_SYSTEM_CURSOR_WAIT
    CROSSHAIR = sdl2.SDL_SYSTEM_CURSOR_CROSSHAIR
    WAITARROW = sdl2.SDL_SYSTEM_CURSOR_WAITARROW
    SIZENWSE = sdl2.SDL_SYSTEM_CURSOR_SIZENWSE
    SIZENESW = sdl2.SDL_SYSTEM_CURSOR_SIZENESW
    SIZEWE = sdl2.SDL_SYSTEM_CURSOR_SIZEWE
    SIZENS = sdl2.SDL_SYSTEM_CURSOR_SIZENS
    SIZEALL = sdl2.SDL_SYSTEM_CURSOR_SIZEALL
    NO = sdl2.SDL_SYSTEM_CURSOR_NO
    HAND = sdl2.SDL_SYSTEM_CURSOR_HAND


SDL_KEYCODES: dict[int, Key] = {
    sdl2.SDLK_BACKSPACE: Key.BACKSPACE,
    sdl2.SDLK_TAB: Key.TAB,
    sdl2.SDLK_RETURN: Key.RETURN,
    sdl2.SDLK_ESCAPE: Key.ESCAPE,
    sdl2.SDLK_SPACE: Key.SPACE,
    sdl2.SDLK_QUOTE: Key.QUOTE,
    sdl2.SDLK_COMMA: Key.COMMA,
    sdl2.SDLK_MINUS: Key.MINUS,
    sdl2.SDLK_PERIOD: Key.PERIOD,
    sdl2.SDLK_SLASH: Key.SLASH,
    sdl2.SDLK_SEMICOLON: Key.SEMICOLON,
    sdl2.SDLK_EQUALS: Key.EQUALS,
    sdl2.SDLK_LEFTBRACKET: Key.LEFT_BRACKET,
    sdl2.SDLK_BACKSLASH: Key.BACKSLASH,
    sdl2.SDLK_RIGHTBRACKET: Key.RIGHT_BRACKET,
    sdl2.SDLK_BACKQUOTE: Key.BACKQUOTE,
    sdl2.SDLK_EXCLAIM: Key.EXCLAIM,
    sdl2.SDLK_QUOTEDBL: Key.QUOTEDBL,
    sdl2.SDLK_HASH: Key.HASH,
    sdl2.SDLK_DOLLAR: Key.DOLLAR,
    sdl2.SDLK_PERCENT: Key.PERCENT,
    sdl2.SDLK_AMPERSAND: Key.AMPERSAND,
    sdl2.SDLK_LEFTPAREN: Key.LEFT_PAREN,
    sdl2.SDLK_RIGHTPAREN: Key.RIGHT_PAREN,
    sdl2.SDLK_ASTERISK: Key.ASTERISK,
    sdl2.SDLK_PLUS: Key.PLUS,
    sdl2.SDLK_COLON: Key.COLON,
    sdl2.SDLK_LESS: Key.LESS,
    sdl2.SDLK_GREATER: Key.GREATER,
    sdl2.SDLK_QUESTION: Key.QUESTION,
    sdl2.SDLK_AT: Key.AT,
    sdl2.SDLK_CARET: Key.CARET,
    sdl2.SDLK_UNDERSCORE: Key.UNDERSCORE,
    sdl2.SDLK_PRINTSCREEN: Key.PRINT_SCREEN,
    sdl2.SDLK_SCROLLLOCK: Key.SCROLL_LOCK,
    sdl2.SDLK_PAUSE: Key.PAUSE,
    sdl2.SDLK_INSERT: Key.INSERT,
    sdl2.SDLK_HOME: Key.HOME,
    sdl2.SDLK_PAGEUP: Key.PAGE_UP,
    sdl2.SDLK_DELETE: Key.DELETE,
    sdl2.SDLK_END: Key.END,
    sdl2.SDLK_PAGEDOWN: Key.PAGE_DOWN,
    sdl2.SDLK_RIGHT: Key.RIGHT,
    sdl2.SDLK_LEFT: Key.LEFT,
    sdl2.SDLK_DOWN: Key.DOWN,
    sdl2.SDLK_UP: Key.UP,
    sdl2.SDLK_APPLICATION: Key.APPLICATION,
    sdl2.SDLK_MENU: Key.MENU,
    sdl2.SDLK_SYSREQ: Key.SYSREQ,
    sdl2.SDLK_CLEAR: Key.CLEAR,
    sdl2.SDLK_CANCEL: Key.CANCEL,
    sdl2.SDLK_EXECUTE: Key.EXECUTE,
    sdl2.SDLK_HELP: Key.HELP,
    sdl2.SDLK_SELECT: Key.SELECT,
    sdl2.SDLK_STOP: Key.STOP,
    sdl2.SDLK_AGAIN: Key.AGAIN,
    sdl2.SDLK_UNDO: Key.UNDO,
    sdl2.SDLK_CUT: Key.CUT,
    sdl2.SDLK_COPY: Key.COPY,
    sdl2.SDLK_PASTE: Key.PASTE,
    sdl2.SDLK_FIND: Key.FIND,
    sdl2.SDLK_MUTE: Key.MUTE,
    sdl2.SDLK_VOLUMEUP: Key.VOLUME_UP,
    sdl2.SDLK_VOLUMEDOWN: Key.VOLUME_DOWN,
    sdl2.SDLK_AUDIONEXT: Key.AUDIO_NEXT,
    sdl2.SDLK_AUDIOPREV: Key.AUDIO_PREV,
    sdl2.SDLK_AUDIOSTOP: Key.AUDIO_STOP,
    sdl2.SDLK_AUDIOPLAY: Key.AUDIO_PLAY,
    sdl2.SDLK_AUDIOMUTE: Key.AUDIO_MUTE,
    sdl2.SDLK_POWER: Key.POWER,
    sdl2.SDLK_SLEEP: Key.SLEEP,
    sdl2.SDLK_CAPSLOCK: Key.CAPS_LOCK,
    sdl2.SDLK_NUMLOCKCLEAR: Key.NUM_LOCK_CLEAR,
    sdl2.SDLK_KP_DIVIDE: Key.NUMPAD_DIVIDE,
    sdl2.SDLK_KP_MULTIPLY: Key.NUMPAD_MULTIPLY,
    sdl2.SDLK_KP_MINUS: Key.NUMPAD_MINUS,
    sdl2.SDLK_KP_PLUS: Key.NUMPAD_PLUS,
    sdl2.SDLK_KP_ENTER: Key.NUMPAD_ENTER,
    sdl2.SDLK_KP_PERIOD: Key.NUMPAD_PERIOD,
    sdl2.SDLK_KP_EQUALS: Key.NUMPAD_EQUALS,
    sdl2.SDLK_KP_COMMA: Key.NUMPAD_COMMA,
    sdl2.SDLK_LCTRL: Key.LEFT_CTRL,
    sdl2.SDLK_LSHIFT: Key.LEFT_SHIFT,
    sdl2.SDLK_LALT: Key.LEFT_ALT,
    sdl2.SDLK_LGUI: Key.LEFT_GUI,
    sdl2.SDLK_RCTRL: Key.RIGHT_CTRL,
    sdl2.SDLK_RSHIFT: Key.RIGHT_SHIFT,
    sdl2.SDLK_RALT: Key.RIGHT_ALT,
    sdl2.SDLK_RGUI: Key.RIGHT_GUI,
}
for _letter in string.ascii_uppercase:
    SDL_KEYCODES[getattr(sdl2, f"SDLK_{_letter.lower()}")] = Key[_letter]
for _digit in range(10):
    SDL_KEYCODES[getattr(sdl2, f"SDLK_{_digit}")] = Key[f"D{_digit}"]
    SDL_KEYCODES[getattr(sdl2, f"SDLK_KP_{_digit}")] = Key[f"NUMPAD_{_digit}"]
for _fn in range(1, 25):
    SDL_KEYCODES[getattr(sdl2, f"SDLK_F{_fn}")] = Key[f"F{_fn}"]

SDL_MOUSE_BUTTONS = {
    sdl2.SDL_BUTTON_LEFT: MouseButton.LEFT,
    sdl2.SDL_BUTTON_RIGHT: MouseButton.RIGHT,
    sdl2.SDL_BUTTON_MIDDLE: MouseButton.MIDDLE,
    sdl2.SDL_BUTTON_X1: MouseButton.X1,
    sdl2.SDL_BUTTON_X2: MouseButton.X2,
}

SYSTEM_CURSORS = {
    CursorShape.TEXT: SystemCursor.IBEAM,
    CursorShape.VERTICAL_TEXT: SystemCursor.IBEAM,
    CursorShape.HAND: SystemCursor.HAND,
    CursorShape.GRAB: SystemCursor.SIZEALL,
    CursorShape.GRABBING: SystemCursor.SIZEALL,
    CursorShape.RESIZE_VERTICAL: SystemCursor.SIZENS,
    CursorShape.RESIZE_HORIZONTAL: SystemCursor.SIZEWE,
    CursorShape.RESIZE_TOP_LEFT_BOTTOM_RIGHT: SystemCursor.SIZENWSE,
    CursorShape.RESIZE_TOP_RIGHT_BOTTOM_LEFT: SystemCursor.SIZENESW,
}

FINGER_PHASES = {
    sdl2.SDL_FINGERDOWN: TouchPhase.START,
    sdl2.SDL_FINGERMOTION: TouchPhase.MOVE,
    sdl2.SDL_FINGERUP: TouchPhase.END,
}


def map_key(keycode: int) -> Key:
    """Maps an SDL keycode (``SDLK_*``) to a logical Key."""
    return SDL_KEYCODES.get(keycode, Key.UNKNOWN)


def map_mouse(mouse_button: int) -> MouseButton:
    """Maps an SDL mouse button (``SDL_BUTTON_*``) to a logical MouseButton."""
    return SDL_MOUSE_BUTTONS.get(mouse_button, MouseButton.UNKNOWN)


def convert_mouse_cursor(cursor: CursorShape) -> SystemCursor:
    """Convert a requested cursor shape to the SDL system cursor that best renders it."""
    return SYSTEM_CURSORS.get(cursor, SystemCursor.ARROW)


def _convert_window_event(window_event) -> Conversion:
    match window_event.event:
        case sdl2.SDL_WINDOWEVENT_RESIZED:
            return Conversion(Resize(width=window_event.data1 & U32_MASK, height=window_event.data2 & U32_MASK))
        case sdl2.SDL_WINDOWEVENT_FOCUS_GAINED:
            return Conversion(Focus(focused=True))
        case sdl2.SDL_WINDOWEVENT_FOCUS_LOST:
            return Conversion(Focus(focused=False))
        case _:
            return NOTHING


def convert_event(event: sdl2.SDL_Event, win_w: float, win_h: float) -> Conversion:
    """Convert an SDL event into zero, one, or two input events.

    SDL mouse motion carries both an absolute position and a relative delta, so it
    becomes a MouseCursor motion followed by a MouseRelative motion. Every other
    event becomes at most one input event. Events with no canonical counterpart
    convert to an empty Conversion; this never raises for any event type.
    """
    window = Size(width=win_w, height=win_h)

    match event.type:
        case sdl2.SDL_WINDOWEVENT:
            return _convert_window_event(event.window)

        case sdl2.SDL_TEXTINPUT:
            return Conversion(Text(text=event.text.text.decode("utf-8", errors="replace")))

        case sdl2.SDL_KEYDOWN | sdl2.SDL_KEYUP:
            keycode = event.key.keysym.sym
            if keycode == sdl2.SDLK_UNKNOWN:
                return NOTHING
            button = KeyboardButton(key=map_key(keycode))
            if event.type == sdl2.SDL_KEYDOWN:
                return Conversion(Press(button=button))
            return Conversion(Release(button=button))

        case sdl2.SDL_FINGERDOWN | sdl2.SDL_FINGERMOTION | sdl2.SDL_FINGERUP:
            finger = event.tfinger
            touch = TouchRecord(
                phase=FINGER_PHASES[event.type],
                id=finger.touchId & U64_MASK,
                xy=(float(finger.x), float(finger.y)),
            )
            return Conversion(Touch(touch=touch))

        case sdl2.SDL_MOUSEMOTION:
            motion = event.motion
            # The relative delta goes through the same centring as the absolute position.
            cursor_x, cursor_y = window.to_centered(motion.x, motion.y)
            rel_x, rel_y = window.to_centered(motion.xrel, motion.yrel)
            return Conversion(
                Motion(motion=MouseCursor(x=cursor_x, y=cursor_y)),
                Motion(motion=MouseRelative(x=rel_x, y=rel_y)),
            )

        case sdl2.SDL_MOUSEWHEEL:
            # Invert the y axis, since y is up for the GUI core.
            scroll = Scroll(
                x=ARBITRARY_POINTS_PER_LINE_FACTOR * event.wheel.x,
                y=ARBITRARY_POINTS_PER_LINE_FACTOR * -event.wheel.y,
            )
            return Conversion(Motion(motion=scroll))

        case sdl2.SDL_MOUSEBUTTONDOWN:
            return Conversion(Press(button=PointerButton(button=map_mouse(event.button.button))))

        case sdl2.SDL_MOUSEBUTTONUP:
            return Conversion(Release(button=PointerButton(button=map_mouse(event.button.button))))

        case sdl2.SDL_JOYAXISMOTION:
            axis = event.jaxis
            return Conversion(Motion(motion=ControllerAxis(device=axis.which, axis=axis.axis, value=axis.value / AXIS_MAX)))

        case sdl2.SDL_CONTROLLERAXISMOTION:
            axis = event.caxis
            return Conversion(Motion(motion=ControllerAxis(device=axis.which, axis=axis.axis, value=axis.value / AXIS_MAX)))

        case _:
            return NOTHING

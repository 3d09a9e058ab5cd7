# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import enum

# Logical keys, as seen by the GUI core. These deliberately do not share numbering
# with any backend's key codes; each backend maps its own codes onto this enum
# and anything it cannot place becomes UNKNOWN.


@enum.unique
class Key(enum.IntEnum):
    UNKNOWN = 0

    BACKSPACE = enum.auto()
    TAB = enum.auto()
    RETURN = enum.auto()
    ESCAPE = enum.auto()
    SPACE = enum.auto()

    # Punctuation, named after the unshifted character on a US layout.
    QUOTE = enum.auto()
    COMMA = enum.auto()
    MINUS = enum.auto()
    PERIOD = enum.auto()
    SLASH = enum.auto()
    SEMICOLON = enum.auto()
    EQUALS = enum.auto()
    LEFT_BRACKET = enum.auto()
    BACKSLASH = enum.auto()
    RIGHT_BRACKET = enum.auto()
    BACKQUOTE = enum.auto()

    # Shifted punctuation; SDL reports these directly on some layouts (AZERTY number row).
    EXCLAIM = enum.auto()
    QUOTEDBL = enum.auto()
    HASH = enum.auto()
    DOLLAR = enum.auto()
    PERCENT = enum.auto()
    AMPERSAND = enum.auto()
    LEFT_PAREN = enum.auto()
    RIGHT_PAREN = enum.auto()
    ASTERISK = enum.auto()
    PLUS = enum.auto()
    COLON = enum.auto()
    LESS = enum.auto()
    GREATER = enum.auto()
    QUESTION = enum.auto()
    AT = enum.auto()
    CARET = enum.auto()
    UNDERSCORE = enum.auto()

    D0 = enum.auto()
    D1 = enum.auto()
    D2 = enum.auto()
    D3 = enum.auto()
    D4 = enum.auto()
    D5 = enum.auto()
    D6 = enum.auto()
    D7 = enum.auto()
    D8 = enum.auto()
    D9 = enum.auto()

    A = enum.auto()
    B = enum.auto()
    C = enum.auto()
    D = enum.auto()
    E = enum.auto()
    F = enum.auto()
    G = enum.auto()
    H = enum.auto()
    I = enum.auto()  # noqa: E741
    J = enum.auto()
    K = enum.auto()
    L = enum.auto()
    M = enum.auto()
    N = enum.auto()
    O = enum.auto()  # noqa: E741
    P = enum.auto()
    Q = enum.auto()
    R = enum.auto()
    S = enum.auto()
    T = enum.auto()
    U = enum.auto()
    V = enum.auto()
    W = enum.auto()
    X = enum.auto()
    Y = enum.auto()
    Z = enum.auto()

    F1 = enum.auto()
    F2 = enum.auto()
    F3 = enum.auto()
    F4 = enum.auto()
    F5 = enum.auto()
    F6 = enum.auto()
    F7 = enum.auto()
    F8 = enum.auto()
    F9 = enum.auto()
    F10 = enum.auto()
    F11 = enum.auto()
    F12 = enum.auto()
    F13 = enum.auto()
    F14 = enum.auto()
    F15 = enum.auto()
    F16 = enum.auto()
    F17 = enum.auto()
    F18 = enum.auto()
    F19 = enum.auto()
    F20 = enum.auto()
    F21 = enum.auto()
    F22 = enum.auto()
    F23 = enum.auto()
    F24 = enum.auto()

    PRINT_SCREEN = enum.auto()
    SCROLL_LOCK = enum.auto()
    PAUSE = enum.auto()
    INSERT = enum.auto()
    HOME = enum.auto()
    PAGE_UP = enum.auto()
    DELETE = enum.auto()
    END = enum.auto()
    PAGE_DOWN = enum.auto()
    RIGHT = enum.auto()
    LEFT = enum.auto()
    DOWN = enum.auto()
    UP = enum.auto()
    APPLICATION = enum.auto()
    MENU = enum.auto()
    SYSREQ = enum.auto()
    CLEAR = enum.auto()
    CANCEL = enum.auto()

    # Editing
    EXECUTE = enum.auto()
    HELP = enum.auto()
    SELECT = enum.auto()
    STOP = enum.auto()
    AGAIN = enum.auto()
    UNDO = enum.auto()
    CUT = enum.auto()
    COPY = enum.auto()
    PASTE = enum.auto()
    FIND = enum.auto()

    # Media and power
    MUTE = enum.auto()
    VOLUME_UP = enum.auto()
    VOLUME_DOWN = enum.auto()
    AUDIO_NEXT = enum.auto()
    AUDIO_PREV = enum.auto()
    AUDIO_STOP = enum.auto()
    AUDIO_PLAY = enum.auto()
    AUDIO_MUTE = enum.auto()
    POWER = enum.auto()
    SLEEP = enum.auto()

    CAPS_LOCK = enum.auto()
    NUM_LOCK_CLEAR = enum.auto()

    NUMPAD_0 = enum.auto()
    NUMPAD_1 = enum.auto()
    NUMPAD_2 = enum.auto()
    NUMPAD_3 = enum.auto()
    NUMPAD_4 = enum.auto()
    NUMPAD_5 = enum.auto()
    NUMPAD_6 = enum.auto()
    NUMPAD_7 = enum.auto()
    NUMPAD_8 = enum.auto()
    NUMPAD_9 = enum.auto()
    NUMPAD_DIVIDE = enum.auto()
    NUMPAD_MULTIPLY = enum.auto()
    NUMPAD_MINUS = enum.auto()
    NUMPAD_PLUS = enum.auto()
    NUMPAD_ENTER = enum.auto()
    NUMPAD_PERIOD = enum.auto()
    NUMPAD_EQUALS = enum.auto()
    NUMPAD_COMMA = enum.auto()

    LEFT_CTRL = enum.auto()
    LEFT_SHIFT = enum.auto()
    LEFT_ALT = enum.auto()
    LEFT_GUI = enum.auto()
    RIGHT_CTRL = enum.auto()
    RIGHT_SHIFT = enum.auto()
    RIGHT_ALT = enum.auto()
    RIGHT_GUI = enum.auto()

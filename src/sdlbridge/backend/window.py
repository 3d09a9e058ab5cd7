# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc
import contextlib
import ctypes
import logging
import typing

import sdl2

from ..commontypes import BackendInitError, NotInContextError, Size
from .sdl_events import SystemCursor

if typing.TYPE_CHECKING:
    from ..settings import Settings

logger = logging.getLogger(__name__)

SDL_SUBSYSTEMS = sdl2.SDL_INIT_VIDEO | sdl2.SDL_INIT_JOYSTICK | sdl2.SDL_INIT_GAMECONTROLLER


def sdl_error() -> str:
    return sdl2.SDL_GetError().decode("utf-8", errors="replace")


class SdlWindow(contextlib.AbstractContextManager):
    """A single SDL2 window, plus the input devices and cursors that go with it.

    SDL is initialized on entry and shut down on exit. Nothing is drawn here; the
    window is OpenGL-capable only so the drawable size can be queried for DPI scaling.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.window = None
        self.joysticks: dict[int, typing.Any] = {}
        self.cursors: dict[SystemCursor, typing.Any] = {}

    def __enter__(self):
        if sdl2.SDL_Init(SDL_SUBSYSTEMS) != 0:
            raise BackendInitError(f"Unable to initialize SDL: {sdl_error()}")
        flags = sdl2.SDL_WINDOW_SHOWN | sdl2.SDL_WINDOW_RESIZABLE | sdl2.SDL_WINDOW_OPENGL
        if self.settings.allow_highdpi:
            flags |= sdl2.SDL_WINDOW_ALLOW_HIGHDPI
        width, height = self.settings.window_size.as_tuple()
        window = sdl2.SDL_CreateWindow(
            self.settings.window_title.encode("utf-8"),
            sdl2.SDL_WINDOWPOS_CENTERED,
            sdl2.SDL_WINDOWPOS_CENTERED,
            int(width),
            int(height),
            flags,
        )
        if not window:
            message = sdl_error()
            sdl2.SDL_Quit()
            raise BackendInitError(f"Unable to create window: {message}")
        self.window = window
        logger.debug("Created %dx%d window %r", width, height, self.settings.window_title)
        for device_index in range(sdl2.SDL_NumJoysticks()):
            self._open_joystick(device_index)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        for cursor in self.cursors.values():
            sdl2.SDL_FreeCursor(cursor)
        self.cursors.clear()
        for instance_id, joystick in self.joysticks.items():
            logger.debug("Closing joystick %d", instance_id)
            sdl2.SDL_JoystickClose(joystick)
        self.joysticks.clear()
        if self.window is not None:
            sdl2.SDL_DestroyWindow(self.window)
            self.window = None
        sdl2.SDL_Quit()

    def _require_window(self):
        if self.window is None:
            raise NotInContextError()
        return self.window

    def _open_joystick(self, device_index: int):
        joystick = sdl2.SDL_JoystickOpen(device_index)
        if not joystick:
            logger.warning("Unable to open joystick %d: %s", device_index, sdl_error())
            return
        instance_id = sdl2.SDL_JoystickInstanceID(joystick)
        if instance_id in self.joysticks:
            # already open; SDL refcounts opens, so balance this one
            sdl2.SDL_JoystickClose(joystick)
            return
        logger.debug("Opened joystick %d as instance %d", device_index, instance_id)
        self.joysticks[instance_id] = joystick

    def _close_joystick(self, instance_id: int):
        joystick = self.joysticks.pop(instance_id, None)
        if joystick is not None:
            logger.debug("Closing removed joystick %d", instance_id)
            sdl2.SDL_JoystickClose(joystick)

    def size(self) -> Size:
        w, h = ctypes.c_int(0), ctypes.c_int(0)
        sdl2.SDL_GetWindowSize(self._require_window(), ctypes.byref(w), ctypes.byref(h))
        return Size(width=w.value, height=h.value)

    def drawable_size(self) -> Size:
        w, h = ctypes.c_int(0), ctypes.c_int(0)
        sdl2.SDL_GL_GetDrawableSize(self._require_window(), ctypes.byref(w), ctypes.byref(h))
        return Size(width=w.value, height=h.value)

    def dpi_factor(self) -> float:
        logical = self.size()
        if logical.width == 0:
            return 1.0
        return self.drawable_size().width / logical.width

    def poll_events(self) -> collections.abc.Iterator[sdl2.SDL_Event]:
        self._require_window()
        while True:
            event = sdl2.SDL_Event()
            if not sdl2.SDL_PollEvent(ctypes.byref(event)):
                return
            if event.type == sdl2.SDL_JOYDEVICEADDED:
                self._open_joystick(event.jdevice.which)
            elif event.type == sdl2.SDL_JOYDEVICEREMOVED:
                self._close_joystick(event.jdevice.which)
            yield event

    def set_cursor(self, cursor: SystemCursor):
        self._require_window()
        if cursor not in self.cursors:
            sdl_cursor = sdl2.SDL_CreateSystemCursor(cursor.value)
            if not sdl_cursor:
                logger.warning("Unable to create system cursor %s: %s", cursor.name, sdl_error())
                return
            self.cursors[cursor] = sdl_cursor
        sdl2.SDL_SetCursor(self.cursors[cursor])

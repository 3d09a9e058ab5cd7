# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc
import logging
import typing

import sdl2
import trio
import trio_util

from .backend.sdl_events import SystemCursor, convert_event, convert_mouse_cursor
from .commontypes import Size
from .input.types import CursorShape, Ui

if typing.TYPE_CHECKING:
    from .settings import Settings

logger = logging.getLogger(__name__)


class EventSource(typing.Protocol):
    def poll_events(self) -> collections.abc.Iterable[sdl2.SDL_Event]:
        ...

    def size(self) -> Size:
        ...

    def drawable_size(self) -> Size:
        ...

    def set_cursor(self, cursor: SystemCursor) -> None:
        ...


class EventLoop:
    running: trio_util.AsyncBool
    cursor_shape: typing.Optional[CursorShape]

    def __init__(self, source: EventSource, ui: Ui, settings: Settings):
        self.source = source
        self.ui = ui
        self.settings = settings
        self.running = trio_util.AsyncBool(True)
        self.cursor_shape = None

    def _is_quit(self, event: sdl2.SDL_Event) -> bool:
        if event.type == sdl2.SDL_QUIT:
            return True
        if self.settings.exit_on_escape and event.type == sdl2.SDL_KEYDOWN:
            return event.key.keysym.sym == sdl2.SDLK_ESCAPE
        return False

    def _log_resize(self):
        logical = self.source.size()
        drawable = self.source.drawable_size()
        dpi_factor = drawable.width / logical.width if logical.width else 1.0
        logger.debug("Window resized; logical %r, drawable %r, dpi factor %s", logical, drawable, dpi_factor)

    def process_pending(self) -> bool:
        """Dispatch every pending event to the UI. Returns False once a quit has been requested."""
        if not self.running.value:
            return False
        for event in self.source.poll_events():
            # logical size, not drawable size
            size = self.source.size()
            for converted in convert_event(event, size.width, size.height):
                self.ui.handle_event(converted)
            if event.type == sdl2.SDL_WINDOWEVENT and event.window.event == sdl2.SDL_WINDOWEVENT_RESIZED:
                self._log_resize()
            if self._is_quit(event):
                logger.debug("Quit requested")
                self.running.value = False
                return False
        return True

    def request_cursor(self, shape: CursorShape):
        if shape == self.cursor_shape:
            return
        system_cursor = convert_mouse_cursor(shape)
        logger.debug("Cursor shape %s shown as %s", shape.name, system_cursor.name)
        self.source.set_cursor(system_cursor)
        self.cursor_shape = shape

    async def run(self, *, task_status=trio.TASK_STATUS_IGNORED):
        task_status.started()
        while self.process_pending():
            await trio.sleep(1 / self.settings.poll_hz)

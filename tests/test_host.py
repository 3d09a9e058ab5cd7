# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import collections

import pytest
import sdl2
import trio
from sdlbridge.backend.sdl_events import SystemCursor
from sdlbridge.commontypes import Size
from sdlbridge.host import EventLoop
from sdlbridge.input.keyboard_consts import Key
from sdlbridge.input.types import (
    CursorShape,
    KeyboardButton,
    Motion,
    MouseCursor,
    MouseRelative,
    Press,
    Resize,
    Text,
)
from sdlbridge.settings import Settings

from sdl_factories import key_event, motion_event, quit_event, text_event, window_event


class FakeSource:
    def __init__(self, size=Size(width=200, height=100), drawable=Size(width=400, height=200)):
        self.pending = collections.deque()
        self.logical = size
        self.drawable = drawable
        self.cursors = []

    def poll_events(self):
        while self.pending:
            yield self.pending.popleft()

    def size(self):
        return self.logical

    def drawable_size(self):
        return self.drawable

    def set_cursor(self, cursor):
        self.cursors.append(cursor)


class CollectingUi:
    def __init__(self):
        self.events = []

    def handle_event(self, event):
        self.events.append(event)


def make_loop(settings=None):
    source = FakeSource()
    ui = CollectingUi()
    loop = EventLoop(source, ui, settings or Settings.for_test())
    return source, ui, loop


def test_events_dispatched_in_order():
    source, ui, loop = make_loop()
    source.pending.extend(
        [
            text_event(b"hi"),
            motion_event(10, 20, 1, 2),
            key_event(sdl2.SDL_KEYDOWN, sdl2.SDLK_b),
        ]
    )
    assert loop.process_pending() is True
    assert ui.events == [
        Text(text="hi"),
        Motion(motion=MouseCursor(x=10 - 100.0, y=-(20 - 50.0))),
        Motion(motion=MouseRelative(x=1 - 100.0, y=-(2 - 50.0))),
        Press(button=KeyboardButton(key=Key.B)),
    ]


def test_logical_size_used_not_drawable_size():
    source, ui, loop = make_loop()
    source.pending.append(motion_event(100, 50, 0, 0))
    loop.process_pending()
    assert ui.events[0] == Motion(motion=MouseCursor(x=0.0, y=0.0))


def test_size_is_read_per_event():
    source, ui, loop = make_loop()
    source.pending.append(window_event(sdl2.SDL_WINDOWEVENT_RESIZED, 400, 300))
    loop.process_pending()
    source.logical = Size(width=400, height=300)
    source.pending.append(motion_event(200, 150, 0, 0))
    loop.process_pending()
    assert ui.events[0] == Resize(width=400, height=300)
    assert ui.events[1] == Motion(motion=MouseCursor(x=0.0, y=0.0))


def test_quit_stops_dispatch():
    source, ui, loop = make_loop()
    source.pending.extend([text_event(b"a"), quit_event(), text_event(b"b")])
    assert loop.process_pending() is False
    assert ui.events == [Text(text="a")]
    assert loop.running.value is False
    # once stopped, nothing more is dispatched
    assert loop.process_pending() is False
    assert ui.events == [Text(text="a")]


def test_escape_quits_after_dispatch():
    source, ui, loop = make_loop()
    source.pending.append(key_event(sdl2.SDL_KEYDOWN, sdl2.SDLK_ESCAPE))
    assert loop.process_pending() is False
    assert ui.events == [Press(button=KeyboardButton(key=Key.ESCAPE))]


def test_escape_ignored_when_disabled():
    settings = Settings.for_test()
    settings.exit_on_escape = False
    source, ui, loop = make_loop(settings)
    source.pending.append(key_event(sdl2.SDL_KEYDOWN, sdl2.SDLK_ESCAPE))
    assert loop.process_pending() is True
    assert loop.running.value is True


def test_cursor_requests_are_deduplicated():
    source, ui, loop = make_loop()
    loop.request_cursor(CursorShape.TEXT)
    loop.request_cursor(CursorShape.TEXT)
    loop.request_cursor(CursorShape.GRAB)
    loop.request_cursor(CursorShape.ARROW)
    assert source.cursors == [SystemCursor.IBEAM, SystemCursor.SIZEALL, SystemCursor.ARROW]


def test_ui_errors_propagate():
    class BrokenUi:
        def handle_event(self, event):
            raise RuntimeError("boom")

    source = FakeSource()
    loop = EventLoop(source, BrokenUi(), Settings.for_test())
    source.pending.append(text_event(b"x"))
    with pytest.raises(RuntimeError):
        loop.process_pending()


async def test_run_until_quit(autojump_clock):
    source, ui, loop = make_loop()
    async with trio.open_nursery() as nursery:
        await nursery.start(loop.run)
        source.pending.append(text_event(b"one"))
        await trio.sleep(1)
        assert ui.events == [Text(text="one")]
        source.pending.append(quit_event())
        with trio.fail_after(5):
            await loop.running.wait_value(False)
    assert ui.events == [Text(text="one")]

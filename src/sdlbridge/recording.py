# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import collections.abc
import pathlib
import typing

import msgspec
import trio

from .commontypes import RecordingError
from .input.types import Input, Ui


class RecordedInput(msgspec.Struct, frozen=True):
    # seconds since the first recorded event
    elapsed: float
    event: Input


class Recorder:
    def __init__(self, wrapped: Ui):
        self.wrapped = wrapped
        self.zero_time: typing.Optional[float] = None
        self.events: list[RecordedInput] = []

    def handle_event(self, event: Input) -> None:
        now = trio.current_time()
        if self.zero_time is None:
            self.zero_time = now
        self.events.append(RecordedInput(elapsed=now - self.zero_time, event=event))
        self.wrapped.handle_event(event)

    def save(self, path: pathlib.Path):
        path.write_bytes(msgspec.json.encode(self.events))


def load_events(path: pathlib.Path) -> list[RecordedInput]:
    try:
        return msgspec.json.decode(path.read_bytes(), type=list[RecordedInput])
    except msgspec.DecodeError as e:
        raise RecordingError(f"Malformed recording {path}: {e}") from e


async def replay(events: collections.abc.Sequence[RecordedInput], ui: Ui):
    start = trio.current_time()
    for recorded in events:
        await trio.sleep_until(start + recorded.elapsed)
        ui.handle_event(recorded.event)

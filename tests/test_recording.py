# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import pytest
import trio
from sdlbridge.commontypes import RecordingError
from sdlbridge.input.keyboard_consts import Key
from sdlbridge.input.types import (
    ControllerAxis,
    Focus,
    KeyboardButton,
    Motion,
    MouseButton,
    PointerButton,
    Press,
    Release,
    Scroll,
    Text,
    Touch,
    TouchPhase,
    TouchRecord,
)
from sdlbridge.recording import RecordedInput, Recorder, load_events, replay


class CollectingUi:
    def __init__(self):
        self.events = []

    def handle_event(self, event):
        self.events.append(event)


SAMPLE_EVENTS = [
    Focus(focused=True),
    Text(text="hello"),
    Press(button=KeyboardButton(key=Key.LEFT_SHIFT)),
    Release(button=PointerButton(button=MouseButton.X2)),
    Motion(motion=Scroll(x=0.0, y=-10.0)),
    Motion(motion=ControllerAxis(device=1, axis=2, value=-0.5)),
    Touch(touch=TouchRecord(phase=TouchPhase.MOVE, id=2**64 - 1, xy=(0.25, 0.75))),
]


async def test_recorder_forwards_and_timestamps(autojump_clock):
    ui = CollectingUi()
    recorder = Recorder(ui)
    recorder.handle_event(SAMPLE_EVENTS[0])
    await trio.sleep(1.5)
    recorder.handle_event(SAMPLE_EVENTS[1])
    assert ui.events == SAMPLE_EVENTS[:2]
    assert [r.elapsed for r in recorder.events] == pytest.approx([0.0, 1.5])


async def test_saved_recording_loads_back(tmp_path, autojump_clock):
    recorder = Recorder(CollectingUi())
    for event in SAMPLE_EVENTS:
        recorder.handle_event(event)
        await trio.sleep(0.25)
    path = tmp_path / "events.json"
    recorder.save(path)
    assert load_events(path) == recorder.events


def test_malformed_recording(tmp_path):
    path = tmp_path / "events.json"
    path.write_text('[{"elapsed": 0.0, "event": {"type": "Nonsense"}}]')
    with pytest.raises(RecordingError):
        load_events(path)


async def test_replay_preserves_order_and_timing(autojump_clock):
    ui = CollectingUi()
    recorded = [
        RecordedInput(elapsed=0.0, event=SAMPLE_EVENTS[0]),
        RecordedInput(elapsed=2.0, event=SAMPLE_EVENTS[1]),
        RecordedInput(elapsed=2.0, event=SAMPLE_EVENTS[2]),
    ]
    start = trio.current_time()
    await replay(recorded, ui)
    assert ui.events == SAMPLE_EVENTS[:3]
    assert trio.current_time() - start == pytest.approx(2.0)

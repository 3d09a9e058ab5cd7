# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import argparse
import logging
import pathlib
import sys

import trio

from .backend.window import SdlWindow
from .host import EventLoop
from .input.types import Input
from .recording import Recorder
from .settings import Settings

logger = logging.getLogger(__name__)


class PrintingUi:
    def handle_event(self, event: Input) -> None:
        print(event)


sdl_events_parser = argparse.ArgumentParser(prog="sdlbridge-events")
sdl_events_parser.add_argument("--settings", type=pathlib.Path)
sdl_events_parser.add_argument("--record", type=pathlib.Path, help="save the converted events to this file")


def print_sdl_events(argv=sys.argv):
    args = sdl_events_parser.parse_args(argv[1:])
    settings = Settings.default() if args.settings is None else Settings.load(args.settings)
    logging.basicConfig(level=settings.log_level)

    ui = PrintingUi()
    if args.record is not None:
        ui = Recorder(ui)

    async def runner():
        with SdlWindow(settings) as window:
            logger.info("Window is %r (dpi factor %s)", window.size(), window.dpi_factor())
            loop = EventLoop(window, ui, settings)
            await loop.run()

    trio.run(runner)
    if args.record is not None:
        ui.save(args.record)
        logger.info("Saved %d events to %s", len(ui.events), args.record)
    return 0

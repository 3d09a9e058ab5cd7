# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import dataclasses
import json
import pathlib
import typing

import cattrs
import cattrs.gen

from .commontypes import SettingsError, Size

DEFAULT_WINDOW_TITLE = "sdlbridge"
DEFAULT_WINDOW_SIZE = [800, 600]

settings_converter = cattrs.Converter()
settings_converter.register_unstructure_hook(pathlib.Path, str)
settings_converter.register_structure_hook(pathlib.Path, lambda v, _: pathlib.Path(v))
settings_converter.register_unstructure_hook(Size, lambda s: list(s.as_tuple()))
settings_converter.register_structure_hook(Size, lambda v, _: Size.from_tuple(v))


@dataclasses.dataclass(kw_only=True)
class Settings:
    _path: typing.Optional[pathlib.Path]
    window_title: str
    window_size: Size
    allow_highdpi: bool
    exit_on_escape: bool
    poll_hz: float
    log_level: str

    def save(self, dest: typing.Optional[pathlib.Path] = None):
        if dest is None:
            dest = self._path
        if dest is None:
            raise ValueError("Settings were not loaded from a file; a destination is required.")
        raw = settings_converter.unstructure(self)
        del raw["_path"]
        with dest.open("w") as out:
            json.dump(raw, out, indent=2)

    @classmethod
    def load(cls, src: pathlib.Path):
        with src.open() as infile:
            raw = json.load(infile)
        raw["_path"] = src
        settings = settings_converter.structure(raw, cls)
        if settings.poll_hz <= 0:
            raise SettingsError(f"poll_hz must be positive, got {settings.poll_hz} in {src}")
        return settings

    @classmethod
    def default(cls):
        return settings_converter.structure(
            {
                "_path": None,
                "window_title": DEFAULT_WINDOW_TITLE,
                "window_size": DEFAULT_WINDOW_SIZE,
                "allow_highdpi": True,
                "exit_on_escape": True,
                "poll_hz": 60.0,
                "log_level": "INFO",
            },
            cls,
        )

    @classmethod
    def for_test(cls):
        return settings_converter.structure(
            {
                "_path": "test.settings.json",
                "window_title": "sdlbridge test",
                "window_size": [640, 480],
                "allow_highdpi": False,
                "exit_on_escape": True,
                "poll_hz": 60.0,
                "log_level": "DEBUG",
            },
            cls,
        )


settings_converter.register_structure_hook(Settings, cattrs.gen.make_dict_structure_fn(Settings, settings_converter))

# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import msgspec


class Size(msgspec.Struct, frozen=True):
    width: float
    height: float

    def as_tuple(self):
        return (self.width, self.height)

    @classmethod
    def from_tuple(cls, tup):
        return cls(width=tup[0], height=tup[1])

    def to_centered(self, x: float, y: float) -> tuple[float, float]:
        """Translate a top-left-origin, y-down position into the centre-origin, y-up frame.

        The size must be the logical (DPI-agnostic) window size, not the drawable size.
        """
        return (x - self.width / 2.0, -(y - self.height / 2.0))


class SdlBridgeError(Exception):
    pass


class BackendInitError(SdlBridgeError):
    pass


class RecordingError(SdlBridgeError):
    pass


class SettingsError(SdlBridgeError):
    pass


class NotInContextError(Exception):
    def __init__(self):
        return super().__init__("Must be inside an appropriate context manager")

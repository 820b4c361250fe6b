"""The colour palette used for activators."""

from __future__ import annotations

import logging
import math
import struct
from collections.abc import Sequence
from enum import Enum
from typing import NamedTuple

logger = logging.getLogger(__name__)


class Rgba(NamedTuple):
    """An sRGB colour with components in the range 0 to 1."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0


def _f32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _from_bytes(red: int, green: int, blue: int) -> Rgba:
    return Rgba(red / 255.0, green / 255.0, blue / 255.0, 1.0)


class ColorPalette(Enum):
    """Named colours an activator can take."""

    BLUE_VIOLET = "blue_violet"
    CORNFLOWER_BLUE = "cornflower_blue"
    DARK_ORCHID = "dark_orchid"
    INDIGO = "indigo"
    REBECCA_PURPLE = "rebecca_purple"

    def as_rgba(self) -> Rgba:
        """The colour as RGBA components."""
        return _RGBA[self]

    @classmethod
    def default(cls) -> ColorPalette:
        return cls.BLUE_VIOLET

    @classmethod
    def get_random(cls, position: Sequence[float]) -> ColorPalette:
        """Pick a colour deterministically from a position."""
        x, y = (_f32(_f32(value) * 1000.0) for value in position)
        length = _f32(math.sqrt(_f32(_f32(x * x) + _f32(y * y))))
        remainder = math.fmod(length, 4.0)
        bucket = 0 if math.isnan(remainder) else int(remainder)
        choice = {
            1: cls.CORNFLOWER_BLUE,
            2: cls.DARK_ORCHID,
            3: cls.INDIGO,
            4: cls.REBECCA_PURPLE,
        }.get(bucket + 1)
        if choice is None:
            logger.warning("unexpected hash %s", bucket + 1)
            return cls.BLUE_VIOLET
        return choice

    @classmethod
    def enumerate(cls) -> list[ColorPalette]:
        """All colours of the palette in order."""
        return list(cls)


_RGBA = {
    ColorPalette.BLUE_VIOLET: _from_bytes(138, 43, 226),
    ColorPalette.CORNFLOWER_BLUE: _from_bytes(100, 149, 237),
    ColorPalette.DARK_ORCHID: _from_bytes(153, 50, 204),
    ColorPalette.INDIGO: _from_bytes(75, 0, 130),
    ColorPalette.REBECCA_PURPLE: _from_bytes(102, 51, 153),
}
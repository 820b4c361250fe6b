"""Geometry helpers mapping positions onto a scale."""

from __future__ import annotations

import math
import struct
from collections.abc import Sequence

from silksong.music_model import Scale


def _f32(value: float) -> float:
    """Round a float to single precision."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


_PI = _f32(math.pi)


def _try_normalize(x: float, y: float) -> tuple[float, float] | None:
    length = _f32(math.sqrt(_f32(_f32(x * x) + _f32(y * y))))
    if length == 0.0:
        return None
    reciprocal = _f32(1.0 / length)
    if not math.isfinite(reciprocal) or reciprocal <= 0.0:
        return None
    return _f32(x * reciprocal), _f32(y * reciprocal)


def calculate_scale_position_by_angle(
    center: Sequence[float], point: Sequence[float], scale: Scale
) -> int:
    """Return the 1-based scale position selected by the angle of ``point`` around ``center``.

    The full circle is divided into ``scale.size()`` equal parts, counted
    counter-clockwise from the positive x axis. A point on the center yields 0.
    """
    cx, cy = (_f32(value) for value in center)
    px, py = (_f32(value) for value in point)
    direction = _try_normalize(_f32(px - cx), _f32(py - cy))
    if direction is None:
        return 0
    x, y = direction

    angle_x = _f32(math.acos(max(-1.0, min(1.0, x))))
    part = _f32(_f32(_PI * 2.0) / _f32(float(scale.size())))
    angle = angle_x if y >= 0.0 else _f32(_f32(2.0 * _PI) - angle_x)

    ratio = _f32(angle / part)
    if math.isnan(ratio):
        return 0
    return max(0, min(255, math.ceil(ratio)))
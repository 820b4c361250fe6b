import pytest

from silksong.geometry import calculate_scale_position_by_angle
from silksong.music_model import Note, Scale, Step


class SizedScale(Scale):
    """A scale with a chosen number of notes."""

    def __init__(self, size):
        super().__init__(Note.A)
        self._size = size

    def steps(self):
        return [Step.HALF] * (self._size - 1)


@pytest.mark.parametrize(
    ("point", "expected"),
    [
        ((0.0, 0.0), 0),
        ((0.9781476, 0.2079117), 1),
        ((1.0, 1.0), 1),
        ((1.0, 1.1), 2),
        ((0.0, 1.0), 2),
        ((-0.5, 0.8660254), 3),
        ((-0.6427876, 0.7660444), 3),
        ((-0.7660444, 0.6427876), 4),
        ((-1.0, 0.0), 4),
        ((-1.0, -0.005), 5),
        ((0.0, -1.0), 6),
        ((0.9, -0.01), 8),
    ],
)
def test_multiple_points_on_normal_sized_scale(point, expected):
    scale = SizedScale(8)
    assert calculate_scale_position_by_angle((0.0, 0.0), point, scale) == expected


@pytest.mark.parametrize(
    ("size", "expected"),
    [(1, 1), (2, 1), (3, 1), (4, 1), (5, 2), (6, 2), (7, 2), (8, 2), (9, 3), (10, 3)],
)
def test_calculate_90deg(size, expected):
    center = (1.0, 1.0)
    point = (1.0, 2.0)
    assert calculate_scale_position_by_angle(center, point, SizedScale(size)) == expected


@pytest.mark.parametrize(
    ("size", "expected"),
    [(1, 1), (2, 1), (3, 1), (4, 1), (5, 1), (6, 1), (7, 1), (8, 1), (9, 2), (10, 2)],
)
def test_calculate_45deg(size, expected):
    center = (1.0, 1.0)
    point = (2.0, 2.0)
    assert calculate_scale_position_by_angle(center, point, SizedScale(size)) == expected


@pytest.mark.parametrize("size", [1, 5, 7, 12])
def test_point_on_center_is_zero(size):
    assert calculate_scale_position_by_angle((3.0, -2.0), (3.0, -2.0), SizedScale(size)) == 0


@pytest.mark.parametrize("size", [3, 7, 12])
@pytest.mark.parametrize("point", [(0.3, 0.7), (-2.0, 0.1), (-0.4, -3.0), (5.0, -0.2)])
def test_result_within_scale(size, point):
    result = calculate_scale_position_by_angle((0.0, 0.0), point, SizedScale(size))
    assert 1 <= result <= size
"""Tests for pixel geometry helpers."""

import numpy as np
import pytest

from jointcount.core.geometry import (
    Location, all_hits, circle_array, first_hit, hit_mask, hit_test,
    round_half_away, scale_rect,
)


@pytest.mark.parametrize("value, expected", [
    (0.0, 0), (2.4, 2), (2.5, 3), (3.5, 4), (52.5, 53), (7.5, 8),
    (-2.5, -3), (-2.4, -2),
])
def test_round_half_away(value, expected):
    assert round_half_away(value) == expected


def test_hit_test_strictly_inside():
    loc = Location(100, 100, 15)
    assert hit_test((100, 114), loc)
    assert not hit_test((100, 115), loc)
    assert hit_test((100, 100), loc)
    assert not hit_test((111, 111), loc)  # distance ~15.56


def test_location_bounds():
    assert Location(50, 60, 8).bounds == (42, 52, 16, 16)


def test_scale_rect():
    assert scale_rect((30, 40, 230, 100), 0.5) == (15, 20, 115, 50)
    assert scale_rect((480, 40, 200, 100), 1.0) == (480, 40, 200, 100)


def test_circle_array_shape():
    arr = circle_array([Location(1, 2, 3), Location(4, 5, 6)])
    assert arr.shape == (2, 3)
    np.testing.assert_array_equal(arr[1], [4, 5, 6])
    assert circle_array([]).shape == (0, 3)


def test_hit_mask_matches_scalar_test():
    locs = [Location(100, 100, 15), Location(120, 100, 15), Location(300, 300, 15)]
    circles = circle_array(locs)
    for point in [(100, 114), (100, 115), (110, 100), (300, 286), (0, 0)]:
        expected = [hit_test(point, loc) for loc in locs]
        assert hit_mask(point, circles).tolist() == expected


def test_all_hits_and_first_hit():
    circles = circle_array([Location(100, 100, 15), Location(120, 100, 15)])
    assert all_hits((110, 100), circles) == [0, 1]
    assert first_hit((110, 100), circles) == 0
    assert all_hits((130, 100), circles) == [1]
    assert first_hit((500, 500), circles) == -1
    assert all_hits((1, 1), circle_array([])) == []

"""Tests for scaled joint locations."""

import pytest

from jointcount.anatomy.joint_locations import (
    BASE_CENTERS, LocationModel, validate_scale,
)
from jointcount.core.errors import InvalidScaleError
from jointcount.core.geometry import Location, round_half_away


def test_every_joint_has_a_location():
    assert sorted(BASE_CENTERS) == list(range(1, 69))


@pytest.mark.parametrize("scale", [0.25, 0.5, 0.8, 1.0, 1.33, 2.0])
def test_radius_is_scaled_base_radius(scale):
    locations = LocationModel().build(scale)
    assert len(locations) == 68
    for loc in locations.values():
        assert loc.radius == round_half_away(15 * scale)


def test_full_scale_matches_base():
    locations = LocationModel().build(1)
    assert locations[1] == Location(320, 80, 15)
    assert locations[68] == Location(536, 940, 15)


def test_half_scale_rounds_half_away_from_zero():
    locations = LocationModel().build(0.5)
    # 105 * 0.5 = 52.5, 625 * 0.5 = 312.5, 15 * 0.5 = 7.5
    assert locations[19] == Location(53, 313, 8)
    assert locations[4] == Location(149, 78, 8)


@pytest.mark.parametrize("bad", [0, -0.5, float("nan"), float("inf"), "big", None, True])
def test_invalid_scale(bad):
    with pytest.raises(InvalidScaleError):
        LocationModel().build(bad)


def test_invalid_scale_is_value_error():
    with pytest.raises(ValueError):
        validate_scale(0)


def test_cached_per_scale():
    model = LocationModel()
    first = model.build(0.5)
    assert model.build(0.5) is first
    other = model.build(0.75)
    assert other is not first
    assert model.cached_scales == [0.5, 0.75]
    model.clear()
    assert model.cached_scales == []


def test_locations_read_only():
    locations = LocationModel().build(1.0)
    with pytest.raises(TypeError):
        locations[1] = Location(0, 0, 1)

"""Tests for grid locations and distance."""

import math

import pytest

from gridcab.models.location import Location, distance


class TestLocation:
    def test_distance_is_euclidean(self):
        assert distance(Location(0, 0), Location(3, 4)) == 5.0

    def test_distance_is_symmetric(self):
        a, b = Location(3, 5), Location(-7, 1)
        assert distance(a, b) == distance(b, a)

    def test_distance_to_self_is_zero(self):
        assert Location(2, 2).distance_to(Location(2, 2)) == 0.0

    def test_distance_not_rounded(self):
        assert distance(Location(10, 8), Location(3, 4)) == pytest.approx(math.sqrt(65))

    def test_value_equality_and_hashing(self):
        assert Location(1, 2) == Location(1, 2)
        assert Location(1, 2) != Location(2, 1)
        assert len({Location(1, 2), Location(1, 2)}) == 1

    def test_is_immutable(self):
        location = Location(1, 2)
        with pytest.raises(AttributeError):
            location.x = 5

    def test_str(self):
        assert str(Location(3, -4)) == "(3, -4)"

    def test_dict_conversion(self):
        location = Location.from_dict({"x": 7, "y": 9})
        assert location == Location(7, 9)
        assert location.to_dict() == {"x": 7, "y": 9}

    @pytest.mark.parametrize("bad", [True, 3.7, "3", None, float("inf")])
    def test_from_dict_rejects_non_integer_coordinates(self, bad):
        with pytest.raises(ValueError):
            Location.from_dict({"x": bad, "y": 0})

"""Tests for simple_color_palette.core.numeric (clamping and banker's rounding)."""

import math

from simple_color_palette.core.numeric import DECIMAL_PLACES, clamp, round_to_places


class TestClamp:
    def test_inside_range(self):
        assert clamp(0.5, 0.0, 1.0) == 0.5

    def test_below(self):
        assert clamp(-0.5, 0.0, 1.0) == 0.0

    def test_above(self):
        assert clamp(1.5, 0.0, 1.0) == 1.0

    def test_bounds_inclusive(self):
        assert clamp(0.0, 0.0, 1.0) == 0.0
        assert clamp(1.0, 0.0, 1.0) == 1.0


class TestRoundToPlaces:
    def test_policy_is_four_places(self):
        assert DECIMAL_PLACES == 4

    def test_tie_rounds_to_even_down(self):
        assert round_to_places(0.12345, 4) == 0.1234

    def test_tie_rounds_to_even_up(self):
        assert round_to_places(2.5, 0) == 2.0
        assert round_to_places(3.5, 0) == 4.0

    def test_not_a_tie(self):
        assert round_to_places(0.12349, 4) == 0.1235
        assert round_to_places(0.12344, 4) == 0.1234

    def test_already_rounded_is_unchanged(self):
        assert round_to_places(0.1235, 4) == 0.1235

    def test_negative(self):
        assert round_to_places(-0.12346, 4) == -0.1235

    def test_no_negative_zero(self):
        result = round_to_places(-0.00001, 4)
        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0

    def test_extended_range(self):
        assert round_to_places(2.000049, 4) == 2.0

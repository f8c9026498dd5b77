"""Tests for simple_color_palette.core.transfer (sRGB transfer curve and inverse)."""

import numpy as np
import pytest
from simple_color_palette.core.transfer import (
    linear_to_srgb,
    linear_to_srgb_array,
    srgb_to_linear,
    srgb_to_linear_array,
)

GRID = [i / 100 for i in range(-50, 201)]


class TestSrgbToLinear:
    def test_black(self):
        assert srgb_to_linear(0.0) == 0.0

    def test_white(self):
        assert srgb_to_linear(1.0) == pytest.approx(1.0)

    def test_mid_grey(self):
        assert srgb_to_linear(0.5) == pytest.approx(0.214041, abs=1e-6)

    def test_linear_segment_at_threshold(self):
        assert srgb_to_linear(0.04045) == pytest.approx(0.04045 / 12.92)

    def test_negative_is_not_clamped(self):
        assert srgb_to_linear(-0.5) == pytest.approx(-0.5 / 12.92)

    def test_above_one_is_not_clamped(self):
        assert srgb_to_linear(1.5) > 1.0


class TestLinearToSrgb:
    def test_black(self):
        assert linear_to_srgb(0.0) == 0.0

    def test_white(self):
        assert linear_to_srgb(1.0) == pytest.approx(1.0)

    def test_linear_segment(self):
        assert linear_to_srgb(0.001) == pytest.approx(0.01292)

    def test_above_one_is_not_clamped(self):
        assert linear_to_srgb(2.0) > 1.0

    def test_negative_is_not_clamped(self):
        assert linear_to_srgb(-0.25) == pytest.approx(-0.25 * 12.92)


class TestRoundTrip:
    def test_linear_srgb_linear(self):
        for x in GRID:
            assert srgb_to_linear(linear_to_srgb(x)) == pytest.approx(x, abs=1e-9)

    def test_srgb_linear_srgb(self):
        for x in GRID:
            assert linear_to_srgb(srgb_to_linear(x)) == pytest.approx(x, abs=1e-9)


class TestArrayVariants:
    def test_srgb_to_linear_matches_scalar(self):
        values = np.array(GRID)
        expected = np.array([srgb_to_linear(x) for x in GRID])
        np.testing.assert_allclose(srgb_to_linear_array(values), expected, rtol=1e-12, atol=1e-15)

    def test_linear_to_srgb_matches_scalar(self):
        values = np.array(GRID)
        expected = np.array([linear_to_srgb(x) for x in GRID])
        np.testing.assert_allclose(linear_to_srgb_array(values), expected, rtol=1e-12, atol=1e-15)

    def test_keeps_shape(self):
        values = np.zeros((2, 3))
        assert srgb_to_linear_array(values).shape == (2, 3)
        assert linear_to_srgb_array(values).shape == (2, 3)

    def test_does_not_modify_input(self):
        values = np.array([0.5, 1.0])
        srgb_to_linear_array(values)
        assert values.tolist() == [0.5, 1.0]

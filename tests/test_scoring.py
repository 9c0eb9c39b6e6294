# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""Tests for salience scoring."""

import pytest

from colorextractor.errors import InvalidInputError
from colorextractor.measure.colorspace import rgb_to_linear
from colorextractor.measure.scoring import color_score, saturation_luminosity


class TestSaturationLuminosity:

    def test_pure_red(self):
        sat, lum = saturation_luminosity(0xFF0000)
        assert sat == pytest.approx(1.0)
        assert lum == pytest.approx((0.5 + 0.2126) / 2)

    def test_gray_has_no_saturation(self):
        sat, _ = saturation_luminosity(0x808080)
        assert sat == 0.0

    def test_white_and_black(self):
        assert saturation_luminosity(0xFFFFFF) == pytest.approx((0.0, 1.0))
        assert saturation_luminosity(0x000000) == pytest.approx((0.0, 0.0))

    def test_bright_branch(self):
        """Lightness above 0.5 uses diff / (2 - diff)."""
        sat, _ = saturation_luminosity(0xFF8080)
        lo = float(rgb_to_linear(0x80))
        diff = 1.0 - lo
        assert sat == pytest.approx(diff / (2.0 - diff))

    def test_uses_linearized_channels(self):
        """
        Intentional: mid-gray luminosity comes from the linearized value
        (~0.216), not from 128/255 (~0.502) as canonical HSL would give.
        """
        _, lum = saturation_luminosity(0x808080)
        assert lum == pytest.approx(float(rgb_to_linear(128)))
        assert lum < 0.3


class TestColorScore:

    def test_saturated_color_scores_by_count(self):
        lum = (0.5 + 0.2126) / 2
        assert color_score(0xFF0000, 100, 3) == pytest.approx(100 * 1.0 * lum)

    def test_saturated_score_ignores_distinct_count(self):
        assert color_score(0x00FF00, 50, 3) == pytest.approx(color_score(0x00FF00, 50, 1000))

    def test_desaturated_color_scores_by_relative_frequency(self):
        lum = float(rgb_to_linear(128))
        assert color_score(0x808080, 30, 3) == pytest.approx((1 - lum) * 10)

    def test_black_scores_full_relative_frequency(self):
        assert color_score(0x000000, 20, 4) == pytest.approx(5.0)

    def test_white_scores_zero(self):
        assert color_score(0xFFFFFF, 1000, 2) == pytest.approx(0.0)

    def test_green_outscores_blue_at_equal_count(self):
        assert color_score(0x00FF00, 10, 3) > color_score(0x0000FF, 10, 3)

    def test_invalid_distinct_count(self):
        with pytest.raises(InvalidInputError):
            color_score(0xFF0000, 1, 0)

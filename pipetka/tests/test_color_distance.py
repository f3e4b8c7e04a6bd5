"""Unit tests for color_distance.py — RGB distance and simplified ΔE."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

import math
import pytest

from pipetka.services.color_distance import color_distance, delta_e_2000
from pipetka.services.color_utils import Lab, Rgb, rgb_to_lab


class TestColorDistance:
    def test_identical(self):
        assert color_distance(Rgb(10, 20, 30), Rgb(10, 20, 30)) == 0.0

    def test_black_to_white(self):
        assert color_distance((0, 0, 0), (255, 255, 255)) == pytest.approx(255 * math.sqrt(3))

    def test_symmetric(self):
        a, b = (255, 87, 51), (0, 168, 204)
        assert color_distance(a, b) == color_distance(b, a)


class TestDeltaE2000:
    def test_identical_is_zero(self):
        lab = rgb_to_lab(255, 87, 51)
        assert delta_e_2000(lab, lab) == pytest.approx(0.0)

    def test_lightness_only(self):
        # Achromatic pair: only the lightness term contributes
        sl = 1 + 0.015 * 25 / math.sqrt(45)
        assert delta_e_2000(Lab(50, 0, 0), Lab(60, 0, 0)) == pytest.approx(10 / sl)

    def test_ranks_near_colors_closer(self):
        red = rgb_to_lab(255, 0, 0)
        near_red = rgb_to_lab(240, 10, 10)
        blue = rgb_to_lab(0, 0, 255)
        assert delta_e_2000(red, near_red) < delta_e_2000(red, blue)

    def test_non_negative(self):
        pairs = [((255, 255, 255), (0, 0, 0)), ((0, 128, 0), (128, 0, 128)), ((10, 10, 10), (12, 10, 10))]
        for c1, c2 in pairs:
            assert delta_e_2000(rgb_to_lab(*c1), rgb_to_lab(*c2)) >= 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

"""Unit tests for contrast.py — WCAG luminance, ratios and recommendations."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

import numpy as np
import pytest

from pipetka.services.contrast import (
    analyze_contrast,
    analyze_contrast_multiple,
    best_text_color,
    calculate_contrast_ratio,
    calculate_relative_luminance,
    check_contrast,
    check_wcag_levels,
    contrast_ratio_rgb,
    generate_recommendation,
)


# ─────────────────────────────────────────────────────────────────────────────
# Tests: luminance and ratio
# ─────────────────────────────────────────────────────────────────────────────

class TestRelativeLuminance:
    def test_black_and_white(self):
        assert calculate_relative_luminance(0, 0, 0) == 0.0
        assert calculate_relative_luminance(255, 255, 255) == pytest.approx(1.0)

    def test_pure_red(self):
        assert calculate_relative_luminance(255, 0, 0) == pytest.approx(0.2126)

    def test_green_dominates(self):
        assert calculate_relative_luminance(0, 255, 0) > calculate_relative_luminance(255, 0, 0)


class TestContrastRatio:
    def test_black_on_white(self):
        assert calculate_contrast_ratio("#000000", "#FFFFFF") == pytest.approx(21.0)

    def test_order_does_not_matter(self):
        a = calculate_contrast_ratio("#336699", "#FFFFFF")
        b = calculate_contrast_ratio("#FFFFFF", "#336699")
        assert a == pytest.approx(b)

    def test_same_color(self):
        assert calculate_contrast_ratio("#777777", "#777777") == pytest.approx(1.0)

    def test_mixed_formats(self):
        ratio = calculate_contrast_ratio("rgb(0, 0, 0)", "hsl(0, 0%, 100%)")
        assert ratio == pytest.approx(21.0)

    def test_invalid_gives_zero(self):
        assert calculate_contrast_ratio("nope", "#FFFFFF") == 0.0
        assert calculate_contrast_ratio(None, None) == 0.0

    def test_random_pairs_bounded_and_symmetric(self):
        pairs = np.random.default_rng(0).integers(0, 256, size=(300, 2, 3)).tolist()
        for a, b in pairs:
            ratio = contrast_ratio_rgb(a, b)
            assert 1.0 <= ratio <= 21.0 + 1e-9
            assert ratio == contrast_ratio_rgb(b, a)


# ─────────────────────────────────────────────────────────────────────────────
# Tests: WCAG levels
# ─────────────────────────────────────────────────────────────────────────────

class TestWcagLevels:
    def test_thresholds_are_inclusive(self):
        levels = check_wcag_levels(4.5)
        assert levels.aa_normal
        assert levels.aa_large
        assert levels.aaa_large
        assert not levels.aaa_normal

    def test_just_below_large(self):
        levels = check_wcag_levels(2.99)
        assert levels.to_dict() == {
            "aa_normal": False,
            "aa_large": False,
            "aaa_normal": False,
            "aaa_large": False,
        }

    def test_max_ratio(self):
        assert all(check_wcag_levels(21).to_dict().values())


class TestCheckContrast:
    def test_black_on_white(self):
        result = check_contrast("#000000", "#FFFFFF")
        assert result.ratio_formatted == "21.00:1"
        assert result.wcag.aaa_normal
        assert result.foreground_hex == "#000000"
        assert result.background_hex == "#FFFFFF"
        assert result.is_valid

    def test_missing_foreground(self):
        result = check_contrast(None, "#FFFFFF")
        assert result.ratio == 0.0
        assert result.ratio_formatted == "0:1"
        assert not any(result.wcag.to_dict().values())
        assert result.foreground_rgb is None
        assert result.background_rgb == (255, 255, 255)
        assert not result.is_valid

    def test_to_dict_shape(self):
        data = check_contrast("#FFFFFF", "#000000").to_dict()
        assert data["foreground_rgb"] == {"r": 255, "g": 255, "b": 255}
        assert data["wcag"]["aa_normal"] is True


class TestGenerateRecommendation:
    def test_excellent(self):
        assert generate_recommendation(7.0) == "Excellent contrast. Meets WCAG AAA standards."

    def test_good(self):
        assert generate_recommendation(5.0) == "Good contrast. Meets WCAG AA standards."

    def test_large_text_uses_lower_threshold(self):
        assert generate_recommendation(3.2, is_large_text=True) == "Good contrast. Meets WCAG AA standards."

    def test_increase_percentage(self):
        assert generate_recommendation(3.0) == (
            "Increase contrast by approximately 50% to meet WCAG AA standards. "
            "Consider adjusting text color brightness."
        )

    def test_increase_percentage_large_text(self):
        assert generate_recommendation(2.0, is_large_text=True) == (
            "Increase contrast by approximately 50% to meet WCAG AA Large standards. "
            "Consider increasing text size or adjusting text color brightness."
        )

    def test_zero_ratio(self):
        assert generate_recommendation(0) == "Contrast is below WCAG standards. Please adjust colors."


# ─────────────────────────────────────────────────────────────────────────────
# Tests: per-color analysis
# ─────────────────────────────────────────────────────────────────────────────

class TestAnalyzeContrast:
    def test_black(self):
        result = analyze_contrast("#000000")
        assert result.contrast_white == 21.0
        assert result.contrast_black == 1.0
        assert result.wcag_aaa
        assert result.recommendations == []

    def test_mid_gray_passes_aa_only(self):
        result = analyze_contrast("#777777")
        assert result.wcag_aa
        assert not result.wcag_aaa
        assert result.wcag_aa_large
        assert result.recommendations == ["Consider increasing contrast for AAA compliance"]

    def test_invalid(self):
        result = analyze_contrast("bogus")
        assert result.contrast_white == 0.0
        assert not result.wcag_aa
        assert result.recommendations == ["Invalid color"]

    def test_multiple_keeps_order(self):
        results = analyze_contrast_multiple(["#FFFFFF", "#000000"])
        assert [r.hex for r in results] == ["#FFFFFF", "#000000"]


class TestBestTextColor:
    def test_dark_background(self):
        assert best_text_color("#1B2D5B") == "#FFFFFF"

    def test_light_background(self):
        assert best_text_color("#F5F0DC") == "#000000"

    def test_invalid_defaults_black(self):
        assert best_text_color("nope") == "#000000"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

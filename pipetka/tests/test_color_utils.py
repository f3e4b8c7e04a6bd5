"""Unit tests for color_utils.py — HEX/RGB/HSL/LAB conversions and CSS parsing."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

import numpy as np
import pytest

from pipetka.services.color_utils import (
    Hsl,
    Rgb,
    format_hsl,
    format_rgb,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_rgb,
    lab_to_lch,
    parse_color_to_rgb,
    parse_hsl,
    parse_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_lab,
    round_half_up,
)


# ─────────────────────────────────────────────────────────────────────────────
# Tests: rounding
# ─────────────────────────────────────────────────────────────────────────────

class TestRoundHalfUp:
    def test_half_rounds_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3

    def test_negative_half_rounds_towards_positive(self):
        assert round_half_up(-0.5) == 0

    def test_below_half(self):
        assert round_half_up(128.4) == 128


# ─────────────────────────────────────────────────────────────────────────────
# Tests: HEX ⇄ RGB
# ─────────────────────────────────────────────────────────────────────────────

class TestRgbToHex:
    def test_basic(self):
        assert rgb_to_hex(255, 87, 51) == "#FF5733"
        assert rgb_to_hex(0, 168, 204) == "#00A8CC"

    def test_black_and_white(self):
        assert rgb_to_hex(0, 0, 0) == "#000000"
        assert rgb_to_hex(255, 255, 255) == "#FFFFFF"

    def test_single_digit_padding(self):
        assert rgb_to_hex(15, 15, 15) == "#0F0F0F"

    def test_rounds_fractional_channels(self):
        assert rgb_to_hex(128.4, 128.6, 128.5) == "#808181"

    def test_does_not_clamp(self):
        # 255.7 rounds to 256 → '100', producing a 7-digit string
        assert rgb_to_hex(255.7, 87.3, 51.9) == "#1005734"


class TestHexToRgb:
    def test_with_hash(self):
        assert hex_to_rgb("#FF5733") == Rgb(255, 87, 51)

    def test_without_hash(self):
        assert hex_to_rgb("00A8CC") == (0, 168, 204)

    def test_lowercase(self):
        assert hex_to_rgb("#ff5733") == (255, 87, 51)

    def test_shorthand_rejected(self):
        assert hex_to_rgb("#FFF") is None
        assert hex_to_rgb("#F00") is None

    def test_garbage_rejected(self):
        assert hex_to_rgb("#GGGGGG") is None
        assert hex_to_rgb("") is None
        assert hex_to_rgb("#FF5733\n") is None

    def test_non_string(self):
        assert hex_to_rgb(None) is None
        assert hex_to_rgb(0xFF5733) is None

    def test_round_trip_is_exact(self):
        for rgb in [(0, 0, 0), (255, 255, 255), (1, 2, 3), (254, 128, 17), (16, 32, 64)]:
            assert hex_to_rgb(rgb_to_hex(*rgb)) == rgb

    def test_round_trip_random_triples(self):
        triples = np.random.default_rng(0).integers(0, 256, size=(200, 3)).tolist()
        for rgb in triples:
            assert hex_to_rgb(rgb_to_hex(*rgb)) == tuple(rgb)

    def test_non_ascii_digits_rejected(self):
        # Arabic-Indic digits are \d in unicode regexes
        assert hex_to_rgb("#\u0661\u06612233") is None
        assert hex_to_rgb("\u0661\u0661\u0662\u0662\u0663\u0663") is None


# ─────────────────────────────────────────────────────────────────────────────
# Tests: RGB ⇄ HSL
# ─────────────────────────────────────────────────────────────────────────────

class TestRgbToHsl:
    def test_primaries(self):
        assert rgb_to_hsl(255, 0, 0) == Hsl(0, 100, 50)
        assert rgb_to_hsl(0, 255, 0) == Hsl(120, 100, 50)
        assert rgb_to_hsl(0, 0, 255) == Hsl(240, 100, 50)

    def test_grayscale(self):
        assert rgb_to_hsl(255, 255, 255) == Hsl(0, 0, 100)
        assert rgb_to_hsl(0, 0, 0) == Hsl(0, 0, 0)
        assert rgb_to_hsl(128, 128, 128) == Hsl(0, 0, 50)

    def test_orange_red(self):
        assert rgb_to_hsl(255, 87, 51) == Hsl(11, 100, 60)

    def test_hue_wraps_below_360(self):
        # hue 359.76° rounds to 360 and must wrap to 0
        assert rgb_to_hsl(255, 0, 1).h == 0

    def test_hex_to_hsl(self):
        assert hex_to_hsl("#FF0000") == Hsl(0, 100, 50)
        assert hex_to_hsl("nope") is None


class TestHslToRgb:
    def test_primaries(self):
        assert hsl_to_rgb(0, 100, 50) == Rgb(255, 0, 0)
        assert hsl_to_rgb(120, 100, 50) == Rgb(0, 255, 0)
        assert hsl_to_rgb(240, 100, 50) == Rgb(0, 0, 255)

    def test_white_and_black(self):
        assert hsl_to_rgb(0, 0, 100) == Rgb(255, 255, 255)
        assert hsl_to_rgb(0, 0, 0) == Rgb(0, 0, 0)

    def test_hue_wraps(self):
        assert hsl_to_rgb(360, 100, 50) == hsl_to_rgb(0, 100, 50)
        assert hsl_to_rgb(-120, 100, 50) == hsl_to_rgb(240, 100, 50)

    @pytest.mark.parametrize("rgb", [
        (255, 0, 0), (0, 255, 0), (0, 0, 255),
        (255, 255, 255), (0, 0, 0), (128, 128, 128),
        (255, 87, 51), (0, 168, 204),
    ])
    def test_round_trip_within_one(self, rgb):
        back = hsl_to_rgb(*rgb_to_hsl(*rgb))
        for original, converted in zip(rgb, back):
            assert abs(original - converted) <= 1


# ─────────────────────────────────────────────────────────────────────────────
# Tests: LAB / LCH
# ─────────────────────────────────────────────────────────────────────────────

class TestLab:
    def test_white(self):
        l, a, b = rgb_to_lab(255, 255, 255)
        assert l == pytest.approx(100.0, abs=0.01)
        assert a == pytest.approx(0.0, abs=0.01)
        assert b == pytest.approx(0.0, abs=0.01)

    def test_black(self):
        l, a, b = rgb_to_lab(0, 0, 0)
        assert l == pytest.approx(0.0, abs=0.01)
        assert a == pytest.approx(0.0, abs=0.01)
        assert b == pytest.approx(0.0, abs=0.01)

    def test_red_is_positive_a(self):
        _, a, b = rgb_to_lab(255, 0, 0)
        assert a > 50
        assert b > 50

    def test_lch_hue_positive(self):
        lch = lab_to_lch(50, 0, -10)
        assert lch.c == pytest.approx(10.0)
        assert lch.h == pytest.approx(270.0)

    def test_lch_quarter_turn(self):
        assert lab_to_lch(50, 0, 10).h == pytest.approx(90.0)


# ─────────────────────────────────────────────────────────────────────────────
# Tests: CSS strings
# ─────────────────────────────────────────────────────────────────────────────

class TestFormatting:
    def test_format_rgb(self):
        assert format_rgb(1, 2, 3) == "rgb(1, 2, 3)"

    def test_format_hsl(self):
        assert format_hsl(11, 100, 60) == "hsl(11, 100%, 60%)"


class TestParseRgb:
    def test_spaced(self):
        assert parse_rgb("rgb(255, 87, 51)") == Rgb(255, 87, 51)

    def test_compact_and_uppercase(self):
        assert parse_rgb("RGB(1,2,3)") == Rgb(1, 2, 3)

    def test_out_of_range(self):
        assert parse_rgb("rgb(256, 0, 0)") is None

    def test_garbage(self):
        assert parse_rgb("rgb(a, b, c)") is None

    def test_non_ascii_digits_rejected(self):
        assert parse_rgb("rgb(\u0661\u0662, 0, 0)") is None
        assert parse_rgb("rgb(\uff11, 2, 3)") is None


class TestParseHsl:
    def test_valid(self):
        assert parse_hsl("hsl(11, 100%, 60%)") == Hsl(11, 100, 60)

    def test_hue_out_of_range(self):
        assert parse_hsl("hsl(361, 50%, 50%)") is None

    def test_percent_out_of_range(self):
        assert parse_hsl("hsl(0, 101%, 50%)") is None
        assert parse_hsl("hsl(0, 50%, 101%)") is None

    def test_missing_percent_sign(self):
        assert parse_hsl("hsl(0, 50, 50)") is None

    def test_non_ascii_digits_rejected(self):
        assert parse_hsl("hsl(\u0661\u0662, 50%, 50%)") is None


class TestParseColorToRgb:
    def test_hex(self):
        assert parse_color_to_rgb("#FF5733") == Rgb(255, 87, 51)

    def test_bare_hex(self):
        assert parse_color_to_rgb("FF5733") == Rgb(255, 87, 51)

    def test_rgb_function(self):
        assert parse_color_to_rgb("rgb(0, 0, 0)") == Rgb(0, 0, 0)

    def test_hsl_function(self):
        assert parse_color_to_rgb("hsl(0, 100%, 50%)") == Rgb(255, 0, 0)

    def test_not_a_color(self):
        assert parse_color_to_rgb("not-a-color") is None

    def test_empty_and_none(self):
        assert parse_color_to_rgb("") is None
        assert parse_color_to_rgb(None) is None

    def test_non_string(self):
        assert parse_color_to_rgb(42) is None

    def test_non_ascii_digits_rejected(self):
        assert parse_color_to_rgb("\u0661\u06612233") is None
        assert parse_color_to_rgb("#\u0661\u06612233") is None
        assert parse_color_to_rgb("rgb(\u0661, 0, 0)") is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

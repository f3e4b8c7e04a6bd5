"""Unit tests for brand_analysis.py — roles, palette character and harmony detection."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

import json

import pytest

from pipetka.services.brand_analysis import (
    BrandPresetCatalogue,
    ClusteredColor,
    HarmonyAnalysis,
    PaletteCharacteristics,
    analyze_brand,
    analyze_harmony,
    analyze_palette,
    cluster_colors,
    find_brand_preset,
    generate_descriptions,
    get_brand_presets,
    parse_brand_colors,
)


def _roles(hex_colors):
    return {c.hex: c.role for c in cluster_colors(hex_colors)}


def _harmony(hex_colors) -> HarmonyAnalysis:
    return analyze_harmony(cluster_colors(hex_colors))


# ─────────────────────────────────────────────────────────────────────────────
# Tests: parsing and roles
# ─────────────────────────────────────────────────────────────────────────────

class TestParseBrandColors:
    def test_normalizes_and_drops(self):
        parsed = parse_brand_colors(["#ff5733", " rgb(0, 0, 0) ", "bogus", "hsl(0, 100%, 50%)"])
        assert parsed == ["#FF5733", "#000000", "#FF0000"]

    def test_non_strings_dropped(self):
        assert parse_brand_colors([None, 12, "#FFFFFF"]) == ["#FFFFFF"]


class TestClusterColors:
    def test_primary_secondary_neutral(self):
        assert _roles(["#FF5733", "#33C3F0", "#000000"]) == {
            "#FF5733": "primary",
            "#33C3F0": "secondary",
            "#000000": "neutral",
        }

    def test_output_order_puts_neutrals_last(self):
        clustered = cluster_colors(["#FFFFFF", "#FF5733", "#33C3F0"])
        assert [c.role for c in clustered] == ["primary", "secondary", "neutral"]

    def test_equal_percentages(self):
        clustered = cluster_colors(["#FF0000", "#00FF00", "#0000FF", "#808080"])
        assert all(c.percentage == 25.0 for c in clustered)

    def test_two_primaries_at_most(self):
        colors = ["#FF0000", "#00FF00", "#0000FF", "#FFFF00", "#FF00FF", "#00FFFF", "#FF8000"]
        roles = [c.role for c in cluster_colors(colors)]
        assert roles.count("primary") == 2
        assert roles.count("secondary") == 2
        assert roles.count("accent") == 3

    def test_gray_is_neutral(self):
        assert _roles(["#808080"]) == {"#808080": "neutral"}

    def test_invalid_skipped(self):
        assert cluster_colors(["nope"]) == []


# ─────────────────────────────────────────────────────────────────────────────
# Tests: palette character
# ─────────────────────────────────────────────────────────────────────────────

class TestAnalyzePalette:
    def test_empty_defaults(self):
        assert analyze_palette([]) == PaletteCharacteristics()

    def test_bright_vibrant_energetic(self):
        ch = analyze_palette(cluster_colors(["#FF0000", "#FFFF00"]))
        assert ch.temperature == "warm"
        assert ch.saturation == "vibrant"
        assert ch.style == "energetic"
        assert "modern" in ch.tags

    def test_muted_grays(self):
        ch = analyze_palette(cluster_colors(["#333333", "#555555"]))
        assert ch.saturation == "muted"
        assert ch.style == "muted"
        assert ch.brightness == "dark"
        assert "classic" in ch.tags


# ─────────────────────────────────────────────────────────────────────────────
# Tests: harmony
# ─────────────────────────────────────────────────────────────────────────────

class TestAnalyzeHarmony:
    def test_complementary(self):
        result = _harmony(["#FF0000", "#00FFFF"])
        assert result.type == "complementary"
        assert result.contrast_level == "high"

    def test_triad(self):
        assert _harmony(["#FF0000", "#00FF00", "#0000FF"]).type == "triad"

    def test_split_complementary(self):
        result = _harmony(["#FF0000", "#00FF80", "#0080FF"])
        assert result.type == "split-complementary"
        assert result.contrast_level == "medium"

    def test_analogous(self):
        result = _harmony(["#FF0000", "#FF8000", "#FFFF00"])
        assert result.type == "analogous"
        assert result.contrast_level == "low"

    def test_none(self):
        result = _harmony(["#FF0000", "#80FF00"])
        assert result == HarmonyAnalysis(type="none", has_conflict=False, contrast_level="low")

    def test_single_color(self):
        assert _harmony(["#FF0000"]) == HarmonyAnalysis()

    def test_neutrals_ignored(self):
        assert _harmony(["#FF0000", "#000000", "#FFFFFF"]) == HarmonyAnalysis()


# ─────────────────────────────────────────────────────────────────────────────
# Tests: descriptions and entry point
# ─────────────────────────────────────────────────────────────────────────────

class TestDescriptions:
    def test_empty(self):
        result = generate_descriptions([], PaletteCharacteristics(), HarmonyAnalysis())
        assert result == {"short": "", "marketing": "", "technical": "", "recommendations": ""}

    def test_short(self):
        analysis = analyze_brand(["#FF5733", "#33C3F0", "#000000"])
        assert analysis.descriptions["short"].startswith("A ")
        assert "with 3 colors, featuring 1 primary, 1 secondary, and 0 accent colors." in analysis.descriptions["short"]

    def test_low_contrast_recommendation(self):
        analysis = analyze_brand(["#FF0000", "#FF8000", "#FFFF00"])
        assert "Increase contrast between primary colors" in analysis.descriptions["recommendations"]

    def test_technical_lists_harmony(self):
        analysis = analyze_brand(["#FF0000", "#00FFFF"])
        assert "- Harmony: complementary" in analysis.descriptions["technical"]


class TestAnalyzeBrand:
    def test_full(self):
        analysis = analyze_brand(["#FF5733", "not a color", "#000000"])
        assert analysis.colors == ["#FF5733", "#000000"]
        assert len(analysis.contrast) == 2
        data = analysis.to_dict()
        assert data["clustered"][0]["role"] == "primary"
        assert data["harmony"]["type"] == "none"

    def test_clustered_color_to_dict(self):
        clustered = cluster_colors(["#FF0000"])[0]
        assert isinstance(clustered, ClusteredColor)
        assert clustered.to_dict()["hsl"] == {"h": 0, "s": 100, "l": 50}


class TestPresets:
    def test_count(self):
        assert len(get_brand_presets()) == 55

    def test_shape(self):
        for preset in get_brand_presets():
            assert set(preset) == {"name", "colors", "description"}
            assert preset["colors"]

    def test_find(self):
        assert find_brand_preset("Spotify")["colors"] == ["#1DB954", "#191414", "#FFFFFF"]
        assert find_brand_preset("Nonexistent") is None

    def test_catalogue_lazy_load(self, tmp_path):
        path = tmp_path / "presets.json"
        path.write_text(
            json.dumps([{"name": "Ink", "colors": ["#101010"], "description": "Dark"}]),
            encoding="utf-8",
        )
        catalogue = BrandPresetCatalogue(path)
        assert catalogue._loaded is False
        assert len(catalogue) == 1
        assert catalogue._loaded is True
        assert catalogue.find("Ink")["colors"] == ["#101010"]
        assert catalogue.find("ink") is None

    def test_catalogue_reads_file_once(self, tmp_path):
        path = tmp_path / "presets.json"
        path.write_text("[]", encoding="utf-8")
        catalogue = BrandPresetCatalogue(path)
        assert catalogue.presets() == []
        path.unlink()
        assert catalogue.presets() == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

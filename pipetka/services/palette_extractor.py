"""
Palette Extractor — turns sampled image pixels into annotated palettes.

Pipeline (extract_palette):
  1. Cluster pixels twice: 5 dominant colors and cluster_count extended colors
  2. Annotate each centroid with hex/HSL, hue family and tone
  3. Group the combined list by tone and by family
  4. Compute image analytics (lightness, weighted hue, mood flags)
  5. Derive palettes: brand scales, a UI palette and a complementary set
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .classifiers import HUE_FAMILIES, TONES, classify_tone, get_hue_family
from .clustering import ColorCluster, PixelInput, kmeans
from .color_math import calculate_lightness, generate_color_scale
from .color_utils import Hsl, Rgb, hex_to_rgb, hsl_to_rgb, rgb_to_hex, rgb_to_hsl, round_half_up

logger = logging.getLogger(__name__)

DOMINANT_COUNT = 5
DEFAULT_CLUSTER_COUNT = 10
BRAND_SOURCE_COUNT = 5
CREATIVE_SOURCE_COUNT = 3
UI_SURFACE = "#FFFFFF"
UI_NEUTRALS = ["#F5F5F5", "#E5E5E5", "#D4D4D4", "#A3A3A3", "#737373", "#525252"]


@dataclass(frozen=True)
class ColorWithMeta:
    hex: str
    rgb: Rgb
    hsl: Hsl
    percentage: float
    family: str
    tone: str

    def to_dict(self) -> dict:
        return {
            "hex": self.hex,
            "rgb": self.rgb._asdict(),
            "hsl": self.hsl._asdict(),
            "percentage": self.percentage,
            "family": self.family,
            "tone": self.tone,
        }


@dataclass
class ImageAnalytics:
    average_lightness: int
    darkest: ColorWithMeta
    lightest: ColorWithMeta
    dominant_hue: int
    mood: dict[str, str]

    def to_dict(self) -> dict:
        return {
            "average_lightness": self.average_lightness,
            "darkest": self.darkest.to_dict(),
            "lightest": self.lightest.to_dict(),
            "dominant_hue": self.dominant_hue,
            "mood": dict(self.mood),
        }


@dataclass
class UiPalette:
    primary: str
    accent: str
    surface: str = UI_SURFACE
    neutral: list[str] = field(default_factory=lambda: list(UI_NEUTRALS))

    def to_dict(self) -> dict:
        return {
            "primary": self.primary,
            "surface": self.surface,
            "accent": self.accent,
            "neutral": list(self.neutral),
        }


@dataclass
class GeneratedPalettes:
    brand: list[str]
    ui: UiPalette
    creative: list[str]

    def to_dict(self) -> dict:
        return {"brand": list(self.brand), "ui": self.ui.to_dict(), "creative": list(self.creative)}


@dataclass
class ExtractionResult:
    dominant: list[ColorWithMeta] = field(default_factory=list)
    extended: list[ColorWithMeta] = field(default_factory=list)
    groups: dict[str, list[ColorWithMeta]] = field(default_factory=dict)
    analytics: Optional[ImageAnalytics] = None
    palettes: Optional[GeneratedPalettes] = None

    def to_dict(self) -> dict:
        return {
            "dominant": [c.to_dict() for c in self.dominant],
            "extended": [c.to_dict() for c in self.extended],
            "groups": {name: [c.hex for c in colors] for name, colors in self.groups.items()},
            "analytics": self.analytics.to_dict() if self.analytics else None,
            "palettes": self.palettes.to_dict() if self.palettes else None,
        }


# ─────────────────────────────────────────────────────────────────────────────
# Annotation
# ─────────────────────────────────────────────────────────────────────────────

def annotate(cluster: ColorCluster) -> ColorWithMeta:
    """Attach hex, HSL, hue family and tone to a cluster centroid."""
    rgb = cluster.rgb
    hsl = rgb_to_hsl(*rgb)
    return ColorWithMeta(
        hex=rgb_to_hex(*rgb),
        rgb=rgb,
        hsl=hsl,
        percentage=round_half_up(cluster.percentage * 10) / 10,
        family=get_hue_family(*hsl),
        tone=classify_tone(calculate_lightness(*rgb)),
    )


def group_colors(colors: list[ColorWithMeta]) -> dict[str, list[ColorWithMeta]]:
    """Bucket colors by tone (light/mid/dark) and by hue family."""
    groups: dict[str, list[ColorWithMeta]] = {name: [] for name in (*TONES, *HUE_FAMILIES)}
    for color in colors:
        groups[color.tone].append(color)
        if color.family in groups:
            groups[color.family].append(color)
    return groups


# ─────────────────────────────────────────────────────────────────────────────
# Analytics and palettes
# ─────────────────────────────────────────────────────────────────────────────

def compute_analytics(colors: list[ColorWithMeta]) -> Optional[ImageAnalytics]:
    if not colors:
        return None

    n = len(colors)
    avg_lightness = sum(c.hsl.l for c in colors) / n
    avg_saturation = sum(c.hsl.s for c in colors) / n
    darkest = min(colors, key=lambda c: c.hsl.l)
    lightest = max(colors, key=lambda c: c.hsl.l)

    total_pct = sum(c.percentage for c in colors)
    dominant_hue = sum(c.hsl.h * c.percentage for c in colors) / total_pct if total_pct > 0 else 0.0

    mood = {
        "temperature": "warm" if 0 <= dominant_hue <= 180 else "cold",
        "brightness": "bright" if avg_lightness >= 50 else "dark",
        "vibrancy": "vibrant" if avg_saturation >= 50 else "muted",
        "contrast": "high-contrast" if lightest.hsl.l - darkest.hsl.l >= 40 else "low-contrast",
    }

    return ImageAnalytics(
        average_lightness=round_half_up(avg_lightness),
        darkest=darkest,
        lightest=lightest,
        dominant_hue=round_half_up(dominant_hue),
        mood=mood,
    )


def complementary_hex(hsl: Hsl) -> str:
    return rgb_to_hex(*hsl_to_rgb((hsl.h + 180) % 360, hsl.s, hsl.l))


def generate_palettes(dominant: list[ColorWithMeta]) -> Optional[GeneratedPalettes]:
    if not dominant:
        return None

    brand: list[str] = []
    for color in dominant[:BRAND_SOURCE_COUNT]:
        brand.extend(generate_color_scale(color.hex))

    primary = dominant[0].hex
    accent = dominant[1].hex if len(dominant) > 1 else primary

    creative: list[str] = []
    for color in dominant[:CREATIVE_SOURCE_COUNT]:
        creative.append(color.hex)
        creative.append(complementary_hex(color.hsl))

    return GeneratedPalettes(brand=brand, ui=UiPalette(primary=primary, accent=accent), creative=creative)


# ─────────────────────────────────────────────────────────────────────────────
# Entry points
# ─────────────────────────────────────────────────────────────────────────────

def extract_palette(
    pixels: PixelInput,
    cluster_count: int = DEFAULT_CLUSTER_COUNT,
    rng: Optional[np.random.Generator] = None,
) -> ExtractionResult:
    """Full palette analysis of sampled pixels. Empty input gives an empty result."""
    rng = rng if rng is not None else np.random.default_rng()

    dominant = [annotate(c) for c in kmeans(pixels, DOMINANT_COUNT, weighting="sampled", rng=rng)]
    if not dominant:
        logger.warning("extract_palette called with no pixels")
        return ExtractionResult(groups=group_colors([]))

    extended = [annotate(c) for c in kmeans(pixels, cluster_count, weighting="sampled", rng=rng)]

    logger.info(f"Extracted {len(dominant)} dominant and {len(extended)} extended colors")
    return build_extraction(dominant, extended)


def build_extraction(dominant: list[ColorWithMeta], extended: list[ColorWithMeta]) -> ExtractionResult:
    """Groups, analytics and palettes for already-annotated colors."""
    combined = dominant + extended
    return ExtractionResult(
        dominant=dominant,
        extended=extended,
        groups=group_colors(combined),
        analytics=compute_analytics(combined),
        palettes=generate_palettes(dominant),
    )


def annotate_hex(hex_color: str, percentage: float = 0.0) -> Optional[ColorWithMeta]:
    """ColorWithMeta for a stored hex color, e.g. when re-exporting a palette."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    return annotate(ColorCluster(rgb=rgb, percentage=percentage))


def dominant_colors(
    pixels: PixelInput,
    k: int = DOMINANT_COUNT,
    rng: Optional[np.random.Generator] = None,
) -> list[ColorCluster]:
    """Quick dominant colors: fixed 10 iterations, equal weights, sorted."""
    return kmeans(pixels, k, tolerance=None, weighting="uniform", sort_by_weight=True, rng=rng)


def extract_hex_colors(
    pixels: PixelInput,
    color_count: int = DOMINANT_COUNT,
    rng: Optional[np.random.Generator] = None,
) -> list[str]:
    """Centroid hex strings in seeding order, for brand-color seeding."""
    return [c.hex for c in kmeans(pixels, color_count, rng=rng)]

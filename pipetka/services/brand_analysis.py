"""
Brand Analysis — role assignment, palette character and harmony detection
for a small set of brand colors.

Roles:
  neutral    s < 20, or l < 10, or l > 90
  primary    the best min(2, ceil(0.3 * n_colored)) by s * (1 - |l - 50| / 50)
  secondary  the next min(2, ceil(0.3 * n_colored))
  accent     everything colored that is left
"""
from __future__ import annotations

import json
import logging
import math
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from .color_distance import delta_e_2000
from .color_utils import Hsl, Rgb, hex_to_rgb, parse_color_to_rgb, rgb_to_hex, rgb_to_hsl, rgb_to_lab
from .contrast import ContrastAnalysis, analyze_contrast_multiple

logger = logging.getLogger(__name__)

PRESETS_PATH = Path(__file__).parent.parent / "data" / "brand_palettes.json"

ROLES = ("primary", "secondary", "accent", "neutral")
ROLE_SHARE = 0.3
MAX_ROLE_COUNT = 2
HUE_TOLERANCE = 30


@dataclass(frozen=True)
class ClusteredColor:
    hex: str
    role: str
    percentage: float
    rgb: Rgb
    hsl: Hsl

    def to_dict(self) -> dict:
        return {
            "hex": self.hex,
            "role": self.role,
            "percentage": self.percentage,
            "rgb": self.rgb._asdict(),
            "hsl": self.hsl._asdict(),
        }


@dataclass
class PaletteCharacteristics:
    temperature: str = "neutral"
    brightness: str = "medium"
    saturation: str = "moderate"
    style: str = "corporate"
    tags: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class HarmonyAnalysis:
    type: str = "none"
    has_conflict: bool = False
    contrast_level: str = "low"

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class BrandAnalysis:
    colors: list[str]
    clustered: list[ClusteredColor]
    characteristics: PaletteCharacteristics
    harmony: HarmonyAnalysis
    contrast: list[ContrastAnalysis]
    descriptions: dict[str, str]

    def to_dict(self) -> dict:
        return {
            "colors": list(self.colors),
            "clustered": [c.to_dict() for c in self.clustered],
            "characteristics": self.characteristics.to_dict(),
            "harmony": self.harmony.to_dict(),
            "contrast": [c.to_dict() for c in self.contrast],
            "descriptions": dict(self.descriptions),
        }


# ─────────────────────────────────────────────────────────────────────────────
# Parsing and roles
# ─────────────────────────────────────────────────────────────────────────────

def parse_brand_colors(colors: Iterable[str]) -> list[str]:
    """Normalize user color strings to '#RRGGBB', dropping those that do not parse."""
    parsed: list[str] = []
    for color in colors:
        rgb = parse_color_to_rgb(color.strip()) if isinstance(color, str) else None
        if rgb is None:
            logger.debug(f"Dropping unparseable brand color {color!r}")
            continue
        parsed.append(rgb_to_hex(*rgb))
    return parsed


def _role_score(hsl: Hsl) -> float:
    return hsl.s * (1 - abs(hsl.l - 50) / 50)


def _is_neutral(hsl: Hsl) -> bool:
    return hsl.s < 20 or hsl.l < 10 or hsl.l > 90


def cluster_colors(hex_colors: list[str]) -> list[ClusteredColor]:
    """Assign each hex color a brand role. Output order: primary, secondary, accent, neutral."""
    entries: list[tuple[str, Rgb, Hsl]] = []
    for hex_color in hex_colors:
        rgb = hex_to_rgb(hex_color)
        if rgb is None:
            continue
        entries.append((hex_color, rgb, rgb_to_hsl(*rgb)))
    if not entries:
        return []

    percentage = 100 / len(entries)
    neutrals = [e for e in entries if _is_neutral(e[2])]
    colored = sorted(
        (e for e in entries if not _is_neutral(e[2])),
        key=lambda e: _role_score(e[2]),
        reverse=True,
    )

    role_count = min(MAX_ROLE_COUNT, math.ceil(len(colored) * ROLE_SHARE))
    roles = (
        ["primary"] * role_count
        + ["secondary"] * role_count
        + ["accent"] * max(0, len(colored) - 2 * role_count)
    )

    result = [
        ClusteredColor(hex=hex_color, role=role, percentage=percentage, rgb=rgb, hsl=hsl)
        for (hex_color, rgb, hsl), role in zip(colored, roles)
    ]
    result.extend(
        ClusteredColor(hex=hex_color, role="neutral", percentage=percentage, rgb=rgb, hsl=hsl)
        for hex_color, rgb, hsl in neutrals
    )
    return result


# ─────────────────────────────────────────────────────────────────────────────
# Palette character
# ─────────────────────────────────────────────────────────────────────────────

def analyze_palette(colors: list[ClusteredColor]) -> PaletteCharacteristics:
    if not colors:
        return PaletteCharacteristics()

    n = len(colors)
    avg_hue = sum(c.hsl.h for c in colors) / n
    avg_sat = sum(c.hsl.s for c in colors) / n
    avg_light = sum(c.hsl.l for c in colors) / n

    temperature = "warm" if avg_hue <= 180 else "cold"

    brightness = "medium"
    if avg_light >= 60:
        brightness = "bright"
    elif avg_light <= 40:
        brightness = "dark"

    saturation = "moderate"
    if avg_sat >= 70:
        saturation = "vibrant"
    elif avg_sat <= 30:
        saturation = "muted"

    style = "corporate"
    if avg_sat >= 70 and avg_light >= 50:
        style = "energetic"
    elif avg_sat <= 30:
        style = "muted"
    elif n <= 2 and avg_sat <= 50:
        style = "minimalistic"
    elif avg_sat >= 60 and n >= 4:
        style = "playful"

    tags: list[str] = []
    if avg_sat >= 60:
        tags.append("modern")
    if avg_sat <= 40 and avg_light <= 50:
        tags.append("classic")
    if temperature == "warm" and avg_sat <= 50:
        tags.append("natural")
    if avg_sat >= 70 and brightness == "bright":
        tags.append("digital")

    return PaletteCharacteristics(
        temperature=temperature,
        brightness=brightness,
        saturation=saturation,
        style=style,
        tags=tags,
    )


def _has_complementary_pair(hues: list[int]) -> bool:
    for i, a in enumerate(hues):
        for b in hues[i + 1:]:
            if abs(abs(a - b) - 180) < HUE_TOLERANCE:
                return True
    return False


def _is_triad(hues: list[int]) -> bool:
    if len(hues) < 3:
        return False
    return (
        abs(abs(hues[1] - hues[0]) - 120) < HUE_TOLERANCE
        and abs(abs(hues[2] - hues[1]) - 120) < HUE_TOLERANCE
    )


def _is_split_complementary(hues: list[int]) -> bool:
    if len(hues) < 3:
        return False
    for base in hues:
        first = (base + 150) % 360
        second = (base + 210) % 360
        if any(abs(h - first) < HUE_TOLERANCE for h in hues) and any(
            abs(h - second) < HUE_TOLERANCE for h in hues
        ):
            return True
    return False


def _is_analogous(hues: list[int]) -> bool:
    return all(b - a <= 60 for a, b in zip(hues, hues[1:]))


def _has_conflict(colored: list[ClusteredColor]) -> bool:
    """Near-identical hues whose saturation or lightness differ a lot."""
    for i, a in enumerate(colored):
        for b in colored[i + 1:]:
            if abs(a.hsl.h - b.hsl.h) < 15 and (
                abs(a.hsl.s - b.hsl.s) > 30 or abs(a.hsl.l - b.hsl.l) > 30
            ):
                return True
    return False


def analyze_harmony(colors: list[ClusteredColor]) -> HarmonyAnalysis:
    """
    Detect the harmony scheme of the non-neutral colors.

    Checked in order: complementary, triad, split-complementary, analogous.
    With no scheme found, reports hue conflicts and the ΔE contrast level
    between the first two primaries (>= 20 high, >= 10 medium).
    """
    colored = [c for c in colors if c.role != "neutral"]
    if len(colors) < 2 or len(colored) < 2:
        return HarmonyAnalysis()

    hues = sorted(c.hsl.h for c in colored)

    if _has_complementary_pair(hues):
        return HarmonyAnalysis(type="complementary", contrast_level="high")
    if _is_triad(hues):
        return HarmonyAnalysis(type="triad", contrast_level="high")
    if _is_split_complementary(hues):
        return HarmonyAnalysis(type="split-complementary", contrast_level="medium")
    if _is_analogous(hues):
        return HarmonyAnalysis(type="analogous", contrast_level="low")

    has_conflict = _has_conflict(colored)

    primaries = [c for c in colored if c.role == "primary"]
    contrast_level = "low"
    if len(primaries) >= 2:
        delta = delta_e_2000(rgb_to_lab(*primaries[0].rgb), rgb_to_lab(*primaries[1].rgb))
        if delta >= 20:
            contrast_level = "high"
        elif delta >= 10:
            contrast_level = "medium"

    return HarmonyAnalysis(type="none", has_conflict=has_conflict, contrast_level=contrast_level)


# ─────────────────────────────────────────────────────────────────────────────
# Descriptions
# ─────────────────────────────────────────────────────────────────────────────

_STYLE_EFFECT = {
    "energetic": "energizes and motivates",
    "corporate": "conveys professionalism and trust",
    "minimalistic": "speaks with clarity and simplicity",
}


def generate_descriptions(
    colors: list[ClusteredColor],
    characteristics: PaletteCharacteristics,
    harmony: HarmonyAnalysis,
) -> dict[str, str]:
    if not colors:
        return {"short": "", "marketing": "", "technical": "", "recommendations": ""}

    counts = {role: sum(1 for c in colors if c.role == role) for role in ROLES}
    ch = characteristics

    short = (
        f"A {ch.style} {ch.temperature} palette with {len(colors)} colors, featuring "
        f"{counts['primary']} primary, {counts['secondary']} secondary, "
        f"and {counts['accent']} accent colors."
    )

    harmony_name = harmony.type if harmony.type != "none" else "carefully balanced"
    marketing = (
        f"This brand palette embodies a {ch.style} identity with {ch.temperature} undertones. "
        f"The {ch.saturation} color scheme creates a {ch.brightness} visual presence that "
        f"{_STYLE_EFFECT.get(ch.style, 'engages and delights')} audiences. "
        f"The {harmony_name} color harmony ensures visual coherence while maintaining "
        f"{harmony.contrast_level} contrast for optimal readability and impact."
    )

    technical_lines = [
        "Technical Palette Analysis:",
        f"- Color Count: {len(colors)} ({counts['primary']} primary, {counts['secondary']} secondary, "
        f"{counts['accent']} accent, {counts['neutral']} neutral)",
        f"- Temperature: {ch.temperature}",
        f"- Brightness: {ch.brightness}",
        f"- Saturation: {ch.saturation}",
        f"- Style: {ch.style}",
        f"- Harmony: {harmony.type if harmony.type != 'none' else 'custom arrangement'}",
        f"- Contrast Level: {harmony.contrast_level}",
    ]
    if harmony.has_conflict:
        technical_lines.append("- Warning: Potential color conflicts detected")
    technical_lines.append(f"- Tags: {', '.join(ch.tags) or 'none'}")

    recommendations: list[str] = []
    if harmony.has_conflict:
        recommendations.append("Resolve color conflicts by adjusting hue, saturation, or lightness values")
    if harmony.contrast_level == "low":
        recommendations.append("Increase contrast between primary colors for better visual hierarchy")
    if ch.saturation == "muted" and ch.style == "energetic":
        recommendations.append("Consider increasing saturation to better match the energetic style")
    if len(colors) > 5:
        recommendations.append("Consider reducing color count for a more focused brand identity")
    if not recommendations:
        recommendations.append("Palette is well-balanced and ready for brand implementation")

    return {
        "short": short,
        "marketing": marketing,
        "technical": "\n".join(technical_lines),
        "recommendations": "\n".join(recommendations),
    }


# ─────────────────────────────────────────────────────────────────────────────
# Entry point and presets
# ─────────────────────────────────────────────────────────────────────────────

def analyze_brand(colors: Iterable[str]) -> BrandAnalysis:
    """Parse, cluster and analyze a brand palette in one go."""
    parsed = parse_brand_colors(colors)
    clustered = cluster_colors(parsed)
    characteristics = analyze_palette(clustered)
    harmony = analyze_harmony(clustered)
    return BrandAnalysis(
        colors=parsed,
        clustered=clustered,
        characteristics=characteristics,
        harmony=harmony,
        contrast=analyze_contrast_multiple(parsed),
        descriptions=generate_descriptions(clustered, characteristics, harmony),
    )


class BrandPresetCatalogue:
    def __init__(self, path: Path = PRESETS_PATH) -> None:
        self._path = path
        self._presets: list[dict] = []
        self._by_name: dict[str, dict] = {}
        self._loaded = False

    def _ensure_loaded(self) -> None:
        if self._loaded:
            return
        self._presets = json.loads(self._path.read_text(encoding="utf-8"))
        self._by_name = {p["name"]: p for p in self._presets}
        self._loaded = True
        logger.info(f"Loaded {len(self._presets)} brand presets from {self._path.name}")

    def presets(self) -> list[dict]:
        self._ensure_loaded()
        return self._presets

    def find(self, name: str) -> Optional[dict]:
        self._ensure_loaded()
        return self._by_name.get(name)

    def __len__(self) -> int:
        return len(self.presets())


_brand_presets = BrandPresetCatalogue()


def get_brand_presets() -> list[dict]:
    """Well-known brand palettes: [{name, colors, description}]."""
    return _brand_presets.presets()


def find_brand_preset(name: str) -> Optional[dict]:
    return _brand_presets.find(name)

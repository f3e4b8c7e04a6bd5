"""
Contrast — WCAG 2.1 relative luminance, contrast ratio and compliance levels.

Compliance thresholds:
  AA normal text   4.5:1
  AA large text    3.0:1   (18pt+, or 14pt+ bold)
  AAA normal text  7.0:1
  AAA large text   4.5:1

Nothing in here raises on bad colors: unparseable input gives a zero ratio
and all-false flags so the UI can keep rendering.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from .color_utils import Rgb, hex_to_rgb, parse_color_to_rgb, rgb_to_hex, round_half_up

logger = logging.getLogger(__name__)

AA_NORMAL = 4.5
AA_LARGE = 3.0
AAA_NORMAL = 7.0
AAA_LARGE = 4.5

WHITE_LUMINANCE = 1.0
BLACK_LUMINANCE = 0.0


@dataclass(frozen=True)
class WcagLevels:
    aa_normal: bool = False
    aa_large: bool = False
    aaa_normal: bool = False
    aaa_large: bool = False

    def to_dict(self) -> dict:
        return {
            "aa_normal": self.aa_normal,
            "aa_large": self.aa_large,
            "aaa_normal": self.aaa_normal,
            "aaa_large": self.aaa_large,
        }


@dataclass(frozen=True)
class ContrastResult:
    ratio: float
    ratio_formatted: str
    wcag: WcagLevels
    foreground_rgb: Optional[Rgb] = None
    background_rgb: Optional[Rgb] = None
    foreground_hex: Optional[str] = None
    background_hex: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.foreground_rgb is not None and self.background_rgb is not None

    def to_dict(self) -> dict:
        return {
            "ratio": self.ratio,
            "ratio_formatted": self.ratio_formatted,
            "wcag": self.wcag.to_dict(),
            "foreground_rgb": _rgb_dict(self.foreground_rgb),
            "background_rgb": _rgb_dict(self.background_rgb),
            "foreground_hex": self.foreground_hex,
            "background_hex": self.background_hex,
        }


@dataclass(frozen=True)
class ContrastAnalysis:
    """Contrast of a single color against white and black text."""
    hex: str
    contrast_white: float
    contrast_black: float
    wcag_aa: bool
    wcag_aaa: bool
    wcag_aa_large: bool
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "hex": self.hex,
            "contrast_white": self.contrast_white,
            "contrast_black": self.contrast_black,
            "wcag_aa": self.wcag_aa,
            "wcag_aaa": self.wcag_aaa,
            "wcag_aa_large": self.wcag_aa_large,
            "recommendations": list(self.recommendations),
        }


def _rgb_dict(rgb: Optional[Rgb]) -> Optional[dict]:
    return rgb._asdict() if rgb is not None else None


# ─────────────────────────────────────────────────────────────────────────────
# Luminance and ratio
# ─────────────────────────────────────────────────────────────────────────────

def calculate_relative_luminance(r: float, g: float, b: float) -> float:
    """WCAG relative luminance in [0, 1]."""
    def normalize(value: float) -> float:
        v = value / 255
        return v / 12.92 if v <= 0.03928 else ((v + 0.055) / 1.055) ** 2.4

    return 0.2126 * normalize(r) + 0.7152 * normalize(g) + 0.0722 * normalize(b)


def _ratio_from_luminance(l1: float, l2: float) -> float:
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def contrast_ratio_rgb(rgb1: Rgb, rgb2: Rgb) -> float:
    return _ratio_from_luminance(
        calculate_relative_luminance(*rgb1),
        calculate_relative_luminance(*rgb2),
    )


def calculate_contrast_ratio(color1: Optional[str], color2: Optional[str]) -> float:
    """Contrast ratio (1-21) of two color strings, or 0.0 if either is unparseable."""
    rgb1 = parse_color_to_rgb(color1)
    rgb2 = parse_color_to_rgb(color2)
    if rgb1 is None or rgb2 is None:
        return 0.0
    return contrast_ratio_rgb(rgb1, rgb2)


# ─────────────────────────────────────────────────────────────────────────────
# Compliance
# ─────────────────────────────────────────────────────────────────────────────

def check_wcag_levels(ratio: float) -> WcagLevels:
    return WcagLevels(
        aa_normal=ratio >= AA_NORMAL,
        aa_large=ratio >= AA_LARGE,
        aaa_normal=ratio >= AAA_NORMAL,
        aaa_large=ratio >= AAA_LARGE,
    )


def check_contrast(foreground: Optional[str], background: Optional[str]) -> ContrastResult:
    """
    Full contrast check for a text/background pair in any supported format.

    Invalid input yields ratio 0, '0:1' and all-false flags; whichever side
    did parse is still reported.
    """
    fg = parse_color_to_rgb(foreground)
    bg = parse_color_to_rgb(background)
    fg_hex = rgb_to_hex(*fg) if fg is not None else None
    bg_hex = rgb_to_hex(*bg) if bg is not None else None

    if fg is None or bg is None:
        logger.debug(f"Unparseable contrast input: foreground={foreground!r} background={background!r}")
        return ContrastResult(
            ratio=0.0,
            ratio_formatted="0:1",
            wcag=WcagLevels(),
            foreground_rgb=fg,
            background_rgb=bg,
            foreground_hex=fg_hex,
            background_hex=bg_hex,
        )

    ratio = contrast_ratio_rgb(fg, bg)
    return ContrastResult(
        ratio=ratio,
        ratio_formatted=f"{ratio:.2f}:1",
        wcag=check_wcag_levels(ratio),
        foreground_rgb=fg,
        background_rgb=bg,
        foreground_hex=fg_hex,
        background_hex=bg_hex,
    )


def generate_recommendation(ratio: float, is_large_text: bool = False) -> str:
    """Human-readable advice for a contrast ratio."""
    threshold = AA_LARGE if is_large_text else AA_NORMAL

    if ratio >= AAA_NORMAL:
        return "Excellent contrast. Meets WCAG AAA standards."

    if ratio >= threshold:
        return "Good contrast. Meets WCAG AA standards."

    if ratio > 0:
        increase = (threshold - ratio) / ratio * 100
        level = "AA Large" if is_large_text else "AA"
        hint = "increasing text size or " if is_large_text else ""
        return (
            f"Increase contrast by approximately {round_half_up(increase)}% to meet WCAG "
            f"{level} standards. Consider {hint}adjusting text color brightness."
        )

    return "Contrast is below WCAG standards. Please adjust colors."


# ─────────────────────────────────────────────────────────────────────────────
# Per-color analysis (brand palettes)
# ─────────────────────────────────────────────────────────────────────────────

def analyze_contrast(hex_color: str) -> ContrastAnalysis:
    """Contrast of one color against pure white and pure black."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return ContrastAnalysis(
            hex=hex_color,
            contrast_white=0.0,
            contrast_black=0.0,
            wcag_aa=False,
            wcag_aaa=False,
            wcag_aa_large=False,
            recommendations=["Invalid color"],
        )

    luma = calculate_relative_luminance(*rgb)
    contrast_white = _ratio_from_luminance(luma, WHITE_LUMINANCE)
    contrast_black = _ratio_from_luminance(luma, BLACK_LUMINANCE)

    wcag_aa = contrast_white >= AA_NORMAL or contrast_black >= AA_NORMAL
    wcag_aaa = contrast_white >= AAA_NORMAL or contrast_black >= AAA_NORMAL
    wcag_aa_large = contrast_white >= AA_LARGE or contrast_black >= AA_LARGE

    recommendations: list[str] = []
    if not wcag_aa:
        if luma < 0.5:
            recommendations.append("Lighten the color for better contrast")
        else:
            recommendations.append("Darken the color for better contrast")
    if contrast_white < AA_LARGE and contrast_black < AA_LARGE:
        recommendations.append("Increase saturation for better visibility")
    if wcag_aa and not wcag_aaa:
        recommendations.append("Consider increasing contrast for AAA compliance")

    return ContrastAnalysis(
        hex=hex_color,
        contrast_white=round_half_up(contrast_white * 10) / 10,
        contrast_black=round_half_up(contrast_black * 10) / 10,
        wcag_aa=wcag_aa,
        wcag_aaa=wcag_aaa,
        wcag_aa_large=wcag_aa_large,
        recommendations=recommendations,
    )


def analyze_contrast_multiple(colors: list[str]) -> list[ContrastAnalysis]:
    return [analyze_contrast(hex_color) for hex_color in colors]


def best_text_color(hex_color: str) -> str:
    """'#000000' or '#FFFFFF', whichever reads better on the given background."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return "#000000"
    luma = calculate_relative_luminance(*rgb)
    on_white = _ratio_from_luminance(luma, WHITE_LUMINANCE)
    on_black = _ratio_from_luminance(luma, BLACK_LUMINANCE)
    return "#000000" if on_black >= on_white else "#FFFFFF"

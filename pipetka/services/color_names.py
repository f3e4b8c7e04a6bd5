"""
Color Names — maps arbitrary colors to the nearest named CSS colors.

Matching is a linear scan of the dictionary ranked by the simplified
CIEDE2000 ΔE in CIELAB space. The CSS dictionary ships as JSON next to the
package and is loaded on first use.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from .classifiers import algorithmic_color_naming, generate_marketing_name, get_color_tags
from .color_distance import delta_e_2000
from .color_utils import (
    Hsl,
    Rgb,
    hex_to_rgb,
    lab_to_lch,
    parse_color_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_lab,
    round_half_up,
)
from .contrast import contrast_ratio_rgb

logger = logging.getLogger(__name__)

DATA_PATH = Path(__file__).parent.parent / "data" / "css_color_names.json"
DEFAULT_MAX_RESULTS = 6
WHITE = Rgb(255, 255, 255)
BLACK = Rgb(0, 0, 0)


@dataclass(frozen=True)
class ColorNameMatch:
    name: str
    hex: str
    distance: float

    def to_dict(self) -> dict:
        return {"name": self.name, "hex": self.hex, "distance": self.distance}


@dataclass
class ColorDescription:
    """Everything the name-finder tool shows for one color."""
    hex: str
    rgb: Rgb
    hsl: Hsl
    lab: dict
    lch: dict
    contrast_white: float
    contrast_black: float
    standard: list[ColorNameMatch] = field(default_factory=list)
    algorithmic: str = ""
    marketing: str = ""
    tags: list[str] = field(default_factory=list)
    descriptions: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "hex": self.hex,
            "rgb": self.rgb._asdict(),
            "hsl": self.hsl._asdict(),
            "lab": dict(self.lab),
            "lch": dict(self.lch),
            "contrast_white": self.contrast_white,
            "contrast_black": self.contrast_black,
            "standard": [m.to_dict() for m in self.standard],
            "algorithmic": self.algorithmic,
            "marketing": self.marketing,
            "tags": list(self.tags),
            "descriptions": dict(self.descriptions),
        }


class ColorNameDictionary:
    def __init__(self, path: Path = DATA_PATH) -> None:
        self._path = path
        self._names: dict[str, str] = {}
        self._loaded = False

    def _ensure_loaded(self) -> None:
        if self._loaded:
            return
        self._names = json.loads(self._path.read_text(encoding="utf-8"))
        self._loaded = True
        logger.info(f"Loaded {len(self._names)} color names from {self._path.name}")

    def names(self) -> dict[str, str]:
        self._ensure_loaded()
        return self._names

    def __len__(self) -> int:
        return len(self.names())


_css_names = ColorNameDictionary()


def get_css_color_names() -> dict[str, str]:
    """The CSS name → '#RRGGBB' dictionary (loaded lazily, do not mutate)."""
    return _css_names.names()


def _one_decimal(value: float) -> float:
    return round_half_up(value * 10) / 10


def find_closest_color_names(
    hex_color: str,
    dictionary: Optional[Mapping[str, str]] = None,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> list[ColorNameMatch]:
    """
    Nearest dictionary entries to hex_color, ascending by ΔE.

    Entries whose hex does not parse are skipped; an invalid query gives [].
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return []
    if dictionary is None:
        dictionary = get_css_color_names()

    query = rgb_to_lab(*rgb)
    matches: list[ColorNameMatch] = []
    for name, entry_hex in dictionary.items():
        entry_rgb = hex_to_rgb(entry_hex)
        if entry_rgb is None:
            continue
        distance = delta_e_2000(query, rgb_to_lab(*entry_rgb))
        matches.append(ColorNameMatch(name=name, hex=entry_hex, distance=distance))

    matches.sort(key=lambda m: m.distance)
    return matches[:max_results]


def find_similar_colors(hex_color: str, max_results: int = DEFAULT_MAX_RESULTS) -> list[ColorNameMatch]:
    """Closest CSS names with ΔE rounded to one decimal, for display."""
    return [
        ColorNameMatch(name=m.name, hex=m.hex, distance=_one_decimal(m.distance))
        for m in find_closest_color_names(hex_color, max_results=max_results)
    ]


def _build_descriptions(
    hex_color: str,
    hsl: Hsl,
    standard: list[ColorNameMatch],
    algorithmic: str,
    marketing: str,
    tags: list[str],
) -> dict:
    closest = standard[0] if standard else None
    closest_name = closest.name if closest else None

    short = f"{marketing} ({hex_color})"
    medium = (
        f"A {algorithmic.lower()} color with hex code {hex_color}. "
        f"This {' and '.join(tags)} shade is similar to {closest_name or 'a standard color'}."
    )

    saturation_word = "vibrant" if hsl.s >= 50 else "subtle"
    lightness_word = "luminous" if hsl.l >= 50 else "deep"
    if hsl.h < 60 or hsl.h > 300:
        evokes = "warmth and energy"
    elif hsl.h < 180:
        evokes = "freshness and growth"
    else:
        evokes = "calm and serenity"
    distance = f"{closest.distance:.1f}" if closest and closest.distance else "N/A"

    long = (
        f"This {marketing.lower()} embodies a {algorithmic.lower()} character. "
        f"With its {saturation_word} saturation and {lightness_word} lightness, it evokes {evokes}. "
        f"The color {hex_color} finds its closest match in the {closest_name or 'color spectrum'}, "
        f"with a perceptual distance of {distance} ΔE units."
    )
    return {"short": short, "medium": medium, "long": long}


def describe_color(color: str) -> Optional[ColorDescription]:
    """
    Names, tags and technical data for a color string in any supported format.

    Returns None when the color does not parse.
    """
    rgb = parse_color_to_rgb(color)
    if rgb is None:
        return None

    hex_color = rgb_to_hex(*rgb)
    hsl = rgb_to_hsl(*rgb)
    lab = rgb_to_lab(*rgb)
    lch = lab_to_lch(*lab)

    contrast_white = contrast_ratio_rgb(rgb, WHITE)
    contrast_black = contrast_ratio_rgb(rgb, BLACK)

    standard = find_closest_color_names(hex_color)
    algorithmic = algorithmic_color_naming(*hsl)
    marketing = generate_marketing_name(*hsl)
    tags = get_color_tags(*hsl)

    return ColorDescription(
        hex=hex_color,
        rgb=rgb,
        hsl=hsl,
        lab={"l": _one_decimal(lab.l), "a": _one_decimal(lab.a), "b": _one_decimal(lab.b)},
        lch={"l": _one_decimal(lch.l), "c": _one_decimal(lch.c), "h": round_half_up(lch.h)},
        contrast_white=_one_decimal(contrast_white),
        contrast_black=_one_decimal(contrast_black),
        standard=standard,
        algorithmic=algorithmic,
        marketing=marketing,
        tags=tags,
        descriptions=_build_descriptions(hex_color, hsl, standard, algorithmic, marketing, tags),
    )

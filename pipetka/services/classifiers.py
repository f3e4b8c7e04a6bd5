"""
Classifiers — semantic labels for HSL colors: hue family, tone, names, tags.

The hue-family bands overlap. They are evaluated as an ordered rule list and
the first matching rule wins, so a low-saturation warm hue is 'neutral'
before it is ever 'warm'.
"""
from __future__ import annotations

import math
from typing import Callable

HueRule = tuple[str, Callable[[float, float, float], bool]]


def is_warm_hue(h: float) -> bool:
    return 0 <= h <= 60 or 330 <= h <= 360


def is_cold_hue(h: float) -> bool:
    return 180 <= h <= 270


HUE_FAMILY_RULES: list[HueRule] = [
    ("neutral", lambda h, s, l: s < 15),
    ("earth", lambda h, s, l: 20 <= h <= 40 and 20 <= s <= 60 and 30 <= l <= 70),
    ("pastel", lambda h, s, l: l >= 70 and 30 <= s <= 60),
    # high saturation
    ("warm", lambda h, s, l: s >= 70 and is_warm_hue(h)),
    ("cold", lambda h, s, l: s >= 70 and is_cold_hue(h)),
    ("vibrant", lambda h, s, l: s >= 70),
    # medium saturation
    ("warm", lambda h, s, l: 30 <= s < 70 and is_warm_hue(h)),
    ("cold", lambda h, s, l: 30 <= s < 70 and is_cold_hue(h)),
    # anything left, by hue alone
    ("warm", lambda h, s, l: is_warm_hue(h)),
    ("cold", lambda h, s, l: is_cold_hue(h)),
]

HUE_FAMILIES = ("warm", "cold", "neutral", "vibrant", "muted", "pastel", "earth")
TONES = ("light", "mid", "dark")

MARKETING_NAMES = [
    "Sunset Ember",
    "Ocean Whisper",
    "Steel Dawn",
    "Forest Mist",
    "Golden Hour",
    "Midnight Blue",
    "Rose Petal",
    "Emerald Dream",
    "Silver Moon",
    "Crimson Tide",
    "Lavender Sky",
    "Copper Sunset",
    "Ice Blue",
    "Charcoal Night",
    "Peach Blossom",
    "Turquoise Wave",
    "Plum Velvet",
    "Sage Green",
    "Coral Reef",
    "Amber Glow",
]
FALLBACK_MARKETING_NAME = "Mystic Shade"


def get_hue_family(h: float, s: float, l: float) -> str:
    for family, matches in HUE_FAMILY_RULES:
        if matches(h, s, l):
            return family
    return "neutral"


def classify_tone(lightness: float) -> str:
    if lightness >= 70:
        return "light"
    if lightness >= 30:
        return "mid"
    return "dark"


def saturation_descriptor(s: float) -> str:
    if s < 20:
        return "Muted"
    if s < 50:
        return "Soft"
    if s < 80:
        return "Vivid"
    return "Intense"


def temperature_descriptor(h: float) -> str:
    if is_warm_hue(h):
        return "Warm"
    if is_cold_hue(h):
        return "Cool"
    return "Neutral"


def lightness_descriptor(l: float) -> str:
    if l < 20:
        return "Deep"
    if l < 40:
        return "Dark"
    if l < 60:
        return "Mid"
    if l < 80:
        return "Light"
    return "Pale"


def hue_name(h: float) -> str:
    if h < 15 or h >= 345:
        return "Red"
    if h < 45:
        return "Orange"
    if h < 75:
        return "Yellow"
    if h < 150:
        return "Green"
    if h < 210:
        return "Cyan"
    if h < 270:
        return "Blue"
    if h < 300:
        return "Violet"
    return "Magenta"


def algorithmic_color_naming(h: float, s: float, l: float) -> str:
    """Deterministic three-word name, e.g. 'Intense Warm Red'."""
    return f"{saturation_descriptor(s)} {temperature_descriptor(h)} {hue_name(h)}"


def generate_marketing_name(h: float, s: float, l: float) -> str:
    """Poetic name picked by hue bucket."""
    index = math.floor(h / 360 * len(MARKETING_NAMES))
    if 0 <= index < len(MARKETING_NAMES):
        return MARKETING_NAMES[index]
    return FALLBACK_MARKETING_NAME


def get_color_tags(h: float, s: float, l: float) -> list[str]:
    tags: list[str] = []

    if is_warm_hue(h):
        tags.append("warm")
    elif is_cold_hue(h):
        tags.append("cold")

    if s >= 70:
        tags.append("saturated")
    elif s < 30:
        tags.append("muted")

    if l >= 70:
        tags.append("light")
    elif l < 30:
        tags.append("dark")

    return tags

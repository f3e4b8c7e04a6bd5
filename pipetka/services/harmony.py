"""
Harmony — color-wheel palettes derived from one base color.

  analogous           -30, 0, +30
  monochromatic       same hue, five saturation/lightness variants
  complementary       base, complement, and base lightened/darkened by 20
  splitComplementary  0, 150, 210
  triadic             0, 120, 240
  tetradic / square   0, 90, 180, 270
  neutral             same hue, saturation 5-20, lightness 30-90
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from .color_utils import Hsl, Rgb, hsl_to_rgb, parse_color_to_rgb, rgb_to_hex, rgb_to_hsl

logger = logging.getLogger(__name__)

DEFAULT_BASE_HSL = Hsl(204, 70, 53)
DEFAULT_MODE = "analogous"


@dataclass(frozen=True)
class HarmonyColor:
    hex: str
    rgb: Rgb
    hsl: Hsl
    angle: int = 0

    def to_dict(self) -> dict:
        return {
            "hex": self.hex,
            "rgb": self.rgb._asdict(),
            "hsl": self.hsl._asdict(),
            "angle": self.angle,
        }


@dataclass
class HarmonyResult:
    mode: str
    base: Hsl
    colors: list[HarmonyColor] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "mode": self.mode,
            "base": self.base._asdict(),
            "colors": [c.to_dict() for c in self.colors],
        }


def _color(h: float, s: float, l: float, angle: int) -> HarmonyColor:
    rgb = hsl_to_rgb(h, s, l)
    return HarmonyColor(hex=rgb_to_hex(*rgb), rgb=rgb, hsl=Hsl(h, s, l), angle=angle)


def _rotations(base: Hsl, offsets: tuple[int, ...]) -> list[HarmonyColor]:
    return [_color((base.h + offset + 360) % 360, base.s, base.l, offset) for offset in offsets]


def analogous(base: Hsl) -> list[HarmonyColor]:
    return _rotations(base, (-30, 0, 30))


def monochromatic(base: Hsl) -> list[HarmonyColor]:
    variations = [
        (base.s, min(100, base.l + 30)),
        (min(100, base.s + 20), base.l),
        (base.s, base.l),
        (max(0, base.s - 20), base.l),
        (base.s, max(0, base.l - 30)),
    ]
    return [_color(base.h, s, l, 0) for s, l in variations]


def complementary(base: Hsl) -> list[HarmonyColor]:
    hues = ((base.h, 0), ((base.h + 180) % 360, 180))
    colors = [_color(h, base.s, base.l, angle) for h, angle in hues]
    for h, angle in hues:
        colors.append(_color(h, base.s, min(100, base.l + 20), angle))
        colors.append(_color(h, base.s, max(0, base.l - 20), angle))
    return colors[:4]


def split_complementary(base: Hsl) -> list[HarmonyColor]:
    return _rotations(base, (0, 150, 210))


def triadic(base: Hsl) -> list[HarmonyColor]:
    return _rotations(base, (0, 120, 240))


def tetradic(base: Hsl) -> list[HarmonyColor]:
    return _rotations(base, (0, 90, 180, 270))


def neutral(base: Hsl) -> list[HarmonyColor]:
    return [_color(base.h, s, l, 0) for s, l in zip((5, 10, 15, 20), (30, 50, 70, 90))]


HARMONY_MODES: dict[str, Callable[[Hsl], list[HarmonyColor]]] = {
    "analogous": analogous,
    "monochromatic": monochromatic,
    "complementary": complementary,
    "splitComplementary": split_complementary,
    "triadic": triadic,
    "tetradic": tetradic,
    "square": tetradic,
    "neutral": neutral,
}


def base_hsl(base_color: str) -> Hsl:
    """HSL of the base color, or the default blue when it does not parse."""
    rgb = parse_color_to_rgb(base_color)
    if rgb is None:
        logger.debug(f"Unparseable harmony base {base_color!r}, using default")
        return DEFAULT_BASE_HSL
    return rgb_to_hsl(*rgb)


def generate_harmony(base_color: str, mode: str = DEFAULT_MODE) -> HarmonyResult:
    """Build the palette for mode; unknown modes fall back to analogous."""
    if mode not in HARMONY_MODES:
        mode = DEFAULT_MODE
    base = base_hsl(base_color)
    return HarmonyResult(mode=mode, base=base, colors=HARMONY_MODES[mode](base))

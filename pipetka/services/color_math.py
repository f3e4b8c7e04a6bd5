"""
Color Math — luma, lightness adjustments and 10-step tonal scales.

All adjustments happen in HSL so hue and saturation stay put.
"""
from __future__ import annotations

from .color_utils import hex_to_rgb, hsl_to_rgb, rgb_to_hex, rgb_to_hsl
from .contrast import calculate_relative_luminance

# The base color's own lightness slots in at index 5.
SCALE_LIGHTNESS = (95, 85, 75, 65, 55, None, 45, 35, 25, 15)


def calculate_luma(r: float, g: float, b: float) -> float:
    """WCAG relative luminance (0-1)."""
    return calculate_relative_luminance(r, g, b)


def calculate_lightness(r: float, g: float, b: float) -> int:
    """HSL lightness (0-100)."""
    return rgb_to_hsl(r, g, b).l


def _shift_lightness(hex_color: str, delta: float) -> str:
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return hex_color
    h, s, l = rgb_to_hsl(*rgb)
    new_l = min(100, max(0, l + delta))
    return rgb_to_hex(*hsl_to_rgb(h, s, new_l))


def lighten_color(hex_color: str, amount: float) -> str:
    """Raise HSL lightness by amount (capped at 100). Invalid input is returned as-is."""
    return _shift_lightness(hex_color, amount)


def darken_color(hex_color: str, amount: float) -> str:
    """Lower HSL lightness by amount (floored at 0). Invalid input is returned as-is."""
    return _shift_lightness(hex_color, -amount)


def generate_color_scale(hex_color: str) -> list[str]:
    """Ten shades from near-white to near-black around the base color."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return []
    h, s, l = rgb_to_hsl(*rgb)
    return [
        rgb_to_hex(*hsl_to_rgb(h, s, l if step is None else step))
        for step in SCALE_LIGHTNESS
    ]

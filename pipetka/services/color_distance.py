"""
Color Distance — RGB Euclidean distance and a simplified CIEDE2000 ΔE.

The RGB distance is what clustering uses (fast, not perceptual).
The ΔE here is a weighted approximation good enough to rank nearest named
colors; it is not the reference CIEDE2000 and must not be used for
certified color-difference checks.
"""
from __future__ import annotations

import math

from .color_utils import Lab, Rgb


def color_distance(c1: Rgb, c2: Rgb) -> float:
    """Euclidean distance in raw RGB space (0 … ~441.67)."""
    dr = c1[0] - c2[0]
    dg = c1[1] - c2[1]
    db = c1[2] - c2[2]
    return math.sqrt(dr * dr + dg * dg + db * db)


def delta_e_2000(lab1: Lab, lab2: Lab) -> float:
    """
    Approximate CIEDE2000 difference between two LAB colors.

    Uses lightness/chroma/hue weights and the blue-region rotation term,
    but works on the raw hue angle difference (in degrees) rather than the
    full ΔH' of the reference formula.
    """
    l1, a1, b1 = lab1
    l2, a2, b2 = lab2

    dl = l1 - l2

    c1 = math.sqrt(a1 * a1 + b1 * b1)
    c2 = math.sqrt(a2 * a2 + b2 * b2)
    dc = c1 - c2

    h1 = math.degrees(math.atan2(b1, a1))
    h2 = math.degrees(math.atan2(b2, a2))
    dh = abs(h1 - h2)
    if dh > 180:
        dh = 360 - dh

    l_mean_offset = (l1 + l2) / 2 - 50
    c_mean = (c1 + c2) / 2

    sl = 1 + (0.015 * l_mean_offset ** 2) / math.sqrt(20 + l_mean_offset ** 2)
    sc = 1 + 0.045 * c_mean
    sh = 1 + 0.015 * c_mean * (1 - 0.17 * math.cos(math.radians((h1 + h2) / 2)))

    rt = (
        -2
        * math.sqrt(c_mean ** 7 / (c_mean ** 7 + 25 ** 7))
        * math.sin(math.radians(60 * math.exp(-(((dh + 180) / 25) ** 2))))
    )

    kl = kc = kh = 1.0
    l_term = dl / (kl * sl)
    c_term = dc / (kc * sc)
    h_term = dh / (kh * sh)

    return math.sqrt(l_term ** 2 + c_term ** 2 + h_term ** 2 + rt * c_term * h_term)

"""
Color Utils — conversions between HEX, RGB, HSL, XYZ, LAB and LCH,
plus loose parsers for user-typed CSS color strings.

Every function here is pure. Parsers return None on bad input instead of
raising, so callers can decide how to surface a validation message.
"""
from __future__ import annotations

import math
import re
from typing import NamedTuple, Optional


class Rgb(NamedTuple):
    r: int
    g: int
    b: int


class Hsl(NamedTuple):
    h: int
    s: int
    l: int


class Xyz(NamedTuple):
    x: float
    y: float
    z: float


class Lab(NamedTuple):
    l: float
    a: float
    b: float


class Lch(NamedTuple):
    l: float
    c: float
    h: float


# D65 reference white, Y normalized to 100
D65_WHITE = Xyz(95.047, 100.0, 108.883)

_HEX_RE = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE | re.ASCII)
_BARE_HEX_RE = re.compile(r"^[0-9a-f]{6}$", re.IGNORECASE | re.ASCII)
_RGB_RE = re.compile(r"rgb\(?\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)?", re.IGNORECASE | re.ASCII)
_HSL_RE = re.compile(r"hsl\(?\s*(\d+)\s*,\s*(\d+)%\s*,\s*(\d+)%\s*\)?", re.IGNORECASE | re.ASCII)


def round_half_up(value: float) -> int:
    """Round .5 towards +inf (Python's round() is banker's rounding)."""
    return math.floor(value + 0.5)


# ─────────────────────────────────────────────────────────────────────────────
# HEX ⇄ RGB
# ─────────────────────────────────────────────────────────────────────────────

def hex_to_rgb(hex_color: str) -> Optional[Rgb]:
    """
    Parse a 6-digit hex string, with or without '#'.

    3-digit shorthand is not expanded and returns None.
    """
    if not isinstance(hex_color, str):
        return None
    match = _HEX_RE.fullmatch(hex_color)
    if not match:
        return None
    return Rgb(int(match.group(1), 16), int(match.group(2), 16), int(match.group(3), 16))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """
    Format channels as an uppercase '#RRGGBB' string.

    Channels are rounded but not clamped: rgb_to_hex(255.7, 87.3, 51.9)
    yields '#1005734', which keeps bad upstream values visible.
    """
    def to_hex(n: float) -> str:
        h = format(round_half_up(n), "x")
        return "0" + h if len(h) == 1 else h

    return f"#{to_hex(r)}{to_hex(g)}{to_hex(b)}".upper()


# ─────────────────────────────────────────────────────────────────────────────
# RGB ⇄ HSL
# ─────────────────────────────────────────────────────────────────────────────

def rgb_to_hsl(r: float, g: float, b: float) -> Hsl:
    """Convert 0-255 channels to integer HSL (h in degrees, s/l in percent)."""
    r, g, b = r / 255, g / 255, b / 255
    mx = max(r, g, b)
    mn = min(r, g, b)
    h = 0.0
    s = 0.0
    l = (mx + mn) / 2

    if mx != mn:
        d = mx - mn
        s = d / (2 - mx - mn) if l > 0.5 else d / (mx + mn)
        if mx == r:
            h = ((g - b) / d + (6 if g < b else 0)) / 6
        elif mx == g:
            h = ((b - r) / d + 2) / 6
        else:
            h = ((r - g) / d + 4) / 6

    return Hsl(round_half_up(h * 360) % 360, round_half_up(s * 100), round_half_up(l * 100))


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> Rgb:
    """Inverse of rgb_to_hsl. Lossy to ±1 per channel after a round-trip."""
    h = (h % 360) / 360
    s /= 100
    l /= 100

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_rgb(p, q, h + 1 / 3)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1 / 3)

    return Rgb(round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255))


def hex_to_hsl(hex_color: str) -> Optional[Hsl]:
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    return rgb_to_hsl(*rgb)


# ─────────────────────────────────────────────────────────────────────────────
# RGB → XYZ → LAB → LCH
# ─────────────────────────────────────────────────────────────────────────────

def _linearize(channel: float) -> float:
    c = channel / 255
    return ((c + 0.055) / 1.055) ** 2.4 if c > 0.04045 else c / 12.92


def rgb_to_xyz(r: float, g: float, b: float) -> Xyz:
    """sRGB (D65) to XYZ scaled so that white has Y = 100."""
    rl, gl, bl = _linearize(r), _linearize(g), _linearize(b)
    x = rl * 0.4124564 + gl * 0.3575761 + bl * 0.1804375
    y = rl * 0.2126729 + gl * 0.7151522 + bl * 0.0721750
    z = rl * 0.0193339 + gl * 0.1191920 + bl * 0.9503041
    return Xyz(x * 100, y * 100, z * 100)


def xyz_to_lab(x: float, y: float, z: float) -> Lab:
    def f(t: float) -> float:
        return t ** (1 / 3) if t > 0.008856 else (7.787 * t + 16 / 116)

    fx = f(x / D65_WHITE.x)
    fy = f(y / D65_WHITE.y)
    fz = f(z / D65_WHITE.z)
    return Lab(116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz))


def rgb_to_lab(r: float, g: float, b: float) -> Lab:
    return xyz_to_lab(*rgb_to_xyz(r, g, b))


def lab_to_lch(l: float, a: float, b: float) -> Lch:
    c = math.sqrt(a * a + b * b)
    h = math.degrees(math.atan2(b, a))
    if h < 0:
        h += 360
    return Lch(l, c, h)


# ─────────────────────────────────────────────────────────────────────────────
# CSS strings
# ─────────────────────────────────────────────────────────────────────────────

def format_rgb(r: int, g: int, b: int) -> str:
    return f"rgb({r}, {g}, {b})"


def format_hsl(h: int, s: int, l: int) -> str:
    return f"hsl({h}, {s}%, {l}%)"


def parse_rgb(rgb_string: str) -> Optional[Rgb]:
    """Parse 'rgb(r, g, b)' (spaces optional). Channels above 255 give None."""
    match = _RGB_RE.search(rgb_string)
    if not match:
        return None
    r, g, b = (int(match.group(i)) for i in (1, 2, 3))
    if r > 255 or g > 255 or b > 255:
        return None
    return Rgb(r, g, b)


def parse_hsl(hsl_string: str) -> Optional[Hsl]:
    """Parse 'hsl(h, s%, l%)'. Hue above 360 or s/l above 100 give None."""
    match = _HSL_RE.search(hsl_string)
    if not match:
        return None
    h, s, l = (int(match.group(i)) for i in (1, 2, 3))
    if h > 360 or s > 100 or l > 100:
        return None
    return Hsl(h, s, l)


def parse_color_to_rgb(color_string: Optional[str]) -> Optional[Rgb]:
    """
    Parse any supported color string to RGB.

    Tried in order: '#RRGGBB', 'rgb(...)', 'hsl(...)', bare 'RRGGBB'.
    None, empty strings and non-strings return None.
    """
    if not color_string or not isinstance(color_string, str):
        return None

    if color_string.startswith("#"):
        return hex_to_rgb(color_string)

    lowered = color_string.lower()
    if lowered.startswith("rgb"):
        return parse_rgb(color_string)

    if lowered.startswith("hsl"):
        hsl = parse_hsl(color_string)
        if hsl is None:
            return None
        return hsl_to_rgb(*hsl)

    if _BARE_HEX_RE.fullmatch(color_string):
        return hex_to_rgb("#" + color_string)

    return None

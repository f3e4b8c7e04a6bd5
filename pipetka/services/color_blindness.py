"""
Color Blindness — simulates color vision deficiencies with 3x3 RGB matrices.

Each output channel is a weighted sum of the input channels, rounded and
clamped to 0-255. Alpha is never touched.
"""
from __future__ import annotations

import io
import logging

import numpy as np
from PIL import Image

from .color_utils import Rgb, hex_to_rgb, rgb_to_hex, round_half_up
from .image_sampler import load_image

logger = logging.getLogger(__name__)

COLOR_MATRICES: dict[str, tuple[tuple[float, float, float], ...]] = {
    "none": (
        (1, 0, 0),
        (0, 1, 0),
        (0, 0, 1),
    ),
    "protanopia": (
        (0.567, 0.433, 0),
        (0.558, 0.442, 0),
        (0, 0.242, 0.758),
    ),
    "protanomaly": (
        (0.817, 0.183, 0),
        (0.333, 0.667, 0),
        (0, 0.125, 0.875),
    ),
    "deuteranopia": (
        (0.625, 0.375, 0),
        (0.7, 0.3, 0),
        (0, 0.3, 0.7),
    ),
    "deuteranomaly": (
        (0.8, 0.2, 0),
        (0.258, 0.742, 0),
        (0, 0.142, 0.858),
    ),
    "tritanopia": (
        (0.95, 0.05, 0),
        (0, 0.433, 0.567),
        (0, 0.475, 0.525),
    ),
    "tritanomaly": (
        (0.967, 0.033, 0),
        (0, 0.733, 0.267),
        (0, 0.183, 0.817),
    ),
    "achromatopsia": (
        (0.299, 0.587, 0.114),
        (0.299, 0.587, 0.114),
        (0.299, 0.587, 0.114),
    ),
    "achromatomaly": (
        (0.618, 0.32, 0.062),
        (0.163, 0.775, 0.062),
        (0.163, 0.32, 0.516),
    ),
}

VISION_TYPES = tuple(COLOR_MATRICES)


def get_matrix(kind: str) -> np.ndarray:
    if kind not in COLOR_MATRICES:
        raise ValueError(f"Unknown vision type '{kind}', expected one of {VISION_TYPES}")
    return np.array(COLOR_MATRICES[kind], dtype=np.float64)


def simulate_color(rgb: Rgb, kind: str) -> Rgb:
    """How a single color appears under the given vision type."""
    matrix = COLOR_MATRICES.get(kind)
    if matrix is None:
        raise ValueError(f"Unknown vision type '{kind}', expected one of {VISION_TYPES}")

    def channel(row: tuple[float, float, float]) -> int:
        value = row[0] * rgb[0] + row[1] * rgb[1] + row[2] * rgb[2]
        return max(0, min(255, round_half_up(value)))

    return Rgb(channel(matrix[0]), channel(matrix[1]), channel(matrix[2]))


def simulate_palette(hex_colors: list[str], kind: str) -> dict[str, str]:
    """Map each '#RRGGBB' to its simulated hex. Unparseable entries are skipped."""
    simulated: dict[str, str] = {}
    for hex_color in hex_colors:
        rgb = hex_to_rgb(hex_color)
        if rgb is None:
            continue
        simulated[hex_color] = rgb_to_hex(*simulate_color(rgb, kind))
    return simulated


def simulate_pixels(pixels: np.ndarray, kind: str) -> np.ndarray:
    """Apply the matrix to an (..., 3) or (..., 4) uint8 array; alpha passes through."""
    matrix = get_matrix(kind)
    out = np.array(pixels, dtype=np.uint8, copy=True)
    if kind == "none":
        return out
    rgb = out[..., :3].astype(np.float64)
    transformed = np.floor(rgb @ matrix.T + 0.5)
    out[..., :3] = np.clip(transformed, 0, 255).astype(np.uint8)
    return out


def simulate_image(data: bytes, kind: str) -> bytes:
    """Simulate a whole JPEG/PNG/WEBP image; always returns PNG bytes."""
    get_matrix(kind)
    img = load_image(data)
    rgba = np.asarray(img.convert("RGBA"), dtype=np.uint8)
    result = Image.fromarray(simulate_pixels(rgba, kind))

    buf = io.BytesIO()
    result.save(buf, format="PNG")
    logger.info(f"Simulated {kind} on {img.size[0]}x{img.size[1]} image")
    return buf.getvalue()

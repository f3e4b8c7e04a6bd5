"""
Image Sampler — decodes uploaded images and turns them into pixel arrays.

Uploads arrive as base64, optionally wrapped in a data URI. Only JPEG, PNG
and WEBP are accepted; anything else raises ValueError, which the routers
answer with HTTP 400.
"""
from __future__ import annotations

import base64
import binascii
import io
import logging
import os
import re
from typing import Optional

import numpy as np
from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

MAX_UPLOAD_BYTES = int(os.environ.get("PIPETKA_MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))
MAX_IMAGE_PX = int(os.environ.get("PIPETKA_MAX_IMAGE_PX", str(40_000_000)))

EXTRACT_MAX_SIZE = 500
EXTRACT_STEP = 4
DOMINANT_SIZE = (100, 100)

ALLOWED_FORMATS = ("JPEG", "PNG", "WEBP")
INVALID_TYPE_MESSAGE = "Invalid file type. Please upload JPG, PNG, or WEBP image."

_MIME_RE = re.compile(r"image/(jpeg|jpg|png|webp)", re.IGNORECASE)
_DATA_URI_RE = re.compile(r"data:([^;,]*)(;[^,]*)?,", re.IGNORECASE)


def check_mime_type(mime_type: str) -> None:
    """Raise ValueError unless mime_type is image/jpeg, jpg, png or webp."""
    if not _MIME_RE.fullmatch(mime_type.strip()):
        logger.warning(f"Rejected upload with MIME type {mime_type!r}")
        raise ValueError(INVALID_TYPE_MESSAGE)


def image_bytes_from_base64(b64: str) -> bytes:
    """Strip a data URI prefix if present, check its MIME type and decode base64."""
    b64 = b64.strip()
    if b64.startswith("data:"):
        match = _DATA_URI_RE.match(b64)
        if not match:
            raise ValueError("Malformed data URI")
        check_mime_type(match.group(1))
        b64 = b64[match.end():]

    try:
        data = base64.b64decode(b64, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 image data: {e}") from e

    if not data:
        raise ValueError("Empty image data")
    if len(data) > MAX_UPLOAD_BYTES:
        raise ValueError(f"Image is larger than {MAX_UPLOAD_BYTES} bytes")
    return data


def load_image(data: bytes) -> Image.Image:
    """Decode image bytes with Pillow; only JPEG, PNG and WEBP are accepted."""
    try:
        img = Image.open(io.BytesIO(data))
    except UnidentifiedImageError as e:
        raise ValueError(INVALID_TYPE_MESSAGE) from e
    except Image.DecompressionBombError as e:
        logger.warning(f"Rejected oversized image: {e}")
        raise ValueError(f"Image is too large to decode: {e}") from e
    except OSError as e:
        raise ValueError(f"Unreadable image data: {e}") from e

    if img.format not in ALLOWED_FORMATS:
        logger.warning(f"Rejected image with format {img.format}")
        raise ValueError(INVALID_TYPE_MESSAGE)

    width, height = img.size
    if width * height > MAX_IMAGE_PX:
        raise ValueError(f"Image has {width * height} pixels, limit is {MAX_IMAGE_PX}")

    try:
        img.load()
    except (OSError, Image.DecompressionBombError) as e:
        logger.warning(f"Failed to decode {img.format} image: {e}")
        raise ValueError(f"Corrupt or truncated image data: {e}") from e
    return img


def sample_pixels(
    img: Image.Image,
    max_size: int = EXTRACT_MAX_SIZE,
    step: int = EXTRACT_STEP,
) -> np.ndarray:
    """
    Downscale so neither side exceeds max_size, then keep every step-th pixel.

    Returns a uint8 (n, 3) array in row-major order.
    """
    width, height = img.size
    scale = min(max_size / width, max_size / height, 1)
    target = (max(1, int(width * scale)), max(1, int(height * scale)))

    rgb = img.convert("RGB")
    if target != rgb.size:
        rgb = rgb.resize(target, Image.BILINEAR)

    pixels = np.asarray(rgb, dtype=np.uint8).reshape(-1, 3)
    return pixels[::step]


def resize_pixels(img: Image.Image, size: tuple[int, int] = DOMINANT_SIZE) -> np.ndarray:
    """Squash the image to a fixed size and return every pixel as (n, 3)."""
    rgb = img.convert("RGB").resize(size, Image.BILINEAR)
    return np.asarray(rgb, dtype=np.uint8).reshape(-1, 3)


def pixels_from_base64(b64: str, max_size: Optional[int] = None) -> np.ndarray:
    """Decode, validate and sample an uploaded image in one call."""
    img = load_image(image_bytes_from_base64(b64))
    return sample_pixels(img, max_size=max_size or EXTRACT_MAX_SIZE)

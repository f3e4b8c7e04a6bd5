"""POST /api/extract and /api/dominant — palettes from an uploaded image."""
from __future__ import annotations

import logging
from typing import Any

import numpy as np
from fastapi import APIRouter, HTTPException

from ..models.requests import DominantRequest, ExtractRequest
from ..services import image_sampler, palette_extractor

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


def _decode(image_base64: str):
    try:
        return image_sampler.load_image(image_sampler.image_bytes_from_base64(image_base64))
    except ValueError as e:
        logger.warning(f"Rejected image upload: {e}")
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/extract")
async def extract_colors(req: ExtractRequest) -> dict[str, Any]:
    """
    Full palette extraction.

    Flow:
      1. Decode and validate the image
      2. Downscale to 500px and sample every 4th pixel
      3. Cluster into dominant + extended colors, group, analyze
    """
    img = _decode(req.image_base64)
    pixels = image_sampler.sample_pixels(img)
    rng = np.random.default_rng(req.seed)

    result = palette_extractor.extract_palette(pixels, cluster_count=req.cluster_count, rng=rng)
    return {
        **result.to_dict(),
        "image": {"width": img.size[0], "height": img.size[1], "sampled_pixels": len(pixels)},
    }


@router.post("/dominant")
async def dominant_colors(req: DominantRequest) -> dict[str, Any]:
    img = _decode(req.image_base64)
    pixels = image_sampler.resize_pixels(img)
    rng = np.random.default_rng(req.seed)

    clusters = palette_extractor.dominant_colors(pixels, k=req.k, rng=rng)
    return {
        "colors": [
            {"hex": c.hex, "rgb": c.rgb._asdict(), "percentage": c.percentage}
            for c in clusters
        ],
    }

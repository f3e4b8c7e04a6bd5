"""POST /api/brand — brand palette analysis from colors, a preset or an image."""
from __future__ import annotations

import logging
from typing import Any

import numpy as np
from fastapi import APIRouter, HTTPException

from ..models.requests import BrandRequest
from ..services import brand_analysis, image_sampler, palette_extractor

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


@router.post("/brand")
async def analyze_brand(req: BrandRequest) -> dict[str, Any]:
    """
    Source of colors, first match wins:
      1. image_base64 → K-means extraction of color_count colors
      2. preset → a predefined brand palette by name
      3. colors → user-entered strings in any supported format
    """
    colors = list(req.colors)

    if req.image_base64:
        try:
            pixels = image_sampler.pixels_from_base64(req.image_base64)
        except ValueError as e:
            logger.warning(f"Rejected brand image upload: {e}")
            raise HTTPException(status_code=400, detail=str(e))
        rng = np.random.default_rng(req.seed)
        colors = palette_extractor.extract_hex_colors(pixels, req.color_count, rng=rng)
    elif req.preset:
        preset = brand_analysis.find_brand_preset(req.preset)
        if preset is None:
            raise HTTPException(status_code=404, detail=f"Unknown brand preset: {req.preset!r}")
        colors = list(preset["colors"])

    analysis = brand_analysis.analyze_brand(colors)
    if colors and not analysis.colors:
        logger.warning(f"None of {len(colors)} brand colors could be parsed")
    return analysis.to_dict()


@router.get("/brand/presets")
async def list_presets() -> dict[str, Any]:
    return {"presets": brand_analysis.get_brand_presets()}

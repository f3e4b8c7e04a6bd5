"""POST /api/simulate — color-vision deficiency simulation."""
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from ..models.requests import SimulateColorsRequest, SimulateRequest
from ..services import color_blindness, image_sampler

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


@router.post("/simulate")
async def simulate_image(req: SimulateRequest) -> Response:
    """Return the simulated image as a PNG download."""
    try:
        data = image_sampler.image_bytes_from_base64(req.image_base64)
        png = color_blindness.simulate_image(data, req.vision_type)
    except ValueError as e:
        logger.warning(f"Rejected simulation upload: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return Response(
        content=png,
        media_type="image/png",
        headers={
            "Content-Disposition": f'attachment; filename="color-blindness-simulation-{req.vision_type}.png"'
        },
    )


@router.post("/simulate/colors")
async def simulate_colors(req: SimulateColorsRequest) -> dict[str, Any]:
    return {
        "vision_type": req.vision_type,
        "matrix": [list(row) for row in color_blindness.COLOR_MATRICES[req.vision_type]],
        "colors": color_blindness.simulate_palette(req.colors, req.vision_type),
    }

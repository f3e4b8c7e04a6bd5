"""POST /api/convert — any color string → every supported representation."""
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException

from ..models.requests import ConvertRequest
from ..services import color_utils

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


@router.post("/convert")
async def convert_color(req: ConvertRequest) -> dict[str, Any]:
    rgb = color_utils.parse_color_to_rgb(req.color.strip())
    if rgb is None:
        raise HTTPException(status_code=400, detail=f"Unrecognized color: {req.color!r}")

    hex_color = color_utils.rgb_to_hex(*rgb)
    hsl = color_utils.rgb_to_hsl(*rgb)
    xyz = color_utils.rgb_to_xyz(*rgb)
    lab = color_utils.xyz_to_lab(*xyz)
    lch = color_utils.lab_to_lch(*lab)

    return {
        "hex": hex_color,
        "rgb": rgb._asdict(),
        "hsl": hsl._asdict(),
        "xyz": xyz._asdict(),
        "lab": lab._asdict(),
        "lch": lch._asdict(),
        "css": {
            "hex": hex_color,
            "rgb": color_utils.format_rgb(*rgb),
            "hsl": color_utils.format_hsl(*hsl),
        },
    }

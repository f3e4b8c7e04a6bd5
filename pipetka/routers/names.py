"""POST /api/names — closest CSS names, generated names and technical data."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException

from ..models.requests import NamesRequest
from ..services import color_names

router = APIRouter(prefix="/api")


@router.post("/names")
async def find_names(req: NamesRequest) -> dict[str, Any]:
    description = color_names.describe_color(req.color.strip())
    if description is None:
        raise HTTPException(status_code=400, detail=f"Unrecognized color: {req.color!r}")

    return {
        **description.to_dict(),
        "similar": [
            m.to_dict() for m in color_names.find_similar_colors(description.hex, req.max_results)
        ],
    }

"""POST /api/harmony — color-wheel palette from a base color."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from ..models.requests import HarmonyRequest
from ..services import harmony, svg_renderer

router = APIRouter(prefix="/api")


@router.post("/harmony")
async def generate_harmony(req: HarmonyRequest) -> dict[str, Any]:
    result = harmony.generate_harmony(req.base_color, req.mode)
    payload = result.to_dict()
    payload["svg"] = svg_renderer.render_harmony_svg(result) if req.include_svg else None
    return payload


@router.get("/harmony/modes")
async def list_modes() -> dict[str, Any]:
    return {"modes": list(harmony.HARMONY_MODES), "default": harmony.DEFAULT_MODE}

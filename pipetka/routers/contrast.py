"""POST /api/contrast — WCAG contrast of a text/background pair."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from ..models.requests import ContrastRequest
from ..services import contrast

router = APIRouter(prefix="/api")


@router.post("/contrast")
async def check_contrast(req: ContrastRequest) -> dict[str, Any]:
    """
    Never rejects bad colors: the result carries ratio 0 and all-false flags
    so the checker can render while the user is still typing.
    """
    result = contrast.check_contrast(req.foreground, req.background)
    return {
        **result.to_dict(),
        "recommendation": contrast.generate_recommendation(result.ratio, req.large_text),
    }

"""POST /api/export — download a palette as CSS, Tailwind config, JSON or SVG."""
from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from ..models.requests import BrandExportRequest, ExportRequest
from ..services import brand_analysis, exporters, palette_extractor, svg_renderer

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


def _download(content: str, media_type: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


def _rebuild(req: ExportRequest) -> palette_extractor.ExtractionResult:
    dominant = [palette_extractor.annotate_hex(c.hex, c.percentage) for c in req.dominant]
    extended = [palette_extractor.annotate_hex(c.hex, c.percentage) for c in req.extended]
    if any(c is None for c in dominant + extended):
        raise HTTPException(status_code=400, detail="Palette contains an invalid hex color")
    return palette_extractor.build_extraction(dominant, extended)


@router.post("/export/css")
async def export_css(req: ExportRequest) -> Response:
    return _download(exporters.palette_to_css(_rebuild(req)), "text/css", "palette.css")


@router.post("/export/tailwind")
async def export_tailwind(req: ExportRequest) -> Response:
    return _download(
        exporters.palette_to_tailwind(_rebuild(req)),
        "application/javascript",
        "tailwind.config.js",
    )


@router.post("/export/json")
async def export_json(req: ExportRequest) -> Response:
    return _download(exporters.palette_to_json(_rebuild(req)), "application/json", "palette.json")


@router.post("/export/svg")
async def export_svg(req: ExportRequest) -> Response:
    result = _rebuild(req)
    colors = [c.hex for c in result.dominant + result.extended]
    svg = svg_renderer.render_palette_svg(colors, title=req.title)
    return _download(svg, "image/svg+xml", "palette.svg")


@router.post("/export/brand/css")
async def export_brand_css(req: BrandExportRequest) -> Response:
    analysis = brand_analysis.analyze_brand(req.colors)
    return _download(exporters.brand_to_css(analysis.clustered), "text/css", "brand-colors.css")


@router.post("/export/brand/json")
async def export_brand_json(req: BrandExportRequest) -> Response:
    analysis = brand_analysis.analyze_brand(req.colors)
    return _download(exporters.brand_to_json(analysis), "application/json", "brand-colors.json")

"""
SVG Renderer — swatch sheets for palettes and harmonies.

Outputs:
  - Palette sheet (one labeled swatch per color, wrapped into rows)
  - Harmony strip (equal-width bands with hue angle and hex labels)

Label color is whichever of black or white has the higher WCAG contrast.
"""
from __future__ import annotations

from typing import Optional, Sequence

import svgwrite

from .contrast import best_text_color
from .harmony import HarmonyResult

SWATCH_PX = 120
LABEL_HEIGHT = 28
PADDING = 20
GAP = 12
COLUMNS = 5
BACKGROUND = "#fafaf8"


def render_palette_svg(
    colors: Sequence[str],
    title: Optional[str] = None,
    columns: int = COLUMNS,
    swatch_px: int = SWATCH_PX,
) -> str:
    """Return SVG string: a grid of hex-labeled swatches."""
    columns = max(1, min(columns, len(colors) or 1))
    rows = (len(colors) + columns - 1) // columns
    title_height = 32 if title else 0

    width_px = PADDING * 2 + columns * swatch_px + (columns - 1) * GAP
    height_px = PADDING * 2 + title_height + rows * (swatch_px + GAP) - (GAP if rows else 0)

    dwg = svgwrite.Drawing(size=(f"{width_px}px", f"{height_px}px"), profile="full")
    dwg.viewbox(0, 0, width_px, height_px)
    dwg.add(dwg.rect(insert=(0, 0), size=(width_px, height_px), fill=BACKGROUND))

    if title:
        dwg.add(dwg.text(
            title,
            insert=(PADDING, PADDING + 18),
            font_size="16px",
            font_family="sans-serif",
            font_weight="bold",
            fill="#333",
        ))

    for i, hex_color in enumerate(colors):
        col = i % columns
        row = i // columns
        x = PADDING + col * (swatch_px + GAP)
        y = PADDING + title_height + row * (swatch_px + GAP)

        dwg.add(dwg.rect(
            insert=(x, y), size=(swatch_px, swatch_px),
            fill=hex_color,
            stroke="#dddddd",
            stroke_width=1,
            rx=6, ry=6,
        ))
        dwg.add(dwg.text(
            hex_color,
            insert=(x + 8, y + swatch_px - 10),
            font_size="12px",
            font_family="monospace",
            fill=best_text_color(hex_color),
        ))

    return dwg.tostring()


def render_harmony_svg(harmony: HarmonyResult, band_px: int = SWATCH_PX, height_px: int = 160) -> str:
    """Return SVG string: one vertical band per harmony color."""
    count = max(1, len(harmony.colors))
    width_px = band_px * count

    dwg = svgwrite.Drawing(size=(f"{width_px}px", f"{height_px}px"), profile="full")
    dwg.viewbox(0, 0, width_px, height_px)

    for i, color in enumerate(harmony.colors):
        x = i * band_px
        text_fill = best_text_color(color.hex)
        dwg.add(dwg.rect(insert=(x, 0), size=(band_px, height_px), fill=color.hex))
        dwg.add(dwg.text(
            color.hex,
            insert=(x + 8, height_px - LABEL_HEIGHT),
            font_size="12px",
            font_family="monospace",
            fill=text_fill,
        ))
        dwg.add(dwg.text(
            f"{color.angle:+d}°",
            insert=(x + 8, height_px - 10),
            font_size="11px",
            font_family="sans-serif",
            fill=text_fill,
        ))

    return dwg.tostring()

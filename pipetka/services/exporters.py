"""
Exporters — text formats for extracted and brand palettes.

  CSS       :root custom properties
  Tailwind  module.exports theme extension
  JSON      pretty-printed, two-space indent
"""
from __future__ import annotations

import json

from .brand_analysis import ROLES, BrandAnalysis, ClusteredColor
from .palette_extractor import ExtractionResult

CSS_BRAND_LIMIT = 10


def palette_to_css(result: ExtractionResult) -> str:
    """CSS variables for dominant colors, the UI palette and the first brand shades."""
    if result.palettes is None:
        return ""
    ui = result.palettes.ui

    lines = [":root {", "  /* Dominant Colors */"]
    lines += [f"  --color-dominant-{i}: {c.hex};" for i, c in enumerate(result.dominant, start=1)]
    lines += [
        "",
        "  /* UI Palette */",
        f"  --color-primary: {ui.primary};",
        f"  --color-surface: {ui.surface};",
        f"  --color-accent: {ui.accent};",
        "",
        "  /* Brand Palette */",
    ]
    lines += [
        f"  --color-brand-{i}: {hex_color};"
        for i, hex_color in enumerate(result.palettes.brand[:CSS_BRAND_LIMIT], start=1)
    ]
    lines.append("}")
    return "\n".join(lines) + "\n"


def palette_to_tailwind(result: ExtractionResult) -> str:
    if result.palettes is None:
        return ""
    ui = result.palettes.ui

    lines = [
        "module.exports = {",
        "  theme: {",
        "    extend: {",
        "      colors: {",
        "        extract: {",
        "          dominant: {",
    ]
    lines += [f"            {i}: '{c.hex}'," for i, c in enumerate(result.dominant, start=1)]
    lines += [
        "          },",
        "          ui: {",
        f"            primary: '{ui.primary}',",
        f"            surface: '{ui.surface}',",
        f"            accent: '{ui.accent}',",
        "          },",
        "        },",
        "      },",
        "    },",
        "  },",
        "}",
    ]
    return "\n".join(lines) + "\n"


def palette_to_json(result: ExtractionResult) -> str:
    if result.palettes is None:
        return ""

    def brief(colors):
        return [{"hex": c.hex, "rgb": c.rgb._asdict(), "percentage": c.percentage} for c in colors]

    data = {
        "dominant": brief(result.dominant),
        "extended": brief(result.extended),
        "palettes": result.palettes.to_dict(),
        "groups": {
            tone: [c.hex for c in result.groups.get(tone, [])]
            for tone in ("light", "mid", "dark")
        },
    }
    return json.dumps(data, indent=2)


def brand_to_css(clustered: list[ClusteredColor]) -> str:
    """One variable per color plus one per role pointing at its first color."""
    lines = [":root {", "  /* Brand Colors */"]
    lines += [f"  --brand-{c.role}-{c.hex[1:].lower()}: {c.hex};" for c in clustered]
    lines += ["", "  /* By Cluster */"]
    for role in ROLES:
        first = next((c for c in clustered if c.role == role), None)
        if first is not None:
            lines.append(f"  --brand-{role}: {first.hex};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def brand_to_json(analysis: BrandAnalysis) -> str:
    data = analysis.to_dict()
    data["clustered"] = [{"hex": c.hex, "role": c.role} for c in analysis.clustered]
    return json.dumps(data, indent=2)

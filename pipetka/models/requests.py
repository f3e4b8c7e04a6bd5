from typing import Literal, Optional

from pydantic import BaseModel, Field

from .palette import PaletteColorSchema

VisionType = Literal[
    "none",
    "protanopia",
    "protanomaly",
    "deuteranopia",
    "deuteranomaly",
    "tritanopia",
    "tritanomaly",
    "achromatopsia",
    "achromatomaly",
]


class ConvertRequest(BaseModel):
    color: str = Field(min_length=1, max_length=64)


class ContrastRequest(BaseModel):
    # Either side may be missing or malformed; the result just reports 0:1.
    foreground: Optional[str] = None
    background: Optional[str] = None
    large_text: bool = False


class NamesRequest(BaseModel):
    color: str = Field(min_length=1, max_length=64)
    max_results: int = Field(default=6, ge=1, le=50)


class HarmonyRequest(BaseModel):
    base_color: str = "#3498db"
    mode: str = "analogous"
    include_svg: bool = False


class ExtractRequest(BaseModel):
    image_base64: str
    cluster_count: int = Field(default=10, ge=2, le=20)
    seed: Optional[int] = Field(default=None, ge=0)


class DominantRequest(BaseModel):
    image_base64: str
    k: int = Field(default=5, ge=1, le=20)
    seed: Optional[int] = Field(default=None, ge=0)


class BrandRequest(BaseModel):
    colors: list[str] = Field(default_factory=list, max_length=32)
    image_base64: Optional[str] = None
    preset: Optional[str] = None
    color_count: int = Field(default=5, ge=1, le=12)
    seed: Optional[int] = Field(default=None, ge=0)


class SimulateRequest(BaseModel):
    image_base64: str
    vision_type: VisionType = "none"


class SimulateColorsRequest(BaseModel):
    colors: list[str] = Field(min_length=1, max_length=64)
    vision_type: VisionType = "none"


class ExportRequest(BaseModel):
    dominant: list[PaletteColorSchema] = Field(min_length=1, max_length=20)
    extended: list[PaletteColorSchema] = Field(default_factory=list, max_length=20)
    title: Optional[str] = None


class BrandExportRequest(BaseModel):
    colors: list[str] = Field(min_length=1, max_length=32)

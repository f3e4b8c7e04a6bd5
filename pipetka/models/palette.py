from pydantic import BaseModel, Field

HEX_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class PaletteColorSchema(BaseModel):
    hex: str = Field(pattern=HEX_PATTERN)
    percentage: float = Field(default=0.0, ge=0.0, le=100.0)

from pydantic import BaseModel, Field
from typing import Literal, Optional

TargetFormat = Literal["auto", "hex", "hexa", "hexShort", "rgb", "rgba", "hsl", "hsla", "oklch", "oklcha"]
PaletteScheme = Literal[
    "complementary", "analogous", "triadic", "tetradic",
    "split-complementary", "monochromatic", "tints", "shades",
]

class ColorConvertRequest(BaseModel):
    code: str = Field(..., description="The CSS color code to convert")
    target: TargetFormat = Field("auto", description="The target color code format to convert to; auto mirrors the input")
    legacy: Optional[bool] = Field(None, description="Force comma-separated (true) or space/slash (false) syntax")
    alpha_style: Optional[Literal["number", "percent"]] = Field(None, description="Write alpha as a fraction or a percentage")

class ParseColorRequest(BaseModel):
    code: str = Field(..., description="The CSS color code to inspect")

class MaxChromaRequest(BaseModel):
    lightness: float = Field(..., ge=0, le=100, description="OKLCH lightness, 0-100")
    hue: float = Field(..., description="OKLCH hue in degrees")
    search_ceiling: float = Field(0.4, gt=0, le=1, description="Largest chroma to consider")

class ContrastRequest(BaseModel):
    foreground: str = Field(..., description="Text color")
    background: str = Field(..., description="Background color")

class PaletteRequest(BaseModel):
    code: str = Field(..., description="The base CSS color code")
    scheme: PaletteScheme = Field(..., description="How to derive the palette")
    count: int = Field(5, ge=1, le=20, description="Number of colors for analogous/monochromatic/tints/shades")

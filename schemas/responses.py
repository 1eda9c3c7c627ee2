from pydantic import BaseModel, Field
from typing import List, Optional

class SuccessResponse(BaseModel):
    success: bool = Field(..., description="Whether the operation produced a result")
    message: Optional[str] = Field(None, description="The result, absent when the format is impossible")

class ErrorResponse(BaseModel):
    success: bool = Field(False, description="Always false")
    error: str = Field(..., description="Why the request failed")

class RGBChannels(BaseModel):
    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)

class HSLChannels(BaseModel):
    h: float = Field(ge=0, lt=360)
    s: float = Field(ge=0, le=100)
    l: float = Field(ge=0, le=100)

class OKLCHChannels(BaseModel):
    l: float = Field(ge=0, le=100)
    c: float = Field(ge=0)
    h: float = Field(ge=0, lt=360)

class StyleHintsResponse(BaseModel):
    legacy: bool
    alpha_style: Optional[str] = None
    hex_length: Optional[int] = None
    hex_upper: bool = False

class ColorDetailsResponse(BaseModel):
    input_family: str
    rgb: RGBChannels
    hsl: HSLChannels
    oklch: OKLCHChannels
    alpha: float = Field(ge=0, le=1)
    style: StyleHintsResponse
    formatted: str = Field(..., description="The color re-emitted in its own style")

class ChromaResponse(BaseModel):
    lightness: float
    hue: float
    chroma: float = Field(ge=0)

class ContrastResponse(BaseModel):
    ratio: float = Field(ge=1)
    normal_text: str
    large_text: str

class PaletteResponse(BaseModel):
    scheme: str
    colors: List[str]

from .requests import ColorConvertRequest, ContrastRequest, MaxChromaRequest, PaletteRequest, ParseColorRequest
from .responses import (
    ChromaResponse,
    ColorDetailsResponse,
    ContrastResponse,
    ErrorResponse,
    PaletteResponse,
    SuccessResponse,
)

__all__ = [
    "ColorConvertRequest",
    "ParseColorRequest",
    "MaxChromaRequest",
    "ContrastRequest",
    "PaletteRequest",
    "SuccessResponse",
    "ErrorResponse",
    "ColorDetailsResponse",
    "ChromaResponse",
    "ContrastResponse",
    "PaletteResponse",
]

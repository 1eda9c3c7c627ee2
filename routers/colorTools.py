"""
Color tool endpoints. All color work is delegated to `colorengine`; this
module only maps requests to engine calls and invalid colors to HTTP 400.
"""

import logging

from fastapi import APIRouter, HTTPException

from colorengine import (
    ColorRecord,
    contrast_ratio,
    format_color,
    generate_palette,
    max_srgb_chroma,
    parse,
    wcag_level,
)
from schemas.requests import (
    ColorConvertRequest,
    ContrastRequest,
    MaxChromaRequest,
    PaletteRequest,
    ParseColorRequest,
)
from schemas.responses import (
    ChromaResponse,
    ColorDetailsResponse,
    ContrastResponse,
    ErrorResponse,
    HSLChannels,
    OKLCHChannels,
    PaletteResponse,
    RGBChannels,
    StyleHintsResponse,
    SuccessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {400: {"model": ErrorResponse, "description": "Invalid CSS color"}}


def parse_or_400(code: str) -> ColorRecord:
    """Parse a color string, turning an invalid record into HTTP 400."""
    record = parse(code)
    if not record.valid:
        logger.info("Rejected color %r: %s", code, record.error)
        raise HTTPException(status_code=400, detail=record.error)
    return record


@router.post("/convert_color_code", response_model=SuccessResponse, responses=ERROR_RESPONSES, operation_id="convert_color_code", description="Convert a CSS color code to a target format, preserving the input's syntax style")
async def convert_color_code(request: ColorConvertRequest):
    """Parse CSS color and convert to target format."""
    rgba = parse_or_400(request.code)
    result = format_color(rgba, request.target, request.legacy, request.alpha_style)
    # Only hexShort can come back empty, when the color cannot be compacted
    return SuccessResponse(success=result is not None, message=result)


@router.post("/parse_color", response_model=ColorDetailsResponse, responses=ERROR_RESPONSES, operation_id="parse_color", description="Parse a CSS color code into RGB, HSL and OKLCH channels with its style hints")
async def parse_color(request: ParseColorRequest):
    rgba = parse_or_400(request.code)
    r, g, b = rgba.rgb()
    h, s, l = rgba.hsl()
    ok_l, ok_c, ok_h = rgba.oklch()
    style = rgba.style
    return ColorDetailsResponse(
        input_family=rgba.input_family.value,
        rgb=RGBChannels(r=r, g=g, b=b),
        hsl=HSLChannels(h=h, s=s, l=l),
        oklch=OKLCHChannels(l=ok_l, c=ok_c, h=ok_h),
        alpha=rgba.a,
        style=StyleHintsResponse(
            legacy=style.legacy,
            alpha_style=style.alpha_style,
            hex_length=style.hex_length,
            hex_upper=style.hex_upper,
        ),
        formatted=format_color(rgba, "auto"),
    )


@router.post("/max_srgb_chroma", response_model=ChromaResponse, operation_id="max_srgb_chroma", description="Find the largest OKLCH chroma that stays inside sRGB for a lightness and hue")
async def max_chroma(request: MaxChromaRequest):
    chroma = max_srgb_chroma(request.lightness, request.hue, request.search_ceiling)
    return ChromaResponse(lightness=request.lightness, hue=request.hue, chroma=chroma)


@router.post("/contrast_ratio", response_model=ContrastResponse, responses=ERROR_RESPONSES, operation_id="contrast_ratio", description="WCAG contrast ratio between a foreground and a background color")
async def contrast(request: ContrastRequest):
    fg = parse_or_400(request.foreground)
    bg = parse_or_400(request.background)
    ratio = contrast_ratio(fg, bg)
    return ContrastResponse(
        ratio=ratio,
        normal_text=wcag_level(ratio),
        large_text=wcag_level(ratio, large_text=True),
    )


@router.post("/palette", response_model=PaletteResponse, responses=ERROR_RESPONSES, operation_id="palette", description="Derive a palette from a base color by hue rotation or lightness shifts")
async def palette(request: PaletteRequest):
    base = parse_or_400(request.code)
    colors = generate_palette(base, request.scheme, request.count)
    return PaletteResponse(
        scheme=request.scheme,
        colors=[format_color(c, "auto") for c in colors],
    )

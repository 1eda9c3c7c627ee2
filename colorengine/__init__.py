"""
Color parsing, conversion and style-preserving formatting with sRGB as the hub.
"""

from .contrast import contrast_ratio, relative_luminance, wcag_level
from .conversions import (
    hsl_to_rgb,
    linear_rgb_to_oklab,
    linear_to_srgb,
    oklab_to_linear_rgb,
    oklab_to_oklch,
    oklch_to_oklab,
    oklch_to_rgb,
    oklch_to_rgb_unrounded,
    rgb_to_hsl,
    rgb_to_oklch,
    srgb_to_linear,
)
from .formatter import TARGETS, format_color
from .gamut import in_srgb_gamut, max_srgb_chroma
from .palette import generate_palette, rotate_hue, shift_lightness
from .parser import from_hsl, from_oklch, from_rgb, parse
from .record import ColorRecord, InputFamily, StyleHints

__all__ = [
    "ColorRecord",
    "InputFamily",
    "StyleHints",
    "TARGETS",
    "contrast_ratio",
    "format_color",
    "from_hsl",
    "from_oklch",
    "from_rgb",
    "generate_palette",
    "hsl_to_rgb",
    "in_srgb_gamut",
    "linear_rgb_to_oklab",
    "linear_to_srgb",
    "max_srgb_chroma",
    "oklab_to_linear_rgb",
    "oklab_to_oklch",
    "oklch_to_oklab",
    "oklch_to_rgb",
    "oklch_to_rgb_unrounded",
    "parse",
    "relative_luminance",
    "rgb_to_hsl",
    "rgb_to_oklch",
    "rotate_hue",
    "shift_lightness",
    "srgb_to_linear",
    "wcag_level",
]

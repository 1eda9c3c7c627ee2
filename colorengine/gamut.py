"""
sRGB gamut boundary search along the chroma axis of OKLCH.
"""

from .conversions import oklch_to_rgb_unrounded

CHROMA_TOLERANCE = 1e-5
MAX_ITERATIONS = 64


def in_srgb_gamut(l: float, c: float, h: float) -> bool:
    """True when OKLCH (lightness 0-100) maps inside sRGB before rounding."""
    return all(0.0 <= v <= 255.0 for v in oklch_to_rgb_unrounded(l, c, h))


def max_srgb_chroma(lightness: float, hue: float, search_ceiling: float = 0.4) -> float:
    """Largest chroma in [0, search_ceiling] that stays inside sRGB.

    `lightness` is on the 0-100 scale and `hue` is in degrees.
    """
    if lightness <= 0 or lightness >= 100 or search_ceiling <= 0:
        return 0.0
    if in_srgb_gamut(lightness, search_ceiling, hue):
        return search_ceiling

    lo, hi = 0.0, search_ceiling
    for _ in range(MAX_ITERATIONS):
        if hi - lo < CHROMA_TOLERANCE:
            break
        mid = (lo + hi) / 2
        if in_srgb_gamut(lightness, mid, hue):
            lo = mid
        else:
            hi = mid
    return lo

"""
WCAG 2.x relative luminance and contrast ratio.
"""

from typing import Optional

from .conversions import srgb_to_linear
from .record import ColorRecord

AA_NORMAL = 4.5
AA_LARGE = 3.0
AAA_NORMAL = 7.0
AAA_LARGE = 4.5


def relative_luminance(record: ColorRecord) -> Optional[float]:
    """Luminance of the sRGB channels, ignoring alpha."""
    rgb = record.rgb()
    if rgb is None:
        return None
    r, g, b = (srgb_to_linear(c) for c in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(foreground: ColorRecord, background: ColorRecord) -> Optional[float]:
    """(L1 + 0.05) / (L2 + 0.05), with a translucent foreground flattened first."""
    if not (foreground.valid and background.valid):
        return None
    if foreground.a < 1:
        foreground = foreground.model_copy().flatten(background)
    l1 = relative_luminance(foreground)
    l2 = relative_luminance(background)
    hi, lo = max(l1, l2), min(l1, l2)
    return (hi + 0.05) / (lo + 0.05)


def wcag_level(ratio: float, large_text: bool = False) -> str:
    """Best WCAG conformance level a contrast ratio reaches."""
    if ratio >= (AAA_LARGE if large_text else AAA_NORMAL):
        return "AAA"
    if ratio >= (AA_LARGE if large_text else AA_NORMAL):
        return "AA"
    if not large_text and ratio >= AA_LARGE:
        return "AA Large"
    return "Fail"

"""
Palette derivation by hue rotation and lightness shifts in OKLCH.

Derived colors keep the base color's alpha, family and style hints, so
"auto" formatting renders them the way the base was written.
"""

from typing import List, Literal, Optional

from .gamut import max_srgb_chroma
from .numeric import clamp, normalize_hue
from .parser import from_oklch
from .record import ColorRecord

Scheme = Literal[
    "complementary",
    "analogous",
    "triadic",
    "tetradic",
    "split-complementary",
    "monochromatic",
    "tints",
    "shades",
]

HUE_OFFSETS = {
    "complementary": (0, 180),
    "triadic": (0, 120, 240),
    "tetradic": (0, 90, 180, 270),
    "split-complementary": (0, 150, 210),
}

ANALOGOUS_STEP = 30.0
MONOCHROMATIC_STEP = 10.0


def _derive(base: ColorRecord, l: float, c: float, h: float) -> ColorRecord:
    l = clamp(l, 0.0, 100.0)
    h = normalize_hue(h)
    c = min(c, max_srgb_chroma(l, h))
    derived = from_oklch(l, c, h, base.a, base.style)
    derived.input_family = base.input_family
    return derived


def rotate_hue(base: ColorRecord, degrees: float) -> Optional[ColorRecord]:
    """Base color with its OKLCH hue turned by `degrees`."""
    if not base.valid:
        return None
    if degrees % 360 == 0:
        return base.model_copy()
    l, c, h = base.oklch()
    return _derive(base, l, c, h + degrees)


def shift_lightness(base: ColorRecord, amount: float) -> Optional[ColorRecord]:
    """Base color with OKLCH lightness moved by `amount` points (0-100 scale)."""
    if not base.valid:
        return None
    if amount == 0:
        return base.model_copy()
    l, c, h = base.oklch()
    return _derive(base, l + amount, c, h)


def generate_palette(base: ColorRecord, scheme: Scheme, count: int = 5) -> Optional[List[ColorRecord]]:
    """Derive a palette from one base color. The base comes first where it belongs."""
    if not base.valid:
        return None
    if count < 1:
        raise ValueError("count must be at least 1")

    if scheme in HUE_OFFSETS:
        return [rotate_hue(base, offset) for offset in HUE_OFFSETS[scheme]]

    if scheme == "analogous":
        middle = (count - 1) / 2
        return [rotate_hue(base, (i - middle) * ANALOGOUS_STEP) for i in range(count)]

    if scheme == "monochromatic":
        middle = (count - 1) / 2
        return [shift_lightness(base, (i - middle) * MONOCHROMATIC_STEP) for i in range(count)]

    l = base.oklch()[0]
    if scheme == "tints":
        return [shift_lightness(base, (100 - l) * i / count) for i in range(count)]
    if scheme == "shades":
        return [shift_lightness(base, -l * i / count) for i in range(count)]

    raise ValueError(f"Unknown palette scheme: {scheme!r}")

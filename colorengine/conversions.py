"""
Color-space conversions with sRGB as the hub.

sRGB channels are 0-255 floats/ints, linear-light RGB is 0-1, OKLab lightness
is 0-1 internally and OKLCH/HSL lightness is exposed on the 0-100 scale.
Functions suffixed `_unrounded` return raw floats; only `to_channel` rounds.
"""

import math
from typing import Tuple

from .numeric import Matrix3, Vector3, cbrt, mat3_mul, normalize_hue, to_channel

# Chroma below this is treated as achromatic (OKLab units)
ACHROMATIC_CHROMA = 1e-4

# Björn Ottosson's OKLab matrices

# Linear RGB -> LMS
RGB_TO_LMS: Matrix3 = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)

# LMS cube root -> OKLab
LMS_TO_OKLAB: Matrix3 = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

# OKLab -> LMS cube root
OKLAB_TO_LMS: Matrix3 = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)

# LMS -> Linear RGB
LMS_TO_RGB: Matrix3 = (
    (4.0767416621, -3.3077115913, 0.2309699292),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, 1.7076147010),
)

# sRGB <-> linear ------------------------------------------------


def srgb_to_linear(c: float) -> float:
    """sRGB companding: 0-255 channel to linear 0-1."""
    cs = c / 255
    return cs / 12.92 if cs <= 0.04045 else ((cs + 0.055) / 1.055) ** 2.4


def linear_to_srgb(v: float) -> float:
    """Linear 0-1 to an unrounded, unclamped 0-255 channel."""
    if v <= 0.0031308:
        return 12.92 * v * 255
    return (1.055 * (v ** (1 / 2.4)) - 0.055) * 255


# Linear RGB <-> OKLab -------------------------------------------


def linear_rgb_to_oklab(r: float, g: float, b: float) -> Vector3:
    """Linear RGB to OKLab via the LMS intermediate."""
    l, m, s = mat3_mul(RGB_TO_LMS, (r, g, b))
    return mat3_mul(LMS_TO_OKLAB, (cbrt(l), cbrt(m), cbrt(s)))


def oklab_to_linear_rgb(L: float, a: float, b: float) -> Vector3:
    """OKLab to linear RGB; the inverse cubes instead of taking roots."""
    l_, m_, s_ = mat3_mul(OKLAB_TO_LMS, (L, a, b))
    return mat3_mul(LMS_TO_RGB, (l_ * l_ * l_, m_ * m_ * m_, s_ * s_ * s_))


# OKLab <-> OKLCH ------------------------------------------------


def oklab_to_oklch(L: float, a: float, b: float) -> Vector3:
    """Polar form of OKLab. Hue in degrees, [0, 360)."""
    C = math.sqrt(a * a + b * b)
    if C < ACHROMATIC_CHROMA:
        return L, 0.0, 0.0
    return L, C, normalize_hue(math.degrees(math.atan2(b, a)))


def oklch_to_oklab(L: float, C: float, H: float) -> Vector3:
    """Cartesian form of OKLCH."""
    hr = math.radians(H)
    return L, C * math.cos(hr), C * math.sin(hr)


# sRGB <-> OKLCH -------------------------------------------------


def rgb_to_oklab(r: float, g: float, b: float) -> Vector3:
    """sRGB 0-255 to OKLab (L in 0-1)."""
    return linear_rgb_to_oklab(srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))


def rgb_to_oklch(r: float, g: float, b: float) -> Vector3:
    """sRGB 0-255 to OKLCH with lightness on the 0-100 scale."""
    L, C, H = oklab_to_oklch(*rgb_to_oklab(r, g, b))
    return L * 100, C, H


def oklch_to_rgb_unrounded(l: float, c: float, h: float) -> Vector3:
    """OKLCH (lightness 0-100) to raw sRGB floats, possibly out of gamut."""
    R, G, B = oklab_to_linear_rgb(*oklch_to_oklab(l / 100, c, h))
    return linear_to_srgb(R), linear_to_srgb(G), linear_to_srgb(B)


def oklch_to_rgb(l: float, c: float, h: float) -> Tuple[int, int, int]:
    """OKLCH (lightness 0-100) to clamped integer sRGB."""
    r, g, b = oklch_to_rgb_unrounded(l, c, h)
    return to_channel(r), to_channel(g), to_channel(b)


# sRGB <-> HSL ---------------------------------------------------


def rgb_to_hsl(r: float, g: float, b: float) -> Vector3:
    """sRGB 0-255 to HSL. h in deg, s and l in 0-100."""
    R, G, B = r / 255, g / 255, b / 255
    max_val = max(R, G, B)
    min_val = min(R, G, B)
    d = max_val - min_val
    l = (max_val + min_val) / 2
    if d == 0:
        return 0.0, 0.0, l * 100
    s = min(d / (1 - abs(2 * l - 1)), 1.0)
    if max_val == R:
        h = 60 * (((G - B) / d) % 6)
    elif max_val == G:
        h = 60 * ((B - R) / d + 2)
    else:
        h = 60 * ((R - G) / d + 4)
    return normalize_hue(h), s * 100, l * 100


def hsl_to_rgb_unrounded(h: float, s: float, l: float) -> Vector3:
    """HSL (h in deg, s and l in 0-100) to raw sRGB floats."""
    h = normalize_hue(h)
    s, l = s / 100, l / 100
    c = (1 - abs(2 * l - 1)) * s
    hp = h / 60
    x = c * (1 - abs((hp % 2) - 1))

    if hp < 1:
        r1, g1, b1 = c, x, 0.0
    elif hp < 2:
        r1, g1, b1 = x, c, 0.0
    elif hp < 3:
        r1, g1, b1 = 0.0, c, x
    elif hp < 4:
        r1, g1, b1 = 0.0, x, c
    elif hp < 5:
        r1, g1, b1 = x, 0.0, c
    else:
        r1, g1, b1 = c, 0.0, x

    m = l - c / 2
    return (r1 + m) * 255, (g1 + m) * 255, (b1 + m) * 255


def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[int, int, int]:
    """HSL to clamped integer sRGB."""
    r, g, b = hsl_to_rgb_unrounded(h, s, l)
    return to_channel(r), to_channel(g), to_channel(b)

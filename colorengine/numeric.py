"""
Numeric helpers shared by the conversion engine, parser and formatter.
Everything here is pure; channel ranges are handled by the callers.
"""

import math
from typing import Tuple

Vector3 = Tuple[float, float, float]
Matrix3 = Tuple[Vector3, Vector3, Vector3]

# Fixed-point digits tried by format_exact before falling back to repr
MAX_EXACT_PLACES = 24


def clamp(v: float, lo: float, hi: float) -> float:
    """Clamp value between lo and hi."""
    return max(lo, min(hi, v))


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return int(math.floor(x + 0.5))


def round_to(x: float, places: int) -> float:
    """Round half-up to a fixed number of decimal places."""
    scale = 10 ** places
    return math.floor(x * scale + 0.5) / scale


def to_channel(v: float) -> int:
    """Round an unrounded 0-255 value and clamp it into a byte."""
    return int(clamp(round_half_up(v), 0, 255))


def mat3_mul(m: Matrix3, v: Vector3) -> Vector3:
    """Multiply a 3x3 matrix by a column vector."""
    x, y, z = v
    return (
        m[0][0] * x + m[0][1] * y + m[0][2] * z,
        m[1][0] * x + m[1][1] * y + m[1][2] * z,
        m[2][0] * x + m[2][1] * y + m[2][2] * z,
    )


def cbrt(x: float) -> float:
    """Real cube root, defined for negative input too."""
    if x < 0:
        return -((-x) ** (1 / 3))
    return x ** (1 / 3)


def normalize_hue(h: float) -> float:
    """Wrap a hue angle into [0, 360)."""
    h = h % 360
    # -1e-17 % 360 yields 360.0
    return 0.0 if h >= 360 else h


def format_decimal(x: float, places: int, leading_zero: bool = True) -> str:
    """Print x with at most `places` decimals and no trailing zeros."""
    return _trim(f"{round_to(x, places):.{places}f}", leading_zero)


def format_exact(x: float, scale: float = 1.0, leading_zero: bool = True) -> str:
    """Shortest fixed-point text t such that float(t) / scale == x.

    Used where printed values must parse back to the same float, e.g. alpha
    written as `.12345` or as `12.345%` (scale 100).
    """
    target = x * scale
    # x * scale may itself be off by an ulp from the value that divides back to x
    candidates = (target, math.nextafter(target, -math.inf), math.nextafter(target, math.inf))
    for places in range(MAX_EXACT_PLACES + 1):
        for candidate in candidates:
            text = f"{candidate:.{places}f}"
            if float(text) / scale == x:
                return _trim(text, leading_zero)
    return _trim(repr(target), leading_zero)


def _trim(text: str, leading_zero: bool) -> str:
    if "." in text and "e" not in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("", "-0"):
        text = "0"
    if not leading_zero:
        if text.startswith("0."):
            text = text[1:]
        elif text.startswith("-0."):
            text = "-" + text[2:]
    return text

"""
CSS color string parsing into a normalized ColorRecord.
Supported: hex 3/4/6/8, rgb/rgba and hsl/hsla (legacy and modern syntax),
oklch (modern syntax), and the CSS Color 4 named keywords.

Bad input never raises out of `parse`; it comes back as an invalid record
carrying the reason.
"""

import logging
import math
import re
from typing import List, Optional, Tuple

from .conversions import hsl_to_rgb, oklch_to_rgb
from .named import lookup_named
from .numeric import clamp, normalize_hue, to_channel
from .record import AlphaStyle, ColorRecord, InputFamily, StyleHints

logger = logging.getLogger(__name__)

# Chroma that `100%` maps to in oklch(); bare chroma above it is clamped
CHROMA_REFERENCE_MAX = 0.4


class ColorParseError(ValueError):
    """A color string that cannot be turned into a record."""


# Regular expression patterns
num = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?"

NUMBER_RE = re.compile(f"^({num})(%)?$", re.IGNORECASE)
ANGLE_RE = re.compile(f"^({num})(deg|grad|rad|turn)?$", re.IGNORECASE)
HEX_DIGITS_RE = re.compile(r"^[0-9a-f]*$", re.IGNORECASE)
FUNCTION_RE = re.compile(r"^([a-z-]+)\s*\(\s*(.*?)\s*\)$", re.IGNORECASE | re.DOTALL)

FUNCTION_FAMILIES = {
    "rgb": InputFamily.RGB,
    "rgba": InputFamily.RGB,
    "hsl": InputFamily.HSL,
    "hsla": InputFamily.HSL,
    "oklch": InputFamily.OKLCH,
    "oklcha": InputFamily.OKLCH,
}


# Tokens ---------------------------------------------------------


def parse_number(text: str) -> Tuple[float, bool]:
    """Return (value, is_percentage) for a numeric token."""
    m = NUMBER_RE.match(text)
    if not m:
        raise ColorParseError(f"Invalid number: {text!r}")
    value = float(m.group(1))
    if not math.isfinite(value):
        raise ColorParseError(f"Invalid number: {text!r}")
    return value, m.group(2) is not None


def angle_to_deg(text: str) -> float:
    """Convert a hue token to degrees in [0, 360)."""
    m = ANGLE_RE.match(text)
    if not m:
        if text.endswith("%"):
            raise ColorParseError(f"Hue must be a number of degrees: {text!r}")
        raise ColorParseError(f"Invalid hue: {text!r}")
    v = float(m.group(1))
    unit = (m.group(2) or "deg").lower()
    if unit == "grad":
        v = (v * 9) / 10
    elif unit == "rad":
        v = math.degrees(v)
    elif unit == "turn":
        v = v * 360
    if not math.isfinite(v):
        raise ColorParseError(f"Invalid hue: {text!r}")
    return normalize_hue(v)


def parse_alpha(text: Optional[str]) -> Tuple[float, Optional[AlphaStyle]]:
    """Return (alpha 0-1, style) for an optional alpha token."""
    if text is None:
        return 1.0, None
    value, percent = parse_number(text)
    if percent:
        return clamp(value / 100, 0.0, 1.0), "percent"
    return clamp(value, 0.0, 1.0), "number"


def split_components(name: str, body: str) -> Tuple[List[str], Optional[str], bool]:
    """Split a function body into (channels, alpha, legacy)."""
    has_comma = "," in body
    if has_comma and "/" in body:
        raise ColorParseError(f"Mixed legacy and modern syntax: {name}({body})")

    if has_comma:
        if FUNCTION_FAMILIES[name] is InputFamily.OKLCH:
            raise ColorParseError(f"{name}() does not accept comma-separated syntax")
        parts = [p.strip() for p in body.split(",")]
        if len(parts) not in (3, 4):
            raise ColorParseError(
                f"{name}() expects 3 channels and an optional alpha, got {len(parts)} components"
            )
        for part in parts:
            if not part:
                raise ColorParseError(f"Empty component in {name}({body})")
            if len(part.split()) > 1:
                raise ColorParseError(f"Mixed legacy and modern syntax: {name}({body})")
        return parts[:3], parts[3] if len(parts) == 4 else None, True

    left, slash, right = body.partition("/")
    alpha = None
    if slash:
        alpha_parts = right.split()
        if len(alpha_parts) != 1 or "/" in right:
            raise ColorParseError(f"{name}() expects a single alpha value after '/'")
        alpha = alpha_parts[0]
    channels = left.split()
    if len(channels) != 3:
        raise ColorParseError(f"{name}() expects 3 channels, got {len(channels)}")
    return channels, alpha, False


# HEX ------------------------------------------------------------


def parse_hex(s: str) -> ColorRecord:
    """Parse a `#`-prefixed hex literal."""
    digits = s[1:]
    if len(digits) not in (3, 4, 6, 8) or not HEX_DIGITS_RE.fullmatch(digits):
        raise ColorParseError(f"Invalid hex color: {s}")
    length = len(digits)
    hex_upper = any(c.isupper() for c in digits) and not any(c.islower() for c in digits)
    if length in (3, 4):
        digits = "".join(c + c for c in digits)
    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    a = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
    return ColorRecord(
        r=r, g=g, b=b, a=a,
        input_family=InputFamily.HEX,
        style=StyleHints(hex_length=length, hex_upper=hex_upper),
    )


# RGB / HSL / OKLCH ----------------------------------------------


def rgb_channel(text: str) -> int:
    value, percent = parse_number(text)
    return to_channel(value * 255 / 100 if percent else value)


def hsl_component(text: str) -> float:
    # 50% and 50 both mean half saturation/lightness
    value, _ = parse_number(text)
    return clamp(value, 0.0, 100.0)


def oklch_lightness(text: str) -> float:
    value, percent = parse_number(text)
    if not percent:
        raise ColorParseError(f"OKLCH lightness requires a percentage: {text!r}")
    return clamp(value, 0.0, 100.0)


def oklch_chroma(text: str) -> float:
    value, percent = parse_number(text)
    if percent:
        value = value / 100 * CHROMA_REFERENCE_MAX
    if value < 0:
        raise ColorParseError(f"Chroma must be non-negative: {text!r}")
    return min(value, CHROMA_REFERENCE_MAX)


def parse_function(s: str) -> ColorRecord:
    """Parse rgb()/rgba()/hsl()/hsla()/oklch() notation."""
    m = FUNCTION_RE.match(s)
    if not m or m.group(1).lower() not in FUNCTION_FAMILIES:
        raise ColorParseError(f"Unrecognized color format: {s}")
    name = m.group(1).lower()
    family = FUNCTION_FAMILIES[name]
    channels, alpha_text, legacy = split_components(name, m.group(2))
    a, alpha_style = parse_alpha(alpha_text)

    if family is InputFamily.RGB:
        r, g, b = (rgb_channel(t) for t in channels)
    elif family is InputFamily.HSL:
        h = angle_to_deg(channels[0])
        r, g, b = hsl_to_rgb(h, hsl_component(channels[1]), hsl_component(channels[2]))
    else:
        l = oklch_lightness(channels[0])
        c = oklch_chroma(channels[1])
        r, g, b = oklch_to_rgb(l, c, angle_to_deg(channels[2]))

    return ColorRecord(
        r=r, g=g, b=b, a=a,
        input_family=family,
        style=StyleHints(legacy=legacy, alpha_style=alpha_style),
    )


# NAMED ----------------------------------------------------------


def parse_named(s: str) -> ColorRecord:
    if s == "currentcolor":
        raise ColorParseError("currentcolor cannot be resolved without a context")
    found = lookup_named(s)
    if found is None:
        raise ColorParseError(f"Unrecognized color format: {s}")
    r, g, b, a = found
    return ColorRecord(r=r, g=g, b=b, a=a, input_family=InputFamily.NAMED)


# Top-level parse ------------------------------------------------


def _parse(input_str: str) -> ColorRecord:
    if not isinstance(input_str, str):
        raise ColorParseError(f"Color must be a string, got {type(input_str).__name__}")
    s = input_str.strip()
    if not s:
        raise ColorParseError("Empty color string")
    if s.startswith("#"):
        return parse_hex(s)
    lowered = s.lower()
    if "(" in lowered:
        return parse_function(lowered)
    return parse_named(lowered)


def parse(input_str: str) -> ColorRecord:
    """Parse any supported color string. Never raises for bad input."""
    try:
        return _parse(input_str)
    except ColorParseError as e:
        logger.debug("Rejected color %r: %s", input_str, e)
        return ColorRecord.invalid(str(e))


# Construction helpers -------------------------------------------


def from_rgb(
    r: float, g: float, b: float, a: float = 1.0, style: Optional[StyleHints] = None
) -> ColorRecord:
    """Build a valid rgb-family record from raw channels, clamping them."""
    return ColorRecord(
        r=to_channel(r), g=to_channel(g), b=to_channel(b),
        a=clamp(a, 0.0, 1.0),
        input_family=InputFamily.RGB,
        style=style or StyleHints(),
    )


def from_hsl(
    h: float, s: float, l: float, a: float = 1.0, style: Optional[StyleHints] = None
) -> ColorRecord:
    """Build a valid hsl-family record; s and l are on the 0-100 scale."""
    r, g, b = hsl_to_rgb(h, clamp(s, 0.0, 100.0), clamp(l, 0.0, 100.0))
    record = from_rgb(r, g, b, a, style)
    record.input_family = InputFamily.HSL
    return record


def from_oklch(
    l: float, c: float, h: float, a: float = 1.0, style: Optional[StyleHints] = None
) -> ColorRecord:
    """Build a valid oklch-family record; lightness is on the 0-100 scale."""
    r, g, b = oklch_to_rgb(clamp(l, 0.0, 100.0), max(c, 0.0), h)
    record = from_rgb(r, g, b, a, style)
    record.input_family = InputFamily.OKLCH
    return record

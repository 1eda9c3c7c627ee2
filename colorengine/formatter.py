"""
Render a ColorRecord back to text, mirroring the style it was written in.
"""

from typing import List, Literal, Optional

from .numeric import format_decimal, format_exact, normalize_hue, round_half_up, to_channel
from .record import AlphaStyle, ColorRecord, InputFamily

TargetFamily = Literal[
    "auto", "hex", "hexa", "hexShort", "rgb", "rgba", "hsl", "hsla", "oklch", "oklcha"
]

TARGETS = ("auto", "hex", "hexa", "hexShort", "rgb", "rgba", "hsl", "hsla", "oklch", "oklcha")

# Display precision for chroma; alpha is printed exactly
CHROMA_DECIMALS = 4


# Numbers --------------------------------------------------------


def format_alpha(a: float, style: Optional[AlphaStyle]) -> str:
    """Shortest alpha text that parses back to exactly `a`."""
    if style == "percent":
        return format_exact(a, scale=100) + "%"
    return format_exact(a, leading_zero=False)


def format_hue(h: float) -> str:
    return str(round_half_up(normalize_hue(h)) % 360)


def format_percent(v: float) -> str:
    return f"{round_half_up(v)}%"


# HEX ------------------------------------------------------------


def format_hex(record: ColorRecord, with_alpha: bool, upper: bool = False) -> str:
    digits = f"{record.r:02x}{record.g:02x}{record.b:02x}"
    if with_alpha:
        digits += f"{to_channel(record.a * 255):02x}"
    return "#" + (digits.upper() if upper else digits)


def format_hex_short(record: ColorRecord, upper: bool = False) -> Optional[str]:
    """3/4-digit hex, or None when a channel is not a doubled digit."""
    full = format_hex(record, record.a < 1)[1:]
    pairs = [full[i:i + 2] for i in range(0, len(full), 2)]
    if any(p[0] != p[1] for p in pairs):
        return None
    digits = "".join(p[0] for p in pairs)
    return "#" + (digits.upper() if upper else digits)


# Functional -----------------------------------------------------


def _functional(
    name: str,
    channels: List[str],
    alpha: Optional[str],
    legacy: bool,
) -> str:
    if legacy:
        if alpha is not None:
            return f"{name}a({', '.join(channels + [alpha])})"
        return f"{name}({', '.join(channels)})"
    body = " ".join(channels)
    if alpha is not None:
        body += f" / {alpha}"
    return f"{name}({body})"


def format_rgb(record: ColorRecord, legacy: bool, alpha: Optional[str]) -> str:
    return _functional("rgb", [str(record.r), str(record.g), str(record.b)], alpha, legacy)


def format_hsl(record: ColorRecord, legacy: bool, alpha: Optional[str]) -> str:
    h, s, l = record.hsl()
    return _functional("hsl", [format_hue(h), format_percent(s), format_percent(l)], alpha, legacy)


def format_oklch(record: ColorRecord, alpha: Optional[str]) -> str:
    l, c, h = record.oklch()
    channels = [format_percent(l), format_decimal(c, CHROMA_DECIMALS), format_hue(h)]
    return _functional("oklch", channels, alpha, legacy=False)


# Dispatch -------------------------------------------------------


def resolve_auto(record: ColorRecord) -> str:
    """Concrete target that reproduces the record's own family."""
    family = record.input_family
    if family is InputFamily.HEX:
        if record.style.hex_length in (3, 4) and format_hex_short(record) is not None:
            return "hexShort"
        if record.style.hex_length in (4, 8) or record.a < 1:
            return "hexa"
        return "hex"
    if family in (InputFamily.RGB, InputFamily.NAMED):
        return "rgb"
    if family is InputFamily.HSL:
        return "hsl"
    if family is InputFamily.OKLCH:
        return "oklch"
    return "hex"


def format_color(
    record: ColorRecord,
    target: TargetFamily = "auto",
    legacy: Optional[bool] = None,
    alpha_style: Optional[AlphaStyle] = None,
) -> Optional[str]:
    """Render `record` in `target` form.

    `legacy` left as None means modern syntax, except for "auto" where the
    record's own hint is used. `alpha_style` left as None follows the
    record's hint, falling back to a bare fraction. Returns None for invalid
    records, and for `hexShort` when the color cannot be compacted.
    """
    if target not in TARGETS:
        raise ValueError(f"Unknown target format: {target!r}")
    if not record.valid:
        return None

    style = record.style
    if legacy is None:
        legacy = style.legacy if target == "auto" else False
    if target == "auto":
        target = resolve_auto(record)

    if target == "hex":
        return format_hex(record, False, style.hex_upper)
    if target == "hexa":
        return format_hex(record, True, style.hex_upper)
    if target == "hexShort":
        return format_hex_short(record, style.hex_upper)

    always_alpha = target.endswith("a")
    alpha = None
    if always_alpha or record.a < 1:
        alpha = format_alpha(record.a, alpha_style or style.alpha_style)

    if target in ("rgb", "rgba"):
        return format_rgb(record, legacy, alpha)
    if target in ("hsl", "hsla"):
        return format_hsl(record, legacy, alpha)
    return format_oklch(record, alpha)

"""
The normalized color record produced by the parser.

A record always stores sRGB + alpha and nothing else; HSL and OKLCH are
recomputed from those channels on every request.
"""

from enum import Enum
from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .conversions import rgb_to_hsl, rgb_to_oklch
from .numeric import Vector3, clamp, to_channel

AlphaStyle = Literal["number", "percent"]


class InputFamily(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    OKLCH = "oklch"
    NAMED = "named"
    UNKNOWN = "unknown"


class StyleHints(BaseModel):
    """How the source string was written, so output can mirror it."""

    model_config = ConfigDict(frozen=True)

    legacy: bool = False
    alpha_style: Optional[AlphaStyle] = None
    hex_length: Optional[Literal[3, 4, 6, 8]] = None
    hex_upper: bool = False


class ColorRecord(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    r: int = Field(default=0, ge=0, le=255)
    g: int = Field(default=0, ge=0, le=255)
    b: int = Field(default=0, ge=0, le=255)
    a: float = Field(default=1.0, ge=0.0, le=1.0)
    valid: bool = True
    error: Optional[str] = None
    input_family: InputFamily = InputFamily.UNKNOWN
    style: StyleHints = Field(default_factory=StyleHints)

    @classmethod
    def invalid(cls, error: str) -> "ColorRecord":
        return cls(valid=False, error=error)

    # Structured accessors --------------------------------------

    def rgb(self) -> Optional[Tuple[int, int, int]]:
        if not self.valid:
            return None
        return self.r, self.g, self.b

    def hsl(self) -> Optional[Vector3]:
        """(h 0-360, s 0-100, l 0-100), or None for an invalid record."""
        if not self.valid:
            return None
        return rgb_to_hsl(self.r, self.g, self.b)

    def oklch(self) -> Optional[Vector3]:
        """(l 0-100, c >= 0, h 0-360), or None for an invalid record."""
        if not self.valid:
            return None
        return rgb_to_oklch(self.r, self.g, self.b)

    # Controlled mutations --------------------------------------

    def set_alpha(self, alpha: float) -> "ColorRecord":
        """Assign a clamped alpha in place. Invalid records are left alone."""
        if self.valid:
            self.a = clamp(alpha, 0.0, 1.0)
        return self

    def flatten(self, background: "ColorRecord") -> "ColorRecord":
        """Composite this color over an opaque background, in place.

        The background's own alpha is ignored. Nothing happens when either
        record is invalid.
        """
        if not (self.valid and background.valid):
            return self
        a = self.a
        self.r = to_channel(self.r * a + background.r * (1 - a))
        self.g = to_channel(self.g * a + background.g * (1 - a))
        self.b = to_channel(self.b * a + background.b * (1 - a))
        self.a = 1.0
        return self

from __future__ import annotations

import logging

import pytest

from colorengine import InputFamily, parse
from colorengine.parser import CHROMA_REFERENCE_MAX, from_hsl, from_oklch, from_rgb


def channels(record):
    return record.r, record.g, record.b


# Hex ------------------------------------------------------------


def test_short_hex_expands_each_digit() -> None:
    record = parse("#f0c")
    assert record.valid
    assert channels(record) == (255, 0, 204)
    assert record.a == 1.0
    assert record.input_family is InputFamily.HEX
    assert record.style.hex_length == 3
    assert record.style.hex_upper is False


def test_hex_with_alpha_and_upper_case() -> None:
    record = parse("#FF000080")
    assert channels(record) == (255, 0, 0)
    assert record.a == pytest.approx(128 / 255)
    assert record.style.hex_length == 8
    assert record.style.hex_upper is True


def test_four_digit_hex_carries_alpha() -> None:
    record = parse("#0f08")
    assert channels(record) == (0, 255, 0)
    assert record.a == pytest.approx(0x88 / 255)


def test_hex_is_trimmed() -> None:
    assert channels(parse("  #336699\n")) == (0x33, 0x66, 0x99)


@pytest.mark.parametrize("text", ["#", "#12", "#12345", "#1234567", "#123456789", "#ggg", "#12 34 56"])
def test_bad_hex_is_rejected(text: str) -> None:
    record = parse(text)
    assert not record.valid
    assert "Invalid hex color" in record.error


# RGB ------------------------------------------------------------


def test_legacy_and_modern_rgb_agree_on_channels() -> None:
    legacy = parse("rgba(255, 0, 0, 0.5)")
    modern = parse("rgb(255 0 0 / 50%)")
    assert channels(legacy) == channels(modern) == (255, 0, 0)
    assert legacy.a == pytest.approx(0.5)
    assert modern.a == pytest.approx(0.5)
    assert legacy.style.legacy is True
    assert legacy.style.alpha_style == "number"
    assert modern.style.legacy is False
    assert modern.style.alpha_style == "percent"


def test_rgb_percentages_map_to_full_range() -> None:
    assert channels(parse("rgb(100% 50% 0%)")) == (255, 128, 0)


def test_rgb_out_of_range_is_clamped() -> None:
    record = parse("rgb(300 -5 12.4)")
    assert record.valid
    assert channels(record) == (255, 0, 12)


def test_alpha_is_clamped() -> None:
    assert parse("rgb(0 0 0 / 1.5)").a == 1.0
    assert parse("rgb(0 0 0 / -20%)").a == 0.0


def test_function_names_are_case_insensitive() -> None:
    record = parse("RGB(10 20 30)")
    assert channels(record) == (10, 20, 30)
    assert record.input_family is InputFamily.RGB


def test_rgba_without_alpha_and_rgb_with_alpha_are_accepted() -> None:
    assert parse("rgba(1, 2, 3)").valid
    assert parse("rgb(1, 2, 3, 0.5)").a == pytest.approx(0.5)


def test_no_alpha_means_no_alpha_style() -> None:
    record = parse("rgb(1 2 3)")
    assert record.a == 1.0
    assert record.style.alpha_style is None


@pytest.mark.parametrize(
    "text, message",
    [
        ("rgb(255, 0 0)", "Mixed legacy and modern syntax"),
        ("rgb(255, 0, 0 / .5)", "Mixed legacy and modern syntax"),
        ("rgb(255 0)", "expects 3 channels"),
        ("rgb(1 2 3 4)", "expects 3 channels"),
        ("rgb(1, 2)", "expects 3 channels and an optional alpha"),
        ("rgb(1, 2, 3, 4, 5)", "expects 3 channels and an optional alpha"),
        ("rgb(1 2 3 / .5 / .5)", "single alpha value"),
        ("rgb(1 2 3 /)", "single alpha value"),
        ("rgb(1, , 3)", "Empty component"),
        ("rgb(red 0 0)", "Invalid number"),
        ("rgb()", "expects 3 channels"),
    ],
)
def test_malformed_rgb(text: str, message: str) -> None:
    record = parse(text)
    assert not record.valid
    assert message in record.error


# HSL ------------------------------------------------------------


def test_hsl_modern_and_legacy() -> None:
    assert channels(parse("hsl(120 100% 50%)")) == (0, 255, 0)
    legacy = parse("hsl(0, 100%, 50%)")
    assert channels(legacy) == (255, 0, 0)
    assert legacy.style.legacy is True
    assert legacy.input_family is InputFamily.HSL


def test_hsla_alpha() -> None:
    record = parse("hsla(240, 100%, 50%, 0.25)")
    assert channels(record) == (0, 0, 255)
    assert record.a == pytest.approx(0.25)


def test_hsl_hue_units() -> None:
    assert channels(parse("hsl(0.5turn 100% 50%)")) == (0, 255, 255)
    assert channels(parse("hsl(120deg 100% 50%)")) == (0, 255, 0)
    assert channels(parse("hsl(-240 100% 50%)")) == (0, 255, 0)


def test_hsl_bare_saturation_and_lightness() -> None:
    assert channels(parse("hsl(0 100 50)")) == (255, 0, 0)


def test_hsl_rejects_percentage_hue() -> None:
    record = parse("hsl(10% 100% 50%)")
    assert not record.valid
    assert "Hue must be a number of degrees" in record.error


# OKLCH ----------------------------------------------------------


def test_oklch_extremes() -> None:
    black = parse("oklch(0% 0 0)")
    white = parse("oklch(100% 0 0)")
    assert channels(black) == (0, 0, 0)
    assert channels(white) == (255, 255, 255)
    assert white.input_family is InputFamily.OKLCH


def test_oklch_percent_alpha() -> None:
    record = parse("oklch(70% 0.1 50 / 50%)")
    assert record.valid
    assert record.a == pytest.approx(0.5)
    assert record.style.alpha_style == "percent"


def test_oklcha_keyword_is_accepted() -> None:
    assert parse("oklcha(50% 0.1 200 / .3)").valid


def test_oklch_chroma_percentage_uses_reference_max() -> None:
    assert channels(parse("oklch(60% 50% 140)")) == channels(
        parse(f"oklch(60% {CHROMA_REFERENCE_MAX / 2} 140)")
    )


def test_oklch_chroma_above_reference_is_clamped() -> None:
    assert channels(parse("oklch(60% 0.9 140)")) == channels(parse("oklch(60% 0.4 140)"))


@pytest.mark.parametrize(
    "text, message",
    [
        ("oklch(70 0.1 50)", "OKLCH lightness requires a percentage"),
        ("oklch(50% -0.1 50)", "Chroma must be non-negative"),
        ("oklch(60%, 0.1, 50)", "does not accept comma-separated syntax"),
        ("oklch(60% 0.1)", "expects 3 channels"),
    ],
)
def test_malformed_oklch(text: str, message: str) -> None:
    record = parse(text)
    assert not record.valid
    assert message in record.error


# Named ----------------------------------------------------------


def test_named_colors() -> None:
    record = parse("RebeccaPurple")
    assert channels(record) == (102, 51, 153)
    assert record.input_family is InputFamily.NAMED
    assert parse("transparent").a == 0.0


@pytest.mark.parametrize("text", ["not-a-color", "currentColor", "lab(50 1 1)", "", "   "])
def test_unknown_input_is_invalid(text: str) -> None:
    record = parse(text)
    assert record.valid is False
    assert record.error
    assert record.rgb() is None


def test_unrecognized_format_message() -> None:
    assert parse("not-a-color").error == "Unrecognized color format: not-a-color"


def test_non_string_input_is_invalid() -> None:
    assert parse(None).valid is False  # type: ignore[arg-type]


def test_rejections_are_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="colorengine.parser")
    parse("#12")
    assert "Rejected color" in caplog.text


# Construction helpers -------------------------------------------


def test_from_helpers_clamp_and_tag_family() -> None:
    rgb = from_rgb(300, -1, 127.5, 2.0)
    assert channels(rgb) == (255, 0, 128)
    assert rgb.a == 1.0
    assert rgb.input_family is InputFamily.RGB
    assert from_hsl(120, 100, 50).input_family is InputFamily.HSL
    assert channels(from_hsl(120, 150, 50)) == (0, 255, 0)
    assert channels(from_oklch(100, 0, 0)) == (255, 255, 255)
    assert from_oklch(50, 0.1, 30).input_family is InputFamily.OKLCH

from __future__ import annotations

import pytest

from colorengine import contrast_ratio, parse, relative_luminance, wcag_level


def test_relative_luminance() -> None:
    assert relative_luminance(parse("white")) == pytest.approx(1.0)
    assert relative_luminance(parse("black")) == 0.0


def test_black_on_white_is_21() -> None:
    assert contrast_ratio(parse("black"), parse("white")) == pytest.approx(21.0)
    assert contrast_ratio(parse("white"), parse("black")) == pytest.approx(21.0)


def test_same_color_is_one() -> None:
    assert contrast_ratio(parse("#777"), parse("#777")) == pytest.approx(1.0)


def test_translucent_foreground_is_flattened_first() -> None:
    fg = parse("rgb(0 0 0 / 0)")
    assert contrast_ratio(fg, parse("white")) == pytest.approx(1.0)
    # the caller's record is untouched
    assert fg.a == 0.0


def test_invalid_input(invalid) -> None:
    assert relative_luminance(invalid) is None
    assert contrast_ratio(invalid, parse("white")) is None


@pytest.mark.parametrize(
    "ratio, large, level",
    [
        (21.0, False, "AAA"),
        (7.0, False, "AAA"),
        (4.5, False, "AA"),
        (3.5, False, "AA Large"),
        (2.0, False, "Fail"),
        (4.5, True, "AAA"),
        (3.5, True, "AA"),
        (2.9, True, "Fail"),
    ],
)
def test_wcag_level(ratio: float, large: bool, level: str) -> None:
    assert wcag_level(ratio, large_text=large) == level

from __future__ import annotations

import pytest

from colorengine.conversions import oklch_to_rgb_unrounded
from colorengine.gamut import CHROMA_TOLERANCE, in_srgb_gamut, max_srgb_chroma


def test_boundary_is_tight() -> None:
    chroma = max_srgb_chroma(70, 150, 0.4)
    assert 0 < chroma < 0.4
    assert all(0 <= v <= 255 for v in oklch_to_rgb_unrounded(70, chroma, 150))
    assert not in_srgb_gamut(70, chroma + CHROMA_TOLERANCE, 150)


@pytest.mark.parametrize("hue", [0, 29.23, 90, 150, 200, 264, 330])
def test_boundary_for_several_hues(hue: float) -> None:
    chroma = max_srgb_chroma(60, hue)
    assert in_srgb_gamut(60, chroma, hue)
    assert not in_srgb_gamut(60, chroma + CHROMA_TOLERANCE, hue)


@pytest.mark.parametrize("lightness", [0, 100, -5, 120])
def test_achromatic_ends_return_zero(lightness: float) -> None:
    assert max_srgb_chroma(lightness, 120, 0.4) == 0.0


def test_ceiling_inside_gamut_is_returned() -> None:
    assert max_srgb_chroma(70, 150, 0.01) == 0.01


def test_non_positive_ceiling() -> None:
    assert max_srgb_chroma(50, 10, 0.0) == 0.0


def test_gray_axis_is_in_gamut() -> None:
    assert in_srgb_gamut(50, 0, 0)
    assert in_srgb_gamut(99.9, 0, 200)


def test_srgb_red_sits_on_the_boundary() -> None:
    chroma = max_srgb_chroma(62.7955, 29.2339)
    assert chroma == pytest.approx(0.2577, abs=2e-3)

from __future__ import annotations

import pytest

from prompt_palette.features.color import (
    contrast_ratio,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    hue_distance,
    relative_luminance,
    wrap_hue,
)
from prompt_palette.io.models import HSLColor


def test_primary_colors_convert_to_expected_hex():
    assert hsl_to_hex(HSLColor(0, 100, 50)) == "#ff0000"
    assert hsl_to_hex(HSLColor(120, 100, 50)) == "#00ff00"
    assert hsl_to_hex(HSLColor(240, 100, 50)) == "#0000ff"
    assert hsl_to_hex(HSLColor(0, 0, 100)) == "#ffffff"
    assert hsl_to_hex(HSLColor(0, 0, 0)) == "#000000"


@pytest.mark.parametrize("h", range(0, 360, 15))
@pytest.mark.parametrize("s", [50, 75, 100])
@pytest.mark.parametrize("l", [30, 50, 70])
def test_hex_round_trip_is_stable(h, s, l):
    first = hsl_to_hex(HSLColor(h, s, l))
    again = hsl_to_hex(hex_to_hsl(first))
    assert again == first


def test_malformed_hex_yields_black():
    assert hex_to_hsl("not-a-color").as_tuple() == (0.0, 0.0, 0.0)
    assert hex_to_hsl("#12345").as_tuple() == (0.0, 0.0, 0.0)
    assert hex_to_rgb("zzzzzz") is None


def test_hex_without_hash_is_accepted():
    assert hex_to_rgb("00ff80") == (0, 255, 128)


def test_out_of_range_hsl_is_clamped():
    assert hsl_to_rgb(360 + 120, 150, 50) == hsl_to_rgb(120, 100, 50)


def test_black_white_contrast_is_21():
    black = HSLColor(0, 0, 0)
    white = HSLColor(0, 0, 100)
    assert relative_luminance(black) == pytest.approx(0.0)
    assert relative_luminance(white) == pytest.approx(1.0)
    assert contrast_ratio(black, white) == pytest.approx(21.0)
    assert contrast_ratio(white, black) == pytest.approx(21.0)


def test_hue_helpers_wrap():
    assert wrap_hue(-30) == pytest.approx(330)
    assert wrap_hue(400) == pytest.approx(40)
    assert hue_distance(350, 10) == pytest.approx(20)
    assert hue_distance(0, 180) == pytest.approx(180)

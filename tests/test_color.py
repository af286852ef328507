"""Tests for hex/RGB/HSL conversions and color adjustments."""

import pytest

from ghostty_theme_generator.color import (
    adjust_hue,
    adjust_lightness,
    adjust_saturation,
    blend_colors,
    darken,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    is_valid_hex,
    lighten,
    normalize_hex,
    relative_luminance,
    rgb_to_hex,
    with_opacity,
)


@pytest.mark.parametrize("value", ["#000000", "#ffffff", "#1A2b3C", "#7f7f80", "#e0e0e0"])
def test_rgb_round_trip(value):
    assert rgb_to_hex(*hex_to_rgb(value)) == value.lower()


def test_normalize_hex_expands_and_drops_alpha():
    assert normalize_hex("#ABC") == "#aabbcc"
    assert normalize_hex("#11223344") == "#112233"
    assert normalize_hex("ff0000") == "#ff0000"


@pytest.mark.parametrize("value", ["", "#12345", "red", "#ggg"])
def test_normalize_hex_rejects_garbage(value):
    with pytest.raises(ValueError):
        normalize_hex(value)


def test_is_valid_hex():
    assert is_valid_hex("#abc")
    assert is_valid_hex("#A0B0C0")
    assert not is_valid_hex("abc")
    assert not is_valid_hex("#abcd")
    assert not is_valid_hex(None)


def test_rgb_to_hex_clamps_and_rounds():
    assert rgb_to_hex(-10, 300, 127.5) == "#00ff80"


def test_hex_to_hsl_primary():
    h, s, l = hex_to_hsl("#ff0000")
    assert h == pytest.approx(0)
    assert s == pytest.approx(1)
    assert l == pytest.approx(0.5)


def test_hsl_to_hex():
    assert hsl_to_hex(120, 1, 0.5) == "#00ff00"
    assert hsl_to_hex(0, 0, 1.5) == "#ffffff"


def test_lighten_and_darken():
    assert lighten("#000000", 0.5) == "#808080"
    assert darken("#ffffff", 1) == "#000000"
    assert lighten("#123456", 0) == "#123456"


def test_blend_colors_endpoints():
    assert blend_colors("#000000", "#ffffff", 0) == "#000000"
    assert blend_colors("#000000", "#ffffff", 1) == "#ffffff"
    assert blend_colors("#ff0000", "#ffff00", 0.6) == "#ff9900"


def test_adjustments_clamp():
    assert adjust_lightness("#808080", 1) == "#ffffff"
    assert adjust_lightness("#808080", -1) == "#000000"
    assert hex_to_hsl(adjust_saturation("#ff0000", -1))[1] == pytest.approx(0)


def test_adjust_hue_wraps():
    assert adjust_hue("#ff0000", 120) == "#00ff00"
    assert adjust_hue("#ff0000", 360) == "#ff0000"


def test_with_opacity():
    assert with_opacity("#FF0000", 0.25) == "#ff000040"
    assert with_opacity("#ff000080", 0) == "#ff000000"
    assert with_opacity("#abc", 1) == "#aabbccff"


def test_relative_luminance_extremes():
    assert relative_luminance("#000000") == pytest.approx(0)
    assert relative_luminance("#ffffff") == pytest.approx(1)

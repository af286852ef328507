"""Tests for the extended palette."""

import pytest

from ghostty_theme_generator.color import (
    adjust_hue,
    adjust_lightness,
    adjust_saturation,
    blend_colors,
    is_valid_hex,
)
from ghostty_theme_generator.palette.extender import PRIMARY_HUES, create_extended_palette


def test_primary_hues_come_from_palette(sample_colors):
    extended = create_extended_palette(sample_colors)
    assert extended.primary == {name: sample_colors[slot] for name, slot in PRIMARY_HUES}
    assert extended.foreground == "#e0e0e0"


def test_derived_colors(sample_colors):
    derived = create_extended_palette(sample_colors).derived
    assert len(derived) == 36
    assert all(len(value) == 7 and is_valid_hex(value) for value in derived.values())


@pytest.mark.parametrize("hue", ["red", "green", "yellow", "blue", "purple", "cyan"])
def test_hue_variants(sample_colors, hue):
    extended = create_extended_palette(sample_colors)
    base = extended.primary[hue]
    assert extended.derived[f"{hue}Light"] == adjust_lightness(base, 0.15)
    assert extended.derived[f"{hue}Dark"] == adjust_lightness(base, -0.15)
    assert extended.derived[f"{hue}Muted"] == adjust_saturation(base, -0.30)


def test_special_recipes(sample_colors):
    derived = create_extended_palette(sample_colors).derived
    assert derived["orangeWarm"] == blend_colors("#ff0000", "#ffcc00", 0.6)
    assert derived["lifetime"] == adjust_hue("#33cc66", -30)
    assert derived["destructured"] == blend_colors("#e0e0e0", "#33cccc", 0.35)
    assert derived["typeAnnotation"] == adjust_saturation("#3366ff", -0.20)


def test_defaults_fill_missing_slots():
    derived = create_extended_palette({}).derived
    assert derived["orangeWarm"] == "#ff9900"

"""Tests for the opacity tables and alpha encoding."""

import re

import pytest

from ghostty_theme_generator import color
from ghostty_theme_generator.opacity import (
    OPACITY_LEVELS,
    OPACITY_SEMANTICS,
    blend,
    level,
    opacity_to_hex,
    semantic,
)


def test_tables_are_complete():
    assert len(OPACITY_LEVELS) == 16
    assert len(OPACITY_SEMANTICS) == 10
    assert all(name in OPACITY_LEVELS for name in OPACITY_SEMANTICS.values())
    assert min(OPACITY_LEVELS.values()) == 0.0
    assert max(OPACITY_LEVELS.values()) == 0.75


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        OPACITY_LEVELS["ghost"] = 0.5
    with pytest.raises(TypeError):
        OPACITY_SEMANTICS["hover"] = "solid"


@pytest.mark.parametrize("value", [0, 0.03, 0.19, 0.25, 0.5, 0.75, 1])
def test_opacity_to_hex_format(value):
    assert re.fullmatch(r"[0-9a-f]{2}", opacity_to_hex(value))


def test_opacity_to_hex_values():
    assert opacity_to_hex(0) == "00"
    assert opacity_to_hex(1) == "ff"
    assert opacity_to_hex(0.5) == "80"
    assert opacity_to_hex(0.25) == "40"
    assert opacity_to_hex(-1) == "00"
    assert opacity_to_hex(2) == "ff"


def test_lookups():
    assert level("solid") == 0.5
    assert semantic("selection") == 0.25
    assert semantic("hover") == level("light")
    with pytest.raises(KeyError):
        level("nonexistent")
    with pytest.raises(KeyError):
        semantic("nonexistent")


def test_blend_composites_solid_color():
    assert blend("#ffffff", "#000000", 0.5) == "#808080"
    assert blend("#ff0000", "#0000ff", 1) == "#ff0000"
    assert blend("#ff0000", "#0000ff", 0) == "#0000ff"


def test_alpha_encoding_is_shared_with_color_math():
    assert opacity_to_hex is color.opacity_to_hex

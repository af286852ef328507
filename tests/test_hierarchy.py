"""Tests for the background elevation hierarchy."""

import math

import pytest

from ghostty_theme_generator.color import hex_to_hsl
from ghostty_theme_generator.palette.hierarchy import (
    HIERARCHY_LEVELS,
    SURFACE_ELEMENTS,
    create_hierarchy,
    detect_polarity,
    hierarchy_step,
    map_to_ui_elements,
)


def _lightness(hierarchy):
    return [hex_to_hsl(getattr(hierarchy, name))[2] for name in HIERARCHY_LEVELS]


def test_step_is_logarithmic():
    assert hierarchy_step(0) == pytest.approx(math.log(2) * 0.04)
    assert hierarchy_step(6) == pytest.approx(math.log(8) * 0.04)


@pytest.mark.parametrize("base", ["#404040", "#1e2030", "#283c28"])
def test_dark_hierarchy_is_monotonic(base):
    hierarchy = create_hierarchy(base, "dark")
    assert hierarchy.canvas == base
    values = _lightness(hierarchy)
    assert values == sorted(values)
    assert values[0] < values[-1]


@pytest.mark.parametrize("base", ["#c0c0c0", "#e8e4da"])
def test_light_hierarchy_is_inverted(base):
    values = _lightness(create_hierarchy(base, "light"))
    assert values == sorted(values, reverse=True)
    assert values[0] > values[-1]


def test_black_base_clamps():
    hierarchy = create_hierarchy("#000000")
    assert hierarchy.void == "#000000"
    assert hex_to_hsl(hierarchy.elevated)[2] > 0


def test_unknown_polarity():
    with pytest.raises(ValueError):
        create_hierarchy("#101010", "dim")


def test_detect_polarity():
    assert detect_polarity("#000000") == "dark"
    assert detect_polarity("#1a1a1a") == "dark"
    assert detect_polarity("#ffffff") == "light"


def test_map_to_ui_elements():
    hierarchy = create_hierarchy("#202020")
    surfaces = map_to_ui_elements(hierarchy)
    assert len(surfaces) == len(SURFACE_ELEMENTS)
    assert surfaces["editor.background"] == "#202020"
    assert surfaces["widget.shadow"] == hierarchy.void
    assert surfaces["list.hoverBackground"] == hierarchy.elevated
    assert surfaces["menu.background"] == hierarchy.overlay

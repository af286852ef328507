"""Tests for primary and secondary accent selection."""

from ghostty_theme_generator.color import adjust_lightness, hex_to_hsl
from ghostty_theme_generator.palette.accents import (
    apply_accent_system,
    create_accent_system,
    create_accent_variants,
    select_primary_accent,
    select_secondary_accent,
)
from ghostty_theme_generator.palette.defaults import resolve_palette

# Every candidate for the secondary accent sits close to red
NO_COMPLEMENT = {
    "color1": "#ff0000",
    "color2": "#ff8000",
    "color3": "#ffff00",
    "color4": "#804040",
    "color5": "#806060",
    "color6": "#ff0080",
}


def test_primary_is_most_saturated():
    palette = resolve_palette({"color1": "#806060", "color4": "#0000ff", "color5": "#804080"})
    assert select_primary_accent(palette) == "#0000ff"


def test_primary_tie_keeps_first_slot():
    assert select_primary_accent(resolve_palette({})) == "#ff0000"


def test_secondary_in_complementary_arc():
    palette = resolve_palette({})
    assert select_secondary_accent("#ff0000", palette) == "#00ffff"


def test_secondary_absent_without_complement():
    palette = resolve_palette(NO_COMPLEMENT)
    assert select_secondary_accent("#ff0000", palette) is None
    assert create_accent_system(NO_COMPLEMENT).secondary is None


def test_variants():
    variants = create_accent_variants("#cc3333")
    assert variants.base == "#cc3333"
    assert variants.light == adjust_lightness("#cc3333", 0.12)
    assert variants.dark == adjust_lightness("#cc3333", -0.12)
    assert hex_to_hsl(variants.muted)[1] < hex_to_hsl("#cc3333")[1]


def test_apply_with_secondary():
    accents = create_accent_system({})
    mapped = apply_accent_system(accents, on_accent="#000000")
    assert len(mapped) == 21
    assert mapped["focusBorder"] == "#ff0000"
    assert mapped["button.foreground"] == "#000000"
    assert mapped["selection.background"] == "#ff000040"
    assert mapped["textLink.foreground"] == accents.secondary.base
    assert mapped["textLink.activeForeground"] == accents.secondary.light


def test_apply_without_secondary_uses_primary_variants():
    accents = create_accent_system(NO_COMPLEMENT)
    mapped = apply_accent_system(accents, on_accent="#101010")
    assert mapped["textLink.foreground"] == accents.primary.light
    assert mapped["textLink.activeForeground"] == accents.primary.base
    assert mapped["statusBarItem.remoteBackground"] == accents.primary.dark
    assert "editor.selectionBackground" not in mapped

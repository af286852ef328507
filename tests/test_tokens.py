"""Tests for syntax token rules."""

from ghostty_theme_generator.palette.defaults import resolve_palette
from ghostty_theme_generator.vscode.tokens import (
    JSON_RAINBOW_SLOTS,
    TokenColor,
    build_token_colors,
    json_rainbow_scope,
    json_rainbow_token_colors,
    token_color_to_dict,
)


def _by_name(tokens):
    return {token.name: token for token in tokens}


def test_json_rainbow_scope_nests_per_level():
    assert json_rainbow_scope(0) == (
        "source.json meta.structure.dictionary.json support.type.property-name.json"
    )
    scope = json_rainbow_scope(3)
    assert scope.startswith("source.json meta.structure.dictionary.json ")
    assert scope.count("meta.structure.dictionary.value.json") == 3
    assert scope.endswith(" support.type.property-name.json")


def test_json_rainbow_levels(sample_colors):
    palette = resolve_palette(sample_colors)
    tokens = json_rainbow_token_colors(palette)
    assert len(tokens) == 9
    assert [token.foreground for token in tokens] == [palette[slot] for slot in JSON_RAINBOW_SLOTS]
    assert len({token.scope for token in tokens}) == 9


def test_base_rules(sample_colors):
    rules = _by_name(build_token_colors(sample_colors))
    assert rules["Comments"].foreground == sample_colors["color8"]
    assert rules["Comments"].font_style == "italic"
    assert rules["Keywords and Storage"].foreground == sample_colors["color10"]
    assert rules["Strings"].foreground == sample_colors["color1"]
    assert rules["Functions"].foreground == sample_colors["color12"]
    assert rules["Classes and Support"].foreground == sample_colors["color5"]
    assert rules["Numbers and Constants"].foreground == sample_colors["color9"]
    assert rules["Operators and Punctuation"].foreground == sample_colors["color6"]
    assert rules["Tags"].foreground == sample_colors["color11"]
    assert rules["Variables"].foreground == "#e0e0e0"
    assert rules["Invalid"].font_style == "underline"


def test_json_levels_come_last(sample_colors):
    tokens = build_token_colors(sample_colors)
    assert [token.name for token in tokens[-9:]] == [f"JSON Key - Level {i}" for i in range(9)]


def test_token_color_to_dict():
    assert token_color_to_dict(TokenColor("Strings", ("string",), "#ff0000")) == {
        "name": "Strings",
        "scope": ["string"],
        "settings": {"foreground": "#ff0000"},
    }
    url = token_color_to_dict(TokenColor("URL", ("*url*",), None, "underline"))
    assert url["settings"] == {"fontStyle": "underline"}

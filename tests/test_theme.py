"""Tests for theme assembly, naming and serialization."""

import json

import pytest

from ghostty_theme_generator.errors import FileProcessingError, ValidationError
from ghostty_theme_generator.vscode.theme import (
    build_vscode_theme,
    extract_color_palette,
    generate_theme,
    resolve_theme_name,
    theme_to_dict,
    theme_to_json,
)


@pytest.mark.parametrize(
    "file_path,expected",
    [
        ("/x/root.txt", "eidolon-root"),
        ("/x/My_Theme.txt", "my-theme"),
        ("/x/Solarized Dark (Patched)", "solarized-dark-patched"),
        ("/x/!!!.txt", "unknown-theme"),
        (None, "unknown-theme"),
    ],
)
def test_resolve_theme_name_from_file(file_path, expected):
    assert resolve_theme_name(file_path) == expected


def test_resolve_theme_name_priority():
    meta = {"name": "Night Owl"}
    assert resolve_theme_name("/x/root.txt", "  Custom  ", meta) == "Custom"
    assert resolve_theme_name("/x/root.txt", "   ", meta) == "Night Owl"
    assert resolve_theme_name("/x/root.txt", None, {"name": " "}) == "eidolon-root"


def test_resolve_theme_name_aliases(monkeypatch):
    assert resolve_theme_name("/x/root.txt", aliases={}) == "root"
    assert resolve_theme_name("/x/dark.txt", aliases={"dark": "my-dark"}) == "my-dark"
    monkeypatch.setenv("THEME_NAME_ALIASES", "dark=env-dark")
    assert resolve_theme_name("/x/dark.txt") == "env-dark"


def test_build_vscode_theme(sample_colors):
    theme = build_vscode_theme(sample_colors, "sample")
    assert theme.name == "sample"
    assert theme.type == "dark"
    assert theme.colors["editor.background"] == "#000000"
    assert theme.token_colors


def test_build_errors_carry_file_path():
    with pytest.raises(FileProcessingError) as excinfo:
        build_vscode_theme({"color1": "not-a-color"}, "broken", file_path="/x/broken.txt")
    assert excinfo.value.path.name == "broken.txt"
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_json_is_deterministic(sample_colors):
    first = theme_to_json(build_vscode_theme(sample_colors, "sample"))
    second = theme_to_json(build_vscode_theme(dict(sample_colors), "sample"))
    assert first == second
    assert first.endswith("}\n")


def test_theme_dict_layout(sample_colors):
    data = json.loads(theme_to_json(build_vscode_theme(sample_colors, "sample")))
    assert set(data) == {"name", "type", "semanticHighlighting", "colors", "tokenColors"}
    assert data == theme_to_dict(build_vscode_theme(sample_colors, "sample"))
    assert data["tokenColors"][0]["scope"][0] == "comment"


def test_generate_theme_end_to_end(write_theme):
    path = write_theme(name="root.txt")
    theme, parsed = generate_theme(path)
    assert parsed.validation.warnings == ()
    assert theme.name == "eidolon-root"
    assert theme.colors["editor.background"] == "#000000"
    assert theme.colors["activityBar.background"] == "#1a1a1a"
    assert theme.colors["editor.selectionBackground"] == "#ff000040"


def test_generate_theme_prefers_metadata_name(write_theme, sample_theme_text):
    path = write_theme("name = Night Owl\n" + sample_theme_text)
    theme, _ = generate_theme(path)
    assert theme.name == "Night Owl"
    theme, _ = generate_theme(path, theme_name="Explicit")
    assert theme.name == "Explicit"


def test_generate_theme_propagates_validation_errors(write_theme, monkeypatch):
    path = write_theme()
    monkeypatch.setenv("THEME_MAX_LINES", "3")
    with pytest.raises(ValidationError):
        generate_theme(path)


def test_extract_color_palette(sample_colors):
    preview = extract_color_palette(sample_colors)
    assert preview["background"] == "#1a1a1a"
    assert preview["normal"][1] == "#ff0000"
    assert len(preview["bright"]) == 8
    assert preview["roles"]["red"].hex == "#ff0000"
    assert "Errors" in preview["roles"]["red"].usage

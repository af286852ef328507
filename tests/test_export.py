"""Tests for writing theme files."""

import json

from ghostty_theme_generator.export import export_theme, gallery_banner_color, theme_file_name
from ghostty_theme_generator.vscode.theme import build_vscode_theme


def test_theme_file_name():
    assert theme_file_name("night-owl") == "night-owl-color-theme.json"


def test_export_theme_default_package_name(tmp_path, sample_colors):
    theme = build_vscode_theme(sample_colors, "My Theme")
    path = export_theme(theme, tmp_path)
    assert path == str(tmp_path / "themes" / "my-theme-color-theme.json")
    data = json.loads((tmp_path / "themes" / "my-theme-color-theme.json").read_text())
    assert data["name"] == "My Theme"
    assert data["colors"]["editor.background"] == "#000000"


def test_export_theme_explicit_package_name(tmp_path, sample_colors):
    theme = build_vscode_theme(sample_colors, "My Theme")
    path = export_theme(theme, tmp_path / "ext", package_name="custom")
    assert path.endswith("custom-color-theme.json")


def test_gallery_banner_color():
    assert gallery_banner_color({"color0": "#111111", "background": "#222222"}) == "#111111"
    assert gallery_banner_color({"background": "#222222"}) == "#222222"
    assert gallery_banner_color({}) == "#000000"

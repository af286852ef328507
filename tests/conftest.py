"""Shared fixtures for theme generator tests."""

import pytest

from ghostty_theme_generator.palette.loader import parse_theme_text

SAMPLE_THEME = """\
# Sample dark theme
// exported from ghostty
background = #1a1a1a
foreground = #e0e0e0
cursor-color = #f0f0f0
selection-background = #333333
selection-foreground = #ffffff
palette = 0=#000000
palette = 1=#ff0000
palette = 2=#33cc66
palette = 3=#ffcc00
palette = 4=#3366ff
palette = 5=#cc33cc
palette = 6=#33cccc
palette = 7=#cccccc
palette = 8=#666666
palette = 9=#ff6666
palette = 10=#66ff99
palette = 11=#ffdd55
palette = 12=#6699ff
palette = 13=#ff66ff
palette = 14=#66ffff
palette = 15=#ffffff
"""


@pytest.fixture
def sample_theme_text():
    return SAMPLE_THEME


@pytest.fixture
def write_theme(tmp_path):
    """Write theme content to `tmp_path/<name>` and return the path."""

    def _write(content=SAMPLE_THEME, name="sample.txt"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_colors(sample_theme_text):
    colors, _, warnings = parse_theme_text(sample_theme_text)
    assert warnings == []
    return colors


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep limit and alias overrides from the host environment out of tests."""
    for name in (
        "THEME_MAX_FILE_SIZE",
        "THEME_MAX_LINES",
        "THEME_MAX_CONFIG_LINES",
        "THEME_MAX_KEY_LENGTH",
        "THEME_MAX_VALUE_LENGTH",
        "THEME_NAME_ALIASES",
    ):
        monkeypatch.delenv(name, raising=False)

"""Tests for environment-driven limits and name aliases."""

import logging

from ghostty_theme_generator.config import (
    DEFAULT_LIMITS,
    DEFAULT_NAME_ALIASES,
    load_limits,
    load_name_aliases,
    parse_size,
)


def test_defaults():
    assert DEFAULT_LIMITS.max_file_size == 1024 * 1024
    assert DEFAULT_LIMITS.max_lines == 10000
    assert DEFAULT_LIMITS.max_config_lines == 1000
    assert DEFAULT_LIMITS.max_key_length == 100
    assert DEFAULT_LIMITS.max_value_length == 200
    assert load_limits({}) == DEFAULT_LIMITS


def test_parse_size():
    assert parse_size("512") == 512
    assert parse_size("64K") == 64 * 1024
    assert parse_size("2m") == 2 * 1024 * 1024
    assert parse_size("1GB") == 1024**3
    assert parse_size("1.5M") is None
    assert parse_size("lots") is None


def test_load_limits_overrides():
    limits = load_limits({"THEME_MAX_FILE_SIZE": "64K", "THEME_MAX_LINES": "50"})
    assert limits.max_file_size == 64 * 1024
    assert limits.max_lines == 50
    assert limits.max_config_lines == DEFAULT_LIMITS.max_config_lines


def test_load_limits_reads_process_environment(monkeypatch):
    monkeypatch.setenv("THEME_MAX_KEY_LENGTH", "12")
    assert load_limits().max_key_length == 12


def test_invalid_limits_fall_back_with_warning(caplog):
    with caplog.at_level(logging.WARNING):
        limits = load_limits({"THEME_MAX_LINES": "abc", "THEME_MAX_FILE_SIZE": "0"})
    assert limits == DEFAULT_LIMITS
    assert "THEME_MAX_LINES" in caplog.text
    assert "THEME_MAX_FILE_SIZE" in caplog.text


def test_name_aliases():
    assert load_name_aliases({}) == DEFAULT_NAME_ALIASES
    aliases = load_name_aliases({"THEME_NAME_ALIASES": "Dark=my-dark, root=root-theme"})
    assert aliases == {"root": "root-theme", "dark": "my-dark"}


def test_malformed_alias_is_skipped(caplog):
    with caplog.at_level(logging.WARNING):
        aliases = load_name_aliases({"THEME_NAME_ALIASES": "bogus,=x,ok=fine"})
    assert aliases["ok"] == "fine"
    assert "bogus" not in aliases
    assert "malformed name alias" in caplog.text


def test_non_ascii_digits_are_ignored(caplog):
    with caplog.at_level(logging.WARNING):
        limits = load_limits({"THEME_MAX_LINES": "²", "THEME_MAX_KEY_LENGTH": "٣٠"})
    assert limits.max_lines == DEFAULT_LIMITS.max_lines
    assert limits.max_key_length == 30
    assert "THEME_MAX_LINES" in caplog.text

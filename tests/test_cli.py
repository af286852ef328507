"""Tests for the command line front end."""

from ghostty_theme_generator.cli import main


def test_generates_theme_file(write_theme, tmp_path, capsys):
    path = write_theme(name="root.txt")
    out_dir = tmp_path / "out"
    assert main([str(path), "-o", str(out_dir)]) == 0
    assert (out_dir / "themes" / "eidolon-root-color-theme.json").exists()
    output = capsys.readouterr().out
    assert "Theme: eidolon-root (dark)" in output
    assert "Warnings: 0" in output
    assert "Exported:" in output


def test_name_and_package_options(write_theme, tmp_path):
    path = write_theme()
    assert main([str(path), "-o", str(tmp_path), "--name", "Ocean", "--package-name", "ocean-theme"]) == 0
    assert (tmp_path / "themes" / "ocean-theme-color-theme.json").exists()


def test_defaults_output_to_input_directory(write_theme, tmp_path):
    path = write_theme(name="Night.txt")
    assert main([str(path)]) == 0
    assert (tmp_path / "themes" / "night-color-theme.json").exists()


def test_missing_file_exit_code(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 1


def test_validation_error_exit_code(write_theme, monkeypatch):
    path = write_theme()
    monkeypatch.setenv("THEME_MAX_FILE_SIZE", "16")
    assert main([str(path), "-v"]) == 2

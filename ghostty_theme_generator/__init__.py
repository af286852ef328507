from .errors import FileProcessingError, ThemeGeneratorError, ValidationError
from .vscode import VSCodeTheme, build_vscode_theme, generate_theme, resolve_theme_name, theme_to_json

__version__ = "0.1.0"

__all__ = [
    "FileProcessingError",
    "ThemeGeneratorError",
    "ValidationError",
    "VSCodeTheme",
    "build_vscode_theme",
    "generate_theme",
    "resolve_theme_name",
    "theme_to_json",
]

from .styles import build_vscode_colors
from .theme import (
    VSCodeTheme,
    build_vscode_theme,
    extract_color_palette,
    generate_theme,
    resolve_theme_name,
    theme_to_dict,
    theme_to_json,
)
from .tokens import TokenColor, build_token_colors

__all__ = [
    "TokenColor",
    "VSCodeTheme",
    "build_token_colors",
    "build_vscode_colors",
    "build_vscode_theme",
    "extract_color_palette",
    "generate_theme",
    "resolve_theme_name",
    "theme_to_dict",
    "theme_to_json",
]

from .accents import apply_accent_system, create_accent_system
from .defaults import DEFAULT_PALETTE, create_color_role_map, resolve_palette
from .extender import create_extended_palette
from .hierarchy import create_hierarchy, map_to_ui_elements
from .loader import parse_theme_file, parse_theme_text

__all__ = [
    "DEFAULT_PALETTE",
    "apply_accent_system",
    "create_accent_system",
    "create_color_role_map",
    "create_extended_palette",
    "create_hierarchy",
    "map_to_ui_elements",
    "parse_theme_file",
    "parse_theme_text",
    "resolve_palette",
]

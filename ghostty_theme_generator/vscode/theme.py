import json
import logging
import re
from collections import namedtuple
from pathlib import Path

from ..config import load_name_aliases
from ..errors import FileProcessingError, ThemeGeneratorError
from ..palette.defaults import PALETTE_SLOTS, create_color_role_map, resolve_palette
from ..palette.loader import parse_theme_file
from .styles import build_vscode_colors
from .tokens import build_token_colors, token_color_to_dict

logger = logging.getLogger(__name__)

VSCodeTheme = namedtuple("VSCodeTheme", ["name", "type", "colors", "token_colors"])

UNKNOWN_THEME_NAME = "unknown-theme"
_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


def kebab_case(text):
    return _NON_SLUG_RE.sub("-", text.lower()).strip("-")


def resolve_theme_name(file_path, explicit_name=None, meta=None, aliases=None):
    """Pick the display name for a theme.

    An explicit name wins, then the `name` metadata line from the file, then
    the file name in kebab-case. Derived file names go through the alias
    table so well-known files keep their published names.

    Args:
        file_path: Source theme file path
        explicit_name: Name given by the caller, if any
        meta: Metadata dict from the parser
        aliases: Derived name -> published name (defaults to the configured table)

    Returns:
        Non-empty theme name string
    """
    if explicit_name and explicit_name.strip():
        return explicit_name.strip()

    meta_name = (meta or {}).get("name", "")
    if meta_name.strip():
        return meta_name.strip()

    if aliases is None:
        aliases = load_name_aliases()
    derived = kebab_case(Path(file_path).stem) if file_path else ""
    if not derived:
        return UNKNOWN_THEME_NAME
    return aliases.get(derived, derived)


def build_vscode_theme(colors, theme_name, file_path=None):
    """Assemble the UI colors and token rules into a VS Code theme.

    Args:
        colors: GhosttyColorSet dict
        theme_name: Display name for the theme
        file_path: Source file, attached to any error raised while building

    Returns:
        VSCodeTheme
    """
    try:
        ui_colors = build_vscode_colors(colors)
        token_colors = build_token_colors(colors)
    except ThemeGeneratorError:
        raise
    except (KeyError, TypeError, ValueError) as exc:
        raise FileProcessingError(
            f"Failed to build theme: {exc}",
            path=file_path,
            details={"themeName": theme_name},
        ) from exc

    logger.debug("Built %s with %d colors and %d token rules", theme_name, len(ui_colors), len(token_colors))
    return VSCodeTheme(name=theme_name, type="dark", colors=ui_colors, token_colors=token_colors)


def generate_theme(file_path, theme_name=None, limits=None, aliases=None):
    """Parse a Ghostty theme file and build its VS Code theme.

    Returns:
        tuple: (VSCodeTheme, ParsedThemeFile)
    """
    parsed = parse_theme_file(file_path, limits=limits)
    name = resolve_theme_name(parsed.metadata.file_path, theme_name, parsed.meta, aliases)
    theme = build_vscode_theme(parsed.colors, name, file_path=parsed.metadata.file_path)
    logger.info("Generated theme %r from %s", name, parsed.metadata.file_name)
    return theme, parsed


def theme_to_dict(theme):
    return {
        "name": theme.name,
        "type": theme.type,
        "semanticHighlighting": True,
        "colors": dict(theme.colors),
        "tokenColors": [token_color_to_dict(token) for token in theme.token_colors],
    }


def theme_to_json(theme):
    """Serialize a theme as pretty-printed JSON with a trailing newline."""
    return json.dumps(theme_to_dict(theme), indent=2) + "\n"


def extract_color_palette(colors):
    """Preview projection of a color set.

    Returns:
        dict with `background`, `foreground`, `normal` (slots 0-7), `bright`
        (slots 8-15) and `roles` (ColorRole per slot)
    """
    palette = resolve_palette(colors)
    return {
        "background": palette["background"],
        "foreground": palette["foreground"],
        "normal": [palette[slot] for slot in PALETTE_SLOTS[:8]],
        "bright": [palette[slot] for slot in PALETTE_SLOTS[8:]],
        "roles": create_color_role_map(colors),
    }

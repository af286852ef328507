import logging
import os

from ..palette.defaults import DEFAULT_PALETTE
from ..vscode.theme import kebab_case, theme_to_json

logger = logging.getLogger(__name__)

THEMES_DIR = "themes"


def theme_file_name(package_name):
    return f"{package_name}-color-theme.json"


def gallery_banner_color(colors):
    """Marketplace banner color: color0, else background, else black."""
    return colors.get("color0") or colors.get("background") or DEFAULT_PALETTE["color0"]


def export_theme(theme, output_dir, package_name=None):
    """Write a theme as `<output_dir>/themes/<package-name>-color-theme.json`.

    Args:
        theme: VSCodeTheme to serialize
        output_dir: Extension root directory
        package_name: Extension package name (defaults to the theme name in kebab-case)

    Returns:
        Path of the written file
    """
    package_name = package_name or kebab_case(theme.name) or "theme"
    themes_dir = os.path.join(output_dir, THEMES_DIR)
    os.makedirs(themes_dir, exist_ok=True)

    filepath = os.path.join(themes_dir, theme_file_name(package_name))
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(theme_to_json(theme))

    logger.info("Wrote %s", filepath)
    return filepath

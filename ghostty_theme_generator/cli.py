import argparse
import logging
import os
import sys

from .errors import FileProcessingError, ValidationError
from .export import export_theme, gallery_banner_color
from .vscode import extract_color_palette, generate_theme

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate a VS Code color theme from a Ghostty theme file"
    )
    parser.add_argument(
        "theme_file",
        help="Path to the Ghostty theme file",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=None,
        help="Output directory (default: same as input file)",
    )
    parser.add_argument(
        "--name",
        help="Theme name (default: `name` line in the file, otherwise derived from filename)",
    )
    parser.add_argument(
        "--package-name",
        help="Extension package name used for the theme file (default: theme name in kebab-case)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return _run(args)
    except ValidationError as exc:
        logger.error("%s", exc)
        return 2
    except FileProcessingError as exc:
        logger.error("%s", exc)
        for suggestion in exc.suggestions:
            logger.info("Suggestion: %s", suggestion)
        return 1


def _print_palette(colors):
    preview = extract_color_palette(colors)
    print(f"Background: {preview['background']}")
    print(f"Foreground: {preview['foreground']}")
    print("Normal:     " + " ".join(preview["normal"]))
    print("Bright:     " + " ".join(preview["bright"]))


def _run(args):
    theme_path = args.theme_file
    output_dir = args.output or os.path.dirname(theme_path) or "."

    print(f"Loading theme: {theme_path}")
    theme, parsed = generate_theme(theme_path, theme_name=args.name)

    _print_palette(parsed.colors)
    output_path = export_theme(theme, output_dir, package_name=args.package_name)

    warnings = parsed.validation.warnings
    print("\n" + "=" * 60)
    print(f"Theme: {theme.name} ({theme.type})")
    print(f"Colors: {len(theme.colors)}, token rules: {len(theme.token_colors)}")
    print(f"Warnings: {len(warnings)}")
    print("Exported:")
    print(f"  - {output_path}")
    print(f"\nGallery banner: {gallery_banner_color(parsed.colors)}")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())

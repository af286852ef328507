"""Fallback palette used whenever a theme file leaves a slot undefined.

Every mapper resolves colors through `resolve_palette`, so the fallbacks
live in exactly one place.
"""

from collections import namedtuple
from types import MappingProxyType

from ..color import normalize_hex

ColorRole = namedtuple("ColorRole", ["name", "hex", "usage"])

TRANSPARENT = "#00000000"

DEFAULT_PALETTE = MappingProxyType(
    {
        "color0": "#000000",
        "color1": "#ff0000",
        "color2": "#00ff00",
        "color3": "#ffff00",
        "color4": "#0000ff",
        "color5": "#ff00ff",
        "color6": "#00ffff",
        "color7": "#ffffff",
        "color8": "#808080",
        "color9": "#ff8080",
        "color10": "#80ff80",
        "color11": "#ffff80",
        "color12": "#8080ff",
        "color13": "#ff80ff",
        "color14": "#80ffff",
        "color15": "#ffffff",
    }
)

PALETTE_SLOTS = tuple(f"color{i}" for i in range(16))

# Semantic key -> palette slot it falls back to
SEMANTIC_FALLBACKS = MappingProxyType(
    {
        "background": "color0",
        "foreground": "color15",
        "cursor": "color15",
        "cursor_text": "color0",
        "selection_background": "color4",
        "selection_foreground": "color15",
    }
)

# (role key, display name, usage)
COLOR_ROLES = (
    ("black", "Black", ("Terminal black", "Dark backgrounds", "Shadows")),
    ("red", "Red", ("Errors", "Strings", "Selection")),
    ("green", "Green", ("Success messages", "Diff additions")),
    ("yellow", "Yellow", ("Warnings", "Find matches", "Modified files")),
    ("blue", "Blue", ("Info messages", "Links", "Debugging")),
    ("magenta", "Magenta", ("Classes", "Support types", "Conflicts")),
    ("cyan", "Cyan", ("Operators", "Punctuation", "Brackets")),
    ("white", "White", ("Text", "Light backgrounds")),
    ("bright_black", "Bright Black", ("Comments", "Disabled text", "Guides")),
    ("bright_red", "Bright Red", ("Numbers", "Constants")),
    ("bright_green", "Bright Green", ("Keywords", "Storage")),
    ("bright_yellow", "Bright Yellow", ("Tags", "Important notes")),
    ("bright_blue", "Bright Blue", ("Functions", "Active links")),
    ("bright_magenta", "Bright Magenta", ("Special constants", "Accent colors")),
    ("bright_cyan", "Bright Cyan", ("Support functions", "Helper text")),
    ("bright_white", "Bright White", ("Primary text", "Main content")),
)


def resolve_palette(colors):
    """Return a complete palette: all 16 slots plus the semantic keys.

    Args:
        colors: GhosttyColorSet dict as produced by the parser

    Returns:
        new dict with every slot and semantic key populated, all as `#rrggbb`
    """
    palette = {
        slot: normalize_hex(colors.get(slot) or DEFAULT_PALETTE[slot]) for slot in PALETTE_SLOTS
    }
    for key, slot in SEMANTIC_FALLBACKS.items():
        palette[key] = normalize_hex(colors[key]) if colors.get(key) else palette[slot]
    return palette


def create_color_role_map(colors):
    """Map the 16 palette slots to named, documented roles for previews."""
    palette = resolve_palette(colors)
    return {
        key: ColorRole(name=name, hex=palette[slot], usage=usage)
        for slot, (key, name, usage) in zip(PALETTE_SLOTS, COLOR_ROLES)
    }

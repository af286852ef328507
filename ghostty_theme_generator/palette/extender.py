"""Extended palette: named variants of the six primary terminal hues.

Every derived color is a single named transform of palette input, so a
generated theme keeps the character of the source scheme instead of
introducing colors of its own.
"""

from collections import namedtuple

from ..color import adjust_hue, adjust_lightness, adjust_saturation, blend_colors
from .defaults import resolve_palette

ExtendedPalette = namedtuple("ExtendedPalette", ["primary", "derived", "foreground"])

# Hue name -> palette slot
PRIMARY_HUES = (
    ("red", "color1"),
    ("green", "color2"),
    ("yellow", "color3"),
    ("blue", "color4"),
    ("purple", "color5"),
    ("cyan", "color6"),
)

VARIANT_LIGHTNESS_SHIFT = 0.15
VARIANT_MUTE_SHIFT = 0.30


def _variants(name, color):
    return {
        f"{name}Light": adjust_lightness(color, VARIANT_LIGHTNESS_SHIFT),
        f"{name}Dark": adjust_lightness(color, -VARIANT_LIGHTNESS_SHIFT),
        f"{name}Muted": adjust_saturation(color, -VARIANT_MUTE_SHIFT),
    }


def _special_purpose(p, foreground):
    orange = blend_colors(p["red"], p["yellow"], 0.6)
    return {
        "orangeWarm": orange,
        "orangeLight": adjust_lightness(orange, VARIANT_LIGHTNESS_SHIFT),
        "orangeDark": adjust_lightness(orange, -VARIANT_LIGHTNESS_SHIFT),
        "mutedYellow": adjust_saturation(p["yellow"], -0.35),
        "mutedCyan": adjust_saturation(p["cyan"], -0.35),
        "rainbowPrimary": adjust_saturation(p["blue"], 0.10),
        "snippetAccent": blend_colors(p["green"], p["cyan"], 0.5),
        "eventAccent": adjust_hue(p["red"], 20),
        "selfAccent": adjust_lightness(p["purple"], 0.08),
        "magicMethod": adjust_hue(p["purple"], -20),
        "typeAnnotation": adjust_saturation(p["blue"], -0.20),
        "genericType": blend_colors(p["cyan"], p["blue"], 0.4),
        "builtinType": adjust_lightness(p["cyan"], -0.08),
        "destructured": blend_colors(foreground, p["cyan"], 0.35),
        "lifetime": adjust_hue(p["green"], -30),
        "attribute": blend_colors(p["yellow"], p["green"], 0.3),
        "componentName": adjust_hue(p["cyan"], 15),
        "hookFunction": blend_colors(p["purple"], p["blue"], 0.5),
    }


def create_extended_palette(colors):
    """Derive light/dark/muted variants and special-purpose colors.

    Args:
        colors: GhosttyColorSet dict (missing slots use the default palette)

    Returns:
        ExtendedPalette(primary, derived, foreground)
    """
    palette = resolve_palette(colors)
    primary = {name: palette[slot] for name, slot in PRIMARY_HUES}
    foreground = palette["foreground"]

    derived = {}
    for name, color in primary.items():
        derived.update(_variants(name, color))
    derived.update(_special_purpose(primary, foreground))

    return ExtendedPalette(primary=primary, derived=derived, foreground=foreground)

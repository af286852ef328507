"""Accent color selection.

The primary accent is the most saturated of the terminal's red, blue and
magenta slots. A secondary accent is only used when one of green, yellow or
cyan sits on the complementary side of the color wheel.
"""

from collections import namedtuple

from ..color import adjust_lightness, adjust_saturation, hex_to_hsl, with_opacity
from ..opacity import semantic
from .defaults import resolve_palette

AccentVariants = namedtuple("AccentVariants", ["base", "light", "dark", "muted"])
AccentSystem = namedtuple("AccentSystem", ["primary", "secondary"])

PRIMARY_CANDIDATES = ("color1", "color4", "color5")
SECONDARY_CANDIDATES = ("color2", "color3", "color6")

ACCENT_LIGHTNESS_SHIFT = 0.12
ACCENT_MUTE_SHIFT = 0.25

# Exclusive bounds of the complementary arc, in degrees from the primary hue
COMPLEMENT_ARC = (120, 240)


def select_primary_accent(palette):
    """Pick the most saturated of color1/color4/color5; ties keep the first."""
    best = None
    best_saturation = -1.0
    for slot in PRIMARY_CANDIDATES:
        color = palette[slot]
        saturation = hex_to_hsl(color)[1]
        if saturation > best_saturation:
            best, best_saturation = color, saturation
    return best


def select_secondary_accent(primary, palette):
    """Return the first of color2/color3/color6 in the complementary arc, or None."""
    primary_hue = hex_to_hsl(primary)[0]
    low, high = COMPLEMENT_ARC
    for slot in SECONDARY_CANDIDATES:
        color = palette[slot]
        offset = (hex_to_hsl(color)[0] - primary_hue) % 360
        if low < offset < high:
            return color
    return None


def create_accent_variants(color):
    return AccentVariants(
        base=color,
        light=adjust_lightness(color, ACCENT_LIGHTNESS_SHIFT),
        dark=adjust_lightness(color, -ACCENT_LIGHTNESS_SHIFT),
        muted=adjust_saturation(color, -ACCENT_MUTE_SHIFT),
    )


def create_accent_system(colors):
    """Build the accent system for a (possibly partial) color set."""
    palette = resolve_palette(colors)
    primary = select_primary_accent(palette)
    secondary = select_secondary_accent(primary, palette)
    return AccentSystem(
        primary=create_accent_variants(primary),
        secondary=create_accent_variants(secondary) if secondary else None,
    )


def apply_accent_system(accents, on_accent):
    """Map the accent system onto its fixed UI keys.

    Args:
        accents: AccentSystem
        on_accent: Text color drawn on top of solid accent fills

    Returns:
        dict of UI color keys
    """
    primary = accents.primary
    # Links and remote indicators prefer the complementary accent
    link = accents.secondary or AccentVariants(
        base=primary.light, light=primary.base, dark=primary.dark, muted=primary.muted
    )

    return {
        "focusBorder": primary.base,
        "selection.background": with_opacity(primary.base, semantic("selection")),
        "list.activeSelectionBackground": with_opacity(primary.base, semantic("selection")),
        "list.inactiveSelectionBackground": with_opacity(primary.muted, semantic("hover")),
        "list.focusOutline": with_opacity(primary.base, semantic("findMatch")),
        "quickInputList.focusBackground": with_opacity(primary.base, semantic("highlight")),
        "button.background": primary.base,
        "button.foreground": on_accent,
        "button.hoverBackground": primary.light,
        "textLink.foreground": link.base,
        "textLink.activeForeground": link.light,
        "tab.activeBorderTop": primary.base,
        "tab.unfocusedActiveBorderTop": primary.muted,
        "activityBar.activeBorder": primary.base,
        "panelTitle.activeBorder": primary.base,
        "activityBarBadge.background": primary.base,
        "badge.background": primary.dark,
        "progressBar.background": primary.base,
        "inputOption.activeBorder": primary.base,
        "statusBarItem.remoteBackground": link.dark,
        "statusBarItem.remoteForeground": on_accent,
    }

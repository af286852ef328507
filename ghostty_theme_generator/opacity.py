"""Opacity levels shared by every generated surface.

All translucent colors in a theme draw their alpha from `OPACITY_LEVELS`, so a
given purpose (selection, hover, find match...) carries the same visual weight
wherever it appears. `OPACITY_SEMANTICS` names those purposes.
"""

from types import MappingProxyType

from .color import hex_to_rgb, opacity_to_hex, rgb_to_hex

__all__ = [
    "MINIMAP_FOREGROUND_OPACITY",
    "OPACITY_LEVELS",
    "OPACITY_SEMANTICS",
    "UNNECESSARY_CODE_OPACITY",
    "blend",
    "level",
    "opacity_to_hex",
    "semantic",
]

OPACITY_LEVELS = MappingProxyType(
    {
        "invisible": 0.00,
        "ghost": 0.03,
        "whisper": 0.06,
        "subtle": 0.08,
        "light": 0.10,
        "soft": 0.13,
        "gentle": 0.16,
        "visible": 0.19,
        "clear": 0.22,
        "defined": 0.25,
        "medium": 0.30,
        "strong": 0.35,
        "prominent": 0.40,
        "solid": 0.50,
        "heavy": 0.60,
        "opaque": 0.75,
    }
)

# Purpose -> level name
OPACITY_SEMANTICS = MappingProxyType(
    {
        "hover": "light",
        "focus": "medium",
        "selection": "defined",
        "highlight": "gentle",
        "findMatch": "prominent",
        "lineHighlight": "whisper",
        "error": "clear",
        "warning": "visible",
        "info": "soft",
        "success": "soft",
    }
)


# Alpha masks for editor settings that take an opacity instead of a tint
UNNECESSARY_CODE_OPACITY = "#000000aa"
MINIMAP_FOREGROUND_OPACITY = "#000000a0"


def level(name):
    """Return the opacity fraction for a level name."""
    return OPACITY_LEVELS[name]


def semantic(purpose):
    """Return the opacity fraction bound to a semantic purpose."""
    return OPACITY_LEVELS[OPACITY_SEMANTICS[purpose]]


def blend(fg_color, bg_color, opacity):
    """
    Composite fg_color over bg_color at the given opacity.
    Returns the resulting solid hex color, for places where a translucent
    alpha suffix is not acceptable.
    """
    opacity = max(0.0, min(1.0, opacity))
    fg_r, fg_g, fg_b = hex_to_rgb(fg_color)
    bg_r, bg_g, bg_b = hex_to_rgb(bg_color)

    return rgb_to_hex(
        fg_r * opacity + bg_r * (1 - opacity),
        fg_g * opacity + bg_g * (1 - opacity),
        fg_b * opacity + bg_b * (1 - opacity),
    )

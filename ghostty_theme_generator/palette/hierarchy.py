"""Surface elevation scale derived from a single base color.

Eight levels, from `void` (furthest below the editor) to `elevated` (hover
and active elements). Steps grow logarithmically so shades next to the base
stay subtle while the outer levels remain distinguishable.
"""

import math
from collections import namedtuple

from ..color import adjust_lightness, relative_luminance

BackgroundHierarchy = namedtuple(
    "BackgroundHierarchy",
    ["void", "shadow", "depth", "surface", "canvas", "overlay", "interactive", "elevated"],
)

HIERARCHY_LEVELS = BackgroundHierarchy._fields
STEP_SCALE = 0.04

# Level -> step index; below-canvas levels move away from the base first
_RECEDING_STEPS = (("surface", 0), ("depth", 1), ("shadow", 2), ("void", 3))
_RAISED_STEPS = (("overlay", 4), ("interactive", 5), ("elevated", 6))

# UI surface key -> hierarchy level
SURFACE_ELEMENTS = (
    ("editor.background", "canvas"),
    ("editorGutter.background", "canvas"),
    ("minimap.background", "canvas"),
    ("activityBarTop.background", "depth"),
    ("sideBarSectionHeader.background", "depth"),
    ("sideBarStickyScroll.background", "surface"),
    ("titleBar.inactiveBackground", "shadow"),
    ("panel.background", "surface"),
    ("panelSectionHeader.background", "depth"),
    ("editorGroupHeader.noTabsBackground", "surface"),
    ("breadcrumb.background", "canvas"),
    ("editorStickyScroll.background", "surface"),
    ("menu.background", "overlay"),
    ("quickInput.background", "overlay"),
    ("dropdown.listBackground", "overlay"),
    ("inputOption.hoverBackground", "interactive"),
    ("list.hoverBackground", "elevated"),
    ("editorGroup.dropIntoPromptBackground", "elevated"),
    ("widget.shadow", "void"),
)


def hierarchy_step(index):
    """Lightness offset for step `index` (0-7): ln(index + 2) * 0.04."""
    return math.log(index + 2) * STEP_SCALE


def detect_polarity(base):
    """Return "dark" or "light" from the base color's luminance."""
    return "dark" if relative_luminance(base) < 0.5 else "light"


def create_hierarchy(base, polarity="dark"):
    """Build the 8-level background hierarchy around `base`.

    Args:
        base: Canvas (editor) background color
        polarity: "dark" themes recede toward black, "light" toward white

    Returns:
        BackgroundHierarchy with `canvas == base`
    """
    if polarity not in ("dark", "light"):
        raise ValueError(f"Unknown polarity: {polarity!r}")
    direction = -1 if polarity == "dark" else 1

    levels = {"canvas": base}
    for name, step in _RECEDING_STEPS:
        levels[name] = adjust_lightness(base, direction * hierarchy_step(step))
    for name, step in _RAISED_STEPS:
        levels[name] = adjust_lightness(base, -direction * hierarchy_step(step))

    return BackgroundHierarchy(**levels)


def map_to_ui_elements(hierarchy):
    """Assign hierarchy levels to their fixed UI surface keys."""
    return {key: getattr(hierarchy, level) for key, level in SURFACE_ELEMENTS}

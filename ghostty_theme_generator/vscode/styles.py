"""VS Code workbench colors built from a Ghostty palette.

The editor canvas uses palette color0 while the surrounding chrome (activity
bar, side bar, status and title bars) uses the theme's `background` key. The
two tones give the workbench depth instead of one flat surface.

Every value is a palette color, a color derived from one, or a palette color
at one of the fixed OPACITY_LEVELS. Borders stay transparent unless they
carry meaning. All keys are always emitted: VS Code treats a missing key as
"use the default", which would change the look of the theme.
"""

from ..color import lighten, with_opacity
from ..opacity import MINIMAP_FOREGROUND_OPACITY, UNNECESSARY_CODE_OPACITY, level, semantic
from ..palette.accents import apply_accent_system, create_accent_system
from ..palette.defaults import TRANSPARENT, resolve_palette
from ..palette.extender import create_extended_palette
from ..palette.hierarchy import create_hierarchy, detect_polarity, map_to_ui_elements

WIDGET_LIGHTEN = 0.02
INPUT_LIGHTEN = 0.08

_SLOT_ROLES = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "bright_black",
    "bright_red",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
    "bright_white",
)


def _alpha(color, name):
    return with_opacity(color, level(name))


def resolve_roles(colors):
    """Resolve the named roles every color group draws from."""
    palette = resolve_palette(colors)
    roles = {name: palette[f"color{i}"] for i, name in enumerate(_SLOT_ROLES)}

    editor_bg = palette["color0"]
    roles.update(
        bg=editor_bg,
        ui_bg=palette["background"],
        fg=palette["foreground"],
        cursor=palette["cursor"],
        cursor_text=palette["cursor_text"],
        sel_fg=palette["selection_foreground"],
        widget_bg=lighten(editor_bg, WIDGET_LIGHTEN),
        input_bg=lighten(editor_bg, INPUT_LIGHTEN),
    )
    return roles


def _editor_colors(r, x):
    guide = r["bright_black"]
    colors = {
        "editor.foreground": r["fg"],
        "editorLineNumber.foreground": _alpha(guide, "prominent"),
        "editorLineNumber.activeForeground": r["fg"],
        "editorLineNumber.dimmedForeground": _alpha(guide, "clear"),
        "editorCursor.foreground": r["cursor"],
        "editorCursor.background": r["cursor_text"],
        "editorMultiCursor.primary.foreground": r["cursor"],
        "editorMultiCursor.secondary.foreground": x["redMuted"],
        "editor.selectionBackground": with_opacity(r["red"], semantic("selection")),
        "editor.selectionForeground": r["sel_fg"],
        "editor.selectionHighlightBackground": _alpha(r["red"], "gentle"),
        "editor.selectionHighlightBorder": TRANSPARENT,
        "editor.inactiveSelectionBackground": _alpha(r["red"], "soft"),
        "editor.lineHighlightBackground": with_opacity(r["fg"], semantic("lineHighlight")),
        "editor.lineHighlightBorder": TRANSPARENT,
        "editor.wordHighlightBackground": _alpha(r["blue"], "visible"),
        "editor.wordHighlightStrongBackground": _alpha(r["blue"], "medium"),
        "editor.wordHighlightTextBackground": _alpha(r["blue"], "gentle"),
        "editor.wordHighlightBorder": TRANSPARENT,
        "editor.wordHighlightStrongBorder": TRANSPARENT,
        "editor.wordHighlightTextBorder": TRANSPARENT,
        "editor.findMatchBackground": with_opacity(r["yellow"], semantic("findMatch")),
        "editor.findMatchForeground": r["fg"],
        "editor.findMatchHighlightBackground": _alpha(r["yellow"], "clear"),
        "editor.findMatchHighlightForeground": r["fg"],
        "editor.findRangeHighlightBackground": _alpha(r["yellow"], "soft"),
        "editor.findMatchBorder": r["yellow"],
        "editor.findMatchHighlightBorder": TRANSPARENT,
        "editor.findRangeHighlightBorder": TRANSPARENT,
        "editor.rangeHighlightBackground": _alpha(r["yellow"], "visible"),
        "editor.rangeHighlightBorder": TRANSPARENT,
        "editor.symbolHighlightBackground": _alpha(r["yellow"], "clear"),
        "editor.symbolHighlightBorder": TRANSPARENT,
        "editor.hoverHighlightBackground": _alpha(guide, "visible"),
        "editor.linkedEditingBackground": _alpha(r["cyan"], "soft"),
        "editor.snippetTabstopHighlightBackground": _alpha(x["snippetAccent"], "visible"),
        "editor.snippetTabstopHighlightBorder": TRANSPARENT,
        "editor.snippetFinalTabstopHighlightBackground": TRANSPARENT,
        "editor.snippetFinalTabstopHighlightBorder": x["snippetAccent"],
        "editor.foldBackground": _alpha(guide, "subtle"),
        "editor.foldPlaceholderForeground": _alpha(guide, "solid"),
        "editor.placeholder.foreground": _alpha(guide, "solid"),
        "editor.compositionBorder": r["fg"],
        "editor.stackFrameHighlightBackground": _alpha(r["yellow"], "soft"),
        "editor.focusedStackFrameHighlightBackground": _alpha(r["green"], "soft"),
        "editor.inlineValuesBackground": _alpha(r["yellow"], "light"),
        "editor.inlineValuesForeground": _alpha(r["fg"], "solid"),
        "editorBracketMatch.background": _alpha(guide, "medium"),
        "editorBracketMatch.border": _alpha(guide, "solid"),
        "editorBracketHighlight.foreground1": r["cyan"],
        "editorBracketHighlight.foreground2": r["magenta"],
        "editorBracketHighlight.foreground3": r["yellow"],
        "editorBracketHighlight.foreground4": r["blue"],
        "editorBracketHighlight.foreground5": r["green"],
        "editorBracketHighlight.foreground6": r["bright_red"],
        "editorBracketHighlight.unexpectedBracket.foreground": r["red"],
        "editorBracketPairGuide.background1": _alpha(r["cyan"], "medium"),
        "editorBracketPairGuide.background2": _alpha(r["magenta"], "medium"),
        "editorBracketPairGuide.background3": _alpha(r["yellow"], "medium"),
        "editorBracketPairGuide.background4": _alpha(r["blue"], "medium"),
        "editorBracketPairGuide.background5": _alpha(r["green"], "medium"),
        "editorBracketPairGuide.background6": _alpha(r["bright_red"], "medium"),
        "editorBracketPairGuide.activeBackground1": r["cyan"],
        "editorBracketPairGuide.activeBackground2": r["magenta"],
        "editorBracketPairGuide.activeBackground3": r["yellow"],
        "editorBracketPairGuide.activeBackground4": r["blue"],
        "editorBracketPairGuide.activeBackground5": r["green"],
        "editorBracketPairGuide.activeBackground6": r["bright_red"],
        "editorRuler.foreground": _alpha(guide, "visible"),
        "editorWhitespace.foreground": _alpha(guide, "visible"),
        "editorLink.activeForeground": r["blue"],
        "editorCodeLens.foreground": _alpha(guide, "solid"),
        "editorInlayHint.background": _alpha(guide, "visible"),
        "editorInlayHint.foreground": _alpha(r["fg"], "solid"),
        "editorInlayHint.typeForeground": x["typeAnnotation"],
        "editorInlayHint.typeBackground": _alpha(guide, "visible"),
        "editorInlayHint.parameterForeground": _alpha(r["fg"], "solid"),
        "editorInlayHint.parameterBackground": _alpha(guide, "visible"),
        "editorGhostText.background": TRANSPARENT,
        "editorGhostText.foreground": _alpha(guide, "solid"),
        "editorGhostText.border": TRANSPARENT,
        "editorStickyScrollHover.background": r["widget_bg"],
        "editorStickyScroll.border": TRANSPARENT,
        "editorStickyScroll.shadow": _alpha(r["black"], "solid"),
        "editorUnicodeHighlight.background": _alpha(r["yellow"], "soft"),
        "editorUnicodeHighlight.border": r["yellow"],
        "editorUnnecessaryCode.border": TRANSPARENT,
        "editorUnnecessaryCode.opacity": UNNECESSARY_CODE_OPACITY,
        "editorLightBulb.foreground": r["yellow"],
        "editorLightBulbAutoFix.foreground": r["blue"],
        "editorLightBulbAi.foreground": r["magenta"],
        "editorGutter.modifiedBackground": r["yellow"],
        "editorGutter.addedBackground": r["green"],
        "editorGutter.deletedBackground": r["red"],
        "editorGutter.foldingControlForeground": _alpha(guide, "solid"),
        "editorGutter.commentRangeForeground": _alpha(guide, "solid"),
        "editorGutter.commentGlyphForeground": r["fg"],
        "editorGutter.commentUnresolvedGlyphForeground": r["yellow"],
        "editorError.foreground": r["red"],
        "editorError.background": with_opacity(r["red"], semantic("error")),
        "editorError.border": TRANSPARENT,
        "editorWarning.foreground": r["yellow"],
        "editorWarning.background": with_opacity(r["yellow"], semantic("warning")),
        "editorWarning.border": TRANSPARENT,
        "editorInfo.foreground": r["blue"],
        "editorInfo.background": with_opacity(r["blue"], semantic("info")),
        "editorInfo.border": TRANSPARENT,
        "editorHint.foreground": r["green"],
        "editorHint.border": TRANSPARENT,
        "problemsErrorIcon.foreground": r["red"],
        "problemsWarningIcon.foreground": r["yellow"],
        "problemsInfoIcon.foreground": r["blue"],
    }
    # Indent guides get a little stronger with depth
    depth_levels = ("subtle", "light", "soft", "gentle", "visible", "clear")
    active_levels = ("defined", "medium", "strong", "prominent", "solid", "solid")
    for i, (depth, active) in enumerate(zip(depth_levels, active_levels), start=1):
        colors[f"editorIndentGuide.background{i}"] = _alpha(guide, depth)
        colors[f"editorIndentGuide.activeBackground{i}"] = _alpha(guide, active)
    return colors


def _widget_colors(r, x):
    border = _alpha(r["bright_black"], "prominent")
    return {
        "widget.border": TRANSPARENT,
        "editorWidget.background": r["widget_bg"],
        "editorWidget.foreground": r["fg"],
        "editorWidget.border": border,
        "editorWidget.resizeBorder": border,
        "editorSuggestWidget.background": r["widget_bg"],
        "editorSuggestWidget.border": border,
        "editorSuggestWidget.foreground": r["fg"],
        "editorSuggestWidget.highlightForeground": r["yellow"],
        "editorSuggestWidget.selectedBackground": _alpha(r["red"], "visible"),
        "editorSuggestWidget.selectedForeground": r["fg"],
        "editorSuggestWidget.focusHighlightForeground": r["yellow"],
        "editorSuggestWidget.selectedIconForeground": r["yellow"],
        "editorSuggestWidgetStatus.foreground": _alpha(r["fg"], "solid"),
        "editorHoverWidget.background": r["widget_bg"],
        "editorHoverWidget.border": border,
        "editorHoverWidget.foreground": r["fg"],
        "editorHoverWidget.highlightForeground": r["yellow"],
        "editorHoverWidget.statusBarBackground": r["input_bg"],
        "editorMarkerNavigation.background": r["widget_bg"],
        "editorMarkerNavigationError.background": r["red"],
        "editorMarkerNavigationError.headerBackground": _alpha(r["red"], "light"),
        "editorMarkerNavigationWarning.background": r["yellow"],
        "editorMarkerNavigationWarning.headerBackground": _alpha(r["yellow"], "light"),
        "editorMarkerNavigationInfo.background": r["blue"],
        "editorMarkerNavigationInfo.headerBackground": _alpha(r["blue"], "light"),
        "editorCommentsWidget.resolvedBorder": _alpha(r["bright_black"], "solid"),
        "editorCommentsWidget.unresolvedBorder": r["yellow"],
        "editorCommentsWidget.rangeBackground": _alpha(r["yellow"], "light"),
        "editorCommentsWidget.rangeActiveBackground": _alpha(r["yellow"], "visible"),
        "editorCommentsWidget.replyInputBackground": r["input_bg"],
        "editorActionList.background": r["widget_bg"],
        "editorActionList.foreground": r["fg"],
        "editorActionList.focusBackground": _alpha(r["red"], "visible"),
        "editorActionList.focusForeground": r["fg"],
        "debugExceptionWidget.background": _alpha(r["red"], "light"),
        "debugExceptionWidget.border": r["red"],
        "simpleFindWidget.sashBorder": border,
        "listFilterWidget.background": r["widget_bg"],
        "listFilterWidget.outline": x["redLight"],
        "listFilterWidget.noMatchesOutline": r["red"],
        "listFilterWidget.shadow": _alpha(r["black"], "prominent"),
        "editorWatermark.foreground": _alpha(r["fg"], "solid"),
        "inlineChat.background": r["widget_bg"],
        "inlineChat.foreground": r["fg"],
        "inlineChat.border": border,
        "inlineChat.shadow": _alpha(r["black"], "prominent"),
        "inlineChatInput.background": r["input_bg"],
        "inlineChatInput.border": border,
        "inlineChatInput.focusBorder": x["redLight"],
        "inlineChatInput.placeholderForeground": _alpha(r["fg"], "solid"),
        "inlineChatDiff.inserted": _alpha(r["green"], "soft"),
        "inlineChatDiff.removed": _alpha(r["red"], "soft"),
    }


def _diff_colors(r, x):
    return {
        "diffEditor.insertedTextBackground": _alpha(r["green"], "visible"),
        "diffEditor.insertedTextBorder": TRANSPARENT,
        "diffEditor.removedTextBackground": _alpha(r["red"], "visible"),
        "diffEditor.removedTextBorder": TRANSPARENT,
        "diffEditor.insertedLineBackground": _alpha(r["green"], "light"),
        "diffEditor.removedLineBackground": _alpha(r["red"], "light"),
        "diffEditor.border": _alpha(r["bright_black"], "prominent"),
        "diffEditor.diagonalFill": _alpha(r["bright_black"], "visible"),
        "diffEditor.unchangedRegionBackground": r["widget_bg"],
        "diffEditor.unchangedRegionForeground": _alpha(r["fg"], "solid"),
        "diffEditor.unchangedCodeBackground": _alpha(r["bright_black"], "subtle"),
        "diffEditor.move.border": _alpha(r["blue"], "solid"),
        "diffEditor.moveActive.border": r["blue"],
        "diffEditorGutter.insertedLineBackground": _alpha(r["green"], "clear"),
        "diffEditorGutter.removedLineBackground": _alpha(r["red"], "clear"),
        "diffEditorOverview.insertedForeground": _alpha(r["green"], "solid"),
        "diffEditorOverview.removedForeground": _alpha(r["red"], "solid"),
        "multiDiffEditor.headerBackground": r["widget_bg"],
        "multiDiffEditor.background": r["bg"],
        "multiDiffEditor.border": _alpha(r["bright_black"], "prominent"),
        "merge.currentHeaderBackground": _alpha(r["green"], "prominent"),
        "merge.currentContentBackground": _alpha(r["green"], "soft"),
        "merge.incomingHeaderBackground": _alpha(r["blue"], "prominent"),
        "merge.incomingContentBackground": _alpha(r["blue"], "soft"),
        "merge.commonHeaderBackground": _alpha(r["bright_black"], "prominent"),
        "merge.commonContentBackground": _alpha(r["bright_black"], "soft"),
        "merge.border": TRANSPARENT,
        "mergeEditor.change.background": _alpha(r["blue"], "visible"),
        "mergeEditor.change.word.background": _alpha(r["blue"], "medium"),
        "mergeEditor.conflict.unhandledUnfocused.border": _alpha(r["yellow"], "solid"),
        "mergeEditor.conflict.unhandledFocused.border": r["yellow"],
        "mergeEditor.conflict.handledUnfocused.border": _alpha(r["green"], "medium"),
        "mergeEditor.conflict.handledFocused.border": r["green"],
        "mergeEditor.conflict.handled.minimapOverViewRuler": _alpha(r["green"], "solid"),
        "mergeEditor.conflict.unhandled.minimapOverViewRuler": _alpha(r["yellow"], "solid"),
        "mergeEditor.conflictingLines.background": _alpha(x["orangeWarm"], "clear"),
    }


def _overview_colors(r):
    guide = r["bright_black"]
    return {
        "editorOverviewRuler.border": TRANSPARENT,
        "editorOverviewRuler.background": TRANSPARENT,
        "editorOverviewRuler.findMatchForeground": _alpha(r["yellow"], "solid"),
        "editorOverviewRuler.rangeHighlightForeground": _alpha(r["yellow"], "prominent"),
        "editorOverviewRuler.selectionHighlightForeground": _alpha(r["red"], "prominent"),
        "editorOverviewRuler.wordHighlightForeground": _alpha(r["blue"], "prominent"),
        "editorOverviewRuler.wordHighlightStrongForeground": _alpha(r["blue"], "solid"),
        "editorOverviewRuler.wordHighlightTextForeground": _alpha(r["blue"], "medium"),
        "editorOverviewRuler.modifiedForeground": _alpha(r["yellow"], "solid"),
        "editorOverviewRuler.addedForeground": _alpha(r["green"], "solid"),
        "editorOverviewRuler.deletedForeground": _alpha(r["red"], "solid"),
        "editorOverviewRuler.errorForeground": _alpha(r["red"], "solid"),
        "editorOverviewRuler.warningForeground": _alpha(r["yellow"], "solid"),
        "editorOverviewRuler.infoForeground": _alpha(r["blue"], "solid"),
        "editorOverviewRuler.bracketMatchForeground": _alpha(guide, "prominent"),
        "editorOverviewRuler.currentContentForeground": _alpha(r["green"], "solid"),
        "editorOverviewRuler.incomingContentForeground": _alpha(r["blue"], "solid"),
        "editorOverviewRuler.commonContentForeground": _alpha(guide, "solid"),
        "editorOverviewRuler.commentForeground": _alpha(guide, "solid"),
        "editorOverviewRuler.commentUnresolvedForeground": _alpha(r["yellow"], "solid"),
        "minimap.findMatchHighlight": _alpha(r["yellow"], "prominent"),
        "minimap.selectionHighlight": _alpha(r["red"], "medium"),
        "minimap.selectionOccurrenceHighlight": _alpha(r["red"], "prominent"),
        "minimap.errorHighlight": _alpha(r["red"], "solid"),
        "minimap.warningHighlight": _alpha(r["yellow"], "solid"),
        "minimap.infoHighlight": _alpha(r["blue"], "solid"),
        "minimap.foregroundOpacity": MINIMAP_FOREGROUND_OPACITY,
        "minimap.chatEditHighlight": _alpha(r["magenta"], "prominent"),
        "minimapSlider.background": _alpha(guide, "visible"),
        "minimapSlider.hoverBackground": _alpha(guide, "medium"),
        "minimapSlider.activeBackground": _alpha(guide, "prominent"),
        "minimapGutter.addedBackground": r["green"],
        "minimapGutter.modifiedBackground": r["yellow"],
        "minimapGutter.deletedBackground": r["red"],
        "scrollbar.shadow": _alpha(r["black"], "prominent"),
        "scrollbarSlider.background": _alpha(guide, "visible"),
        "scrollbarSlider.hoverBackground": _alpha(guide, "prominent"),
        "scrollbarSlider.activeBackground": _alpha(guide, "solid"),
    }


def _workbench_colors(r):
    muted = _alpha(r["fg"], "solid")
    return {
        "foreground": r["fg"],
        "disabledForeground": _alpha(r["fg"], "prominent"),
        "descriptionForeground": muted,
        "errorForeground": r["red"],
        "icon.foreground": r["fg"],
        "contrastBorder": TRANSPARENT,
        "contrastActiveBorder": TRANSPARENT,
        "sash.hoverBorder": _alpha(r["red"], "solid"),
        "textBlockQuote.background": r["widget_bg"],
        "textBlockQuote.border": _alpha(r["bright_black"], "solid"),
        "textCodeBlock.background": r["widget_bg"],
        "textPreformat.foreground": r["yellow"],
        "textPreformat.background": _alpha(r["bright_black"], "visible"),
        "textSeparator.foreground": _alpha(r["bright_black"], "prominent"),
        "window.activeBorder": TRANSPARENT,
        "window.inactiveBorder": TRANSPARENT,
        "activityBar.background": r["ui_bg"],
        "activityBar.foreground": r["fg"],
        "activityBar.inactiveForeground": muted,
        "activityBar.border": TRANSPARENT,
        "activityBar.activeBackground": _alpha(r["red"], "soft"),
        "activityBar.activeFocusBorder": r["red"],
        "activityBar.dropBorder": r["red"],
        "activityBarBadge.foreground": r["bg"],
        "activityBarTop.foreground": r["fg"],
        "activityBarTop.activeBorder": r["red"],
        "activityBarTop.inactiveForeground": muted,
        "activityBarTop.dropBorder": r["red"],
        "activityErrorBadge.background": r["red"],
        "activityErrorBadge.foreground": r["bg"],
        "activityWarningBadge.background": r["yellow"],
        "activityWarningBadge.foreground": r["bg"],
        "sideBar.background": r["ui_bg"],
        "sideBar.foreground": r["fg"],
        "sideBar.border": TRANSPARENT,
        "sideBar.dropBackground": _alpha(r["red"], "visible"),
        "sideBarTitle.background": r["ui_bg"],
        "sideBarTitle.foreground": r["fg"],
        "sideBarSectionHeader.foreground": r["fg"],
        "sideBarSectionHeader.border": TRANSPARENT,
        "sideBarActivityBarTop.border": TRANSPARENT,
        "sideBarStickyScroll.border": TRANSPARENT,
        "sideBarStickyScroll.shadow": _alpha(r["black"], "solid"),
        "titleBar.activeBackground": r["ui_bg"],
        "titleBar.activeForeground": r["fg"],
        "titleBar.inactiveForeground": muted,
        "titleBar.border": TRANSPARENT,
        "commandCenter.foreground": r["fg"],
        "commandCenter.activeForeground": r["fg"],
        "commandCenter.background": r["input_bg"],
        "commandCenter.activeBackground": _alpha(r["bright_black"], "visible"),
        "commandCenter.border": _alpha(r["bright_black"], "prominent"),
        "commandCenter.inactiveForeground": muted,
        "commandCenter.inactiveBorder": _alpha(r["bright_black"], "visible"),
        "commandCenter.activeBorder": r["red"],
        "commandCenter.debuggingBackground": _alpha(r["yellow"], "medium"),
        "profileBadge.background": _alpha(r["bright_black"], "prominent"),
        "profileBadge.foreground": r["fg"],
        "profiles.sashBorder": _alpha(r["bright_black"], "prominent"),
        "badge.foreground": r["bg"],
    }


def _list_colors(r):
    fg = r["fg"]
    return {
        "list.activeSelectionForeground": fg,
        "list.activeSelectionIconForeground": fg,
        "list.inactiveSelectionForeground": fg,
        "list.inactiveSelectionIconForeground": fg,
        "list.inactiveFocusBackground": _alpha(r["red"], "light"),
        "list.inactiveFocusOutline": TRANSPARENT,
        "list.hoverForeground": fg,
        "list.focusBackground": _alpha(r["red"], "visible"),
        "list.focusForeground": fg,
        "list.focusHighlightForeground": r["yellow"],
        "list.focusAndSelectionOutline": _alpha(r["red"], "solid"),
        "list.highlightForeground": r["yellow"],
        "list.dropBackground": _alpha(r["red"], "visible"),
        "list.dropBetweenBackground": r["red"],
        "list.deemphasizedForeground": _alpha(fg, "solid"),
        "list.errorForeground": r["red"],
        "list.warningForeground": r["yellow"],
        "list.invalidItemForeground": r["red"],
        "list.filterMatchBackground": _alpha(r["yellow"], "clear"),
        "list.filterMatchBorder": TRANSPARENT,
        "tree.indentGuidesStroke": _alpha(r["bright_black"], "prominent"),
        "tree.inactiveIndentGuidesStroke": _alpha(r["bright_black"], "visible"),
        "tree.tableColumnsBorder": _alpha(r["bright_black"], "visible"),
        "tree.tableOddRowsBackground": _alpha(r["bright_black"], "whisper"),
        "quickInput.foreground": fg,
        "quickInputList.focusForeground": fg,
        "quickInputList.focusIconForeground": fg,
        "quickInputTitle.background": r["input_bg"],
        "pickerGroup.border": _alpha(r["bright_black"], "prominent"),
        "pickerGroup.foreground": r["blue"],
        "keybindingTable.headerBackground": r["widget_bg"],
        "keybindingTable.rowsBackground": _alpha(r["bright_black"], "whisper"),
        "search.resultsInfoForeground": _alpha(fg, "solid"),
        "searchEditor.findMatchBackground": with_opacity(r["yellow"], semantic("findMatch")),
        "searchEditor.findMatchBorder": TRANSPARENT,
        "searchEditor.textInputBorder": _alpha(r["bright_black"], "prominent"),
    }


def _tab_colors(r):
    fg = r["fg"]
    inactive = _alpha(fg, "solid")
    return {
        "tab.activeBackground": r["bg"],
        "tab.activeForeground": fg,
        "tab.border": TRANSPARENT,
        "tab.activeBorder": TRANSPARENT,
        "tab.selectedBackground": r["bg"],
        "tab.selectedForeground": fg,
        "tab.selectedBorderTop": r["red"],
        "tab.inactiveBackground": r["ui_bg"],
        "tab.inactiveForeground": inactive,
        "tab.hoverBackground": r["widget_bg"],
        "tab.hoverForeground": fg,
        "tab.hoverBorder": TRANSPARENT,
        "tab.unfocusedActiveBackground": r["bg"],
        "tab.unfocusedActiveForeground": _alpha(fg, "solid"),
        "tab.unfocusedActiveBorder": TRANSPARENT,
        "tab.unfocusedInactiveBackground": r["ui_bg"],
        "tab.unfocusedInactiveForeground": _alpha(fg, "prominent"),
        "tab.unfocusedHoverBackground": r["widget_bg"],
        "tab.unfocusedHoverForeground": fg,
        "tab.unfocusedHoverBorder": TRANSPARENT,
        "tab.activeModifiedBorder": r["yellow"],
        "tab.inactiveModifiedBorder": _alpha(r["yellow"], "solid"),
        "tab.unfocusedActiveModifiedBorder": _alpha(r["yellow"], "solid"),
        "tab.unfocusedInactiveModifiedBorder": _alpha(r["yellow"], "medium"),
        "tab.lastPinnedBorder": _alpha(r["bright_black"], "prominent"),
        "tab.dragAndDropBorder": r["red"],
        "editorGroupHeader.tabsBackground": r["ui_bg"],
        "editorGroupHeader.tabsBorder": TRANSPARENT,
        "editorGroupHeader.border": TRANSPARENT,
        "editorGroup.border": _alpha(r["bright_black"], "prominent"),
        "editorGroup.dropBackground": _alpha(r["red"], "visible"),
        "editorGroup.emptyBackground": r["bg"],
        "editorGroup.focusedEmptyBorder": r["red"],
        "editorGroup.dropIntoPromptForeground": fg,
        "editorGroup.dropIntoPromptBorder": _alpha(r["bright_black"], "prominent"),
        "editorPane.background": r["bg"],
        "sideBySideEditor.horizontalBorder": _alpha(r["bright_black"], "prominent"),
        "sideBySideEditor.verticalBorder": _alpha(r["bright_black"], "prominent"),
        "breadcrumb.foreground": inactive,
        "breadcrumb.focusForeground": fg,
        "breadcrumb.activeSelectionForeground": fg,
        "breadcrumbPicker.background": r["widget_bg"],
    }


def _input_colors(r):
    fg = r["fg"]
    border = _alpha(r["bright_black"], "prominent")
    input_bg = r["input_bg"]
    return {
        "input.background": input_bg,
        "input.border": border,
        "input.foreground": fg,
        "input.placeholderForeground": _alpha(fg, "solid"),
        "inputOption.activeBackground": _alpha(r["red"], "medium"),
        "inputOption.activeForeground": fg,
        "inputValidation.errorBackground": input_bg,
        "inputValidation.errorBorder": r["red"],
        "inputValidation.errorForeground": r["red"],
        "inputValidation.infoBackground": input_bg,
        "inputValidation.infoBorder": r["blue"],
        "inputValidation.infoForeground": r["blue"],
        "inputValidation.warningBackground": input_bg,
        "inputValidation.warningBorder": r["yellow"],
        "inputValidation.warningForeground": r["yellow"],
        "dropdown.background": input_bg,
        "dropdown.border": border,
        "dropdown.foreground": fg,
        "button.secondaryBackground": _alpha(r["bright_black"], "prominent"),
        "button.secondaryForeground": fg,
        "button.secondaryHoverBackground": _alpha(r["bright_black"], "solid"),
        "button.border": TRANSPARENT,
        "button.separator": _alpha(r["bg"], "prominent"),
        "checkbox.background": input_bg,
        "checkbox.foreground": fg,
        "checkbox.border": border,
        "checkbox.selectBackground": r["widget_bg"],
        "checkbox.selectBorder": r["red"],
        "checkbox.disabled.background": _alpha(r["bright_black"], "visible"),
        "checkbox.disabled.foreground": _alpha(fg, "prominent"),
        "radio.activeBackground": _alpha(r["red"], "medium"),
        "radio.activeForeground": fg,
        "radio.activeBorder": r["red"],
        "radio.inactiveBackground": input_bg,
        "radio.inactiveForeground": _alpha(fg, "solid"),
        "radio.inactiveBorder": border,
        "radio.inactiveHoverBackground": _alpha(r["bright_black"], "visible"),
        "keybindingLabel.background": _alpha(r["bright_black"], "visible"),
        "keybindingLabel.foreground": fg,
        "keybindingLabel.border": border,
        "keybindingLabel.bottomBorder": border,
        "toolbar.hoverBackground": _alpha(r["bright_black"], "visible"),
        "toolbar.hoverOutline": TRANSPARENT,
        "toolbar.activeBackground": _alpha(r["bright_black"], "medium"),
        "actionBar.toggledBackground": _alpha(r["red"], "visible"),
        "extensionButton.background": r["red"],
        "extensionButton.foreground": r["bg"],
        "extensionButton.hoverBackground": r["bright_red"],
        "extensionButton.separator": _alpha(r["bg"], "prominent"),
        "extensionButton.prominentBackground": r["red"],
        "extensionButton.prominentForeground": r["bg"],
        "extensionButton.prominentHoverBackground": r["bright_red"],
        "extensionBadge.remoteBackground": r["blue"],
        "extensionBadge.remoteForeground": r["bg"],
        "extensionIcon.starForeground": r["yellow"],
        "extensionIcon.verifiedForeground": r["blue"],
        "extensionIcon.preReleaseForeground": r["magenta"],
        "extensionIcon.sponsorForeground": r["bright_magenta"],
        "extensionIcon.privateForeground": _alpha(fg, "solid"),
    }


def _status_bar_colors(r):
    fg = r["fg"]
    hover = with_opacity(r["bright_black"], semantic("hover"))
    return {
        "statusBar.background": r["ui_bg"],
        "statusBar.foreground": fg,
        "statusBar.border": TRANSPARENT,
        "statusBar.focusBorder": r["red"],
        "statusBar.debuggingBackground": r["yellow"],
        "statusBar.debuggingForeground": r["bg"],
        "statusBar.debuggingBorder": TRANSPARENT,
        "statusBar.noFolderBackground": r["ui_bg"],
        "statusBar.noFolderForeground": fg,
        "statusBar.noFolderBorder": TRANSPARENT,
        "statusBarItem.activeBackground": _alpha(r["red"], "visible"),
        "statusBarItem.hoverBackground": hover,
        "statusBarItem.hoverForeground": fg,
        "statusBarItem.focusBorder": r["red"],
        "statusBarItem.compactHoverBackground": hover,
        "statusBarItem.prominentForeground": fg,
        "statusBarItem.prominentBackground": TRANSPARENT,
        "statusBarItem.prominentHoverBackground": hover,
        "statusBarItem.prominentHoverForeground": fg,
        "statusBarItem.remoteHoverBackground": r["cyan"],
        "statusBarItem.remoteHoverForeground": r["bg"],
        "statusBarItem.errorBackground": r["red"],
        "statusBarItem.errorForeground": r["bg"],
        "statusBarItem.errorHoverBackground": r["bright_red"],
        "statusBarItem.errorHoverForeground": r["bg"],
        "statusBarItem.warningBackground": r["yellow"],
        "statusBarItem.warningForeground": r["bg"],
        "statusBarItem.warningHoverBackground": r["bright_yellow"],
        "statusBarItem.warningHoverForeground": r["bg"],
        "statusBarItem.offlineBackground": r["bright_black"],
        "statusBarItem.offlineForeground": r["bg"],
        "statusBarItem.offlineHoverBackground": r["white"],
        "statusBarItem.offlineHoverForeground": r["bg"],
    }


def _menu_colors(r):
    fg = r["fg"]
    border = _alpha(r["bright_black"], "prominent")
    return {
        "menubar.selectionForeground": fg,
        "menubar.selectionBackground": _alpha(r["red"], "visible"),
        "menubar.selectionBorder": TRANSPARENT,
        "menu.foreground": fg,
        "menu.selectionForeground": fg,
        "menu.selectionBackground": _alpha(r["red"], "visible"),
        "menu.selectionBorder": TRANSPARENT,
        "menu.separatorBackground": border,
        "menu.border": border,
        "notificationCenter.border": border,
        "notificationCenterHeader.foreground": fg,
        "notificationCenterHeader.background": r["widget_bg"],
        "notificationToast.border": border,
        "notifications.foreground": fg,
        "notifications.background": r["widget_bg"],
        "notifications.border": border,
        "notificationLink.foreground": r["blue"],
        "notificationsErrorIcon.foreground": r["red"],
        "notificationsWarningIcon.foreground": r["yellow"],
        "notificationsInfoIcon.foreground": r["blue"],
        "banner.background": r["widget_bg"],
        "banner.foreground": fg,
        "banner.iconForeground": r["blue"],
        "welcomePage.background": r["bg"],
        "welcomePage.progress.background": r["input_bg"],
        "welcomePage.progress.foreground": r["red"],
        "welcomePage.tileBackground": r["widget_bg"],
        "welcomePage.tileHoverBackground": r["input_bg"],
        "welcomePage.tileBorder": border,
        "walkThrough.embeddedEditorBackground": r["widget_bg"],
        "walkthrough.stepTitle.foreground": fg,
        "chat.requestBackground": r["widget_bg"],
        "chat.requestBorder": border,
        "chat.slashCommandBackground": _alpha(r["magenta"], "visible"),
        "chat.slashCommandForeground": r["magenta"],
        "chat.avatarBackground": r["input_bg"],
        "chat.avatarForeground": fg,
        "chat.editedFileForeground": r["yellow"],
        "interactive.activeCodeBorder": r["red"],
        "interactive.inactiveCodeBorder": border,
    }


def _terminal_colors(r):
    return {
        "terminal.background": r["bg"],
        "terminal.foreground": r["fg"],
        "terminal.ansiBlack": r["black"],
        "terminal.ansiRed": r["red"],
        "terminal.ansiGreen": r["green"],
        "terminal.ansiYellow": r["yellow"],
        "terminal.ansiBlue": r["blue"],
        "terminal.ansiMagenta": r["magenta"],
        "terminal.ansiCyan": r["cyan"],
        "terminal.ansiWhite": r["white"],
        "terminal.ansiBrightBlack": r["bright_black"],
        "terminal.ansiBrightRed": r["bright_red"],
        "terminal.ansiBrightGreen": r["bright_green"],
        "terminal.ansiBrightYellow": r["bright_yellow"],
        "terminal.ansiBrightBlue": r["bright_blue"],
        "terminal.ansiBrightMagenta": r["bright_magenta"],
        "terminal.ansiBrightCyan": r["bright_cyan"],
        "terminal.ansiBrightWhite": r["bright_white"],
        "terminal.selectionBackground": with_opacity(r["red"], semantic("selection")),
        "terminal.selectionForeground": r["sel_fg"],
        "terminal.inactiveSelectionBackground": _alpha(r["red"], "soft"),
        "terminal.findMatchBackground": with_opacity(r["yellow"], semantic("findMatch")),
        "terminal.findMatchHighlightBackground": _alpha(r["yellow"], "clear"),
        "terminal.findMatchBorder": r["yellow"],
        "terminal.findMatchHighlightBorder": TRANSPARENT,
        "terminal.dropBackground": _alpha(r["red"], "visible"),
        "terminal.border": _alpha(r["bright_black"], "prominent"),
        "terminal.hoverHighlightBackground": _alpha(r["bright_black"], "visible"),
        "terminal.tab.activeBorder": r["red"],
        "terminal.initialHintForeground": _alpha(r["fg"], "solid"),
        "terminalCursor.background": r["cursor_text"],
        "terminalCursor.foreground": r["cursor"],
        "terminalCommandDecoration.defaultBackground": _alpha(r["bright_black"], "prominent"),
        "terminalCommandDecoration.successBackground": r["green"],
        "terminalCommandDecoration.errorBackground": r["red"],
        "terminalCommandGuide.foreground": _alpha(r["bright_black"], "prominent"),
        "terminalOverviewRuler.border": TRANSPARENT,
        "terminalOverviewRuler.cursorForeground": _alpha(r["red"], "solid"),
        "terminalOverviewRuler.findMatchForeground": _alpha(r["yellow"], "solid"),
        "terminalStickyScroll.background": r["widget_bg"],
        "terminalStickyScroll.border": TRANSPARENT,
        "terminalStickyScrollHover.background": r["input_bg"],
        "terminalSymbolIcon.aliasForeground": r["magenta"],
        "terminalSymbolIcon.flagForeground": r["yellow"],
        "terminalSymbolIcon.optionForeground": r["blue"],
        "terminalSymbolIcon.optionValueForeground": r["green"],
    }


def _panel_colors(r):
    border = _alpha(r["bright_black"], "prominent")
    return {
        "panel.border": border,
        "panel.dropBorder": r["red"],
        "panelTitle.activeForeground": r["fg"],
        "panelTitle.inactiveForeground": _alpha(r["fg"], "solid"),
        "panelTitle.border": TRANSPARENT,
        "panelTitleBadge.background": r["red"],
        "panelTitleBadge.foreground": r["bg"],
        "panelInput.border": border,
        "panelSection.border": border,
        "panelSection.dropBackground": _alpha(r["red"], "visible"),
        "panelSectionHeader.foreground": r["fg"],
        "panelSectionHeader.border": border,
        "panelStickyScroll.background": r["widget_bg"],
        "panelStickyScroll.border": TRANSPARENT,
        "panelStickyScroll.shadow": _alpha(r["black"], "solid"),
        "outputView.background": r["bg"],
        "outputViewStickyScroll.background": r["widget_bg"],
        "ports.iconRunningProcessForeground": r["green"],
    }


def _notebook_colors(r):
    border = _alpha(r["bright_black"], "prominent")
    return {
        "notebook.cellBorderColor": border,
        "notebook.cellHoverBackground": _alpha(r["bright_black"], "light"),
        "notebook.cellInsertionIndicator": r["red"],
        "notebook.cellStatusBarItemHoverBackground": _alpha(r["bright_black"], "visible"),
        "notebook.cellToolbarSeparator": border,
        "notebook.cellEditorBackground": r["widget_bg"],
        "notebook.editorBackground": r["bg"],
        "notebook.focusedCellBackground": r["widget_bg"],
        "notebook.focusedCellBorder": r["red"],
        "notebook.focusedEditorBorder": r["red"],
        "notebook.inactiveFocusedCellBorder": _alpha(r["red"], "solid"),
        "notebook.inactiveSelectedCellBorder": border,
        "notebook.outputContainerBackgroundColor": r["widget_bg"],
        "notebook.outputContainerBorderColor": border,
        "notebook.selectedCellBackground": _alpha(r["red"], "light"),
        "notebook.selectedCellBorder": border,
        "notebook.symbolHighlightBackground": _alpha(r["yellow"], "visible"),
        "notebookScrollbarSlider.activeBackground": _alpha(r["bright_black"], "solid"),
        "notebookScrollbarSlider.background": _alpha(r["bright_black"], "visible"),
        "notebookScrollbarSlider.hoverBackground": _alpha(r["bright_black"], "prominent"),
        "notebookStatusErrorIcon.foreground": r["red"],
        "notebookStatusRunningIcon.foreground": r["blue"],
        "notebookStatusSuccessIcon.foreground": r["green"],
        "notebookEditorOverviewRuler.runningCellForeground": r["blue"],
    }


def _source_control_colors(r, x):
    return {
        "charts.foreground": r["fg"],
        "charts.lines": _alpha(r["bright_black"], "solid"),
        "charts.red": r["red"],
        "charts.blue": r["blue"],
        "charts.yellow": r["yellow"],
        "charts.orange": x["orangeWarm"],
        "charts.green": r["green"],
        "charts.purple": r["magenta"],
        "gitDecoration.addedResourceForeground": r["green"],
        "gitDecoration.modifiedResourceForeground": r["yellow"],
        "gitDecoration.deletedResourceForeground": r["red"],
        "gitDecoration.renamedResourceForeground": r["blue"],
        "gitDecoration.stageModifiedResourceForeground": x["yellowLight"],
        "gitDecoration.stageDeletedResourceForeground": x["redLight"],
        "gitDecoration.untrackedResourceForeground": x["greenLight"],
        "gitDecoration.ignoredResourceForeground": _alpha(r["bright_black"], "solid"),
        "gitDecoration.conflictingResourceForeground": r["magenta"],
        "gitDecoration.submoduleResourceForeground": r["cyan"],
        "scm.historyItemAdditionsForeground": r["green"],
        "scm.historyItemDeletionsForeground": r["red"],
        "scm.historyItemStatisticsBorder": _alpha(r["bright_black"], "prominent"),
        "scm.historyItemSelectedStatisticsBorder": r["fg"],
        "scmGraph.foreground1": r["yellow"],
        "scmGraph.foreground2": r["red"],
        "scmGraph.foreground3": r["green"],
        "scmGraph.foreground4": r["blue"],
        "scmGraph.foreground5": r["magenta"],
        "scmGraph.historyItemHoverLabelForeground": r["bg"],
        "scmGraph.historyItemHoverDefaultLabelForeground": r["fg"],
        "scmGraph.historyItemHoverDefaultLabelBackground": r["input_bg"],
        "scmGraph.historyItemHoverAdditionsForeground": r["green"],
        "scmGraph.historyItemHoverDeletionsForeground": r["red"],
        "scmGraph.historyItemRefColor": r["blue"],
        "scmGraph.historyItemRemoteRefColor": r["magenta"],
        "scmGraph.historyItemBaseRefColor": x["orangeWarm"],
    }


def _debug_colors(r, x):
    return {
        "debugToolBar.background": r["widget_bg"],
        "debugToolBar.border": TRANSPARENT,
        "debugIcon.breakpointForeground": r["red"],
        "debugIcon.breakpointDisabledForeground": x["redMuted"],
        "debugIcon.breakpointUnverifiedForeground": x["redDark"],
        "debugIcon.breakpointCurrentStackframeForeground": r["yellow"],
        "debugIcon.breakpointStackframeForeground": r["green"],
        "debugIcon.startForeground": r["green"],
        "debugIcon.pauseForeground": r["blue"],
        "debugIcon.stopForeground": r["red"],
        "debugIcon.disconnectForeground": r["red"],
        "debugIcon.restartForeground": r["green"],
        "debugIcon.stepOverForeground": r["blue"],
        "debugIcon.stepIntoForeground": r["blue"],
        "debugIcon.stepOutForeground": r["blue"],
        "debugIcon.continueForeground": r["blue"],
        "debugIcon.stepBackForeground": r["blue"],
        "debugTokenExpression.name": r["magenta"],
        "debugTokenExpression.type": x["typeAnnotation"],
        "debugTokenExpression.value": _alpha(r["fg"], "solid"),
        "debugTokenExpression.string": r["red"],
        "debugTokenExpression.boolean": r["bright_red"],
        "debugTokenExpression.number": r["bright_red"],
        "debugTokenExpression.error": r["red"],
        "debugView.exceptionLabelForeground": r["bg"],
        "debugView.exceptionLabelBackground": r["red"],
        "debugView.stateLabelForeground": r["fg"],
        "debugView.stateLabelBackground": _alpha(r["bright_black"], "prominent"),
        "debugView.valueChangedHighlight": _alpha(r["blue"], "solid"),
        "debugConsole.infoForeground": r["blue"],
        "debugConsole.warningForeground": r["yellow"],
        "debugConsole.errorForeground": r["red"],
        "debugConsole.sourceForeground": r["fg"],
        "debugConsoleInputIcon.foreground": r["yellow"],
        "testing.iconFailed": r["red"],
        "testing.iconErrored": x["redDark"],
        "testing.iconPassed": r["green"],
        "testing.iconQueued": r["yellow"],
        "testing.iconUnset": _alpha(r["fg"], "solid"),
        "testing.iconSkipped": _alpha(r["fg"], "solid"),
        "testing.iconErrored.retired": _alpha(x["redDark"], "solid"),
        "testing.iconFailed.retired": _alpha(r["red"], "solid"),
        "testing.iconPassed.retired": _alpha(r["green"], "solid"),
        "testing.iconQueued.retired": _alpha(r["yellow"], "solid"),
        "testing.iconUnset.retired": _alpha(r["fg"], "medium"),
        "testing.runAction": r["green"],
        "testing.peekBorder": r["red"],
        "testing.peekHeaderBackground": _alpha(r["red"], "light"),
        "testing.message.error.lineBackground": _alpha(r["red"], "soft"),
        "testing.message.info.decorationForeground": _alpha(r["blue"], "solid"),
        "testing.coveredBackground": _alpha(r["green"], "soft"),
        "testing.coveredBorder": TRANSPARENT,
        "testing.coveredGutterBackground": _alpha(r["green"], "prominent"),
        "testing.uncoveredBackground": _alpha(r["red"], "soft"),
        "testing.uncoveredBorder": TRANSPARENT,
        "testing.uncoveredGutterBackground": _alpha(r["red"], "prominent"),
        "testing.uncoveredBranchBackground": _alpha(r["red"], "visible"),
        "testing.coverCountBadgeBackground": r["input_bg"],
        "testing.coverCountBadgeForeground": r["fg"],
    }


def _symbol_icon_colors(r, x):
    return {
        "symbolIcon.arrayForeground": r["cyan"],
        "symbolIcon.booleanForeground": r["bright_red"],
        "symbolIcon.classForeground": r["magenta"],
        "symbolIcon.colorForeground": x["orangeWarm"],
        "symbolIcon.constantForeground": r["bright_red"],
        "symbolIcon.constructorForeground": r["bright_blue"],
        "symbolIcon.enumeratorForeground": r["magenta"],
        "symbolIcon.enumeratorMemberForeground": r["bright_red"],
        "symbolIcon.eventForeground": x["eventAccent"],
        "symbolIcon.fieldForeground": r["fg"],
        "symbolIcon.fileForeground": r["fg"],
        "symbolIcon.folderForeground": r["fg"],
        "symbolIcon.functionForeground": r["bright_blue"],
        "symbolIcon.interfaceForeground": x["typeAnnotation"],
        "symbolIcon.keyForeground": r["bright_yellow"],
        "symbolIcon.keywordForeground": r["bright_green"],
        "symbolIcon.methodForeground": r["bright_blue"],
        "symbolIcon.moduleForeground": x["cyanLight"],
        "symbolIcon.namespaceForeground": x["cyanLight"],
        "symbolIcon.nullForeground": r["bright_red"],
        "symbolIcon.numberForeground": r["bright_red"],
        "symbolIcon.objectForeground": r["cyan"],
        "symbolIcon.operatorForeground": r["cyan"],
        "symbolIcon.packageForeground": x["cyanLight"],
        "symbolIcon.propertyForeground": x["destructured"],
        "symbolIcon.referenceForeground": r["blue"],
        "symbolIcon.snippetForeground": x["snippetAccent"],
        "symbolIcon.stringForeground": r["red"],
        "symbolIcon.structForeground": r["magenta"],
        "symbolIcon.textForeground": r["fg"],
        "symbolIcon.typeParameterForeground": x["genericType"],
        "symbolIcon.unitForeground": r["bright_red"],
        "symbolIcon.variableForeground": r["fg"],
    }


def _settings_colors(r):
    fg = r["fg"]
    border = _alpha(r["bright_black"], "prominent")
    input_bg = r["input_bg"]
    return {
        "settings.headerForeground": fg,
        "settings.modifiedItemIndicator": r["yellow"],
        "settings.dropdownBackground": input_bg,
        "settings.dropdownForeground": fg,
        "settings.dropdownBorder": border,
        "settings.dropdownListBorder": border,
        "settings.textInputBackground": input_bg,
        "settings.textInputForeground": fg,
        "settings.textInputBorder": border,
        "settings.numberInputBackground": input_bg,
        "settings.numberInputForeground": fg,
        "settings.numberInputBorder": border,
        "settings.focusedRowBackground": _alpha(r["bright_black"], "light"),
        "settings.focusedRowBorder": r["red"],
        "settings.rowHoverBackground": _alpha(r["bright_black"], "light"),
        "settings.checkboxBackground": input_bg,
        "settings.checkboxForeground": fg,
        "settings.checkboxBorder": border,
        "settings.sashBorder": border,
        "settings.headerBorder": border,
        "settings.settingsHeaderHoverForeground": fg,
    }


def _peek_view_colors(r):
    return {
        "peekView.border": r["red"],
        "peekViewEditor.background": r["widget_bg"],
        "peekViewEditorGutter.background": r["widget_bg"],
        "peekViewEditor.matchHighlightBackground": with_opacity(r["yellow"], semantic("findMatch")),
        "peekViewEditor.matchHighlightBorder": TRANSPARENT,
        "peekViewEditorStickyScroll.background": r["widget_bg"],
        "peekViewResult.background": r["widget_bg"],
        "peekViewResult.fileForeground": r["fg"],
        "peekViewResult.lineForeground": _alpha(r["fg"], "solid"),
        "peekViewResult.matchHighlightBackground": with_opacity(r["yellow"], semantic("findMatch")),
        "peekViewResult.selectionBackground": _alpha(r["red"], "visible"),
        "peekViewResult.selectionForeground": r["fg"],
        "peekViewTitle.background": r["input_bg"],
        "peekViewTitleDescription.foreground": _alpha(r["fg"], "solid"),
        "peekViewTitleLabel.foreground": r["fg"],
    }


def build_vscode_colors(colors):
    """Build the complete VS Code workbench color map.

    Args:
        colors: GhosttyColorSet dict from the parser

    Returns:
        dict of ~650 UI color keys to `#rrggbb` / `#rrggbbaa` strings
    """
    roles = resolve_roles(colors)
    extended = create_extended_palette(colors).derived
    hierarchy = create_hierarchy(roles["bg"], polarity=detect_polarity(roles["bg"]))
    accents = create_accent_system(colors)

    groups = (
        _editor_colors(roles, extended),
        _widget_colors(roles, extended),
        _diff_colors(roles, extended),
        _overview_colors(roles),
        _workbench_colors(roles),
        _list_colors(roles),
        _tab_colors(roles),
        _input_colors(roles),
        _status_bar_colors(roles),
        _menu_colors(roles),
        _terminal_colors(roles),
        _panel_colors(roles),
        _notebook_colors(roles),
        _source_control_colors(roles, extended),
        _debug_colors(roles, extended),
        _symbol_icon_colors(roles, extended),
        _settings_colors(roles),
        _peek_view_colors(roles),
    )

    result = {}
    for group in groups:
        result.update(group)
    # Elevation surfaces and accents own their keys outright
    result.update(map_to_ui_elements(hierarchy))
    result.update(apply_accent_system(accents, on_accent=roles["bg"]))
    return result

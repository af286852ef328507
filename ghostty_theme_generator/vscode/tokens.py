"""TextMate token rules for syntax highlighting."""

from collections import namedtuple

from ..palette.defaults import resolve_palette
from ..palette.extender import create_extended_palette

TokenColor = namedtuple("TokenColor", ["name", "scope", "foreground", "font_style"])
TokenColor.__new__.__defaults__ = (None,)

# Palette slots cycled through by nested JSON keys, outermost first
JSON_RAINBOW_SLOTS = ("color6", "color12", "color4", "color5", "color13", "color9", "color3", "color11", "color2")

_JSON_ROOT = "source.json meta.structure.dictionary.json"
_JSON_NESTED = "meta.structure.dictionary.value.json meta.structure.dictionary.json"
_JSON_KEY = "support.type.property-name.json"


def json_rainbow_scope(depth):
    """Scope selector for an object key nested `depth` levels below the root."""
    return " ".join([_JSON_ROOT] + [_JSON_NESTED] * depth + [_JSON_KEY])


def json_rainbow_token_colors(palette):
    """Color JSON keys by nesting depth, one rule per level."""
    return [
        TokenColor(
            name=f"JSON Key - Level {depth}",
            scope=(json_rainbow_scope(depth),),
            foreground=palette[slot],
        )
        for depth, slot in enumerate(JSON_RAINBOW_SLOTS)
    ]


def _base_rules(p):
    return [
        TokenColor(
            "Comments",
            ("comment", "punctuation.definition.comment"),
            p["color8"],
            "italic",
        ),
        TokenColor(
            "Keywords and Storage",
            ("keyword", "storage.type", "storage.modifier"),
            p["color10"],
        ),
        TokenColor(
            "Strings",
            ("string", "constant.other.symbol", "constant.other.key", "markup.inline.raw"),
            p["color1"],
        ),
        TokenColor(
            "Functions",
            ("entity.name.function", "meta.function-call", "variable.function", "support.function"),
            p["color12"],
        ),
        TokenColor(
            "Classes and Support",
            ("entity.name.type", "entity.name.class", "support.type", "support.class", "entity.other.inherited-class"),
            p["color5"],
        ),
        TokenColor(
            "Numbers and Constants",
            ("constant.numeric", "constant.language", "support.constant", "constant.character", "constant.escape"),
            p["color9"],
        ),
        TokenColor(
            "Operators and Punctuation",
            ("keyword.operator", "punctuation", "punctuation.separator", "punctuation.terminator"),
            p["color6"],
        ),
        TokenColor(
            "Tags",
            ("entity.name.tag", "meta.tag.sgml", "punctuation.definition.tag"),
            p["color11"],
        ),
        TokenColor(
            "Variables",
            ("variable", "string constant.other.placeholder"),
            p["foreground"],
        ),
        TokenColor(
            "Invalid",
            ("invalid", "invalid.illegal"),
            p["color1"],
            "underline",
        ),
    ]


def _language_rules(p, x):
    return [
        TokenColor("Parameters", ("variable.parameter",), x["orangeLight"], "italic"),
        TokenColor(
            "Self and This",
            ("variable.language.self", "variable.language.this", "variable.language.special.self"),
            x["selfAccent"],
            "italic",
        ),
        TokenColor(
            "Magic Methods",
            ("support.function.magic", "entity.name.function.magic"),
            x["magicMethod"],
        ),
        TokenColor(
            "Decorators and Attributes",
            ("entity.name.function.decorator", "meta.decorator", "meta.attribute", "entity.other.attribute-name"),
            x["attribute"],
        ),
        TokenColor(
            "Type Annotations",
            ("meta.type.annotation", "meta.return-type", "support.type.primitive"),
            x["typeAnnotation"],
        ),
        TokenColor(
            "Generic Types",
            ("entity.name.type.parameter", "meta.type.parameters", "storage.type.generic"),
            x["genericType"],
        ),
        TokenColor(
            "Builtin Types",
            ("support.type.builtin", "support.type.python", "entity.name.type.primitive"),
            x["builtinType"],
        ),
        TokenColor(
            "Destructured Bindings",
            ("meta.object-binding-pattern-variable", "meta.array-binding-pattern-variable"),
            x["destructured"],
        ),
        TokenColor("Lifetimes", ("entity.name.type.lifetime", "storage.modifier.lifetime"), x["lifetime"], "italic"),
        TokenColor("Events", ("variable.other.event", "support.type.event"), x["eventAccent"]),
        TokenColor("Snippets", ("source.snippet", "constant.other.snippet"), x["snippetAccent"]),
        TokenColor(
            "Components",
            ("support.class.component", "entity.name.tag.jsx", "entity.name.tag.tsx"),
            x["componentName"],
        ),
        TokenColor("Hooks", ("meta.function-call.react-hook", "support.function.react.hook"), x["hookFunction"]),
        TokenColor("Namespaces", ("entity.name.namespace", "entity.name.module"), x["mutedCyan"]),
        TokenColor("Regular Expressions", ("string.regexp",), x["orangeWarm"]),
        TokenColor("Markup Headings", ("markup.heading", "entity.name.section"), x["blueLight"], "bold"),
        TokenColor("Markup Bold", ("markup.bold",), x["orangeWarm"], "bold"),
        TokenColor("Markup Italic", ("markup.italic",), x["purpleLight"], "italic"),
        TokenColor("Markup Quotes", ("markup.quote",), x["mutedYellow"], "italic"),
        TokenColor("Markup Inserted", ("markup.inserted",), p["color2"]),
        TokenColor("Markup Deleted", ("markup.deleted",), p["color1"]),
        TokenColor("Markup Changed", ("markup.changed",), p["color3"]),
        TokenColor("URL", ("*url*", "*link*", "*uri*"), None, "underline"),
    ]


def build_token_colors(colors):
    """Build the ordered token color rules for a theme.

    Args:
        colors: GhosttyColorSet dict (missing slots use the default palette)

    Returns:
        list of TokenColor, general rules first and JSON key levels last
    """
    palette = resolve_palette(colors)
    extended = create_extended_palette(colors).derived
    return _base_rules(palette) + _language_rules(palette, extended) + json_rainbow_token_colors(palette)


def token_color_to_dict(token):
    settings = {}
    if token.foreground:
        settings["foreground"] = token.foreground
    if token.font_style:
        settings["fontStyle"] = token.font_style
    return {"name": token.name, "scope": list(token.scope), "settings": settings}

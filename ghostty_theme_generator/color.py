import colorsys
import re

HEX_COLOR_RE = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_HEX_WITH_ALPHA_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def _clamp(value, low, high):
    return max(low, min(high, value))


def _round_channel(value):
    # Half-up rounding keeps results identical to the usual Math.round behaviour
    return _clamp(int(value + 0.5), 0, 255)


def is_valid_hex(value):
    """True for `#rgb` or `#rrggbb` strings."""
    return isinstance(value, str) and bool(HEX_COLOR_RE.match(value))


def normalize_hex(hex_color):
    """Expand `#rgb` to `#rrggbb`, drop any alpha byte and lowercase."""
    match = _HEX_WITH_ALPHA_RE.match(hex_color.strip())
    if not match:
        raise ValueError(f"Invalid hex color: {hex_color}")
    digits = match.group(1).lower()
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits[:6]}"


def hex_to_rgb(hex_color):
    hex_color = normalize_hex(hex_color).lstrip("#")
    return tuple(int(hex_color[i : i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(r, g, b):
    r, g, b = _round_channel(r), _round_channel(g), _round_channel(b)
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_hsl(hex_color):
    """Convert a hex color to (hue degrees, saturation 0-1, lightness 0-1)."""
    r, g, b = hex_to_rgb(hex_color)
    h, l, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    return (h * 360, s, l)


def hsl_to_hex(h, s, l):
    h = (h % 360) / 360
    s = _clamp(s, 0.0, 1.0)
    l = _clamp(l, 0.0, 1.0)
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return rgb_to_hex(r * 255, g * 255, b * 255)


def relative_luminance(hex_color):
    """Calculate relative luminance per WCAG 2.0"""

    def channel(c):
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = hex_to_rgb(hex_color)
    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def blend_colors(color1, color2, ratio):
    """Blend two colors together. ratio=0 returns color1, ratio=1 returns color2."""
    ratio = _clamp(ratio, 0.0, 1.0)
    r1, g1, b1 = hex_to_rgb(color1)
    r2, g2, b2 = hex_to_rgb(color2)
    return rgb_to_hex(
        r1 + (r2 - r1) * ratio,
        g1 + (g2 - g1) * ratio,
        b1 + (b2 - b1) * ratio,
    )


def lighten(hex_color, amount):
    """Move a color toward white by `amount` (0.0-1.0) in RGB space."""
    return blend_colors(hex_color, "#ffffff", amount)


def darken(hex_color, amount):
    """Move a color toward black by `amount` (0.0-1.0) in RGB space."""
    return blend_colors(hex_color, "#000000", amount)


def adjust_lightness(hex_color, delta):
    """Shift HSL lightness by `delta`, clamped to 0-1."""
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex(h, s, _clamp(l + delta, 0.0, 1.0))


def adjust_saturation(hex_color, delta):
    """Shift HSL saturation by `delta`, clamped to 0-1."""
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex(h, _clamp(s + delta, 0.0, 1.0), l)


def adjust_hue(hex_color, degrees):
    """Rotate the hue by `degrees`, wrapping around 360."""
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex((h + degrees) % 360, s, l)


def opacity_to_hex(opacity):
    """Convert 0.0-1.0 opacity to hex string (00-ff)."""
    clamped = _clamp(opacity, 0.0, 1.0)
    return f"{int(clamped * 255 + 0.5):02x}"


def with_opacity(hex_color, opacity):
    """Append a two digit alpha byte to a color, replacing any existing one.

    Args:
        hex_color: `#rgb`, `#rrggbb` or `#rrggbbaa`
        opacity: 0.0-1.0

    Returns:
        `#rrggbbaa` string
    """
    return f"{normalize_hex(hex_color)}{opacity_to_hex(opacity)}"

"""Colour conversion and manipulation.

Colours travel as hex strings (``#rrggbb``, ``#rgb`` or ``#rrggbbaa``) or as
``(red, green, blue)`` tuples of ints in 0..255. Hue is expressed in degrees,
saturation, lightness and value in percent.

Functions taking a hex string return ``None`` when it cannot be parsed;
functions taking components raise ``ValueError`` when they are out of range.
"""

from __future__ import annotations

import math
import re
import secrets

# Weights used for the quick "is this a light colour" test
LUMINANCE_RED = 0.2125
LUMINANCE_GREEN = 0.7154
LUMINANCE_BLUE = 0.0721
BRIGHTNESS_THRESHOLD = 128

# WCAG 2.x relative luminance weights
WCAG_RED = 0.2126
WCAG_GREEN = 0.7152
WCAG_BLUE = 0.0722

RGB_MIN = 0
RGB_MAX = 255

RGB = tuple[int, int, int]

_HEX_COLOR = re.compile(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})\Z")
_HEX_DIGITS = re.compile(r"^[0-9a-fA-F]+\Z")

CSS_COLORS: dict[str, str] = {
    "aliceblue": "#f0f8ff",
    "antiquewhite": "#faebd7",
    "aqua": "#00ffff",
    "aquamarine": "#7fffd4",
    "azure": "#f0ffff",
    "beige": "#f5f5dc",
    "bisque": "#ffe4c4",
    "black": "#000000",
    "blanchedalmond": "#ffebcd",
    "blue": "#0000ff",
    "blueviolet": "#8a2be2",
    "brown": "#a52a2a",
    "burlywood": "#deb887",
    "cadetblue": "#5f9ea0",
    "chartreuse": "#7fff00",
    "chocolate": "#d2691e",
    "coral": "#ff7f50",
    "cornflowerblue": "#6495ed",
    "cornsilk": "#fff8dc",
    "crimson": "#dc143c",
    "cyan": "#00ffff",
    "darkblue": "#00008b",
    "darkcyan": "#008b8b",
    "darkgoldenrod": "#b8860b",
    "darkgray": "#a9a9a9",
    "darkgrey": "#a9a9a9",
    "darkgreen": "#006400",
    "darkkhaki": "#bdb76b",
    "darkmagenta": "#8b008b",
    "darkolivegreen": "#556b2f",
    "darkorange": "#ff8c00",
    "darkorchid": "#9932cc",
    "darkred": "#8b0000",
    "darksalmon": "#e9967a",
    "darkseagreen": "#8fbc8f",
    "darkslateblue": "#483d8b",
    "darkslategray": "#2f4f4f",
    "darkslategrey": "#2f4f4f",
    "darkturquoise": "#00ced1",
    "darkviolet": "#9400d3",
    "deeppink": "#ff1493",
    "deepskyblue": "#00bfff",
    "dimgray": "#696969",
    "dimgrey": "#696969",
    "dodgerblue": "#1e90ff",
    "firebrick": "#b22222",
    "floralwhite": "#fffaf0",
    "forestgreen": "#228b22",
    "fuchsia": "#ff00ff",
    "gainsboro": "#dcdcdc",
    "ghostwhite": "#f8f8ff",
    "gold": "#ffd700",
    "goldenrod": "#daa520",
    "gray": "#808080",
    "grey": "#808080",
    "green": "#008000",
    "greenyellow": "#adff2f",
    "honeydew": "#f0fff0",
    "hotpink": "#ff69b4",
    "indianred": "#cd5c5c",
    "indigo": "#4b0082",
    "ivory": "#fffff0",
    "khaki": "#f0e68c",
    "lavender": "#e6e6fa",
    "lavenderblush": "#fff0f5",
    "lawngreen": "#7cfc00",
    "lemonchiffon": "#fffacd",
    "lightblue": "#add8e6",
    "lightcoral": "#f08080",
    "lightcyan": "#e0ffff",
    "lightgoldenrodyellow": "#fafad2",
    "lightgray": "#d3d3d3",
    "lightgrey": "#d3d3d3",
    "lightgreen": "#90ee90",
    "lightpink": "#ffb6c1",
    "lightsalmon": "#ffa07a",
    "lightseagreen": "#20b2aa",
    "lightskyblue": "#87cefa",
    "lightslategray": "#778899",
    "lightslategrey": "#778899",
    "lightsteelblue": "#b0c4de",
    "lightyellow": "#ffffe0",
    "lime": "#00ff00",
    "limegreen": "#32cd32",
    "linen": "#faf0e6",
    "magenta": "#ff00ff",
    "maroon": "#800000",
    "mediumaquamarine": "#66cdaa",
    "mediumblue": "#0000cd",
    "mediumorchid": "#ba55d3",
    "mediumpurple": "#9370db",
    "mediumseagreen": "#3cb371",
    "mediumslateblue": "#7b68ee",
    "mediumspringgreen": "#00fa9a",
    "mediumturquoise": "#48d1cc",
    "mediumvioletred": "#c71585",
    "midnightblue": "#191970",
    "mintcream": "#f5fffa",
    "mistyrose": "#ffe4e1",
    "moccasin": "#ffe4b5",
    "navajowhite": "#ffdead",
    "navy": "#000080",
    "oldlace": "#fdf5e6",
    "olive": "#808000",
    "olivedrab": "#6b8e23",
    "orange": "#ffa500",
    "orangered": "#ff4500",
    "orchid": "#da70d6",
    "palegoldenrod": "#eee8aa",
    "palegreen": "#98fb98",
    "paleturquoise": "#afeeee",
    "palevioletred": "#db7093",
    "papayawhip": "#ffefd5",
    "peachpuff": "#ffdab9",
    "peru": "#cd853f",
    "pink": "#ffc0cb",
    "plum": "#dda0dd",
    "powderblue": "#b0e0e6",
    "purple": "#800080",
    "rebeccapurple": "#663399",
    "red": "#ff0000",
    "rosybrown": "#bc8f8f",
    "royalblue": "#4169e1",
    "saddlebrown": "#8b4513",
    "salmon": "#fa8072",
    "sandybrown": "#f4a460",
    "seagreen": "#2e8b57",
    "seashell": "#fff5ee",
    "sienna": "#a0522d",
    "silver": "#c0c0c0",
    "skyblue": "#87ceeb",
    "slateblue": "#6a5acd",
    "slategray": "#708090",
    "slategrey": "#708090",
    "snow": "#fffafa",
    "springgreen": "#00ff7f",
    "steelblue": "#4682b4",
    "tan": "#d2b48c",
    "teal": "#008080",
    "thistle": "#d8bfd8",
    "tomato": "#ff6347",
    "turquoise": "#40e0d0",
    "violet": "#ee82ee",
    "wheat": "#f5deb3",
    "white": "#ffffff",
    "whitesmoke": "#f5f5f5",
    "yellow": "#ffff00",
    "yellowgreen": "#9acd32",
}


# ============================================================================
#                           Hex helpers
# ============================================================================


def check_hex_color(hex_color: str) -> bool:
    """Return True for ``#RGB`` and ``#RRGGBB`` strings."""
    return bool(_HEX_COLOR.match(hex_color))


def rgb_to_hex(
    red: int,
    green: int,
    blue: int,
    alpha: float | None = None,
    with_hash: bool = True,
) -> str:
    """Convert RGB(A) components to a lowercase hex string.

    Args:
        red: Red component, 0..255.
        green: Green component, 0..255.
        blue: Blue component, 0..255.
        alpha: Optional opacity in 0..1, appended as a two-digit byte.
        with_hash: Prefix the result with ``#``.

    Raises:
        ValueError: If a component or the alpha value is out of range.
    """
    for component in (red, green, blue):
        if not RGB_MIN <= component <= RGB_MAX:
            raise ValueError(
                f"RGB values must be between {RGB_MIN} and {RGB_MAX}. "
                f"Got: R={red}, G={green}, B={blue}"
            )
    if alpha is not None and not 0.0 <= alpha <= 1.0:
        raise ValueError(f"Alpha value must be between 0.0 and 1.0. Got: {alpha}")

    value = f"{red:02x}{green:02x}{blue:02x}"
    if alpha is not None:
        value += f"{round(alpha * 255):02x}"
    return f"#{value}" if with_hash else value


def rgba_to_hex(
    red: int, green: int, blue: int, alpha: float, with_hash: bool = True
) -> str:
    return rgb_to_hex(red, green, blue, alpha, with_hash)


def hex_to_rgb(hex_color: str) -> tuple | None:
    """Parse a hex colour.

    Returns:
        ``(r, g, b)`` for 3 or 6 digits, ``(r, g, b, alpha)`` for 8 digits
        (alpha rounded to 2 decimals), otherwise ``None``.
    """
    value = hex_color[1:] if hex_color.startswith("#") else hex_color
    if len(value) == 3:
        value = "".join(char * 2 for char in value)
    if len(value) not in (6, 8) or not _HEX_DIGITS.match(value):
        return None

    rgb = tuple(int(value[index : index + 2], 16) for index in (0, 2, 4))
    if len(value) == 8:
        return (*rgb, round(int(value[6:8], 16) / 255, 2))
    return rgb


def hex_to_rgba(hex_color: str) -> tuple | None:
    """Like :func:`hex_to_rgb`, but only when the colour has an alpha channel."""
    result = hex_to_rgb(hex_color)
    return result if result is not None and len(result) == 4 else None


def _rgb(hex_color: str) -> RGB | None:
    result = hex_to_rgb(hex_color)
    return None if result is None else result[:3]


def get_red_from_hex(hex_color: str) -> int | None:
    rgb = _rgb(hex_color)
    return None if rgb is None else rgb[0]


def get_green_from_hex(hex_color: str) -> int | None:
    rgb = _rgb(hex_color)
    return None if rgb is None else rgb[1]


def get_blue_from_hex(hex_color: str) -> int | None:
    rgb = _rgb(hex_color)
    return None if rgb is None else rgb[2]


def get_alpha_from_hex(hex_color: str) -> float | None:
    rgba = hex_to_rgba(hex_color)
    return None if rgba is None else rgba[3]


# ============================================================================
#                           Colour spaces
# ============================================================================


def _hue(r: float, g: float, b: float, high: float, delta: float) -> float:
    if high == r:
        hue = (g - b) / delta + (6 if g < b else 0)
    elif high == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4
    return hue / 6


def rgb_to_hsl(red: int, green: int, blue: int) -> tuple[float, float, float]:
    """Return ``(hue°, saturation%, lightness%)`` rounded to 2 decimals."""
    r, g, b = red / 255, green / 255, blue / 255
    high, low = max(r, g, b), min(r, g, b)
    delta = high - low
    lightness = (high + low) / 2

    if delta == 0:
        hue = saturation = 0.0
    else:
        saturation = (
            delta / (2 - high - low) if lightness > 0.5 else delta / (high + low)
        )
        hue = _hue(r, g, b, high, delta)

    return round(hue * 360, 2), round(saturation * 100, 2), round(lightness * 100, 2)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> RGB:
    h, s, lum = hue / 360, saturation / 100, lightness / 100

    if s == 0:
        r = g = b = lum
    else:
        q = lum * (1 + s) if lum < 0.5 else lum + s - lum * s
        p = 2 * lum - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return round(r * 255), round(g * 255), round(b * 255)


def rgb_to_hsv(red: int, green: int, blue: int) -> tuple[float, float, float]:
    """Return ``(hue°, saturation%, value%)`` rounded to 2 decimals."""
    r, g, b = red / 255, green / 255, blue / 255
    high, low = max(r, g, b), min(r, g, b)
    delta = high - low

    saturation = 0.0 if high == 0 else delta / high
    hue = 0.0 if delta == 0 else _hue(r, g, b, high, delta)

    return round(hue * 360, 2), round(saturation * 100, 2), round(high * 100, 2)


def hsv_to_rgb(hue: float, saturation: float, value: float) -> RGB:
    h, s, v = hue / 60, saturation / 100, value / 100

    sector = math.floor(h)
    f = h - sector
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    r, g, b = {
        0: (v, t, p),
        1: (q, v, p),
        2: (p, v, t),
        3: (p, q, v),
        4: (t, p, v),
    }.get(sector % 6, (v, p, q))

    return round(r * 255), round(g * 255), round(b * 255)


# ============================================================================
#                           Adjustments
# ============================================================================


def _adjust_hsl(hex_color: str, hue=0.0, saturation=0.0, lightness=0.0) -> str | None:
    rgb = _rgb(hex_color)
    if rgb is None:
        return None
    h, s, lum = rgb_to_hsl(*rgb)
    h = (h + hue) % 360
    s = max(0.0, min(100.0, s + saturation))
    lum = max(0.0, min(100.0, lum + lightness))
    return rgb_to_hex(*hsl_to_rgb(h, s, lum))


def lighten(hex_color: str, percentage: float) -> str | None:
    """Add ``percentage`` points of lightness, capped at 100."""
    return _adjust_hsl(hex_color, lightness=percentage)


def darken(hex_color: str, percentage: float) -> str | None:
    """Remove ``percentage`` points of lightness, floored at 0."""
    return _adjust_hsl(hex_color, lightness=-percentage)


def adjust_saturation(hex_color: str, amount: float) -> str | None:
    return _adjust_hsl(hex_color, saturation=amount)


def adjust_hue(hex_color: str, degrees: float) -> str | None:
    """Rotate the hue by ``degrees`` (negative values rotate backwards)."""
    return _adjust_hsl(hex_color, hue=degrees)


def mix(hex1: str, hex2: str, weight: float = 0.5) -> str | None:
    """Blend two colours; ``weight`` is the share of the first one (0..1)."""
    rgb1, rgb2 = _rgb(hex1), _rgb(hex2)
    if rgb1 is None or rgb2 is None:
        return None

    w1 = max(0.0, min(1.0, weight))
    w2 = 1 - w1
    red, green, blue = (round(c1 * w1 + c2 * w2) for c1, c2 in zip(rgb1, rgb2))
    return rgb_to_hex(red, green, blue)


# ============================================================================
#                           Lightness & contrast
# ============================================================================


def is_light_color(red: int, green: int, blue: int) -> bool:
    coeff = LUMINANCE_RED * red + LUMINANCE_GREEN * green + LUMINANCE_BLUE * blue
    return coeff > BRIGHTNESS_THRESHOLD


def is_light_hex_color(hex_color: str) -> bool:
    rgb = _rgb(hex_color)
    return rgb is not None and is_light_color(*rgb)


def _relative_luminance(red: int, green: int, blue: int) -> float:
    def linear(channel: int) -> float:
        value = channel / 255
        return value / 12.92 if value <= 0.03928 else ((value + 0.055) / 1.055) ** 2.4

    return WCAG_RED * linear(red) + WCAG_GREEN * linear(green) + WCAG_BLUE * linear(blue)


def get_contrast(hex1: str, hex2: str) -> float | None:
    """Return the WCAG contrast ratio (1..21) between two colours."""
    rgb1, rgb2 = _rgb(hex1), _rgb(hex2)
    if rgb1 is None or rgb2 is None:
        return None

    l1, l2 = _relative_luminance(*rgb1), _relative_luminance(*rgb2)
    lighter, darker = max(l1, l2), min(l1, l2)
    return round((lighter + 0.05) / (darker + 0.05), 2)


# ============================================================================
#                           Random & named colours
# ============================================================================


def get_random_color() -> RGB:
    return (
        secrets.randbelow(RGB_MAX + 1),
        secrets.randbelow(RGB_MAX + 1),
        secrets.randbelow(RGB_MAX + 1),
    )


def get_random_black_and_white_color() -> RGB:
    """Return a random shade of grey."""
    level = secrets.randbelow(RGB_MAX + 1)
    return level, level, level


def get_random_hex_color() -> str:
    return rgb_to_hex(*get_random_color())


def get_random_black_and_white_hex_color() -> str:
    return rgb_to_hex(*get_random_black_and_white_color())


def get_color_by_name(name: str) -> str | None:
    """Return the hex value of a CSS named colour (case-insensitive)."""
    return CSS_COLORS.get(name.lower())


def is_valid_color_name(name: str) -> bool:
    return name.lower() in CSS_COLORS


# ============================================================================
#                           Harmonies
# ============================================================================


def _rotations(hex_color: str, degrees: list[float]) -> list[str] | None:
    if _rgb(hex_color) is None:
        return None
    # 0 keeps the input exactly as given
    return [hex_color if not angle else adjust_hue(hex_color, angle) for angle in degrees]


def get_complementary(hex_color: str) -> str | None:
    return adjust_hue(hex_color, 180)


def get_triadic(hex_color: str) -> list[str] | None:
    return _rotations(hex_color, [0, 120, 240])


def get_analogous(hex_color: str, angle: float = 30) -> list[str] | None:
    return _rotations(hex_color, [-angle, 0, angle])


def get_split_complementary(hex_color: str) -> list[str] | None:
    return _rotations(hex_color, [0, 150, 210])


def get_tetradic(hex_color: str) -> list[str] | None:
    return _rotations(hex_color, [0, 90, 180, 270])

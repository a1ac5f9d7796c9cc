import logging
import math
import operator
import re
from typing import NamedTuple

logger = logging.getLogger(__name__)

# --- Constants ---
RGB_MAX = 255
HUE_MAX = 360
PERCENT_MAX = 100

HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


class RGB(NamedTuple):
    r: int
    g: int
    b: int


class HSL(NamedTuple):
    h: int
    s: int
    l: int


# --- Errors ---

class ColorError(ValueError):
    """Base class for color conversion failures."""


class ColorRangeError(ColorError):
    """
    A component lies outside its inclusive range.
    `component` is one of red, green, blue, hue, saturation, lightness.
    """

    def __init__(self, component, value, minimum, maximum):
        self.component = component
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"The {component} component must be between {minimum} and {maximum}."
        )


class HexColorSyntaxError(ColorError):
    """Hex string is not 6 hex digits with an optional leading '#'."""

    def __init__(self, value):
        self.value = value
        super().__init__(
            f"Invalid hex color {value!r}. Expected '#RRGGBB' or 'RRGGBB'."
        )


class ColorChannelError(ColorError):
    """An in-range channel that is not a whole number, so it has no hex pair."""

    def __init__(self, component, value):
        self.component = component
        self.value = value
        super().__init__(
            f"The {component} component must be a whole number, got {value!r}."
        )


# --- Helpers ---

def _check_range(component, value, maximum):
    if not 0 <= value <= maximum:
        logger.debug("Rejected %s=%r (allowed 0-%s)", component, value, maximum)
        raise ColorRangeError(component, value, 0, maximum)


def _check_rgb(r, g, b):
    # Order matters: the first failing channel is the one reported.
    _check_range("red", r, RGB_MAX)
    _check_range("green", g, RGB_MAX)
    _check_range("blue", b, RGB_MAX)


def _round(value):
    # Halves round up (round() would round them to even).
    return math.floor(value + 0.5)


def _channel_int(component, value):
    try:
        return operator.index(value)
    except TypeError:
        pass
    if isinstance(value, float) and value.is_integer():
        return int(value)
    logger.debug("Rejected %s=%r (not a whole number)", component, value)
    raise ColorChannelError(component, value)


def _hue_to_channel(t1, t2, h):
    if h < 0:
        h += 1
    if h > 1:
        h -= 1
    if 6 * h < 1:
        return t1 + (t2 - t1) * 6 * h
    if 2 * h < 1:
        return t2
    if 3 * h < 2:
        return t1 + (t2 - t1) * (2 / 3 - h) * 6
    return t1


# --- Conversions ---

def rgb_to_hex(r, g, b):
    """
    Convert RGB (0-255) to a lowercase '#rrggbb' string.
    """
    _check_rgb(r, g, b)
    r = _channel_int("red", r)
    g = _channel_int("green", g)
    b = _channel_int("blue", b)
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color):
    """
    Parse '#RRGGBB' or 'RRGGBB' (any case) into RGB (0-255).
    Shorthand '#RGB' is not accepted.
    """
    match = HEX_PATTERN.fullmatch(hex_color) if isinstance(hex_color, str) else None
    if match is None:
        logger.debug("Rejected hex color %r", hex_color)
        raise HexColorSyntaxError(hex_color)
    return RGB(*(int(group, 16) for group in match.groups()))


def rgb_to_hsl(r, g, b):
    """
    Convert RGB (0-255) to HSL with h in degrees (0-360), s and l in percent (0-100).

    When two channels share the maximum, red wins over green and green over blue
    for choosing the hue sector.
    """
    _check_rgb(r, g, b)

    # rgb [0,1]
    r = r / RGB_MAX
    g = g / RGB_MAX
    b = b / RGB_MAX

    mx = max(r, g, b)
    mn = min(r, g, b)
    l = (mx + mn) / 2

    if mx == mn:
        h = s = 0.0
    else:
        d = mx - mn
        s = d / (2 - mx - mn) if l > 0.5 else d / (mx + mn)
        if mx == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif mx == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6

    return HSL(_round(h * HUE_MAX), _round(s * PERCENT_MAX), _round(l * PERCENT_MAX))


def hsl_to_rgb(h, s, l):
    """
    Convert HSL (h 0-360, s/l 0-100) to RGB (0-255).
    """
    _check_range("hue", h, HUE_MAX)
    _check_range("saturation", s, PERCENT_MAX)
    _check_range("lightness", l, PERCENT_MAX)

    h = h / HUE_MAX
    s = s / PERCENT_MAX
    l = l / PERCENT_MAX

    t2 = l * (1 + s) if l < 0.5 else l + s - l * s
    t1 = 2 * l - t2

    r = _hue_to_channel(t1, t2, h + 1 / 3)
    g = _hue_to_channel(t1, t2, h)
    b = _hue_to_channel(t1, t2, h - 1 / 3)

    return RGB(_round(r * RGB_MAX), _round(g * RGB_MAX), _round(b * RGB_MAX))


def rgb_to_hsl_string(r, g, b):
    h, s, l = rgb_to_hsl(r, g, b)
    return f"hsl({h}, {s}%, {l}%)"

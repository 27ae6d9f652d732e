"""Conversions from the bridge's native color encodings to hex RGB.

The bridge describes colors either as CIE 1931 xy chromaticity plus a
brightness, or as a white color temperature in mirek. Both converters
are total: bad input yields ``None`` ("no color") instead of raising.
"""

from __future__ import annotations

import math
from numbers import Real

# Shown for scenes that carry no usable color data
NO_DATA_COLOR = "#444444"

# Smart scenes have no static recipe to introspect
SMART_SCENE_COLORS = ("#6366f1", "#8b5cf6")

# Brightness scale used by the bridge for xy colors
BRIGHTNESS_SCALE = 254

# Wide-gamut D65 XYZ -> linear RGB
_XYZ_TO_RGB = (
    (1.656492, -0.354851, -0.255038),
    (-0.707196, 1.655397, 0.036152),
    (0.051713, -0.121364, 1.01153),
)


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _gamma(c: float) -> float:
    """sRGB companding: linear segment near black, power law above."""
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * math.pow(c, 1 / 2.4) - 0.055


def _to_hex(channels: tuple[int, int, int]) -> str:
    return "#" + "".join(f"{channel:02x}" for channel in channels)


def xy_bri_to_hex(x: object, y: object, brightness: object = BRIGHTNESS_SCALE) -> str | None:
    """Convert CIE xy chromaticity plus brightness to ``#rrggbb``.

    Args:
        x: Chromaticity x coordinate
        y: Chromaticity y coordinate, must be non-zero
        brightness: Brightness on the 0-254 scale; ``None`` means full

    Returns:
        Lowercase hex color, or None when the input cannot describe a color
    """
    if brightness is None:
        brightness = BRIGHTNESS_SCALE
    if not (_is_number(x) and _is_number(y) and _is_number(brightness)) or y == 0:
        return None

    z = 1 - x - y
    luminance = brightness / BRIGHTNESS_SCALE
    xyz = (luminance / y * x, luminance, luminance / y * z)

    rgb = []
    for row in _XYZ_TO_RGB:
        linear = sum(coefficient * component for coefficient, component in zip(row, xyz))
        encoded = min(1.0, max(0.0, _gamma(linear)))
        rgb.append(_round_half_up(encoded * 255))

    return _to_hex((rgb[0], rgb[1], rgb[2]))


def mirek_to_hex(mirek: object) -> str | None:
    """Approximate the color of a black body at the given mirek.

    Uses the piecewise fit popularised by Tanner Helland, which is good
    enough for a terminal swatch.

    Returns:
        Lowercase hex color, or None for non-numeric or non-positive input
    """
    if not _is_number(mirek) or mirek <= 0:
        return None

    kelvin = 1_000_000 / mirek
    temp = kelvin / 100

    if temp <= 66:
        red = 255.0
        green = 99.4708025861 * math.log(temp) - 161.1195681661
        if temp <= 19:
            blue = 0.0
        else:
            blue = 138.5177312231 * math.log(temp - 10) - 305.0447927307
    else:
        red = 329.698727446 * math.pow(temp - 60, -0.1332047592)
        green = 288.1221695283 * math.pow(temp - 60, -0.0755148492)
        blue = 255.0

    r, g, b = (max(0, min(255, _round_half_up(channel))) for channel in (red, green, blue))
    return _to_hex((r, g, b))

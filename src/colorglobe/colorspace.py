"""RGB/HSV conversion, hex formatting, and clamping.

Canonical semantics: RGB channels are integers 0-255, hue is 0-360 (cyclic),
saturation and value are 0-100. All functions are pure.
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from colorglobe.models import RGBColor

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


class InvalidRangeError(ValueError):
    """clamp() called with min > max."""


class InvalidChannelError(ValueError):
    """Color channel outside 0-255 passed to hex formatting."""


class ColorParseError(ValueError):
    """Hex color text could not be parsed."""


def clamp(value: float, min_value: float, max_value: float) -> float:
    """Return value limited to [min_value, max_value].

    Raises:
        InvalidRangeError: If min_value > max_value.
    """
    if min_value > max_value:
        raise InvalidRangeError(f"{min_value}>{max_value}")
    return min(max(value, min_value), max_value)


def clamp_int(value: int, min_value: int = 0, max_value: int = 100) -> int:
    """clamp() for integer fields. Defaults cover percent inputs."""
    return int(clamp(value, min_value, max_value))


def clamp_float(value: float, min_value: float = 0.0, max_value: float = 1.0) -> float:
    """clamp() for drag fractions. Defaults cover the unit interval."""
    return float(clamp(value, min_value, max_value))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def rgb_to_hsv_exact(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Convert RGB to HSV without rounding.

    Args:
        r: Red 0-255. Clamped.
        g: Green 0-255. Clamped.
        b: Blue 0-255. Clamped.

    Returns:
        (hue 0-360, saturation 0-100, value 0-100) as floats.
        Achromatic input (r == g == b) has hue 0.
    """
    rn = clamp(r, 0, 255) / 255.0
    gn = clamp(g, 0, 255) / 255.0
    bn = clamp(b, 0, 255) / 255.0

    c_max = max(rn, gn, bn)
    c_min = min(rn, gn, bn)
    chroma = c_max - c_min

    if chroma == 0:
        hue = 0.0
    elif c_max == rn:
        hue = 60.0 * ((gn - bn) / chroma)
    elif c_max == gn:
        hue = 60.0 * ((bn - rn) / chroma + 2)
    else:
        hue = 60.0 * ((rn - gn) / chroma + 4)
    if hue < 0:
        hue += 360.0

    saturation = 0.0 if c_max == 0 else chroma / c_max
    return hue, saturation * 100.0, c_max * 100.0


def rgb_to_hsv(r: int, g: int, b: int) -> tuple[int, int, int]:
    """Convert RGB to integer HSV.

    Hue is rounded half-up and wrapped into [0, 360); saturation and value
    are rounded half-up into [0, 100].
    """
    hue, saturation, value = rgb_to_hsv_exact(r, g, b)
    return (
        _round_half_up(hue) % 360,
        _round_half_up(saturation),
        _round_half_up(value),
    )


def hsv_to_rgb(h: float, s: float, v: float) -> tuple[int, int, int]:
    """Convert HSV to RGB.

    Hue wraps into [0, 360); saturation and value are clamped to [0, 100].
    Integer HSV input does not always round-trip through rgb_to_hsv() exactly,
    since both directions quantize.

    Args:
        h: Hue in degrees.
        s: Saturation percent.
        v: Value (brightness) percent.

    Returns:
        (r, g, b) integers in 0-255.
    """
    hue = h % 360.0
    sat = clamp(s, 0, 100) / 100.0
    val = clamp(v, 0, 100) / 100.0

    chroma = val * sat
    hp = hue / 60.0
    x = chroma * (1 - abs((hp % 2) - 1))
    m = val - chroma

    sector = int(hp) % 6
    if sector == 0:
        rn, gn, bn = chroma, x, 0.0
    elif sector == 1:
        rn, gn, bn = x, chroma, 0.0
    elif sector == 2:
        rn, gn, bn = 0.0, chroma, x
    elif sector == 3:
        rn, gn, bn = 0.0, x, chroma
    elif sector == 4:
        rn, gn, bn = x, 0.0, chroma
    else:
        rn, gn, bn = chroma, 0.0, x

    return (
        int(clamp(_round_half_up((rn + m) * 255), 0, 255)),
        int(clamp(_round_half_up((gn + m) * 255), 0, 255)),
        int(clamp(_round_half_up((bn + m) * 255), 0, 255)),
    )


def _check_channel(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise InvalidChannelError(f"{name} channel out of range: {value!r}")
    return value


def to_hex(color: RGBColor, include_alpha: bool = False) -> str:
    """Format a color as lowercase hex ("rrggbb" or "rrggbbaa").

    Does not clamp; callers sanitize first.

    Raises:
        InvalidChannelError: If any channel is outside 0-255.
    """
    channels = [
        _check_channel("red", color.red),
        _check_channel("green", color.green),
        _check_channel("blue", color.blue),
    ]
    if include_alpha:
        channels.append(_check_channel("alpha", color.alpha))
    return "".join(f"{c:02x}" for c in channels)


def parse_hex(text: str) -> tuple[int, int, int, int]:
    """Parse "rrggbb" or "rrggbbaa" (optional leading '#') into channels.

    Returns:
        (red, green, blue, alpha). Alpha is 255 for six-digit input.

    Raises:
        ColorParseError: If text is not six or eight hex digits.
    """
    match = _HEX_RE.match(text.strip())
    if match is None:
        raise ColorParseError(f"Not a hex color: {text!r}")
    digits = match.group(1)
    channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
    if len(channels) == 3:
        channels.append(255)
    red, green, blue, alpha = channels
    return red, green, blue, alpha

"""HSL, RGB and hex conversions plus WCAG contrast math."""

from __future__ import annotations

import re

import numpy as np

from ..io.models import HSLColor

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")
_LUMA_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])


def clamp(value: float, lower: float, upper: float) -> float:
    return float(max(lower, min(upper, value)))


def wrap_hue(hue: float) -> float:
    """Return *hue* folded into [0, 360)."""
    return float(hue % 360)


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


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """Return the 8-bit RGB triple for an HSL color."""
    hue = wrap_hue(h) / 360
    sat = clamp(s, 0, 100) / 100
    light = clamp(l, 0, 100) / 100

    if sat == 0:
        r = g = b = light
    else:
        q = light * (1 + sat) if light < 0.5 else light + sat - light * sat
        p = 2 * light - q
        r = _hue_to_channel(p, q, hue + 1 / 3)
        g = _hue_to_channel(p, q, hue)
        b = _hue_to_channel(p, q, hue - 1 / 3)

    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)))


def hsl_to_hex(color: HSLColor) -> str:
    r, g, b = hsl_to_rgb(color.h, color.s, color.l)
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(value: str) -> tuple[int, int, int] | None:
    """Parse ``#rrggbb`` (hash optional); return ``None`` when malformed."""
    if not isinstance(value, str):
        return None
    match = _HEX_RE.match(value.strip())
    if not match:
        return None
    digits = match.group(1)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def hex_to_hsl(value: str) -> HSLColor:
    """Return the HSL color for *value*; malformed input yields black."""
    rgb = hex_to_rgb(value)
    if rgb is None:
        return HSLColor(0.0, 0.0, 0.0)

    r, g, b = (channel / 255 for channel in rgb)
    high = max(r, g, b)
    low = min(r, g, b)
    light = (high + low) / 2

    if high == low:
        return HSLColor(0.0, 0.0, light * 100)

    delta = high - low
    sat = delta / (2 - high - low) if light > 0.5 else delta / (high + low)
    if high == r:
        hue = (g - b) / delta + (6 if g < b else 0)
    elif high == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4
    return HSLColor(wrap_hue(hue * 60), sat * 100, light * 100)


def relative_luminance(color: HSLColor) -> float:
    """Return the WCAG relative luminance of *color*."""
    channels = np.array(hsl_to_rgb(color.h, color.s, color.l), dtype=float) / 255
    linear = np.where(
        channels <= 0.03928, channels / 12.92, ((channels + 0.055) / 1.055) ** 2.4
    )
    return float(np.dot(_LUMA_WEIGHTS, linear))


def contrast_ratio(a: HSLColor, b: HSLColor) -> float:
    """Return the WCAG contrast ratio between two colors (1 to 21)."""
    lum_a = relative_luminance(a)
    lum_b = relative_luminance(b)
    brighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return float((brighter + 0.05) / (darker + 0.05))


def hue_distance(a: float, b: float) -> float:
    """Return the shortest angular distance between two hues."""
    diff = abs(wrap_hue(a) - wrap_hue(b))
    return float(min(diff, 360 - diff))

"""Harmony generation, tonal variations and seeded perturbation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, Tuple

from .color import clamp, wrap_hue
from ..io.models import ColorHarmony, HarmonyType, HSLColor

KNUTH_MULTIPLIER = 2654435761
WARM_HUE = 30.0
COOL_HUE = 210.0
VARIATION_STEPS: Dict[str, float] = {
    "light": 15,
    "lighter": 25,
    "dark": -15,
    "darker": -25,
}


@dataclass(frozen=True, slots=True)
class _Ratios:
    """Saturation multipliers and lightness terms for the four derived roles."""

    secondary: Tuple[float, float]
    accent: Tuple[float, float]
    background: Tuple[float, float]
    text: Tuple[float, float]


# secondary/accent lightness is an offset; background/text lightness is absolute.
_RATIOS: Dict[HarmonyType, _Ratios] = {
    HarmonyType.COMPLEMENTARY: _Ratios((0.8, 10), (1.1, -5), (0.15, 95), (0.2, 20)),
    HarmonyType.ANALOGOUS: _Ratios((0.85, 8), (0.9, -5), (0.2, 96), (0.25, 18)),
    HarmonyType.TRIADIC: _Ratios((0.75, 10), (0.85, -3), (0.12, 97), (0.18, 22)),
    HarmonyType.TETRADIC: _Ratios((0.8, 8), (0.9, -5), (0.15, 96), (0.2, 20)),
    HarmonyType.MONOCHROMATIC: _Ratios((0.7, 15), (1.15, -8), (0.18, 97), (0.22, 18)),
    HarmonyType.SPLIT_COMPLEMENTARY: _Ratios((0.85, 8), (0.9, -5), (0.15, 96), (0.2, 20)),
}
DARK_BACKGROUND: Tuple[float, float] = (0.1, 8)
DARK_TEXT: Tuple[float, float] = (0.05, 96)


def _color(h: float, s: float, l: float) -> HSLColor:
    return HSLColor(wrap_hue(h), clamp(s, 0, 100), clamp(l, 0, 100))


def _build(
    harmony_type: HarmonyType,
    hue: float,
    saturation: float,
    lightness: float,
    hues: Tuple[float, float, float],
    dark: bool,
) -> ColorHarmony:
    ratios = _RATIOS[harmony_type]
    secondary_hue, accent_hue, background_hue = hues
    background = DARK_BACKGROUND if dark else ratios.background
    text = DARK_TEXT if dark else ratios.text
    return ColorHarmony(
        primary=_color(hue, saturation, lightness),
        secondary=_color(
            secondary_hue, saturation * ratios.secondary[0], lightness + ratios.secondary[1]
        ),
        accent=_color(accent_hue, saturation * ratios.accent[0], lightness + ratios.accent[1]),
        background=_color(background_hue, saturation * background[0], background[1]),
        text=_color(hue, saturation * text[0], text[1]),
    )


def complementary(hue: float, saturation: float, lightness: float, dark: bool = False) -> ColorHarmony:
    comp = hue + 180
    return _build(HarmonyType.COMPLEMENTARY, hue, saturation, lightness, (comp, comp, hue), dark)


def analogous(hue: float, saturation: float, lightness: float, dark: bool = False) -> ColorHarmony:
    return _build(
        HarmonyType.ANALOGOUS, hue, saturation, lightness, (hue + 30, hue - 30, hue), dark
    )


def triadic(hue: float, saturation: float, lightness: float, dark: bool = False) -> ColorHarmony:
    return _build(
        HarmonyType.TRIADIC, hue, saturation, lightness, (hue + 120, hue + 240, hue), dark
    )


def tetradic(hue: float, saturation: float, lightness: float, dark: bool = False) -> ColorHarmony:
    return _build(
        HarmonyType.TETRADIC, hue, saturation, lightness, (hue + 90, hue + 180, hue + 270), dark
    )


def monochromatic(hue: float, saturation: float, lightness: float, dark: bool = False) -> ColorHarmony:
    return _build(HarmonyType.MONOCHROMATIC, hue, saturation, lightness, (hue, hue, hue), dark)


def split_complementary(
    hue: float, saturation: float, lightness: float, dark: bool = False
) -> ColorHarmony:
    comp = hue + 180
    return _build(
        HarmonyType.SPLIT_COMPLEMENTARY,
        hue,
        saturation,
        lightness,
        (comp + 30, comp - 30, hue),
        dark,
    )


HARMONY_GENERATORS: Dict[HarmonyType, Callable[..., ColorHarmony]] = {
    HarmonyType.COMPLEMENTARY: complementary,
    HarmonyType.ANALOGOUS: analogous,
    HarmonyType.TRIADIC: triadic,
    HarmonyType.TETRADIC: tetradic,
    HarmonyType.MONOCHROMATIC: monochromatic,
    HarmonyType.SPLIT_COMPLEMENTARY: split_complementary,
}


def generate_harmony(
    harmony_type: HarmonyType | str,
    hue: float,
    saturation: float,
    lightness: float,
    dark: bool = False,
) -> ColorHarmony:
    """Return the five-role harmony of *harmony_type* around the base color.

    With *dark* set the background and text roles switch to a dark surface
    with near-white text.
    """
    generator = HARMONY_GENERATORS[HarmonyType(harmony_type)]
    return generator(hue, saturation, lightness, dark=dark)


def generate_variations(color: HSLColor) -> Dict[str, HSLColor]:
    variations = {"base": color.copy()}
    for name, step in VARIATION_STEPS.items():
        variations[name] = HSLColor(color.h, color.s, clamp(color.l + step, 0, 100))
    return variations


def adjust_temperature(color: HSLColor, amount: float) -> HSLColor:
    """Drift the hue toward orange for positive *amount*, toward blue otherwise."""
    target = WARM_HUE if amount > 0 else COOL_HUE
    hue = color.h + (target - color.h) * abs(amount)
    return HSLColor(wrap_hue(hue), color.s, color.l)


def string_hash(text: str) -> int:
    """Return the signed 32-bit ``h * 31 + c`` hash of *text*."""
    value = 0
    for char in text:
        value = (value * 31 + ord(char)) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def derive_seed(prompt: str, force_variation: bool = False, now: datetime | None = None) -> int:
    """Fold the prompt hash with the clock into a seed in [0, 100).

    Seconds are used normally so repeated calls within a second agree;
    *force_variation* switches to milliseconds.
    """
    moment = now or datetime.now().astimezone()
    timestamp = moment.timestamp()
    tick = round(timestamp * 1000) if force_variation else int(timestamp)
    return abs(int(math.fmod(string_hash(prompt) + tick, 100)))


def apply_variation(value: float, seed: int, max_variation: float) -> float:
    """Offset *value* by up to +/- *max_variation* driven by *seed*."""
    fraction = ((seed * KNUTH_MULTIPLIER) % 100) / 100
    return value + (fraction - 0.5) * max_variation * 2

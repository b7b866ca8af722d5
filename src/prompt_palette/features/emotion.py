"""Emotional profile scalars and the color nudges they imply."""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

import numpy as np

from .color import clamp
from ..io.models import EmotionalCoherence, EmotionalProfile, HSLColor, Mood, PromptAnalysis

ENERGY_WORDS: Tuple[str, ...] = ("energetic", "vibrant", "dynamic", "exciting", "active", "lively")
CALM_WORDS: Tuple[str, ...] = ("calm", "peaceful", "serene", "quiet", "gentle", "tranquil")
ELEGANT_WORDS: Tuple[str, ...] = ("elegant", "sophisticated", "luxury", "premium", "refined", "classy")
CASUAL_WORDS: Tuple[str, ...] = ("casual", "relaxed", "simple", "basic", "everyday")
PLAYFUL_WORDS: Tuple[str, ...] = ("playful", "fun", "cheerful", "whimsical", "quirky", "happy")
SERIOUS_WORDS: Tuple[str, ...] = ("serious", "professional", "formal", "corporate", "business")

MOOD_EMOTIONS: Dict[Mood, str] = {
    Mood.ENERGETIC: "excited",
    Mood.CALM: "peaceful",
    Mood.PROFESSIONAL: "confident",
    Mood.PLAYFUL: "happy",
    Mood.ELEGANT: "sophisticated",
    Mood.BOLD: "powerful",
    Mood.NATURAL: "content",
    Mood.MODERN: "innovative",
}

# Target (saturation, lightness) an emotion tends to evoke.
EMOTION_TARGETS: Dict[str, Tuple[float, float]] = {
    "happy": (75, 65),
    "joyful": (85, 70),
    "excited": (90, 60),
    "peaceful": (45, 70),
    "calm": (40, 65),
    "serene": (35, 75),
    "confident": (65, 50),
    "powerful": (80, 45),
    "elegant": (35, 45),
    "romantic": (70, 60),
    "sad": (30, 40),
    "angry": (85, 45),
    "anxious": (50, 50),
    "fearful": (40, 35),
    "mysterious": (50, 30),
    "nostalgic": (40, 55),
    "sophisticated": (30, 45),
}

MOOD_ADJUSTMENTS: Dict[Mood, Dict[str, float]] = {
    Mood.ENERGETIC: {"saturation_multiplier": 1.2, "lightness_offset": 5, "hue_shift": 0},
    Mood.CALM: {"saturation_multiplier": 0.7, "lightness_offset": 10, "hue_shift": 0},
    Mood.PROFESSIONAL: {"saturation_multiplier": 0.85, "lightness_offset": -5, "hue_shift": 0},
    Mood.PLAYFUL: {"saturation_multiplier": 1.15, "lightness_offset": 15, "hue_shift": 10},
    Mood.ELEGANT: {"saturation_multiplier": 0.65, "lightness_offset": -8, "hue_shift": -5},
    Mood.BOLD: {"saturation_multiplier": 1.25, "lightness_offset": -10, "hue_shift": 0},
    Mood.NATURAL: {"saturation_multiplier": 0.75, "lightness_offset": 5, "hue_shift": 5},
    Mood.MODERN: {"saturation_multiplier": 0.9, "lightness_offset": 0, "hue_shift": 0},
}


def _keyword_score(keywords: Sequence[str], plus: Sequence[str], minus: Sequence[str]) -> float:
    score = 0.0
    for keyword in keywords:
        if any(word in keyword for word in plus):
            score += 0.15
        if any(word in keyword for word in minus):
            score -= 0.15
    return score


def _unit(value: float) -> float:
    return clamp(value, 0.0, 1.0)


def energy_level(analysis: PromptAnalysis) -> float:
    score = 0.5 + _keyword_score(analysis.keywords, ENERGY_WORDS, CALM_WORDS)
    for emotion in analysis.emotions:
        if emotion in ENERGY_WORDS:
            score += 0.2
        if emotion in CALM_WORDS:
            score -= 0.2
    if analysis.mood is Mood.ENERGETIC:
        score += 0.3
    elif analysis.mood is Mood.CALM:
        score -= 0.3
    return _unit(score)


def sophistication_level(analysis: PromptAnalysis) -> float:
    score = 0.5 + _keyword_score(analysis.keywords, ELEGANT_WORDS, CASUAL_WORDS)
    if analysis.mood is Mood.ELEGANT:
        score += 0.3
    elif analysis.mood is Mood.PLAYFUL:
        score -= 0.2
    return _unit(score)


def playfulness_level(analysis: PromptAnalysis) -> float:
    score = 0.5 + _keyword_score(analysis.keywords, PLAYFUL_WORDS, SERIOUS_WORDS)
    if analysis.mood is Mood.PLAYFUL:
        score += 0.3
    elif analysis.mood is Mood.PROFESSIONAL:
        score -= 0.3
    return _unit(score)


def generate_profile(analysis: PromptAnalysis) -> EmotionalProfile:
    """Derive the emotional profile for *analysis*."""
    dominant = analysis.emotions[0] if analysis.emotions else MOOD_EMOTIONS[analysis.mood]
    return EmotionalProfile(
        dominant_emotion=dominant,
        energy_level=energy_level(analysis),
        warmth=_unit((analysis.temperature + 1) / 2),
        sophistication=sophistication_level(analysis),
        playfulness=playfulness_level(analysis),
        saturation_bias=analysis.saturation,
        lightness_bias=analysis.lightness,
        recommended_harmony=analysis.harmony,
    )


def apply_emotional_adjustments(color: HSLColor, profile: EmotionalProfile) -> HSLColor:
    """Return a new color nudged in saturation and lightness by *profile*."""
    s = color.s
    l = color.l

    if profile.energy_level > 0.6:
        s = min(100.0, s + (profile.energy_level - 0.5) * 30)
        l = min(85.0, l + (profile.energy_level - 0.5) * 15)
    elif profile.energy_level < 0.4:
        s = max(20.0, s - (0.5 - profile.energy_level) * 20)

    if profile.sophistication > 0.6:
        s = max(25.0, s - (profile.sophistication - 0.5) * 25)
        l = clamp(l - (profile.sophistication - 0.5) * 10, 35, 65)

    if profile.playfulness > 0.6:
        s = min(95.0, s + (profile.playfulness - 0.5) * 35)
        l = min(80.0, l + (profile.playfulness - 0.5) * 25)

    s = clamp(s + profile.saturation_bias * 30, 5, 100)
    l = clamp(l + profile.lightness_bias * 25, 10, 95)
    return HSLColor(color.h, s, l)


def contextual_recommendations(profile: EmotionalProfile) -> Dict[str, List[str]]:
    """Return human-readable guidance for primary, accent and background roles."""
    primary: List[str] = []
    accent: List[str] = []
    background: List[str] = []

    if profile.energy_level > 0.7:
        primary += [
            "Use vibrant, saturated colors to match high energy",
            "Consider bright accent colors for emphasis",
        ]
    elif profile.energy_level < 0.3:
        primary += ["Use muted, calming colors", "Keep saturation moderate for a serene feel"]

    if profile.warmth > 0.7:
        primary += ["Emphasize warm hues (reds, oranges, yellows)", "Create a cozy, inviting atmosphere"]
    elif profile.warmth < 0.3:
        primary += ["Emphasize cool hues (blues, greens, purples)", "Create a fresh, calm atmosphere"]

    if profile.sophistication > 0.7:
        accent += [
            "Use subtle accent colors with lower saturation",
            "Consider metallic accents (gold, silver) for elegance",
        ]
        background += [
            "Use neutral, understated backgrounds",
            "Consider off-white or light gray for sophistication",
        ]
    else:
        background += [
            "Light, neutral backgrounds work well",
            "White or very light tones enhance readability",
        ]

    if profile.playfulness > 0.7:
        accent += [
            "Use bold, contrasting accent colors",
            "Do not be afraid of unexpected color combinations",
        ]

    return {"primary": primary, "accent": accent, "background": background}


def validate_emotional_coherence(
    colors: Sequence[HSLColor], profile: EmotionalProfile
) -> EmotionalCoherence:
    """Check a finished color set against the profile's expectations."""
    if not colors:
        return EmotionalCoherence(score=1.0)

    issues: List[str] = []
    score = 1.0
    avg_saturation = float(np.mean([color.s for color in colors]))
    avg_lightness = float(np.mean([color.l for color in colors]))

    if profile.energy_level > 0.7 and avg_saturation < 50:
        issues.append("Low saturation does not match a high energy profile")
        score -= 0.2
    if profile.sophistication > 0.7 and avg_saturation > 70:
        issues.append("High saturation may be too bold for a sophisticated theme")
        score -= 0.15
    if profile.playfulness > 0.7 and avg_lightness < 40:
        issues.append("Dark palette does not match a playful mood")
        score -= 0.2

    warm = sum(1 for color in colors if color.h < 60 or color.h > 300)
    cool = sum(1 for color in colors if 120 <= color.h <= 240)
    if profile.warmth > 0.7 and cool > warm:
        issues.append("Palette leans cool but warm colors were expected")
        score -= 0.15
    if profile.warmth < 0.3 and warm > cool:
        issues.append("Palette leans warm but cool colors were expected")
        score -= 0.15

    return EmotionalCoherence(
        score=float(max(0.0, score)),
        alignments={
            "saturation": avg_saturation,
            "lightness": avg_lightness,
            "warm_hues": float(warm),
            "cool_hues": float(cool),
        },
        issues=issues,
    )


def emotion_color_targets(emotion: str) -> Tuple[float, float] | None:
    return EMOTION_TARGETS.get(emotion.lower())


def mood_adjustments(mood: Mood) -> Dict[str, float]:
    return dict(MOOD_ADJUSTMENTS[mood])


def emotional_resonance(colors: Sequence[HSLColor], emotion: str) -> float:
    """Return how closely *colors* sit to the emotion's saturation/lightness target."""
    target = emotion_color_targets(emotion)
    if target is None:
        return 0.7
    if not colors:
        return 0.0
    target_s, target_l = target
    scores = [
        max(0.0, 1 - abs(color.s - target_s) / 100) * max(0.0, 1 - abs(color.l - target_l) / 100)
        for color in colors
    ]
    return float(np.mean(scores))

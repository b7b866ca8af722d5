"""Turn a finished harmony into named color groups and palette metadata."""

from __future__ import annotations

import hashlib
from dataclasses import asdict
from datetime import datetime
from typing import Dict, List, Tuple

from ..context.intelligence import context_mentions_dark, context_mentions_light
from ..features.color import contrast_ratio, hsl_to_hex
from ..features.harmony import generate_variations
from ..io.models import (
    ColorGroup,
    ColorHarmony,
    ColorMatchRecord,
    ContextualWeights,
    EmotionalProfile,
    HarmonyType,
    HSLColor,
    IntentAnalysis,
    Mood,
    PaletteMetadata,
    PromptAnalysis,
)

WCAG_AA_TEXT = 4.5

# Role order in the published palette, with display name and description.
GROUP_ROLES: Tuple[Tuple[str, str, str], ...] = (
    ("background", "Background", "Optimal background for readability and visual comfort"),
    ("primary", "Primary", "Main brand color for primary actions and key elements"),
    ("accent", "Accent", "Complementary accent for highlights and emphasis"),
    ("text", "Text", "Optimized text color with maximum contrast and readability"),
)

MOOD_STYLES: Dict[Mood, str] = {
    Mood.ENERGETIC: "vibrant",
    Mood.CALM: "minimal",
    Mood.PROFESSIONAL: "modern",
    Mood.PLAYFUL: "vibrant",
    Mood.ELEGANT: "classic",
    Mood.BOLD: "vibrant",
    Mood.NATURAL: "classic",
    Mood.MODERN: "modern",
}

MOOD_NAMES: Dict[Mood, str] = {
    Mood.ENERGETIC: "Energetic Vibes",
    Mood.CALM: "Serene Calm",
    Mood.PROFESSIONAL: "Professional Edge",
    Mood.PLAYFUL: "Playful Spirit",
    Mood.ELEGANT: "Elegant Sophistication",
    Mood.BOLD: "Bold Statement",
    Mood.NATURAL: "Natural Harmony",
    Mood.MODERN: "Modern Flow",
}

MOOD_DESCRIPTIONS: Dict[Mood, str] = {
    Mood.ENERGETIC: "A vibrant, high-energy palette",
    Mood.CALM: "A peaceful, serene palette",
    Mood.PROFESSIONAL: "A polished, trustworthy palette",
    Mood.PLAYFUL: "A fun, cheerful palette",
    Mood.ELEGANT: "A sophisticated, refined palette",
    Mood.BOLD: "A powerful, dramatic palette",
    Mood.NATURAL: "An organic, earthy palette",
    Mood.MODERN: "A contemporary, clean palette",
}

THEME_INTENTION_MIN = 0.7


def build_color_group(name: str, color: HSLColor, description: str) -> ColorGroup:
    variations = generate_variations(color)
    return ColorGroup(
        name=name,
        base=hsl_to_hex(color),
        variations={
            200: hsl_to_hex(variations["light"]),
            300: hsl_to_hex(variations["lighter"]),
        },
        description=description,
    )


def build_color_groups(harmony: ColorHarmony) -> Dict[str, ColorGroup]:
    """Return the background, primary, accent and text groups for *harmony*."""
    return {
        role: build_color_group(name, getattr(harmony, role), description)
        for role, name, description in GROUP_ROLES
    }


def determine_mode(analysis: PromptAnalysis) -> str:
    if context_mentions_dark(analysis):
        return "dark"
    if context_mentions_light(analysis):
        return "light"
    if analysis.mood in (Mood.ENERGETIC, Mood.PLAYFUL):
        return "light"
    if analysis.mood in (Mood.ELEGANT, Mood.BOLD):
        return "dark"
    return "light"


def palette_tags(analysis: PromptAnalysis, harmony: HarmonyType) -> List[str]:
    tags = [*analysis.keywords[:5], *analysis.emotions[:2], analysis.mood.value, harmony.value]
    return list(dict.fromkeys(tags))


def contrast_report(harmony: ColorHarmony) -> Dict[str, float]:
    """Return contrast ratios of primary, accent and text against the background."""
    return {
        f"{role}-background": round(contrast_ratio(getattr(harmony, role), harmony.background), 2)
        for role in ("primary", "accent", "text")
    }


def build_metadata(
    analysis: PromptAnalysis,
    profile: EmotionalProfile,
    weights: ContextualWeights,
    intent: IntentAnalysis,
    harmony: ColorHarmony,
    *,
    created_at: datetime,
    mode: str,
    seed: int,
) -> PaletteMetadata:
    """Assemble provenance, accessibility and diagnostic metadata.

    The recorded harmony is the one actually applied, which is the intent's
    suggestion rather than the extractor's first guess.
    """
    applied = intent.suggested_harmony
    ratios = contrast_report(harmony)
    return PaletteMetadata(
        created_at=created_at,
        harmony=applied,
        mode=mode,
        style=MOOD_STYLES[analysis.mood],
        language=analysis.language,
        confidence=analysis.confidence,
        tags=palette_tags(analysis, applied),
        wcag_aa=ratios["text-background"] >= WCAG_AA_TEXT,
        contrast_ratios=ratios,
        emotional_profile={
            "dominant_emotion": profile.dominant_emotion,
            "mood": analysis.mood,
            "energy_level": profile.energy_level,
        },
        color_matches=[
            ColorMatchRecord(term=color.original_term, match_type=color.match_type, weight=color.weight)
            for color in analysis.colors
        ],
        contextual_analysis={
            "dominant_theme": weights.dominant_theme,
            "intention_score": weights.intention_score,
            "coherence_factors": asdict(weights.coherence_factors),
            "primary_intent": intent.primary_intent,
            "intent_confidence": intent.confidence,
            "suggested_harmony": intent.suggested_harmony,
            "requires_contrast": intent.requires_contrast,
            "saturation_preference": intent.preferred_saturation,
            "lightness_preference": intent.preferred_lightness,
        },
        seed=seed,
        compound_concepts=list(analysis.compound_concepts) if analysis.compound_concepts else None,
        brand_personality=list(analysis.brand_personality) if analysis.brand_personality else None,
        use_case=analysis.use_case,
    )


def palette_name(analysis: PromptAnalysis) -> str:
    keywords = analysis.keywords[:2]
    if keywords:
        return " ".join(word[:1].upper() + word[1:] for word in keywords)
    return MOOD_NAMES[analysis.mood]


def palette_description(
    analysis: PromptAnalysis, weights: ContextualWeights, harmony: HarmonyType
) -> str:
    if weights.dominant_theme and weights.intention_score > THEME_INTENTION_MIN:
        description = f"A color palette inspired by {weights.dominant_theme}"
    else:
        description = MOOD_DESCRIPTIONS[analysis.mood]

    factors = weights.coherence_factors
    phrases: List[str] = []
    if factors.temporal and factors.temporal > 0.6:
        phrases.append("capturing specific moments in time")
    if factors.emotional and factors.emotional > 0.6:
        phrases.append("evoking deep emotional resonance")
    if factors.environmental and factors.environmental > 0.6:
        phrases.append("reflecting natural environments")
    if factors.purposeful and factors.purposeful > 0.7:
        phrases.append("optimized for professional use")
    if phrases:
        description += ", " + ", ".join(phrases)

    return f"{description}. Uses {harmony.value} color harmony for visual balance and aesthetic appeal"


def palette_id(prompt: str, seed: int) -> str:
    """Return a stable identifier for a (seed, prompt) pair."""
    digest = hashlib.sha1(f"{seed}:{prompt}".encode("utf-8", "surrogatepass")).hexdigest()
    return f"palette_{digest[:12]}"

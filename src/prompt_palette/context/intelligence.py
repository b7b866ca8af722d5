"""Contextual re-weighting of extracted colors and intent inference."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, List, Sequence, Tuple

from ..extract.entities import detect_explicit_harmony
from ..io.models import (
    CoherenceFactors,
    ContextualWeights,
    HarmonyType,
    Intent,
    IntentAnalysis,
    LightnessPreference,
    Mood,
    MatchType,
    PromptAnalysis,
    SaturationPreference,
    WeightedColor,
)

logger = logging.getLogger(__name__)

TEMPORAL_KEYWORDS: Tuple[str, ...] = (
    "dawn", "dusk", "sunset", "sunrise", "morning", "evening", "night", "midnight",
    "twilight", "noon",
)
TEMPORAL_TERMS: Tuple[str, ...] = TEMPORAL_KEYWORDS + ("golden", "blue hour")
ENVIRONMENTAL_KEYWORDS: Tuple[str, ...] = (
    "ocean", "forest", "mountain", "desert", "city", "urban", "nature", "sky", "sea",
)
ENVIRONMENTAL_TERMS: Tuple[str, ...] = (
    "ocean", "sea", "forest", "mountain", "sky", "earth", "sand", "stone", "water",
    "fire", "ice", "snow",
)

COMPOUND_BONUS = 0.15
TEMPORAL_BONUS = 0.1
EMOTIONAL_BONUS = 0.08
ENVIRONMENTAL_BONUS = 0.1
PURPOSEFUL_BONUS = 0.12
MOOD_MISFIT_PENALTY = 0.15

# (hue range, saturation range); None leaves that channel unconstrained.
MOOD_RANGES: Dict[Mood, Tuple[Tuple[float, float] | None, Tuple[float, float] | None]] = {
    Mood.ENERGETIC: ((0, 60), (60, 100)),
    Mood.CALM: ((180, 240), (20, 60)),
    Mood.PROFESSIONAL: ((200, 240), (30, 70)),
    Mood.PLAYFUL: ((280, 360), (60, 100)),
    Mood.ELEGANT: (None, (0, 40)),
    Mood.BOLD: (None, (70, 100)),
    Mood.NATURAL: ((80, 160), (40, 80)),
    Mood.MODERN: (None, (40, 80)),
}

MOOD_HARMONY: Dict[Mood, HarmonyType] = {
    Mood.ENERGETIC: HarmonyType.COMPLEMENTARY,
    Mood.CALM: HarmonyType.ANALOGOUS,
    Mood.PROFESSIONAL: HarmonyType.TRIADIC,
    Mood.PLAYFUL: HarmonyType.SPLIT_COMPLEMENTARY,
    Mood.ELEGANT: HarmonyType.MONOCHROMATIC,
    Mood.BOLD: HarmonyType.COMPLEMENTARY,
    Mood.NATURAL: HarmonyType.ANALOGOUS,
    Mood.MODERN: HarmonyType.TRIADIC,
}

_WEB_USE_CASES = frozenset({"webapp", "website", "landing", "dashboard", "saas"})
_APP_USE_CASES = frozenset({"app", "mobile"})
_PRESENTATION_USE_CASES = frozenset({"presentation", "slides"})
_BRANDING_INDUSTRIES = frozenset({"corporate", "business", "corporativo", "negocio"})
_CREATIVE_INDUSTRIES = frozenset({"creative", "art", "creativo", "arte"})


def _count_containing(keywords: Sequence[str], needles: Sequence[str]) -> int:
    return sum(1 for keyword in keywords if any(needle in keyword for needle in needles))


def calculate_coherence_factors(analysis: PromptAnalysis) -> CoherenceFactors:
    """Return evidence strengths; factors without evidence stay unset."""
    temporal_count = _count_containing(analysis.keywords, TEMPORAL_KEYWORDS)
    environmental_count = _count_containing(analysis.keywords, ENVIRONMENTAL_KEYWORDS)

    purposeful = None
    if analysis.industries:
        purposeful = 0.8
    elif analysis.use_case:
        purposeful = 0.6

    return CoherenceFactors(
        temporal=min(temporal_count / 3, 1.0) if temporal_count else None,
        emotional=min(len(analysis.emotions) / 4, 1.0) if analysis.emotions else None,
        environmental=min(environmental_count / 3, 1.0) if environmental_count else None,
        purposeful=purposeful,
    )


def fits_mood(color: WeightedColor, mood: Mood) -> bool:
    hue_range, sat_range = MOOD_RANGES[mood]
    if hue_range is not None and not hue_range[0] <= color.h <= hue_range[1]:
        return False
    if sat_range is not None and not sat_range[0] <= color.s <= sat_range[1]:
        return False
    return True


def _is_purposeful(color: WeightedColor, analysis: PromptAnalysis) -> bool:
    if not analysis.use_case and not analysis.industries:
        return False
    industries = set(analysis.industries)
    if industries & _BRANDING_INDUSTRIES:
        return 200 <= color.h <= 240 or color.s < 30
    return bool(industries & _CREATIVE_INDUSTRIES)


def reweight_by_context(
    colors: Sequence[WeightedColor],
    analysis: PromptAnalysis,
    factors: CoherenceFactors,
) -> List[WeightedColor]:
    """Return copies of *colors* with context bonuses and mood penalties applied."""
    reweighted: List[WeightedColor] = []
    for color in colors:
        term = color.original_term.lower()
        bonus = 0.0
        if color.match_type is MatchType.COMPOUND:
            bonus += COMPOUND_BONUS
        if factors.temporal and any(t in term for t in TEMPORAL_TERMS):
            bonus += factors.temporal * TEMPORAL_BONUS
        if factors.emotional and any(e in term for e in analysis.emotions):
            bonus += factors.emotional * EMOTIONAL_BONUS
        if factors.environmental and any(t in term for t in ENVIRONMENTAL_TERMS):
            bonus += factors.environmental * ENVIRONMENTAL_BONUS
        if factors.purposeful and _is_purposeful(color, analysis):
            bonus += factors.purposeful * PURPOSEFUL_BONUS
        if not fits_mood(color, analysis.mood):
            bonus -= MOOD_MISFIT_PENALTY
        weight = float(max(0.0, min(1.0, color.weight + bonus)))
        reweighted.append(replace(color, weight=weight))
    return reweighted


def _dominant_theme(analysis: PromptAnalysis, colors: Sequence[WeightedColor]) -> str:
    if analysis.compound_concepts:
        return analysis.compound_concepts[0]
    if colors and colors[0].weight > 0.8:
        return colors[0].original_term
    if analysis.use_case:
        return analysis.use_case
    if analysis.industries:
        return analysis.industries[0]
    if analysis.emotions:
        return analysis.emotions[0]
    return analysis.mood.value


def _intention_score(analysis: PromptAnalysis, factors: CoherenceFactors) -> float:
    score = 0.5
    if analysis.confidence > 0.8:
        score += 0.2
    elif analysis.confidence > 0.6:
        score += 0.1
    if analysis.use_case:
        score += 0.15
    if analysis.compound_concepts:
        score += 0.15
    present = factors.present()
    if present and max(present.values()) > 0.7:
        score += 0.1
    return float(min(1.0, score))


def analyze_color_context(
    colors: Sequence[WeightedColor], analysis: PromptAnalysis
) -> ContextualWeights:
    """Rank extracted colors in context and summarise the prompt's intention."""
    if not colors:
        return ContextualWeights(
            primary_color=None,
            secondary_colors=(),
            dominant_theme="neutral",
            intention_score=0.5,
            coherence_factors=CoherenceFactors(),
        )

    factors = calculate_coherence_factors(analysis)
    ranked = reweight_by_context(colors, analysis, factors)
    ranked.sort(key=lambda item: item.weight, reverse=True)

    weights = ContextualWeights(
        primary_color=ranked[0],
        secondary_colors=tuple(ranked[1:4]),
        dominant_theme=_dominant_theme(analysis, ranked),
        intention_score=_intention_score(analysis, factors),
        coherence_factors=factors,
    )
    logger.debug(
        "context: theme=%s intention=%.2f primary=%s",
        weights.dominant_theme,
        weights.intention_score,
        ranked[0].keyword,
    )
    return weights


def _suggest_harmony(
    analysis: PromptAnalysis, weights: ContextualWeights, intent: Intent
) -> HarmonyType:
    explicit = detect_explicit_harmony(analysis.tokens)
    if explicit is not None:
        return explicit
    if intent in (Intent.WEB, Intent.APP):
        return HarmonyType.TRIADIC if weights.intention_score > 0.7 else HarmonyType.ANALOGOUS
    if intent is Intent.BRANDING:
        return HarmonyType.COMPLEMENTARY
    if intent is Intent.CREATIVE:
        if len(analysis.keywords) > 3:
            return HarmonyType.TETRADIC
        return HarmonyType.SPLIT_COMPLEMENTARY
    return MOOD_HARMONY.get(analysis.mood, analysis.harmony)


def _saturation_preference(analysis: PromptAnalysis) -> SaturationPreference:
    if analysis.saturation > 0.3:
        return SaturationPreference.HIGH
    if analysis.saturation < -0.3:
        return SaturationPreference.LOW
    if analysis.mood in (Mood.ENERGETIC, Mood.PLAYFUL, Mood.BOLD):
        return SaturationPreference.HIGH
    if analysis.mood in (Mood.ELEGANT, Mood.CALM, Mood.PROFESSIONAL):
        return SaturationPreference.LOW
    return SaturationPreference.MEDIUM


def context_mentions_dark(analysis: PromptAnalysis) -> bool:
    return any(
        marker in tag
        for tag in analysis.context
        for marker in ("dark", "night", "noche", "oscuro")
    )


def context_mentions_light(analysis: PromptAnalysis) -> bool:
    return any(
        marker in tag
        for tag in analysis.context
        for marker in ("light", "bright", "claro", "brillante")
    )


def _lightness_preference(analysis: PromptAnalysis) -> LightnessPreference:
    if analysis.lightness > 0.3:
        return LightnessPreference.LIGHT
    if analysis.lightness < -0.3:
        return LightnessPreference.DARK
    if context_mentions_dark(analysis):
        return LightnessPreference.DARK
    if context_mentions_light(analysis):
        return LightnessPreference.LIGHT
    if analysis.mood in (Mood.ELEGANT, Mood.BOLD) or "mysterious" in analysis.emotions:
        return LightnessPreference.DARK
    if analysis.mood in (Mood.PLAYFUL, Mood.CALM, Mood.ENERGETIC):
        return LightnessPreference.LIGHT
    return LightnessPreference.MEDIUM


def analyze_intent(analysis: PromptAnalysis, weights: ContextualWeights) -> IntentAnalysis:
    """Infer what the palette is for and the harmony and tone that suit it."""
    intent = Intent.GENERAL
    confidence = 0.6

    if analysis.use_case in _WEB_USE_CASES:
        intent, confidence = Intent.WEB, 0.9
    elif analysis.use_case in _APP_USE_CASES:
        intent, confidence = Intent.APP, 0.9
    elif analysis.use_case in _PRESENTATION_USE_CASES:
        intent, confidence = Intent.PRESENTATION, 0.85

    industries = set(analysis.industries)
    if industries & _BRANDING_INDUSTRIES:
        intent, confidence = Intent.BRANDING, 0.8
    elif industries & _CREATIVE_INDUSTRIES:
        intent, confidence = Intent.CREATIVE, 0.75

    requires_contrast = (
        intent in (Intent.WEB, Intent.APP)
        or analysis.mood in (Mood.BOLD, Mood.ENERGETIC)
        or bool(industries & _BRANDING_INDUSTRIES)
    )

    result = IntentAnalysis(
        primary_intent=intent,
        confidence=confidence,
        suggested_harmony=_suggest_harmony(analysis, weights, intent),
        requires_contrast=requires_contrast,
        preferred_saturation=_saturation_preference(analysis),
        preferred_lightness=_lightness_preference(analysis),
    )
    logger.debug(
        "intent=%s harmony=%s contrast=%s",
        intent.value,
        result.suggested_harmony.value,
        requires_contrast,
    )
    return result

"""End-to-end prompt to palette generation."""

from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from typing import Callable, Dict, Sequence

import numpy as np

from .context.coherence import validate_semantic_coherence
from .context.intelligence import analyze_color_context, analyze_intent
from .extract.analyzer import analyze_prompt
from .features.color import clamp, wrap_hue
from .features.emotion import (
    apply_emotional_adjustments,
    contextual_recommendations,
    generate_profile,
    mood_adjustments,
    validate_emotional_coherence,
)
from .features.harmony import adjust_temperature, apply_variation, derive_seed, generate_harmony
from .io.models import (
    ColorHarmony,
    ContextualWeights,
    EmotionalProfile,
    GenerationReport,
    Intent,
    IntentAnalysis,
    LightnessPreference,
    Mood,
    PaletteRequest,
    PromptAnalysis,
    SaturationPreference,
    SemanticPalette,
    WeightedColor,
)
from .knowledge.base import KnowledgeBase, default_knowledge_base
from .palette.assemble import (
    build_color_groups,
    build_metadata,
    determine_mode,
    palette_description,
    palette_id,
    palette_name,
)
from .palette.compatibility import ensure_accessibility, repair_if_invalid

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

MOOD_HUES: Dict[Mood, float] = {
    Mood.ENERGETIC: 15,
    Mood.CALM: 200,
    Mood.PROFESSIONAL: 220,
    Mood.PLAYFUL: 340,
    Mood.ELEGANT: 280,
    Mood.BOLD: 0,
    Mood.NATURAL: 120,
    Mood.MODERN: 210,
}
DEFAULT_HUE = 220.0

SATURATION_BASE: Dict[SaturationPreference, float] = {
    SaturationPreference.HIGH: 85,
    SaturationPreference.LOW: 45,
    SaturationPreference.MEDIUM: 65,
}
LIGHTNESS_BASE: Dict[LightnessPreference, float] = {
    LightnessPreference.LIGHT: 65,
    LightnessPreference.DARK: 40,
    LightnessPreference.MEDIUM: 52,
}

HUE_VARIATION = 15
SATURATION_VARIATION = 10
LIGHTNESS_VARIATION = 8
PRIMARY_INTENTION_MIN = 0.6

DARK_SURFACE_MAX = 8.0
DARK_TEXT_MIN = 92.0
LIGHT_SURFACE_MIN = 95.0
LIGHT_TEXT_MAX = 25.0


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def circular_mean(hues: Sequence[float], weights: Sequence[float]) -> float | None:
    """Return the weighted circular mean of *hues*, or ``None`` when undefined."""
    if not hues:
        return None
    w = np.asarray(weights, dtype=float)
    if not np.any(w > 0):
        w = np.ones(len(hues))
    radians = np.deg2rad(np.asarray(hues, dtype=float))
    y = float(np.dot(w, np.sin(radians)))
    x = float(np.dot(w, np.cos(radians)))
    if math.hypot(x, y) < 1e-9:
        return None
    return wrap_hue(math.degrees(math.atan2(y, x)))


def _mean_of(colors: Sequence[WeightedColor]) -> float | None:
    return circular_mean([c.h for c in colors], [c.weight for c in colors])


def base_hue(
    analysis: PromptAnalysis,
    weights: ContextualWeights,
    kb: KnowledgeBase,
    seed: int,
) -> float:
    """Pick the anchor hue from the strongest available evidence, then perturb it."""
    hue: float | None = None
    primary = weights.primary_color

    if primary is not None and weights.intention_score > PRIMARY_INTENTION_MIN:
        hue = primary.h
    elif weights.secondary_colors:
        top = [c for c in (primary, *weights.secondary_colors) if c is not None][:3]
        hue = _mean_of(top)

    if hue is None and analysis.colors:
        hue = _mean_of(analysis.colors)
    if hue is None and analysis.industries:
        entry = kb.lookup(analysis.industries[0], analysis.language)
        hue = entry.h if entry is not None else None
    if hue is None and analysis.emotions:
        entry = kb.lookup(analysis.emotions[0], analysis.language)
        hue = entry.h if entry is not None else None
    if hue is None:
        hue = MOOD_HUES.get(analysis.mood, DEFAULT_HUE)

    return wrap_hue(apply_variation(hue, seed, HUE_VARIATION))


def base_saturation(analysis: PromptAnalysis, intent: IntentAnalysis, seed: int) -> float:
    saturation = SATURATION_BASE[intent.preferred_saturation]
    saturation += analysis.saturation * 25
    saturation += analysis.intensity * 15

    if intent.primary_intent in (Intent.WEB, Intent.APP):
        saturation = min(saturation, 75)
    elif intent.primary_intent is Intent.BRANDING:
        saturation = max(saturation, 60)
    elif intent.primary_intent is Intent.CREATIVE:
        saturation = max(saturation, 70)

    return clamp(apply_variation(saturation, seed + 1, SATURATION_VARIATION), 20, 95)


def base_lightness(analysis: PromptAnalysis, intent: IntentAnalysis, seed: int) -> float:
    lightness = LIGHTNESS_BASE[intent.preferred_lightness]
    lightness += analysis.lightness * 25

    if intent.primary_intent in (Intent.WEB, Intent.APP):
        if intent.requires_contrast:
            lightness = clamp(lightness, 45, 60)
    elif intent.primary_intent is Intent.PRESENTATION:
        lightness = max(lightness, 48)

    return clamp(apply_variation(lightness, seed + 2, LIGHTNESS_VARIATION), 35, 75)


def apply_emotion(harmony: ColorHarmony, profile: EmotionalProfile) -> ColorHarmony:
    return ColorHarmony.from_list(
        [apply_emotional_adjustments(color, profile) for color in harmony.as_list()]
    )


def apply_contextual_tuning(
    harmony: ColorHarmony,
    weights: ContextualWeights,
    intent: IntentAnalysis,
    mode: str,
) -> ColorHarmony:
    """Return a tuned copy of *harmony*; the input is left untouched."""
    tuned = ColorHarmony.from_list([color.copy() for color in harmony.as_list()])
    factors = weights.coherence_factors

    if factors.temporal and factors.temporal > 0.5:
        tuned.primary = adjust_temperature(tuned.primary, 0.1)
        tuned.accent = adjust_temperature(tuned.accent, 0.15)

    if factors.environmental and factors.environmental > 0.5:
        for color in (tuned.primary, tuned.secondary):
            color.s = min(95.0, color.s * 1.1)

    if factors.purposeful and factors.purposeful > 0.7:
        for color in (tuned.primary, tuned.secondary):
            color.s = max(30.0, color.s * 0.9)

    if intent.requires_contrast:
        if tuned.background.l > 50:
            tuned.text.l = max(15.0, tuned.text.l - 10)
        else:
            tuned.text.l = min(95.0, tuned.text.l + 10)

    # surfaces stay pinned to the chosen mode after the emotional nudges
    if mode == "dark":
        tuned.background.l = min(tuned.background.l, DARK_SURFACE_MAX)
        tuned.text.l = max(tuned.text.l, DARK_TEXT_MIN)
    else:
        tuned.background.l = max(tuned.background.l, LIGHT_SURFACE_MIN)
        tuned.text.l = min(tuned.text.l, LIGHT_TEXT_MAX)
    return tuned


def _coerce_request(
    request: PaletteRequest | str, seed: int | None, force_variation: bool
) -> PaletteRequest:
    if isinstance(request, PaletteRequest):
        return request
    if not isinstance(request, str):
        raise TypeError("prompt must be a string or PaletteRequest")
    return PaletteRequest(prompt=request, seed=seed, force_variation=force_variation)


def generate_report(
    request: PaletteRequest | str,
    seed: int | None = None,
    force_variation: bool = False,
    knowledge: KnowledgeBase | None = None,
    clock: Clock | None = None,
) -> GenerationReport:
    """Run the full pipeline and return the palette with every intermediate record."""
    req = _coerce_request(request, seed, force_variation)
    kb = knowledge or default_knowledge_base()
    now = (clock or _utc_now)()
    run_seed = req.seed if req.seed is not None else derive_seed(req.prompt, req.force_variation, now)

    analysis = analyze_prompt(req.prompt, kb)
    weights = analyze_color_context(analysis.colors, analysis)
    intent = analyze_intent(analysis, weights)
    profile = generate_profile(analysis)
    mode = determine_mode(analysis)

    hue = base_hue(analysis, weights, kb, run_seed)
    saturation = base_saturation(analysis, intent, run_seed)
    lightness = base_lightness(analysis, intent, run_seed)
    logger.debug(
        "seed=%d base=(%.1f, %.1f, %.1f) harmony=%s mode=%s",
        run_seed,
        hue,
        saturation,
        lightness,
        intent.suggested_harmony.value,
        mode,
    )

    harmony = generate_harmony(
        intent.suggested_harmony, hue, saturation, lightness, dark=mode == "dark"
    )
    harmony = apply_emotion(harmony, profile)
    harmony = apply_contextual_tuning(harmony, weights, intent, mode)
    harmony.text = ensure_accessibility(harmony.text, harmony.background)

    colors, validation, repaired = repair_if_invalid(harmony.as_list())
    final = ColorHarmony.from_list(colors)

    palette = SemanticPalette(
        id=palette_id(req.prompt, run_seed),
        name=palette_name(analysis),
        prompt=req.prompt,
        description=palette_description(analysis, weights, intent.suggested_harmony),
        colors=build_color_groups(final),
        metadata=build_metadata(
            analysis,
            profile,
            weights,
            intent,
            final,
            created_at=now,
            mode=mode,
            seed=run_seed,
        ),
    )
    coherence = validate_semantic_coherence(palette, analysis, weights)

    return GenerationReport(
        palette=palette,
        analysis=analysis,
        weights=weights,
        intent=intent,
        profile=profile,
        harmony=final,
        validation=validation,
        repaired=repaired,
        coherence=coherence,
        emotional_coherence=validate_emotional_coherence(final.as_list(), profile),
        recommendations={
            **contextual_recommendations(profile),
            "mood_adjustments": mood_adjustments(analysis.mood),
        },
    )


def generate_palette(
    request: PaletteRequest | str,
    seed: int | None = None,
    force_variation: bool = False,
    knowledge: KnowledgeBase | None = None,
    clock: Clock | None = None,
) -> SemanticPalette:
    """Return the semantic palette for *request*.

    A fixed *seed* fixes the colors, name and id. ``metadata.created_at`` is
    read from *clock*, so byte-identical output also needs a fixed *clock*.
    """
    return generate_report(request, seed, force_variation, knowledge, clock).palette

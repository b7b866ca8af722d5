from __future__ import annotations

from dataclasses import replace

import pytest

from prompt_palette.context.intelligence import (
    MOOD_MISFIT_PENALTY,
    analyze_color_context,
    analyze_intent,
    calculate_coherence_factors,
    fits_mood,
    reweight_by_context,
)
from prompt_palette.extract.analyzer import analyze_prompt
from prompt_palette.io.models import (
    CoherenceFactors,
    HarmonyType,
    Intent,
    LightnessPreference,
    MatchType,
    Mood,
    SaturationPreference,
    WeightedColor,
)


def _color(h, s, l, weight=1.0, term="ocean", match_type=MatchType.EXACT):
    return WeightedColor(h, s, l, weight, match_type, term, term)


def test_empty_colors_give_neutral_context(kb):
    analysis = analyze_prompt("", kb)
    weights = analyze_color_context((), analysis)
    assert weights.primary_color is None
    assert weights.secondary_colors == ()
    assert weights.dominant_theme == "neutral"
    assert weights.intention_score == pytest.approx(0.5)
    assert weights.coherence_factors.present() == {}


def test_factors_without_evidence_stay_unset(kb):
    factors = calculate_coherence_factors(analyze_prompt("ruby", kb))
    assert factors.temporal is None
    assert factors.environmental is None
    assert factors.purposeful is None


def test_temporal_and_environmental_evidence(kb):
    factors = calculate_coherence_factors(analyze_prompt("ocean sunset at dawn", kb))
    assert factors.temporal is not None and factors.temporal > 0
    assert factors.environmental is not None and factors.environmental > 0


def test_mood_misfit_is_penalised_and_weights_clamped(kb):
    analysis = replace(analyze_prompt("calm", kb), mood=Mood.CALM)
    fitting = _color(200, 40, 60, weight=0.5)
    clashing = _color(10, 95, 50, weight=0.1)
    out = reweight_by_context([fitting, clashing], analysis, CoherenceFactors())
    assert out[0].weight == pytest.approx(0.5)
    assert out[1].weight == pytest.approx(0.0)
    assert fits_mood(fitting, Mood.CALM)
    assert not fits_mood(clashing, Mood.CALM)
    assert MOOD_MISFIT_PENALTY > 0.1


def test_compound_bonus_ranks_first(kb):
    analysis = replace(analyze_prompt("calm", kb), mood=Mood.ELEGANT)
    plain = _color(200, 30, 60, weight=0.9)
    compound = _color(210, 30, 60, weight=0.9, term="calm ocean", match_type=MatchType.COMPOUND)
    weights = analyze_color_context([plain, compound], analysis)
    assert weights.primary_color.match_type is MatchType.COMPOUND
    assert weights.primary_color.weight == pytest.approx(1.0)
    assert len(weights.secondary_colors) == 1


def test_web_use_case_drives_intent(kb):
    analysis = analyze_prompt("clean website for a bakery", kb)
    intent = analyze_intent(analysis, analyze_color_context(analysis.colors, analysis))
    assert intent.primary_intent is Intent.WEB
    assert intent.requires_contrast
    assert intent.suggested_harmony in (HarmonyType.TRIADIC, HarmonyType.ANALOGOUS)


def test_corporate_industry_overrides_to_branding(kb):
    analysis = analyze_prompt("corporate website", kb)
    intent = analyze_intent(analysis, analyze_color_context(analysis.colors, analysis))
    assert intent.primary_intent is Intent.BRANDING
    assert intent.requires_contrast


def test_explicit_harmony_overrides_mood(kb):
    analysis = analyze_prompt("calm ocean in triadic colors", kb)
    intent = analyze_intent(analysis, analyze_color_context(analysis.colors, analysis))
    assert intent.suggested_harmony is HarmonyType.TRIADIC


def test_preferences_follow_biases(kb):
    analysis = analyze_prompt("cyberpunk neon electric city nights", kb)
    intent = analyze_intent(analysis, analyze_color_context(analysis.colors, analysis))
    assert intent.preferred_saturation is SaturationPreference.HIGH
    assert intent.preferred_lightness is LightnessPreference.DARK
    assert intent.suggested_harmony is HarmonyType.COMPLEMENTARY

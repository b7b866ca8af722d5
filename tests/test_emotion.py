from __future__ import annotations

from dataclasses import replace

import pytest

from prompt_palette.extract.analyzer import analyze_prompt
from prompt_palette.features.emotion import (
    apply_emotional_adjustments,
    contextual_recommendations,
    emotional_resonance,
    generate_profile,
    mood_adjustments,
    validate_emotional_coherence,
)
from prompt_palette.io.models import HSLColor, Mood


def test_profile_scalars_are_in_unit_range(kb):
    for prompt in ("cyberpunk neon electric city nights", "calm lake", "", "fun playful party"):
        profile = generate_profile(analyze_prompt(prompt, kb))
        for value in (
            profile.energy_level,
            profile.warmth,
            profile.sophistication,
            profile.playfulness,
        ):
            assert 0.0 <= value <= 1.0


def test_energetic_prompt_has_high_energy(kb):
    profile = generate_profile(analyze_prompt("cyberpunk neon electric city nights", kb))
    assert profile.energy_level > 0.7
    assert profile.dominant_emotion == "excited"


def test_adjustments_keep_hue_and_bounds(kb):
    profile = generate_profile(analyze_prompt("cyberpunk neon electric city nights", kb))
    color = HSLColor(123, 99, 94)
    adjusted = apply_emotional_adjustments(color, profile)
    assert adjusted.h == 123
    assert 5 <= adjusted.s <= 100
    assert 10 <= adjusted.l <= 95
    assert color.as_tuple() == (123, 99, 94)


def test_calm_profile_mutes_saturation(kb):
    profile = generate_profile(analyze_prompt("calm peaceful serene", kb))
    adjusted = apply_emotional_adjustments(HSLColor(200, 60, 50), profile)
    assert adjusted.s < 60


def test_recommendations_cover_three_roles(kb):
    profile = generate_profile(analyze_prompt("cyberpunk neon electric city nights", kb))
    recs = contextual_recommendations(profile)
    assert set(recs) == {"primary", "accent", "background"}
    assert recs["background"]


def test_emotional_coherence_flags_dull_energetic_palette(kb):
    profile = generate_profile(analyze_prompt("cyberpunk neon electric city nights", kb))
    dull = [HSLColor(200, 10, 50)] * 3
    result = validate_emotional_coherence(dull, profile)
    assert result.score < 1.0
    assert result.issues
    assert validate_emotional_coherence([], profile).score == 1.0


def test_mood_adjustments_are_copies():
    table = mood_adjustments(Mood.CALM)
    table["saturation_multiplier"] = 99
    assert mood_adjustments(Mood.CALM)["saturation_multiplier"] == pytest.approx(0.7)


def test_resonance_prefers_matching_colors():
    close = emotional_resonance([HSLColor(50, 75, 65)], "happy")
    far = emotional_resonance([HSLColor(50, 10, 10)], "happy")
    assert close > far
    assert emotional_resonance([HSLColor(0, 50, 50)], "unknown") == pytest.approx(0.7)


def test_dominant_emotion_prefers_extracted_emotion(kb):
    analysis = replace(analyze_prompt("romantic evening", kb), mood=Mood.CALM)
    assert generate_profile(analysis).dominant_emotion == "romantic"

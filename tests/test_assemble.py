from __future__ import annotations

from dataclasses import replace

import pytest

from prompt_palette.context.coherence import validate_semantic_coherence
from prompt_palette.context.intelligence import analyze_color_context, analyze_intent
from prompt_palette.extract.analyzer import analyze_prompt
from prompt_palette.features.emotion import generate_profile
from prompt_palette.features.harmony import generate_harmony
from prompt_palette.io.models import (
    CoherenceFactors,
    ColorHarmony,
    ContextualWeights,
    HarmonyType,
    HSLColor,
    Mood,
    SemanticPalette,
)
from prompt_palette.palette.assemble import (
    build_color_groups,
    build_metadata,
    determine_mode,
    palette_description,
    palette_id,
    palette_name,
    palette_tags,
)


def _harmony() -> ColorHarmony:
    return generate_harmony(HarmonyType.COMPLEMENTARY, 210, 70, 50)


def test_groups_have_four_roles_with_variations():
    groups = build_color_groups(_harmony())
    assert list(groups) == ["background", "primary", "accent", "text"]
    for group in groups.values():
        assert group.base.startswith("#") and len(group.base) == 7
        assert set(group.variations) == {200, 300}
        assert group.description
    assert groups["primary"].name == "Primary"


def test_variation_lightness_is_capped():
    harmony = _harmony()
    harmony.background = HSLColor(0, 0, 95)
    groups = build_color_groups(harmony)
    assert groups["background"].variations[200] == "#ffffff"
    assert groups["background"].variations[300] == "#ffffff"


def test_mode_follows_context_then_mood(kb):
    assert determine_mode(analyze_prompt("city at night", kb)) == "dark"
    assert determine_mode(analyze_prompt("bright morning", kb)) == "light"
    elegant = replace(analyze_prompt("ruby", kb), mood=Mood.ELEGANT, context=())
    assert determine_mode(elegant) == "dark"
    calm = replace(elegant, mood=Mood.CALM)
    assert determine_mode(calm) == "light"


def test_name_from_keywords_or_mood(kb):
    analysis = analyze_prompt("ocean sunset", kb)
    assert palette_name(analysis) == "Ocean Sunset"
    empty = analyze_prompt("", kb)
    assert palette_name(empty) == "Energetic Vibes"


def test_description_mentions_theme_and_harmony(kb):
    analysis = analyze_prompt("", kb)
    weights = ContextualWeights(
        primary_color=None,
        secondary_colors=(),
        dominant_theme="sunset over ocean",
        intention_score=0.9,
        coherence_factors=CoherenceFactors(temporal=0.8, purposeful=0.8),
    )
    text = palette_description(analysis, weights, HarmonyType.TRIADIC)
    assert text.startswith("A color palette inspired by sunset over ocean")
    assert "capturing specific moments in time" in text
    assert "optimized for professional use" in text
    assert text.endswith("Uses triadic color harmony for visual balance and aesthetic appeal")


def test_description_falls_back_to_mood(kb):
    analysis = analyze_prompt("", kb)
    weights = analyze_color_context((), analysis)
    text = palette_description(analysis, weights, HarmonyType.COMPLEMENTARY)
    assert text.startswith("A vibrant, high-energy palette.")


def test_palette_id_is_stable_and_seed_sensitive():
    assert palette_id("ocean", 1) == palette_id("ocean", 1)
    assert palette_id("ocean", 1) != palette_id("ocean", 2)
    assert palette_id("ocean", 1).startswith("palette_")


def test_metadata_records_applied_harmony_and_real_contrast(kb, fixed_clock):
    analysis = analyze_prompt("calm ocean in triadic colors", kb)
    weights = analyze_color_context(analysis.colors, analysis)
    intent = analyze_intent(analysis, weights)
    harmony = generate_harmony(intent.suggested_harmony, 200, 60, 45)
    meta = build_metadata(
        analysis,
        generate_profile(analysis),
        weights,
        intent,
        harmony,
        created_at=fixed_clock(),
        mode="light",
        seed=7,
    )
    assert meta.harmony is HarmonyType.TRIADIC
    assert HarmonyType.TRIADIC.value in meta.tags
    assert set(meta.contrast_ratios) == {
        "primary-background",
        "accent-background",
        "text-background",
    }
    assert meta.wcag_aa == (meta.contrast_ratios["text-background"] >= 4.5)
    assert meta.contextual_analysis["suggested_harmony"] is HarmonyType.TRIADIC
    assert len(meta.color_matches) == len(analysis.colors)
    assert meta.seed == 7


def test_tags_are_deduplicated(kb):
    analysis = replace(analyze_prompt("calm", kb), keywords=("calm", "calm"), emotions=("calm",))
    tags = palette_tags(analysis, HarmonyType.ANALOGOUS)
    assert len(tags) == len(set(tags))


def _palette_for(harmony: ColorHarmony, prompt: str = "x") -> SemanticPalette:
    return SemanticPalette(
        id="p",
        name="n",
        prompt=prompt,
        description="d",
        colors=build_color_groups(harmony),
        metadata=None,  # type: ignore[arg-type]
    )


def test_coherence_flags_hue_drift(kb):
    analysis = analyze_prompt("ruby", kb)
    weights = analyze_color_context(analysis.colors, analysis)
    assert weights.primary_color is not None
    drifted = generate_harmony(
        HarmonyType.MONOCHROMATIC, (weights.primary_color.h + 120) % 360, 60, 50
    )
    report = validate_semantic_coherence(_palette_for(drifted), analysis, weights)
    assert report.score == pytest.approx(0.8)
    assert "Primary color hue deviates significantly from expected theme" in report.issues


def test_coherence_passes_for_matching_palette(kb):
    analysis = analyze_prompt("ruby", kb)
    weights = analyze_color_context(analysis.colors, analysis)
    matching = generate_harmony(HarmonyType.MONOCHROMATIC, weights.primary_color.h, 60, 50)
    report = validate_semantic_coherence(_palette_for(matching), analysis, weights)
    assert report.is_coherent
    assert "Primary color hue deviates significantly from expected theme" not in report.issues


def test_palette_id_accepts_lone_surrogates():
    assert palette_id("\ud800 bad", 1).startswith("palette_")
    assert palette_id("\ud800 bad", 1) != palette_id("\ud801 bad", 1)

from __future__ import annotations

from dataclasses import replace
from types import MappingProxyType

import pytest

from prompt_palette.extract.analyzer import (
    MATCH_WEIGHTS,
    MIXED_PASS_WEIGHT,
    analyze_prompt,
    calculate_confidence,
)
from prompt_palette.extract.entities import detect_harmony, detect_mood, extract_use_case
from prompt_palette.io.models import ColorEntry, HarmonyType, Language, MatchType, Mood
from prompt_palette.lexical.tokenize import tokenize

CYBERPUNK = "cyberpunk neon electric city nights"
LAVENDER = "lavender dreams soft purple elegant peaceful"


def test_non_string_prompt_raises():
    with pytest.raises(TypeError):
        analyze_prompt(None)  # type: ignore[arg-type]


def test_empty_prompt_degrades_to_defaults(kb):
    analysis = analyze_prompt("", kb)
    assert analysis.language is Language.EN
    assert analysis.colors == ()
    assert analysis.mood is Mood.ENERGETIC
    assert analysis.use_case is None
    assert analysis.compound_concepts is None


def test_cyberpunk_reading(kb):
    analysis = analyze_prompt(CYBERPUNK, kb)
    assert analysis.language is Language.EN
    assert analysis.mood is Mood.ENERGETIC
    assert analysis.harmony is HarmonyType.COMPLEMENTARY
    assert "time:night" in analysis.context
    assert "environment:city" in analysis.context
    assert "neon electric" in (analysis.compound_concepts or ())
    assert analysis.saturation > 0.5
    assert analysis.lightness < 0


def test_color_keys_are_unique_and_sorted(kb):
    analysis = analyze_prompt(CYBERPUNK, kb)
    keys = [color.color_key for color in analysis.colors]
    assert len(keys) == len(set(keys))
    weights = [color.weight for color in analysis.colors]
    assert weights == sorted(weights, reverse=True)


def test_compound_match_precedes_token_matches(kb):
    analysis = analyze_prompt(CYBERPUNK, kb)
    compound = [c for c in analysis.colors if c.match_type is MatchType.COMPOUND]
    assert compound and compound[0].original_term == "neon electric"
    assert compound[0].weight == pytest.approx(MATCH_WEIGHTS[MatchType.COMPOUND])


def test_fuzzy_match_is_scaled(kb):
    analysis = analyze_prompt("lavendr", kb)
    assert analysis.colors
    color = analysis.colors[0]
    assert color.match_type is MatchType.FUZZY
    assert color.keyword == "lavender"
    assert color.weight < MATCH_WEIGHTS[MatchType.FUZZY]


def test_lavender_reads_as_calm_and_muted(kb):
    analysis = analyze_prompt(LAVENDER, kb)
    assert analysis.mood is Mood.CALM
    assert analysis.saturation < 0
    assert "lavender" in analysis.keywords


def test_spanish_prompt_uses_spanish_table(kb):
    analysis = analyze_prompt("un océano azul muy tranquilo", kb)
    assert analysis.language is Language.ES
    assert {c.original_term for c in analysis.colors} >= {"océano", "azul"}


def test_use_case_does_not_fire_inside_unrelated_words(kb):
    assert extract_use_case(["soft", "software"], kb) == "tech"
    assert extract_use_case(["happy", "colors"], kb) is None
    assert extract_use_case(["landing", "page"], kb) == "landing"


def test_explicit_harmony_cue_wins():
    assert detect_harmony(["triadic", "neon"], 1) is HarmonyType.TRIADIC


def test_harmony_from_keyword_count_without_cues():
    assert detect_harmony(["ocean"], 1) is HarmonyType.MONOCHROMATIC
    assert detect_harmony(["ocean", "sand"], 2) is HarmonyType.COMPLEMENTARY


def test_mood_ties_go_to_earlier_mood(kb):
    assert detect_mood([], "", kb) is Mood.ENERGETIC


def test_confidence_is_bounded():
    score = calculate_confidence(1.0, ["a"] * 10, [], ["x"] * 5, True, True, True)
    assert 0.0 <= score <= 1.0


def test_synonym_strategy_uses_reverse_lookup(kb):
    assert kb.synonyms("crimson", Language.EN)[0] == "red"
    analysis = analyze_prompt("jet", kb)
    assert [(c.keyword, c.match_type, c.weight) for c in analysis.colors] == [
        ("black", MatchType.SYNONYM, pytest.approx(MATCH_WEIGHTS[MatchType.SYNONYM]))
    ]


def test_stemmed_strategy_when_fuzzy_misses(kb):
    # both words reduce to "calm" but sit below the fuzzy threshold
    entry = ColorEntry(195.0, 40.0, 70.0)
    custom = replace(kb, colors_en=MappingProxyType({"calmfulness": entry}))
    analysis = analyze_prompt("calmization", custom)
    assert len(analysis.colors) == 1
    color = analysis.colors[0]
    assert color.match_type is MatchType.STEMMED
    assert color.keyword == "calmfulness"
    assert color.weight == pytest.approx(MATCH_WEIGHTS[MatchType.STEMMED])


def test_mixed_prompt_adds_spanish_exact_pass(kb):
    analysis = analyze_prompt("the sky and el rojo con", kb)
    assert analysis.language is Language.MIXED
    by_term = {c.original_term: c for c in analysis.colors}
    assert by_term["sky"].weight == pytest.approx(MATCH_WEIGHTS[MatchType.EXACT])
    assert by_term["rojo"].match_type is MatchType.EXACT
    assert by_term["rojo"].weight == pytest.approx(MIXED_PASS_WEIGHT)
    assert by_term["rojo"].color_key == (0.0, 80.0, 50.0)


def test_every_compound_concept_has_a_color(kb):
    for concept in kb.compounds:
        assert concept in kb.colors_en or concept in kb.colors_es, concept


def test_detected_compound_contributes_a_color(kb):
    analysis = analyze_prompt("a twilight forest walk", kb)
    assert "twilight forest" in (analysis.compound_concepts or ())
    compound = [c for c in analysis.colors if c.match_type is MatchType.COMPOUND]
    assert [c.original_term for c in compound] == ["twilight forest"]


def test_tokens_come_from_the_shared_tokenizer(kb):
    prompt = "  Ocean-blue, SUNSET!! vibes "
    assert list(analyze_prompt(prompt, kb).tokens) == tokenize(prompt)

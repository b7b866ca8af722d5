from __future__ import annotations

import pytest

from prompt_palette.io.models import Language
from prompt_palette.lexical.language import detect_language, language_scores
from prompt_palette.lexical.tokenize import normalize_text, stem, stem_all, tokenize


def test_no_signal_defaults_to_english_half_confidence():
    result = detect_language("")
    assert result.primary is Language.EN
    assert result.confidence == pytest.approx(0.5)
    assert not result.has_spanish and not result.has_english


def test_spanish_prompt_is_detected():
    result = detect_language("Un atardecer cálido en la playa")
    assert result.primary is Language.ES
    assert result.confidence == pytest.approx(1.0)
    assert result.has_spanish and not result.is_mixed


def test_english_prompt_is_detected():
    result = detect_language("the ocean is calm")
    assert result.primary is Language.EN
    assert result.has_english


def test_balanced_evidence_is_mixed():
    result = detect_language("the playa y el ocean")
    assert result.primary is Language.MIXED
    assert result.is_mixed
    assert result.confidence == pytest.approx(0.5)


def test_dominant_language_wins_when_both_present():
    spanish, english = language_scores("el sunset and la playa")
    assert (spanish, english) == (4, 2)
    assert detect_language("el sunset and la playa").primary is Language.ES


def test_normalize_keeps_hyphens_and_collapses_space():
    assert normalize_text("  Hello, World!  Neo-noir ") == "hello world neo-noir"
    assert tokenize("Ocean  breeze, calm!") == ["ocean", "breeze", "calm"]


@pytest.mark.parametrize(
    "word, language, expected",
    [
        ("nights", Language.EN, "night"),
        ("oceans", Language.EN, "ocean"),
        ("running", Language.EN, "runn"),
        ("colores", Language.ES, "color"),
        ("rojo", Language.ES, "rojo"),
        ("sky", Language.EN, "sky"),
    ],
)
def test_stem(word, language, expected):
    assert stem(word, language) == expected


def test_stem_all_uses_english_rules_for_mixed():
    assert stem_all(["nights", "oceans"], Language.MIXED) == ["night", "ocean"]

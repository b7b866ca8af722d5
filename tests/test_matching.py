from __future__ import annotations

import pytest

from prompt_palette.extract.matching import (
    detect_compound_concepts,
    find_fuzzy_matches,
    jaro_winkler,
    keyword_matches,
)
from prompt_palette.io.models import MatchType


@pytest.mark.parametrize("word", ["ocean", "a", "lavender", "azul océano"])
def test_identical_strings_score_one(word):
    assert jaro_winkler(word, word) == 1.0


def test_close_words_score_high():
    assert jaro_winkler("ocean", "oceans") >= 0.9
    assert jaro_winkler("Ocean", "ocean") == 1.0


def test_unrelated_words_score_low():
    assert jaro_winkler("abc", "xyz") == 0.0
    assert jaro_winkler("ocean", "") == 0.0


def test_fuzzy_matches_are_sorted_and_thresholded():
    results = find_fuzzy_matches("lavendr", ["lavender", "lava", "red"])
    assert [r.keyword for r in results][0] == "lavender"
    assert all(r.score >= 0.8 for r in results)
    assert results[0].match_type is MatchType.FUZZY
    assert "red" not in [r.keyword for r in results]


def test_compound_concepts_require_adjacent_phrase():
    tokens = ["a", "calm", "ocean", "at", "sunset"]
    compounds = ["calm ocean", "ocean sunset", "forest"]
    assert detect_compound_concepts(tokens, compounds) == ["calm ocean"]


def test_keyword_matching_ignores_short_containment():
    assert keyword_matches("app", "app")
    assert not keyword_matches("happy", "app")
    assert keyword_matches("websites", "website")
    assert not keyword_matches("software", "softwares")

"""String similarity and phrase matching helpers for concept lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from ..io.models import MatchType

FUZZY_THRESHOLD: float = 0.8
_PREFIX_LIMIT = 4
_PREFIX_SCALE = 0.1


@dataclass(frozen=True, slots=True)
class MatchResult:
    keyword: str
    score: float
    match_type: MatchType
    original_term: str


def jaro_winkler(a: str, b: str) -> float:
    """Return the Jaro-Winkler similarity of *a* and *b* (case-insensitive)."""
    s1 = a.lower()
    s2 = b.lower()
    if s1 == s2:
        return 1.0

    len1 = len(s1)
    len2 = len(s2)
    window = max(0, max(len1, len2) // 2 - 1)
    matched1 = [False] * len1
    matched2 = [False] * len2

    matches = 0
    for i, char in enumerate(s1):
        start = max(0, i - window)
        end = min(i + window + 1, len2)
        for j in range(start, end):
            if matched2[j] or s2[j] != char:
                continue
            matched1[i] = True
            matched2[j] = True
            matches += 1
            break

    if matches == 0:
        return 0.0

    transpositions = 0
    k = 0
    for i in range(len1):
        if not matched1[i]:
            continue
        while not matched2[k]:
            k += 1
        if s1[i] != s2[k]:
            transpositions += 1
        k += 1

    jaro = (
        matches / len1 + matches / len2 + (matches - transpositions / 2) / matches
    ) / 3

    prefix = 0
    for i in range(min(len1, len2, _PREFIX_LIMIT)):
        if s1[i] != s2[i]:
            break
        prefix += 1

    return float(jaro + prefix * _PREFIX_SCALE * (1 - jaro))


def find_fuzzy_matches(
    term: str,
    candidates: Iterable[str],
    threshold: float = FUZZY_THRESHOLD,
) -> List[MatchResult]:
    """Return candidates scoring at least *threshold*, best first."""
    results: List[MatchResult] = []
    for candidate in candidates:
        score = jaro_winkler(term, candidate)
        if score >= threshold:
            match_type = MatchType.EXACT if score == 1.0 else MatchType.FUZZY
            results.append(MatchResult(candidate, score, match_type, term))
    results.sort(key=lambda item: item.score, reverse=True)
    return results


def detect_compound_concepts(tokens: Sequence[str], compounds: Iterable[str]) -> List[str]:
    """Return every curated phrase contained in the joined *tokens*."""
    text = " ".join(tokens)
    return [compound for compound in compounds if compound in text]


def keyword_matches(token: str, keyword: str) -> bool:
    """Closed-vocabulary containment test used by the entity extractors.

    Equality always matches; otherwise the keyword must appear inside the
    token and be at least four characters long, so that short keywords such
    as ``app`` do not fire inside unrelated words.
    """
    if token == keyword:
        return True
    return len(keyword) >= 4 and keyword in token

"""Closed-vocabulary entity extraction from tokenized prompts."""

from __future__ import annotations

from typing import Dict, List, Mapping, Sequence, Tuple

from .matching import keyword_matches
from ..io.models import HarmonyType, Language, Mood
from ..knowledge.base import KnowledgeBase
from ..knowledge.lexicon import (
    BALANCE_CUES,
    CONTRAST_CUES,
    EXPLICIT_HARMONY_CUES,
    HARMONY_CUES,
)
from ..lexical.tokenize import stem

_MOOD_ORDER: Tuple[Mood, ...] = tuple(Mood)


def _dedupe(items: Sequence[str]) -> List[str]:
    return list(dict.fromkeys(items))


def extract_keywords(
    tokens: Sequence[str],
    stems: Sequence[str],
    language: Language,
    kb: KnowledgeBase,
) -> List[str]:
    """Return knowledge-base concepts named by the prompt.

    Direct token hits come first, then concepts whose stem equals a token
    stem, then two-word phrases. Mixed prompts also check both tables.
    """
    table = kb.color_table(language)
    keywords: List[str] = [token for token in tokens if token in table]

    stem_set = set(stems)
    for key in table:
        if stem(key, language) in stem_set:
            keywords.append(key)

    for left, right in zip(tokens, tokens[1:]):
        phrase = f"{left} {right}"
        if phrase in table:
            keywords.append(phrase)

    if language is Language.MIXED:
        for token in tokens:
            if token in kb.colors_en or token in kb.colors_es:
                keywords.append(token)

    return _dedupe(keywords)


def _vocabulary_hits(
    tokens: Sequence[str], stems: Sequence[str], vocabulary: frozenset
) -> List[str]:
    hits: List[str] = []
    for token, token_stem in zip(tokens, stems):
        if token in vocabulary:
            hits.append(token)
        elif token_stem in vocabulary:
            hits.append(token_stem)
    return _dedupe(hits)


def extract_emotions(
    tokens: Sequence[str], stems: Sequence[str], kb: KnowledgeBase
) -> List[str]:
    return _vocabulary_hits(tokens, stems, kb.emotion_words)


def extract_industries(
    tokens: Sequence[str], stems: Sequence[str], kb: KnowledgeBase
) -> List[str]:
    return _vocabulary_hits(tokens, stems, kb.industry_words)


def extract_objects(text: str, kb: KnowledgeBase) -> List[str]:
    """Return material and object words appearing anywhere in *text*."""
    return [word for word in kb.object_words if word in text]


def extract_brand_personality(
    tokens: Sequence[str], kb: KnowledgeBase
) -> List[str] | None:
    traits: List[str] = []
    for trait, keywords in kb.brand_personalities.items():
        if any(keyword_matches(token, kw) for token in tokens for kw in keywords):
            traits.append(trait)
    return traits or None


def extract_use_case(tokens: Sequence[str], kb: KnowledgeBase) -> str | None:
    """Return the first use case, in priority order, that the prompt names."""
    text = " ".join(tokens)
    for use_case, keywords in kb.use_cases:
        for keyword in keywords:
            if " " in keyword:
                if keyword in text:
                    return use_case
            elif any(keyword_matches(token, keyword) for token in tokens):
                return use_case
    return None


def extract_context(
    tokens: Sequence[str], stems: Sequence[str], kb: KnowledgeBase
) -> List[str]:
    """Return ``group:word`` tags for time, season, environment, style and tone."""
    present = set(tokens) | set(stems)
    tags: List[str] = []
    for group, words in kb.context_groups.items():
        for word in words:
            if word in present:
                tags.append(f"{group}:{word}")
    return _dedupe(tags)


def _mean_modifier(
    tokens: Sequence[str], stems: Sequence[str], modifiers: Mapping[str, float]
) -> float:
    values: List[float] = []
    for token, token_stem in zip(tokens, stems):
        if token in modifiers:
            values.append(modifiers[token])
        elif token_stem in modifiers:
            values.append(modifiers[token_stem])
    if not values:
        return 0.0
    return float(max(-1.0, min(1.0, sum(values) / len(values))))


def calculate_biases(
    tokens: Sequence[str], stems: Sequence[str], kb: KnowledgeBase
) -> Dict[str, float]:
    """Return intensity, saturation, lightness and temperature scalars."""
    warm = 0
    cool = 0
    for token in tokens:
        if any(keyword_matches(token, word) for word in kb.warm_words):
            warm += 1
        if any(keyword_matches(token, word) for word in kb.cool_words):
            cool += 1
    total = warm + cool
    temperature = (warm - cool) / total if total else 0.0
    return {
        "intensity": _mean_modifier(tokens, stems, kb.intensity_modifiers),
        "saturation": _mean_modifier(tokens, stems, kb.saturation_modifiers),
        "lightness": _mean_modifier(tokens, stems, kb.lightness_modifiers),
        "temperature": float(temperature),
    }


def detect_explicit_harmony(tokens: Sequence[str]) -> HarmonyType | None:
    """Return the harmony the prompt asks for by name, if any."""
    text = " ".join(tokens)
    for harmony, cues in EXPLICIT_HARMONY_CUES:
        for cue in cues:
            if " " in cue:
                if cue in text:
                    return HarmonyType(harmony)
            elif any(token.startswith(cue) for token in tokens):
                return HarmonyType(harmony)
    return None


def detect_harmony(tokens: Sequence[str], keyword_count: int) -> HarmonyType:
    explicit = detect_explicit_harmony(tokens)
    if explicit is not None:
        return explicit
    token_set = set(tokens)
    if token_set.intersection(CONTRAST_CUES):
        return HarmonyType.COMPLEMENTARY
    if token_set.intersection(HARMONY_CUES):
        return HarmonyType.ANALOGOUS
    if token_set.intersection(BALANCE_CUES):
        return HarmonyType.TRIADIC
    if keyword_count == 1:
        return HarmonyType.MONOCHROMATIC
    if keyword_count == 2:
        return HarmonyType.COMPLEMENTARY
    if keyword_count == 3:
        return HarmonyType.TRIADIC
    return HarmonyType.ANALOGOUS


def mood_scores(tokens: Sequence[str], text: str, kb: KnowledgeBase) -> Dict[Mood, int]:
    """Score each mood: +2 for a token hit and +1 for a substring hit."""
    token_set = set(tokens)
    scores: Dict[Mood, int] = {}
    for mood in _MOOD_ORDER:
        score = 0
        for word in kb.mood_words.get(mood.value, ()):
            if word in token_set:
                score += 2
            if word in text:
                score += 1
        scores[mood] = score
    return scores


def detect_mood(tokens: Sequence[str], text: str, kb: KnowledgeBase) -> Mood:
    """Return the highest scoring mood; ties go to the earlier mood."""
    scores = mood_scores(tokens, text, kb)
    best = _MOOD_ORDER[0]
    for mood in _MOOD_ORDER[1:]:
        if scores[mood] > scores[best]:
            best = mood
    return best

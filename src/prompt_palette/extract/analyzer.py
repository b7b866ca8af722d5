"""Prompt analysis: weighted color extraction and the structured reading."""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Sequence, Set, Tuple

from .entities import (
    calculate_biases,
    detect_harmony,
    detect_mood,
    extract_brand_personality,
    extract_context,
    extract_emotions,
    extract_industries,
    extract_keywords,
    extract_objects,
    extract_use_case,
)
from .matching import FUZZY_THRESHOLD, detect_compound_concepts, find_fuzzy_matches
from ..io.models import ColorEntry, Language, MatchType, PromptAnalysis, WeightedColor
from ..knowledge.base import KnowledgeBase, default_knowledge_base
from ..lexical.language import detect_language
from ..lexical.tokenize import normalize_text, stem, stem_all, tokenize

logger = logging.getLogger(__name__)

MATCH_WEIGHTS: Dict[MatchType, float] = {
    MatchType.EXACT: 1.0,
    MatchType.COMPOUND: 0.95,
    MatchType.SYNONYM: 0.85,
    MatchType.FUZZY: 0.75,
    MatchType.STEMMED: 0.7,
}
MIXED_PASS_WEIGHT: float = 0.9

CONFIDENCE_WEIGHTS: Dict[str, float] = {
    "language": 0.3,
    "keywords": 0.2,
    "colors": 0.2,
    "emotions": 0.1,
    "purpose": 0.1,
    "personality": 0.05,
    "compounds": 0.05,
}


class _ColorCollector:
    """Accumulate weighted colors, keeping the first match per exact HSL key."""

    def __init__(self) -> None:
        self.colors: List[WeightedColor] = []
        self._seen: Set[Tuple[float, float, float]] = set()

    def is_new(self, entry: ColorEntry) -> bool:
        return (entry.h, entry.s, entry.l) not in self._seen

    def add(
        self,
        entry: ColorEntry,
        weight: float,
        match_type: MatchType,
        term: str,
        keyword: str,
    ) -> bool:
        key = (entry.h, entry.s, entry.l)
        if key in self._seen:
            return False
        self._seen.add(key)
        self.colors.append(
            WeightedColor(
                h=entry.h,
                s=entry.s,
                l=entry.l,
                weight=float(weight),
                match_type=match_type,
                original_term=term,
                keyword=keyword,
            )
        )
        return True


def _match_token(
    token: str,
    language: Language,
    table: Mapping[str, ColorEntry],
    kb: KnowledgeBase,
    collector: _ColorCollector,
) -> None:
    # exact
    if token in table:
        collector.add(table[token], MATCH_WEIGHTS[MatchType.EXACT], MatchType.EXACT, token, token)
        return

    # synonym
    candidates = [syn for syn in kb.synonyms(token, language) if syn in table]
    if candidates:
        for synonym in candidates:
            if collector.add(
                table[synonym], MATCH_WEIGHTS[MatchType.SYNONYM], MatchType.SYNONYM, token, synonym
            ):
                break
        return

    # fuzzy
    fuzzy = find_fuzzy_matches(token, table.keys(), FUZZY_THRESHOLD)
    if fuzzy:
        best = fuzzy[0]
        collector.add(
            table[best.keyword],
            best.score * MATCH_WEIGHTS[MatchType.FUZZY],
            MatchType.FUZZY,
            token,
            best.keyword,
        )
        return

    # stemmed
    token_stem = stem(token, language)
    for key, entry in table.items():
        if key != token and stem(key, language) == token_stem and collector.is_new(entry):
            collector.add(entry, MATCH_WEIGHTS[MatchType.STEMMED], MatchType.STEMMED, token, key)
            return


def extract_colors(
    tokens: Sequence[str],
    language: Language,
    compounds: Sequence[str],
    kb: KnowledgeBase,
) -> List[WeightedColor]:
    """Return deduplicated weighted colors for *tokens*, heaviest first."""
    table = kb.color_table(language)
    collector = _ColorCollector()

    for concept in compounds:
        entry = kb.lookup(concept, language)
        if entry is not None:
            collector.add(
                entry, MATCH_WEIGHTS[MatchType.COMPOUND], MatchType.COMPOUND, concept, concept
            )

    stop_words = kb.stop_words(language)
    for token in tokens:
        if token in stop_words:
            continue
        _match_token(token, language, table, kb, collector)

    if language is Language.MIXED:
        for extra_table in (kb.colors_es, kb.colors_en):
            for token in tokens:
                if token in extra_table:
                    collector.add(
                        extra_table[token], MIXED_PASS_WEIGHT, MatchType.EXACT, token, token
                    )

    return sorted(collector.colors, key=lambda item: item.weight, reverse=True)


def calculate_confidence(
    language_confidence: float,
    keywords: Sequence[str],
    colors: Sequence[WeightedColor],
    emotions: Sequence[str],
    has_purpose: bool,
    has_personality: bool,
    has_compounds: bool,
) -> float:
    w = CONFIDENCE_WEIGHTS
    score = language_confidence * w["language"]
    score += min(len(keywords) / 5, 1.0) * w["keywords"]
    score += min(len(colors) / 3, 1.0) * w["colors"]
    score += min(len(emotions) / 2, 1.0) * w["emotions"]
    if has_purpose:
        score += w["purpose"]
    if has_personality:
        score += w["personality"]
    if has_compounds:
        score += w["compounds"]
    return float(max(0.0, min(1.0, score)))


def analyze_prompt(prompt: str, knowledge: KnowledgeBase | None = None) -> PromptAnalysis:
    """Return the structured reading of *prompt*."""
    if not isinstance(prompt, str):
        raise TypeError("prompt must be a string")
    kb = knowledge or default_knowledge_base()

    detection = detect_language(prompt)
    language = detection.primary
    text = normalize_text(prompt)
    tokens = tokenize(prompt)
    stems = stem_all(tokens, language)

    keywords = extract_keywords(tokens, stems, language, kb)
    emotions = extract_emotions(tokens, stems, kb)
    industries = extract_industries(tokens, stems, kb)
    objects = extract_objects(text, kb)
    compounds = detect_compound_concepts(tokens, kb.compounds)
    brand_personality = extract_brand_personality(tokens, kb)
    use_case = extract_use_case(tokens, kb)
    colors = extract_colors(tokens, language, compounds, kb)
    biases = calculate_biases(tokens, stems, kb)

    confidence = calculate_confidence(
        detection.confidence,
        keywords,
        colors,
        emotions,
        has_purpose=bool(industries) or use_case is not None,
        has_personality=brand_personality is not None,
        has_compounds=bool(compounds),
    )

    analysis = PromptAnalysis(
        language=language,
        confidence=confidence,
        keywords=tuple(keywords),
        emotions=tuple(emotions),
        industries=tuple(industries),
        objects=tuple(objects),
        colors=tuple(colors),
        intensity=biases["intensity"],
        temperature=biases["temperature"],
        saturation=biases["saturation"],
        lightness=biases["lightness"],
        harmony=detect_harmony(tokens, len(keywords)),
        mood=detect_mood(tokens, text, kb),
        context=tuple(extract_context(tokens, stems, kb)),
        tokens=tuple(tokens),
        brand_personality=tuple(brand_personality) if brand_personality else None,
        use_case=use_case,
        compound_concepts=tuple(compounds) if compounds else None,
    )
    logger.debug(
        "analyzed %r: lang=%s mood=%s harmony=%s colors=%d",
        prompt,
        language.value,
        analysis.mood.value,
        analysis.harmony.value,
        len(colors),
    )
    return analysis

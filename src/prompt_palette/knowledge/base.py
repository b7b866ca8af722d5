"""Immutable knowledge base shared by every stage of the pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from . import colors, lexicon
from ..io.models import ColorEntry, Language

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class KnowledgeBase:
    """Read-only concept tables and closed vocabularies.

    Instances are safe to share between concurrent requests; tests build
    alternate instances with :func:`dataclasses.replace`.
    """

    colors_en: Mapping[str, ColorEntry]
    colors_es: Mapping[str, ColorEntry]
    synonyms_en: Mapping[str, Tuple[str, ...]]
    synonyms_es: Mapping[str, Tuple[str, ...]]
    compounds: Tuple[str, ...]
    intensity_modifiers: Mapping[str, float]
    saturation_modifiers: Mapping[str, float]
    lightness_modifiers: Mapping[str, float]
    warm_words: frozenset
    cool_words: frozenset
    emotion_words: frozenset
    industry_words: frozenset
    object_words: Tuple[str, ...]
    brand_personalities: Mapping[str, Tuple[str, ...]]
    use_cases: Tuple[Tuple[str, Tuple[str, ...]], ...]
    context_groups: Mapping[str, Tuple[str, ...]]
    mood_words: Mapping[str, Tuple[str, ...]]
    stop_words_en: frozenset
    stop_words_es: frozenset

    def color_table(self, language: Language) -> Mapping[str, ColorEntry]:
        """Return the concept table used for *language* (mixed reads English)."""
        if language is Language.ES:
            return self.colors_es
        return self.colors_en

    def synonym_table(self, language: Language) -> Mapping[str, Tuple[str, ...]]:
        if language is Language.ES:
            return self.synonyms_es
        return self.synonyms_en

    def synonyms(self, term: str, language: Language) -> list[str]:
        """Return synonyms for *term*.

        A canonical term yields its synonym list; a listed synonym yields the
        canonical term followed by its siblings.
        """
        table = self.synonym_table(language)
        normalized = term.lower()
        direct = table.get(normalized)
        if direct is not None:
            return list(direct)
        for main_term, siblings in table.items():
            if normalized in siblings:
                return [main_term, *(item for item in siblings if item != normalized)]
        return []

    def stop_words(self, language: Language) -> frozenset:
        if language is Language.ES:
            return self.stop_words_es
        if language is Language.MIXED:
            return self.stop_words_en | self.stop_words_es
        return self.stop_words_en

    def lookup(self, term: str, language: Language) -> ColorEntry | None:
        """Return the entry for *term*, trying the other language for mixed prompts."""
        entry = self.color_table(language).get(term)
        if entry is None and language is Language.MIXED:
            entry = self.colors_es.get(term)
        return entry


def _entries(table: Mapping[str, Tuple[int, int, int]]) -> Mapping[str, ColorEntry]:
    converted: Dict[str, ColorEntry] = {
        key: ColorEntry(float(h), float(s), float(l)) for key, (h, s, l) in table.items()
    }
    return MappingProxyType(converted)


@lru_cache(maxsize=1)
def default_knowledge_base() -> KnowledgeBase:
    """Build the bundled knowledge base once and return the shared instance."""
    kb = KnowledgeBase(
        colors_en=_entries(colors.ENGLISH_COLORS),
        colors_es=_entries(colors.SPANISH_COLORS),
        synonyms_en=MappingProxyType(dict(lexicon.SYNONYMS_EN)),
        synonyms_es=MappingProxyType(dict(lexicon.SYNONYMS_ES)),
        compounds=tuple(dict.fromkeys(lexicon.COMPOUND_CONCEPTS)),
        intensity_modifiers=MappingProxyType(dict(lexicon.INTENSITY_MODIFIERS)),
        saturation_modifiers=MappingProxyType(dict(lexicon.SATURATION_MODIFIERS)),
        lightness_modifiers=MappingProxyType(dict(lexicon.LIGHTNESS_MODIFIERS)),
        warm_words=frozenset(lexicon.WARM_WORDS),
        cool_words=frozenset(lexicon.COOL_WORDS),
        emotion_words=frozenset(lexicon.EMOTION_WORDS),
        industry_words=frozenset(lexicon.INDUSTRY_WORDS),
        object_words=lexicon.OBJECT_WORDS,
        brand_personalities=MappingProxyType(dict(lexicon.BRAND_PERSONALITIES)),
        use_cases=lexicon.USE_CASES,
        context_groups=MappingProxyType(dict(lexicon.CONTEXT_GROUPS)),
        mood_words=MappingProxyType(dict(lexicon.MOOD_WORDS)),
        stop_words_en=frozenset(lexicon.STOP_WORDS_EN),
        stop_words_es=frozenset(lexicon.STOP_WORDS_ES),
    )
    logger.debug(
        "knowledge base loaded: %d english, %d spanish concepts",
        len(kb.colors_en),
        len(kb.colors_es),
    )
    return kb

"""English/Spanish language detection for prompts."""

from __future__ import annotations

import logging
import re
from typing import Tuple

from ..io.models import Language, LanguageDetection

logger = logging.getLogger(__name__)

SPANISH_INDICATORS: frozenset = frozenset({
    "el", "la", "los", "las", "un", "una", "unos", "unas", "de", "del", "en", "con",
    "por", "para", "sin", "sobre", "yo", "tú", "él", "ella", "nosotros", "vosotros",
    "ellos", "es", "está", "son", "están", "ser", "estar", "hay", "muy", "más",
    "menos", "mejor", "peor", "grande", "pequeño", "qué", "cómo", "cuándo", "dónde",
    "quién", "cuál",
})

ENGLISH_INDICATORS: frozenset = frozenset({
    "the", "is", "are", "and", "or", "but", "with", "from", "this", "that", "these",
    "those", "have", "has", "had", "will", "would", "should", "could", "what",
    "when", "where",
})

SPANISH_CHARS: Tuple[str, ...] = ("ñ", "á", "é", "í", "ó", "ú", "ü", "¿", "¡")

_SPANISH_PATTERNS = (
    re.compile(r"ción\b"),
    re.compile(r"dad\b"),
    re.compile(r"oso\b|osa\b"),
)
_ENGLISH_PATTERNS = (
    re.compile(r"ing\b"),
    re.compile(r"tion\b"),
    re.compile(r"ly\b"),
)

_DOMINANCE = 1.5


def language_scores(text: str) -> Tuple[int, int]:
    """Return the raw ``(spanish, english)`` evidence scores for *text*."""
    lowered = text.lower()
    words = lowered.split()

    spanish = sum(3 for char in SPANISH_CHARS if char in lowered)
    spanish += sum(2 for word in words if word in SPANISH_INDICATORS)
    spanish += sum(1 for pattern in _SPANISH_PATTERNS if pattern.search(lowered))

    english = sum(2 for word in words if word in ENGLISH_INDICATORS)
    english += sum(1 for pattern in _ENGLISH_PATTERNS if pattern.search(lowered))
    return spanish, english


def detect_language(text: str) -> LanguageDetection:
    """Classify *text* as English, Spanish or mixed with a confidence share."""
    spanish, english = language_scores(text)
    total = spanish + english
    has_spanish = spanish > 0
    has_english = english > 0

    if total == 0:
        return LanguageDetection(Language.EN, 0.5, False, False, False)

    if has_spanish and has_english:
        if spanish > english * _DOMINANCE:
            primary, confidence = Language.ES, spanish / total
        elif english > spanish * _DOMINANCE:
            primary, confidence = Language.EN, english / total
        else:
            primary, confidence = Language.MIXED, min(spanish, english) / total
    elif spanish >= english:
        primary, confidence = Language.ES, spanish / total
    else:
        primary, confidence = Language.EN, english / total

    logger.debug("language scores es=%d en=%d -> %s", spanish, english, primary.value)
    return LanguageDetection(
        primary=primary,
        confidence=float(confidence),
        has_spanish=has_spanish,
        has_english=has_english,
        is_mixed=primary is Language.MIXED,
    )

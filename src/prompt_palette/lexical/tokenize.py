"""Prompt normalization, tokenization and suffix stemming."""

from __future__ import annotations

import re
from typing import Dict, List, Tuple

from ..io.models import Language

_NON_WORD_RE = re.compile(r"[^\w\s-]")
_SPACE_RE = re.compile(r"\s+")

# Ordered longest-first within each family; the first suffix that fits wins.
STEM_RULES: Dict[Language, Tuple[Tuple[str, ...], int]] = {
    Language.ES: (
        (
            "amiento", "imiento", "amente", "mente", "ación", "ición", "ador", "edor",
            "idor", "ante", "ente", "ible", "able", "oso", "osa", "ivo", "iva", "ado",
            "ada", "ido", "ida", "ar", "er", "ir", "ía", "ías", "ío", "ían", "es", "os",
            "as", "a", "o", "s",
        ),
        4,
    ),
    Language.EN: (
        (
            "ational", "tional", "enci", "anci", "izer", "alli", "entli", "eli", "ousli",
            "ization", "ation", "ator", "alism", "iveness", "fulness", "ousness",
            "aliti", "iviti", "biliti", "logi", "ing", "ed", "er", "est", "ly", "ness",
            "ment", "tion", "sion", "ful", "less", "ous", "ive", "able", "ible", "al",
            "ial", "ic", "s", "es", "ies",
        ),
        3,
    ),
}


def normalize_text(text: str) -> str:
    """Lowercase *text*, drop punctuation other than hyphens, collapse spaces."""
    lowered = text.lower()
    cleaned = _NON_WORD_RE.sub(" ", lowered)
    return _SPACE_RE.sub(" ", cleaned).strip()


def tokenize(text: str) -> List[str]:
    return [token for token in normalize_text(text).split(" ") if token]


def stem(word: str, language: Language = Language.EN) -> str:
    """Strip the first matching suffix for *language* when enough stem remains."""
    suffixes, min_length = STEM_RULES[Language.ES if language is Language.ES else Language.EN]
    for suffix in suffixes:
        if word.endswith(suffix) and len(word) > len(suffix) + min_length:
            return word[: -len(suffix)]
    return word


def stem_all(tokens: List[str], language: Language) -> List[str]:
    return [stem(token, language) for token in tokens]

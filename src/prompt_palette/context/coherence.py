"""Post-assembly check that a palette still reflects its prompt."""

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

import numpy as np

from ..features.color import hex_to_hsl
from ..io.models import (
    CoherenceReport,
    ContextualWeights,
    PromptAnalysis,
    SemanticPalette,
)

logger = logging.getLogger(__name__)

COHERENCE_WARN_BELOW: float = 0.8
HUE_TOLERANCE: float = 30.0

# Expected (saturation range, lightness range) for a prompt's leading emotion.
EMOTION_EXPECTATIONS: Dict[str, Tuple[Tuple[float, float], Tuple[float, float]]] = {
    "happy": ((60, 100), (60, 85)),
    "sad": ((20, 50), (30, 50)),
    "calm": ((30, 60), (50, 75)),
    "energetic": ((70, 100), (50, 70)),
    "elegant": ((20, 50), (35, 55)),
}

_SAMPLED_ROLES = ("primary", "accent", "background")


def _sampled_means(palette: SemanticPalette) -> Tuple[float, float]:
    sampled = [hex_to_hsl(palette.colors[role].base) for role in _SAMPLED_ROLES]
    saturation = float(np.mean([color.s for color in sampled]))
    lightness = float(np.mean([color.l for color in sampled]))
    return saturation, lightness


def validate_semantic_coherence(
    palette: SemanticPalette,
    analysis: PromptAnalysis,
    weights: ContextualWeights,
) -> CoherenceReport:
    """Score how well *palette* matches the prompt reading; never modifies it."""
    issues: List[str] = []
    suggestions: List[str] = []
    score = 1.0

    if weights.primary_color is not None:
        primary = hex_to_hsl(palette.colors["primary"].base)
        expected = weights.primary_color.h
        diff = abs(primary.h - expected)
        if HUE_TOLERANCE < diff < 360 - HUE_TOLERANCE:
            score -= 0.2
            issues.append("Primary color hue deviates significantly from expected theme")
            suggestions.append(f"Consider moving the primary hue closer to {expected:.0f} degrees")

    avg_saturation, avg_lightness = _sampled_means(palette)

    if analysis.saturation > 0.5 and avg_saturation < 50:
        score -= 0.15
        issues.append("Palette saturation is lower than expected from prompt")
        suggestions.append("Increase overall saturation to match the vibrant intent")
    elif analysis.saturation < -0.5 and avg_saturation > 70:
        score -= 0.15
        issues.append("Palette saturation is higher than expected from prompt")
        suggestions.append("Decrease overall saturation to match the muted intent")

    if analysis.lightness > 0.5 and avg_lightness < 50:
        score -= 0.15
        issues.append("Palette is darker than expected from prompt")
        suggestions.append("Increase overall lightness for a brighter appearance")
    elif analysis.lightness < -0.5 and avg_lightness > 60:
        score -= 0.15
        issues.append("Palette is lighter than expected from prompt")
        suggestions.append("Decrease overall lightness for a darker appearance")

    if analysis.emotions:
        emotion = analysis.emotions[0]
        expectation = EMOTION_EXPECTATIONS.get(emotion)
        if expectation is not None:
            (s_min, s_max), (l_min, l_max) = expectation
            if not (s_min <= avg_saturation <= s_max and l_min <= avg_lightness <= l_max):
                score -= 0.1
                issues.append(f"Palette does not strongly evoke the emotion: {emotion}")

    report = CoherenceReport(score=float(max(0.0, score)), issues=issues, suggestions=suggestions)
    if report.score < COHERENCE_WARN_BELOW:
        logger.warning(
            "low semantic coherence %.2f for %r: %s",
            report.score,
            palette.prompt,
            "; ".join(issues),
        )
    return report

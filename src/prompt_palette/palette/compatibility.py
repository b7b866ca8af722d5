"""Accessibility repair, pairwise compatibility and whole-palette validation."""

from __future__ import annotations

import logging
from itertools import combinations
from typing import List, Sequence

import numpy as np

from ..features.color import clamp, contrast_ratio, hue_distance
from ..io.models import CompatibilityResult, HSLColor, PaletteValidation

logger = logging.getLogger(__name__)

WCAG_AA = 4.5
LIGHTNESS_STEP = 2.0
COMPATIBILITY_THRESHOLD = 0.6
VALID_SCORE_THRESHOLD = 0.7
MAX_ISSUES = 3
HUE_BUCKET = 30

SPREAD_BELOW = 15.0
SPREAD_STEP = 10.0
SATURATION_CUT = 20.0
SATURATION_FLOOR = 30.0


def ensure_accessibility(
    text: HSLColor, background: HSLColor, target: float = WCAG_AA
) -> HSLColor:
    """Return a copy of *text* stepped away from *background* until *target* is met.

    The loop stops early only when the lightness reaches 0 or 100.
    """
    if target <= 0:
        raise ValueError("contrast target must be positive")

    adjusted = text.copy()
    step = -LIGHTNESS_STEP if background.l > 50 else LIGHTNESS_STEP
    while contrast_ratio(adjusted, background) < target:
        if (step < 0 and adjusted.l <= 0) or (step > 0 and adjusted.l >= 100):
            break
        adjusted.l = clamp(adjusted.l + step, 0, 100)
    return adjusted


def check_compatibility(a: HSLColor, b: HSLColor) -> CompatibilityResult:
    """Score how well two colors sit together; 1.0 means no concerns."""
    issues: List[str] = []
    suggestions: List[str] = []
    score = 1.0

    hue_diff = hue_distance(a.h, b.h)
    if 0 < hue_diff < 15:
        score -= 0.2
        issues.append("Colors are too similar in hue")
        suggestions.append("Increase hue difference to at least 30 degrees")
    if 150 < hue_diff < 170:
        score -= 0.15
        issues.append("Hues may clash visually")
        suggestions.append("Use true complementary colors (180 degrees) or harmonious angles")

    if abs(a.s - b.s) > 70:
        score -= 0.1
        issues.append("Extreme saturation difference may feel disjointed")
        suggestions.append("Balance saturation levels for cohesion")
    if a.s > 80 and b.s > 80:
        score -= 0.1
        issues.append("Both colors highly saturated, may be overwhelming")
        suggestions.append("Reduce saturation of one color for balance")

    if abs(a.l - b.l) < 10:
        score -= 0.25
        issues.append("Colors have similar lightness, low contrast")
        suggestions.append("Increase lightness difference for better contrast")

    if contrast_ratio(a, b) < 3:
        score -= 0.3
        issues.append("Low contrast ratio, not suitable for text on background")
        suggestions.append("Ensure a 4.5:1 contrast ratio for WCAG AA compliance")

    if 170 < hue_diff < 190 and a.s > 70 and b.s > 70:
        score -= 0.15
        issues.append("High saturation complementary colors may vibrate")
        suggestions.append("Reduce saturation or adjust hue slightly")

    return CompatibilityResult(
        score=float(max(0.0, score)),
        is_compatible=score >= COMPATIBILITY_THRESHOLD,
        issues=issues,
        suggestions=suggestions,
    )


def validate_palette(colors: Sequence[HSLColor]) -> PaletteValidation:
    """Combine pairwise compatibility with palette-wide balance checks."""
    issues: List[str] = []
    suggestions: List[str] = []
    scores: List[float] = []

    for (i, left), (j, right) in combinations(enumerate(colors), 2):
        result = check_compatibility(left, right)
        scores.append(result.score)
        if not result.is_compatible:
            issues.append(f"Color {i + 1} and Color {j + 1}: {', '.join(result.issues)}")
            suggestions.extend(result.suggestions)

    if colors:
        saturation = float(np.mean([color.s for color in colors]))
        lightness = float(np.mean([color.l for color in colors]))

        if saturation > 80:
            issues.append("Overall palette is overly saturated")
            suggestions.append("Include some muted tones for balance")
            scores.append(0.7)
        if saturation < 20:
            issues.append("Overall palette lacks vibrancy")
            suggestions.append("Add more saturated accent colors")
            scores.append(0.7)
        if lightness > 80 or lightness < 20:
            issues.append("Palette lightness is extreme")
            suggestions.append("Balance with mid-range lightness values")
            scores.append(0.6)

        buckets = {int(color.h // HUE_BUCKET) for color in colors}
        if len(buckets) < 2:
            issues.append("Limited hue variety")
            suggestions.append("Consider adding colors from different hue families")
            scores.append(0.8)

    overall = float(np.mean(scores)) if scores else 1.0
    issues = list(dict.fromkeys(issues))
    return PaletteValidation(
        is_valid=overall >= VALID_SCORE_THRESHOLD and len(issues) < MAX_ISSUES,
        overall_score=overall,
        issues=issues,
        suggestions=list(dict.fromkeys(suggestions)),
    )


def auto_fix_palette(colors: Sequence[HSLColor]) -> List[HSLColor]:
    """Run one best-effort repair pass over copies of *colors*.

    The result is not re-validated and may still fail ``validate_palette``.
    """
    fixed = [color.copy() for color in colors]

    for left, right in zip(fixed, fixed[1:]):
        if abs(left.l - right.l) < SPREAD_BELOW:
            darker, lighter = (left, right) if left.l <= right.l else (right, left)
            darker.l = clamp(darker.l - SPREAD_STEP, 0, 100)
            lighter.l = clamp(lighter.l + SPREAD_STEP, 0, 100)

    if fixed and float(np.mean([color.s for color in fixed])) > 80:
        for color in fixed[1:]:
            if color.s > SATURATION_FLOOR:
                color.s = max(SATURATION_FLOOR, color.s - SATURATION_CUT)

    if len(fixed) > 2:
        if not any(color.l > 70 for color in fixed):
            fixed[-1].l = 85.0
        if not any(color.l < 30 for color in fixed):
            fixed[-2].l = 25.0

    return fixed


def repair_if_invalid(colors: Sequence[HSLColor]) -> tuple[List[HSLColor], PaletteValidation, bool]:
    """Validate *colors* and run the repair pass when they fail."""
    validation = validate_palette(colors)
    if validation.is_valid:
        return [color.copy() for color in colors], validation, False
    logger.info(
        "palette invalid (score %.2f, %d issues); running repair pass",
        validation.overall_score,
        len(validation.issues),
    )
    return auto_fix_palette(colors), validation, True

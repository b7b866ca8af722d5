from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

import numpy as np
import pytest

from prompt_palette.engine import (
    MOOD_HUES,
    circular_mean,
    generate_palette,
    generate_report,
)
from prompt_palette.features.color import contrast_ratio, hex_to_hsl, hue_distance
from prompt_palette.io.models import HarmonyType, PaletteRequest
from prompt_palette.io.outputs import palette_to_dict

CYBERPUNK = "cyberpunk neon electric city nights"
LAVENDER = "lavender dreams soft purple elegant peaceful"


def _dump(palette) -> str:
    return json.dumps(palette_to_dict(palette), sort_keys=True)


@pytest.mark.parametrize("seed", [0, 7, 42, 99])
def test_fixed_seed_and_clock_are_byte_identical(seed, fixed_clock):
    first = generate_palette(CYBERPUNK, seed=seed, clock=fixed_clock)
    second = generate_palette(CYBERPUNK, seed=seed, clock=fixed_clock)
    assert _dump(first) == _dump(second)


def test_fixed_seed_without_fixed_clock_only_moves_timestamp():
    start = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)
    first = palette_to_dict(generate_palette("ocean", seed=3, clock=lambda: start))
    later = palette_to_dict(
        generate_palette("ocean", seed=3, clock=lambda: start + timedelta(seconds=1.1))
    )
    assert first["metadata"].pop("created_at") != later["metadata"].pop("created_at")
    assert first == later


def test_lone_surrogate_prompt_does_not_raise(fixed_clock):
    palette = generate_palette("\ud800 bad", seed=1, clock=fixed_clock)
    assert palette.id.startswith("palette_")
    assert set(palette.colors) == {"background", "primary", "accent", "text"}


def test_request_object_matches_keyword_form(fixed_clock):
    by_request = generate_palette(PaletteRequest(prompt=LAVENDER, seed=3), clock=fixed_clock)
    by_keywords = generate_palette(LAVENDER, seed=3, clock=fixed_clock)
    assert _dump(by_request) == _dump(by_keywords)


def test_unseeded_runs_a_second_apart_may_differ():
    start = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)
    first = generate_report(CYBERPUNK, clock=lambda: start)
    later = generate_report(CYBERPUNK, clock=lambda: start + timedelta(seconds=1))
    # Seeds always move with the clock; the rendered colors are allowed to.
    assert first.palette.metadata.seed != later.palette.metadata.seed
    assert first.palette.id != later.palette.id


def test_non_string_prompt_raises():
    with pytest.raises(TypeError):
        generate_palette(123)  # type: ignore[arg-type]


@pytest.mark.parametrize("seed", [0, 13, 42, 77, 99])
def test_cyberpunk_scenario(seed, fixed_clock):
    report = generate_report(CYBERPUNK, seed=seed, clock=fixed_clock)
    palette = report.palette
    assert palette.metadata.harmony is HarmonyType.COMPLEMENTARY
    assert palette.metadata.mode == "dark"
    assert hex_to_hsl(palette.colors["background"].base).l <= 10
    assert hex_to_hsl(palette.colors["text"].base).l >= 90


@pytest.mark.parametrize("seed", [0, 13, 42, 77, 99])
def test_lavender_scenario(seed, fixed_clock):
    report = generate_report(LAVENDER, seed=seed, clock=fixed_clock)
    assert report.palette.metadata.harmony is HarmonyType.ANALOGOUS
    mean_saturation = np.mean([report.harmony.primary.s, report.harmony.secondary.s])
    assert mean_saturation <= 55


@pytest.mark.parametrize(
    "prompt",
    [
        CYBERPUNK,
        LAVENDER,
        "corporate website for a bank",
        "atardecer cálido en la playa",
        "",
        "   ",
        "pastel dreamy nursery",
        "bold luxury brand in black and gold",
    ],
)
def test_palette_shape_for_assorted_prompts(prompt, fixed_clock):
    report = generate_report(prompt, seed=5, clock=fixed_clock)
    palette = report.palette
    assert set(palette.colors) == {"background", "primary", "accent", "text"}
    assert palette.id.startswith("palette_")
    assert palette.metadata.created_at == fixed_clock()
    assert palette.metadata.seed == 5
    assert palette.description.endswith("for visual balance and aesthetic appeal")
    for color in report.harmony.as_list():
        assert 0 <= color.h < 360
        assert 0 <= color.s <= 100
        assert 0 <= color.l <= 100


def test_prompt_without_colors_uses_mood_hue(fixed_clock):
    report = generate_report("", seed=50, clock=fixed_clock)
    assert report.analysis.colors == ()
    # seed 50 maps to a variation fraction of 0.5, so the table hue is used as-is
    assert hue_distance(report.harmony.primary.h, MOOD_HUES[report.analysis.mood]) < 1


def test_contrast_ratios_match_final_colors(fixed_clock):
    report = generate_report(LAVENDER, seed=1, clock=fixed_clock)
    ratios = report.palette.metadata.contrast_ratios
    expected = contrast_ratio(report.harmony.text, report.harmony.background)
    assert ratios["text-background"] == pytest.approx(expected, abs=0.01)


def test_report_carries_recommendations(fixed_clock):
    report = generate_report(CYBERPUNK, seed=1, clock=fixed_clock)
    assert {"primary", "accent", "background", "mood_adjustments"} <= set(report.recommendations)
    assert 0.0 <= report.coherence.score <= 1.0
    assert 0.0 <= report.emotional_coherence.score <= 1.0


def test_circular_mean_wraps_around_zero():
    assert hue_distance(circular_mean([350, 10], [1, 1]), 0) < 1e-6
    assert circular_mean([0, 180], [1, 1]) is None
    assert circular_mean([], []) is None
    assert circular_mean([90], [0]) == pytest.approx(90)

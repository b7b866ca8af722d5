from __future__ import annotations

import json

import pandas as pd
import pytest

from prompt_palette.engine import generate_palette
from prompt_palette.io.outputs import (
    palette_rows,
    palette_to_dict,
    write_palette_table,
    write_palettes,
    write_report,
)
from prompt_palette.io.preview import LABEL_HEIGHT, render_swatches, save_preview


@pytest.fixture
def palettes(fixed_clock):
    return [
        generate_palette("cyberpunk neon city nights", seed=11, clock=fixed_clock),
        generate_palette("atardecer cálido en la playa", seed=12, clock=fixed_clock),
    ]


def _walk(value):
    if isinstance(value, dict):
        for item in value.values():
            yield item
            yield from _walk(item)
    elif isinstance(value, list):
        for item in value:
            yield item
            yield from _walk(item)


def test_palette_dict_shape(palettes):
    data = palette_to_dict(palettes[0])
    assert {"id", "name", "prompt", "description", "colors", "metadata"} <= set(data)
    primary = data["colors"]["primary"]
    assert set(primary["variations"]) == {"200", "300"}
    assert data["metadata"]["created_at"].startswith("2024-05-01T12:00:00")
    assert data["metadata"]["harmony"] in {
        "complementary",
        "analogous",
        "triadic",
        "tetradic",
        "monochromatic",
        "split-complementary",
    }
    assert None not in list(_walk(data))
    json.dumps(data)


def test_write_palettes_and_report(tmp_path, palettes):
    out = write_palettes(tmp_path / "palettes.json", palettes)
    loaded = json.loads(out.read_text(encoding="utf-8"))
    assert [item["id"] for item in loaded] == [p.id for p in palettes]
    assert loaded[1]["prompt"] == "atardecer cálido en la playa"

    report = write_report(tmp_path / "report.json", {"total_prompts": 2, "harmonies": {"triadic": 1}})
    assert json.loads(report.read_text(encoding="utf-8"))["total_prompts"] == 2


def test_palette_table_round_trips_through_parquet(tmp_path, palettes):
    path = write_palette_table(tmp_path / "nested" / "palettes.parquet", palettes)
    assert path is not None and path.exists()
    df = pd.read_parquet(path)
    assert len(df) == 2
    assert {"id", "harmony", "background", "text_200", "wcag_aa"} <= set(df.columns)
    assert list(df["seed"]) == [11, 12]
    assert palette_rows(palettes)[0]["primary"] == palettes[0].colors["primary"].base


def test_empty_table_is_skipped(tmp_path):
    assert write_palette_table(tmp_path / "empty.parquet", []) is None
    assert not (tmp_path / "empty.parquet").exists()


def test_swatch_preview_size(tmp_path, palettes):
    image = render_swatches(palettes[0])
    assert image.mode == "RGB"
    assert image.size == (3 * 96, 4 * (96 + LABEL_HEIGHT))
    assert image.getpixel((10, 10)) == tuple(
        int(palettes[0].colors["background"].base[i : i + 2], 16) for i in (1, 3, 5)
    )

    saved = save_preview(palettes[0], tmp_path / "previews" / "one.png", swatch=20)
    assert saved.exists()


def test_swatch_size_must_be_positive(palettes):
    with pytest.raises(ValueError):
        render_swatches(palettes[0], swatch=0)

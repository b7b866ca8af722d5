from __future__ import annotations

import json

import pytest

from prompt_palette.cli import _safe_slug, main, parse_args, read_input


def test_main_writes_outputs(tmp_path, capsys):
    out_dir = tmp_path / "out"
    code = main(
        [
            "--prompt",
            "ocean sunset",
            "--prompt",
            "cyberpunk neon city nights",
            "--seed",
            "5",
            "--preview",
            "--debug-matches",
            "--out",
            str(out_dir),
        ]
    )
    assert code == 0
    palettes = json.loads((out_dir / "palettes.json").read_text(encoding="utf-8"))
    assert len(palettes) == 2
    assert all(item["metadata"]["seed"] == 5 for item in palettes)
    assert (out_dir / "palettes.parquet").exists()
    assert (out_dir / "ocean_sunset.preview.png").exists()

    summary = json.loads((out_dir / "report.json").read_text(encoding="utf-8"))
    assert summary["total_prompts"] == 2
    assert summary["repaired"] <= 2

    captured = capsys.readouterr().out
    assert "[palette] 2 prompt(s)" in captured
    assert "[matches]" in captured


def test_main_reads_prompts_from_file(tmp_path):
    source = tmp_path / "prompts.txt"
    source.write_text("lavender dreams\n\n  forest morning  \n", encoding="utf-8")
    assert main(["--input", str(source), "--seed", "1", "--out", str(tmp_path)]) == 0
    palettes = json.loads((tmp_path / "palettes.json").read_text(encoding="utf-8"))
    assert [item["prompt"] for item in palettes] == ["lavender dreams", "forest morning"]


def test_missing_input_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        main(["--input", str(tmp_path / "absent.txt"), "--out", str(tmp_path)])


def test_prompt_or_input_is_required(tmp_path):
    with pytest.raises(SystemExit):
        parse_args(["--out", str(tmp_path)])


def test_read_input_skips_blank_lines(tmp_path):
    source = tmp_path / "prompts.txt"
    source.write_text("\ufeffone\n\n two \n", encoding="utf-8")
    assert read_input(source) == ["one", "two"]


@pytest.mark.parametrize(
    "text, slug",
    [("Ocean Sunset!", "ocean_sunset"), ("   ", "palette"), ("a--b", "a_b")],
)
def test_safe_slug(text, slug):
    assert _safe_slug(text) == slug

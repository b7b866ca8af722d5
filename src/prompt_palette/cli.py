"""Command-line interface for the prompt_palette project."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, Iterable

import numpy as np
from tqdm import tqdm

from .engine import generate_report
from .io.models import GenerationReport, PaletteRequest
from .io.outputs import write_palette_table, write_palettes, write_report
from .io.preview import save_preview


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments for palette generation."""
    parser = argparse.ArgumentParser(
        description="Generate semantic color palettes from free-text prompts."
    )
    parser.add_argument(
        "--prompt",
        action="append",
        default=[],
        help="Prompt text; may be given several times.",
    )
    parser.add_argument(
        "--input",
        required=False,
        default=None,
        help="Path to a text file containing prompts, one per line.",
    )
    parser.add_argument(
        "--out",
        required=True,
        help="Directory path where JSON and parquet outputs will be written.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Fixed variation seed; omit to derive one from the prompt and clock.",
    )
    parser.add_argument(
        "--force-variation",
        action="store_true",
        help="Derive the seed from milliseconds instead of seconds.",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Write a PNG swatch strip next to the JSON outputs for each palette.",
    )
    parser.add_argument(
        "--debug-matches",
        action="store_true",
        help="Print how each extracted color was matched.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging level for library diagnostics (default WARNING).",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)
    if not args.prompt and not args.input:
        parser.error("provide at least one --prompt or an --input file")
    return args


def read_input(path: Path) -> list[str]:
    """Read newline separated entries from *path* and return non-empty lines."""
    if not path.exists():
        raise FileNotFoundError(f"Input file does not exist: {path}")
    lines = [line.strip() for line in path.read_text(encoding="utf-8-sig").splitlines()]
    return [line for line in lines if line]


def _safe_slug(text: str) -> str:
    sanitized = "".join(ch if ch.isalnum() else "_" for ch in text.lower())
    sanitized = "_".join(part for part in sanitized.split("_") if part)
    return sanitized[:48] or "palette"


def _debug_matches(report: GenerationReport) -> None:
    """Print the provenance of each extracted color for one prompt."""
    analysis = report.analysis
    print(
        f"[matches] {report.palette.prompt!r} lang={analysis.language.value} "
        f"mood={analysis.mood.value} harmony={report.intent.suggested_harmony.value}"
    )
    if not analysis.colors:
        print("  (no colors matched)")
        return
    for index, color in enumerate(analysis.colors, start=1):
        print(
            f"  {index}. {color.original_term} -> {color.keyword} "
            f"({color.match_type.value}, weight={color.weight:.2f}) "
            f"hsl=({color.h:.0f}, {color.s:.0f}, {color.l:.0f})"
        )


def _summary(reports: list[GenerationReport]) -> dict[str, Any]:
    coherence = [report.coherence.score for report in reports]
    return {
        "total_prompts": len(reports),
        "valid_before_repair": sum(1 for report in reports if report.validation.is_valid),
        "repaired": sum(1 for report in reports if report.repaired),
        "wcag_aa": sum(1 for report in reports if report.palette.metadata.wcag_aa),
        "mean_coherence": float(np.mean(coherence)) if coherence else None,
        "low_coherence": [
            report.palette.prompt for report in reports if not report.coherence.is_coherent
        ],
        "harmonies": sorted({report.intent.suggested_harmony.value for report in reports}),
    }


def main(argv: Iterable[str] | None = None) -> int:
    """Entry point for the CLI."""
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    prompts = list(args.prompt)
    if args.input:
        prompts.extend(read_input(Path(args.input)))
    print(f"[palette] {len(prompts)} prompt(s)")

    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)

    reports: list[GenerationReport] = []
    for prompt in tqdm(prompts, desc="Generating palettes", unit="prompt", leave=False):
        request = PaletteRequest(prompt=prompt, seed=args.seed, force_variation=args.force_variation)
        report = generate_report(request)
        reports.append(report)
        if args.debug_matches:
            _debug_matches(report)
        if not report.coherence.is_coherent:
            print(f"[warn] {prompt!r}: low coherence {report.coherence.score:.2f}")
        if args.preview:
            preview_path = save_preview(report.palette, out_dir / f"{_safe_slug(prompt)}.preview.png")
            print(f"[preview] {preview_path}")

    palettes = [report.palette for report in reports]
    palettes_path = write_palettes(out_dir / "palettes.json", palettes)
    print(f"[saved] {len(palettes)} palette(s) to {palettes_path}")

    table_path = write_palette_table(out_dir / "palettes.parquet", palettes)
    if table_path is None:
        print("[table] no palette rows to write")
    else:
        print(f"[table] wrote {len(palettes)} rows to {table_path}")

    report_path = write_report(out_dir / "report.json", _summary(reports))
    print(f"[saved] report: {report_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Output helpers for persisting generated palettes."""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence

import pandas as pd

from .models import SemanticPalette

PALETTE_ROLES = ("background", "primary", "accent", "text")


def _plain(value: Any) -> Any:
    """Convert enums, datetimes and int keys into JSON-ready values; drop ``None``."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {str(key): _plain(item) for key, item in value.items() if item is not None}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def palette_to_dict(palette: SemanticPalette) -> Dict[str, Any]:
    """Return the JSON shape of *palette*."""
    return _plain(asdict(palette))


def write_palettes(path: Path, palettes: Sequence[SemanticPalette]) -> Path:
    """Write *palettes* to *path* as a JSON list and return the path."""
    serialised = [palette_to_dict(palette) for palette in palettes]
    path.write_text(json.dumps(serialised, indent=2, ensure_ascii=False), encoding="utf-8")
    return path


def write_report(path: Path, report: Mapping[str, Any]) -> Path:
    """Write a run summary to *path* as JSON and return the path."""
    path.write_text(json.dumps(_plain(report), indent=2), encoding="utf-8")
    return path


def palette_rows(palettes: Sequence[SemanticPalette]) -> List[Dict[str, Any]]:
    rows: List[Dict[str, Any]] = []
    for palette in palettes:
        meta = palette.metadata
        row: Dict[str, Any] = {
            "id": palette.id,
            "name": palette.name,
            "prompt": palette.prompt,
            "harmony": meta.harmony.value,
            "mode": meta.mode,
            "style": meta.style,
            "language": meta.language.value,
            "confidence": meta.confidence,
            "seed": meta.seed,
            "wcag_aa": meta.wcag_aa,
            "text_contrast": meta.contrast_ratios.get("text-background"),
            "tags": list(meta.tags),
        }
        for role in PALETTE_ROLES:
            group = palette.colors[role]
            row[role] = group.base
            row[f"{role}_200"] = group.variations.get(200)
            row[f"{role}_300"] = group.variations.get(300)
        rows.append(row)
    return rows


def write_palette_table(path: Path, palettes: Sequence[SemanticPalette]) -> Path | None:
    """Write one parquet row per palette; return ``None`` when there is nothing to write."""
    if not palettes:
        return None
    df = pd.DataFrame(palette_rows(palettes))
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_parquet(path, index=False, engine="pyarrow")
    return path

"""Swatch-strip previews of generated palettes."""

from __future__ import annotations

from pathlib import Path

from PIL import Image, ImageColor, ImageDraw

from .models import SemanticPalette
from .outputs import PALETTE_ROLES

PREVIEW_BG_RGB = (0xF5, 0xF5, 0xF5)
VARIATION_KEYS = (200, 300)
LABEL_HEIGHT = 16


def render_swatches(palette: SemanticPalette, swatch: int = 96) -> Image.Image:
    """Return an RGB image with one row per role: base, then its variations.

    Each row carries the role name in a strip beneath the swatches.
    """
    if swatch <= 0:
        raise ValueError("swatch size must be positive")
    columns = 1 + len(VARIATION_KEYS)
    row_height = swatch + LABEL_HEIGHT
    image = Image.new("RGB", (columns * swatch, len(PALETTE_ROLES) * row_height), PREVIEW_BG_RGB)
    draw = ImageDraw.Draw(image)

    for row, role in enumerate(PALETTE_ROLES):
        group = palette.colors[role]
        hexes = [group.base] + [group.variations[key] for key in VARIATION_KEYS]
        top = row * row_height
        for column, value in enumerate(hexes):
            left = column * swatch
            draw.rectangle(
                (left, top, left + swatch - 1, top + swatch - 1), fill=ImageColor.getrgb(value)
            )
        draw.text((4, top + swatch + 2), f"{group.name} {group.base}", fill=(0x20, 0x20, 0x20))
    return image


def save_preview(palette: SemanticPalette, path: Path, swatch: int = 96) -> Path:
    image = render_swatches(palette, swatch=swatch)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        image.save(path, format="PNG")
    finally:
        image.close()
    return path

"""Fixed Game Boy palette and color matching helpers."""

# Palette index reference:
#  0: Lightest green  (155, 188, 15)  -> bitplanes low=0 high=0
#  1: Light green     (139, 172, 15)  -> bitplanes low=1 high=0
#  2: Dark green      ( 48,  98, 48)  -> bitplanes low=0 high=1
#  3: Darkest green   ( 15,  56, 15)  -> bitplanes low=1 high=1

from __future__ import annotations

import math
from typing import Dict, Sequence, Tuple

Color = Tuple[int, int, int]

GAMEBOY_PALETTE: Tuple[Color, ...] = (
    (155, 188, 15),
    (139, 172, 15),
    (48, 98, 48),
    (15, 56, 15),
)

PALETTE_NAMES: Tuple[str, ...] = (
    "lightest",
    "light",
    "dark",
    "darkest",
)

_INDEX_BY_COLOR: Dict[Color, int] = {
    color: index for index, color in enumerate(GAMEBOY_PALETTE)
}


def color_distance(color1: Color, color2: Color) -> float:
    """Euclidean distance between two colors in plain RGB space."""
    r1, g1, b1 = color1
    r2, g2, b2 = color2
    dr = r1 - r2
    dg = g1 - g2
    db = b1 - b2
    return math.sqrt(dr * dr + dg * dg + db * db)


def nearest_palette_index(r: int, g: int, b: int) -> int:
    """
    Return the index of the palette entry closest to ``(r, g, b)``.
    Entries are visited in palette order and the best one is only replaced
    on a strictly smaller distance, so on exact ties the lower index wins.
    """
    rgb = (r, g, b)
    best_idx = 0
    best_dist = float("inf")
    for i, color in enumerate(GAMEBOY_PALETTE):
        dist = color_distance(rgb, color)
        if dist < best_dist:
            best_idx = i
            best_dist = dist
    return best_idx


def nearest_palette_color(r: int, g: int, b: int) -> Color:
    return GAMEBOY_PALETTE[nearest_palette_index(r, g, b)]


def is_palette_color(r: int, g: int, b: int) -> bool:
    return (r, g, b) in _INDEX_BY_COLOR


def color_to_index(r: int, g: int, b: int) -> int:
    """Map an exact palette color to its 2-bit value.

    Colors that are not in the palette fall back to 0. Callers are expected
    to quantize first; see ``tiles.encode_tiles`` for the warning/strict
    handling of unmatched pixels.
    """
    return _INDEX_BY_COLOR.get((r, g, b), 0)


def format_palette_text(palette: Sequence[Color] = GAMEBOY_PALETTE) -> str:
    entries = []
    for idx, (r, g, b) in enumerate(palette):
        name = PALETTE_NAMES[idx] if idx < len(PALETTE_NAMES) else "custom"
        entries.append(f"{idx}: {name} ({r},{g},{b})")
    return ", ".join(entries)

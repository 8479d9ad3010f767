"""Render encoded tiles as a GBDK C source listing."""
from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path
from typing import List, Sequence

VALUES_PER_LINE = 8

_INVALID_IDENTIFIER_CHARS = re.compile(r"[^A-Za-z0-9_]")


def sanitize_base_name(name: str) -> str:
    """Replace every character outside ``[A-Za-z0-9_]`` with ``_``."""
    return _INVALID_IDENTIFIER_CHARS.sub("_", name)


def base_name_from_path(path: str | Path) -> str:
    return sanitize_base_name(Path(path).stem)


def format_hex_rows(data: Sequence[int], per_line: int = VALUES_PER_LINE) -> List[str]:
    rows: List[str] = []
    total = len(data)
    for start in range(0, total, per_line):
        chunk = data[start : start + per_line]
        line = "    " + ", ".join(f"0x{value:02X}" for value in chunk)
        if start + per_line < total:
            line += ","
        rows.append(line)
    return rows


def render_listing(
    data: Sequence[int],
    width: int,
    height: int,
    tile_count_x: int,
    tile_count_y: int,
    base_name: str,
    generated_at: datetime | None = None,
) -> str:
    """Build the C source for a tile array and its size constants.

    The output declares ``const unsigned char <base>_data[]`` followed by
    ``<BASE>_WIDTH``, ``_HEIGHT``, ``_TILE_WIDTH``, ``_TILE_HEIGHT``,
    ``_TILE_COUNT`` and ``_SIZE`` defines. ``generated_at`` adds a timestamp
    line to the header; leave it out for reproducible output.
    """

    base = sanitize_base_name(base_name)
    upper = base.upper()
    tile_count = tile_count_x * tile_count_y

    lines = [
        "// Automatically generated Sprite/Tile",
        f"// Dimensions: {width}x{height} pixels ({tile_count_x}x{tile_count_y} tiles)",
    ]
    if generated_at is not None:
        lines.append(f"// Generated on: {generated_at.isoformat()}")
    lines += [
        "",
        "#include <gb/gb.h>",
        "",
        "// Sprite/tile data",
        f"const unsigned char {base}_data[] = {{",
        *format_hex_rows(data),
        "};",
        "",
        "// Sprite/tile information:",
        f"#define {upper}_WIDTH {width}",
        f"#define {upper}_HEIGHT {height}",
        f"#define {upper}_TILE_WIDTH {tile_count_x}",
        f"#define {upper}_TILE_HEIGHT {tile_count_y}",
        f"#define {upper}_TILE_COUNT {tile_count}",
        f"#define {upper}_SIZE {len(data)}",
        "",
        "// Usage example:",
        f"// set_sprite_data(0, {tile_count}, {base}_data);",
        "// set_sprite_tile(0, 0); // To use the first tile",
    ]
    return "\n".join(lines) + "\n"

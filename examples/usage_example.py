"""Library usage sample for :mod:`gbdk_png_converter`.

- Writes a gradient test image.
- Converts it with ``convert_image`` (palette PNG plus GBDK source).
- Runs the pixel-buffer API directly: ``quantize`` -> ``encode_tiles`` ->
  ``render_listing``.

Outputs go to ``dist/examples``.
"""

from __future__ import annotations

from pathlib import Path

from gbdk_png_converter import (
    ConvertOptions,
    convert_image,
    encode_tiles,
    quantize,
    render_listing,
)
from gbdk_png_converter.testimage import create_test_image, save_test_image

OUTPUT_DIR = Path(__file__).resolve().parents[1] / "dist" / "examples"


# 1) File based conversion -----------------------------------------------------


def convert_files() -> None:
    source = save_test_image(OUTPUT_DIR / "test_image.png", 64, 64)
    result = convert_image(
        source,
        ConvertOptions(
            output_path=OUTPUT_DIR / "sprite_player.png",
            generate_gbdk=True,
            variable_name="player_sprite",
        ),
    )
    print(f"wrote {result.conversion.output_path}")
    if result.gbdk is not None:
        print(f"wrote {result.gbdk.output_path} ({result.gbdk.tiles_generated} tiles)")


# 2) In-memory buffers ---------------------------------------------------------


def convert_buffers() -> None:
    width, height = 20, 12
    image = create_test_image(width, height).convert("RGBA")

    quantized = quantize(width, height, list(image.get_flattened_data()))
    encoded = encode_tiles(width, height, quantized, strict=True)
    text = render_listing(
        encoded.data,
        encoded.width,
        encoded.height,
        encoded.tile_count_x,
        encoded.tile_count_y,
        "manual_sprite",
    )

    target = OUTPUT_DIR / "manual_sprite.c"
    target.write_text(text, encoding="utf-8")
    print(f"wrote {target} ({encoded.size} bytes)")


if __name__ == "__main__":
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    convert_files()
    convert_buffers()

"""Nearest-color quantization of RGBA pixel buffers to the Game Boy palette."""
from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from PIL import Image

from .errors import InvalidDimensionsError
from .palette import Color, nearest_palette_color

Pixel = Tuple[int, int, int, int]


def validate_dimensions(width: int, height: int, pixel_count: int | None = None) -> None:
    if width < 1 or height < 1:
        raise InvalidDimensionsError(
            f"Image dimensions must be positive (got {width}x{height})"
        )
    if pixel_count is not None and pixel_count != width * height:
        raise InvalidDimensionsError(
            f"Expected {width * height} pixels for {width}x{height}, got {pixel_count}"
        )


def quantize(width: int, height: int, pixels: Sequence[Sequence[int]]) -> List[Pixel]:
    """
    Replace the RGB of every pixel with its nearest palette color.
    Alpha is copied unchanged and output order matches input order, which
    the tile encoder relies on for addressing. The input is never modified.
    """
    validate_dimensions(width, height, len(pixels))

    cache: Dict[Color, Color] = {}
    result: List[Pixel] = []
    for r, g, b, a in pixels:
        rgb = (r, g, b)
        mapped = cache.get(rgb)
        if mapped is None:
            mapped = nearest_palette_color(r, g, b)
            cache[rgb] = mapped
        result.append((mapped[0], mapped[1], mapped[2], a))
    return result


def quantize_image(image: Image.Image) -> Image.Image:
    """Return a new RGBA image whose colors are all Game Boy palette entries."""

    image = image.convert("RGBA")
    width, height = image.size
    pixels = quantize(width, height, list(image.get_flattened_data()))

    converted = Image.new("RGBA", (width, height))
    converted.putdata(pixels)
    return converted

"""2bpp tile encoding for the GBDK tile format.

Layout of the encoded data:

* The image is split into 8x8 tiles on a ``ceil(W/8)`` x ``ceil(H/8)`` grid.
  Tiles are emitted row-major (tile row outer, tile column inner).
* Each tile is 16 bytes: for every pixel row, top to bottom, one low
  bitplane byte followed by one high bitplane byte.
* Bit 7 of each byte is the leftmost column and bit 0 the rightmost.
* A pixel's palette index contributes ``index & 1`` to the low plane and
  ``index & 2`` to the high plane.
* Positions past the right or bottom edge of the image encode as index 0.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from PIL import Image

from .errors import UnquantizedInputError, UnquantizedInputWarning
from .palette import color_to_index, is_palette_color
from .quantizer import validate_dimensions

TILE_SIZE = 8
BYTES_PER_TILE = TILE_SIZE * 2


@dataclass
class EncodedTiles:
    """Packed tile data plus the grid it was laid out on."""

    data: bytes
    width: int
    height: int
    tile_count_x: int
    tile_count_y: int

    @property
    def tile_count(self) -> int:
        return self.tile_count_x * self.tile_count_y

    @property
    def size(self) -> int:
        return len(self.data)


def compute_tile_grid(width: int, height: int) -> Tuple[int, int]:
    validate_dimensions(width, height)
    return (width + TILE_SIZE - 1) // TILE_SIZE, (height + TILE_SIZE - 1) // TILE_SIZE


def _palette_indices(
    width: int, height: int, pixels: Sequence[Sequence[int]], strict: bool
) -> List[int]:
    indices: List[int] = []
    unmatched = 0
    first_unmatched: Tuple[int, int] | None = None

    for offset, pixel in enumerate(pixels):
        r, g, b = pixel[0], pixel[1], pixel[2]
        if not is_palette_color(r, g, b):
            unmatched += 1
            if first_unmatched is None:
                first_unmatched = (offset % width, offset // width)
        indices.append(color_to_index(r, g, b))

    if unmatched and first_unmatched is not None:
        x, y = first_unmatched
        message = (
            f"{unmatched} of {width * height} pixels are not Game Boy palette colors "
            f"(first at {x},{y}); quantize the image before encoding"
        )
        if strict:
            raise UnquantizedInputError(message)
        warnings.warn(message + ". They were encoded as color 0.", UnquantizedInputWarning, stacklevel=3)

    return indices


def encode_tiles(
    width: int,
    height: int,
    pixels: Sequence[Sequence[int]],
    strict: bool = False,
) -> EncodedTiles:
    """Pack already quantized pixels into 2bpp tiles.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        pixels: Row-major pixels; only the first three channels are read.
        strict: Raise ``UnquantizedInputError`` for non-palette pixels instead
            of warning and encoding them as color 0.
    """

    validate_dimensions(width, height, len(pixels))
    tile_count_x, tile_count_y = compute_tile_grid(width, height)
    indices = _palette_indices(width, height, pixels, strict)

    data = bytearray()
    for tile_y in range(tile_count_y):
        for tile_x in range(tile_count_x):
            for row in range(TILE_SIZE):
                low_byte = 0
                high_byte = 0
                y = tile_y * TILE_SIZE + row
                for col in range(TILE_SIZE):
                    x = tile_x * TILE_SIZE + col
                    if x >= width or y >= height:
                        continue
                    value = indices[y * width + x]
                    bit = 7 - col
                    if value & 1:
                        low_byte |= 1 << bit
                    if value & 2:
                        high_byte |= 1 << bit
                data.append(low_byte)
                data.append(high_byte)

    return EncodedTiles(
        data=bytes(data),
        width=width,
        height=height,
        tile_count_x=tile_count_x,
        tile_count_y=tile_count_y,
    )


def encode_image(image: Image.Image, strict: bool = False) -> EncodedTiles:
    image = image.convert("RGBA")
    width, height = image.size
    return encode_tiles(width, height, list(image.get_flattened_data()), strict=strict)

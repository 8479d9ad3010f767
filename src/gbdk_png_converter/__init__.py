"""PNG to Game Boy palette converter.

This package maps images to the 4-color Game Boy palette and packs them into
the 2bpp 8x8 tile format used by GBDK, with a C source listing of the tile
data. It can be invoked through the CLI (``python -m gbdk_png_converter``) or
imported to work on Pillow images and raw pixel buffers.
"""

from .converter import (
    ConversionResult,
    ConvertImageResult,
    ConvertOptions,
    GbdkResult,
    convert_image,
    convert_png_to_gameboy,
    generate_gbdk_code,
)
from .errors import (
    ConversionError,
    InvalidDimensionsError,
    UnquantizedInputError,
    UnquantizedInputWarning,
)
from .listing import render_listing, sanitize_base_name
from .palette import (
    GAMEBOY_PALETTE,
    color_distance,
    color_to_index,
    nearest_palette_color,
    nearest_palette_index,
)
from .quantizer import quantize, quantize_image
from .tiles import EncodedTiles, compute_tile_grid, encode_image, encode_tiles

__all__ = [
    "GAMEBOY_PALETTE",
    "ConversionError",
    "ConversionResult",
    "ConvertImageResult",
    "ConvertOptions",
    "EncodedTiles",
    "GbdkResult",
    "InvalidDimensionsError",
    "UnquantizedInputError",
    "UnquantizedInputWarning",
    "color_distance",
    "color_to_index",
    "compute_tile_grid",
    "convert_image",
    "convert_png_to_gameboy",
    "encode_image",
    "encode_tiles",
    "generate_gbdk_code",
    "nearest_palette_color",
    "nearest_palette_index",
    "quantize",
    "quantize_image",
    "render_listing",
    "sanitize_base_name",
]

"""PNG file conversion to the Game Boy palette and GBDK tile source."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from PIL import Image

from .errors import ConversionError
from .listing import base_name_from_path, render_listing, sanitize_base_name
from .quantizer import quantize_image
from .tiles import encode_image


@dataclass
class ConvertOptions:
    """Options for a full PNG conversion."""

    output_path: Path | None = None
    generate_gbdk: bool = False
    variable_name: str | None = None
    strict: bool = False  # error instead of warning on non-palette pixels
    timestamp: bool = True  # add "Generated on" to the C header


@dataclass
class ConversionResult:
    input_path: Path
    output_path: Path
    width: int
    height: int


@dataclass
class GbdkResult:
    input_path: Path
    output_path: Path
    base_name: str
    tile_count_x: int
    tile_count_y: int
    tiles_generated: int
    data_size: int


@dataclass
class ConvertImageResult:
    conversion: ConversionResult
    gbdk: GbdkResult | None = None


def default_output_path(input_path: str | Path) -> Path:
    path = Path(input_path)
    return path.with_name(f"{path.stem}_gameboy{path.suffix}")


def gbdk_source_path(image_path: str | Path) -> Path:
    return Path(image_path).with_suffix(".c")


def _open_rgba(path: Path) -> Image.Image:
    try:
        with Image.open(path) as img:
            return img.convert("RGBA")
    except FileNotFoundError as exc:
        raise ConversionError(f"Input file not found: {path}") from exc
    except OSError as exc:
        raise ConversionError(f"Failed to read PNG: {path}") from exc


def convert_png_to_gameboy(input_path: str | Path, output_path: str | Path) -> ConversionResult:
    """Quantize ``input_path`` to the Game Boy palette and save it as PNG."""

    input_path = Path(input_path)
    output_path = Path(output_path)
    image = _open_rgba(input_path)
    converted = quantize_image(image)

    try:
        converted.save(output_path, format="PNG")
    except OSError as exc:
        raise ConversionError(f"Failed to write PNG: {output_path}") from exc

    width, height = converted.size
    return ConversionResult(
        input_path=input_path,
        output_path=output_path,
        width=width,
        height=height,
    )


def generate_gbdk_code(
    image_path: str | Path,
    output_path: str | Path,
    variable_name: str | None = None,
    strict: bool = False,
    timestamp: bool = True,
) -> GbdkResult:
    """Encode an already converted PNG and write its GBDK C source.

    The array and define names come from ``variable_name`` when given,
    otherwise from the image file name. Both are sanitized to C identifiers.
    """

    image_path = Path(image_path)
    output_path = Path(output_path)
    image = _open_rgba(image_path)
    encoded = encode_image(image, strict=strict)

    if variable_name:
        base_name = sanitize_base_name(variable_name)
    else:
        base_name = base_name_from_path(image_path)

    generated_at = datetime.now(timezone.utc) if timestamp else None
    text = render_listing(
        encoded.data,
        encoded.width,
        encoded.height,
        encoded.tile_count_x,
        encoded.tile_count_y,
        base_name,
        generated_at=generated_at,
    )

    try:
        output_path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise ConversionError(f"Failed to write GBDK source: {output_path}") from exc

    return GbdkResult(
        input_path=image_path,
        output_path=output_path,
        base_name=base_name,
        tile_count_x=encoded.tile_count_x,
        tile_count_y=encoded.tile_count_y,
        tiles_generated=encoded.tile_count,
        data_size=encoded.size,
    )


def convert_image(input_path: str | Path, options: ConvertOptions | None = None) -> ConvertImageResult:
    """Convert a PNG and optionally write GBDK source next to the result.

    Without ``options.output_path`` the image is written as
    ``<name>_gameboy.png`` beside the input. The C file uses the output
    image's name with a ``.c`` suffix.
    """

    options = options or ConvertOptions()
    input_path = Path(input_path)

    if not input_path.is_file():
        raise ConversionError(f"Input file not found: {input_path}")
    if input_path.suffix.lower() != ".png":
        raise ConversionError(f"Unsupported file type (expected .png): {input_path}")

    output_path = Path(options.output_path) if options.output_path else default_output_path(input_path)
    result = ConvertImageResult(conversion=convert_png_to_gameboy(input_path, output_path))

    if options.generate_gbdk:
        result.gbdk = generate_gbdk_code(
            output_path,
            gbdk_source_path(output_path),
            variable_name=options.variable_name,
            strict=options.strict,
            timestamp=options.timestamp,
        )

    return result

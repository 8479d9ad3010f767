"""Gradient test image used to exercise the converter."""
from __future__ import annotations

from pathlib import Path

from PIL import Image

from .errors import ConversionError
from .quantizer import validate_dimensions


def create_test_image(width: int = 64, height: int = 64) -> Image.Image:
    """Colorful gradient: red follows x, green follows y, blue follows x+y."""
    validate_dimensions(width, height)
    image = Image.new("RGB", (width, height))
    pixels = []
    for y in range(height):
        for x in range(width):
            r = (x * 255) // width
            g = (y * 255) // height
            b = ((x + y) * 255) // (width + height)
            pixels.append((r, g, b))
    image.putdata(pixels)
    return image


def save_test_image(path: str | Path, width: int = 64, height: int = 64) -> Path:
    path = Path(path)
    image = create_test_image(width, height)
    try:
        image.save(path, format="PNG")
    except OSError as exc:
        raise ConversionError(f"Failed to write PNG: {path}") from exc
    return path

"""Exceptions and warnings raised by the Game Boy converter."""
from __future__ import annotations


class ConversionError(Exception):
    """Custom exception for conversion errors."""


class InvalidDimensionsError(ConversionError, ValueError):
    """Raised when width/height are not positive or do not match the pixel count."""


class UnquantizedInputError(ConversionError, ValueError):
    """Raised by strict tile encoding when a pixel is not a palette color."""


class UnquantizedInputWarning(RuntimeWarning):
    """Emitted when non-palette pixels are silently encoded as index 0."""

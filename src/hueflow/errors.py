"""Exception types raised by the hueflow engine.

Every error is local and synchronous. The engine never retries; callers decide
whether to re-invoke a failed operation.
"""

from __future__ import annotations


class HueflowError(Exception):
    """Base class for all hueflow errors."""


class ColorFormatError(HueflowError, ValueError):
    """A color string is not a 6-digit hex color."""


class ConfigurationError(HueflowError, ValueError):
    """A configured size or capacity is unusable (e.g. below 1)."""


class ExtractionError(HueflowError, RuntimeError):
    """Image-to-palette extraction failed or returned unusable data."""


class GenerationError(HueflowError, RuntimeError):
    """Prompt-to-image generation failed or returned unusable data."""


__all__ = [
    "HueflowError",
    "ColorFormatError",
    "ConfigurationError",
    "ExtractionError",
    "GenerationError",
]

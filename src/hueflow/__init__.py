"""Public entrypoint for the hueflow palette engine.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``hueflow`` instead of individual
submodules.
"""

from .color_types import Color, best_text_color, materialize, normalize_hex
from .contrast import WCAG_AA_NORMAL, contrast_ratio, relative_luminance
from .errors import (
    ColorFormatError,
    ConfigurationError,
    ExtractionError,
    GenerationError,
    HueflowError,
)
from .extract import KMeansPaletteExtractor
from .favorites import Favorites
from .generator import (
    GenerationResult,
    HarmonyGenerator,
    edit_color,
    import_colors,
    reorder,
    toggle_lock,
)
from .harmony import GENERATIVE_HARMONIES, HarmonyLabel
from .history import PaletteHistory
from .images import ImageHistory
from .palette import Palette, Snapshot, palettes_equal
from .services import GeneratedImage, ReferenceImage
from .session import PaletteSession
from .ui_helpers import ExportFormat, export_palette

__version__ = "0.1.0"

__all__ = [
    "Color",
    "materialize",
    "normalize_hex",
    "best_text_color",
    "WCAG_AA_NORMAL",
    "contrast_ratio",
    "relative_luminance",
    "HueflowError",
    "ColorFormatError",
    "ConfigurationError",
    "ExtractionError",
    "GenerationError",
    "Favorites",
    "KMeansPaletteExtractor",
    "ImageHistory",
    "GeneratedImage",
    "ReferenceImage",
    "GenerationResult",
    "HarmonyGenerator",
    "edit_color",
    "import_colors",
    "reorder",
    "toggle_lock",
    "HarmonyLabel",
    "GENERATIVE_HARMONIES",
    "PaletteHistory",
    "Palette",
    "Snapshot",
    "palettes_equal",
    "PaletteSession",
    "ExportFormat",
    "export_palette",
]

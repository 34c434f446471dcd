"""Helper utilities for integrating hueflow into external UIs.

This module exposes label/enum pairs for harmony choices and export formats,
and provides :func:`export_palette` to convert palettes into simple lists or
text documents that UI and storage code can consume directly.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Dict, List, Sequence

from .color_types import Color, best_text_color
from .harmony import GENERATIVE_HARMONIES, HarmonyLabel


class ExportFormat(Enum):
    """Supported output formats for exported palettes."""

    HEX = "hex"
    RGB = "rgb"
    P3 = "p3"
    CSS = "css"
    GPL = "gpl"
    JSON = "json"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")


# Label/Enum pairs for UI choices
HARMONY_OPTIONS: List[tuple[str, HarmonyLabel]] = [
    (label.value.replace("-", " ").title(), label) for label in GENERATIVE_HARMONIES
]
EXPORT_FORMAT_OPTIONS: List[tuple[str, ExportFormat]] = [
    ("HEX", ExportFormat.HEX),
    ("RGB", ExportFormat.RGB),
    ("Display P3", ExportFormat.P3),
    ("CSS variables", ExportFormat.CSS),
    ("GIMP palette", ExportFormat.GPL),
    ("JSON", ExportFormat.JSON),
]

HARMONY_LABEL_MAP: Dict[str, HarmonyLabel] = {label: value for label, value in HARMONY_OPTIONS}


def _css(colors: Sequence[Color]) -> str:
    lines = [":root {"]
    for i, c in enumerate(colors, start=1):
        lines.append(f"  --color-{i}: {c.hex};")
        lines.append(f"  --color-{i}-p3: {c.p3};")
        lines.append(f"  --color-{i}-text: {best_text_color(c)};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def _gpl(colors: Sequence[Color], name: str) -> str:
    out = f"GIMP Palette\nName: {name}\nColumns: {len(colors)}\n#\n"
    for c in colors:
        r, g, b = (int(c.hex[i : i + 2], 16) for i in (1, 3, 5))
        out += f"{r:3d} {g:3d} {b:3d} {c.hex}\n"
    return out


def export_palette(
    colors: Sequence[Color],
    fmt: ExportFormat | str,
    name: str = "hueflow palette",
) -> List[str] | str:
    """Convert a palette to a list of color strings or a text document.

    HEX/RGB/P3 return one string per color; CSS/GPL/JSON return a document.
    """
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    if export_fmt == ExportFormat.HEX:
        return [c.hex for c in colors]
    if export_fmt == ExportFormat.RGB:
        return [c.rgb for c in colors]
    if export_fmt == ExportFormat.P3:
        return [c.p3 for c in colors]
    if export_fmt == ExportFormat.CSS:
        return _css(colors)
    if export_fmt == ExportFormat.GPL:
        return _gpl(colors, name)
    if export_fmt == ExportFormat.JSON:
        return json.dumps({"name": name, "colors": [c.to_dict() for c in colors]}, indent=2)
    raise ValueError(f"Unsupported export format: {fmt}")


__all__ = [
    "ExportFormat",
    "HARMONY_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
    "HARMONY_LABEL_MAP",
    "export_palette",
]

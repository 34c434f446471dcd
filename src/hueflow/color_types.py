"""Color records with derived representations and accessibility metrics.

:func:`materialize` is the single way a :class:`Color` is built. The hex
value is the source of truth; every other field except ``is_locked`` is a
pure function of it, so two colors with the same hex carry identical
metrics.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Any, Mapping

from .contrast import BLACK, WHITE, contrast_ratio, is_compliant
from .engine import OKLCH, SRGB, ColorEngine, DefaultColorEngine
from .errors import ColorFormatError

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")
_DEFAULT_ENGINE = DefaultColorEngine()


def normalize_hex(value: object) -> str:
    """Return ``value`` as ``#RRGGBB`` (upper case).

    Accepts exactly six hex digits, with or without a leading ``#``,
    in any case. Shorthand, alpha and anything else is rejected.
    """
    if not isinstance(value, str):
        raise ColorFormatError(f"hex color must be a string, got {type(value).__name__}")
    m = _HEX_RE.match(value.strip())
    if m is None:
        raise ColorFormatError(f"invalid hex color: {value!r} (expected RRGGBB or #RRGGBB)")
    return "#" + m.group(1).upper()


def hex_to_srgb(value: str) -> SRGB:
    """Convert a hex color to sRGB channels in [0, 1]."""
    s = normalize_hex(value)
    return (int(s[1:3], 16) / 255.0, int(s[3:5], 16) / 255.0, int(s[5:7], 16) / 255.0)


def hex_to_oklch(value: str, engine: ColorEngine | None = None) -> OKLCH:
    """Convert a hex color to OKLCH (L in [0, 100])."""
    if engine is None:
        engine = _DEFAULT_ENGINE
    return engine.srgb_to_oklch(*hex_to_srgb(value))


@dataclass(frozen=True)
class Color:
    """A palette entry.

    Attributes
    ----------
    hex:
        Canonical ``#RRGGBB`` identity.
    rgb:
        ``rgb(r, g, b)`` with 0-255 integer channels.
    p3:
        ``color(display-p3 r g b)`` rendering of the same color.
    is_locked:
        Whether regeneration must keep this entry.
    wcag_white, wcag_black:
        Contrast ratios against pure white and pure black.
    wcag_white_compliant, wcag_black_compliant:
        Ratio meets the AA normal-text threshold (4.5).
    is_compliant:
        At least one legible overlay (white or black) exists.
    """

    hex: str
    rgb: str
    p3: str
    is_locked: bool
    wcag_white: float
    wcag_black: float
    wcag_white_compliant: bool
    wcag_black_compliant: bool
    is_compliant: bool

    def with_lock(self, is_locked: bool) -> "Color":
        """Return a copy that differs only in ``is_locked``."""
        flag = bool(is_locked)
        if flag == self.is_locked:
            return self
        return replace(self, is_locked=flag)

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form using the persisted (camelCase) field names."""
        return {
            "hex": self.hex,
            "rgb": self.rgb,
            "p3": self.p3,
            "isLocked": self.is_locked,
            "wcagWhite": self.wcag_white,
            "wcagBlack": self.wcag_black,
            "wcagWhiteCompliant": self.wcag_white_compliant,
            "wcagBlackCompliant": self.wcag_black_compliant,
            "isCompliant": self.is_compliant,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Color":
        """Rebuild from plain data. Only ``hex`` and ``isLocked`` (a real bool) are read."""
        try:
            hex_value = data["hex"]
        except KeyError as exc:
            raise ColorFormatError("color record has no 'hex' field") from exc
        is_locked = data.get("isLocked", False)
        if not isinstance(is_locked, bool):
            raise ColorFormatError(f"'isLocked' must be a boolean, got {is_locked!r}")
        return materialize(hex_value, is_locked)


@lru_cache(maxsize=1024)
def _derive(hex_value: str) -> Color:
    # hex_value is already normalized; the cached record is unlocked.
    r, g, b = hex_to_srgb(hex_value)
    r8, g8, b8 = (int(hex_value[i : i + 2], 16) for i in (1, 3, 5))
    pr, pg, pb = _DEFAULT_ENGINE.srgb_to_display_p3(r, g, b)

    wcag_white = contrast_ratio((r, g, b), WHITE)
    wcag_black = contrast_ratio((r, g, b), BLACK)
    white_ok = is_compliant(wcag_white)
    black_ok = is_compliant(wcag_black)
    return Color(
        hex=hex_value,
        rgb=f"rgb({r8}, {g8}, {b8})",
        p3=f"color(display-p3 {pr:.4f} {pg:.4f} {pb:.4f})",
        is_locked=False,
        wcag_white=wcag_white,
        wcag_black=wcag_black,
        wcag_white_compliant=white_ok,
        wcag_black_compliant=black_ok,
        is_compliant=white_ok or black_ok,
    )


def materialize(hex_value: str, is_locked: bool = False) -> Color:
    """Build a :class:`Color` from a hex string.

    Raises
    ------
    ColorFormatError
        If ``hex_value`` is not a 6-digit hex color.
    """
    return _derive(normalize_hex(hex_value)).with_lock(is_locked)


def best_text_color(color: Color) -> str:
    """Overlay text color (white or black) with the higher contrast; ties go to black."""
    return "#FFFFFF" if color.wcag_white > color.wcag_black else "#000000"


__all__ = [
    "Color",
    "normalize_hex",
    "hex_to_srgb",
    "hex_to_oklch",
    "materialize",
    "best_text_color",
]

"""WCAG 2.x relative luminance and contrast ratio."""

from __future__ import annotations

from typing import Tuple

SRGB = Tuple[float, float, float]

# AA threshold for normal-size text.
WCAG_AA_NORMAL = 4.5

WHITE: SRGB = (1.0, 1.0, 1.0)
BLACK: SRGB = (0.0, 0.0, 0.0)


def _linearize(c: float) -> float:
    # WCAG 2.x uses 0.03928 rather than the sRGB standard's 0.04045.
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: SRGB) -> float:
    """Relative luminance of an sRGB color with channels in [0, 1]."""
    r, g, b = (_linearize(v) for v in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(a: SRGB, b: SRGB) -> float:
    """Contrast ratio between two sRGB colors; symmetric and always >= 1."""
    la = relative_luminance(a)
    lb = relative_luminance(b)
    hi, lo = (la, lb) if la >= lb else (lb, la)
    return (hi + 0.05) / (lo + 0.05)


def is_compliant(ratio: float, threshold: float = WCAG_AA_NORMAL) -> bool:
    return ratio >= threshold


__all__ = [
    "WCAG_AA_NORMAL",
    "WHITE",
    "BLACK",
    "relative_luminance",
    "contrast_ratio",
    "is_compliant",
]

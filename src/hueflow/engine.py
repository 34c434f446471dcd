"""Color conversion engine for OKLCH, sRGB and Display-P3.

This module defines the :class:`ColorEngine` protocol and a default
implementation that converts between sRGB (D65) and OKLCH via OKLab, and
renders sRGB colors in the Display-P3 space via CIE XYZ.
"""

from __future__ import annotations

from typing import Protocol, Tuple

import numpy as np


OKLCH = Tuple[float, float, float]
SRGB = Tuple[float, float, float]

# Linear sRGB -> LMS (OKLab)
_SRGB_TO_LMS = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ]
)
# Cube-rooted LMS -> OKLab
_LMS_TO_OKLAB = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ]
)
_OKLAB_TO_LMS = np.linalg.inv(_LMS_TO_OKLAB)
_LMS_TO_SRGB = np.linalg.inv(_SRGB_TO_LMS)

# Linear sRGB -> XYZ (D65), XYZ (D65) -> linear Display-P3
_SRGB_TO_XYZ = np.array(
    [
        [0.4123907993, 0.3575843394, 0.1804807884],
        [0.2126390059, 0.7151686788, 0.0721923154],
        [0.0193308187, 0.1191947798, 0.9505321522],
    ]
)
_XYZ_TO_P3 = np.array(
    [
        [2.4934969119, -0.9313836179, -0.4027107845],
        [-0.8294889696, 1.7626640603, 0.0236246858],
        [0.0358458302, -0.0761723893, 0.9568845240],
    ]
)
_SRGB_TO_P3 = _XYZ_TO_P3 @ _SRGB_TO_XYZ


class ColorEngine(Protocol):
    """Protocol abstracting color space conversions."""

    def srgb_to_oklch(self, r: float, g: float, b: float) -> OKLCH: ...

    def oklch_to_srgb(self, L: float, C: float, h: float) -> SRGB: ...

    def srgb_to_display_p3(self, r: float, g: float, b: float) -> SRGB: ...

    def normalize_hue(self, h: float) -> float: ...


class DefaultColorEngine:
    """Default implementation based on OKLab/OKLCH, sRGB (D65) and Display-P3."""

    def normalize_hue(self, h: float) -> float:
        """Normalize hue angle into [0, 360)."""
        return float((h % 360.0 + 360.0) % 360.0)

    def srgb_to_oklch(self, r: float, g: float, b: float) -> OKLCH:
        """Convert sRGB in [0, 1] to OKLCH with L in [0, 100]."""
        linear = _srgb_to_linear(np.array([r, g, b], dtype=np.float64))
        lms = np.cbrt(_SRGB_TO_LMS @ linear)
        L_ok, a_ok, b_ok = _LMS_TO_OKLAB @ lms

        C = float(np.hypot(a_ok, b_ok))
        h_deg = 0.0 if C < 1e-12 else float(np.degrees(np.arctan2(b_ok, a_ok)))
        return (float(np.clip(L_ok * 100.0, 0.0, 100.0)), C, self.normalize_hue(h_deg))

    def oklch_to_srgb(self, L: float, C: float, h: float) -> SRGB:
        """Convert OKLCH (L in [0, 100]) to sRGB.

        The result is not clipped: channels outside [0, 1] signal an
        out-of-gamut color (see :mod:`hueflow.gamut`).
        """
        L_ok = min(100.0, max(0.0, L)) / 100.0
        C = max(0.0, C)
        h_rad = np.radians(self.normalize_hue(h))
        lab = np.array([L_ok, C * np.cos(h_rad), C * np.sin(h_rad)])

        lms = (_OKLAB_TO_LMS @ lab) ** 3
        r, g, b = _linear_to_srgb(_LMS_TO_SRGB @ lms)
        return (float(r), float(g), float(b))

    def srgb_to_display_p3(self, r: float, g: float, b: float) -> SRGB:
        """Convert sRGB in [0, 1] to Display-P3 in [0, 1].

        Display-P3 shares the sRGB transfer curve, so only the primaries change.
        sRGB is a subset of P3; clipping only absorbs rounding noise.
        """
        linear = _srgb_to_linear(np.array([r, g, b], dtype=np.float64))
        p3 = _linear_to_srgb(np.clip(_SRGB_TO_P3 @ linear, 0.0, 1.0))
        r_p3, g_p3, b_p3 = np.clip(p3, 0.0, 1.0)
        return (float(r_p3), float(g_p3), float(b_p3))


def _srgb_to_linear(c: np.ndarray) -> np.ndarray:
    return np.where(c <= 0.04045, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)


def _linear_to_srgb(c: np.ndarray) -> np.ndarray:
    # Keep the sign so out-of-gamut values stay detectable.
    mag = np.abs(c)
    encoded = np.where(mag <= 0.0031308, 12.92 * mag, 1.055 * mag ** (1 / 2.4) - 0.055)
    return np.sign(c) * encoded


__all__ = ["ColorEngine", "DefaultColorEngine", "OKLCH", "SRGB"]

"""sRGB gamut handling utilities for OKLCH colors.

Generated colors keep their lightness and hue; only chroma is given up to
land inside the sRGB cube. The largest in-gamut chroma is found by bisection.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from .engine import OKLCH, SRGB, ColorEngine

# Channels within this distance of [0, 1] count as in gamut (float noise).
GAMUT_EPS = 1e-7
# Bisection stops once the chroma interval is narrower than this.
CHROMA_TOLERANCE = 1e-4


def in_srgb_gamut(rgb: SRGB) -> bool:
    channels = np.asarray(rgb, dtype=np.float64)
    return bool(np.all((channels >= -GAMUT_EPS) & (channels <= 1.0 + GAMUT_EPS)))


def to_srgb_gamut_safe(engine: ColorEngine, L: float, C: float, h: float) -> Tuple[SRGB, OKLCH]:
    """Convert OKLCH to sRGB, lowering chroma to the largest in-gamut value.

    Returns ``(rgb, (L, C_adj, h))`` with ``rgb`` clipped to [0, 1].
    """
    L = min(100.0, max(0.0, L))
    h = engine.normalize_hue(h)
    C = max(0.0, C)

    rgb = engine.oklch_to_srgb(L, C, h)
    if not in_srgb_gamut(rgb):
        lo, hi = 0.0, C
        while hi - lo > CHROMA_TOLERANCE:
            mid = (lo + hi) / 2.0
            if in_srgb_gamut(engine.oklch_to_srgb(L, mid, h)):
                lo = mid
            else:
                hi = mid
        C = lo
        rgb = engine.oklch_to_srgb(L, C, h)

    clipped = np.clip(np.asarray(rgb, dtype=np.float64), 0.0, 1.0)
    return (float(clipped[0]), float(clipped[1]), float(clipped[2])), (L, C, h)


def srgb_to_hex(rgb: SRGB) -> str:
    """Render sRGB channels in [0, 1] as ``#RRGGBB`` (out-of-range values are clipped)."""
    r8, g8, b8 = np.rint(np.clip(np.asarray(rgb, dtype=np.float64), 0.0, 1.0) * 255).astype(int)
    return f"#{int(r8):02X}{int(g8):02X}{int(b8):02X}"


def oklch_to_hex(engine: ColorEngine, L: float, C: float, h: float) -> str:
    """Gamut-map an OKLCH color and return it as ``#RRGGBB``."""
    rgb, _ = to_srgb_gamut_safe(engine, L, C, h)
    return srgb_to_hex(rgb)


__all__ = [
    "GAMUT_EPS",
    "CHROMA_TOLERANCE",
    "in_srgb_gamut",
    "to_srgb_gamut_safe",
    "srgb_to_hex",
    "oklch_to_hex",
]

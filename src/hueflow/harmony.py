"""Harmony labels, geometric hue patterns and palette skeleton generation.

This module defines :class:`HarmonyLabel` and the logic to compute relative
hue offsets and raw OKLCH colors before gamut mapping.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import numpy as np

from .engine import OKLCH, ColorEngine


class HarmonyLabel(str, Enum):
    """Relationship used to produce a palette, or where the palette came from.

    ``IMPORTED`` and ``TRENDING`` record provenance only; they are never a rule
    to replicate on the next regeneration.
    """

    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    SPLIT_COMPLEMENTARY = "split-complementary"
    TETRADIC = "tetradic"
    MONOCHROMATIC = "monochromatic"
    RANDOM = "random"
    IMPORTED = "imported"
    TRENDING = "trending"

    @property
    def is_provenance(self) -> bool:
        return self in PROVENANCE_LABELS

    @classmethod
    def parse(cls, value: "HarmonyLabel | str") -> "HarmonyLabel":
        """Resolve a label from its value (case-insensitive, ``_`` or ``-``)."""
        if isinstance(value, HarmonyLabel):
            return value
        key = str(value).strip().lower().replace("_", "-")
        for label in cls:
            if label.value == key:
                return label
        raise ValueError(f"Unknown harmony label: {value!r}")

    def __str__(self) -> str:
        return self.value


PROVENANCE_LABELS = frozenset({HarmonyLabel.IMPORTED, HarmonyLabel.TRENDING})

# Labels a generator may pick from, in a stable order for seeded draws.
GENERATIVE_HARMONIES: tuple[HarmonyLabel, ...] = tuple(
    label for label in HarmonyLabel if label not in PROVENANCE_LABELS
)


def _fill_around(offsets: List[float], anchors: List[float], n_colors: int) -> List[float]:
    """Extend ``offsets`` with +/-10k degree variations around ``anchors``."""
    delta_step = 10.0
    k = 1
    while len(offsets) < n_colors:
        for anchor in anchors:
            for sign in (+1, -1):
                if len(offsets) >= n_colors:
                    break
                offsets.append(anchor + sign * delta_step * k)
        k += 1
    return offsets[:n_colors]


def _cycle(pattern: List[float], n_colors: int) -> List[float]:
    return [pattern[i % len(pattern)] for i in range(n_colors)]


def compute_hue_offsets(
    label: HarmonyLabel,
    n_colors: int,
    rng: Optional[np.random.Generator] = None,
) -> List[float]:
    """Compute hue offsets (in degrees) relative to the base hue.

    Every generative label supports any positive ``n_colors``; fixed patterns
    (triadic, tetradic) repeat and rely on the lightness spread to stay distinct.
    """
    if n_colors <= 0:
        raise ValueError("n_colors must be positive.")
    if label in PROVENANCE_LABELS:
        raise ValueError(f"{label.value!r} is a provenance label, not a harmony rule.")

    if label == HarmonyLabel.ANALOGOUS:
        if n_colors == 1:
            return [0.0]
        max_delta = 30.0
        step = 2 * max_delta / (n_colors - 1)
        return [-max_delta + step * i for i in range(n_colors)]

    if label == HarmonyLabel.COMPLEMENTARY:
        return _fill_around([0.0, 180.0][:n_colors], [0.0, 180.0], n_colors)

    if label == HarmonyLabel.SPLIT_COMPLEMENTARY:
        delta = 30.0
        base = [0.0, 180.0 - delta, 180.0 + delta]
        return _fill_around(base[:n_colors], [180.0 - delta, 180.0 + delta], n_colors)

    if label == HarmonyLabel.TRIADIC:
        return _cycle([0.0, 120.0, 240.0], n_colors)

    if label == HarmonyLabel.TETRADIC:
        return _cycle([0.0, 90.0, 180.0, 270.0], n_colors)

    if label == HarmonyLabel.MONOCHROMATIC:
        # Hue offsets are not used; h remains fixed.
        return [0.0 for _ in range(n_colors)]

    if label == HarmonyLabel.RANDOM:
        if rng is None:
            rng = np.random.default_rng()
        return [0.0] + [float(v) for v in rng.uniform(0.0, 360.0, size=n_colors - 1)]

    raise ValueError(f"Unsupported harmony label: {label}")


@dataclass
class MonochromaticParams:
    """Parameters controlling the monochromatic lightness/chroma ramp."""

    L_min: float
    L_max: float
    C_min: float
    C_max: float


def compute_monochromatic_params(base_L: float, base_C: float) -> MonochromaticParams:
    """Compute L/C bounds for a monochromatic ramp around the base color."""
    L_min = max(25.0, base_L - 35.0)
    L_max = min(92.0, base_L + 35.0)
    return MonochromaticParams(L_min=L_min, L_max=L_max, C_min=0.3 * base_C, C_max=base_C)


def _lightness_spread(L0: float, n_colors: int, span: float = 40.0) -> List[float]:
    if n_colors == 1:
        return [L0]
    mid = (n_colors - 1) / 2.0
    step = span / (n_colors - 1)
    return [max(20.0, min(95.0, L0 + (i - mid) * step)) for i in range(n_colors)]


def generate_raw_colors(
    engine: ColorEngine,
    label: HarmonyLabel,
    base_oklch: OKLCH,
    n_colors: int,
    rng: Optional[np.random.Generator] = None,
) -> List[OKLCH]:
    """Generate raw (L, C, h) colors for ``label`` before gamut mapping."""
    L0, C0, h0 = base_oklch

    if label == HarmonyLabel.MONOCHROMATIC:
        params = compute_monochromatic_params(L0, C0)
        if n_colors == 1:
            t_values = [0.5]
        else:
            t_values = [i / (n_colors - 1) for i in range(n_colors)]
        raw: List[OKLCH] = []
        for t in t_values:
            L = params.L_max - (params.L_max - params.L_min) * t
            # Triangular distribution for chroma: max at center, min at ends.
            w = 1.0 - abs(t - 0.5) / 0.5
            C = params.C_min + (params.C_max - params.C_min) * w
            raw.append((L, C, engine.normalize_hue(h0)))
        return raw

    offsets = compute_hue_offsets(label, n_colors, rng)
    lightness = _lightness_spread(L0, n_colors)
    return [
        (L_i, C0, engine.normalize_hue(h0 + offset))
        for offset, L_i in zip(offsets, lightness)
    ]


__all__ = [
    "HarmonyLabel",
    "PROVENANCE_LABELS",
    "GENERATIVE_HARMONIES",
    "compute_hue_offsets",
    "MonochromaticParams",
    "compute_monochromatic_params",
    "generate_raw_colors",
]

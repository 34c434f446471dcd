"""Palette generation and direct palette constructions.

:class:`HarmonyGenerator` coordinates base-color selection, harmony skeletons
and sRGB gamut mapping to produce a new palette while keeping locked colors.
Edits, imports, reorders and lock toggles are direct constructions and live
here as plain functions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

import numpy as np

from .color_types import Color, hex_to_oklch, materialize
from .common import settings
from .engine import OKLCH, ColorEngine, DefaultColorEngine
from .errors import ColorFormatError, ConfigurationError
from .gamut import oklch_to_hex
from .harmony import (
    GENERATIVE_HARMONIES,
    PROVENANCE_LABELS,
    HarmonyLabel,
    generate_raw_colors,
)
from .palette import Palette

logger = logging.getLogger(__name__)

# Base lightness/chroma ranges for fresh palettes (OKLCH, L in 0..100).
BASE_L_RANGE = (45.0, 75.0)
BASE_C_RANGE = (0.08, 0.18)
MIN_BASE_C = 0.04

# Per-color jitter applied to skeleton colors.
JITTER_L = 4.0
JITTER_H = 6.0


@dataclass(frozen=True)
class GenerationResult:
    """A palette and the harmony label describing it."""

    palette: Palette
    harmony: HarmonyLabel


def _as_rng(rng: np.random.Generator | int | None) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


class HarmonyGenerator:
    """Generate palettes that respect locked colors.

    Parameters
    ----------
    size:
        Number of colors per generated palette. ``None`` uses
        ``settings.PALETTE_SIZE``.
    engine:
        ColorEngine used for conversions. If None, DefaultColorEngine is used.
    rng:
        ``numpy.random.Generator`` or integer seed. Inject a seeded source for
        reproducible output.

    Raises
    ------
    ConfigurationError
        If ``size`` is below 1.
    """

    def __init__(
        self,
        size: Optional[int] = None,
        engine: Optional[ColorEngine] = None,
        rng: np.random.Generator | int | None = None,
    ) -> None:
        if size is None:
            size = settings.get().PALETTE_SIZE
        if size < 1:
            raise ConfigurationError(f"palette size must be >= 1, got {size}")
        self.size = int(size)
        self.engine = engine if engine is not None else DefaultColorEngine()
        self.rng = _as_rng(rng)

    def choose_harmony(
        self, requested: HarmonyLabel | str | None = None
    ) -> HarmonyLabel:
        """Resolve the requested label, or draw one from the generative set."""
        if requested is None:
            return GENERATIVE_HARMONIES[int(self.rng.integers(len(GENERATIVE_HARMONIES)))]
        label = HarmonyLabel.parse(requested)
        if label in PROVENANCE_LABELS:
            raise ValueError(f"{label.value!r} records provenance and cannot be requested")
        return label

    def _base_oklch(self, locked: Sequence[Color]) -> OKLCH:
        L_lo, L_hi = BASE_L_RANGE
        C_lo, C_hi = BASE_C_RANGE
        if locked:
            L, C, h = hex_to_oklch(locked[0].hex, self.engine)
            # Near-grey anchors carry no usable hue; give the rest some color.
            if C < MIN_BASE_C:
                C = float(self.rng.uniform(C_lo, C_hi))
            return (min(max(L, L_lo), L_hi), C, h)
        return (
            float(self.rng.uniform(L_lo, L_hi)),
            float(self.rng.uniform(C_lo, C_hi)),
            float(self.rng.uniform(0.0, 360.0)),
        )

    def _synthesize(self, label: HarmonyLabel, base: OKLCH, count: int) -> List[str]:
        raw = generate_raw_colors(self.engine, label, base, count, self.rng)
        hexes: List[str] = []
        for L, C, h in raw:
            L_j = L + float(self.rng.uniform(-JITTER_L, JITTER_L))
            h_j = h + float(self.rng.uniform(-JITTER_H, JITTER_H))
            hexes.append(oklch_to_hex(self.engine, L_j, C, h_j))
        return hexes

    def generate(
        self,
        current: Sequence[Color] = (),
        requested_harmony: HarmonyLabel | str | None = None,
    ) -> GenerationResult:
        """Generate the next palette.

        Parameters
        ----------
        current:
            Palette being replaced. Locked entries are copied through as-is
            and keep their positions. An empty sequence starts from scratch.
        requested_harmony:
            Force a specific relationship. Provenance labels are rejected.

        Returns
        -------
        GenerationResult
            Palette of ``size`` colors (more only when more than ``size``
            colors are locked) and the harmony actually used.
        """
        label = self.choose_harmony(requested_harmony)
        current = tuple(current)
        locked = [c for c in current if c.is_locked]

        # Positions to fill: every unlocked slot, trailing slots dropped or
        # padded so the result has `size` entries without losing locked ones.
        slots: List[Optional[Color]] = [c if c.is_locked else None for c in current]
        while len(slots) > self.size and None in slots:
            del slots[len(slots) - 1 - slots[::-1].index(None)]
        slots.extend([None] * (self.size - len(slots)))

        base = self._base_oklch(locked)
        free = sum(1 for s in slots if s is None)
        logger.debug(
            "generate: harmony=%s locked=%d free=%d base=(%.1f, %.3f, %.1f)",
            label.value, len(locked), free, *base,
        )
        fresh = iter(self._synthesize(label, base, free)) if free else iter(())

        palette = tuple(s if s is not None else materialize(next(fresh)) for s in slots)
        return GenerationResult(palette=palette, harmony=label)


def edit_color(palette: Sequence[Color], index: int, new_hex: str) -> Palette:
    """Replace one swatch, keeping its lock flag.

    Raises
    ------
    IndexError
        If ``index`` is out of range.
    ColorFormatError
        If ``new_hex`` is malformed.
    """
    colors = list(palette)
    previous = colors[index]
    colors[index] = materialize(new_hex, previous.is_locked)
    return tuple(colors)


def toggle_lock(palette: Sequence[Color], index: int) -> Palette:
    """Flip the lock flag of one swatch."""
    colors = list(palette)
    colors[index] = colors[index].with_lock(not colors[index].is_locked)
    return tuple(colors)


def reorder(palette: Sequence[Color], order: Iterable[int]) -> Palette:
    """Return the palette rearranged so position ``i`` holds ``palette[order[i]]``."""
    colors = tuple(palette)
    indices = list(order)
    if sorted(indices) != list(range(len(colors))):
        raise ValueError(f"order must be a permutation of 0..{len(colors) - 1}, got {indices}")
    return tuple(colors[i] for i in indices)


def import_colors(
    hexes: Sequence[str],
    source: HarmonyLabel | str = HarmonyLabel.IMPORTED,
    size: Optional[int] = None,
) -> GenerationResult:
    """Build an unlocked palette from externally supplied hex strings.

    The result is tagged with the provenance ``source`` (``imported`` or
    ``trending``) and truncated to ``size`` colors.
    """
    label = HarmonyLabel.parse(source)
    if label not in PROVENANCE_LABELS:
        raise ValueError(f"import source must be a provenance label, got {label.value!r}")
    if size is None:
        size = settings.get().PALETTE_SIZE
    if size < 1:
        raise ConfigurationError(f"palette size must be >= 1, got {size}")
    if not hexes:
        raise ColorFormatError("cannot import an empty color list")
    palette = tuple(materialize(h, False) for h in list(hexes)[:size])
    return GenerationResult(palette=palette, harmony=label)


__all__ = [
    "GenerationResult",
    "HarmonyGenerator",
    "edit_color",
    "toggle_lock",
    "reorder",
    "import_colors",
]

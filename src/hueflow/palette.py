"""Palette and snapshot value types.

A palette is an ordered tuple of :class:`Color`; order maps to the visual
left-to-right position. A :class:`Snapshot` pairs a palette with the harmony
label that produced it and is what the undo/redo history stores.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Sequence, Tuple

from .color_types import Color, materialize
from .harmony import HarmonyLabel

Palette = Tuple[Color, ...]


def palette_hexes(palette: Iterable[Color]) -> Tuple[str, ...]:
    """Return the hex sequence of a palette, in order."""
    return tuple(c.hex for c in palette)


def palettes_equal(a: Iterable[Color], b: Iterable[Color]) -> bool:
    """Hex-sequence equality in order (lock flags are ignored)."""
    return palette_hexes(a) == palette_hexes(b)


def palette_from_hexes(hexes: Sequence[str], is_locked: bool = False) -> Palette:
    return tuple(materialize(h, is_locked) for h in hexes)


@dataclass(frozen=True)
class Snapshot:
    """Immutable ``(palette, harmony)`` pair.

    Attributes
    ----------
    palette:
        Colors in display order.
    harmony:
        Label that produced the palette, or ``None`` when unknown
        (e.g. a palette reloaded from favorites).
    """

    palette: Palette
    harmony: Optional[HarmonyLabel] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "palette", tuple(self.palette))
        if self.harmony is not None:
            object.__setattr__(self, "harmony", HarmonyLabel.parse(self.harmony))

    @property
    def hexes(self) -> Tuple[str, ...]:
        return palette_hexes(self.palette)

    def to_dict(self) -> dict[str, Any]:
        return {
            "palette": [c.to_dict() for c in self.palette],
            "harmony": self.harmony.value if self.harmony is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Snapshot":
        colors = tuple(Color.from_dict(item) for item in data.get("palette", ()))
        harmony = data.get("harmony")
        return cls(palette=colors, harmony=HarmonyLabel.parse(harmony) if harmony else None)


EMPTY_SNAPSHOT = Snapshot(palette=(), harmony=None)


__all__ = [
    "Palette",
    "Snapshot",
    "EMPTY_SNAPSHOT",
    "palette_hexes",
    "palettes_equal",
    "palette_from_hexes",
]

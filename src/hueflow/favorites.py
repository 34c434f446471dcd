"""Favorite palettes as an immutable list of hex sequences.

Two palettes are the same favorite when their hex sequences are equal in
order. Lock flags and harmony labels are not part of a favorite.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple

from .color_types import Color, normalize_hex

HexSequence = Tuple[str, ...]


def _key(colors: Iterable[Color | str]) -> HexSequence:
    return tuple(c.hex if isinstance(c, Color) else normalize_hex(c) for c in colors)


@dataclass(frozen=True)
class Favorites:
    """Newest-first collection of saved palettes."""

    entries: Tuple[HexSequence, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[HexSequence]:
        return iter(self.entries)

    def contains(self, colors: Iterable[Color | str]) -> bool:
        return _key(colors) in self.entries

    def add(self, colors: Iterable[Color | str]) -> "Favorites":
        key = _key(colors)
        if not key or key in self.entries:
            return self
        return Favorites(entries=(key,) + self.entries)

    def remove(self, colors: Iterable[Color | str]) -> "Favorites":
        key = _key(colors)
        return Favorites(entries=tuple(e for e in self.entries if e != key))

    def toggle(self, colors: Iterable[Color | str]) -> "Favorites":
        """Remove the palette if saved, else save it at the front."""
        key = _key(colors)
        if key in self.entries:
            return self.remove(key)
        return self.add(key)

    def to_list(self) -> List[List[str]]:
        return [list(e) for e in self.entries]

    @classmethod
    def from_list(cls, data: Sequence[Sequence[str]]) -> "Favorites":
        """Rebuild from persisted data, dropping duplicates but keeping order."""
        # First occurrence wins: persisted lists are already newest first.
        seen = dict.fromkeys(_key(entry) for entry in data if entry)
        return cls(entries=tuple(seen))


__all__ = ["Favorites", "HexSequence"]

"""History of generated mockup images, newest first.

Like :class:`hueflow.favorites.Favorites` this is an immutable value; the
surrounding application decides where the plain-data form is stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Mapping, Optional, Sequence, Tuple

from .services import GeneratedImage


@dataclass(frozen=True)
class ImageHistory:
    """Generated images, most recent first. Image ids are unique."""

    entries: Tuple[GeneratedImage, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[GeneratedImage]:
        return iter(self.entries)

    @property
    def latest(self) -> Optional[GeneratedImage]:
        return self.entries[0] if self.entries else None

    def add(self, image: GeneratedImage) -> "ImageHistory":
        """Put ``image`` in front; an older entry with the same id is dropped."""
        rest = tuple(e for e in self.entries if e.id != image.id)
        return ImageHistory(entries=(image,) + rest)

    def remove(self, image_id: str) -> "ImageHistory":
        return ImageHistory(entries=tuple(e for e in self.entries if e.id != image_id))

    def to_list(self) -> List[dict[str, Any]]:
        return [e.to_dict() for e in self.entries]

    @classmethod
    def from_list(cls, data: Sequence[Mapping[str, Any]]) -> "ImageHistory":
        """Rebuild from persisted data; the first record per id wins."""
        seen: dict[str, GeneratedImage] = {}
        for record in data:
            image = GeneratedImage.from_dict(record)
            seen.setdefault(image.id, image)
        return cls(entries=tuple(seen.values()))


__all__ = ["ImageHistory"]

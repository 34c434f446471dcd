"""Bounded undo/redo history of palette snapshots.

:class:`PaletteHistory` is an immutable value: every operation returns a new
history and leaves the receiver untouched. ``past`` holds at most
``capacity`` snapshots (oldest evicted first); ``future`` is only ever filled
by undo and is cleared by :meth:`PaletteHistory.commit`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .common import settings
from .errors import ConfigurationError
from .palette import EMPTY_SNAPSHOT, Snapshot

logger = logging.getLogger(__name__)


def _push_bounded(
    stack: Tuple[Snapshot, ...], item: Snapshot, capacity: int
) -> Tuple[Snapshot, ...]:
    """Append ``item`` and keep only the ``capacity`` most recent entries."""
    pushed = stack + (item,)
    if len(pushed) > capacity:
        dropped = len(pushed) - capacity
        logger.debug("history full; evicting %d oldest snapshot(s)", dropped)
        pushed = pushed[dropped:]
    return pushed


@dataclass(frozen=True)
class PaletteHistory:
    """Undo/redo state machine over :class:`Snapshot` values.

    Parameters
    ----------
    current:
        Snapshot shown to the user.
    past:
        Older snapshots, oldest first. At most ``capacity`` entries.
    future:
        Snapshots available to redo, next first.
    capacity:
        Maximum depth of ``past``. ``None`` uses ``settings.HISTORY_CAPACITY``.
    """

    current: Snapshot = EMPTY_SNAPSHOT
    past: Tuple[Snapshot, ...] = ()
    future: Tuple[Snapshot, ...] = ()
    capacity: Optional[int] = field(default=None)

    def __post_init__(self) -> None:
        capacity = self.capacity if self.capacity is not None else settings.get().HISTORY_CAPACITY
        if capacity < 1:
            raise ConfigurationError(f"history capacity must be >= 1, got {capacity}")
        object.__setattr__(self, "capacity", int(capacity))
        past = tuple(self.past)
        if len(past) > capacity:
            past = past[len(past) - capacity :]
        object.__setattr__(self, "past", past)
        object.__setattr__(self, "future", tuple(self.future))

    @property
    def can_undo(self) -> bool:
        return bool(self.past)

    @property
    def can_redo(self) -> bool:
        return bool(self.future)

    def commit(self, next_snapshot: Snapshot) -> "PaletteHistory":
        """Adopt ``next_snapshot``; the old current becomes undoable and redo is lost."""
        past = _push_bounded(self.past, self.current, self.capacity)  # type: ignore[arg-type]
        logger.debug("commit: past=%d, future cleared (%d)", len(past), len(self.future))
        return PaletteHistory(current=next_snapshot, past=past, future=(), capacity=self.capacity)

    def undo(self) -> "PaletteHistory":
        """Step back one snapshot; identity when nothing is undoable."""
        if not self.past:
            return self
        previous = self.past[-1]
        return PaletteHistory(
            current=previous,
            past=self.past[:-1],
            future=(self.current,) + self.future,
            capacity=self.capacity,
        )

    def redo(self) -> "PaletteHistory":
        """Step forward one snapshot; identity when nothing is redoable."""
        if not self.future:
            return self
        following = self.future[0]
        return PaletteHistory(
            current=following,
            past=_push_bounded(self.past, self.current, self.capacity),  # type: ignore[arg-type]
            future=self.future[1:],
            capacity=self.capacity,
        )


__all__ = ["PaletteHistory"]

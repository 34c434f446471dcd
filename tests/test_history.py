from __future__ import annotations

import pytest

from hueflow import ConfigurationError, HarmonyLabel, PaletteHistory, Snapshot, materialize


def _snap(hex_value: str, harmony: HarmonyLabel | None = HarmonyLabel.TRIADIC) -> Snapshot:
    return Snapshot((materialize(hex_value),), harmony)


S0, S1, S2, S3, S4 = (_snap(h) for h in ("#000000", "#111111", "#222222", "#333333", "#444444"))


def test_commit_pushes_current_not_next() -> None:
    h = PaletteHistory(current=S0, capacity=3).commit(S1)
    assert h.current == S1
    assert h.past == (S0,)
    assert h.future == ()


def test_undo_and_redo_on_empty_stacks_are_identity() -> None:
    h = PaletteHistory(current=S0, capacity=3)
    assert h.undo() is h
    assert h.redo() is h


def test_commit_undo_redo_round_trip() -> None:
    h0 = PaletteHistory(current=S0, capacity=3).commit(S1)
    h1 = h0.commit(S2)
    undone = h1.undo()
    assert undone.current == S1
    assert undone.future == (S2,)
    redone = undone.redo()
    assert redone.current == h1.current
    assert redone.past == h1.past
    assert redone.future == ()


def test_past_is_capped_and_oldest_evicted() -> None:
    h = PaletteHistory(current=S0, capacity=3)
    for s in (S1, S2, S3, S4):
        h = h.commit(s)
    assert h.past == (S1, S2, S3)

    h = h.undo()
    assert h.current == S3
    h = h.undo()
    assert h.current == S2
    h = h.undo()
    assert h.current == S1
    fourth = h.undo()
    assert fourth is h
    assert fourth.current == S1


def test_commit_clears_future() -> None:
    h = PaletteHistory(current=S0, capacity=3).commit(S1).commit(S2).undo()
    assert h.can_redo
    h = h.commit(S3)
    assert h.future == ()
    assert not h.can_redo


def test_redo_respects_capacity() -> None:
    h = PaletteHistory(current=S2, past=(S0, S1), future=(S3, S4), capacity=2)
    h = h.redo()
    assert h.current == S3
    assert h.past == (S1, S2)
    assert len(h.past) <= 2


def test_history_is_immutable() -> None:
    h = PaletteHistory(current=S0, capacity=3)
    h.commit(S1)
    assert h.current == S0
    assert h.past == ()


def test_default_capacity_from_settings() -> None:
    assert PaletteHistory(current=S0).capacity == 3


def test_capacity_below_one_rejected() -> None:
    with pytest.raises(ConfigurationError):
        PaletteHistory(current=S0, capacity=0)


def test_snapshot_dict_round_trip() -> None:
    snap = Snapshot((materialize("#1982C4", True), materialize("#FF595E")), HarmonyLabel.IMPORTED)
    data = snap.to_dict()
    assert data["harmony"] == "imported"
    assert Snapshot.from_dict(data) == snap
    assert Snapshot.from_dict({"palette": [], "harmony": None}).harmony is None

from __future__ import annotations

from hueflow import Favorites, materialize


def test_toggle_adds_then_removes() -> None:
    fav = Favorites().toggle(["#111111", "#222222"])
    assert fav.contains(["111111", "#222222"])
    assert len(fav.toggle(["#111111", "#222222"])) == 0


def test_equality_is_ordered_hex_sequence() -> None:
    fav = Favorites().add(["#111111", "#222222"])
    assert not fav.contains(["#222222", "#111111"])
    assert fav.contains([materialize("#111111", True), materialize("#222222")])


def test_newest_first_without_duplicates() -> None:
    fav = Favorites().add(["#010101"]).add(["#020202"]).add(["#010101"])
    assert fav.to_list() == [["#020202"], ["#010101"]]


def test_list_round_trip() -> None:
    data = [["#020202"], ["#010101"], ["#020202"]]
    fav = Favorites.from_list(data)
    assert fav.to_list() == [["#020202"], ["#010101"]]
    assert Favorites.from_list(fav.to_list()) == fav


def test_add_empty_is_noop() -> None:
    fav = Favorites()
    assert fav.add([]) is fav


def test_from_list_keeps_first_of_duplicates() -> None:
    fav = Favorites.from_list([["#030303"], ["#010101"], ["#030303"], ["#020202"], ["#010101"]])
    assert fav.to_list() == [["#030303"], ["#010101"], ["#020202"]]

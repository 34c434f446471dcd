from __future__ import annotations

import json

import pytest

from hueflow import ExportFormat, HarmonyLabel, export_palette, materialize
from hueflow.ui_helpers import EXPORT_FORMAT_OPTIONS, HARMONY_LABEL_MAP, HARMONY_OPTIONS


@pytest.fixture()
def palette():
    return (materialize("#1982C4"), materialize("#FFFFFF"))


def test_list_formats(palette) -> None:
    assert export_palette(palette, ExportFormat.HEX) == ["#1982C4", "#FFFFFF"]
    assert export_palette(palette, "rgb") == ["rgb(25, 130, 196)", "rgb(255, 255, 255)"]
    assert all(s.startswith("color(display-p3 ") for s in export_palette(palette, "p3"))


def test_gpl(palette) -> None:
    text = export_palette(palette, ExportFormat.GPL, name="Test")
    lines = text.splitlines()
    assert lines[0] == "GIMP Palette"
    assert lines[1] == "Name: Test"
    assert " 25 130 196 #1982C4" in lines


def test_css_includes_text_color(palette) -> None:
    css = export_palette(palette, "css")
    assert "--color-1: #1982C4;" in css
    assert "--color-2-text: #000000;" in css


def test_json(palette) -> None:
    data = json.loads(export_palette(palette, "json"))
    assert [c["hex"] for c in data["colors"]] == ["#1982C4", "#FFFFFF"]


def test_unknown_format(palette) -> None:
    with pytest.raises(ValueError):
        export_palette(palette, "ase")


def test_options_cover_generative_harmonies() -> None:
    assert HARMONY_LABEL_MAP["Split Complementary"] is HarmonyLabel.SPLIT_COMPLEMENTARY
    assert all(not label.is_provenance for _, label in HARMONY_OPTIONS)
    assert len(EXPORT_FORMAT_OPTIONS) == len(ExportFormat)

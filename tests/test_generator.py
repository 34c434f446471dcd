from __future__ import annotations

from itertools import product

import numpy as np
import pytest

from hueflow import (
    ColorFormatError,
    ConfigurationError,
    GENERATIVE_HARMONIES,
    HarmonyGenerator,
    HarmonyLabel,
    edit_color,
    import_colors,
    materialize,
    normalize_hex,
    reorder,
    toggle_lock,
)


def test_first_run_builds_full_unlocked_palette(generator: HarmonyGenerator) -> None:
    result = generator.generate(())
    assert len(result.palette) == 5
    assert not any(c.is_locked for c in result.palette)
    assert result.harmony in GENERATIVE_HARMONIES
    for c in result.palette:
        assert normalize_hex(c.hex) == c.hex


@pytest.mark.parametrize("label", GENERATIVE_HARMONIES)
def test_requested_harmony_is_reported(label: HarmonyLabel) -> None:
    gen = HarmonyGenerator(size=5, rng=7)
    result = gen.generate((), label)
    assert result.harmony is label
    assert len(result.palette) == 5


def test_requested_harmony_accepts_string(generator: HarmonyGenerator) -> None:
    assert generator.generate((), "complementary").harmony is HarmonyLabel.COMPLEMENTARY


@pytest.mark.parametrize("label", [HarmonyLabel.IMPORTED, HarmonyLabel.TRENDING, "imported"])
def test_provenance_cannot_be_requested(generator: HarmonyGenerator, label) -> None:
    with pytest.raises(ValueError):
        generator.generate((), label)


def test_unrequested_harmony_is_never_provenance(generator: HarmonyGenerator, sample_palette) -> None:
    current = sample_palette
    for _ in range(50):
        result = generator.generate(current)
        assert not result.harmony.is_provenance
        current = result.palette


def test_locked_positions_survive_for_every_lock_subset(sample_palette) -> None:
    gen = HarmonyGenerator(size=5, rng=2024)
    for mask in product((False, True), repeat=5):
        palette = tuple(c.with_lock(flag) for c, flag in zip(sample_palette, mask))
        result = gen.generate(palette)
        assert len(result.palette) == 5
        for i, flag in enumerate(mask):
            if flag:
                assert result.palette[i] is palette[i]
                assert result.palette[i].is_locked
            else:
                assert not result.palette[i].is_locked


def test_locked_first_swatch_scenario(generator: HarmonyGenerator, first_locked_palette) -> None:
    result = generator.generate(first_locked_palette)
    first = result.palette[0]
    assert first.hex == "#1982C4"
    assert first.is_locked is True
    for before, after in zip(first_locked_palette[1:], result.palette[1:]):
        assert after.hex != before.hex


def test_regeneration_varies(generator: HarmonyGenerator, sample_palette) -> None:
    a = generator.generate(sample_palette, HarmonyLabel.ANALOGOUS)
    b = generator.generate(sample_palette, HarmonyLabel.ANALOGOUS)
    assert [c.hex for c in a.palette] != [c.hex for c in b.palette]


def test_seeded_generators_are_reproducible() -> None:
    a = HarmonyGenerator(size=5, rng=np.random.default_rng(99)).generate(())
    b = HarmonyGenerator(size=5, rng=np.random.default_rng(99)).generate(())
    assert a == b


def test_short_palette_is_padded_to_size(generator: HarmonyGenerator) -> None:
    current = (materialize("#111111", True), materialize("#222222"))
    result = generator.generate(current)
    assert len(result.palette) == 5
    assert result.palette[0] is current[0]


def test_long_palette_drops_unlocked_tail_only() -> None:
    gen = HarmonyGenerator(size=3, rng=1)
    current = (
        materialize("#111111"),
        materialize("#222222", True),
        materialize("#333333"),
        materialize("#444444", True),
        materialize("#555555"),
    )
    result = gen.generate(current)
    assert len(result.palette) == 3
    assert result.palette[1] is current[1]
    assert result.palette[2] is current[3]


def test_more_locked_than_size_keeps_all_locked() -> None:
    gen = HarmonyGenerator(size=2, rng=1)
    current = tuple(materialize(h, True) for h in ("#111111", "#222222", "#333333"))
    assert gen.generate(current).palette == current


@pytest.mark.parametrize("size", [0, -3])
def test_size_below_one_is_rejected(size: int) -> None:
    with pytest.raises(ConfigurationError):
        HarmonyGenerator(size=size)


def test_single_color_palette() -> None:
    result = HarmonyGenerator(size=1, rng=3).generate(())
    assert len(result.palette) == 1


def test_edit_color_keeps_lock(first_locked_palette) -> None:
    edited = edit_color(first_locked_palette, 0, "abcdef")
    assert edited[0].hex == "#ABCDEF"
    assert edited[0].is_locked is True
    assert edited[1:] == first_locked_palette[1:]


def test_edit_color_errors(sample_palette) -> None:
    with pytest.raises(IndexError):
        edit_color(sample_palette, 9, "#000000")
    with pytest.raises(ColorFormatError):
        edit_color(sample_palette, 0, "#00")


def test_toggle_lock(sample_palette) -> None:
    toggled = toggle_lock(sample_palette, 2)
    assert toggled[2].is_locked is True
    assert toggle_lock(toggled, 2)[2].is_locked is False


def test_reorder(sample_palette) -> None:
    moved = reorder(sample_palette, [4, 3, 2, 1, 0])
    assert [c.hex for c in moved] == [c.hex for c in reversed(sample_palette)]
    with pytest.raises(ValueError):
        reorder(sample_palette, [0, 0, 1, 2, 3])


def test_import_scenario() -> None:
    result = import_colors(["#111111", "#222222", "#333333"])
    assert result.harmony is HarmonyLabel.IMPORTED
    assert result.harmony == "imported"
    assert [c.hex for c in result.palette] == ["#111111", "#222222", "#333333"]
    assert not any(c.is_locked for c in result.palette)


def test_import_trending_and_truncation() -> None:
    hexes = ["#010101", "#020202", "#030303", "#040404", "#050505", "#060606"]
    result = import_colors(hexes, HarmonyLabel.TRENDING, size=5)
    assert result.harmony is HarmonyLabel.TRENDING
    assert len(result.palette) == 5


def test_import_rejects_bad_input() -> None:
    with pytest.raises(ColorFormatError):
        import_colors([])
    with pytest.raises(ColorFormatError):
        import_colors(["#111111", "nope"])
    with pytest.raises(ValueError):
        import_colors(["#111111"], HarmonyLabel.TRIADIC)

"""Shared fixtures: seeded random source and sample palettes."""

from __future__ import annotations

import numpy as np
import pytest

from hueflow import HarmonyGenerator, materialize
from hueflow.palette import Palette

SAMPLE_HEXES = ("#1982C4", "#FF595E", "#FFCA3A", "#8AC926", "#6A4C93")


@pytest.fixture()
def rng() -> np.random.Generator:
    """Deterministic random source."""
    return np.random.default_rng(12345)


@pytest.fixture()
def generator(rng: np.random.Generator) -> HarmonyGenerator:
    return HarmonyGenerator(size=5, rng=rng)


@pytest.fixture()
def sample_palette() -> Palette:
    return tuple(materialize(h) for h in SAMPLE_HEXES)


@pytest.fixture()
def first_locked_palette() -> Palette:
    """Sample palette with only the first swatch locked."""
    return (materialize(SAMPLE_HEXES[0], True),) + tuple(materialize(h) for h in SAMPLE_HEXES[1:])

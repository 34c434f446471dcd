from __future__ import annotations

import io

import pytest
from PIL import Image

from hueflow import ExtractionError
from hueflow.extract import KMeansPaletteExtractor


def _png(size: int = 200) -> bytes:
    """Image whose top three quarters are red and bottom quarter blue."""
    img = Image.new("RGB", (size, size), (255, 0, 0))
    img.paste((0, 0, 255), (0, size * 3 // 4, size, size))
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def test_dominant_colors_ordered_by_coverage() -> None:
    hexes = KMeansPaletteExtractor(n_colors=5, sample_size=200).extract(_png(), "image/png")
    assert hexes == ["#FF0000", "#0000FF"]


def test_unsupported_mime_type() -> None:
    with pytest.raises(ExtractionError):
        KMeansPaletteExtractor().extract(_png(), "application/pdf")


def test_undecodable_payload() -> None:
    with pytest.raises(ExtractionError):
        KMeansPaletteExtractor().extract(b"definitely not an image", "image/png")


def test_n_colors_must_be_positive() -> None:
    with pytest.raises(ValueError):
        KMeansPaletteExtractor(n_colors=0)

"""Local image-to-palette extractor based on k-means clustering.

Decodes the image with Pillow, downsizes it, clusters the RGB pixels with
scikit-learn's KMeans and returns the cluster centers ordered by how many
pixels they cover.
"""

from __future__ import annotations

import io
import logging
from typing import List

import numpy as np
from PIL import Image, UnidentifiedImageError
from sklearn.cluster import KMeans

from .errors import ExtractionError

logger = logging.getLogger(__name__)

SUPPORTED_MIME_TYPES = frozenset({"image/png", "image/jpeg", "image/webp", "image/gif"})


class KMeansPaletteExtractor:
    """Extract dominant colors from an image payload.

    Parameters
    ----------
    n_colors:
        Number of clusters (and at most that many colors returned).
    sample_size:
        Images are resized to ``sample_size x sample_size`` before clustering.
    seed:
        KMeans random state.
    """

    def __init__(self, n_colors: int = 5, sample_size: int = 200, seed: int = 42) -> None:
        if n_colors < 1:
            raise ValueError("n_colors must be positive.")
        self.n_colors = n_colors
        self.sample_size = sample_size
        self.seed = seed

    def extract(self, data: bytes, mime_type: str) -> List[str]:
        if mime_type.lower() not in SUPPORTED_MIME_TYPES:
            raise ExtractionError(f"unsupported image type: {mime_type}")
        try:
            with Image.open(io.BytesIO(data)) as img:
                img = img.convert("RGB").resize((self.sample_size, self.sample_size))
                pixels = np.asarray(img, dtype=np.float64).reshape(-1, 3)
        except (UnidentifiedImageError, OSError) as exc:
            raise ExtractionError(f"could not decode image: {exc}") from exc

        n_clusters = min(self.n_colors, len(np.unique(pixels, axis=0)))
        kmeans = KMeans(n_clusters=n_clusters, random_state=self.seed, n_init=10)
        labels = kmeans.fit_predict(pixels)
        counts = np.bincount(labels, minlength=n_clusters)
        centers = np.clip(np.rint(kmeans.cluster_centers_), 0, 255).astype(int)

        order = np.argsort(-counts, kind="stable")
        hexes = [f"#{int(r):02X}{int(g):02X}{int(b):02X}" for r, g, b in centers[order]]
        logger.debug("kmeans extracted %s from %d pixels", hexes, pixels.shape[0])
        return hexes


__all__ = ["KMeansPaletteExtractor", "SUPPORTED_MIME_TYPES"]

"""Action controller tying generation, history and favorites together.

:class:`PaletteSession` translates one user action into engine calls and,
for every action other than undo/redo, commits exactly one new snapshot.
Each action validates its inputs (and any collaborator result) before it
touches the history, so a failed action leaves the session unchanged.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from . import generator as gen
from .color_types import Color
from .errors import GenerationError
from .extract import KMeansPaletteExtractor
from .favorites import Favorites
from .generator import GenerationResult, HarmonyGenerator
from .harmony import HarmonyLabel
from .history import PaletteHistory
from .images import ImageHistory
from .palette import Palette, Snapshot, palette_from_hexes
from .services import (
    GeneratedImage,
    ImageGenerator,
    PaletteExtractor,
    ReferenceImage,
    extract_palette,
)
from .services import generate_mockup as _generate_mockup
from .trending import get_trending

logger = logging.getLogger(__name__)


class PaletteSession:
    """Current palette state plus undo/redo, favorites and generated images.

    Parameters
    ----------
    generator:
        HarmonyGenerator to use. A default one is created when omitted.
    history_capacity:
        Undo depth. ``None`` uses ``settings.HISTORY_CAPACITY``.
    favorites:
        Previously saved favorites.
    images:
        Previously generated mockup images.
    initial:
        Starting snapshot. When omitted a first palette is generated; that
        first palette is not undoable.
    """

    def __init__(
        self,
        generator: Optional[HarmonyGenerator] = None,
        history_capacity: Optional[int] = None,
        favorites: Optional[Favorites] = None,
        initial: Optional[Snapshot] = None,
        images: Optional[ImageHistory] = None,
    ) -> None:
        self.generator = generator if generator is not None else HarmonyGenerator()
        self.favorites = favorites if favorites is not None else Favorites()
        self.images = images if images is not None else ImageHistory()
        if initial is None:
            first = self.generator.generate(())
            initial = Snapshot(first.palette, first.harmony)
        self.history = PaletteHistory(current=initial, capacity=history_capacity)

    # --- state ---
    @property
    def snapshot(self) -> Snapshot:
        return self.history.current

    @property
    def palette(self) -> Palette:
        return self.history.current.palette

    @property
    def harmony(self) -> Optional[HarmonyLabel]:
        return self.history.current.harmony

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    @property
    def is_favorite(self) -> bool:
        return self.favorites.contains(self.palette)

    def _commit(self, palette: Sequence[Color], harmony: Optional[HarmonyLabel]) -> Snapshot:
        snapshot = Snapshot(tuple(palette), harmony)
        self.history = self.history.commit(snapshot)
        return snapshot

    def _commit_result(self, result: GenerationResult) -> Snapshot:
        return self._commit(result.palette, result.harmony)

    # --- generation ---
    def new_palette(self, harmony: HarmonyLabel | str | None = None) -> Snapshot:
        """Regenerate unlocked colors, optionally forcing a harmony."""
        result = self.generator.generate(self.palette, harmony)
        logger.info("new palette (%s): %s", result.harmony.value, [c.hex for c in result.palette])
        return self._commit_result(result)

    # --- direct edits ---
    def toggle_lock(self, index: int) -> Snapshot:
        return self._commit(gen.toggle_lock(self.palette, index), self.harmony)

    def update_color(self, index: int, hex_value: str) -> Snapshot:
        palette = gen.edit_color(self.palette, index, hex_value)
        logger.info("color %d set to %s", index, palette[index].hex)
        return self._commit(palette, self.harmony)

    def reorder(self, order: Iterable[int]) -> Snapshot:
        return self._commit(gen.reorder(self.palette, order), self.harmony)

    # --- imports ---
    def import_colors(
        self, hexes: Sequence[str], source: HarmonyLabel | str = HarmonyLabel.IMPORTED
    ) -> Snapshot:
        result = gen.import_colors(hexes, source, size=self.generator.size)
        logger.info("imported %d color(s) as %s", len(result.palette), result.harmony.value)
        return self._commit_result(result)

    def import_from_image(
        self,
        data: bytes,
        mime_type: str,
        extractor: Optional[PaletteExtractor] = None,
    ) -> Snapshot:
        """Extract colors from an image and adopt them as an ``imported`` palette.

        Without an ``extractor`` the local k-means extractor is used.

        Raises
        ------
        ExtractionError
            The session is left unchanged.
        """
        if extractor is None:
            extractor = KMeansPaletteExtractor(n_colors=self.generator.size)
        hexes = extract_palette(extractor, data, mime_type, max_colors=self.generator.size)
        return self.import_colors(hexes, HarmonyLabel.IMPORTED)

    def load_trending(self, palette: str | Sequence[str]) -> Snapshot:
        """Load a curated palette by name, or from its hex list."""
        hexes = get_trending(palette) if isinstance(palette, str) else palette
        return self.import_colors(hexes, HarmonyLabel.TRENDING)

    def load_favorite(self, hexes: Sequence[str]) -> Snapshot:
        """Load a saved favorite. Favorites carry no harmony."""
        if not hexes:
            raise ValueError("cannot load an empty favorite")
        return self._commit(palette_from_hexes(hexes), None)

    # --- history ---
    def undo(self) -> Snapshot:
        self.history = self.history.undo()
        return self.snapshot

    def redo(self) -> Snapshot:
        self.history = self.history.redo()
        return self.snapshot

    # --- favorites ---
    def toggle_favorite(self) -> bool:
        """Save or unsave the current palette; returns the new favorite state."""
        self.favorites = self.favorites.toggle(self.palette)
        return self.is_favorite

    def delete_favorite(self, hexes: Sequence[str]) -> None:
        self.favorites = self.favorites.remove(hexes)

    # --- mockups ---
    def generate_mockup(
        self,
        generator: ImageGenerator,
        prompt: str,
        reference: Optional[ReferenceImage] = None,
    ) -> GeneratedImage:
        """Generate an image with the current palette as context and record it.

        Palette and history are never touched.

        Raises
        ------
        GenerationError
            The image history is left unchanged.
        """
        try:
            image = _generate_mockup(generator, prompt, self.palette, reference)
        except GenerationError:
            logger.warning("mockup generation failed for prompt %r", prompt)
            raise
        self.images = self.images.add(image)
        logger.info("mockup %s generated (%d in history)", image.id, len(self.images))
        return image


__all__ = ["PaletteSession"]

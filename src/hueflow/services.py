"""Boundaries to the external image collaborators.

The engine never talks to a network service itself. Collaborators are any
objects satisfying :class:`PaletteExtractor` or :class:`ImageGenerator`; the
wrappers here call them, validate what comes back, and turn every failure
into :class:`ExtractionError` or :class:`GenerationError` before the caller
changes any palette state.
"""

from __future__ import annotations

import base64
import binascii
import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Protocol, Sequence

from .color_types import Color, normalize_hex
from .common import settings
from .errors import ColorFormatError, ExtractionError, GenerationError

logger = logging.getLogger(__name__)

DATA_URL_PREFIX = "data:image/png;base64,"


@dataclass(frozen=True)
class ReferenceImage:
    """Binary image payload with its MIME type."""

    data: bytes
    mime_type: str


@dataclass(frozen=True)
class GeneratedImage:
    """A generated mockup image.

    ``data`` holds the bare base64 PNG payload; :attr:`data_url` is the form
    an <img> tag or a stored image history uses.
    """

    prompt: str
    data: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: float = field(default_factory=time.time)

    @property
    def data_url(self) -> str:
        return f"{DATA_URL_PREFIX}{self.data}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "prompt": self.prompt,
            "data": self.data_url,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GeneratedImage":
        """Rebuild from plain data; ``data`` may be a data URL or bare base64."""
        try:
            payload = str(data["data"])
            image_id = str(data["id"])
            prompt = str(data.get("prompt", ""))
            timestamp = float(data.get("timestamp", 0.0))
        except (KeyError, TypeError, ValueError) as exc:
            raise GenerationError(f"malformed image record: {exc}") from exc
        if payload.startswith(DATA_URL_PREFIX):
            payload = payload[len(DATA_URL_PREFIX) :]
        return cls(prompt=prompt, data=payload, id=image_id, timestamp=timestamp)


class PaletteExtractor(Protocol):
    """Image-to-palette extraction collaborator."""

    def extract(self, data: bytes, mime_type: str) -> Sequence[str]: ...


class ImageGenerator(Protocol):
    """Prompt-to-image generation collaborator. Returns base64-encoded PNG."""

    def generate(self, prompt: str, reference: Optional[ReferenceImage] = None) -> str: ...


def extract_palette(
    extractor: PaletteExtractor,
    data: bytes,
    mime_type: str,
    max_colors: Optional[int] = None,
) -> List[str]:
    """Run ``extractor`` and return at most ``max_colors`` normalized hex strings.

    Raises
    ------
    ExtractionError
        If the collaborator fails, returns nothing, or returns a malformed color.
    """
    if max_colors is None:
        max_colors = settings.get().EXTRACT_MAX_COLORS
    if not data:
        raise ExtractionError("image payload is empty")

    try:
        result = extractor.extract(data, mime_type)
    except ExtractionError:
        raise
    except Exception as exc:
        logger.warning("palette extraction failed: %s", exc)
        raise ExtractionError(f"palette extraction failed: {exc}") from exc

    if isinstance(result, (str, bytes)) or not isinstance(result, Sequence) or not result:
        raise ExtractionError("extractor returned no colors")
    try:
        hexes = [normalize_hex(h) for h in result]
    except ColorFormatError as exc:
        logger.warning("extractor returned a malformed color: %s", exc)
        raise ExtractionError(f"invalid palette format returned: {exc}") from exc

    logger.debug("extracted %d color(s), keeping %d", len(hexes), min(len(hexes), max_colors))
    return hexes[:max_colors]


def build_mockup_prompt(prompt: str, palette: Sequence[Color]) -> str:
    """Append the palette hex list to ``prompt`` as styling context."""
    text = prompt.strip()
    if not palette:
        return text
    colors = ", ".join(c.hex for c in palette)
    return f"{text}\n\nUse this color palette: {colors}."


def generate_mockup(
    generator: ImageGenerator,
    prompt: str,
    palette: Sequence[Color] = (),
    reference: Optional[ReferenceImage] = None,
) -> GeneratedImage:
    """Generate an image for ``prompt``, using the palette only as prompt context.

    Raises
    ------
    GenerationError
        If the prompt is blank, the collaborator fails, or the payload is not
        valid non-empty base64.
    """
    if not prompt or not prompt.strip():
        raise GenerationError("prompt must not be empty")
    full_prompt = build_mockup_prompt(prompt, palette)

    try:
        payload = generator.generate(full_prompt, reference)
    except GenerationError:
        raise
    except Exception as exc:
        logger.warning("image generation failed: %s", exc)
        raise GenerationError(f"image generation failed: {exc}") from exc

    if not isinstance(payload, str) or not payload:
        raise GenerationError("no image was generated")
    try:
        base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise GenerationError("generated payload is not valid base64") from exc

    return GeneratedImage(prompt=prompt.strip(), data=payload)


__all__ = [
    "ReferenceImage",
    "GeneratedImage",
    "PaletteExtractor",
    "ImageGenerator",
    "extract_palette",
    "build_mockup_prompt",
    "generate_mockup",
]

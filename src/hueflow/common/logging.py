"""
Lightweight logging utilities for hueflow.

- Each module obtains its logger via `logging.getLogger(__name__)`.
- A helper applies a sensible minimal configuration once, when the host
  application has not configured logging itself.
"""

from __future__ import annotations

import logging


def setup_default_logging(level: int | str | None = None) -> None:
    """Apply a minimal logging configuration once.

    - No-op when the root logger already has handlers.
    - ``level=None`` uses ``settings.LOG_LEVEL``.
    """
    if level is None:
        from . import settings

        level = settings.get().LOG_LEVEL
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["setup_default_logging"]

"""
where: `hueflow.common.settings`
what: typed, centrally managed settings loaded from YAML config and `HUEFLOW_*` env vars.
why: avoid scattered `os.getenv` calls and keep defaults/types consistent and testable.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .config import load_config
from .env import env_int, env_str


@dataclass
class _Settings:
    # Palette
    PALETTE_SIZE: int = 5

    # History
    HISTORY_CAPACITY: int = 3

    # External collaborators
    EXTRACT_MAX_COLORS: int = 5

    # Misc
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def _coerce_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def reload(root: Path | None = None) -> _Settings:
    """Reload settings: dataclass defaults, then YAML config, then environment.

    Values are not clamped here. A palette size or history capacity below 1 is
    rejected with `ConfigurationError` by the component that uses it.
    """
    defaults = _Settings()
    cfg = load_config(root)

    size = _coerce_int(cfg.get("palette_size"), defaults.PALETTE_SIZE)
    capacity = _coerce_int(cfg.get("history_capacity"), defaults.HISTORY_CAPACITY)
    max_colors = _coerce_int(cfg.get("extract_max_colors"), defaults.EXTRACT_MAX_COLORS)
    level = str(cfg.get("log_level") or defaults.LOG_LEVEL)

    _settings.PALETTE_SIZE = env_int("HUEFLOW_PALETTE_SIZE", size) or 0
    _settings.HISTORY_CAPACITY = env_int("HUEFLOW_HISTORY_CAPACITY", capacity) or 0
    _settings.EXTRACT_MAX_COLORS = env_int("HUEFLOW_EXTRACT_MAX_COLORS", max_colors, min_value=1) or 1
    _settings.LOG_LEVEL = env_str("HUEFLOW_LOG_LEVEL", level)
    return _settings


def get() -> _Settings:
    """Return the current settings snapshot."""
    return _settings


# initial load
reload()


__all__ = ["get", "reload", "_Settings"]

"""
where: `hueflow.common.env`
what: lightweight parsing helpers for environment variables.
why: keep `os.getenv` plus bounds/format guards in one place.
"""

from __future__ import annotations

import os
from typing import Optional


def env_int(
    name: str, default: Optional[int] = None, *, min_value: Optional[int] = None
) -> Optional[int]:
    """Read an integer environment variable (missing/invalid -> default).

    Parameters
    ----------
    name : str
        Environment variable name.
    default : Optional[int]
        Fallback value (``None`` is allowed).
    min_value : Optional[int]
        Lower bound; a smaller parsed value is raised to it.

    Returns
    -------
    Optional[int]
        Parsed value, or ``default`` when unset or malformed.
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        val = int(raw.strip())
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        val = min_value
    return val


def env_bool(name: str, default: bool = False) -> bool:
    """Read a boolean environment variable (accepts 0/1, true/false, yes/no, on/off)."""
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    try:
        return int(raw) != 0
    except ValueError:
        s = raw.strip().lower()
        if s in {"true", "t", "yes", "y", "on"}:
            return True
        if s in {"false", "f", "no", "n", "off"}:
            return False
        return bool(default)


def env_str(name: str, default: str) -> str:
    """Read a string environment variable; blank values fall back to ``default``."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


__all__ = ["env_int", "env_bool", "env_str"]

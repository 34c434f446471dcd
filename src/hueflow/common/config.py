"""
where: `hueflow.common.config`
what: load YAML configuration files into a plain dict (fail-soft).
why: palette size and history depth are tuned per deployment without code edits.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("failed to read config %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _find_project_root(start: Path) -> Path:
    """Return the closest parent holding `.git`, `pyproject.toml` or `configs/`.

    Falls back to three levels up (`<repo>/src/hueflow/common` -> `<repo>`).
    """
    cur = start.resolve()
    for parent in [cur] + list(cur.parents):
        if (
            (parent / ".git").exists()
            or (parent / "pyproject.toml").exists()
            or (parent / "configs").exists()
        ):
            return parent
    return cur.parents[2] if len(cur.parents) > 2 else cur


def load_config(root: Path | None = None) -> Dict[str, Any]:
    """Load configuration and return the ``hueflow`` section as a dict.

    Precedence:
    1) `configs/default.yaml` (base)
    2) root `config.yaml` (overrides base)

    - Missing or malformed files yield an empty dict.
    - Only top-level keys of the ``hueflow`` mapping are merged (no deep merge).
    """
    project_root = root if root is not None else _find_project_root(Path(__file__).parent)
    merged: Dict[str, Any] = {}

    for path in (project_root / "configs" / "default.yaml", project_root / "config.yaml"):
        if not path.exists():
            continue
        section = _safe_load_yaml(path).get("hueflow", {})
        if isinstance(section, dict):
            merged.update(section)

    return merged


__all__ = ["load_config"]

"""Curated trending palettes.

Each entry is a plain hex list; loading one produces a palette tagged with
the ``trending`` provenance label.
"""

from __future__ import annotations

from typing import Dict, Tuple

TRENDING_PALETTES: Dict[str, Tuple[str, ...]] = {
    "rainbow-pop": ("#FF595E", "#FFCA3A", "#8AC926", "#1982C4", "#6A4C93"),
    "okabe-ito": ("#E69F00", "#56B4E9", "#009E73", "#F0E442", "#0072B2"),
    "tol-muted": ("#CC6677", "#332288", "#DDCC77", "#117733", "#88CCEE"),
    "kelly-contrast": ("#BE0032", "#F3C300", "#875692", "#F38400", "#008856"),
    "coastal": ("#264653", "#2A9D8F", "#E9C46A", "#F4A261", "#E76F51"),
    "nordic-night": ("#2E3440", "#3B4252", "#88C0D0", "#D8DEE9", "#ECEFF4"),
    "sakura": ("#FFB7C5", "#F4A6B7", "#E07A95", "#A64D79", "#4A2040"),
    "terracotta": ("#582F0E", "#7F4F24", "#936639", "#A68A64", "#B6AD90"),
}


def get_trending(name: str) -> Tuple[str, ...]:
    """Return the hex list of a curated palette.

    Raises
    ------
    KeyError
        If no palette has that name.
    """
    try:
        return TRENDING_PALETTES[name]
    except KeyError:
        raise KeyError(f"unknown trending palette: {name!r}") from None


__all__ = ["TRENDING_PALETTES", "get_trending"]

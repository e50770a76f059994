"""Helpers shared by the static lookup tools."""

from __future__ import annotations

from collections.abc import Iterable


def similar(name: str, candidates: Iterable[str], default: Iterable[str]) -> list[str]:
    """Candidates containing ``name`` or contained in it (case-insensitive), else ``default``.

    Example:
        >>> similar("motion", ["motion.div", "animate"], ["animate"])
        ['motion.div']
    """
    needle = name.lower()
    matches = [c for c in candidates if needle in c.lower() or c.lower() in needle]
    return matches or list(default)

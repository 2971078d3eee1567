"""Criticality normalization and the criticality -> numeric priority mapping."""

from __future__ import annotations

from .config import CRITICALITY_ALIASES, CRITICALITY_PRIORITY, DEFAULT_CRITICALITY


def normalize_criticality(value: str | None) -> str:
    """Normalize a criticality label to its canonical lower-case form.

    Handles variations like:
    - Case: "HIGH" -> "high"
    - Whitespace: "  low " -> "low"
    - Aliases: "Blocker" -> "critical", "3" -> "high"

    Parameters
    ----------
    value : str or None
        Raw criticality label.

    Returns
    -------
    str
        One of ``critical``, ``high``, ``medium``, ``low``. Unknown or empty
        input maps to ``medium``.
    """
    if value is None:
        return DEFAULT_CRITICALITY
    cleaned = str(value).strip().lower()
    if not cleaned:
        return DEFAULT_CRITICALITY
    return CRITICALITY_ALIASES.get(cleaned, DEFAULT_CRITICALITY)


def map_priority(criticality: str | None) -> int:
    """critical -> 4, high -> 3, medium -> 2, low -> 1."""
    return CRITICALITY_PRIORITY[normalize_criticality(criticality)]

"""Load and expose column configuration from YAML (with fallbacks)."""

from __future__ import annotations

from pathlib import Path

import yaml

from .config import DISPLAY_ORDER_TRIAGE_LIST, ISSUE_CORE_COLUMNS

_CACHE: dict[str, list[str]] | None = None


def _defaults() -> dict[str, list[str]]:
    return {
        "core": list(ISSUE_CORE_COLUMNS),
        "triage_list": list(DISPLAY_ORDER_TRIAGE_LIST),
    }


def load_column_sets(base_path: str | Path | None = None, *, reload: bool = False):
    global _CACHE
    if _CACHE is not None and not reload:
        return _CACHE
    base = Path(base_path or Path(__file__).resolve().parent.parent)
    yaml_path = base / "columns.yaml"
    sets = _defaults()
    if yaml_path.exists():
        try:
            data = yaml.safe_load(yaml_path.read_text()) or {}
        except yaml.YAMLError:
            data = {}
        groups = data.get("sets") if isinstance(data, dict) else None
        for name, cols in (groups if isinstance(groups, dict) else {}).items():
            if isinstance(cols, list) and cols:
                sets[name] = [str(c) for c in cols]
    _CACHE = sets
    return _CACHE


def get_columns(set_name: str) -> list[str]:
    sets = load_column_sets()
    return sets.get(set_name, [])

"""Labels, hover help and column types for the triage tables."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

import streamlit as st


@dataclass(slots=True, frozen=True)
class ColumnMeta:
    label: str
    help: str
    kind: str = "text"  # text | int | datetime | long_text
    width: str | None = None


COLUMN_METADATA: dict[str, ColumnMeta] = {
    "number": ColumnMeta("#", "GitHub issue number.", "int", "small"),
    "title": ColumnMeta("Title", "Issue title from GitHub.", width="large"),
    "type": ColumnMeta("Type", "Issue type assigned by the keyword classifier."),
    "criticality": ColumnMeta("Criticality", "Severity label: critical, high, medium or low."),
    "priority": ColumnMeta("Priority", "Numeric priority derived from criticality (4 = critical, 1 = low).", "int"),
    "state": ColumnMeta("State", "GitHub issue state."),
    "author": ColumnMeta("Author", "GitHub login of the issue author."),
    "labels": ColumnMeta("Labels", "GitHub labels attached to the issue."),
    "created": ColumnMeta("Created", "When the issue was opened.", "datetime"),
    "updated": ColumnMeta("Updated", "Most recent update on GitHub.", "datetime"),
    "outline": ColumnMeta("Remediation Outline", "Five-step remediation outline for the issue type.", "long_text"),
    "count": ColumnMeta("Issues", "Number of issues in the group.", "int"),
}

_BUILDERS: dict[str, Callable[[ColumnMeta], Any]] = {
    "int": lambda m: st.column_config.NumberColumn(m.label, help=m.help, format="%d", width=m.width),
    "datetime": lambda m: st.column_config.DatetimeColumn(
        m.label, help=m.help, format="YYYY-MM-DD HH:mm", width=m.width
    ),
    "long_text": lambda m: st.column_config.TextColumn(m.label, help=m.help, width="large"),
    "text": lambda m: st.column_config.TextColumn(m.label, help=m.help, width=m.width),
}


def apply_column_metadata(columns: Iterable[str], existing: dict[str, Any] | None = None) -> dict[str, Any]:
    """Column config for ``columns``; entries already in ``existing`` (e.g. link columns) win."""
    config = dict(existing or {})
    for name in columns:
        meta = COLUMN_METADATA.get(name)
        if meta is None or name in config:
            continue
        config[name] = _BUILDERS.get(meta.kind, _BUILDERS["text"])(meta)
    return config

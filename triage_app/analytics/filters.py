"""DataFrame filters for the triage list (criticality / type selections)."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from triage_app.core.config import CRITICALITY_LEVELS, ISSUE_TYPES

ALL = "all"


@dataclass(slots=True)
class FilterOptions:
    total: int
    criticalities: dict[str, int]
    types: dict[str, int]

    def labels(self) -> list[str]:
        """Button labels in display order, e.g. ``"critical (3)"``."""
        out = [f"{ALL} ({self.total})"]
        out.extend(f"{name} ({count})" for name, count in self.criticalities.items())
        out.extend(f"{name} ({count})" for name, count in self.types.items())
        return out


def filter_issues(df: pd.DataFrame, selection: str | None) -> pd.DataFrame:
    """Keep rows whose criticality or type equals ``selection``; ``all`` keeps everything."""
    if df.empty or not selection or selection == ALL:
        return df
    mask = pd.Series(False, index=df.index)
    for col in ("criticality", "type"):
        if col in df.columns:
            mask |= df[col].astype(str) == selection
    return df[mask]


def _ordered_counts(series: pd.Series, order) -> dict[str, int]:
    counts = series.astype(str).value_counts()
    return {name: int(counts[name]) for name in order if name in counts.index}


def available_filters(df: pd.DataFrame) -> FilterOptions:
    """Criticalities and types present in ``df`` with their counts."""
    if df.empty:
        return FilterOptions(total=0, criticalities={}, types={})
    crit = _ordered_counts(df["criticality"], CRITICALITY_LEVELS) if "criticality" in df.columns else {}
    types = _ordered_counts(df["type"], ISSUE_TYPES) if "type" in df.columns else {}
    return FilterOptions(total=len(df), criticalities=crit, types=types)


def selection_from_label(label: str) -> str:
    """``"critical (3)"`` -> ``"critical"``."""
    return label.split(" (", 1)[0].strip()

"""Type / criticality aggregations for the triage summary."""

from __future__ import annotations

import pandas as pd

from triage_app.core.config import CRITICALITY_LEVELS, ISSUE_TYPES


def count_by(df: pd.DataFrame, column: str) -> pd.DataFrame:
    if df.empty or column not in df.columns:
        return pd.DataFrame(columns=[column, "count"])
    order = {"criticality": CRITICALITY_LEVELS, "type": ISSUE_TYPES}.get(column)
    agg = df.groupby(column, dropna=False).size().rename("count").reset_index()
    if order:
        rank = {name: i for i, name in enumerate(order)}
        agg = agg.sort_values(by=column, key=lambda s: s.map(rank).fillna(len(rank)))
    else:
        agg = agg.sort_values(by="count", ascending=False)
    return agg.reset_index(drop=True)


def criticality_by_type(df: pd.DataFrame) -> pd.DataFrame:
    """Long-form ``type, criticality, count`` frame for stacked charts."""
    if df.empty or not {"type", "criticality"}.issubset(df.columns):
        return pd.DataFrame(columns=["type", "criticality", "count"])
    return df.groupby(["type", "criticality"]).size().rename("count").reset_index()


def priority_summary(df: pd.DataFrame) -> dict[str, float]:
    if df.empty or "priority" not in df.columns:
        return {"issues": 0, "critical": 0, "mean_priority": 0.0}
    prio = pd.to_numeric(df["priority"], errors="coerce")
    return {
        "issues": int(len(df)),
        "critical": int((df["criticality"] == "critical").sum()) if "criticality" in df.columns else 0,
        "mean_priority": round(float(prio.mean()), 2) if prio.notna().any() else 0.0,
    }

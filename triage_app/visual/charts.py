"""Chart builders (Altair) for the triage summary."""

from __future__ import annotations

import altair as alt
import pandas as pd

from triage_app.analytics.aggregations import count_by, criticality_by_type
from triage_app.core.config import CRITICALITY_LEVELS, ISSUE_TYPES

CRITICALITY_COLORS = {
    "critical": "#d62728",
    "high": "#ff7f0e",
    "medium": "#e7ba52",
    "low": "#2ca02c",
}


def criticality_by_type_chart(df: pd.DataFrame):
    data = criticality_by_type(df)
    if data.empty:
        return None
    return (
        alt.Chart(data)
        .mark_bar()
        .encode(
            x=alt.X("type:N", title="Type", sort=list(ISSUE_TYPES)),
            y=alt.Y("count:Q", title="Issues"),
            color=alt.Color(
                "criticality:N",
                title="Criticality",
                sort=list(CRITICALITY_LEVELS),
                scale=alt.Scale(
                    domain=list(CRITICALITY_LEVELS),
                    range=[CRITICALITY_COLORS[c] for c in CRITICALITY_LEVELS],
                ),
            ),
            tooltip=[
                alt.Tooltip("type:N", title="Type"),
                alt.Tooltip("criticality:N", title="Criticality"),
                alt.Tooltip("count:Q", title="Issues"),
            ],
        )
        .properties(height=260)
    )


def criticality_chart(df: pd.DataFrame):
    data = count_by(df, "criticality")
    if data.empty:
        return None
    return (
        alt.Chart(data)
        .mark_bar()
        .encode(
            x=alt.X("criticality:N", title="Criticality", sort=list(CRITICALITY_LEVELS)),
            y=alt.Y("count:Q", title="Issues"),
            color=alt.Color(
                "criticality:N",
                legend=None,
                scale=alt.Scale(
                    domain=list(CRITICALITY_LEVELS),
                    range=[CRITICALITY_COLORS[c] for c in CRITICALITY_LEVELS],
                ),
            ),
            tooltip=[alt.Tooltip("criticality:N"), alt.Tooltip("count:Q", title="Issues")],
        )
        .properties(height=220)
    )

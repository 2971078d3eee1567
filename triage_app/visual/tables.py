"""Reusable table helpers for Streamlit rendering."""

from __future__ import annotations

import pandas as pd
import pytz
import streamlit as st

from triage_app.core.column_config import get_columns
from triage_app.core.config import TIMEZONE
from triage_app.core.github_client import issue_url


def add_issue_link(df: pd.DataFrame, repo_url: str, number_col: str = "number", label: str = "Issue"):
    if df.empty or number_col not in df.columns:
        return df, {}
    out = df.copy()

    def _link(row) -> str:
        url = row.get("url")
        if isinstance(url, str) and "/issues/" in url and url.startswith("http"):
            return url
        number = row.get(number_col)
        if number is None or pd.isna(number):
            return ""
        return issue_url(repo_url, int(number))

    out[label] = out.apply(_link, axis=1)
    cfg = {
        label: st.column_config.LinkColumn(
            label,
            display_text=r"issues/(\d+)$",
            help="Open on GitHub",
            width="small",
        )
    }
    return out, cfg


def localize_timestamps(df: pd.DataFrame, columns=("created", "updated")) -> pd.DataFrame:
    if df.empty:
        return df
    out = df.copy()
    tz = pytz.timezone(TIMEZONE)
    for col in columns:
        if col in out.columns:
            out[col] = pd.to_datetime(out[col], utc=True, errors="coerce").dt.tz_convert(tz)
    return out


def prepare_issue_table(
    df: pd.DataFrame,
    repo_url: str,
    *,
    extra_columns: list[str] | None = None,
) -> tuple[pd.DataFrame, list[str], dict[str, object]]:
    if df.empty:
        return df, [], {}

    table, cfg = add_issue_link(localize_timestamps(df), repo_url)
    display_cols = [col for col in get_columns("triage_list") if col in table.columns and col != "Issue"]
    if not display_cols:
        display_cols = [col for col in get_columns("core") if col in table.columns]

    if extra_columns:
        for col in extra_columns:
            if col in table.columns and col not in display_cols and col != "Issue":
                display_cols.append(col)

    if "Issue" in table.columns:
        display_cols.insert(0, "Issue")

    return table, display_cols, cfg

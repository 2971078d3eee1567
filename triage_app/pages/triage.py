"""Issue triage page.

Fetches open issues for the configured repository, classifies them in one
batch, and renders filters, a summary chart, and the prioritized table.
"""

from __future__ import annotations

import streamlit as st

from triage_app.analytics.aggregations import priority_summary
from triage_app.analytics.filters import ALL, available_filters, filter_issues, selection_from_label
from triage_app.app import register_page
from triage_app.core.config import SETTINGS
from triage_app.core.errors import BatchFailureError
from triage_app.core.service import TriageService
from triage_app.visual.charts import criticality_by_type_chart
from triage_app.visual.column_metadata import apply_column_metadata
from triage_app.visual.progress import ProgressReporter
from triage_app.visual.tables import prepare_issue_table


@register_page("Issue Triage")
def triage_page():
    st.title("Issue Triage")
    st.caption("Classify open issues by type and criticality, highest priority first.")
    service: TriageService | None = st.session_state.get("triage_service")
    repo_url: str = st.session_state.get("repo_url", "")
    if service is None:
        st.warning("Initialize connection on Setup page first.")
        return

    if st.button("Analyze Issues", type="primary"):
        reporter = ProgressReporter(f"Triaging open issues for {repo_url}")
        try:
            analyzed = service.fetch_and_triage(repo_url, progress=reporter.callback)
        except BatchFailureError as exc:
            reporter.error(exc.message)
            return
        except (RuntimeError, ValueError) as exc:
            reporter.error(f"Failed to fetch issues: {exc}")
            return
        st.session_state["triaged"] = analyzed
        reporter.complete(f"Analyzed {len(analyzed)} issue(s).")

    analyzed = st.session_state.get("triaged")
    if not analyzed:
        st.info("No issues analyzed yet.")
        return

    df = service.to_dataframe(analyzed)
    summary = priority_summary(df)
    c1, c2, c3 = st.columns(3)
    c1.metric("Open issues", summary["issues"])
    c2.metric("Critical", summary["critical"])
    c3.metric("Mean priority", summary["mean_priority"])

    options = available_filters(df)
    choice = st.radio("Filter", options.labels(), horizontal=True, key="triage_filter")
    selection = selection_from_label(choice) if choice else ALL
    shown = filter_issues(df, selection)
    st.caption(f"{len(df)} issues analyzed • {len(shown)} showing")

    chart = criticality_by_type_chart(shown)
    if chart is not None:
        st.altair_chart(chart, use_container_width=True)

    if shown.empty:
        st.info("No issues match the selected filter criteria.")
        return
    prepared, display_cols, cfg = prepare_issue_table(shown, repo_url)
    column_config = apply_column_metadata(display_cols, cfg)
    st.dataframe(
        prepared[display_cols].head(SETTINGS.max_table_rows),
        hide_index=True,
        column_config=column_config,
    )
    csv = prepared[display_cols].to_csv(index=False).encode(SETTINGS.download_encoding)
    st.download_button(
        "Download Triage CSV",
        data=csv,
        file_name="issue_triage.csv",
        mime="text/csv",
    )

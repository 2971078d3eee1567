"""Solution plan page: synthesize a remediation plan and scaffold for one issue."""

from __future__ import annotations

import json
from pathlib import PurePosixPath

import streamlit as st

from triage_app.app import register_page
from triage_app.core.config import SETTINGS
from triage_app.core.errors import SynthesisFailureError
from triage_app.core.models import AnalyzedIssue, FileArtifact
from triage_app.core.service import TriageService
from triage_app.synthesis.commit import (
    CommitSink,
    build_commit_request,
    commit_request_to_dict,
    submit_solution,
)

LANGUAGE_BY_SUFFIX = {".tsx": "tsx", ".ts": "typescript", ".py": "python", ".md": "markdown"}


def _issue_label(item: AnalyzedIssue) -> str:
    c = item.classification
    return f"#{item.issue.number} [{c.criticality} / {c.type}] {item.issue.title}"


def _render_artifact(artifact: FileArtifact, verb: str) -> None:
    suffix = PurePosixPath(artifact.path).suffix
    with st.expander(f"{verb}: {artifact.path}"):
        st.caption(artifact.description)
        st.code(artifact.content, language=LANGUAGE_BY_SUFFIX.get(suffix))


@register_page("Solution Plan")
def solution_page():
    st.title("Solution Plan")
    service: TriageService | None = st.session_state.get("triage_service")
    analyzed: list[AnalyzedIssue] = st.session_state.get("triaged") or []
    repo_url: str = st.session_state.get("repo_url", "")
    if service is None:
        st.warning("Initialize connection on Setup page first.")
        return
    if not analyzed:
        st.info("Run the Issue Triage page first.")
        return

    idx = st.selectbox(
        "Issue",
        range(len(analyzed)),
        format_func=lambda i: _issue_label(analyzed[i]),
    )
    item = analyzed[idx]
    body = item.issue.body or ""
    if body:
        preview = body[: SETTINGS.body_preview_chars]
        st.write(preview + ("..." if len(body) > SETTINGS.body_preview_chars else ""))
    st.markdown("**Remediation outline**")
    st.text(item.outline)

    if st.button("Generate Solution", type="primary"):
        try:
            service.attach_solution(item, repo_url)
        except SynthesisFailureError as exc:
            st.error(exc.message)
            return

    plan = item.solution
    if plan is None:
        return
    st.markdown("---")
    st.subheader("Proposed solution")
    st.write(plan.summary)
    st.caption(f"Estimated time: {plan.estimated_time}")
    st.markdown("\n".join(f"{n}. {step}" for n, step in enumerate(plan.steps, start=1)))
    for artifact in plan.files_created:
        _render_artifact(artifact, "Create")
    for artifact in plan.files_modified:
        _render_artifact(artifact, "Modify")

    request = build_commit_request(item.issue, plan)
    st.markdown("**Commit message**")
    st.code(request.commit_message, language=None)
    st.download_button(
        "Download Commit Request (JSON)",
        data=json.dumps(commit_request_to_dict(request), indent=2).encode(SETTINGS.download_encoding),
        file_name=f"commit_request_{item.issue.number}.json",
        mime="application/json",
    )

    sink: CommitSink | None = st.session_state.get("commit_sink")
    if sink is None:
        st.caption("Configure a commit service on the Setup page to open a pull request.")
        return
    if st.button("Create Pull Request"):
        with st.spinner("Submitting solution..."):
            result = submit_solution(sink, repo_url, item.issue, plan)
        if result.success and result.pull_request_url:
            st.success(f"Pull request created: {result.pull_request_url}")
        elif result.success:
            st.success("Solution committed.")
        else:
            st.error(result.error or "Commit failed")

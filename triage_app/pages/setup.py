"""Connection setup page: choose a GitHub repository and initialize TriageService."""

from __future__ import annotations

import streamlit as st

from triage_app.app import register_page
from triage_app.core.config import default_github_token
from triage_app.core.github_client import GitHubAPI, parse_repo_url
from triage_app.core.service import TriageService
from triage_app.synthesis.commit import HttpCommitSink


def secret_token() -> str | None:
    gh_secrets = st.secrets.get("github", {})
    return gh_secrets.get("GITHUB_TOKEN") or st.secrets.get("GITHUB_TOKEN") or default_github_token()


@register_page("Setup / Connection")
def setup_page():
    st.title("Repository Setup")
    st.caption("Point the triage engine at a GitHub repository (token optional for public repos).")

    gh_secrets = st.secrets.get("github", {})
    repo_url = st.text_input(
        "GitHub Repository URL",
        value=st.session_state.get("repo_url") or gh_secrets.get("REPO_URL") or "",
        placeholder="https://github.com/owner/repo",
    )
    token = st.text_input("Personal Access Token", type="password", value=secret_token() or "")
    commit_url = st.text_input(
        "Commit Service URL (optional)",
        value=gh_secrets.get("COMMIT_SERVICE_URL") or "",
        help="Endpoint that turns a solution plan into a pull request.",
    )
    ttl = st.number_input("Client cache TTL (seconds)", min_value=0, max_value=3600, value=300)
    init_btn = st.button("Initialize Connection", type="primary")

    if init_btn:
        if not repo_url:
            st.error("Repository URL required.")
            return
        try:
            owner, repo = parse_repo_url(repo_url)
        except ValueError as exc:
            st.error(str(exc))
            return
        api = GitHubAPI(token or None)
        api._cache_ttl = float(ttl)
        st.session_state["repo_url"] = repo_url
        st.session_state["triage_service"] = TriageService(api)
        if commit_url:
            st.session_state["commit_sink"] = HttpCommitSink(commit_url)
        else:
            st.session_state.pop("commit_sink", None)
        st.session_state.pop("triaged", None)
        st.success(f"Connection initialized for {owner}/{repo}.")

    if "triage_service" in st.session_state:
        st.info("TriageService ready.")

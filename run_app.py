"""Convenience launcher for the Streamlit app.

Usage:
  streamlit run run_app.py

Automatically imports every module in ``triage_app/pages`` so each page
decorated with ``@register_page`` registers itself without manual edits here.
"""

import logging
from importlib import import_module
from pathlib import Path

import streamlit as st

from triage_app.app import main

st.set_page_config(layout="wide")
logger = logging.getLogger(__name__)


def _auto_init_triage_service():
    """Initialize the GitHub-backed service from Streamlit secrets if available."""
    if "triage_service" in st.session_state:
        return

    from triage_app.core.github_client import GitHubAPI, parse_repo_url
    from triage_app.core.service import TriageService
    from triage_app.pages.setup import secret_token

    gh_secrets = st.secrets.get("github", {})
    repo_url = gh_secrets.get("REPO_URL") or st.secrets.get("REPO_URL")
    if not repo_url:
        st.sidebar.warning("No repository configured. Please use the Setup page.")
        return
    try:
        parse_repo_url(repo_url)
    except ValueError as e:
        st.sidebar.error(f"Configured repository is invalid: {e}")
        return
    st.session_state["repo_url"] = repo_url
    st.session_state["triage_service"] = TriageService(GitHubAPI(secret_token()))
    st.sidebar.success("Repository configured from secrets.")


PAGES_DIR = Path(__file__).parent / "triage_app" / "pages"
for py in sorted(PAGES_DIR.glob("[!_]*.py")):
    mod_name = f"triage_app.pages.{py.stem}"
    try:
        import_module(mod_name)
    except ImportError as e:  # pragma: no cover
        logger.warning("Failed importing page %s: %s", mod_name, e)

_auto_init_triage_service()

if __name__ == "__main__":
    main()

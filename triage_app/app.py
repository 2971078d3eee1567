"""Application entry point: page registry and router."""

from __future__ import annotations

import streamlit as st

PAGES = {}

PREFERRED_ORDER = (
    "Issue Triage",  # batch classification + filters
    "Solution Plan",  # per-issue scaffold synthesis
    "Setup / Connection",  # repository + token
)


def register_page(label):
    def decorator(func):
        PAGES[label] = func
        return func

    return decorator


def ordered_pages(labels) -> list[str]:
    ordered = [name for name in PREFERRED_ORDER if name in labels]
    trailing = sorted(name for name in labels if name not in PREFERRED_ORDER)
    return ordered + trailing


def main():
    st.sidebar.title("Issue Triage")
    pages = ordered_pages(PAGES.keys())
    if not pages:
        st.write("No pages registered yet.")
        return
    # Until a repository is configured, land on the setup page
    if "Setup / Connection" in pages and "repo_url" not in st.session_state:
        default = pages.index("Setup / Connection")
    else:
        default = 0
    page = st.sidebar.selectbox("Page", pages, index=default)
    repo_url = st.session_state.get("repo_url")
    if repo_url:
        st.sidebar.caption(f"Repository: {repo_url}")
    PAGES[page]()


if __name__ == "__main__":
    main()

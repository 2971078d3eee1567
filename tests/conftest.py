"""Test configuration ensuring local package import when editable install not active.

If users invoke `pytest` outside the project's virtualenv, we still add the project
root to sys.path so `import triage_app` works.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from triage_app.core.models import IssueModel  # noqa: E402


@pytest.fixture
def make_issue():
    def _make(issue_id: int = 1, title: str = "Untitled", body: str = "", **kwargs) -> IssueModel:
        return IssueModel(id=issue_id, title=title, body=body, number=issue_id, **kwargs)

    return _make

"""Commit/pull-request hand-off: build the payload an external sink consumes.

Nothing here talks to a repository. A ``CommitSink`` receives the
``CommitRequest`` and reports a ``CommitResult``; ``HttpCommitSink`` forwards it
to an external commit service.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

import requests

from triage_app.core.config import GITHUB_REQUEST_TIMEOUT
from triage_app.core.models import CommitRequest, CommitResult, IssueModel, SolutionPlan

logger = logging.getLogger(__name__)


class CommitSink(Protocol):
    def submit(self, repo_url: str, request: CommitRequest) -> CommitResult: ...


def build_commit_message(issue: IssueModel, plan: SolutionPlan) -> str:
    steps = "\n".join(f"- {step}" for step in plan.steps)
    return f"AI Solution: {issue.title}\n\n{plan.summary}\n\nImplementation includes:\n{steps}"


def build_commit_request(issue: IssueModel, plan: SolutionPlan) -> CommitRequest:
    return CommitRequest(
        files=plan.files,
        commit_message=build_commit_message(issue, plan),
        issue_title=issue.title,
    )


def commit_request_to_dict(request: CommitRequest) -> dict[str, Any]:
    """Wire shape ``{files, commitMessage, issueTitle}`` expected by the sink."""
    return {
        "files": [{"path": f.path, "content": f.content, "description": f.description} for f in request.files],
        "commitMessage": request.commit_message,
        "issueTitle": request.issue_title,
    }


def parse_commit_result(payload: dict[str, Any] | None) -> CommitResult:
    """Map a sink response ``{success, pullRequest: {url}, error}`` to ``CommitResult``."""
    if not isinstance(payload, dict):
        return CommitResult(success=False, error="Empty response from commit service")
    success = bool(payload.get("success"))
    pull_request = payload.get("pullRequest") or {}
    url = pull_request.get("url") if isinstance(pull_request, dict) else None
    error = payload.get("error")
    if not success and not error:
        error = "Commit failed"
    return CommitResult(success=success, pull_request_url=url if success else None, error=error)


def submit_solution(sink: CommitSink, repo_url: str, issue: IssueModel, plan: SolutionPlan) -> CommitResult:
    """Hand ``plan`` to ``sink``; sink exceptions become a failed ``CommitResult``."""
    request = build_commit_request(issue, plan)
    try:
        return sink.submit(repo_url, request)
    except Exception as exc:
        logger.exception("Commit sink failed for %r", issue.title)
        return CommitResult(success=False, error=str(exc) or "Commit failed")


class HttpCommitSink:
    """POSTs ``{repoUrl, files, commitMessage, issueTitle}`` to a commit service endpoint."""

    def __init__(self, endpoint: str, session: requests.Session | None = None):
        self.endpoint = endpoint
        self.session = session or requests.Session()

    def submit(self, repo_url: str, request: CommitRequest) -> CommitResult:
        payload = {"repoUrl": repo_url, **commit_request_to_dict(request)}
        resp = self.session.post(self.endpoint, json=payload, timeout=GITHUB_REQUEST_TIMEOUT)
        try:
            body = resp.json()
        except ValueError:
            body = None
        if resp.status_code >= 400 and not (isinstance(body, dict) and body.get("error")):
            return CommitResult(success=False, error=f"Commit service returned {resp.status_code}")
        return parse_commit_result(body)

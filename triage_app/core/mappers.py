"""Mapping raw GitHub issue JSON / request payloads into models, and models back out."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import pandas as pd

from .errors import InputMalformedError
from .models import AnalyzedIssue, FileArtifact, IssueModel, SolutionPlan


def _parse_dt(val):
    if not val:
        return None
    ts = pd.to_datetime(val, utc=True, errors="coerce")
    if ts is None or pd.isna(ts):
        return None
    return ts.to_pydatetime()


def _parse_int(val: Any) -> int | None:
    if val is None or isinstance(val, bool):
        return None
    try:
        return int(val)
    except (TypeError, ValueError):
        return None


def _author(raw: dict[str, Any]) -> str:
    user = raw.get("user")
    if isinstance(user, dict) and user.get("login"):
        return str(user["login"])
    author = raw.get("author")
    if isinstance(author, dict):
        return str(author.get("login") or "")
    return str(author or "")


def _labels(raw: dict[str, Any]) -> tuple[str, ...]:
    out: list[str] = []
    for label in raw.get("labels") or []:
        name = label.get("name") if isinstance(label, dict) else label
        if name:
            out.append(str(name))
    return tuple(out)


def map_issue(raw: Any, *, require_id: bool = True) -> IssueModel:
    """Build an ``IssueModel`` from GitHub issue JSON or a request issue dict.

    Raises ``InputMalformedError`` when the title is missing or not a string, or when
    ``require_id`` is set and no integer ``id`` is present.
    """
    if not isinstance(raw, dict):
        raise InputMalformedError()
    title = raw.get("title")
    if not isinstance(title, str):
        raise InputMalformedError()
    issue_id = _parse_int(raw.get("id"))
    if issue_id is None:
        if require_id:
            raise InputMalformedError()
        issue_id = 0
    body = raw.get("body")
    state = str(raw.get("state") or "open").strip().lower()
    number = _parse_int(raw.get("number"))
    return IssueModel(
        id=issue_id,
        title=title,
        body=body if isinstance(body, str) else "",
        state="closed" if state == "closed" else "open",
        author=_author(raw),
        number=number if number is not None else issue_id,
        url=raw.get("html_url") or raw.get("url"),
        labels=_labels(raw),
        created=_parse_dt(raw.get("created_at") or raw.get("created")),
        updated=_parse_dt(raw.get("updated_at") or raw.get("updated")),
        raw=dict(raw),
    )


def map_issues(raw_issues: Any) -> list[IssueModel]:
    if not isinstance(raw_issues, list):
        raise InputMalformedError()
    return [map_issue(raw) for raw in raw_issues]


def _artifact_to_dict(artifact: FileArtifact, content_key: str) -> dict[str, str]:
    return {"path": artifact.path, content_key: artifact.content, "description": artifact.description}


def solution_to_dict(plan: SolutionPlan) -> dict[str, Any]:
    return {
        "solution": plan.summary,
        "steps": list(plan.steps),
        "files_created": [_artifact_to_dict(f, "content") for f in plan.files_created],
        "files_modified": [_artifact_to_dict(f, "changes") for f in plan.files_modified],
        "estimated_time": plan.estimated_time,
    }


def issue_to_dict(issue: IssueModel) -> dict[str, Any]:
    """The caller's issue dict when one was mapped, otherwise one rebuilt from the model."""
    if issue.raw is not None:
        return dict(issue.raw)
    return {
        "id": issue.id,
        "number": issue.number,
        "title": issue.title,
        "body": issue.body,
        "state": issue.state,
        "author": issue.author,
        "user": {"login": issue.author},
        "labels": list(issue.labels),
        "html_url": issue.url,
    }


def analyzed_to_dict(item: AnalyzedIssue) -> dict[str, Any]:
    out = issue_to_dict(item.issue)
    out["ai_analysis"] = {
        "criticality": item.classification.criticality,
        "type": item.classification.type,
        "solution": item.outline,
        "priority": item.classification.priority,
    }
    if item.solution is not None:
        out["ai_solution"] = solution_to_dict(item.solution)
    return out


def issues_to_dataframe(items: Iterable[AnalyzedIssue]) -> pd.DataFrame:
    rows = []
    for item in items:
        issue = item.issue
        rows.append(
            {
                "id": issue.id,
                "number": issue.number,
                "title": issue.title,
                "body": issue.body,
                "type": item.classification.type,
                "criticality": item.classification.criticality,
                "priority": item.classification.priority,
                "state": issue.state,
                "author": issue.author or "Unknown",
                "labels": list(issue.labels),
                "url": issue.url,
                "created": issue.created,
                "updated": issue.updated,
                "outline": item.outline,
            }
        )
    df = pd.DataFrame(rows)
    # Normalize labels list to a stable, comma-separated string for display
    if "labels" in df.columns:

        def _format_labels(val):
            if not val:
                return ""
            unique = {v for v in val if v}
            return ", ".join(sorted(unique, key=lambda s: s.lower()))

        df["labels"] = df["labels"].apply(_format_labels)
    return df

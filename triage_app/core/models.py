"""Domain data models for issues, classifications, and synthesized solution plans."""

from __future__ import annotations

from dataclasses import dataclass, field
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Literal

from .priority import map_priority

IssueType = Literal["bug", "security", "feature", "enhancement", "documentation", "performance"]
Criticality = Literal["critical", "high", "medium", "low"]
IssueState = Literal["open", "closed"]


@dataclass(slots=True, frozen=True)
class IssueModel:
    id: int
    title: str
    body: str = ""
    state: IssueState = "open"
    author: str = ""
    number: int | None = None
    url: str | None = None
    labels: tuple[str, ...] = ()
    created: datetime | None = None
    updated: datetime | None = None
    # Caller's payload as received; echoed back in wire responses
    raw: Mapping[str, Any] | None = field(default=None, compare=False, repr=False)


@dataclass(slots=True, frozen=True)
class Classification:
    type: IssueType
    criticality: Criticality
    priority: int = 0

    def __post_init__(self):
        expected = map_priority(self.criticality)
        if self.priority == 0:
            object.__setattr__(self, "priority", expected)
        elif self.priority != expected:
            raise ValueError(
                f"priority {self.priority} inconsistent with criticality {self.criticality!r} (expected {expected})"
            )


@dataclass(slots=True, frozen=True)
class FileArtifact:
    path: str
    content: str
    description: str


@dataclass(slots=True)
class SolutionPlan:
    summary: str
    steps: list[str] = field(default_factory=list)
    files_created: list[FileArtifact] = field(default_factory=list)
    files_modified: list[FileArtifact] = field(default_factory=list)
    estimated_time: str = ""

    @property
    def files(self) -> list[FileArtifact]:
        return [*self.files_created, *self.files_modified]


@dataclass(slots=True)
class AnalyzedIssue:
    issue: IssueModel
    classification: Classification
    outline: str
    solution: SolutionPlan | None = None

    @property
    def priority(self) -> int:
        return self.classification.priority


@dataclass(slots=True)
class TriageReport:
    """Outcome of a batch run that isolates per-issue failures."""

    issues: list[AnalyzedIssue] = field(default_factory=list)
    failed_ids: list[int] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed_ids


@dataclass(slots=True)
class CommitRequest:
    files: list[FileArtifact]
    commit_message: str
    issue_title: str


@dataclass(slots=True)
class CommitResult:
    success: bool
    pull_request_url: str | None = None
    error: str | None = None

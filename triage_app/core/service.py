"""TriageService: orchestrates fetching, per-issue classification, and solution synthesis."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor, as_completed

import pandas as pd

from triage_app.synthesis.outline import outline
from triage_app.synthesis.scaffold import synthesize

from .classifier import classify_issue
from .config import TRIAGE_MAX_WORKERS, TRIAGE_MIN_PARALLEL
from .errors import BatchFailureError, SynthesisFailureError
from .github_client import GitHubAPI
from .mappers import issues_to_dataframe, map_issue
from .models import AnalyzedIssue, IssueModel, SolutionPlan, TriageReport

ProgressCallback = Callable[[str, int | None, int | None], None]

logger = logging.getLogger(__name__)


def analyze_issue(issue: IssueModel, repo_context: str = "") -> AnalyzedIssue:
    """Classify, prioritise, and outline one issue. Pure; safe to run in parallel."""
    classification = classify_issue(issue)
    return AnalyzedIssue(
        issue=issue,
        classification=classification,
        outline=outline(issue, classification.type, classification.criticality),
    )


def sort_by_priority(items: Sequence[AnalyzedIssue]) -> list[AnalyzedIssue]:
    """Descending priority; equal priorities keep their input order."""
    return sorted(items, key=lambda item: item.priority, reverse=True)


class TriageService:
    def __init__(self, api: GitHubAPI | None = None, *, max_workers: int = TRIAGE_MAX_WORKERS):
        self.api = api
        self.max_workers = max_workers

    # ------------------ Fetch Methods ------------------
    def fetch_open_issues(
        self,
        repo_url: str,
        *,
        progress: ProgressCallback | None = None,
    ) -> list[IssueModel]:
        if self.api is None:
            raise RuntimeError("GitHub client not configured")
        if progress:
            progress(f"Querying open issues for {repo_url}", None, None)
        raw = self.api.fetch_repo_issues(repo_url, state="open")
        return [map_issue(r) for r in raw]

    def fetch_and_triage(
        self,
        repo_url: str,
        *,
        progress: ProgressCallback | None = None,
    ) -> list[AnalyzedIssue]:
        issues = self.fetch_open_issues(repo_url, progress=progress)
        return self.triage(issues, repo_url, progress=progress)

    # ------------------ Triage ------------------
    def triage(
        self,
        issues: Sequence[IssueModel],
        repo_context: str = "",
        *,
        progress: ProgressCallback | None = None,
    ) -> list[AnalyzedIssue]:
        """Analyze every issue and return them sorted by descending priority.

        All-or-nothing: if any issue fails, ``BatchFailureError`` is raised
        and no results are returned. The failing issue is only logged.
        """
        results = self._run_batch(issues, repo_context, progress=progress, isolate=False)
        return sort_by_priority([r for r in results if r is not None])

    def triage_isolated(
        self,
        issues: Sequence[IssueModel],
        repo_context: str = "",
        *,
        progress: ProgressCallback | None = None,
    ) -> TriageReport:
        """Like ``triage`` but keeps successful issues and reports failed ids."""
        results = self._run_batch(issues, repo_context, progress=progress, isolate=True)
        analyzed = [r for r in results if r is not None]
        failed = [issue.id for issue, r in zip(issues, results, strict=True) if r is None]
        return TriageReport(issues=sort_by_priority(analyzed), failed_ids=failed)

    def _run_batch(
        self,
        issues: Sequence[IssueModel],
        repo_context: str,
        *,
        progress: ProgressCallback | None,
        isolate: bool,
    ) -> list[AnalyzedIssue | None]:
        total = len(issues)
        results: list[AnalyzedIssue | None] = [None] * total
        if not total:
            return results
        if progress:
            progress("Classifying issues", 0, total)

        def _record_failure(idx: int, exc: Exception) -> None:
            logger.warning("Triage failed for issue %s: %s", issues[idx].id, exc)
            if not isolate:
                raise BatchFailureError() from exc

        # Sequential short-circuit
        if total < TRIAGE_MIN_PARALLEL or self.max_workers <= 1:
            for idx, issue in enumerate(issues):
                try:
                    results[idx] = analyze_issue(issue, repo_context)
                except Exception as exc:
                    _record_failure(idx, exc)
                if progress:
                    progress("Classifying issues", idx + 1, total)
            return results

        completed = 0
        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            futures: dict[Future, int] = {
                pool.submit(analyze_issue, issue, repo_context): idx for idx, issue in enumerate(issues)
            }
            try:
                for fut in as_completed(futures):
                    idx = futures[fut]
                    try:
                        results[idx] = fut.result()
                    except Exception as exc:
                        _record_failure(idx, exc)
                    completed += 1
                    if progress:
                        progress("Classifying issues", completed, total)
            except BatchFailureError:
                for pending in futures:
                    pending.cancel()
                raise
        return results

    # ------------------ Solution Synthesis ------------------
    def generate_solution(self, issue: IssueModel, repo_context: str = "") -> SolutionPlan:
        try:
            return synthesize(issue)
        except Exception as exc:
            logger.exception("Solution synthesis failed for issue %s", issue.id)
            raise SynthesisFailureError() from exc

    def attach_solution(self, item: AnalyzedIssue, repo_context: str = "") -> AnalyzedIssue:
        item.solution = self.generate_solution(item.issue, repo_context)
        return item

    # ------------------ Presentation Helpers ------------------
    @staticmethod
    def to_dataframe(items: Sequence[AnalyzedIssue]) -> pd.DataFrame:
        if not items:
            return pd.DataFrame()
        return issues_to_dataframe(items)

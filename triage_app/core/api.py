"""Framework-free request handlers for batch triage and single-issue solution plans.

Each handler takes a decoded JSON payload and returns ``(status_code, body)``.
Error bodies carry only a generic ``{"error": ...}`` message.
"""

from __future__ import annotations

import logging
from typing import Any

from .errors import InputMalformedError, TriageError
from .mappers import analyzed_to_dict, map_issue, map_issues, solution_to_dict
from .service import TriageService

logger = logging.getLogger(__name__)

Response = tuple[int, dict[str, Any]]


def _error(exc: TriageError) -> Response:
    return exc.status_code, {"error": exc.message}


def _repo_context(payload: dict[str, Any]) -> str:
    value = payload.get("repoContext")
    return value if isinstance(value, str) else ""


def handle_triage_request(payload: Any, service: TriageService | None = None) -> Response:
    """``{issues, repoContext}`` -> ``{issues: [... with ai_analysis]}`` sorted by priority."""
    service = service or TriageService()
    try:
        if not isinstance(payload, dict):
            raise InputMalformedError()
        issues = map_issues(payload.get("issues"))
        analyzed = service.triage(issues, _repo_context(payload))
    except TriageError as exc:
        logger.warning("Triage request rejected: %s", exc.message)
        return _error(exc)
    return 200, {"issues": [analyzed_to_dict(item) for item in analyzed]}


def handle_solution_request(payload: Any, service: TriageService | None = None) -> Response:
    """``{issue, repoContext}`` -> ``{solution: {...}}``."""
    service = service or TriageService()
    try:
        if not isinstance(payload, dict):
            raise InputMalformedError()
        issue = map_issue(payload.get("issue"), require_id=False)
        plan = service.generate_solution(issue, _repo_context(payload))
    except TriageError as exc:
        logger.warning("Solution request rejected: %s", exc.message)
        return _error(exc)
    return 200, {"solution": solution_to_dict(plan)}

"""Central configuration, keyword vocabularies, tuning knobs, and shared column definitions."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass

# =============================================================================
# GitHub Connection Settings
# =============================================================================
GITHUB_API_URL = "https://api.github.com"
GITHUB_WEB_URL = "https://github.com"
GITHUB_ACCEPT_HEADER = "application/vnd.github.v3+json"
GITHUB_TOKEN_ENV = "GITHUB_TOKEN"
GITHUB_PAGE_SIZE = 100
GITHUB_CACHE_TTL = 300.0  # seconds
GITHUB_REQUEST_TIMEOUT = 30.0  # seconds
TIMEZONE = "UTC"


def default_github_token() -> str | None:
    """Token from the environment; Streamlit secrets take precedence in the UI."""
    token = os.environ.get(GITHUB_TOKEN_ENV, "").strip()
    return token or None


# =============================================================================
# Classification Vocabulary
# Keywords are matched as lower-case substrings of "<title> <body>".
# Order of the groups below mirrors the rule precedence in classifier.py.
# =============================================================================
ISSUE_TYPES: Sequence[str] = (
    "security",
    "feature",
    "performance",
    "documentation",
    "enhancement",
    "bug",
)
DEFAULT_ISSUE_TYPE = "bug"

SECURITY_KEYWORDS: tuple[str, ...] = (
    "security",
    "vulnerability",
    "exploit",
    "ssl",
    "tls",
    "https",
    "certificate",
    "authentication",
    "authorization",
    "xss",
    "sql injection",
    "csrf",
    "encryption",
    "password",
    "token",
    "auth",
    "login",
    "session",
    "cookie",
    "cors",
    "injection",
    "malicious",
    "attack",
    "breach",
    "leak",
    "exposed",
    "unsafe",
    "insecure",
    "privilege",
    "permission",
)
FEATURE_KEYWORDS: tuple[str, ...] = (
    "feature",
    "add",
    "implement",
    "new functionality",
    "enhancement request",
)
PERFORMANCE_KEYWORDS: tuple[str, ...] = (
    "performance",
    "slow",
    "optimize",
    "memory",
    "cpu",
    "speed",
    "timeout",
    "lag",
    "bottleneck",
)
DOCUMENTATION_KEYWORDS: tuple[str, ...] = ("documentation", "readme", "docs", "comment", "guide", "manual")
ENHANCEMENT_KEYWORDS: tuple[str, ...] = ("enhance", "improve", "better", "refactor", "cleanup", "upgrade")
BUG_KEYWORDS: tuple[str, ...] = (
    "error",
    "bug",
    "issue",
    "problem",
    "broken",
    "fail",
    "crash",
    "exception",
    "null",
)

CRITICAL_KEYWORDS: tuple[str, ...] = (
    "critical",
    "urgent",
    "emergency",
    "crash",
    "data loss",
    "production down",
    "ssl",
    "vulnerability",
    "exploit",
)
HIGH_KEYWORDS: tuple[str, ...] = (
    "important",
    "major",
    "blocking",
    "cannot",
    "unable",
    "broken",
    "not working",
    "fails",
)
LOW_KEYWORDS: tuple[str, ...] = ("minor", "cosmetic", "typo", "suggestion")

# =============================================================================
# Priority Configuration
# =============================================================================
CRITICALITY_LEVELS: Sequence[str] = ("critical", "high", "medium", "low")
DEFAULT_CRITICALITY = "medium"

CRITICALITY_PRIORITY = {
    "critical": 4,
    "high": 3,
    "medium": 2,
    "low": 1,
}

# Lower-case aliases accepted from hand-written requests and labels
CRITICALITY_ALIASES: dict[str, str] = {
    "critical": "critical",
    "blocker": "critical",
    "urgent": "critical",
    "high": "high",
    "major": "high",
    "medium": "medium",
    "normal": "medium",
    "low": "low",
    "minor": "low",
    "trivial": "low",
    "4": "critical",
    "3": "high",
    "2": "medium",
    "1": "low",
}

# =============================================================================
# Batch Triage Tuning
# Classification is cheap and CPU-light; threads keep the fan-out simple and
# below TRIAGE_MIN_PARALLEL issues we stay sequential to avoid pool overhead.
# =============================================================================
TRIAGE_MAX_WORKERS = 8
TRIAGE_MIN_PARALLEL = 4

# =============================================================================
# Generic error messages returned to callers (details go to the log only)
# =============================================================================
INVALID_REQUEST_MESSAGE = "Invalid request"
BATCH_FAILURE_MESSAGE = "AI analysis failed"
SYNTHESIS_FAILURE_MESSAGE = "Failed to generate AI solution"

# =============================================================================
# Table Columns
# =============================================================================
ISSUE_CORE_COLUMNS: Sequence[str] = (
    "id",
    "number",
    "title",
    "type",
    "criticality",
    "priority",
    "state",
    "author",
    "labels",
    "created",
    "updated",
    "outline",
)

DISPLAY_ORDER_TRIAGE_LIST: Sequence[str] = (
    "Issue",
    "title",
    "criticality",
    "type",
    "priority",
    "author",
    "state",
    "labels",
    "created",
)


@dataclass(slots=True)
class AppSettings:
    max_table_rows: int = 1000
    download_encoding: str = "utf-8"
    body_preview_chars: int = 200


SETTINGS = AppSettings()

"""Rule-based issue classifier: issue text -> (type, criticality).

Both decisions are ordered ``(predicate, result)`` rule lists evaluated top
to bottom; the first predicate that holds wins. Criticality rules see the
already-resolved type. Swapping rule order changes outcomes (e.g. "broken"
is both a bug keyword and a high-criticality keyword), so the lists below are
the precedence.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .config import (
    BUG_KEYWORDS,
    CRITICAL_KEYWORDS,
    DEFAULT_CRITICALITY,
    DEFAULT_ISSUE_TYPE,
    DOCUMENTATION_KEYWORDS,
    ENHANCEMENT_KEYWORDS,
    FEATURE_KEYWORDS,
    HIGH_KEYWORDS,
    LOW_KEYWORDS,
    PERFORMANCE_KEYWORDS,
    SECURITY_KEYWORDS,
)
from .models import Classification, IssueModel

# (text, resolved type or None) -> bool
Predicate = Callable[[str, str | None], bool]


@dataclass(slots=True, frozen=True)
class Rule:
    predicate: Predicate
    result: str


def contains_any(keywords: Iterable[str]) -> Predicate:
    words = tuple(keywords)

    def check(text: str, _issue_type: str | None = None) -> bool:
        return any(word in text for word in words)

    return check


def type_in(*types: str) -> Predicate:
    def check(_text: str, issue_type: str | None = None) -> bool:
        return issue_type in types

    return check


def either(*predicates: Predicate) -> Predicate:
    def check(text: str, issue_type: str | None = None) -> bool:
        return any(p(text, issue_type) for p in predicates)

    return check


TYPE_RULES: tuple[Rule, ...] = (
    Rule(contains_any(SECURITY_KEYWORDS), "security"),
    Rule(contains_any(FEATURE_KEYWORDS), "feature"),
    Rule(contains_any(PERFORMANCE_KEYWORDS), "performance"),
    Rule(contains_any(DOCUMENTATION_KEYWORDS), "documentation"),
    Rule(contains_any(ENHANCEMENT_KEYWORDS), "enhancement"),
    Rule(contains_any(BUG_KEYWORDS), "bug"),
)

CRITICALITY_RULES: tuple[Rule, ...] = (
    Rule(either(type_in("security"), contains_any(CRITICAL_KEYWORDS)), "critical"),
    Rule(either(contains_any(HIGH_KEYWORDS), type_in("performance")), "high"),
    Rule(either(contains_any(LOW_KEYWORDS), type_in("documentation", "enhancement")), "low"),
)


def first_match(rules: Iterable[Rule], text: str, issue_type: str | None, default: str) -> str:
    for rule in rules:
        if rule.predicate(text, issue_type):
            return rule.result
    return default


def issue_text(title: str | None, body: str | None) -> str:
    return f"{title or ''} {body or ''}".lower()


def classify(title: str | None, body: str | None = None) -> tuple[str, str]:
    """Return ``(type, criticality)`` for an issue title and optional body.

    >>> classify("SQL Injection Vulnerability", "")
    ('security', 'critical')
    >>> classify("Add dark mode toggle")
    ('feature', 'medium')
    """
    text = issue_text(title, body)
    issue_type = first_match(TYPE_RULES, text, None, DEFAULT_ISSUE_TYPE)
    criticality = first_match(CRITICALITY_RULES, text, issue_type, DEFAULT_CRITICALITY)
    return issue_type, criticality


def classify_issue(issue: IssueModel) -> Classification:
    issue_type, criticality = classify(issue.title, issue.body)
    return Classification(type=issue_type, criticality=criticality)

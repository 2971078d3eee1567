"""Scaffold synthesis: pick a scaffold kind for an issue and render its plan.

The dispatch is independent from the classifier: it only looks at which
keywords appear in the issue, in the fixed order of ``SCAFFOLD_RULES``. The
login rule inspects title and body; the remaining rules inspect the title.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from string import Template

from triage_app.core.models import FileArtifact, IssueModel, SolutionPlan

from .templates import SCAFFOLDS, ScaffoldSpec

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")

IssuePredicate = Callable[[IssueModel], bool]


def sanitize_identifier(title: str) -> str:
    """Strip every character that is not an ASCII letter or digit."""
    return _NON_ALNUM.sub("", title or "")


def route_name(title: str) -> str:
    return sanitize_identifier(title).lower()


def component_name(title: str) -> str:
    return f"{sanitize_identifier(title)}Component"


def title_has(*words: str) -> IssuePredicate:
    def check(issue: IssueModel) -> bool:
        title = (issue.title or "").lower()
        return any(w in title for w in words)

    return check


def text_has(*words: str) -> IssuePredicate:
    def check(issue: IssueModel) -> bool:
        title = (issue.title or "").lower()
        body = (issue.body or "").lower()
        return any(w in title or w in body for w in words)

    return check


SCAFFOLD_RULES: tuple[tuple[IssuePredicate, str], ...] = (
    (text_has("login"), "login"),
    (title_has("signup", "register"), "signup"),
    (title_has("dashboard", "admin"), "dashboard"),
    (title_has("api", "endpoint"), "api"),
    (title_has("component", "ui"), "component"),
    (title_has("fix", "bug"), "bugfix"),
)
FALLBACK_KIND = "feature"


def scaffold_kind(issue: IssueModel) -> str:
    for predicate, kind in SCAFFOLD_RULES:
        if predicate(issue):
            return kind
    return FALLBACK_KIND


def _context(issue: IssueModel, spec: ScaffoldSpec) -> dict[str, str]:
    title = issue.title or ""
    return {
        "title": title,
        "body_or_default": issue.body or f"{spec.body_fallback}{title}",
        "route": route_name(title),
        "component": component_name(title),
    }


def render_plan(spec: ScaffoldSpec, context: dict[str, str]) -> SolutionPlan:
    """Substitute ``context`` into every string of ``spec``.

    Raises ``KeyError``/``ValueError`` from ``string.Template`` when a
    template references an unknown placeholder.
    """

    def fill(text: str) -> str:
        return Template(text).substitute(context)

    created: list[FileArtifact] = []
    modified: list[FileArtifact] = []
    for tmpl in spec.files:
        artifact = FileArtifact(path=fill(tmpl.path), content=fill(tmpl.content), description=fill(tmpl.description))
        (modified if tmpl.modified else created).append(artifact)
    return SolutionPlan(
        summary=fill(spec.summary),
        steps=[fill(step) for step in spec.steps],
        files_created=created,
        files_modified=modified,
        estimated_time=spec.estimated_time,
    )


def synthesize(issue: IssueModel) -> SolutionPlan:
    kind = scaffold_kind(issue)
    spec = SCAFFOLDS[kind]
    logger.debug("Synthesizing %s scaffold for issue %s", kind, issue.id)
    return render_plan(spec, _context(issue, spec))

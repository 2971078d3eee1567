"""Five-step remediation outlines keyed by issue type."""

from __future__ import annotations

from string import Template

from triage_app.core.config import DEFAULT_ISSUE_TYPE
from triage_app.core.models import IssueModel

OUTLINE_TEMPLATES: dict[str, Template] = {
    "bug": Template(
        '1. Reproduce the issue described in "$title"\n'
        "2. Debug the root cause in the affected code\n"
        "3. Implement a fix with proper error handling\n"
        "4. Add unit tests to prevent regression\n"
        "5. Test thoroughly before deployment"
    ),
    "security": Template(
        "1. URGENT: Assess security impact immediately\n"
        "2. Implement security patch following best practices\n"
        "3. Review related code for similar vulnerabilities\n"
        "4. Update dependencies if applicable\n"
        "5. Conduct security audit"
    ),
    "feature": Template(
        '1. Analyze requirements from "$title"\n'
        "2. Design the feature architecture\n"
        "3. Implement core functionality\n"
        "4. Add comprehensive tests\n"
        "5. Update documentation"
    ),
    "performance": Template(
        "1. Profile and identify performance bottlenecks\n"
        "2. Optimize critical code paths\n"
        "3. Implement caching where appropriate\n"
        "4. Monitor performance metrics\n"
        "5. Load test the improvements"
    ),
    "documentation": Template(
        "1. Review current documentation gaps\n"
        "2. Write clear, comprehensive documentation\n"
        "3. Add code examples and usage patterns\n"
        "4. Update README and API docs\n"
        "5. Review for accuracy"
    ),
    "enhancement": Template(
        "1. Evaluate current implementation\n"
        "2. Design improved solution\n"
        "3. Implement enhancements incrementally\n"
        "4. Maintain backward compatibility\n"
        "5. Update tests and documentation"
    ),
}


def outline(issue: IssueModel, issue_type: str, criticality: str | None = None) -> str:
    """Textual remediation outline; unknown types get the bug outline.

    ``criticality`` is accepted for symmetry with the classifier output but
    does not change the text.
    """
    template = OUTLINE_TEMPLATES.get(issue_type) or OUTLINE_TEMPLATES[DEFAULT_ISSUE_TYPE]
    return template.safe_substitute(title=issue.title)

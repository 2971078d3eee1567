import pytest

from triage_app.core.classifier import CRITICALITY_RULES, TYPE_RULES, classify, classify_issue
from triage_app.core.models import Classification
from triage_app.core.priority import map_priority


def test_sql_injection_is_critical_security():
    assert classify("SQL Injection Vulnerability", "...") == ("security", "critical")


def test_unused_import_defaults_to_medium_bug():
    assert classify("Unused Import Statement", "Import statement for 'datetime' is not used") == (
        "bug",
        "medium",
    )


def test_add_dark_mode_is_medium_feature():
    assert classify("Add dark mode toggle", "") == ("feature", "medium")


@pytest.mark.parametrize("body", [None, ""])
def test_no_keywords_defaults(body):
    assert classify("Something odd", body) == ("bug", "medium")


@pytest.mark.parametrize(
    "title, body, expected",
    [
        ("App is slow on startup", "", ("performance", "high")),
        ("Update README", "", ("documentation", "low")),
        ("Refactor parser", "", ("enhancement", "low")),
        ("Crash when saving", "", ("bug", "critical")),
        ("Button broken on mobile", "", ("bug", "high")),
        ("Typo in error message", "", ("bug", "low")),
        # performance is checked before documentation
        ("Docs page is slow", "", ("performance", "high")),
        # security always wins criticality, even with a low keyword
        ("Minor cookie warning", "", ("security", "critical")),
        # keywords are plain substrings: "address" contains "add"
        ("Fix address validation", "", ("feature", "medium")),
        ("Page title", "Cannot open settings", ("bug", "high")),
    ],
)
def test_rule_precedence(title, body, expected):
    assert classify(title, body) == expected


def test_body_participates_in_matching():
    assert classify("Settings page", "the token is exposed in logs") == ("security", "critical")


def test_classification_priority_consistent(make_issue):
    titles = ["SQL injection", "Slow queries", "Add export", "Update docs", "Something"]
    for n, title in enumerate(titles):
        c = classify_issue(make_issue(n, title))
        assert c.priority == map_priority(c.criticality)


def test_classification_rejects_inconsistent_priority():
    with pytest.raises(ValueError):
        Classification(type="bug", criticality="high", priority=2)


def test_classify_is_idempotent():
    args = ("Login fails with null pointer", "Stack trace attached")
    assert classify(*args) == classify(*args)


def test_rule_lists_order():
    assert [r.result for r in TYPE_RULES] == [
        "security",
        "feature",
        "performance",
        "documentation",
        "enhancement",
        "bug",
    ]
    assert [r.result for r in CRITICALITY_RULES] == ["critical", "high", "low"]


def test_classify_issue_uses_title_and_body(make_issue):
    from triage_app.core.classifier import issue_text

    issue = make_issue(1, "Settings", "Exposed TOKEN")
    assert issue_text(issue.title, issue.body) == "settings exposed token"
    assert issue_text("Title", None) == "title "
    assert (classify_issue(issue).type, classify_issue(issue).criticality) == ("security", "critical")

from datetime import datetime

import pytest

from triage_app.core.errors import InputMalformedError
from triage_app.core.mappers import analyzed_to_dict, issues_to_dataframe, map_issue, map_issues
from triage_app.core.service import analyze_issue


def _raw(**overrides):
    base = {
        "id": 101,
        "number": 7,
        "title": "Broken link",
        "body": "The docs link 404s",
        "state": "open",
        "user": {"login": "octocat"},
        "labels": [{"name": "docs"}, {"name": "Bug"}, "docs"],
        "html_url": "https://github.com/octo/hello/issues/7",
        "created_at": "2024-01-02T03:04:05Z",
        "updated_at": "2024-01-03T00:00:00Z",
    }
    base.update(overrides)
    return base


def test_map_issue_github_payload():
    issue = map_issue(_raw())
    assert issue.id == 101
    assert issue.number == 7
    assert issue.author == "octocat"
    assert issue.labels == ("docs", "Bug", "docs")
    assert issue.url == "https://github.com/octo/hello/issues/7"
    assert isinstance(issue.created, datetime)
    assert issue.created.year == 2024


def test_map_issue_defaults():
    issue = map_issue({"id": "5", "title": "Something", "body": None, "state": "CLOSED"})
    assert issue.id == 5
    assert issue.number == 5
    assert issue.body == ""
    assert issue.state == "closed"
    assert issue.author == ""
    assert issue.created is None


def test_map_issue_without_id():
    with pytest.raises(InputMalformedError):
        map_issue({"title": "No id"})
    assert map_issue({"title": "No id"}, require_id=False).id == 0


@pytest.mark.parametrize("raw", [None, "text", {"id": 1}, {"id": 1, "title": None}, {"id": 1, "title": 3}])
def test_map_issue_rejects_malformed(raw):
    with pytest.raises(InputMalformedError):
        map_issue(raw)


def test_map_issue_accepts_empty_title():
    assert map_issue({"id": 1, "title": ""}).title == ""


def test_issue_dict_without_payload_includes_author(make_issue):
    from triage_app.core.mappers import issue_to_dict

    out = issue_to_dict(make_issue(3, "Local issue", author="amy"))
    assert out["author"] == "amy"
    assert out["user"] == {"login": "amy"}


def test_map_issues_requires_list():
    with pytest.raises(InputMalformedError):
        map_issues({"id": 1, "title": "x"})
    assert map_issues([]) == []


def test_analyzed_to_dict_preserves_issue_fields():
    item = analyze_issue(map_issue(_raw()))
    out = analyzed_to_dict(item)
    assert out["id"] == 101
    assert out["user"] == {"login": "octocat"}
    assert out["html_url"] == "https://github.com/octo/hello/issues/7"
    assert set(out["ai_analysis"]) == {"criticality", "type", "solution", "priority"}


def test_issues_to_dataframe_formats_labels():
    df = issues_to_dataframe([analyze_issue(map_issue(_raw()))])
    row = df.iloc[0]
    assert row["labels"] == "Bug, docs"
    assert row["author"] == "octocat"
    assert row["type"] == "documentation"

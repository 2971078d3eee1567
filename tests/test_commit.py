from triage_app.core.models import CommitResult
from triage_app.synthesis.commit import (
    build_commit_message,
    build_commit_request,
    commit_request_to_dict,
    parse_commit_result,
)
from triage_app.synthesis.scaffold import synthesize


def test_commit_message_format(make_issue):
    issue = make_issue(7, "Register users")
    plan = synthesize(issue)
    message = build_commit_message(issue, plan)
    lines = message.split("\n")
    assert lines[0] == "AI Solution: Register users"
    assert lines[1] == ""
    assert lines[2] == plan.summary
    assert lines[3] == ""
    assert lines[4] == "Implementation includes:"
    assert lines[5:] == [f"- {step}" for step in plan.steps]


def test_commit_request_carries_all_files(make_issue):
    issue = make_issue(3, "Fix crash on save")
    plan = synthesize(issue)
    request = build_commit_request(issue, plan)
    assert [f.path for f in request.files] == ["components/ExampleComponent.tsx"]
    assert request.issue_title == "Fix crash on save"

    payload = commit_request_to_dict(request)
    assert set(payload) == {"files", "commitMessage", "issueTitle"}
    assert set(payload["files"][0]) == {"path", "content", "description"}
    assert payload["commitMessage"].startswith("AI Solution: Fix crash on save")


def test_parse_commit_result_success():
    result = parse_commit_result({"success": True, "pullRequest": {"url": "https://github.com/o/r/pull/9"}})
    assert result == CommitResult(success=True, pull_request_url="https://github.com/o/r/pull/9")


def test_parse_commit_result_failure():
    assert parse_commit_result({"success": False, "error": "Bad token"}).error == "Bad token"
    failed = parse_commit_result({"success": False, "pullRequest": {"url": "ignored"}})
    assert failed.error == "Commit failed"
    assert failed.pull_request_url is None
    assert parse_commit_result(None).success is False


class RecordingSink:
    def __init__(self, result=None, exc=None):
        self.result = result
        self.exc = exc
        self.calls = []

    def submit(self, repo_url, request):
        self.calls.append((repo_url, request))
        if self.exc is not None:
            raise self.exc
        return self.result


def test_submit_solution_hands_request_to_sink(make_issue):
    from triage_app.synthesis.commit import submit_solution

    issue = make_issue(2, "Admin panel")
    plan = synthesize(issue)
    sink = RecordingSink(result=CommitResult(success=True, pull_request_url="https://github.com/o/r/pull/1"))
    result = submit_solution(sink, "https://github.com/o/r", issue, plan)
    assert result.pull_request_url == "https://github.com/o/r/pull/1"
    repo_url, request = sink.calls[0]
    assert repo_url == "https://github.com/o/r"
    assert request.files == plan.files
    assert request.issue_title == "Admin panel"


def test_submit_solution_reports_sink_errors(make_issue):
    from triage_app.synthesis.commit import submit_solution

    issue = make_issue(2, "Admin panel")
    result = submit_solution(RecordingSink(exc=ConnectionError("refused")), "repo", issue, synthesize(issue))
    assert result == CommitResult(success=False, error="refused")


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


class FakeSession:
    def __init__(self, response):
        self.response = response
        self.posts = []

    def post(self, url, json=None, timeout=None):
        self.posts.append((url, json))
        return self.response


def test_http_sink_posts_wire_payload(make_issue):
    from triage_app.synthesis.commit import HttpCommitSink

    response = FakeResponse({"success": True, "pullRequest": {"url": "https://github.com/o/r/pull/4"}})
    session = FakeSession(response)
    sink = HttpCommitSink("https://commit.example/api", session=session)
    issue = make_issue(1, "Register users")
    result = sink.submit("https://github.com/o/r", build_commit_request(issue, synthesize(issue)))
    assert result.success and result.pull_request_url == "https://github.com/o/r/pull/4"
    url, payload = session.posts[0]
    assert url == "https://commit.example/api"
    assert set(payload) == {"repoUrl", "files", "commitMessage", "issueTitle"}
    assert payload["repoUrl"] == "https://github.com/o/r"


def test_http_sink_maps_http_errors(make_issue):
    from triage_app.synthesis.commit import HttpCommitSink

    issue = make_issue(1, "Register users")
    request = build_commit_request(issue, synthesize(issue))
    bare = HttpCommitSink("u", session=FakeSession(FakeResponse(None, status_code=502))).submit("r", request)
    assert bare == CommitResult(success=False, error="Commit service returned 502")
    rejected = FakeSession(FakeResponse({"error": "Bad token"}, 401))
    with_error = HttpCommitSink("u", session=rejected).submit("r", request)
    assert with_error.error == "Bad token"
    assert with_error.success is False

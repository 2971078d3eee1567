import pytest

from triage_app.synthesis.scaffold import (
    component_name,
    route_name,
    sanitize_identifier,
    scaffold_kind,
    synthesize,
)
from triage_app.synthesis.templates import SCAFFOLDS


def test_login_branch_wins(make_issue):
    plan = synthesize(make_issue(1, "Add Login Button"))
    assert [f.path for f in plan.files_created] == ["app/login/page.tsx", "app/api/auth/login/route.ts"]
    assert plan.files_modified == []
    assert plan.estimated_time == "30 minutes"
    assert len(plan.steps) == 5


def test_login_also_matches_body(make_issue):
    assert scaffold_kind(make_issue(1, "Auth page", "users need a login screen")) == "login"


def test_signup_only_checks_title(make_issue):
    issue = make_issue(1, "New account flow", "signup page")
    assert scaffold_kind(issue) == "feature"
    plan = synthesize(issue)
    assert plan.files_created[0].path == "components/NewaccountflowComponent.tsx"


def test_signup_branch(make_issue):
    plan = synthesize(make_issue(1, "Register users"))
    assert [f.path for f in plan.files_created] == ["app/signup/page.tsx"]
    assert plan.estimated_time == "45 minutes"
    assert len(plan.steps) == 4


def test_dashboard_branch_keeps_literal_dollar(make_issue):
    plan = synthesize(make_issue(1, "Admin panel"))
    assert [f.path for f in plan.files_created] == ["app/dashboard/page.tsx"]
    assert "${stats.revenue}" in plan.files_created[0].content
    assert plan.estimated_time == "2 hours"


def test_api_branch_route_name(make_issue):
    plan = synthesize(make_issue(1, "Create user API!"))
    artifact = plan.files_created[0]
    assert artifact.path == "app/api/createuserapi/route.ts"
    assert "// API for: Create user API!" in artifact.content
    assert "export async function GET" in artifact.content
    assert "export async function POST" in artifact.content
    assert artifact.description == "API endpoint for Create user API!"
    assert plan.summary == 'Created API endpoint for "Create user API!" with GET and POST methods.'
    assert plan.estimated_time == "1 hour"


def test_component_branch_naming(make_issue):
    plan = synthesize(make_issue(1, "Profile card component"))
    artifact = plan.files_created[0]
    assert artifact.path == "components/ProfilecardcomponentComponent.tsx"
    assert "interface ProfilecardcomponentComponentProps" in artifact.content
    assert "Component created to handle: Profile card component" in artifact.content


def test_component_uses_body_when_present(make_issue):
    plan = synthesize(make_issue(1, "Sidebar UI", "Collapsible sidebar"))
    assert "Collapsible sidebar" in plan.files_created[0].content
    assert "Component created to handle" not in plan.files_created[0].content


def test_ui_substring_precedes_bugfix(make_issue):
    # "build" contains "ui"
    assert scaffold_kind(make_issue(1, "Fix build script")) == "component"


def test_bugfix_fallback(make_issue):
    plan = synthesize(make_issue(1, "Fix crash on save"))
    assert plan.files_created == []
    assert [f.path for f in plan.files_modified] == ["components/ExampleComponent.tsx"]
    assert plan.files_modified[0].content.startswith("// Fix for: Fix crash on save")
    assert plan.estimated_time == "1-2 hours"
    assert plan.steps[0] == "Analyzed the issue: Fix crash on save"
    assert plan.steps[1] == "Identified the root cause of the bug"
    assert plan.steps[2] == "Applied the necessary fixes"
    assert len(plan.steps) == 6
    assert plan.summary.startswith('Generated bugfix solution for "Fix crash on save".')


def test_feature_fallback(make_issue):
    plan = synthesize(make_issue(1, "Dark mode toggle"))
    assert plan.files_modified == []
    assert [f.path for f in plan.files_created] == ["components/DarkmodetoggleComponent.tsx"]
    assert plan.estimated_time == "2-4 hours"
    assert plan.steps[1] == "Designed the component architecture"
    assert "This component was generated to address the issue: Dark mode toggle" in plan.files_created[0].content


def test_title_with_dollar_sign_is_copied_verbatim(make_issue):
    plan = synthesize(make_issue(1, "Cost $5 API"))
    assert plan.files_created[0].path == "app/api/cost5api/route.ts"
    assert "// API for: Cost $5 API" in plan.files_created[0].content


@pytest.mark.parametrize(
    "title",
    ["Add Login Button", "Register", "Admin", "Fix endpoint", "Nav UI", "Fix bug", "Anything else"],
)
def test_created_and_modified_are_exclusive(make_issue, title):
    plan = synthesize(make_issue(1, title))
    assert bool(plan.files_created) != bool(plan.files_modified)
    assert 4 <= len(plan.steps) <= 6


def test_synthesize_is_idempotent(make_issue):
    issue = make_issue(1, "Profile card component", "with avatar")
    assert synthesize(issue) == synthesize(issue)


def test_identifier_helpers():
    assert sanitize_identifier("Add Login Button!") == "AddLoginButton"
    assert route_name("User List v2") == "userlistv2"
    assert component_name("Nav bar") == "NavbarComponent"


def test_every_scaffold_kind_renders(make_issue):
    from triage_app.synthesis.scaffold import _context, render_plan

    issue = make_issue(1, "Some title", "")
    for kind, spec in SCAFFOLDS.items():
        plan = render_plan(spec, _context(issue, spec))
        assert plan.summary, kind
        assert plan.files, kind

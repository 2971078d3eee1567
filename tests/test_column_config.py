import pandas as pd
import pytest

from triage_app.core.column_config import get_columns, load_column_sets
from triage_app.visual.tables import prepare_issue_table


@pytest.fixture
def restore_column_sets():
    yield
    load_column_sets(reload=True)


def test_defaults_without_yaml(tmp_path, restore_column_sets):
    sets = load_column_sets(tmp_path, reload=True)
    assert set(sets) == {"core", "triage_list"}
    assert sets["triage_list"][0] == "Issue"
    assert "outline" in sets["core"]


def test_yaml_overrides_named_sets(tmp_path, restore_column_sets):
    (tmp_path / "columns.yaml").write_text("sets:\n  triage_list: [Issue, title]\n  custom: [a, b]\n")
    sets = load_column_sets(tmp_path, reload=True)
    assert sets["triage_list"] == ["Issue", "title"]
    assert get_columns("custom") == ["a", "b"]
    assert "priority" in sets["core"]


@pytest.mark.parametrize("text", ["sets: [unclosed\n", "- title\n- type\n", "sets: [a, b]\n", "just text\n"])
def test_unusable_yaml_falls_back(tmp_path, restore_column_sets, text):
    (tmp_path / "columns.yaml").write_text(text)
    sets = load_column_sets(tmp_path, reload=True)
    assert sets["triage_list"][0] == "Issue"
    assert "outline" in sets["core"]


def test_table_falls_back_to_core_set(tmp_path, restore_column_sets):
    (tmp_path / "columns.yaml").write_text("sets:\n  triage_list: [missing_column]\n")
    load_column_sets(tmp_path, reload=True)
    df = pd.DataFrame({"id": [1], "number": [5], "title": ["t"], "priority": [2], "body": ["b"]})
    _, cols, _ = prepare_issue_table(df, "https://github.com/o/r")
    assert cols == ["Issue", "id", "number", "title", "priority"]

"""Tests for variable maps and precedence."""

from __future__ import annotations

import pytest

from pr_changelog.pull_request import Person, PullRequest
from pr_changelog.variables import VariableMap, fixed_variables, resolve_variables


def _pull_request(**overrides: object) -> PullRequest:
    values: dict[str, object] = {
        "title": "Fix bug",
        "number": 42,
        "url": "https://github.com/acme/widgets/pull/42",
        "author": Person("octocat", "https://github.com/octocat"),
    }
    values.update(overrides)
    return PullRequest(**values)  # type: ignore[arg-type]


def test_variable_map_normalizes_keys() -> None:
    variables = VariableMap({" title ": "Fix bug"})
    variables["Number"] = 42

    assert list(variables) == ["TITLE", "NUMBER"]
    assert variables["title"] == "Fix bug"
    assert variables["NUMBER"] == "42"
    assert "number" in variables
    assert 42 not in variables


def test_variable_map_rejects_empty_keys() -> None:
    with pytest.raises(KeyError):
        VariableMap()["  "] = "value"


def test_variable_map_overwrite_keeps_position() -> None:
    variables = VariableMap([("a", "1"), ("b", "2")])
    variables["A"] = "3"

    assert variables.to_dict() == {"A": "3", "B": "2"}


def test_fixed_variables_include_merger_when_present() -> None:
    pull_request = _pull_request(merger=Person("hubot", "https://github.com/hubot"))

    variables = fixed_variables(pull_request)

    assert variables.to_dict() == {
        "TITLE": "Fix bug",
        "NUMBER": "42",
        "URL": "https://github.com/acme/widgets/pull/42",
        "AUTHOR": "octocat",
        "AUTHOR_URL": "https://github.com/octocat",
        "MERGER": "hubot",
        "MERGER_URL": "https://github.com/hubot",
    }


def test_fixed_variables_omit_missing_merger() -> None:
    variables = fixed_variables(_pull_request())

    assert "merger" not in variables
    assert "merger_url" not in variables


def test_fixed_fields_override_table_values() -> None:
    table_vars = VariableMap({"title": "Injected", "area": "Core"})
    label_vars = VariableMap({"label_type": "bugfix"})

    resolved = resolve_variables(table_vars, label_vars, fixed_variables(_pull_request()))

    assert resolved["title"] == "Fix bug"
    assert resolved["area"] == "Core"
    assert resolved["label_type"] == "bugfix"


def test_label_variables_override_table_values() -> None:
    resolved = resolve_variables(
        {"LABEL_TYPE": "from table"},
        {"label_type": "from labels"},
        {},
    )

    assert resolved == {"LABEL_TYPE": "from labels"}

"""Tests for template rendering."""

from __future__ import annotations

from pr_changelog.template import find_placeholders, placeholder, render_template
from pr_changelog.variables import VariableMap


def test_render_template_substitutes_variables() -> None:
    variables = VariableMap({"title": "Fix bug", "number": 42})

    assert render_template("$CL_TITLE fixed #$CL_NUMBER", variables) == "Fix bug fixed #42"


def test_render_template_accepts_plain_mappings() -> None:
    assert render_template("$CL_TITLE", {"title": "Fix bug"}) == "Fix bug"


def test_render_template_leaves_unknown_placeholders() -> None:
    rendered = render_template("$CL_TITLE $CL_UNKNOWN", {"title": "Fix bug"})

    assert rendered == "Fix bug $CL_UNKNOWN"


def test_render_template_replaces_every_occurrence() -> None:
    assert render_template("$CL_A-$CL_A", {"a": "x"}) == "x-x"


def test_render_template_does_not_expand_substituted_values() -> None:
    variables = {"title": "uses $CL_NUMBER literally", "number": "7"}

    rendered = render_template("$CL_TITLE (#$CL_NUMBER)", variables)

    assert rendered == "uses $CL_NUMBER literally (#7)"


def test_render_template_prefers_longest_placeholder() -> None:
    variables = {"label": "short", "label_type": "long"}

    assert render_template("$CL_LABEL_TYPE/$CL_LABEL", variables) == "long/short"


def test_render_template_is_idempotent_on_rendered_text() -> None:
    rendered = render_template("$CL_TITLE fixed", {"title": "Fix bug"})

    assert render_template(rendered, {"title": "Other", "number": "1"}) == rendered


def test_render_template_with_no_variables_returns_template() -> None:
    assert render_template("$CL_TITLE", {}) == "$CL_TITLE"


def test_find_placeholders_lists_distinct_tokens() -> None:
    template = "$CL_TITLE by $CL_AUTHOR ($CL_TITLE)"

    assert find_placeholders(template) == ["$CL_TITLE", "$CL_AUTHOR"]
    assert placeholder(" author_url ") == "$CL_AUTHOR_URL"

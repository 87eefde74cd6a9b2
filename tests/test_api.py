from __future__ import annotations

import json
from pathlib import Path

from pr_changelog import PullRequestChangelog
from pr_changelog.config import Config, LabelGroupConfig, LabelGroupType
from pr_changelog.pull_request import Person, PullRequest


def _pull_request() -> PullRequest:
    return PullRequest(
        title="Document the API",
        number=5,
        url="https://github.com/acme/widgets/pull/5",
        author=Person("codex", "https://github.com/codex"),
        labels=("docs", "ci"),
    )


def test_python_api_renders_entry() -> None:
    config = Config(
        template="$CL_TITLE $CL_LABEL_KIND",
        label_groups=[
            LabelGroupConfig(
                id="kind",
                labels=("docs", "ci"),
                type=LabelGroupType.SEPARATE,
                prefix="#",
            )
        ],
    )
    client = PullRequestChangelog(_pull_request(), config)

    assert client.entry() == "Document the API #docs #ci"
    assert client.variables()["label_kind"] == "#docs #ci"


def test_python_api_write_uses_configured_path(tmp_path: Path) -> None:
    changelog = tmp_path / "CHANGES.md"
    client = PullRequestChangelog(_pull_request(), Config(changelog_file_path=str(changelog)))

    path = client.write()

    assert path == changelog
    assert changelog.read_text(encoding="utf-8") == "Document the API\n"


def test_python_api_loads_event_and_config_files(tmp_path: Path) -> None:
    event = tmp_path / "event.json"
    event.write_text(
        json.dumps(
            {
                "pull_request": {
                    "number": 9,
                    "title": "From disk",
                    "user": {"login": "octocat"},
                    "labels": [{"name": "skip"}],
                }
            }
        ),
        encoding="utf-8",
    )
    config = tmp_path / "config.yml"
    config.write_text("template: '#$CL_NUMBER $CL_TITLE'\n", encoding="utf-8")

    client = PullRequestChangelog(event, config)

    assert client.entry() == "#9 From disk"
    assert client.run(ignore_label="skip").skipped

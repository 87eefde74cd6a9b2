"""Python-friendly facade for generating changelog entries."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .config import Config, load_config_or_default
from .pipeline import PipelineResult, changelog_path, generate_entry, run_pipeline
from .pull_request import PullRequest, load_pull_request
from .variables import VariableMap
from .writer import prepend_entry


class PullRequestChangelog:
    """High-level helper that mirrors the CLI commands for Python callers."""

    def __init__(
        self,
        pull_request: Union[PullRequest, Path, str],
        config: Union[Config, Path, str, None] = None,
    ) -> None:
        if isinstance(pull_request, PullRequest):
            self._pull_request = pull_request
        else:
            self._pull_request = load_pull_request(Path(pull_request))
        if isinstance(config, Config):
            self._config = config
        else:
            self._config = load_config_or_default(Path(config) if config is not None else None)

    @property
    def pull_request(self) -> PullRequest:
        return self._pull_request

    @property
    def config(self) -> Config:
        return self._config

    def variables(self) -> VariableMap:
        """Return the resolved variables for the template."""
        _, variables = generate_entry(self._pull_request, self._config)
        return variables

    def entry(self) -> str:
        """Return the rendered entry text."""
        entry, _ = generate_entry(self._pull_request, self._config)
        return entry

    def write(self, path: Optional[Path | str] = None) -> Path:
        """Prepend the entry to the changelog and return the file path."""
        target = changelog_path(self._config, Path(path) if path is not None else None)
        prepend_entry(target, self.entry())
        return target

    def run(
        self,
        *,
        ignore_label: Optional[str] = None,
        dry_run: bool = False,
    ) -> PipelineResult:
        """Run the full pipeline, honoring the ignore label."""
        return run_pipeline(
            self._pull_request,
            self._config,
            ignore_label=ignore_label,
            dry_run=dry_run,
        )

"""The entry-resolution pipeline tying all components together."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config import Config
from .labels import label_group_variables
from .pull_request import PullRequest
from .table import extract_table
from .template import render_template
from .utils import format_bold, log_debug, log_info, log_success
from .variables import VariableMap, fixed_variables, resolve_variables
from .writer import prepend_entry

__all__ = [
    "PipelineResult",
    "should_ignore",
    "resolve_entry_variables",
    "generate_entry",
    "changelog_path",
    "run_pipeline",
]


@dataclass
class PipelineResult:
    """Outcome of a single run."""

    skipped: bool
    entry: Optional[str] = None
    variables: Optional[VariableMap] = None
    path: Optional[Path] = None
    written: bool = False


def should_ignore(pull_request: PullRequest, ignore_label: Optional[str]) -> bool:
    """Return True when the pull request carries the ignore label."""
    if not ignore_label:
        return False
    return pull_request.has_label(ignore_label)


def resolve_entry_variables(pull_request: PullRequest, config: Config) -> VariableMap:
    table_vars = extract_table(pull_request.body)
    log_debug(f"table variables: {sorted(table_vars)}")
    label_vars = label_group_variables(config.label_groups, pull_request.labels)
    log_debug(f"label variables: {sorted(label_vars)}")
    return resolve_variables(table_vars, label_vars, fixed_variables(pull_request))


def generate_entry(pull_request: PullRequest, config: Config) -> tuple[str, VariableMap]:
    """Render the changelog entry for a pull request."""
    variables = resolve_entry_variables(pull_request, config)
    return render_template(config.template, variables), variables


def changelog_path(config: Config, override: Optional[Path] = None) -> Path:
    if override is not None:
        return override
    return Path(config.changelog_file_path)


def run_pipeline(
    pull_request: PullRequest,
    config: Config,
    *,
    ignore_label: Optional[str] = None,
    changelog_override: Optional[Path] = None,
    dry_run: bool = False,
) -> PipelineResult:
    """Generate the entry for a pull request and prepend it to the changelog."""
    if should_ignore(pull_request, ignore_label):
        log_info(
            f"pull request #{pull_request.number} has label "
            f"{format_bold(str(ignore_label))}, skipping changelog update."
        )
        return PipelineResult(skipped=True)

    entry, variables = generate_entry(pull_request, config)
    for name, value in variables.items():
        log_debug(f"{name} = {value!r}")
    log_info(f"rendered entry for #{pull_request.number}:\n{entry}")

    path = changelog_path(config, changelog_override)
    if dry_run:
        log_info(f"dry run, not writing {path}")
        return PipelineResult(skipped=False, entry=entry, variables=variables, path=path)

    prepend_entry(path, entry)
    log_success(f"added entry for #{pull_request.number} to {path}")
    return PipelineResult(
        skipped=False, entry=entry, variables=variables, path=path, written=True
    )

"""Commands that generate the changelog entry."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from ..pipeline import generate_entry, run_pipeline
from ..utils import emit_output
from ._core import CLIContext

__all__ = ["IGNORE_LABEL_ENVVAR", "run_cmd", "render_cmd"]

IGNORE_LABEL_ENVVAR = "INPUT_IGNORE-LABEL"


@click.command("run")
@click.option(
    "--ignore-label",
    envvar=IGNORE_LABEL_ENVVAR,
    help="Skip pull requests carrying this label.",
)
@click.option(
    "--changelog",
    "changelog_path",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Changelog file to update instead of the configured one.",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Print the rendered entry instead of writing the changelog.",
)
@click.pass_obj
def run_cmd(
    ctx: CLIContext,
    ignore_label: Optional[str],
    changelog_path: Optional[Path],
    dry_run: bool,
) -> None:
    """Prepend the entry for the pull request to the changelog."""

    pull_request = ctx.ensure_pull_request()
    config = ctx.ensure_config()
    result = run_pipeline(
        pull_request,
        config,
        ignore_label=ignore_label,
        changelog_override=changelog_path,
        dry_run=dry_run,
    )
    if dry_run and result.entry is not None:
        emit_output(result.entry)


@click.command("render")
@click.pass_obj
def render_cmd(ctx: CLIContext) -> None:
    """Print the rendered entry without touching the changelog."""

    entry, _ = generate_entry(ctx.ensure_pull_request(), ctx.ensure_config())
    emit_output(entry)

"""Commands for inspecting configuration and resolved variables."""

from __future__ import annotations

import json

import click
import yaml
from rich.table import Table

from ..config import dump_config
from ..pipeline import resolve_entry_variables
from ..template import find_placeholders, placeholder
from ..utils import console, emit_output, log_warning
from ._core import CLIContext

__all__ = ["vars_cmd", "config_cmd"]


@click.command("vars")
@click.option("--json", "as_json", is_flag=True, help="Emit the variables as JSON.")
@click.pass_obj
def vars_cmd(ctx: CLIContext, as_json: bool) -> None:
    """Show the variables available to the template."""

    config = ctx.ensure_config()
    variables = resolve_entry_variables(ctx.ensure_pull_request(), config)
    if as_json:
        emit_output(json.dumps(variables.to_dict(), indent=2))
        return

    table = Table(box=None, padding=(0, 2, 0, 0), show_header=True)
    table.add_column("PLACEHOLDER", style="cyan")
    table.add_column("VALUE")
    for name, value in variables.items():
        table.add_row(placeholder(name), value)
    console.print(table)

    known = {placeholder(name) for name in variables}
    for token in find_placeholders(config.template):
        if token not in known:
            log_warning(f"template placeholder {token} has no value and stays verbatim.")


@click.command("config")
@click.pass_obj
def config_cmd(ctx: CLIContext) -> None:
    """Print the effective configuration as YAML."""

    config = ctx.ensure_config()
    emit_output(yaml.safe_dump(dump_config(config), sort_keys=False), newline=False)

"""CLI package for pr-changelog.

- _core.py: CLIContext, command group, main entry point
- _run.py: run and render commands
- _inspect.py: vars and config commands
"""

from __future__ import annotations

from ._core import (
    CLIContext,
    DEFAULT_COMMAND,
    VERSION_FLAGS,
    _create_cli_group,
    create_cli_context,
    main,
)
from ._inspect import config_cmd, vars_cmd
from ._run import IGNORE_LABEL_ENVVAR, render_cmd, run_cmd

cli = _create_cli_group()

cli.add_command(run_cmd)
cli.add_command(render_cmd)
cli.add_command(vars_cmd)
cli.add_command(config_cmd)


__all__ = [
    "cli",
    "main",
    "CLIContext",
    "DEFAULT_COMMAND",
    "IGNORE_LABEL_ENVVAR",
    "VERSION_FLAGS",
    "create_cli_context",
    "run_cmd",
    "render_cmd",
    "vars_cmd",
    "config_cmd",
]

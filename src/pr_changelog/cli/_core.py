"""Core CLI infrastructure: context, command group, and entry point."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version as metadata_version
from pathlib import Path
from typing import Optional

import click

from .. import __version__ as package_version
from ..config import DEFAULT_CONFIG_PATH, Config, load_config_or_default
from ..errors import InputAccessError
from ..pull_request import PullRequest, load_pull_request
from ..utils import abort_on_user_interrupt, configure_logging, log_debug

__all__ = [
    "CLIContext",
    "create_cli_context",
    "VERSION_FLAGS",
    "DEFAULT_COMMAND",
    "_create_cli_group",
    "main",
]

VERSION_FLAGS = {"--version", "-V"}
DEFAULT_COMMAND = "run"

CONFIG_FILE_ENVVAR = "INPUT_CONFIG-FILE"
EVENT_PATH_ENVVAR = "GITHUB_EVENT_PATH"


def _resolve_cli_version() -> str:
    try:
        return metadata_version("pr-changelog")
    except PackageNotFoundError:
        return package_version


@dataclass
class CLIContext:
    """Shared command context."""

    config_path: Optional[Path]
    event_path: Optional[Path]
    _config: Optional[Config] = None
    _pull_request: Optional[PullRequest] = None

    def ensure_config(self) -> Config:
        if self._config is None:
            self._config = load_config_or_default(self.config_path)
        return self._config

    def ensure_pull_request(self) -> PullRequest:
        if self._pull_request is None:
            if self.event_path is None:
                raise InputAccessError(
                    f"No event payload given; pass --event-path or set {EVENT_PATH_ENVVAR}."
                )
            self._pull_request = load_pull_request(self.event_path)
            log_debug(
                f"loaded pull request #{self._pull_request.number} from {self.event_path}"
            )
        return self._pull_request


def create_cli_context(
    *,
    config: Optional[Path] = None,
    event_path: Optional[Path] = None,
    debug: bool = False,
) -> CLIContext:
    """Return a CLIContext using the same resolution logic as the CLI entry point."""

    configure_logging(debug)
    config_path = config if config is not None else DEFAULT_CONFIG_PATH
    log_debug(f"using config path: {config_path}")
    log_debug(f"using event payload: {event_path}")
    return CLIContext(config_path=config_path, event_path=event_path)


def _create_cli_group() -> click.Group:
    """Create the main CLI group. Called after all commands are defined."""

    @click.group(context_settings={"help_option_names": ["-h", "--help"]})
    @click.option(
        "--config-file",
        "config",
        type=click.Path(path_type=Path, dir_okay=False),
        envvar=CONFIG_FILE_ENVVAR,
        help=f"YAML configuration file (default: {DEFAULT_CONFIG_PATH}).",
    )
    @click.option(
        "--event-path",
        type=click.Path(path_type=Path, dir_okay=False),
        envvar=EVENT_PATH_ENVVAR,
        help="JSON webhook payload of the pull_request event.",
    )
    @click.option(
        "--debug",
        "-d",
        is_flag=True,
        help="Enable debug logging.",
    )
    @click.pass_context
    def _cli(
        ctx: click.Context,
        config: Optional[Path],
        event_path: Optional[Path],
        debug: bool,
    ) -> None:
        """Prepend a changelog entry generated from a merged pull request."""

        ctx.obj = create_cli_context(config=config, event_path=event_path, debug=debug)

    return click.version_option(version=_resolve_cli_version())(_cli)


def _command_index(group: click.Group, args: list[str]) -> Optional[int]:
    """Return the position of the first non-option argument, skipping option values."""
    value_options = {
        opt
        for param in group.params
        if isinstance(param, click.Option) and not param.is_flag
        for opt in param.opts
    }
    expect_value = False
    for index, arg in enumerate(args):
        if expect_value:
            expect_value = False
        elif arg in value_options:
            expect_value = True
        elif arg == "--":
            return index + 1 if index + 1 < len(args) else None
        elif not arg.startswith("-"):
            return index
    return None


def main(argv: list[str] | None = None) -> int:
    """Entry point for console_scripts."""
    # Import cli here to avoid circular import at module load time
    from . import cli

    args = list(argv) if argv is not None else list(sys.argv[1:])

    command_index = _command_index(cli, args)
    group_args = args if command_index is None else args[:command_index]

    if any(flag in group_args for flag in VERSION_FLAGS):
        click.echo(_resolve_cli_version())
        return 0

    # If no command is specified, default to "run"
    if command_index is None:
        args.append(DEFAULT_COMMAND)

    try:
        cli.main(args=args, prog_name="pr-changelog", standalone_mode=False)
    except click.ClickException as exc:
        exc.show(file=sys.stderr)
        exit_code = getattr(exc, "exit_code", 1)
        return exit_code if isinstance(exit_code, int) else 1
    except KeyboardInterrupt as exc:
        try:
            abort_on_user_interrupt(exc)
        except click.exceptions.Exit as exit_exc:
            exit_code = getattr(exit_exc, "exit_code", 130)
            return exit_code if isinstance(exit_code, int) else 130
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0
    return 0

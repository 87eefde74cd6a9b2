"""Shared logging and output helpers."""

from __future__ import annotations

import logging
import sys
from typing import NoReturn

import click
from rich.console import Console

_LOGGER = logging.getLogger("pr_changelog")

# Glyph prepended to every logged line, by level.
_PREFIXES = {
    logging.DEBUG: "\033[95m◆\033[0m ",
    logging.INFO: "\033[94;1mi\033[0m ",
    logging.WARNING: "○ ",
    logging.ERROR: "\033[31m✘\033[0m ",
}
_SUCCESS_PREFIX = "\033[92;1m✔\033[0m "

console = Console(stderr=True)


def configure_logging(debug: bool = False) -> logging.Logger:
    """Route the package logger to stderr, replacing earlier handlers."""
    level = logging.DEBUG if debug else logging.INFO
    _LOGGER.setLevel(level)
    while _LOGGER.handlers:
        _LOGGER.handlers.pop().close()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.setLevel(level)
    _LOGGER.addHandler(handler)
    _LOGGER.propagate = False
    return _LOGGER


def _log(level: int, message: str, prefix: str | None = None) -> None:
    prefix = _PREFIXES[level] if prefix is None else prefix
    for line in message.splitlines() or [""]:
        _LOGGER.log(level, f"{prefix}{line}" if line else prefix.rstrip())


def log_debug(message: str) -> None:
    _log(logging.DEBUG, message)


def log_info(message: str) -> None:
    _log(logging.INFO, message)


def log_success(message: str) -> None:
    """Log at info level with a checkmark instead of the info glyph."""
    _log(logging.INFO, message, _SUCCESS_PREFIX)


def log_warning(message: str) -> None:
    _log(logging.WARNING, message)


def log_error(message: str) -> None:
    _log(logging.ERROR, message)


def abort_on_user_interrupt(exc: BaseException | None = None) -> NoReturn:
    log_error("operation cancelled by user (Ctrl+C).")
    raise click.exceptions.Exit(130) from exc


def format_bold(text: str) -> str:
    return f"\033[1m{text}\033[0m"


def emit_output(content: str, *, newline: bool = True) -> None:
    """Emit raw command output to stdout for machine consumption."""
    click.echo(content, nl=newline, err=False)

"""Error types raised while generating a changelog entry."""

from __future__ import annotations

from click import ClickException

__all__ = [
    "PrChangelogError",
    "ConfigurationError",
    "ConfigLoadError",
    "InputAccessError",
    "FileIOError",
]


class PrChangelogError(ClickException):
    """Base class for failures reported by the command-line entry point."""


class ConfigurationError(PrChangelogError):
    """The configuration is well-formed YAML but semantically invalid."""


class ConfigLoadError(PrChangelogError):
    """The configuration file is missing or cannot be parsed.

    Callers usually recover from this by falling back to the built-in
    defaults, see :func:`pr_changelog.config.load_config_or_default`.
    """


class InputAccessError(PrChangelogError):
    """The pull request payload is missing or lacks required fields."""


class FileIOError(PrChangelogError):
    """The changelog file cannot be read or written."""

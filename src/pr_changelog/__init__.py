"""Core package exports for pr-changelog."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as metadata_version
from typing import TYPE_CHECKING, Any

__all__ = ["__version__", "PullRequestChangelog"]

try:
    __version__ = metadata_version("pr-changelog")
except PackageNotFoundError:  # pragma: no cover - fallback for editable installs
    __version__ = "0.0.0"

if TYPE_CHECKING:  # pragma: no cover
    from .api import PullRequestChangelog


def __getattr__(name: str) -> Any:  # pragma: no cover - simple delegation
    if name == "PullRequestChangelog":
        from .api import PullRequestChangelog as _PullRequestChangelog

        return _PullRequestChangelog
    raise AttributeError(f"module 'pr_changelog' has no attribute {name!r}")

"""Prepending rendered entries to the changelog file."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path

from .errors import FileIOError
from .utils import log_debug

__all__ = ["read_changelog", "compose_changelog", "prepend_entry"]


def read_changelog(path: Path) -> str:
    """Return the current changelog content, or empty text if it does not exist."""
    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            return handle.read()
    except FileNotFoundError:
        return ""
    except OSError as exc:
        raise FileIOError(f"Failed to read changelog {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise FileIOError(f"Changelog {path} is not valid UTF-8: {exc}") from exc


def compose_changelog(entry: str, existing: str) -> str:
    return f"{entry}\n{existing}"


def _atomic_write(path: Path, content: str) -> None:
    directory = path.parent
    directory.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=f".{path.name}.", suffix=".tmp")
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        if path.exists():
            shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def prepend_entry(path: Path, entry: str) -> str:
    """Write ``entry`` followed by a newline above the existing changelog content.

    The new content is composed in memory and moved into place with an
    atomic rename, so the file is either fully updated or left unchanged.
    A symlinked changelog is updated through its target. Returns the new
    file content.
    """
    target = path.resolve()
    existing = read_changelog(target)
    content = compose_changelog(entry, existing)
    try:
        _atomic_write(target, content)
    except OSError as exc:
        raise FileIOError(f"Failed to write changelog {path}: {exc}") from exc
    log_debug(f"wrote {len(content)} characters to {path}")
    return content

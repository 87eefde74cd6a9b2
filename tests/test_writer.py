"""Tests for the changelog writer."""

from __future__ import annotations

from pathlib import Path

import pytest

from pr_changelog.errors import FileIOError
from pr_changelog.writer import prepend_entry, read_changelog


def test_prepend_entry_creates_missing_file(tmp_path: Path) -> None:
    path = tmp_path / "CHANGELOG.md"

    content = prepend_entry(path, "- First entry")

    assert content == "- First entry\n"
    assert path.read_text(encoding="utf-8") == "- First entry\n"


def test_prepend_entry_keeps_existing_content(tmp_path: Path) -> None:
    path = tmp_path / "CHANGELOG.md"
    path.write_bytes(b"- Older entry\r\n- Oldest entry\r\n")

    prepend_entry(path, "- New entry")

    assert path.read_bytes() == b"- New entry\n- Older entry\r\n- Oldest entry\r\n"


def test_prepend_entry_creates_parent_directories(tmp_path: Path) -> None:
    path = tmp_path / "docs" / "CHANGELOG.md"

    prepend_entry(path, "entry")

    assert path.read_text(encoding="utf-8") == "entry\n"


def test_prepend_entry_leaves_no_temporary_files(tmp_path: Path) -> None:
    path = tmp_path / "CHANGELOG.md"
    path.write_text("old\n", encoding="utf-8")

    prepend_entry(path, "new")

    assert sorted(p.name for p in tmp_path.iterdir()) == ["CHANGELOG.md"]


def test_prepend_entry_keeps_file_when_write_fails(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "CHANGELOG.md"
    path.write_text("old\n", encoding="utf-8")

    def failing_replace(src: object, dst: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr("pr_changelog.writer.os.replace", failing_replace)

    with pytest.raises(FileIOError, match="disk full"):
        prepend_entry(path, "new")

    assert path.read_text(encoding="utf-8") == "old\n"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["CHANGELOG.md"]


def test_read_changelog_rejects_directories(tmp_path: Path) -> None:
    with pytest.raises(FileIOError):
        read_changelog(tmp_path)


def test_read_changelog_returns_empty_text_for_missing_file(tmp_path: Path) -> None:
    assert read_changelog(tmp_path / "missing.md") == ""


def test_prepend_entry_reports_undecodable_changelog(tmp_path: Path) -> None:
    path = tmp_path / "CHANGELOG.md"
    path.write_bytes(b"old \xff entry\n")

    with pytest.raises(FileIOError, match="not valid UTF-8"):
        prepend_entry(path, "new")

    assert path.read_bytes() == b"old \xff entry\n"


def test_prepend_entry_updates_symlink_target(tmp_path: Path) -> None:
    target = tmp_path / "docs" / "CHANGES.md"
    target.parent.mkdir()
    target.write_text("old\n", encoding="utf-8")
    link = tmp_path / "CHANGELOG.md"
    link.symlink_to(target)

    prepend_entry(link, "new")

    assert link.is_symlink()
    assert target.read_text(encoding="utf-8") == "new\nold\n"

"""Unit tests for shared utilities."""

from __future__ import annotations

import pytest

from pr_changelog.utils import configure_logging, log_debug, log_info, log_warning


def test_log_helpers_prefix_every_line(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(debug=False)

    log_info("first\nsecond")
    log_warning("careful")

    err_lines = capsys.readouterr().err.splitlines()
    assert len(err_lines) == 3
    assert err_lines[0].endswith("first")
    assert err_lines[1].endswith("second")
    assert err_lines[2] == "○ careful"


def test_debug_messages_require_debug_logging(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(debug=False)
    log_debug("hidden")
    assert capsys.readouterr().err == ""

    configure_logging(debug=True)
    log_debug("shown")
    assert capsys.readouterr().err.rstrip().endswith("shown")

"""Extraction of the `Key | Value` table embedded in pull request descriptions."""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from .variables import VariableMap

__all__ = ["TableState", "extract_table", "split_row"]

_HEADER_CELLS = ("key", "value")
_DIVIDER_CELL = re.compile(r"^:?-{3,}:?$")
# A pipe that is not escaped with a backslash.
_CELL_SEPARATOR = re.compile(r"(?<!\\)\|")


class TableState(Enum):
    SEEKING_HEADER = "seeking-header"
    HEADER_CANDIDATE = "header-candidate"
    IN_TABLE = "in-table"


def split_row(line: str) -> Optional[list[str]]:
    """Split a markdown table row into its trimmed cells.

    Leading and trailing pipes are optional. Returns None unless the line
    has exactly two columns.
    """
    text = line.strip()
    if "|" not in text:
        return None
    if text.startswith("|"):
        text = text[1:]
    if text.endswith("|") and not text.endswith("\\|"):
        text = text[:-1]
    cells = [cell.strip() for cell in _CELL_SEPARATOR.split(text)]
    if len(cells) != 2:
        return None
    return cells


def _is_header(line: str) -> bool:
    cells = split_row(line)
    return cells is not None and tuple(cell.lower() for cell in cells) == _HEADER_CELLS


def _is_divider(line: str) -> bool:
    cells = split_row(line)
    return cells is not None and all(_DIVIDER_CELL.match(cell) for cell in cells)


def _unescape(value: str) -> str:
    return value.replace("\\|", "|")


def extract_table(description: Optional[str]) -> VariableMap:
    """Return the rows of the first `Key | Value` table in a description.

    The header row must be followed immediately by a divider row; otherwise
    scanning for a header continues with the next line. Rows are read until
    the first line that is not a two-column row. Escaped pipes (``\\|``) in
    values become literal pipes.
    """
    variables = VariableMap()
    if not description:
        return variables

    state = TableState.SEEKING_HEADER
    for line in description.splitlines():
        if state is TableState.SEEKING_HEADER:
            if _is_header(line):
                state = TableState.HEADER_CANDIDATE
        elif state is TableState.HEADER_CANDIDATE:
            if _is_divider(line):
                state = TableState.IN_TABLE
            elif not _is_header(line):
                state = TableState.SEEKING_HEADER
        elif state is TableState.IN_TABLE:
            cells = split_row(line)
            if cells is None:
                break
            key, value = cells
            if not key:
                break
            variables[key] = _unescape(value)
    return variables

"""Variable maps and the precedence rules used to merge them."""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping, MutableMapping, Optional, Union

from .pull_request import PullRequest

__all__ = [
    "VariableMap",
    "normalize_key",
    "fixed_variables",
    "resolve_variables",
]

VariableSource = Union["VariableMap", Mapping[str, object], Iterable[tuple[str, object]]]


def normalize_key(key: str) -> str:
    """Return the canonical form of a variable name."""
    return str(key).strip().upper()


class VariableMap(MutableMapping[str, str]):
    """Mapping of variable names to text with case-insensitive keys.

    Keys are stored trimmed and upper-cased, so ``vars["title"]`` and
    ``vars[" TITLE "]`` address the same entry. Values are always text.
    Iteration follows insertion order; overwriting a key keeps its position.
    """

    def __init__(self, initial: Optional[VariableSource] = None) -> None:
        self._data: dict[str, str] = {}
        if initial is not None:
            self.update(initial)

    def __getitem__(self, key: str) -> str:
        return self._data[normalize_key(key)]

    def __setitem__(self, key: str, value: object) -> None:  # type: ignore[override]
        normalized = normalize_key(key)
        if not normalized:
            raise KeyError("variable names must not be empty")
        self._data[normalized] = "" if value is None else str(value)

    def __delitem__(self, key: str) -> None:
        del self._data[normalize_key(key)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and normalize_key(key) in self._data

    def __eq__(self, other: object) -> bool:
        if isinstance(other, VariableMap):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == {normalize_key(k): str(v) for k, v in other.items()}
        return NotImplemented

    def __repr__(self) -> str:
        return f"VariableMap({self._data!r})"

    def to_dict(self) -> dict[str, str]:
        return dict(self._data)


def fixed_variables(pull_request: PullRequest) -> VariableMap:
    """Return the variables derived from protected pull request fields."""
    variables = VariableMap()
    variables["title"] = pull_request.title
    variables["number"] = pull_request.number
    variables["url"] = pull_request.url
    variables["author"] = pull_request.author.name
    variables["author_url"] = pull_request.author.url
    if pull_request.merger is not None:
        variables["merger"] = pull_request.merger.name
        variables["merger_url"] = pull_request.merger.url
    return variables


def resolve_variables(
    table_vars: VariableSource,
    label_vars: VariableSource,
    fixed_vars: VariableSource,
) -> VariableMap:
    """Merge variable sources, later sources overriding earlier ones.

    Precedence from lowest to highest: table-extracted variables, label
    group variables, fixed pull request fields.
    """
    resolved = VariableMap()
    for source in (table_vars, label_vars, fixed_vars):
        resolved.update(source)
    return resolved

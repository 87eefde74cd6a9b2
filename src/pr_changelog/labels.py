"""Formatting of pull request labels according to label group rules."""

from __future__ import annotations

from typing import Iterable

from .config import LabelGroupConfig, LabelGroupType
from .errors import ConfigurationError
from .variables import VariableMap

__all__ = [
    "match_labels",
    "format_label_group",
    "label_variable_name",
    "label_group_variables",
]

LABEL_VARIABLE_PREFIX = "label_"


def match_labels(group: LabelGroupConfig, labels: Iterable[str]) -> list[str]:
    """Return the labels selected by a group.

    An explicit label list keeps its declared order; a prefix keeps the
    order in which the pull request lists its labels.
    """
    present = list(dict.fromkeys(labels))
    if isinstance(group.labels, str):
        return [label for label in present if label.startswith(group.labels)]
    available = set(present)
    return [label for label in group.labels if label in available]


def _wrap(group: LabelGroupConfig, text: str) -> str:
    return f"{group.prefix}{text}{group.suffix}"


def format_label_group(group: LabelGroupConfig, labels: Iterable[str]) -> str:
    """Render the labels matched by a group into a single string."""
    matched = match_labels(group, labels)
    if not matched:
        if group.default is None:
            return ""
        return _wrap(group, group.default)

    replaced = []
    for label in matched:
        for replacer in group.replacers:
            label = replacer.apply(label)
        replaced.append(label)

    separator = group.effective_separator
    if group.type is LabelGroupType.COMBINED:
        return _wrap(group, separator.join(replaced))
    if group.type is LabelGroupType.SEPARATE:
        return separator.join(_wrap(group, label) for label in replaced)
    raise ConfigurationError(f"Label group '{group.id}' has unknown type {group.type!r}.")


def label_variable_name(group: LabelGroupConfig) -> str:
    return f"{LABEL_VARIABLE_PREFIX}{group.id.lower()}"


def label_group_variables(groups: Iterable[LabelGroupConfig], labels: Iterable[str]) -> VariableMap:
    """Format every group and publish it as a `label_<id>` variable."""
    label_list = list(labels)
    variables = VariableMap()
    for group in groups:
        variables[label_variable_name(group)] = format_label_group(group, label_list)
    return variables

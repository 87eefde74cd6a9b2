"""Configuration helpers for pr-changelog."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, MutableMapping, Optional, Union

import yaml

from .errors import ConfigLoadError, ConfigurationError
from .utils import log_debug, log_warning

DEFAULT_CONFIG_PATH = Path(".github/pr-changelog.yml")
DEFAULT_CHANGELOG_FILE_PATH = "CHANGELOG.md"
DEFAULT_TEMPLATE = "$CL_TITLE"

COMBINED_DEFAULT_SEPARATOR = ","
SEPARATE_DEFAULT_SEPARATOR = " "


class LabelGroupType(str, Enum):
    """How the matched labels of a group are joined into one value."""

    COMBINED = "combined"
    SEPARATE = "separate"

    @classmethod
    def parse(cls, value: object) -> "LabelGroupType":
        text = str(value).strip().lower() if value is not None else ""
        for member in cls:
            if member.value == text:
                return member
        allowed = ", ".join(member.value for member in cls)
        raise ConfigurationError(f"Unknown label group type {value!r}. Expected one of: {allowed}")


@dataclass(frozen=True)
class Replacer:
    """A literal substring substitution applied to matched labels."""

    source: str
    target: str = ""

    def apply(self, label: str) -> str:
        if not self.source:
            return label
        return label.replace(self.source, self.target)


# An explicit tuple of label names, or a prefix matched against label names.
LabelSelector = Union[tuple[str, ...], str]


@dataclass
class LabelGroupConfig:
    """A rule that renders a subset of the pull request labels into one variable."""

    id: str
    labels: LabelSelector
    type: LabelGroupType = LabelGroupType.COMBINED
    separator: Optional[str] = None
    prefix: str = ""
    suffix: str = ""
    default: Optional[str] = None
    replacers: tuple[Replacer, ...] = ()

    @property
    def effective_separator(self) -> str:
        if self.separator is not None:
            return self.separator
        if self.type is LabelGroupType.SEPARATE:
            return SEPARATE_DEFAULT_SEPARATOR
        return COMBINED_DEFAULT_SEPARATOR


@dataclass
class Config:
    """Structured representation of the pr-changelog config."""

    changelog_file_path: str = DEFAULT_CHANGELOG_FILE_PATH
    template: str = DEFAULT_TEMPLATE
    label_groups: list[LabelGroupConfig] = field(default_factory=list)


def _optional_text(raw: Mapping[str, Any], key: str, *, context: str) -> Optional[str]:
    value = raw.get(key)
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        raise ConfigurationError(f"{context} option '{key}' must be a string.")
    return str(value)


def _parse_replacers(value: object, *, context: str) -> tuple[Replacer, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ConfigurationError(f"{context} option 'replacers' must be a list.")
    replacers: list[Replacer] = []
    for index, item in enumerate(value):
        if not isinstance(item, Mapping) or "from" not in item:
            raise ConfigurationError(
                f"{context} replacer #{index + 1} must be a mapping with a 'from' key."
            )
        source = "" if item["from"] is None else str(item["from"])
        target = "" if item.get("to") is None else str(item.get("to"))
        replacers.append(Replacer(source=source, target=target))
    return tuple(replacers)


def _parse_label_selector(value: object, *, context: str) -> LabelSelector:
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        names: list[str] = []
        for item in value:
            name = "" if item is None else str(item)
            if name and name not in names:
                names.append(name)
        return tuple(names)
    raise ConfigurationError(f"{context} option 'labels' must be a string prefix or a list.")


def parse_label_group(raw: object, index: int) -> LabelGroupConfig:
    """Build a LabelGroupConfig from one entry of the `label-groups` list."""
    context = f"Label group #{index + 1}"
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"{context} must be a mapping.")
    group_id = str(raw.get("id") or "").strip()
    if not group_id:
        raise ConfigurationError(f"{context} missing required 'id'.")
    context = f"Label group '{group_id}'"
    if "labels" not in raw:
        raise ConfigurationError(f"{context} missing required 'labels'.")

    group_type = LabelGroupType.parse(raw.get("type", LabelGroupType.COMBINED.value))
    return LabelGroupConfig(
        id=group_id,
        labels=_parse_label_selector(raw.get("labels"), context=context),
        type=group_type,
        separator=_optional_text(raw, "separator", context=context),
        prefix=_optional_text(raw, "prefix", context=context) or "",
        suffix=_optional_text(raw, "suffix", context=context) or "",
        default=_optional_text(raw, "default", context=context),
        replacers=_parse_replacers(raw.get("replacers"), context=context),
    )


def parse_config(raw: Mapping[str, Any]) -> Config:
    """Validate a decoded YAML document and return the Config it describes."""
    changelog_path = _optional_text(raw, "changelog-file-path", context="Config")
    template = _optional_text(raw, "template", context="Config")

    groups_raw = raw.get("label-groups")
    if groups_raw is None:
        groups_raw = []
    if not isinstance(groups_raw, list):
        raise ConfigurationError("Config option 'label-groups' must be a list.")
    label_groups: list[LabelGroupConfig] = []
    seen_ids: set[str] = set()
    for index, group_raw in enumerate(groups_raw):
        group = parse_label_group(group_raw, index)
        if group.id in seen_ids:
            raise ConfigurationError(f"Duplicate label group id '{group.id}'.")
        seen_ids.add(group.id)
        label_groups.append(group)

    return Config(
        changelog_file_path=(changelog_path or "").strip() or DEFAULT_CHANGELOG_FILE_PATH,
        template=template if template is not None else DEFAULT_TEMPLATE,
        label_groups=label_groups,
    )


def load_config(path: Path) -> Config:
    """Load the configuration from disk.

    Raises:
        ConfigLoadError: The file is missing, unreadable or not a YAML mapping.
        ConfigurationError: The document is valid YAML but describes an
            invalid configuration.
    """
    try:
        with path.open("r", encoding="utf-8") as handle:
            raw = yaml.safe_load(handle)
    except FileNotFoundError as exc:
        raise ConfigLoadError(f"No config found at {path}.") from exc
    except OSError as exc:
        raise ConfigLoadError(f"Failed to read config {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(f"Failed to parse config {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigLoadError(f"Config {path} is not valid UTF-8: {exc}") from exc
    if raw is None:
        raw = {}
    if not isinstance(raw, MutableMapping):
        raise ConfigLoadError(f"Config root in {path} must be a mapping.")
    return parse_config(raw)


def load_config_or_default(path: Optional[Path]) -> Config:
    """Load the configuration, falling back to the built-in defaults."""
    if path is None:
        log_debug("no config file given, using defaults.")
        return Config()
    try:
        config = load_config(path)
    except ConfigLoadError as exc:
        log_warning(f"{exc.message} Using default configuration.")
        return Config()
    log_debug(f"loaded config from {path}")
    return config


def dump_label_group(group: LabelGroupConfig) -> dict[str, Any]:
    """Convert a label group into the YAML shape it was loaded from."""
    data: dict[str, Any] = {
        "id": group.id,
        "labels": group.labels if isinstance(group.labels, str) else list(group.labels),
        "type": group.type.value,
    }
    if group.separator is not None:
        data["separator"] = group.separator
    if group.prefix:
        data["prefix"] = group.prefix
    if group.suffix:
        data["suffix"] = group.suffix
    if group.default is not None:
        data["default"] = group.default
    if group.replacers:
        data["replacers"] = [
            {"from": replacer.source, "to": replacer.target} for replacer in group.replacers
        ]
    return data


def dump_config(config: Config) -> dict[str, Any]:
    """Convert a Config into a plain dictionary suitable for YAML output."""
    return {
        "changelog-file-path": config.changelog_file_path,
        "template": config.template,
        "label-groups": [dump_label_group(group) for group in config.label_groups],
    }


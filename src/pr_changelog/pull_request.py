"""Pull request data model and GitHub event payload parsing."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

from .errors import InputAccessError

__all__ = [
    "Person",
    "PullRequest",
    "load_event_payload",
    "pull_request_from_payload",
    "load_pull_request",
]


@dataclass(frozen=True)
class Person:
    """A GitHub account referenced by a pull request."""

    name: str
    url: str = ""


@dataclass(frozen=True)
class PullRequest:
    """The merged pull request a changelog entry is generated for."""

    title: str
    number: int
    url: str
    author: Person
    body: str = ""
    labels: tuple[str, ...] = ()
    merger: Optional[Person] = None

    def has_label(self, name: str) -> bool:
        return name in self.labels


def load_event_payload(path: Path) -> dict[str, Any]:
    """Read the webhook event payload the CI host stored on disk."""
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except FileNotFoundError as exc:
        raise InputAccessError(f"Event payload not found at {path}.") from exc
    except OSError as exc:
        raise InputAccessError(f"Failed to read event payload {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise InputAccessError(f"Event payload {path} is not valid JSON: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise InputAccessError(f"Event payload {path} is not valid UTF-8: {exc}") from exc
    if not isinstance(payload, dict):
        raise InputAccessError(f"Event payload {path} must be a JSON object.")
    return payload


def _person(raw: object) -> Optional[Person]:
    if not isinstance(raw, Mapping):
        return None
    login = str(raw.get("login") or "").strip()
    if not login:
        return None
    return Person(name=login, url=str(raw.get("html_url") or ""))


def _labels(raw: object) -> tuple[str, ...]:
    if not isinstance(raw, list):
        return ()
    names: list[str] = []
    for item in raw:
        name = item.get("name") if isinstance(item, Mapping) else item
        if name is None:
            continue
        text = str(name)
        if text and text not in names:
            names.append(text)
    return tuple(names)


def pull_request_from_payload(payload: Mapping[str, Any]) -> PullRequest:
    """Build a PullRequest from a GitHub `pull_request` event payload."""
    raw = payload.get("pull_request")
    if not isinstance(raw, Mapping):
        raise InputAccessError(
            "Event payload has no 'pull_request' object; "
            "run this on pull_request events only."
        )

    title = raw.get("title")
    if title is None:
        raise InputAccessError("Pull request payload missing required 'title'.")

    number_raw = raw.get("number", payload.get("number"))
    try:
        number = int(number_raw)
    except (TypeError, ValueError) as exc:
        raise InputAccessError(f"Pull request number {number_raw!r} is not an integer.") from exc
    if number <= 0:
        raise InputAccessError(f"Pull request number must be positive, got {number}.")

    author = _person(raw.get("user"))
    if author is None:
        raise InputAccessError("Pull request payload missing required 'user'.")

    return PullRequest(
        title=str(title),
        number=number,
        url=str(raw.get("html_url") or ""),
        author=author,
        body=str(raw.get("body") or ""),
        labels=_labels(raw.get("labels")),
        merger=_person(raw.get("merged_by")),
    )


def load_pull_request(path: Path) -> PullRequest:
    """Read an event payload from disk and return its pull request."""
    return pull_request_from_payload(load_event_payload(path))

"""Placeholder substitution for changelog entry templates."""

from __future__ import annotations

import re
from typing import Mapping

from .variables import VariableMap, normalize_key

__all__ = ["PLACEHOLDER_PREFIX", "placeholder", "find_placeholders", "render_template"]

PLACEHOLDER_PREFIX = "$CL_"
_PLACEHOLDER_PATTERN = re.compile(re.escape(PLACEHOLDER_PREFIX) + r"[A-Z0-9_]+")


def placeholder(name: str) -> str:
    """Return the template token for a variable name."""
    return f"{PLACEHOLDER_PREFIX}{normalize_key(name)}"


def find_placeholders(template: str) -> list[str]:
    """Return the distinct placeholder tokens in a template, in order of appearance."""
    return list(dict.fromkeys(_PLACEHOLDER_PATTERN.findall(template)))


def render_template(template: str, variables: Mapping[str, str]) -> str:
    """Substitute every `$CL_<NAME>` token that has a value in ``variables``.

    Substitution is a single pass, so values are never scanned for further
    placeholders. When tokens overlap (``$CL_LABEL`` and ``$CL_LABEL_TYPE``)
    the longest one wins. Tokens without a value are left untouched.
    """
    resolved = variables if isinstance(variables, VariableMap) else VariableMap(variables)
    if not resolved:
        return template
    replacements = {placeholder(name): value for name, value in resolved.items()}
    pattern = re.compile(
        "|".join(re.escape(token) for token in sorted(replacements, key=len, reverse=True))
    )
    return pattern.sub(lambda match: replacements[match.group(0)], template)

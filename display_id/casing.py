"""Rename rules applied to variant tags.

Tags start out as PascalCase class names. The rule names and their results
match serde's ``rename_all`` so ids stay stable across implementations.
"""

from __future__ import annotations

from typing import Callable, Literal

RenameRule = Literal[
    "lowercase",
    "UPPERCASE",
    "PascalCase",
    "camelCase",
    "snake_case",
    "SCREAMING_SNAKE_CASE",
    "kebab-case",
    "SCREAMING-KEBAB-CASE",
]


def _snake(name: str) -> str:
    parts: list[str] = []
    for i, ch in enumerate(name):
        if i > 0 and ch.isupper():
            parts.append("_")
        parts.append(ch.lower())
    return "".join(parts)


def _camel(name: str) -> str:
    return name[:1].lower() + name[1:]


_RULES: dict[str, Callable[[str], str]] = {
    "lowercase": str.lower,
    "UPPERCASE": str.upper,
    "PascalCase": lambda name: name,
    "camelCase": _camel,
    "snake_case": _snake,
    "SCREAMING_SNAKE_CASE": lambda name: _snake(name).upper(),
    "kebab-case": lambda name: _snake(name).replace("_", "-"),
    "SCREAMING-KEBAB-CASE": lambda name: _snake(name).upper().replace("_", "-"),
}

RENAME_RULES = frozenset(_RULES)


def apply_rename_rule(name: str, rule: str | None) -> str:
    """Apply a rename rule to a PascalCase variant name. ``None`` keeps it."""

    if rule is None:
        return name
    try:
        convert = _RULES[rule]
    except KeyError:
        raise ValueError(
            f"Unknown rename rule {rule!r}. Expected one of: {', '.join(sorted(RENAME_RULES))}"
        ) from None
    return convert(name)

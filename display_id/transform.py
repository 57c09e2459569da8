"""Deterministic display id transform.

A value's compact JSON rendering is cleaned into a readable id:

    ProductCode("example")                 -> example
    SimpleEnum.VALUE_ONE                   -> valueone
    Simple("with spaces")                  -> Simple_with-spaces
    VariantB(id=42, name="test")           -> VariantB_{id_42,name_test}
    VariantC(["one", "two"])               -> VariantC_[one,two]

The result depends on the rendering only. Equal values give equal ids.
"""

from __future__ import annotations

from typing import Any

from display_id.serialization import to_compact

# Applied in order.
_SUBSTITUTIONS: tuple[tuple[str, str], ...] = (
    ("\\", "~"),
    ('"', ""),
    (":", "_"),
    (" ", "-"),
)


def _strip_pair(text: str, opening: str, closing: str) -> str:
    if text.startswith(opening) and text.endswith(closing):
        return text[1:-1]
    return text


def clean(rendered: str) -> str:
    """Turn a compact rendering into a display id. Never raises."""

    # Scalar strings lose their quotes, mappings lose their braces.
    # Sequences keep their brackets.
    text = _strip_pair(rendered, '"', '"')
    text = _strip_pair(text, "{", "}")
    for old, new in _SUBSTITUTIONS:
        text = text.replace(old, new)
    return text


def render(value: Any) -> str:
    """
    Derive the display id for a value.

    Raises:
        SerializationFailed: If the value cannot be serialized.
    """
    return clean(to_compact(value))

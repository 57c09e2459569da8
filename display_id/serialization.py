"""
Canonical form producer and compact renderer.

Values are serialized through a pydantic ``TypeAdapter`` built for the
value's runtime type. Aliases are always applied so that renamed fields and
variants are visible in the output. Field order follows the declared order
of the model and is never re-sorted.

Supported values:
- pydantic models (``BaseModel``, ``RootModel``) and the tagged variants in
  ``display_id.variants``
- dataclasses, ``TypedDict`` and ``NamedTuple`` types
- ``Enum`` members (rendered as their value)
- builtin scalars, ``list``, ``tuple`` and ``dict``
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter
from pydantic.errors import PydanticErrorMixin
from pydantic_core import PydanticSerializationError

from display_id.errors import SerializationFailed

logger = logging.getLogger(__name__)

# Schema problems (undefined annotations, models that are not fully
# defined) and serializer failures can surface at build or dump time.
_SERIALIZATION_ERRORS = (PydanticSerializationError, PydanticErrorMixin)


def _type_name(tp: type) -> str:
    return f"{tp.__module__}.{tp.__qualname__}"


@lru_cache(maxsize=512)
def _adapter_for(tp: type) -> TypeAdapter:
    logger.debug("Building TypeAdapter for %s", _type_name(tp))
    return TypeAdapter(tp)


def _adapter(value: Any) -> TypeAdapter:
    tp = type(value)
    try:
        return _adapter_for(tp)
    except _SERIALIZATION_ERRORS as e:
        raise SerializationFailed(_type_name(tp), e) from e


def to_canonical(value: Any) -> Any:
    """
    Serialize a value to its canonical intermediate form.

    Values held in fields are serialized with their runtime type, so a
    variant stored under its family base keeps its own fields.

    Returns:
        JSON-compatible python data (dict, list, str, int, float, bool, None).

    Raises:
        SerializationFailed: If the value's type has no schema or a
            serializer fails.
    """
    adapter = _adapter(value)
    try:
        return adapter.dump_python(value, mode="json", by_alias=True, serialize_as_any=True)
    except _SERIALIZATION_ERRORS as e:
        raise SerializationFailed(_type_name(type(value)), e) from e


def to_compact(value: Any) -> str:
    """
    Render a value as single-line compact JSON.

    Strings are fully quoted with JSON escapes; non-ASCII text is kept as is.

    Raises:
        SerializationFailed: If the value's type has no schema or a
            serializer fails.
    """
    adapter = _adapter(value)
    try:
        return adapter.dump_json(value, by_alias=True, serialize_as_any=True).decode("utf-8")
    except _SERIALIZATION_ERRORS as e:
        raise SerializationFailed(_type_name(type(value)), e) from e

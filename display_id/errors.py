"""Errors raised while deriving display ids."""

from __future__ import annotations


class FormatError(Exception):
    """Base error for display id formatting."""


class SerializationFailed(FormatError):
    """The value could not be serialized to its canonical form."""

    def __init__(self, type_name: str, cause: BaseException):
        super().__init__(f"Failed to serialize {type_name}: {cause}")
        self.type_name = type_name
        self.cause = cause

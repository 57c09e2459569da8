"""Attach display ids to classes as their ``str()``."""

from __future__ import annotations

import logging
from typing import TypeVar

from display_id.errors import SerializationFailed
from display_id.settings import config
from display_id.transform import render

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=type)


def deterministic_display(cls: T) -> T:
    """
    Class decorator making ``str(value)`` return ``render(value)``.

    Format specs apply to the display id, so ``f"{value:>20}"`` pads it.
    A value that fails to serialize is logged with its type name and the
    ``SerializationFailed`` propagates out of ``str()``.

    Example:
        @deterministic_display
        class ProductCode(RootModel[str]):
            pass

        str(ProductCode("example"))  # "example"
    """

    def __str__(self) -> str:
        try:
            return render(self)
        except SerializationFailed as e:
            logger.log(
                config.diagnostic_level(),
                "Unhandled serialization error: %s.__str__() failed: %s",
                type(self).__qualname__,
                e.cause,
            )
            raise

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    cls.__str__ = __str__
    cls.__format__ = __format__
    return cls

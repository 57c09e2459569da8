"""
Externally tagged union variants on top of pydantic.

A tagged union is modelled as a family of classes sharing a base. Each class
is one variant and serializes the way serde's default enum representation
does, so display ids match across implementations:

- unit variant (no fields): ``"Tag"``
- struct variant (named fields): ``{"Tag": {"field": value, ...}}``
- newtype variant (single payload): ``{"Tag": payload}``

Example:
    class Shape(Variant):
        rename_all: ClassVar[str] = "snake_case"

    class UnitSquare(Shape):
        pass

    class Circle(Shape):
        radius: int

    class Polygon(ValueVariant):
        variant_tag: ClassVar[str] = "poly"
        root: list[int]

    UnitSquare()      -> "unit_square"
    Circle(radius=2)  -> {"circle": {"radius": 2}}
    Polygon([1, 2])   -> {"poly": [1, 2]}
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, RootModel, SerializerFunctionWrapHandler, model_serializer

from display_id.casing import apply_rename_rule


class _Tagged:
    """Tag resolution shared by struct and newtype variants."""

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        # Fail at class definition on an unknown rename rule.
        cls.variant_name()

    @classmethod
    def variant_name(cls) -> str:
        """
        Tag written for this variant.

        An explicit ``variant_tag`` applies to the class that declares it
        only. Otherwise the class name goes through the family's
        ``rename_all`` rule.
        """
        explicit = cls.__dict__.get("variant_tag")
        if explicit is not None:
            return explicit
        return apply_rename_rule(cls.__name__, getattr(cls, "rename_all", None))


class Variant(_Tagged, BaseModel):
    """Unit variant when declared without fields, struct variant otherwise."""

    model_config = ConfigDict(frozen=True)

    variant_tag: ClassVar[Optional[str]] = None
    rename_all: ClassVar[Optional[str]] = None

    @model_serializer(mode="wrap")
    def serialize_variant(self, handler: SerializerFunctionWrapHandler) -> Any:
        tag = self.variant_name()
        if not type(self).model_fields:
            return tag
        return {tag: handler(self)}


class ValueVariant(_Tagged, RootModel[Any]):
    """Newtype variant carrying a single payload in ``root``."""

    model_config = ConfigDict(frozen=True)

    variant_tag: ClassVar[Optional[str]] = None
    rename_all: ClassVar[Optional[str]] = None

    @model_serializer(mode="wrap")
    def serialize_variant(self, handler: SerializerFunctionWrapHandler) -> Any:
        return {self.variant_name(): handler(self)}

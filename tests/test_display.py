"""Display ids for records, enums and tagged unions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, RootModel
from pydantic.alias_generators import to_camel

from display_id import ValueVariant, Variant, deterministic_display, render


@deterministic_display
class ProductCode(RootModel[str]):
    pass


@deterministic_display
class SimpleEnum(str, Enum):
    VALUE_ONE = "valueone"
    VALUE_TWO = "renamed_value"
    VALUE_THREE = "valuethree"


@deterministic_display
class ComplexEnum(Variant):
    """Family base; each subclass is one variant."""


class VariantA(ComplexEnum):
    pass


class VariantB(ComplexEnum):
    id: int
    name: str


@deterministic_display
class VariantC(ValueVariant):
    root: list[str]


@deterministic_display
class Simple(ValueVariant):
    root: str


@deterministic_display
class Fruit(Variant):
    rename_all: ClassVar[str] = "snake_case"


class GreenApple(Fruit):
    pass


class BlueBerry(Fruit):
    variant_tag: ClassVar[str] = "blueberry"


class RipeMango(Fruit):
    weight_grams: int


@deterministic_display
class CacheKey(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    tenant_id: str
    page_size: int


@deterministic_display
class Renamed(BaseModel):
    internal: str = Field(serialization_alias="public")


@deterministic_display
@dataclass
class Point:
    x: int
    y: int


def test_display_removes_surrounding_quotes_struct():
    assert str(ProductCode("example")) == "example"


def test_display_preserves_internal_escaped_quotes_struct():
    assert str(ProductCode('ex"ample')) == "ex~ample"


def test_display_handles_empty_string_struct():
    assert str(ProductCode("")) == ""


def test_display_handles_special_characters_struct():
    code = ProductCode("text with \n newlines and \t tabs")
    assert str(code) == "text-with-~n-newlines-and-~t-tabs"


def test_display_simple_enum():
    assert str(SimpleEnum.VALUE_ONE) == "valueone"
    assert str(SimpleEnum.VALUE_TWO) == "renamed_value"
    assert str(SimpleEnum.VALUE_THREE) == "valuethree"


def test_display_complex_enum():
    assert str(VariantA()) == "VariantA"
    assert str(VariantB(id=42, name="test")) == "VariantB_{id_42,name_test}"
    assert str(VariantC(["one", "two"])) == "VariantC_[one,two]"


def test_display_newtype_variant_with_spaces():
    assert str(Simple("with spaces")) == "Simple_with-spaces"


def test_display_rename_all_family():
    assert str(GreenApple()) == "green_apple"
    assert str(BlueBerry()) == "blueberry"
    assert str(RipeMango(weight_grams=250)) == "ripe_mango_{weight_grams_250}"


def test_display_uses_field_aliases():
    key = CacheKey(tenant_id="acme corp", page_size=50)
    assert str(key) == "tenantId_acme-corp,pageSize_50"
    assert str(Renamed(internal="x")) == "public_x"


def test_display_dataclass():
    assert str(Point(x=1, y=-2)) == "x_1,y_-2"


def test_str_matches_render():
    values = [
        ProductCode("a b"),
        SimpleEnum.VALUE_TWO,
        VariantB(id=1, name="n"),
        VariantC(["x"]),
        CacheKey(tenant_id="t", page_size=1),
        Point(x=0, y=0),
    ]
    for value in values:
        assert str(value) == render(value)


def test_format_spec_applies_to_display_id():
    assert f"{ProductCode('abc'):>5}" == "  abc"
    assert f"[{VariantA()}]" == "[VariantA]"


def test_display_is_deterministic():
    first = VariantB(id=7, name="seven")
    second = VariantB(id=7, name="seven")
    assert first == second
    assert str(first) == str(second)


def test_field_order_follows_declaration():
    assert str(VariantB(name="late", id=1)) == "VariantB_{id_1,name_late}"

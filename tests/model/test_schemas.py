# Copyright 2026 Proto2OpenAPI Contributors
# SPDX-License-Identifier: Apache-2.0

"""High-level tests demonstrating how to construct and inspect schema values."""

import pytest
from pydantic import TypeAdapter, ValidationError

from proto2openapi.model import (
    AbsentSchema,
    AnySchema,
    ArraySchema,
    MapSchema,
    NamedSchema,
    ObjectSchema,
    ScalarSchema,
    ScalarType,
    Schema,
)


def test_scalar_schema_defaults() -> None:
    s = ScalarSchema(type=ScalarType.STRING)
    assert s.kind == "scalar"
    assert s.format is None
    assert s.enum == ()


def test_object_schema_preserves_property_order() -> None:
    obj = ObjectSchema(
        properties=(
            NamedSchema(name="zeta", value=ScalarSchema(type=ScalarType.STRING)),
            NamedSchema(name="alpha", value=ScalarSchema(type=ScalarType.BOOLEAN)),
        )
    )
    assert obj.property_names == ["zeta", "alpha"]
    assert obj.find_property("alpha") == ScalarSchema(type=ScalarType.BOOLEAN)
    assert obj.find_property("missing") is None
    assert obj.required == frozenset()


def test_absent_is_distinct_from_empty_object() -> None:
    assert AbsentSchema() != ObjectSchema()
    assert AbsentSchema() != AnySchema()


def test_schemas_are_frozen() -> None:
    s = ScalarSchema(type=ScalarType.INTEGER, format="int32")
    with pytest.raises(ValidationError):
        s.format = "int64"  # type: ignore[misc]


def test_object_properties_are_immutable() -> None:
    obj = ObjectSchema(properties=[NamedSchema(name="a", value=AbsentSchema())])
    assert isinstance(obj.properties, tuple)
    assert isinstance(obj.required, frozenset)


def test_equal_trees_compare_and_hash_equal() -> None:
    def build() -> ObjectSchema:
        return ObjectSchema(
            properties=(
                NamedSchema(name="tags", value=ArraySchema(items=ScalarSchema(type=ScalarType.STRING))),
                NamedSchema(name="attrs", value=MapSchema(additional_properties=AnySchema())),
            )
        )

    assert build() == build()
    assert hash(build()) == hash(build())


def test_schema_union_validates_by_kind() -> None:
    adapter = TypeAdapter(Schema)
    value = adapter.validate_python(
        {
            "kind": "array",
            "items": {"kind": "map", "additional_properties": {"kind": "scalar", "type": "boolean"}},
        }
    )
    assert value == ArraySchema(items=MapSchema(additional_properties=ScalarSchema(type=ScalarType.BOOLEAN)))


def test_schema_union_rejects_unknown_kind() -> None:
    with pytest.raises(ValidationError):
        TypeAdapter(Schema).validate_python({"kind": "tuple"})

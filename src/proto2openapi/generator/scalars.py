# Copyright 2026 Proto2OpenAPI Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schemas for primitive (non-message) protobuf field kinds.

64-bit integer kinds are mapped to strings: their values exceed the range a
JSON number can carry without loss in common decoders (IEEE 754 doubles), and
the protobuf JSON mapping encodes them as decimal strings.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from google.protobuf.descriptor import FieldDescriptor

from proto2openapi.config.settings import EnumType
from proto2openapi.generator.wellknown import (
    new_boolean_schema,
    new_bytes_schema,
    new_integer_schema,
    new_number_schema,
    new_string_schema,
)
from proto2openapi.model.schemas import AbsentSchema, ScalarSchema, ScalarType, Schema

_LOGGER = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class SchemaWarning:
    """A non-fatal problem met while generating a schema.

    Generation continues; the affected field gets an absent schema.

    Attributes:
        message: Human-readable description of the warning.
    """

    message: str


def schema_for_kind(
    field: FieldDescriptor,
    enum_type: EnumType,
    warnings: list[SchemaWarning] | None = None,
) -> Schema:
    """Return the schema for the primitive kind of *field*.

    Args:
        field: Descriptor of a non-message field.
        enum_type: Representation used for enum-typed fields.
        warnings: Optional accumulator receiving a :class:`SchemaWarning` for
            every unsupported kind.

    Returns:
        The kind's schema, or an :class:`AbsentSchema` if the kind has no JSON
        mapping here (groups, message kinds, unknown kinds).
    """
    if field.type == FieldDescriptor.TYPE_ENUM:
        return new_enum_schema(enum_type, field)

    factory = _KIND_SCHEMAS.get(field.type)
    if factory is not None:
        return factory()

    message = f"Unsupported field type {_kind_label(field.type)} for field '{field.full_name}'"
    _LOGGER.warning(message)
    if warnings is not None:
        warnings.append(SchemaWarning(message=message))
    return AbsentSchema()


def new_enum_schema(enum_type: EnumType, field: FieldDescriptor) -> ScalarSchema:
    """Return the schema of an enum-typed field.

    With ``EnumType.STRING`` the value names are listed in declaration order;
    with ``EnumType.INTEGER`` the field is a plain integer.
    """
    if enum_type is EnumType.STRING:
        values = tuple(v.name for v in field.enum_type.values)
        return ScalarSchema(type=ScalarType.STRING, format="enum", enum=values)
    return ScalarSchema(type=ScalarType.INTEGER, format="enum")


# ################
# Implementation
# ################


def _integer(fmt: str) -> Callable[[], Schema]:
    return lambda: new_integer_schema(fmt)


def _number(fmt: str) -> Callable[[], Schema]:
    return lambda: new_number_schema(fmt)


_KIND_SCHEMAS: Mapping[int, Callable[[], Schema]] = MappingProxyType(
    {
        FieldDescriptor.TYPE_STRING: new_string_schema,
        FieldDescriptor.TYPE_INT32: _integer("int32"),
        FieldDescriptor.TYPE_SINT32: _integer("sint32"),
        FieldDescriptor.TYPE_UINT32: _integer("uint32"),
        FieldDescriptor.TYPE_SFIXED32: _integer("sfixed32"),
        FieldDescriptor.TYPE_FIXED32: _integer("fixed32"),
        FieldDescriptor.TYPE_INT64: new_string_schema,
        FieldDescriptor.TYPE_SINT64: new_string_schema,
        FieldDescriptor.TYPE_UINT64: new_string_schema,
        FieldDescriptor.TYPE_SFIXED64: new_string_schema,
        FieldDescriptor.TYPE_FIXED64: new_string_schema,
        FieldDescriptor.TYPE_BOOL: new_boolean_schema,
        FieldDescriptor.TYPE_FLOAT: _number("float"),
        FieldDescriptor.TYPE_DOUBLE: _number("double"),
        FieldDescriptor.TYPE_BYTES: new_bytes_schema,
    }
)

_KIND_NAMES: Mapping[int, str] = MappingProxyType(
    {
        FieldDescriptor.TYPE_GROUP: "group",
        FieldDescriptor.TYPE_MESSAGE: "message",
    }
)


def _kind_label(kind: int) -> str:
    return _KIND_NAMES.get(kind, f"<unknown kind {kind}>")

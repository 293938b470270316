# Copyright 2026 Proto2OpenAPI Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema constructors and the registry of well-known message types.

Well-known types have a fixed JSON representation that does not follow their
message structure (a ``Timestamp`` is an RFC 3339 string, not an object with
``seconds`` and ``nanos``), so their schemas are looked up by name instead of
being derived from their fields.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from proto2openapi.model.schemas import (
    AbsentSchema,
    AnySchema,
    ArraySchema,
    MapSchema,
    ScalarSchema,
    ScalarType,
    Schema,
)

# ###############
# Public Interface
# ###############


def new_string_schema(fmt: str | None = None) -> ScalarSchema:
    return ScalarSchema(type=ScalarType.STRING, format=fmt)


def new_integer_schema(fmt: str) -> ScalarSchema:
    return ScalarSchema(type=ScalarType.INTEGER, format=fmt)


def new_number_schema(fmt: str) -> ScalarSchema:
    return ScalarSchema(type=ScalarType.NUMBER, format=fmt)


def new_boolean_schema() -> ScalarSchema:
    return ScalarSchema(type=ScalarType.BOOLEAN)


def new_bytes_schema() -> ScalarSchema:
    """Bytes travel as base64 text in JSON."""
    return ScalarSchema(type=ScalarType.STRING, format="byte")


def new_list_schema(item: Schema) -> ArraySchema:
    """Wrap the schema of a repeated field's element in an array schema.

    The item schema is wrapped as-is, even when it is an :class:`AbsentSchema`.
    """
    return ArraySchema(items=item)


def new_map_schema(value: Schema) -> MapSchema:
    """Return the schema of a map field whose values follow *value*.

    JSON object keys are always strings, so the key type of the map does not
    appear in the schema.
    """
    return MapSchema(additional_properties=value)


def lookup_well_known(full_name: str) -> Schema | None:
    """Return the canonical schema for a well-known message type.

    Args:
        full_name: Fully-qualified type name with a leading dot, e.g.
            ``".google.protobuf.Timestamp"``.

    Returns:
        A freshly built schema, an :class:`AbsentSchema` for
        ``google.protobuf.Empty``, or ``None`` if *full_name* is not a
        well-known type.
    """
    factory = WELL_KNOWN_TYPES.get(full_name)
    if factory is None:
        return None
    return factory()


def is_well_known(full_name: str) -> bool:
    """Return True if *full_name* (leading dot included) is a well-known type."""
    return full_name in WELL_KNOWN_TYPES


# ################
# Implementation
# ################


def _http_body_schema() -> Schema:
    # Arbitrary request/response payload, passed through untouched.
    return new_string_schema()


def _timestamp_schema() -> Schema:
    return new_string_schema("date-time")


def _date_schema() -> Schema:
    return new_string_schema("date")


def _date_time_schema() -> Schema:
    return new_string_schema("date-time")


def _field_mask_schema() -> Schema:
    return new_string_schema("field-mask")


def _struct_schema() -> Schema:
    # A Struct is an arbitrary JSON object.
    return new_map_schema(AnySchema())


def _empty_schema() -> Schema:
    # JSON has no value for Empty. An empty object schema would still have to
    # be satisfied by validators, so no schema is produced at all.
    return AbsentSchema()


WELL_KNOWN_TYPES: Mapping[str, Callable[[], Schema]] = MappingProxyType(
    {
        ".google.api.HttpBody": _http_body_schema,
        ".google.protobuf.Timestamp": _timestamp_schema,
        ".google.type.Date": _date_schema,
        ".google.type.DateTime": _date_time_schema,
        ".google.protobuf.FieldMask": _field_mask_schema,
        ".google.protobuf.Struct": _struct_schema,
        ".google.protobuf.Empty": _empty_schema,
    }
)

# Copyright 2026 Proto2OpenAPI Contributors
# SPDX-License-Identifier: Apache-2.0

"""Property-key formatters for message fields."""

from __future__ import annotations

from collections.abc import Callable

from google.protobuf.descriptor import FieldDescriptor

from proto2openapi.config.settings import FieldNaming

# ###############
# Public Interface
# ###############

# Called once per field; the returned string is used verbatim as property key.
FieldNameFormatter = Callable[[FieldDescriptor], str]


def json_field_name(field: FieldDescriptor) -> str:
    """Return the JSON name of *field* (lowerCamelCase unless overridden in the .proto)."""
    return field.json_name


def proto_field_name(field: FieldDescriptor) -> str:
    """Return the name of *field* as declared in the .proto file."""
    return field.name


def field_name_formatter(naming: FieldNaming) -> FieldNameFormatter:
    """Return the formatter implementing *naming*."""
    if naming is FieldNaming.PROTO:
        return proto_field_name
    return json_field_name

# Copyright 2026 Proto2OpenAPI Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of schema trees into plain OpenAPI v3 values.

The result is made of dicts, lists, strings and ``None`` only, ready to be
placed under ``components/schemas`` or inline in a request/response body by
a document assembler. Text serialization is left to the caller.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from proto2openapi.model.schemas import (
    AbsentSchema,
    AnySchema,
    ArraySchema,
    MapSchema,
    ObjectSchema,
    ScalarSchema,
    Schema,
)

# ###############
# Public Interface
# ###############


class AbsentProperties(Enum):
    """How properties whose schema is absent are rendered in an object."""

    NULL = "null"
    OMIT = "omit"


def to_openapi(schema: Schema, *, absent: AbsentProperties = AbsentProperties.NULL) -> dict[str, Any] | None:
    """Render *schema* as an OpenAPI v3 schema object.

    Args:
        schema: The schema tree to render.
        absent: Policy for object properties whose value is an
            :class:`AbsentSchema`. ``NULL`` keeps the key with a ``None``
            value; ``OMIT`` drops the key.

    Returns:
        The OpenAPI schema object, or ``None`` if *schema* itself is absent.
    """
    return _render(schema, absent)


# ################
# Implementation
# ################


def _render(schema: Schema, absent: AbsentProperties) -> dict[str, Any] | None:
    if isinstance(schema, AbsentSchema):
        return None
    if isinstance(schema, AnySchema):
        return {}
    if isinstance(schema, ScalarSchema):
        d: dict[str, Any] = {"type": schema.type.value}
        if schema.format is not None:
            d["format"] = schema.format
        if schema.enum:
            d["enum"] = list(schema.enum)
        return d
    if isinstance(schema, ArraySchema):
        return {"type": "array", "items": _render(schema.items, absent)}
    if isinstance(schema, MapSchema):
        return {"type": "object", "additionalProperties": _render(schema.additional_properties, absent)}
    # ObjectSchema is the only remaining variant.
    assert isinstance(schema, ObjectSchema)
    properties: dict[str, Any] = {}
    for prop in schema.properties:
        if isinstance(prop.value, AbsentSchema) and absent is AbsentProperties.OMIT:
            continue
        properties[prop.name] = _render(prop.value, absent)
    d = {"type": "object", "properties": properties}
    if schema.required:
        d["required"] = sorted(schema.required)
    return d

# Copyright 2026 Proto2OpenAPI Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema model for OpenAPI v3 output (scalars, arrays, maps, objects)."""

from proto2openapi.model.openapi import AbsentProperties, to_openapi
from proto2openapi.model.schemas import (
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

__all__ = [
    # Schema variants
    "ScalarType",
    "ScalarSchema",
    "ArraySchema",
    "MapSchema",
    "AnySchema",
    "AbsentSchema",
    "NamedSchema",
    "ObjectSchema",
    "Schema",
    # Rendering
    "AbsentProperties",
    "to_openapi",
]

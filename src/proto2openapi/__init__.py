# Copyright 2026 Proto2OpenAPI Contributors
# SPDX-License-Identifier: Apache-2.0

"""Translate protocol-buffer message descriptors into OpenAPI v3 schemas."""

import logging

from proto2openapi.config import EnumType, FieldNaming, GeneratorConfig
from proto2openapi.generator import (
    CyclicSchemaError,
    GenerationResult,
    SchemaGenerationError,
    SchemaWarning,
    generate_schema,
    generate_schemas,
    schema_for_field,
    schema_for_message,
)
from proto2openapi.model import Schema, to_openapi

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CyclicSchemaError",
    "EnumType",
    "FieldNaming",
    "GenerationResult",
    "GeneratorConfig",
    "Schema",
    "SchemaGenerationError",
    "SchemaWarning",
    "generate_schema",
    "generate_schemas",
    "schema_for_field",
    "schema_for_message",
    "to_openapi",
]

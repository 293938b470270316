# Copyright 2026 Proto2OpenAPI Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema generation from protobuf descriptors: reflector, scalar kinds, well-known types."""

from proto2openapi.generator.naming import (
    FieldNameFormatter,
    field_name_formatter,
    json_field_name,
    proto_field_name,
)
from proto2openapi.generator.reflector import (
    CyclicSchemaError,
    GenerationResult,
    SchemaGenerationError,
    full_message_type_name,
    generate_schema,
    generate_schemas,
    schema_for_field,
    schema_for_message,
)
from proto2openapi.generator.scalars import SchemaWarning, new_enum_schema, schema_for_kind
from proto2openapi.generator.wellknown import (
    WELL_KNOWN_TYPES,
    is_well_known,
    lookup_well_known,
    new_list_schema,
    new_map_schema,
)

__all__ = [
    "CyclicSchemaError",
    "FieldNameFormatter",
    "GenerationResult",
    "SchemaGenerationError",
    "SchemaWarning",
    "WELL_KNOWN_TYPES",
    "field_name_formatter",
    "full_message_type_name",
    "generate_schema",
    "generate_schemas",
    "is_well_known",
    "json_field_name",
    "lookup_well_known",
    "new_enum_schema",
    "new_list_schema",
    "new_map_schema",
    "proto_field_name",
    "schema_for_field",
    "schema_for_kind",
    "schema_for_message",
]

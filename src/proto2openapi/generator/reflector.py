# Copyright 2026 Proto2OpenAPI Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive translation of message descriptors into OpenAPI v3 schemas.

A message becomes an object schema with one property per field, in field
declaration order. Each field is dispatched on its kind:

* **Map fields** — ``map<K, V> m = N;`` is compiled into a repeated synthetic
  ``MEntry { K key = 1; V value = 2; }`` message. The schema of the ``value``
  field becomes the ``additionalProperties`` of a single object-typed
  property; the entry message itself never shows up.

* **Message fields** — expanded inline by recursing into the referenced
  message, unless it is a well-known type with a fixed representation.

* **Everything else** — primitive kinds and enums, see
  :mod:`proto2openapi.generator.scalars`.

Plain repeated fields are wrapped in an array schema once their element
schema is known.

Every reference is expanded independently; nothing is cached between
occurrences of the same message type. A message that (directly or through
other messages) contains itself has no finite inline expansion, and is
reported as a :class:`CyclicSchemaError`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from google.protobuf.descriptor import Descriptor, FieldDescriptor

from proto2openapi.config.settings import GeneratorConfig
from proto2openapi.generator.naming import FieldNameFormatter, field_name_formatter
from proto2openapi.generator.scalars import SchemaWarning, schema_for_kind
from proto2openapi.generator.wellknown import lookup_well_known, new_list_schema, new_map_schema
from proto2openapi.model.schemas import NamedSchema, ObjectSchema, Schema

_LOGGER = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class SchemaGenerationError(Exception):
    """Raised when a descriptor graph cannot be turned into a schema."""


class CyclicSchemaError(SchemaGenerationError):
    """Raised when a message type is reached again while it is being expanded.

    Attributes:
        cycle: Fully-qualified type names forming the cycle, with the first
            name repeated at the end (e.g. ``[".a.Node", ".a.Node"]``).
    """

    def __init__(self, cycle: list[str]) -> None:
        self.cycle = cycle
        super().__init__(f"Cyclic message type reference detected: {' -> '.join(cycle)}")


@dataclass
class GenerationResult:
    """Outcome of one schema generation run.

    Attributes:
        schema: The generated schema tree.
        warnings: Non-fatal problems, in the order they were met.
    """

    schema: Schema
    warnings: list[SchemaWarning] = field(default_factory=list)


def generate_schema(
    message: Descriptor,
    config: GeneratorConfig | None = None,
    *,
    field_namer: FieldNameFormatter | None = None,
) -> GenerationResult:
    """Generate the schema of a message type.

    Args:
        message: Descriptor of the message to translate.
        config: Generator options; defaults to :class:`GeneratorConfig()`.
        field_namer: Property-key formatter. Defaults to the formatter for
            ``config.naming``.

    Returns:
        A :class:`GenerationResult` with the schema and any warnings.

    Raises:
        CyclicSchemaError: If *message* reaches itself through message fields.
    """
    reflector = _SchemaReflector(config or GeneratorConfig(), field_namer)
    schema = reflector.schema_for_message(message)
    return GenerationResult(schema=schema, warnings=reflector.warnings)


def schema_for_message(
    message: Descriptor,
    config: GeneratorConfig | None = None,
    *,
    field_namer: FieldNameFormatter | None = None,
) -> Schema:
    """Return the schema of a message type, discarding warnings."""
    return generate_schema(message, config, field_namer=field_namer).schema


def schema_for_field(
    field_descriptor: FieldDescriptor,
    config: GeneratorConfig | None = None,
    *,
    field_namer: FieldNameFormatter | None = None,
) -> Schema:
    """Return the schema of a single field, as it would appear as a property value."""
    reflector = _SchemaReflector(config or GeneratorConfig(), field_namer)
    return reflector.schema_for_field(field_descriptor)


def generate_schemas(
    messages: Iterable[Descriptor],
    config: GeneratorConfig | None = None,
    *,
    field_namer: FieldNameFormatter | None = None,
) -> dict[str, Schema]:
    """Generate one independent schema per message.

    Returns:
        A mapping from leading-dot fully-qualified type names to schemas, in
        the order the messages were given.
    """
    return {
        full_message_type_name(m): schema_for_message(m, config, field_namer=field_namer)
        for m in messages
    }


def full_message_type_name(message: Descriptor) -> str:
    """Return the fully-qualified name of *message* with a leading dot."""
    return f".{message.full_name}"


# ################
# Implementation
# ################


def _is_map(field_descriptor: FieldDescriptor) -> bool:
    entry = field_descriptor.message_type
    return entry is not None and entry.GetOptions().map_entry


class _SchemaReflector:
    """Translates descriptors for the duration of a single generation call."""

    def __init__(self, config: GeneratorConfig, field_namer: FieldNameFormatter | None) -> None:
        self._config = config
        self._format_field_name = field_namer or field_name_formatter(config.naming)
        # Messages currently being expanded, outermost first (cycle guard).
        self._path: list[str] = []
        self._in_progress: set[str] = set()
        self.warnings: list[SchemaWarning] = []

    def schema_for_message(self, message: Descriptor) -> Schema:
        type_name = full_message_type_name(message)

        well_known = lookup_well_known(type_name)
        if well_known is not None:
            return well_known

        if type_name in self._in_progress:
            cycle = self._path[self._path.index(type_name) :] + [type_name]
            _LOGGER.debug("Cycle while expanding %s: %s", self._path[0], " -> ".join(cycle))
            raise CyclicSchemaError(cycle)

        self._in_progress.add(type_name)
        self._path.append(type_name)
        try:
            properties: list[NamedSchema] = []
            for field_descriptor in message.fields:
                schema = self.schema_for_field(field_descriptor)
                # Absent schemas (Empty, unsupported kinds) still get a property.
                properties.append(NamedSchema(name=self._format_field_name(field_descriptor), value=schema))
        finally:
            self._path.pop()
            self._in_progress.discard(type_name)

        return ObjectSchema(properties=tuple(properties), required=frozenset())

    def schema_for_field(self, field_descriptor: FieldDescriptor) -> Schema:
        if field_descriptor.type == FieldDescriptor.TYPE_MESSAGE:
            if _is_map(field_descriptor):
                # Never list-wrapped, although the entry field is repeated.
                return self._schema_for_map_field(field_descriptor)
            kind_schema = self.schema_for_message(field_descriptor.message_type)
        else:
            kind_schema = schema_for_kind(field_descriptor, self._config.enum_type, self.warnings)

        if field_descriptor.is_repeated:
            kind_schema = new_list_schema(kind_schema)

        return kind_schema

    def _schema_for_map_field(self, field_descriptor: FieldDescriptor) -> Schema:
        value_field = field_descriptor.message_type.fields_by_name["value"]
        return new_map_schema(self.schema_for_field(value_field))

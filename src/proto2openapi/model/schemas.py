# Copyright 2026 Proto2OpenAPI Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema value representations produced by the descriptor reflector.

Every schema is an immutable pydantic model tagged by a ``kind`` literal, so a
tree handed to a document assembler can never be altered behind its back.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class ScalarType(Enum):
    """Primitive JSON types an OpenAPI scalar schema can declare."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"


class ScalarSchema(BaseModel):
    """A primitive value schema, optionally narrowed by a format or enumeration."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["scalar"] = "scalar"
    type: ScalarType
    format: str | None = None
    enum: tuple[str, ...] = ()


class ArraySchema(BaseModel):
    """A schema for a repeated field: a JSON array of *items*."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["array"] = "array"
    items: Schema


class MapSchema(BaseModel):
    """A schema for a JSON object with arbitrary string keys."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["map"] = "map"
    additional_properties: Schema


class AnySchema(BaseModel):
    """The unconstrained schema: any JSON value is accepted."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["any"] = "any"


class AbsentSchema(BaseModel):
    """Explicit "no schema" marker, distinct from an empty object schema."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["absent"] = "absent"


class NamedSchema(BaseModel):
    """One property of an object schema."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: Schema


class ObjectSchema(BaseModel):
    """A schema for a message: named properties in field declaration order."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["object"] = "object"
    properties: tuple[NamedSchema, ...] = ()
    required: frozenset[str] = frozenset()

    @property
    def property_names(self) -> list[str]:
        """Return the property keys in declaration order."""
        return [p.name for p in self.properties]

    def find_property(self, name: str) -> Schema | None:
        """Return the schema of the first property called *name*, or None."""
        for prop in self.properties:
            if prop.name == name:
                return prop.value
        return None


# A schema value, one of the variants above.
# The `kind` discriminator keeps validation of nested trees unambiguous.
Schema = Annotated[
    ScalarSchema | ArraySchema | MapSchema | ObjectSchema | AnySchema | AbsentSchema,
    _Field(discriminator="kind"),
]


# Resolve forward references for models that nest Schema.
ArraySchema.model_rebuild()
MapSchema.model_rebuild()
NamedSchema.model_rebuild()
ObjectSchema.model_rebuild()

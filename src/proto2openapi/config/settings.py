# Copyright 2026 Proto2OpenAPI Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the schema generator configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TypeVar

import yaml

# ###############
# Public Interface
# ###############


class GeneratorConfigError(Exception):
    """Raised when a generator configuration is invalid or cannot be loaded."""


class EnumType(Enum):
    """How enum-typed fields are represented in the generated schemas."""

    STRING = "string"
    INTEGER = "integer"


# Short aliases.
AS_STRING = EnumType.STRING
AS_INTEGER = EnumType.INTEGER


class FieldNaming(Enum):
    """Naming policy for property keys.

    ``JSON`` uses the lowerCamelCase JSON name of a field, ``PROTO`` keeps the
    name as written in the .proto file.
    """

    JSON = "json"
    PROTO = "proto"


@dataclass(frozen=True)
class GeneratorConfig:
    """Options held constant for the duration of one generation run.

    Attributes:
        enum_type: Representation of enum values (names or numbers).
        naming: Naming policy applied by the default field-name formatter.
    """

    enum_type: EnumType = EnumType.INTEGER
    naming: FieldNaming = FieldNaming.JSON


def load_generator_config(path: Path) -> GeneratorConfig:
    """Load and parse a generator configuration file.

    Args:
        path: Path to a YAML file with optional ``enum-type`` and ``naming`` keys.

    Returns:
        A GeneratorConfig instance populated from the file.

    Raises:
        GeneratorConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise GeneratorConfigError(f"Generator config file not found: {path}") from None
    except OSError as exc:
        raise GeneratorConfigError(f"Cannot read generator config file: {exc}") from exc

    return parse_generator_config(text, source_label=str(path))


def parse_generator_config(text: str, source_label: str = "<string>") -> GeneratorConfig:
    """Parse generator config YAML text into a GeneratorConfig.

    An empty document yields the default configuration.

    Raises:
        GeneratorConfigError: If the YAML is invalid or a value is not recognised.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise GeneratorConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return GeneratorConfig()
    if not isinstance(data, dict):
        raise GeneratorConfigError(f"{source_label}: generator config must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise GeneratorConfigError(f"{source_label}: unknown field(s): {', '.join(repr(k) for k in unknown)}")

    defaults = GeneratorConfig()
    enum_type = _optional_choice(data, "enum-type", EnumType, defaults.enum_type, source_label)
    naming = _optional_choice(data, "naming", FieldNaming, defaults.naming, source_label)
    return GeneratorConfig(enum_type=enum_type, naming=naming)


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset({"enum-type", "naming"})


_E = TypeVar("_E", bound=Enum)


def _optional_choice(
    mapping: dict[str, object],
    key: str,
    choices: type[_E],
    default: _E,
    source_label: str,
) -> _E:
    """Extract an optional enum-valued string field, raising GeneratorConfigError if invalid."""
    if key not in mapping:
        return default
    value = mapping[key]
    if not isinstance(value, str):
        raise GeneratorConfigError(f"{source_label}: '{key}' must be a string")
    try:
        return choices(value)
    except ValueError:
        allowed = ", ".join(repr(c.value) for c in choices)
        raise GeneratorConfigError(f"{source_label}: '{key}' must be one of {allowed}, got {value!r}") from None

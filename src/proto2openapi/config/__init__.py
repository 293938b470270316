# Copyright 2026 Proto2OpenAPI Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generator configuration for proto2openapi."""

from proto2openapi.config.settings import (
    AS_INTEGER,
    AS_STRING,
    EnumType,
    FieldNaming,
    GeneratorConfig,
    GeneratorConfigError,
    load_generator_config,
    parse_generator_config,
)

__all__ = [
    "AS_INTEGER",
    "AS_STRING",
    "EnumType",
    "FieldNaming",
    "GeneratorConfig",
    "GeneratorConfigError",
    "load_generator_config",
    "parse_generator_config",
]

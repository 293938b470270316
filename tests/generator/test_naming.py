# Copyright 2026 Proto2OpenAPI Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the field-name formatters."""

from proto2openapi.config import FieldNaming
from proto2openapi.generator.naming import field_name_formatter, json_field_name, proto_field_name


def _field(descriptors, name: str, json_name: str | None = None):
    fd = descriptors.add_file(
        "naming.proto",
        messages=[descriptors.message("M", [descriptors.field(name, 1, "string", json_name=json_name)])],
    )
    return fd.message_types_by_name["M"].fields_by_name[name]


def test_json_name_is_camel_case(descriptors) -> None:
    assert json_field_name(_field(descriptors, "created_by_user")) == "createdByUser"


def test_json_name_override(descriptors) -> None:
    assert json_field_name(_field(descriptors, "created_by_user", json_name="author")) == "author"


def test_proto_name_is_unchanged(descriptors) -> None:
    assert proto_field_name(_field(descriptors, "created_by_user")) == "created_by_user"


def test_formatter_selection() -> None:
    assert field_name_formatter(FieldNaming.JSON) is json_field_name
    assert field_name_formatter(FieldNaming.PROTO) is proto_field_name

# Copyright 2026 Proto2OpenAPI Contributors
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures: building protobuf descriptors without running protoc."""

from collections.abc import Iterable

import pytest
from google.protobuf import descriptor_pb2, descriptor_pool
from google.protobuf.descriptor import FileDescriptor

# ###############
# Helpers
# ###############


class DescriptorBuilder:
    """Builds descriptors in a private pool from hand-written descriptor protos."""

    def __init__(self) -> None:
        self._pool = descriptor_pool.DescriptorPool()
        self._files: set[str] = set()

    @staticmethod
    def field(
        name: str,
        number: int,
        kind: str,
        *,
        repeated: bool = False,
        type_name: str | None = None,
        json_name: str | None = None,
    ) -> descriptor_pb2.FieldDescriptorProto:
        """Create a field proto; *kind* is a lowercase type such as ``"int32"`` or ``"message"``."""
        f = descriptor_pb2.FieldDescriptorProto(
            name=name,
            number=number,
            type=descriptor_pb2.FieldDescriptorProto.Type.Value(f"TYPE_{kind.upper()}"),
            label=(
                descriptor_pb2.FieldDescriptorProto.LABEL_REPEATED
                if repeated
                else descriptor_pb2.FieldDescriptorProto.LABEL_OPTIONAL
            ),
        )
        if type_name is not None:
            f.type_name = type_name
        if json_name is not None:
            f.json_name = json_name
        return f

    @staticmethod
    def message(
        name: str,
        fields: Iterable[descriptor_pb2.FieldDescriptorProto] = (),
        *,
        nested: Iterable[descriptor_pb2.DescriptorProto] = (),
        enums: Iterable[descriptor_pb2.EnumDescriptorProto] = (),
    ) -> descriptor_pb2.DescriptorProto:
        """Create a message proto."""
        return descriptor_pb2.DescriptorProto(
            name=name,
            field=list(fields),
            nested_type=list(nested),
            enum_type=list(enums),
        )

    @staticmethod
    def map_entry(
        field_name: str,
        value_kind: str,
        *,
        key_kind: str = "string",
        value_type_name: str | None = None,
    ) -> descriptor_pb2.DescriptorProto:
        """Create the synthetic entry message protoc generates for a ``map<K, V>`` field."""
        entry_name = "".join(part.capitalize() for part in field_name.split("_")) + "Entry"
        entry = descriptor_pb2.DescriptorProto(
            name=entry_name,
            field=[
                DescriptorBuilder.field("key", 1, key_kind),
                DescriptorBuilder.field("value", 2, value_kind, type_name=value_type_name),
            ],
        )
        entry.options.map_entry = True
        return entry

    @staticmethod
    def enum(name: str, values: Iterable[str]) -> descriptor_pb2.EnumDescriptorProto:
        """Create an enum proto numbering *values* from zero."""
        return descriptor_pb2.EnumDescriptorProto(
            name=name,
            value=[descriptor_pb2.EnumValueDescriptorProto(name=v, number=i) for i, v in enumerate(values)],
        )

    def add_file(
        self,
        name: str,
        *,
        package: str = "test",
        messages: Iterable[descriptor_pb2.DescriptorProto] = (),
        enums: Iterable[descriptor_pb2.EnumDescriptorProto] = (),
        dependencies: Iterable[FileDescriptor] = (),
        syntax: str = "proto3",
    ) -> FileDescriptor:
        """Add a file (and the files it depends on) to the pool and return its descriptor."""
        deps = list(dependencies)
        for dep in deps:
            self._load(dep)
        file_proto = descriptor_pb2.FileDescriptorProto(
            name=name,
            package=package,
            syntax=syntax,
            dependency=[d.name for d in deps],
            message_type=list(messages),
            enum_type=list(enums),
        )
        self._files.add(name)
        return self._pool.AddSerializedFile(file_proto.SerializeToString())

    def _load(self, file_descriptor: FileDescriptor) -> None:
        if file_descriptor.name in self._files:
            return
        for dep in file_descriptor.dependencies:
            self._load(dep)
        self._files.add(file_descriptor.name)
        self._pool.AddSerializedFile(file_descriptor.serialized_pb)


# ###############
# Fixtures
# ###############


@pytest.fixture
def descriptors() -> DescriptorBuilder:
    """A descriptor builder backed by a fresh pool."""
    return DescriptorBuilder()

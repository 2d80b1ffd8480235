"""GraphQL schema parser using graphql-core.

Builds a GraphQLSchema from SDL files or an introspection result and
converts it into an IRSchema.
"""

import logging
import os
from typing import Any

from graphql import (
    GraphQLError,
    GraphQLSchema,
    GraphQLType,
    Source,
    build_client_schema,
    build_schema,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_introspection_type,
    is_list_type,
    is_non_null_type,
    is_object_type,
    is_union_type,
)

from .errors import ConfigurationError, SchemaError
from .ir import IRArgument, IRField, IRSchema, IRType, IRTypeKind, IRTypeRef

log = logging.getLogger(__name__)

SCHEMA_EXTENSIONS = (".graphql", ".graphqls", ".gql")


class SchemaParser:
    """Parses GraphQL schema files into IR."""

    def __init__(self, schema_path: str, assume_valid: bool = False):
        """Initialize a parser with a path to a schema file or directory."""
        self.schema_path = schema_path
        self.assume_valid = assume_valid

    def parse_all(self) -> IRSchema:
        """Parse all schema files and return the complete IR."""
        source = self._read_source()
        try:
            schema = build_schema(source, assume_valid_sdl=self.assume_valid)
        except (GraphQLError, TypeError) as e:
            raise SchemaError(f"Error parsing {source.name}: {e}") from e
        return convert_schema(schema)

    @classmethod
    def from_introspection(cls, introspection: dict[str, Any]) -> IRSchema:
        """Build the IR from the ``data`` part of an introspection response."""
        try:
            schema = build_client_schema(introspection)
        except (GraphQLError, TypeError) as e:
            raise SchemaError(f"Invalid introspection result: {e}") from e
        return convert_schema(schema)

    def _collect_schema_files(self) -> list[str]:
        """Collect the schema file, or all schema files under a directory."""
        if os.path.isfile(self.schema_path):
            return [self.schema_path]
        files = []
        for root, _, filenames in os.walk(self.schema_path):
            for filename in filenames:
                if filename.endswith(SCHEMA_EXTENSIONS):
                    files.append(os.path.join(root, filename))
        return sorted(files)

    def _read_source(self) -> Source:
        if not os.path.exists(self.schema_path):
            raise ConfigurationError(f"Schema path does not exist: {self.schema_path}")
        schema_files = self._collect_schema_files()
        if not schema_files:
            raise ConfigurationError(f"No schema files found in {self.schema_path}")

        parts = []
        for file_path in schema_files:
            log.debug("Reading schema file %s", file_path)
            try:
                with open(file_path, encoding="utf-8") as f:
                    parts.append(f.read())
            except OSError as e:
                raise ConfigurationError(f"Cannot read schema file {file_path}: {e}") from e

        name = schema_files[0] if len(schema_files) == 1 else self.schema_path
        return Source("\n".join(parts), name)


def convert_schema(schema: GraphQLSchema) -> IRSchema:
    """Convert a graphql-core schema into the IR."""
    ir = IRSchema(
        query_type=schema.query_type.name if schema.query_type else None,
        mutation_type=schema.mutation_type.name if schema.mutation_type else None,
        subscription_type=(
            schema.subscription_type.name if schema.subscription_type else None
        ),
    )
    for name, gql_type in schema.type_map.items():
        if is_introspection_type(gql_type):
            continue
        ir.types[name] = _convert_named_type(gql_type)
    return ir


def _convert_named_type(gql_type) -> IRType:
    description = gql_type.description
    if is_object_type(gql_type) or is_interface_type(gql_type):
        kind = IRTypeKind.OBJECT if is_object_type(gql_type) else IRTypeKind.INTERFACE
        fields = {
            name: _convert_field(name, gql_field)
            for name, gql_field in gql_type.fields.items()
        }
        return IRType(name=gql_type.name, kind=kind, fields=fields, description=description)
    if is_union_type(gql_type):
        return IRType(
            name=gql_type.name,
            kind=IRTypeKind.UNION,
            possible_types=[member.name for member in gql_type.types],
            description=description,
        )
    if is_enum_type(gql_type):
        kind = IRTypeKind.ENUM
    elif is_input_object_type(gql_type):
        kind = IRTypeKind.INPUT_OBJECT
    else:
        kind = IRTypeKind.SCALAR
    return IRType(name=gql_type.name, kind=kind, description=description)


def _convert_field(name: str, gql_field) -> IRField:
    arguments = [
        IRArgument(
            name=arg_name,
            type=_convert_type_ref(arg.type),
            description=arg.description,
        )
        for arg_name, arg in gql_field.args.items()
    ]
    return IRField(
        name=name,
        type=_convert_type_ref(gql_field.type),
        arguments=arguments,
        description=gql_field.description,
        deprecation_reason=gql_field.deprecation_reason,
    )


def _convert_type_ref(gql_type: GraphQLType) -> IRTypeRef:
    """Unwrap list and non-null modifiers into an IRTypeRef."""
    if is_non_null_type(gql_type):
        return IRTypeRef.non_null(_convert_type_ref(gql_type.of_type))
    if is_list_type(gql_type):
        return IRTypeRef.list_of(_convert_type_ref(gql_type.of_type))
    return IRTypeRef.named(gql_type.name)

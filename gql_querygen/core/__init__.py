"""Core modules for GraphQL operation generation."""

from .assembler import DocumentAssembler, OperationKind, operation_kind
from .config import GeneratorConfig
from .customised import load_customised_operations, parse_operation_names
from .errors import ConfigurationError, QueryGenError, SchemaError
from .generator import GeneratedDocument, QueryGenerator
from .introspection import fetch_introspection
from .ir import (
    IRArgument,
    IRField,
    IRSchema,
    IRType,
    IRTypeKind,
    IRTypeRef,
)
from .parser import SchemaParser, convert_schema
from .query_builder import QueryBuilder, TraversalState
from .selector import FieldSelector
from .writer import DocumentWriter

__all__ = [
    # Errors
    "QueryGenError",
    "ConfigurationError",
    "SchemaError",
    # IR types
    "IRArgument",
    "IRField",
    "IRSchema",
    "IRType",
    "IRTypeKind",
    "IRTypeRef",
    # Parser
    "SchemaParser",
    "convert_schema",
    "fetch_introspection",
    # Configuration
    "GeneratorConfig",
    "load_customised_operations",
    "parse_operation_names",
    # Generation
    "FieldSelector",
    "QueryBuilder",
    "TraversalState",
    "DocumentAssembler",
    "OperationKind",
    "operation_kind",
    "GeneratedDocument",
    "QueryGenerator",
    "DocumentWriter",
]

"""Exceptions raised by the query generator."""


class QueryGenError(Exception):
    """Base class for all generator errors."""


class ConfigurationError(QueryGenError):
    """Raised when an input path is missing or cannot be read."""


class SchemaError(QueryGenError):
    """Raised when the schema source cannot be parsed or loaded.

    The message carries the underlying diagnostic from graphql-core
    or the HTTP layer.
    """

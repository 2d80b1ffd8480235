"""Generate GraphQL operation documents from a schema."""

__version__ = "0.1.0"

"""Intermediate Representation (IR) for GraphQL schemas.

This module defines dataclasses that describe the parts of a GraphQL
schema the query generator walks: named types, their fields, field
arguments and type references. Type kinds and wrapper modifiers are
resolved once by the parser so the builder never inspects raw text.
"""

from dataclasses import dataclass, field
from enum import Enum

from .errors import SchemaError


class IRTypeKind(Enum):
    """Kind of named GraphQL type."""
    SCALAR = "scalar"
    ENUM = "enum"
    OBJECT = "object"
    INTERFACE = "interface"
    UNION = "union"
    INPUT_OBJECT = "input_object"


@dataclass(frozen=True)
class IRTypeRef:
    """A possibly wrapped reference to a named type.

    ``kind`` is "named", "list" or "non_null". Named references carry
    ``name``, wrappers carry ``of_type``.
    """
    kind: str
    name: str | None = None
    of_type: "IRTypeRef | None" = None

    @classmethod
    def named(cls, name: str) -> "IRTypeRef":
        return cls(kind="named", name=name)

    @classmethod
    def list_of(cls, of_type: "IRTypeRef") -> "IRTypeRef":
        return cls(kind="list", of_type=of_type)

    @classmethod
    def non_null(cls, of_type: "IRTypeRef") -> "IRTypeRef":
        return cls(kind="non_null", of_type=of_type)

    @property
    def named_type(self) -> str:
        """Return the bare type name with all wrappers stripped."""
        ref = self
        while ref.of_type is not None:
            ref = ref.of_type
        return ref.name

    def __str__(self) -> str:
        if self.kind == "list":
            return f"[{self.of_type}]"
        if self.kind == "non_null":
            return f"{self.of_type}!"
        return self.name


# Arguments and fields compare by identity: two arguments with the same
# name on different fields are different variables.
@dataclass(eq=False)
class IRArgument:
    """Represents an argument to a field."""
    name: str
    type: IRTypeRef
    description: str | None = None

    @property
    def type_signature(self) -> str:
        """Signature used in variable declarations, e.g. ``[ID!]!``."""
        return str(self.type)


@dataclass(eq=False)
class IRField:
    """Represents a field in a GraphQL object or interface type.

    ``description`` doubles as the audience annotation ("admin",
    "mobile", ...) checked by the field selector.
    """
    name: str
    type: IRTypeRef
    arguments: list[IRArgument] = field(default_factory=list)
    description: str | None = None
    deprecation_reason: str | None = None

    @property
    def type_name(self) -> str:
        return self.type.named_type

    @property
    def is_deprecated(self) -> bool:
        return self.deprecation_reason is not None


@dataclass
class IRType:
    """Represents a named GraphQL type of any kind."""
    name: str
    kind: IRTypeKind
    fields: dict[str, IRField] = field(default_factory=dict)
    possible_types: list[str] = field(default_factory=list)
    description: str | None = None

    @property
    def is_composite(self) -> bool:
        """True for types with selectable sub-fields."""
        return self.kind in (IRTypeKind.OBJECT, IRTypeKind.INTERFACE)

    @property
    def is_union(self) -> bool:
        return self.kind is IRTypeKind.UNION


@dataclass
class IRSchema:
    """Complete intermediate representation of a GraphQL schema."""
    types: dict[str, IRType] = field(default_factory=dict)
    query_type: str | None = None
    mutation_type: str | None = None
    subscription_type: str | None = None

    def get_type(self, name: str) -> IRType:
        """Look up a type by name."""
        try:
            return self.types[name]
        except KeyError:
            raise SchemaError(f"Unknown type '{name}'") from None

    def get_type_by_name(self, name: str) -> IRType | None:
        """Look up a type by name, returning None if it is not defined."""
        return self.types.get(name)

    @property
    def root_types(self) -> list[IRType]:
        """Return the root types present, in generation order.

        Mutations come first, then queries, then subscriptions.
        """
        names = (self.mutation_type, self.query_type, self.subscription_type)
        return [self.types[name] for name in names if name]

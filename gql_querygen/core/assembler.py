"""Document assembly.

Wraps a built selection fragment into a complete operation document
with its variable declarations.
"""

from enum import Enum

from .ir import IRArgument


class OperationKind(Enum):
    """Operation kinds, with the directory their documents are written to."""
    MUTATION = ("mutation", "mutations")
    QUERY = ("query", "queries")
    SUBSCRIPTION = ("subscription", "subscriptions")

    def __init__(self, keyword: str, directory: str):
        self.keyword = keyword
        self.directory = directory


def operation_kind(root_type_name: str) -> OperationKind | None:
    """Derive the operation kind from a root type name.

    The match is a case-insensitive substring test, checked in the
    order mutation, query, subscription: ``RootQueryType`` is a query.
    """
    lowered = root_type_name.lower()
    for kind in OperationKind:
        if kind.keyword in lowered:
            return kind
    return None


class DocumentAssembler:
    """Renders operation documents."""

    def assemble(
        self,
        kind: OperationKind,
        field_name: str,
        fragment: str,
        arguments: dict[str, IRArgument],
    ) -> str:
        """Build ``<keyword> <name>(<variables>){ <fragment> }``.

        The variable list is omitted when ``arguments`` is empty.
        """
        var_decls = self.build_variable_declarations(arguments)
        header = f"{kind.keyword} {field_name}"
        if var_decls:
            header += f"({var_decls})"
        return f"{header}{{\n{fragment}\n}}"

    @staticmethod
    def build_variable_declarations(arguments: dict[str, IRArgument]) -> str:
        """Build the variable declaration part: $accountId: ID!, $input: SomeInput!"""
        return ", ".join(
            f"${var_name}: {arg.type_signature}" for var_name, arg in arguments.items()
        )

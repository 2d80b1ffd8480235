"""Query builder for GraphQL operations.

Walks the type graph beneath a root field and renders the selection
set that exercises every reachable field, pruning cycles and anything
beyond the configured depth. Field arguments become document-wide
variables collected in a TraversalState.
"""

import logging
from dataclasses import dataclass, field
from typing import Generator, NamedTuple

from .config import GeneratorConfig
from .ir import IRArgument, IRField, IRSchema, IRType

log = logging.getLogger(__name__)

INDENT = "    "


@dataclass
class TraversalState:
    """Per-document state shared by every field in one operation.

    ``arguments`` maps each variable name to the argument it stands
    for, in registration order. ``duplicate_counts`` holds the last
    suffix handed out for a raw argument name.
    """
    arguments: dict[str, IRArgument] = field(default_factory=dict)
    duplicate_counts: dict[str, int] = field(default_factory=dict)

    def allocate_variable(self, argument: IRArgument) -> str:
        """Return the document-unique variable name for ``argument``."""
        for var_name, existing in self.arguments.items():
            if existing is argument:
                return var_name

        var_name = argument.name
        if var_name in self.duplicate_counts or var_name in self.arguments:
            index = self.duplicate_counts.get(var_name, 0) + 1
            while f"{argument.name}{index}" in self.arguments:
                index += 1
            self.duplicate_counts[argument.name] = index
            var_name = f"{argument.name}{index}"

        self.arguments[var_name] = argument
        return var_name


class _Step(NamedTuple):
    """A pending field expansion on the traversal stack."""
    field_name: str
    parent_type: IRType
    depth: int
    from_union: bool
    visited: frozenset


# A frame yields the child steps it needs and receives their fragments
_Frame = Generator[_Step, str, str]


class QueryBuilder:
    """Builds selection sets for root fields."""

    def __init__(self, schema: IRSchema, config: GeneratorConfig | None = None):
        self.schema = schema
        self.config = config or GeneratorConfig()

    def build(
        self,
        field_name: str,
        parent_type: IRType,
        state: TraversalState,
        *,
        depth: int = 1,
        from_union: bool = False,
    ) -> str:
        """Build the selection fragment for ``parent_type.field_name``.

        Args:
            field_name: The field to expand
            parent_type: The type that owns the field
            state: Document state; variables for every emitted argument
                are added to it
            depth: Nesting level of the field, 1 for a root field
            from_union: True when the field is reached through a union
                member

        Returns:
            The indented fragment, or "" if the field is pruned
        """
        root = _Step(field_name, parent_type, depth, from_union, frozenset())
        return self._run(root, state)

    def _run(self, root: _Step, state: TraversalState) -> str:
        """Drive field frames with an explicit stack instead of recursion."""
        stack: list[_Frame] = [self._expand(root, state)]
        result = None
        while stack:
            try:
                step = stack[-1].send(result)
            except StopIteration as stop:
                stack.pop()
                result = stop.value
                continue
            stack.append(self._expand(step, state))
            result = None
        return result

    def _expand(self, step: _Step, state: TraversalState) -> _Frame:
        field_name, parent_type, depth, from_union, visited = step
        ir_field = parent_type.fields[field_name]
        result_type = self.schema.get_type(ir_field.type_name)
        indent = INDENT * depth

        edge = f"{parent_type.name}To{field_name}"
        if result_type.is_composite or result_type.is_union:
            effective_depth = depth - 2 if from_union else depth
            if effective_depth > self.config.depth_limit:
                return ""
            if edge in visited and not self.config.include_cross_references:
                log.debug("Pruning revisited edge %s", edge)
                return ""

        child_fragment = ""
        if result_type.is_composite:
            children = []
            child_visited = visited | {edge}
            for child_name in self.selectable_fields(result_type):
                fragment = yield _Step(child_name, result_type, depth + 1, from_union, child_visited)
                if fragment:
                    children.append(fragment)
            child_fragment = "\n".join(children)

        query = ""
        # A composite field with nothing selected underneath is dropped
        if child_fragment or not result_type.is_composite:
            query = f"{indent}{field_name}"
            if ir_field.arguments:
                query += f"({self._build_field_arguments(ir_field, state)})"
            if child_fragment:
                query += f"{{\n{child_fragment}\n{indent}}}"

        if result_type.is_union and result_type.possible_types:
            member_indent = INDENT * (depth + 1)
            lines = [f"{member_indent}__typename"]
            member_visited = visited | {edge}
            for member_name in result_type.possible_types:
                member = self.schema.get_type(member_name)
                member_children = []
                for child_name in self.selectable_fields(member):
                    fragment = yield _Step(child_name, member, depth + 2, True, member_visited)
                    if fragment:
                        member_children.append(fragment)
                if member_children:
                    body = "\n".join(member_children)
                    lines.append(f"{member_indent}... on {member_name} {{\n{body}\n{member_indent}}}")
            query += "{\n" + "\n".join(lines) + f"\n{indent}}}"

        return query

    def selectable_fields(self, ir_type: IRType) -> list[str]:
        """Return the sub-fields of a type that survive deprecation filtering."""
        return [
            name
            for name, ir_field in ir_type.fields.items()
            if self.config.include_deprecated_fields or not ir_field.is_deprecated
        ]

    def _build_field_arguments(self, ir_field: IRField, state: TraversalState) -> str:
        """Build the call-site arguments: accountId: $accountId, input: $input"""
        arg_strs = []
        for arg in ir_field.arguments:
            var_name = state.allocate_variable(arg)
            arg_strs.append(f"{arg.name}: ${var_name}")
        return ", ".join(arg_strs)

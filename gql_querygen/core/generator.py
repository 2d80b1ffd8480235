"""Operation document generator.

Runs the field selector, query builder and document assembler over
every root type of a schema.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

from .assembler import DocumentAssembler, OperationKind, operation_kind
from .config import GeneratorConfig
from .ir import IRSchema, IRType
from .query_builder import QueryBuilder, TraversalState
from .selector import FieldSelector

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedDocument:
    """One operation document for a root field."""
    kind: OperationKind
    name: str
    text: str


class QueryGenerator:
    """Generates an operation document for every selected root field.

    Example:
        generator = QueryGenerator(ir, GeneratorConfig(depth_limit=5))
        for document in generator.generate():
            print(document.text)
    """

    def __init__(
        self,
        schema: IRSchema,
        config: GeneratorConfig | None = None,
        customised_operations: Iterable[str] = (),
    ):
        self.schema = schema
        self.config = config or GeneratorConfig()
        self.selector = FieldSelector(self.config, customised_operations)
        self.builder = QueryBuilder(schema, self.config)
        self.assembler = DocumentAssembler()

    def generate(self) -> Iterator[GeneratedDocument]:
        """Yield documents for mutations, then queries, then subscriptions."""
        for root_type in self.schema.root_types:
            yield from self.generate_for_root(root_type)

    def generate_for_root(self, root_type: IRType) -> Iterator[GeneratedDocument]:
        kind = operation_kind(root_type.name)
        if kind is None:
            log.warning(
                "Root type '%s' does not name a query, mutation or subscription; skipping",
                root_type.name,
            )
            return
        for field_name in self.selector.select(root_type):
            document = self.build_document(root_type, field_name, kind)
            if document is None:
                log.warning(
                    "Nothing selectable under %s.%s within the depth limit; skipping",
                    root_type.name,
                    field_name,
                )
                continue
            yield document

    def build_document(
        self, root_type: IRType, field_name: str, kind: OperationKind
    ) -> GeneratedDocument | None:
        """Build the document for a single root field with fresh state.

        Returns None when every selection under the field was pruned.
        """
        state = TraversalState()
        fragment = self.builder.build(field_name, root_type, state)
        if not fragment:
            return None
        text = self.assembler.assemble(kind, field_name, fragment, state.arguments)
        return GeneratedDocument(kind=kind, name=field_name, text=text)

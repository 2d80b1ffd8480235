"""Root field selection.

Decides which fields of a root type get an operation document, based
on audience annotations, deprecation and the customised-operation list.
"""

import logging
from typing import Iterable

from .config import GeneratorConfig
from .ir import IRField, IRType

log = logging.getLogger(__name__)

ADMIN_TAG = "admin"
WEBSITE_TAG = "website"
MOBILE_TAG = "mobile"
SHARED_TAG = "shared"


class FieldSelector:
    """Filters root fields according to the generator configuration."""

    def __init__(self, config: GeneratorConfig, customised_operations: Iterable[str] = ()):
        self.config = config
        self.customised_operations = frozenset(customised_operations)

    def select(self, root_type: IRType) -> list[str]:
        """Return the names of the root fields to generate, in schema order."""
        selected = []
        for name, ir_field in root_type.fields.items():
            if self.is_selected(ir_field):
                selected.append(name)
            else:
                log.debug("Skipping %s.%s", root_type.name, name)
        return selected

    def is_selected(self, ir_field: IRField) -> bool:
        """Check a single root field against every active rule."""
        config = self.config
        note = ir_field.description

        # Admin and website fields only appear in their own mode
        if config.is_admin != (note == ADMIN_TAG):
            return False
        if config.is_website != (note == WEBSITE_TAG):
            return False
        if config.is_mobile and not (note and MOBILE_TAG in note):
            return False
        if config.is_shared and note != SHARED_TAG:
            return False
        if ir_field.name in self.customised_operations:
            return False
        return config.include_deprecated_fields or not ir_field.is_deprecated

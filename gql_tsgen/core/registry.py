"""Per-run store of merged schema definitions.

A SchemaRegistry is created for one generation run, filled by the
SchemaParser and then read by the resolver and the generator.
"""

import logging
from dataclasses import dataclass, field

from .errors import DefinitionConflictError
from .ir import IREnum, IRField, IRType

logger = logging.getLogger(__name__)


@dataclass
class SchemaRegistry:
    """Merged object/interface types, enums and root fields.

    With ``skip_checks`` set, a repeated name keeps the first-seen
    definition without comparing shapes. Otherwise a repeated name must
    have an identical, identically ordered shape.
    """
    skip_checks: bool = False
    types: dict[str, IRType] = field(default_factory=dict)
    enums: dict[str, IREnum] = field(default_factory=dict)
    queries: dict[str, IRField] = field(default_factory=dict)
    mutations: dict[str, IRField] = field(default_factory=dict)

    def add_type(self, definition: IRType):
        """Register an object or interface type."""
        existing = self.types.get(definition.name)
        if existing is None:
            self.types[definition.name] = definition
            logger.debug("Added type/interface: %s", definition.name)
            return
        if not self.skip_checks and not existing.same_shape(definition):
            raise DefinitionConflictError("type or interface", definition.name)

    def add_enum(self, definition: IREnum):
        """Register an enum."""
        existing = self.enums.get(definition.name)
        if existing is None:
            self.enums[definition.name] = definition
            logger.debug("Added enum: %s", definition.name)
            return
        if not self.skip_checks and not existing.same_shape(definition):
            raise DefinitionConflictError("enum", definition.name)

    def add_query_field(self, root_field: IRField):
        """Add a Query root field; a later field with the same name wins."""
        self._add_root_field("Query", self.queries, root_field)

    def add_mutation_field(self, root_field: IRField):
        """Add a Mutation root field; a later field with the same name wins."""
        self._add_root_field("Mutation", self.mutations, root_field)

    @staticmethod
    def _add_root_field(root: str, fields: dict[str, IRField], root_field: IRField):
        previous = fields.get(root_field.name)
        if previous is not None and previous != root_field:
            logger.warning(
                "%s field %s redefined (%s -> %s), keeping the last definition",
                root, root_field.name, previous.raw_type, root_field.raw_type,
            )
        fields[root_field.name] = root_field
        logger.debug("Adding %s field: %s", root, root_field.name)

    def is_composite(self, type_name: str) -> bool:
        """Check if a name refers to a registered object/interface type."""
        return type_name in self.types

    def sorted_types(self) -> list[IRType]:
        return [self.types[name] for name in sorted(self.types)]

    def sorted_enums(self) -> list[IREnum]:
        return [self.enums[name] for name in sorted(self.enums)]

    def sorted_queries(self) -> list[IRField]:
        return [self.queries[name] for name in sorted(self.queries)]

    def sorted_mutations(self) -> list[IRField]:
        return [self.mutations[name] for name in sorted(self.mutations)]

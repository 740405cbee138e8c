"""Request-shape resolution.

Finds every object/interface type that needs a ``<Type>Request``
projection and derives those projections. A projection mirrors the
field names of its type; object fields point at the nested projection
and every other field becomes ``boolean | number``, which suits a
"select these fields" request pattern.
"""

import logging

from .ir import IRField, RequestField, RequestProjection, RequestProjectionSet, base_type_name, is_list_type
from .registry import SchemaRegistry

logger = logging.getLogger(__name__)

REQUEST_SCALAR = "boolean | number"


class RequestShapeResolver:
    """Derives request projections from a filled SchemaRegistry."""

    def __init__(self, registry: SchemaRegistry):
        self.registry = registry
        self._visited: set[str] = set()
        self._pending: set[str] = set()

    def resolve(self) -> RequestProjectionSet:
        """Return one projection per registered object/interface type.

        Types reachable from root fields and other types are found first;
        a final sweep adds the ones nothing points at. Repeated calls give
        the same result.
        """
        self._visited = set()
        self._pending = set()

        for ir_type in self.registry.sorted_types():
            self._expand_fields(ir_type.fields)
        self._expand_fields(self.registry.sorted_queries())
        self._expand_fields(self.registry.sorted_mutations())

        for type_name in self.registry.types:
            if type_name not in self._pending:
                logger.debug("Adding unreachable type to requests: %s", type_name)
                self._pending.add(type_name)

        return RequestProjectionSet(
            projections=[self.project(name) for name in sorted(self._pending)]
        )

    def _expand_fields(self, fields):
        for field in fields:
            self._expand(base_type_name(field.type_ref))

    def _expand(self, type_name: str):
        if not self.registry.is_composite(type_name):
            return
        self._pending.add(type_name)
        if type_name in self._visited:
            return
        self._visited.add(type_name)
        self._expand_fields(self.registry.types[type_name].fields)

    def project(self, type_name: str) -> RequestProjection:
        """Build the projection of a single registered type."""
        ir_type = self.registry.types[type_name]
        return RequestProjection(
            source_name=type_name,
            fields=tuple(self._project_field(f) for f in ir_type.fields),
        )

    def _project_field(self, field: IRField) -> RequestField:
        inner = base_type_name(field.type_ref)
        if self.registry.is_composite(inner):
            expression = f"{inner}Request"
        else:
            expression = REQUEST_SCALAR
        if is_list_type(field.type_ref):
            expression = f"Array<{expression}>"
        return RequestField(name=field.name, type_expression=expression)

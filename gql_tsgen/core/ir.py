"""Intermediate Representation (IR) for GraphQL schemas.

This module defines dataclasses that represent the parts of a GraphQL
schema the TypeScript generator cares about: object/interface types,
enums, root fields and the recursive type references of their fields.
"""

from dataclasses import dataclass, field

NON_NULL_MARKER = "!"

OBJECT = "Object"
INTERFACE = "Interface"


@dataclass(frozen=True)
class NamedTypeRef:
    """A bare type name, e.g. ``String`` or ``User``."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ListTypeRef:
    """A list wrapper, e.g. ``[String]``."""
    of_type: "TypeRef"

    def __str__(self) -> str:
        return f"[{self.of_type}]"


@dataclass(frozen=True)
class NonNullTypeRef:
    """A non-null wrapper, e.g. ``String!``."""
    of_type: "TypeRef"

    def __str__(self) -> str:
        return f"{self.of_type}{NON_NULL_MARKER}"


TypeRef = NamedTypeRef | ListTypeRef | NonNullTypeRef


def parse_type_ref(raw: str) -> TypeRef:
    """Build a TypeRef from its SDL text.

    Only a trailing ``!`` or a surrounding ``[...]`` is ever stripped, so
    the result always renders back to ``raw`` and malformed input simply
    ends up inside a NamedTypeRef.
    """
    if raw.endswith(NON_NULL_MARKER):
        return NonNullTypeRef(parse_type_ref(raw[: -len(NON_NULL_MARKER)]))
    if len(raw) >= 2 and raw.startswith("[") and raw.endswith("]"):
        return ListTypeRef(parse_type_ref(raw[1:-1]))
    return NamedTypeRef(raw)


def base_type_name(ref: TypeRef) -> str:
    """Strip every list and non-null wrapper and return the named type."""
    while not isinstance(ref, NamedTypeRef):
        ref = ref.of_type
    return ref.name


def is_list_type(ref: TypeRef) -> bool:
    """Return True if any list wrapper surrounds the named type."""
    while not isinstance(ref, NamedTypeRef):
        if isinstance(ref, ListTypeRef):
            return True
        ref = ref.of_type
    return False


@dataclass(frozen=True)
class IRField:
    """Represents a field of an object, interface or root type."""
    name: str
    type_ref: TypeRef

    @property
    def raw_type(self) -> str:
        """SDL text of the field type, e.g. ``[Project!]!``."""
        return str(self.type_ref)


@dataclass(frozen=True)
class IRType:
    """Represents a GraphQL object or interface type."""
    name: str
    fields: tuple[IRField, ...] = ()
    kind: str = OBJECT

    def same_shape(self, other: "IRType") -> bool:
        """Positional comparison of field names and raw field types."""
        if len(self.fields) != len(other.fields):
            return False
        return all(
            a.name == b.name and a.raw_type == b.raw_type
            for a, b in zip(self.fields, other.fields)
        )


@dataclass(frozen=True)
class IREnum:
    """Represents a GraphQL enum type."""
    name: str
    values: tuple[str, ...] = ()

    def same_shape(self, other: "IREnum") -> bool:
        return self.values == other.values


@dataclass(frozen=True)
class RequestField:
    """A field of a request projection; its type is already rendered."""
    name: str
    type_expression: str


@dataclass(frozen=True)
class RequestProjection:
    """A ``<Type>Request`` interface derived from an object/interface type."""
    source_name: str
    fields: tuple[RequestField, ...] = ()

    @property
    def name(self) -> str:
        return f"{self.source_name}Request"


@dataclass
class RequestProjectionSet:
    """Projections that must be emitted for one generation run."""
    projections: list[RequestProjection] = field(default_factory=list)

    def __iter__(self):
        return iter(self.projections)

    def __len__(self) -> int:
        return len(self.projections)

    def __contains__(self, type_name: object) -> bool:
        return any(p.source_name == type_name for p in self.projections)

    @property
    def names(self) -> list[str]:
        return [p.name for p in self.projections]

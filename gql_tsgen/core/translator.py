"""Translate GraphQL type references into TypeScript type expressions."""

from dataclasses import dataclass

from .ir import ListTypeRef, NonNullTypeRef, TypeRef, parse_type_ref
from .scalars import ScalarRegistry

_DEFAULT_SCALARS = ScalarRegistry()


@dataclass(frozen=True)
class TranslatedType:
    expression: str
    nullable: bool


def translate(ref: TypeRef | str, scalars: ScalarRegistry | None = None) -> TranslatedType:
    """Translate a type reference such as ``[String!]!``.

    Nullability is decided by the outermost wrapper only; inner non-null
    markers only affect the element type, which TypeScript renders the
    same way. Never raises, whatever the input looks like.
    """
    if isinstance(ref, str):
        ref = parse_type_ref(ref)
    scalars = scalars or _DEFAULT_SCALARS
    return TranslatedType(
        expression=type_expression(ref, scalars),
        nullable=not isinstance(ref, NonNullTypeRef),
    )


def type_expression(ref: TypeRef, scalars: ScalarRegistry | None = None) -> str:
    """Render the TypeScript expression for a reference, ignoring nullability."""
    scalars = scalars or _DEFAULT_SCALARS
    if isinstance(ref, NonNullTypeRef):
        return type_expression(ref.of_type, scalars)
    if isinstance(ref, ListTypeRef):
        return f"Array<{type_expression(ref.of_type, scalars)}>"
    return scalars.to_typescript(ref.name)

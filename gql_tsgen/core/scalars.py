"""Scalar mapping from GraphQL to TypeScript.

Built-in and commonly used custom scalars map to fixed TypeScript types.
Further scalars can be registered per run:

    registry = ScalarRegistry()
    registry.register("Date", "string")
    registry.get("Int")  # "number"

Names that are not registered are treated as user-defined types and
surface unchanged in the generated code.
"""

DEFAULT_SCALARS: dict[str, str] = {
    "String": "string",
    "Int": "number",
    "Float": "number",
    "Boolean": "boolean",
    "ID": "string",
    "DateTime": "string",
    "JSONObject": "Record<string, unknown>",
}


class ScalarRegistry:
    """Registry of GraphQL scalar names and their TypeScript types."""

    def __init__(self, overrides: dict[str, str] | None = None):
        self._types: dict[str, str] = dict(DEFAULT_SCALARS)
        for name, ts_type in (overrides or {}).items():
            self.register(name, ts_type)

    def register(self, scalar_name: str, ts_type: str):
        """Register (or replace) the TypeScript type for a scalar."""
        self._types[scalar_name] = ts_type

    def get(self, scalar_name: str) -> str | None:
        """Get the TypeScript type for a scalar, or None if not registered."""
        return self._types.get(scalar_name)

    def has(self, scalar_name: str) -> bool:
        return scalar_name in self._types

    def to_typescript(self, type_name: str) -> str:
        """Map a bare type name, passing unknown names through."""
        return self._types.get(type_name, type_name)


def parse_scalar_mapping(value: str) -> tuple[str, str]:
    """Split a ``Name=tsType`` option value."""
    name, sep, ts_type = value.partition("=")
    name, ts_type = name.strip(), ts_type.strip()
    if not sep or not name or not ts_type:
        raise ValueError(f"Invalid scalar mapping {value!r}, expected Name=tsType")
    return name, ts_type

"""Core modules for GraphQL to TypeScript generation."""

from .config import GenerateConfig
from .errors import (
    DefinitionConflictError,
    DocumentParseError,
    DocumentReadError,
    OutputWriteError,
    TsGenError,
)
from .generator import GenerationResult, TypeScriptGenerator, generate_types, write_output
from .hooks import (
    AddHeaderHook,
    FilterTypesHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
    hooks_from_config,
)
from .ir import (
    IREnum,
    IRField,
    IRType,
    ListTypeRef,
    NamedTypeRef,
    NonNullTypeRef,
    RequestField,
    RequestProjection,
    RequestProjectionSet,
    TypeRef,
    base_type_name,
    is_list_type,
    parse_type_ref,
)
from .parser import SchemaParser, type_ref_from_node
from .registry import SchemaRegistry
from .resolver import RequestShapeResolver
from .scalars import ScalarRegistry, parse_scalar_mapping
from .translator import TranslatedType, translate

__all__ = [
    # Config
    "GenerateConfig",
    # Errors
    "TsGenError",
    "DocumentReadError",
    "DocumentParseError",
    "DefinitionConflictError",
    "OutputWriteError",
    # IR types
    "IREnum",
    "IRField",
    "IRType",
    "TypeRef",
    "NamedTypeRef",
    "ListTypeRef",
    "NonNullTypeRef",
    "RequestField",
    "RequestProjection",
    "RequestProjectionSet",
    "parse_type_ref",
    "base_type_name",
    "is_list_type",
    # Scalars and translation
    "ScalarRegistry",
    "parse_scalar_mapping",
    "TranslatedType",
    "translate",
    # Parsing and merging
    "SchemaParser",
    "SchemaRegistry",
    "type_ref_from_node",
    # Resolution and generation
    "RequestShapeResolver",
    "TypeScriptGenerator",
    "GenerationResult",
    "generate_types",
    "write_output",
    # Hooks
    "PreGenerateHook",
    "PostGenerateHook",
    "AddHeaderHook",
    "FilterTypesHook",
    "HookRunner",
    "hooks_from_config",
]

"""GraphQL schema parser using graphql-core.

Reads SDL files, parses them and feeds their object, interface and enum
definitions into a SchemaRegistry.
"""

import logging
import os

from graphql import (
    DocumentNode,
    EnumTypeDefinitionNode,
    EnumTypeExtensionNode,
    GraphQLError,
    InterfaceTypeDefinitionNode,
    InterfaceTypeExtensionNode,
    ListTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    TypeNode,
    parse,
)

from .errors import DocumentParseError, DocumentReadError
from .ir import INTERFACE, OBJECT, IREnum, IRField, IRType, ListTypeRef, NamedTypeRef, NonNullTypeRef, TypeRef
from .registry import SchemaRegistry

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".graphql",)

_FIELD_DEFINITIONS = (ObjectTypeDefinitionNode, InterfaceTypeDefinitionNode)
_FIELD_EXTENSIONS = (ObjectTypeExtensionNode, InterfaceTypeExtensionNode)
_ALL_EXTENSIONS = (*_FIELD_EXTENSIONS, EnumTypeExtensionNode)


def type_ref_from_node(type_node: TypeNode) -> TypeRef:
    """Convert a graphql-core type node into a TypeRef."""
    if isinstance(type_node, NonNullTypeNode):
        return NonNullTypeRef(type_ref_from_node(type_node.type))
    if isinstance(type_node, ListTypeNode):
        return ListTypeRef(type_ref_from_node(type_node.type))
    return NamedTypeRef(type_node.name.value)


class SchemaParser:
    """Parses GraphQL schema files into a SchemaRegistry.

    Files are ingested in lexical path order, which decides the
    first-seen definition of every repeated type or enum.
    """

    def __init__(
        self,
        schema_path: str,
        registry: SchemaRegistry | None = None,
        extensions: tuple[str, ...] = DEFAULT_EXTENSIONS,
    ):
        """Initialize a parser with a path to a schema file or directory."""
        self.schema_path = str(schema_path)
        self.registry = registry if registry is not None else SchemaRegistry()
        self.extensions = tuple(extensions)
        self.current_file = ""

    def parse_all(self) -> SchemaRegistry:
        """Parse all schema files and return the filled registry."""
        for file_path in self.collect_schema_files():
            self.parse_file(file_path)
        return self.registry

    def collect_schema_files(self) -> list[str]:
        """Collect all schema files from the path, depth first.

        Entries of each directory are visited in name order, files and
        subdirectories alike, so `a/z.graphql` comes before `a.graphql`.
        """
        if os.path.isfile(self.schema_path):
            if self.schema_path.endswith(self.extensions):
                return [self.schema_path]
            return []
        files: list[str] = []
        self._walk(self.schema_path, files)
        return files

    def _walk(self, directory: str, files: list[str]):
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            raise DocumentReadError(directory, e.strerror or str(e)) from e

        for entry in entries:
            path = os.path.join(directory, entry.name)
            if entry.is_dir(follow_symlinks=False):
                self._walk(path, files)
            elif entry.name.endswith(self.extensions):
                files.append(path)

    def parse_file(self, file_path: str):
        """Read, parse and ingest a single schema file."""
        self.current_file = file_path
        logger.debug("Parsing file: %s", file_path)
        try:
            with open(file_path, encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentReadError(file_path, str(e)) from e

        try:
            document = parse(content)
        except GraphQLError as e:
            raise DocumentParseError(file_path, e.message) from e

        self.ingest(document)

    def ingest(self, document: DocumentNode):
        """Classify every definition of a parsed document."""
        for node, extra_nodes in self._collect_definitions(document):
            name = node.name.value
            if name.startswith("__"):
                continue
            logger.debug("Processing type: %s from file %s", name, self.current_file)
            if isinstance(node, _ALL_EXTENSIONS) and name not in ("Query", "Mutation"):
                raise DocumentParseError(
                    self.current_file, f"cannot extend type {name} because it is not defined in this file"
                )
            if isinstance(node, (EnumTypeDefinitionNode, EnumTypeExtensionNode)):
                self._process_enum(node, extra_nodes)
            elif name == "Query":
                for root_field in self._process_fields(node, extra_nodes):
                    self.registry.add_query_field(root_field)
            elif name == "Mutation":
                for root_field in self._process_fields(node, extra_nodes):
                    self.registry.add_mutation_field(root_field)
            else:
                self._process_type(node, extra_nodes)

    @staticmethod
    def _collect_definitions(document: DocumentNode) -> list[tuple]:
        """Pair each definition with the extensions of the same name.

        Extensions without a base definition in the document follow all
        definitions; only Query and Mutation may be extended that way.
        """
        field_extensions: dict[str, list] = {}
        enum_extensions: dict[str, list] = {}
        for node in document.definitions:
            if isinstance(node, _FIELD_EXTENSIONS):
                field_extensions.setdefault(node.name.value, []).append(node)
            elif isinstance(node, EnumTypeExtensionNode):
                enum_extensions.setdefault(node.name.value, []).append(node)

        result = []
        for node in document.definitions:
            if isinstance(node, _FIELD_DEFINITIONS):
                result.append((node, field_extensions.pop(node.name.value, [])))
            elif isinstance(node, EnumTypeDefinitionNode):
                result.append((node, enum_extensions.pop(node.name.value, [])))

        for orphans in (field_extensions, enum_extensions):
            for nodes in orphans.values():
                result.append((nodes[0], nodes[1:]))
        return result

    def _process_type(self, node, extra_nodes: list):
        if isinstance(node, (InterfaceTypeDefinitionNode, InterfaceTypeExtensionNode)):
            kind = INTERFACE
        else:
            kind = OBJECT
        self.registry.add_type(
            IRType(
                name=node.name.value,
                fields=tuple(self._process_fields(node, extra_nodes)),
                kind=kind,
            )
        )

    def _process_enum(self, node, extra_nodes: list):
        values = [v.name.value for n in [node, *extra_nodes] for v in n.values or ()]
        self.registry.add_enum(IREnum(name=node.name.value, values=tuple(values)))

    @staticmethod
    def _process_fields(node, extra_nodes: list) -> list[IRField]:
        """Process field definitions into the IRField list; arguments are dropped."""
        return [
            IRField(name=f.name.value, type_ref=type_ref_from_node(f.type))
            for n in [node, *extra_nodes]
            for f in n.fields or ()
        ]

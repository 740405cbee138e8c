"""Tests for reading schema files into the registry."""

import os

import pytest
from graphql import parse

from gql_tsgen.core.errors import DefinitionConflictError, DocumentParseError, DocumentReadError
from gql_tsgen.core.ir import INTERFACE, OBJECT, ListTypeRef, NamedTypeRef, NonNullTypeRef
from gql_tsgen.core.parser import SchemaParser, type_ref_from_node
from gql_tsgen.core.registry import SchemaRegistry


def field_type(source: str):
    document = parse(f"type T {{ f: {source} }}")
    return document.definitions[0].fields[0].type


# =============================================================================
# Tests: type nodes
# =============================================================================


class TestTypeRefFromNode:
    """Tests for type_ref_from_node."""

    def test_named(self):
        assert type_ref_from_node(field_type("User")) == NamedTypeRef("User")

    def test_wrapped(self):
        assert type_ref_from_node(field_type("[User!]!")) == NonNullTypeRef(
            ListTypeRef(NonNullTypeRef(NamedTypeRef("User")))
        )

    def test_renders_as_sdl(self):
        assert str(type_ref_from_node(field_type("[[Int]!]"))) == "[[Int]!]"


# =============================================================================
# Tests: file discovery
# =============================================================================


class TestCollectSchemaFiles:
    """Tests for collect_schema_files."""

    def test_depth_first_in_name_order(self, schema_dir, write_schema):
        write_schema("b.graphql", "type B { id: ID }")
        write_schema("a/z.graphql", "type Z { id: ID }")
        write_schema("a.graphql", "type A { id: ID }")
        write_schema("a/sub/y.graphql", "type Y { id: ID }")
        write_schema("notes.txt", "not a schema")

        files = SchemaParser(str(schema_dir)).collect_schema_files()
        assert [os.path.relpath(f, schema_dir) for f in files] == [
            os.path.join("a", "sub", "y.graphql"),
            os.path.join("a", "z.graphql"),
            "a.graphql",
            "b.graphql",
        ]

    def test_missing_extension_gives_no_files(self, write_schema):
        path = write_schema("notes.txt", "type A { id: ID }")
        assert SchemaParser(str(path)).collect_schema_files() == []

    def test_custom_extensions(self, schema_dir, write_schema):
        write_schema("a.graphql", "type A { id: ID }")
        write_schema("b.graphqls", "type B { id: ID }")
        files = SchemaParser(str(schema_dir), extensions=(".graphqls",)).collect_schema_files()
        assert len(files) == 1
        assert files[0].endswith("b.graphqls")

    def test_single_file(self, write_schema):
        path = write_schema("one.graphql", "type A { id: ID }")
        assert SchemaParser(str(path)).collect_schema_files() == [str(path)]


# =============================================================================
# Tests: classification
# =============================================================================


class TestParseAll:
    """Tests for ingesting whole schema directories."""

    def test_project_schema(self, schema_dir, write_schema, project_schema):
        write_schema("project.graphql", project_schema)
        registry = SchemaParser(str(schema_dir)).parse_all()

        assert sorted(registry.types) == ["Project", "User"]
        assert [f.name for f in registry.types["User"].fields] == ["id", "name"]
        assert registry.types["Project"].fields[1].raw_type == "User!"
        assert registry.queries["getProjects"].raw_type == "[Project!]!"
        assert registry.mutations["createUser"].raw_type == "User!"
        assert "Query" not in registry.types
        assert "Mutation" not in registry.types

    def test_enums_and_interfaces(self, schema_dir, write_schema):
        write_schema(
            "schema.graphql",
            """
            enum Status { ACTIVE INACTIVE }
            interface Node { id: ID! }
            type Item implements Node { id: ID! status: Status }
            """,
        )
        registry = SchemaParser(str(schema_dir)).parse_all()
        assert registry.enums["Status"].values == ("ACTIVE", "INACTIVE")
        assert registry.types["Node"].kind == INTERFACE
        assert registry.types["Item"].kind == OBJECT

    def test_other_kinds_are_ignored(self, schema_dir, write_schema):
        write_schema(
            "schema.graphql",
            """
            scalar Date
            input NewUser { name: String! }
            union Result = User | Project
            directive @auth on FIELD_DEFINITION
            type User { id: ID! }
            type Project { id: ID! }
            """,
        )
        registry = SchemaParser(str(schema_dir)).parse_all()
        assert sorted(registry.types) == ["Project", "User"]
        assert registry.enums == {}

    def test_extensions_are_folded(self, schema_dir, write_schema):
        write_schema(
            "schema.graphql",
            """
            type User { id: ID! }
            extend type User { email: String }
            enum Role { ADMIN }
            extend enum Role { GUEST }
            type Query { me: User }
            extend type Query { users: [User!]! }
            """,
        )
        registry = SchemaParser(str(schema_dir)).parse_all()
        assert [f.name for f in registry.types["User"].fields] == ["id", "email"]
        assert registry.enums["Role"].values == ("ADMIN", "GUEST")
        assert sorted(registry.queries) == ["me", "users"]

    def test_root_extension_in_another_file(self, schema_dir, write_schema):
        write_schema("a.graphql", "type Query { a: Int }")
        write_schema("b.graphql", "extend type Query { b: String! }")
        registry = SchemaParser(str(schema_dir)).parse_all()
        assert sorted(registry.queries) == ["a", "b"]

    def test_root_fields_last_writer_wins(self, schema_dir, write_schema):
        write_schema("a.graphql", "type Query { users: [String] }")
        write_schema("b.graphql", "type Query { users: [String!]! }")
        registry = SchemaParser(str(schema_dir)).parse_all()
        assert registry.queries["users"].raw_type == "[String!]!"

    def test_identical_documents_do_not_conflict(self, schema_dir, write_schema, project_schema):
        write_schema("a.graphql", project_schema)
        write_schema("b.graphql", project_schema)
        registry = SchemaParser(str(schema_dir)).parse_all()
        assert sorted(registry.types) == ["Project", "User"]

    def test_conflict_across_files(self, schema_dir, write_schema):
        write_schema("a.graphql", "type Foo { a: String }")
        write_schema("b.graphql", "type Foo { a: Int }")
        with pytest.raises(DefinitionConflictError, match="Foo"):
            SchemaParser(str(schema_dir)).parse_all()

    def test_permissive_keeps_first_file(self, schema_dir, write_schema):
        write_schema("b.graphql", "type Foo { a: Int }")
        write_schema("a.graphql", "type Foo { a: String }")
        registry = SchemaParser(str(schema_dir), SchemaRegistry(skip_checks=True)).parse_all()
        assert registry.types["Foo"].fields[0].raw_type == "String"

    def test_subdirectory_is_seen_before_sibling_file(self, schema_dir, write_schema):
        write_schema("a/z.graphql", "type Foo { a: Int }")
        write_schema("a.graphql", "type Foo { a: String }")
        registry = SchemaParser(str(schema_dir), SchemaRegistry(skip_checks=True)).parse_all()
        assert registry.types["Foo"].fields[0].raw_type == "Int"

    def test_arguments_are_dropped(self, schema_dir, write_schema):
        write_schema("a.graphql", "type Query { user(id: ID!): User }")
        registry = SchemaParser(str(schema_dir)).parse_all()
        assert registry.queries["user"].raw_type == "User"


# =============================================================================
# Tests: errors
# =============================================================================


class TestErrors:
    """Tests for read and parse failures."""

    def test_syntax_error_names_file(self, schema_dir, write_schema):
        write_schema("a.graphql", "type Good { id: ID }")
        bad = write_schema("b.graphql", "type Broken {")
        with pytest.raises(DocumentParseError) as exc_info:
            SchemaParser(str(schema_dir)).parse_all()
        assert exc_info.value.path == str(bad)
        assert str(bad) in str(exc_info.value)

    def test_unreadable_file(self, schema_dir):
        path = schema_dir / "binary.graphql"
        path.write_bytes(b"\xff\xfe\xfa type")
        with pytest.raises(DocumentReadError) as exc_info:
            SchemaParser(str(schema_dir)).parse_all()
        assert exc_info.value.path == str(path)

    def test_missing_file(self, schema_dir):
        with pytest.raises(DocumentReadError):
            SchemaParser(str(schema_dir)).parse_file(str(schema_dir / "missing.graphql"))

    def test_unreadable_directory(self, schema_dir, write_schema, monkeypatch):
        write_schema("a.graphql", "type A { id: ID }")
        write_schema("sub/b.graphql", "type B { id: ID }")
        real_scandir = os.scandir

        def scandir(path):
            if os.path.basename(path) == "sub":
                raise PermissionError(13, "Permission denied", path)
            return real_scandir(path)

        monkeypatch.setattr(os, "scandir", scandir)
        with pytest.raises(DocumentReadError) as exc_info:
            SchemaParser(str(schema_dir)).parse_all()
        assert exc_info.value.path == str(schema_dir / "sub")
        assert "Permission denied" in str(exc_info.value)

    def test_extending_type_from_another_file(self, schema_dir, write_schema):
        write_schema("a.graphql", "type User { id: ID! }")
        ext = write_schema("b.graphql", "extend type User { email: String }")
        with pytest.raises(DocumentParseError, match="cannot extend type User") as exc_info:
            SchemaParser(str(schema_dir)).parse_all()
        assert exc_info.value.path == str(ext)

    def test_extending_enum_from_another_file(self, schema_dir, write_schema):
        write_schema("a.graphql", "enum Role { ADMIN }")
        write_schema("b.graphql", "extend enum Role { GUEST }")
        with pytest.raises(DocumentParseError, match="cannot extend type Role"):
            SchemaParser(str(schema_dir)).parse_all()

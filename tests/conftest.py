"""Shared fixtures for gql-tsgen tests."""

import textwrap

import pytest

PROJECT_SCHEMA = """
type User {
  id: ID!
  name: String
}

type Project {
  id: ID!
  owner: User!
}

type Query {
  getProjects: [Project!]!
}

type Mutation {
  createUser(name: String!): User!
}
"""


@pytest.fixture
def project_schema():
    """User/Project schema with Query and Mutation roots."""
    return PROJECT_SCHEMA


@pytest.fixture
def schema_dir(tmp_path):
    """An empty directory to hold schema files."""
    path = tmp_path / "schemas"
    path.mkdir()
    return path


@pytest.fixture
def write_schema(schema_dir):
    """Write a schema file (relative to schema_dir) and return its path."""

    def _write(name: str, content: str):
        path = schema_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write

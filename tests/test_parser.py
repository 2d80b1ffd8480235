"""Tests for the schema parser."""

import pytest
from graphql import build_schema, introspection_from_schema

from gql_querygen.core.errors import ConfigurationError, SchemaError
from gql_querygen.core.ir import IRTypeKind
from gql_querygen.core.parser import SchemaParser

SDL = '''
    type Query {
        "mobile"
        users(ids: [ID!]!, first: Int): [User!]
        search(term: String): SearchResult
        legacy: String @deprecated(reason: "gone")
    }

    type User implements Node {
        id: ID!
        role: Role
    }

    interface Node { id: ID! }
    enum Role { ADMIN MEMBER }
    union SearchResult = User
    input UserFilter { role: Role }
    scalar DateTime
'''


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "schema.graphql"
    path.write_text(SDL)
    return path


class TestSchemaParser:
    """Tests for SchemaParser."""

    def test_parse_file(self, schema_file):
        ir = SchemaParser(str(schema_file)).parse_all()
        assert ir.query_type == "Query"
        assert ir.mutation_type is None
        assert [t.name for t in ir.root_types] == ["Query"]

    def test_type_kinds(self, schema_file):
        ir = SchemaParser(str(schema_file)).parse_all()
        assert ir.get_type("User").kind is IRTypeKind.OBJECT
        assert ir.get_type("Node").kind is IRTypeKind.INTERFACE
        assert ir.get_type("Role").kind is IRTypeKind.ENUM
        assert ir.get_type("SearchResult").kind is IRTypeKind.UNION
        assert ir.get_type("SearchResult").possible_types == ["User"]
        assert ir.get_type("UserFilter").kind is IRTypeKind.INPUT_OBJECT
        assert ir.get_type("DateTime").kind is IRTypeKind.SCALAR
        assert ir.get_type("String").kind is IRTypeKind.SCALAR

    def test_introspection_types_excluded(self, schema_file):
        ir = SchemaParser(str(schema_file)).parse_all()
        assert ir.get_type_by_name("__Schema") is None

    def test_field_details(self, schema_file):
        ir = SchemaParser(str(schema_file)).parse_all()
        users = ir.get_type("Query").fields["users"]
        assert users.description == "mobile"
        assert users.type_name == "User"
        assert str(users.type) == "[User!]"
        assert [(a.name, a.type_signature) for a in users.arguments] == [
            ("ids", "[ID!]!"),
            ("first", "Int"),
        ]
        legacy = ir.get_type("Query").fields["legacy"]
        assert legacy.is_deprecated
        assert legacy.deprecation_reason == "gone"

    def test_parse_directory(self, tmp_path):
        (tmp_path / "a_query.graphqls").write_text("type Query { user: User }")
        (tmp_path / "b_user.gql").write_text("type User { id: ID }")
        (tmp_path / "c_ext.graphql").write_text("extend type User { name: String }")
        (tmp_path / "notes.txt").write_text("not a schema")
        ir = SchemaParser(str(tmp_path)).parse_all()
        assert list(ir.get_type("User").fields) == ["id", "name"]

    def test_syntax_error(self, tmp_path):
        path = tmp_path / "bad.graphql"
        path.write_text("type Query {")
        with pytest.raises(SchemaError, match="bad.graphql"):
            SchemaParser(str(path)).parse_all()

    def test_invalid_sdl(self, tmp_path):
        path = tmp_path / "invalid.graphql"
        path.write_text("type Query { a: String a: Int }")
        with pytest.raises(SchemaError):
            SchemaParser(str(path)).parse_all()

    def test_missing_path(self, tmp_path):
        with pytest.raises(ConfigurationError):
            SchemaParser(str(tmp_path / "missing.graphql")).parse_all()

    def test_empty_directory(self, tmp_path):
        with pytest.raises(ConfigurationError):
            SchemaParser(str(tmp_path)).parse_all()

    def test_unknown_type_lookup(self, schema_file):
        ir = SchemaParser(str(schema_file)).parse_all()
        with pytest.raises(SchemaError, match="Missing"):
            ir.get_type("Missing")


class TestFromIntrospection:
    """Tests for building the IR from an introspection result."""

    def test_round_trip(self):
        introspection = introspection_from_schema(build_schema(SDL))
        ir = SchemaParser.from_introspection(introspection)
        users = ir.get_type("Query").fields["users"]
        assert users.description == "mobile"
        assert str(users.arguments[0].type) == "[ID!]!"
        assert ir.get_type("Query").fields["legacy"].is_deprecated

    def test_invalid_result(self):
        with pytest.raises(SchemaError):
            SchemaParser.from_introspection({"nothing": True})

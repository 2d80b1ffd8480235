"""Tests for loading customised operation names."""

import pytest

from gql_querygen.core.customised import load_customised_operations, parse_operation_names
from gql_querygen.core.errors import ConfigurationError


class TestParseOperationNames:
    """Tests for parse_operation_names."""

    def test_query_and_mutation(self):
        text = (
            "query getUser($id: ID!) {\n"
            "  user(id: $id) { id }\n"
            "}\n"
            "  mutation renameUser {\n"
            "  rename { id }\n"
            "}\n"
        )
        assert parse_operation_names(text) == ["getUser", "renameUser"]

    def test_ignores_other_lines(self):
        text = "subscription onUser {\n  queryCount\n}\nfragment F on User { id }\n"
        assert parse_operation_names(text) == []

    def test_name_attached_to_parenthesis(self):
        assert parse_operation_names("query list(first: Int){") == ["list"]

    def test_name_without_arguments(self):
        text = "mutation rename{\n    rename\n}\nquery   ping {\n    ping\n}\n"
        assert parse_operation_names(text) == ["rename", "ping"]

    def test_keyword_without_name(self):
        assert parse_operation_names("query {\n    ping\n}") == []


class TestLoadCustomisedOperations:
    """Tests for load_customised_operations."""

    def test_reads_every_file(self, tmp_path):
        (tmp_path / "user.gql").write_text("query user($id: ID){\n    user(id: $id)\n}")
        (tmp_path / "rename.graphql").write_text("mutation rename{\n    rename\n}")
        (tmp_path / "nested").mkdir()
        assert load_customised_operations(tmp_path) == {"user", "rename"}

    def test_missing_directory_is_empty(self, tmp_path):
        assert load_customised_operations(tmp_path / "missing") == set()

    def test_none_is_empty(self):
        assert load_customised_operations(None) == set()

    def test_file_instead_of_directory_is_fatal(self, tmp_path):
        path = tmp_path / "file.gql"
        path.write_text("query x{}")
        with pytest.raises(ConfigurationError):
            load_customised_operations(path)

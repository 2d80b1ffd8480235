"""Shared fixtures for generator tests."""

import pytest
from graphql import build_schema

from gql_querygen.core.parser import convert_schema


@pytest.fixture
def make_schema():
    """Return a factory building an IRSchema from SDL text."""
    def _make(sdl: str):
        return convert_schema(build_schema(sdl))
    return _make


@pytest.fixture
def blog_sdl():
    return '''
        type Query {
            user(id: ID!): User
            version: String
        }

        type User {
            id: ID!
            name: String
            posts(first: Int): [Post!]!
        }

        type Post {
            id: ID!
            title: String
            author: User
        }
    '''


@pytest.fixture
def blog_schema(make_schema, blog_sdl):
    return make_schema(blog_sdl)

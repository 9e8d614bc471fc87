from pathlib import Path

from graphql import GraphQLSchema

from . import resolvers  # noqa: F401 registers the Query and Mutation resolvers
from .build_schema import build_schema_from_file

SCHEMA_FILE = str(Path(__file__).parent / 'schema.graphql')


def make_schema() -> GraphQLSchema:
    return build_schema_from_file(SCHEMA_FILE)

import random

import pytest
from graphql import graphql_sync
from starlette.testclient import TestClient

from userql import UserStore, create_app, default_field_resolver, make_schema


@pytest.fixture(scope='session')
def schema():
    return make_schema()


@pytest.fixture
def store():
    return UserStore.with_seed()


@pytest.fixture
def context(store):
    return {'store': store, 'random': random.Random(1234)}


@pytest.fixture
def execute(schema, context):
    def _execute(source, variables=None):
        return graphql_sync(
            schema,
            source,
            context_value=context,
            variable_values=variables,
            field_resolver=default_field_resolver,
        )

    return _execute


@pytest.fixture
def client(store):
    return TestClient(create_app(store=store))

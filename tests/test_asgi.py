import json

import pytest
from starlette.testclient import TestClient

from userql import GraphQL, create_app

ADD_USER = """
mutation AddUser($firstName: String!, $lastName: String!, $email: String!) {
  addUser(firstName: $firstName, lastName: $lastName, email: $email) {
    firstName
    lastName
    email
  }
}
"""


def test_post_json(client):
    response = client.post('/graphql/', json={'query': '{ hello }'})
    assert response.status_code == 200
    assert response.json() == {'data': {'hello': 'Hello world!'}, 'errors': None}


def test_post_graphql_body(client):
    response = client.post(
        '/graphql/',
        content='{ queryUsers { email } }',
        headers={'Content-Type': 'application/graphql'},
    )
    assert response.status_code == 200
    assert response.json()['data'] == {'queryUsers': [{'email': 'GraphQL@isCool.com'}]}


def test_get_query_string(client):
    response = client.get('/graphql/', params={'query': '{ randomNumber }'})
    assert response.status_code == 200
    assert 0 <= response.json()['data']['randomNumber'] <= 10


def test_get_query_string_with_variables(client):
    response = client.get(
        '/graphql/',
        params={
            'query': 'query Users($x: Boolean!) { queryUsers @include(if: $x) { lastName } }',
            'variables': json.dumps({'x': True}),
        },
    )
    assert response.status_code == 200
    assert response.json()['data'] == {'queryUsers': [{'lastName': 'isCool'}]}


def test_mutation_updates_store(client, store):
    variables = {'firstName': 'Ada', 'lastName': 'Lovelace', 'email': 'ada@example.com'}
    response = client.post(
        '/graphql/',
        json={'query': ADD_USER, 'variables': variables, 'operationName': 'AddUser'},
    )
    assert response.status_code == 200
    assert response.json()['data'] == {'addUser': variables}
    assert len(store) == 2

    response = client.post('/graphql/', json={'query': '{ queryUsers { firstName } }'})
    assert response.json()['data']['queryUsers'] == [{'firstName': 'GraphQL'}, {'firstName': 'Ada'}]


def test_missing_argument_returns_errors(client, store):
    response = client.post(
        '/graphql/',
        json={'query': ADD_USER, 'variables': {'firstName': 'A', 'lastName': 'B'}},
    )
    assert response.status_code == 400
    body = response.json()
    assert body['data'] is None
    assert body['errors'][0]['message']
    assert 'locations' in body['errors'][0]
    assert len(store) == 1


def test_unknown_field_returns_errors(client):
    response = client.post('/graphql/', json={'query': '{ users { id } }'})
    assert response.status_code == 400
    assert response.json()['errors']


def test_playground(client):
    response = client.get('/graphql/', headers={'Accept': 'text/html'})
    assert response.status_code == 200
    assert 'GraphQL Playground' in response.text


def test_playground_disabled(store):
    client = TestClient(create_app(store=store, playground=False))
    response = client.get('/graphql/', headers={'Accept': 'text/html'})
    assert response.status_code == 404


def test_method_not_allowed(client):
    response = client.put('/graphql/', json={'query': '{ hello }'})
    assert response.status_code == 405


def test_unsupported_media_type(client):
    response = client.post(
        '/graphql/', content='{ hello }', headers={'Content-Type': 'text/plain'}
    )
    assert response.status_code == 415


def test_no_query(client):
    response = client.post('/graphql/', json={'variables': {}})
    assert response.status_code == 400
    assert response.text == 'No GraphQL query found in the request'


def test_invalid_json_body(client):
    response = client.post(
        '/graphql/', content='{not json', headers={'Content-Type': 'application/json'}
    )
    assert response.status_code == 400


def test_invalid_variables(client):
    response = client.get('/graphql/', params={'query': '{ hello }', 'variables': '{oops'})
    assert response.status_code == 400
    assert response.text == 'Variables are invalid JSON'


def test_each_app_owns_its_store():
    first, second = create_app(), create_app()
    assert first.store is not second.store
    assert len(first.store) == 1


def test_type_defs_or_schema_file_required():
    with pytest.raises(Exception, match='Must provide type def string or file.'):
        GraphQL()


def test_type_defs(store):
    app = GraphQL(type_defs='type Query { hello: String! }', store=store)
    response = TestClient(app).post('/graphql/', json={'query': '{ hello }'})
    assert response.json()['data'] == {'hello': 'Hello world!'}


def test_get_mutation_is_rejected(client, store):
    response = client.get(
        '/graphql/',
        params={'query': 'mutation { addUser(firstName: "x", lastName: "y", email: "z") { email } }'},
    )
    assert response.status_code == 405
    assert response.text == 'GET supports only query operation'
    assert len(store) == 1


def test_get_selects_query_among_operations(client, store):
    source = """
    query Hello { hello }
    mutation Add { addUser(firstName: "x", lastName: "y", email: "z") { email } }
    """
    response = client.get('/graphql/', params={'query': source, 'operationName': 'Hello'})
    assert response.status_code == 200
    assert response.json()['data'] == {'hello': 'Hello world!'}

    response = client.get('/graphql/', params={'query': source, 'operationName': 'Add'})
    assert response.status_code == 405
    assert len(store) == 1


def test_post_mutation_still_allowed(client, store):
    response = client.post(
        '/graphql/',
        json={'query': 'mutation { addUser(firstName: "x", lastName: "y", email: "z") { email } }'},
    )
    assert response.status_code == 200
    assert len(store) == 2


def test_query_must_be_a_string(client):
    response = client.post('/graphql/', json={'query': 5})
    assert response.status_code == 400
    assert response.text == 'Query must be a string'


def test_variables_must_be_an_object(client, store):
    response = client.post(
        '/graphql/',
        json={'query': 'query Q($x: Boolean!) { hello @include(if: $x) }', 'variables': [1]},
    )
    assert response.status_code == 400
    assert response.text == 'Variables must be an object'

    response = client.get(
        '/graphql/',
        params={'query': 'query Q($x: Boolean!) { hello @include(if: $x) }', 'variables': '[1]'},
    )
    assert response.status_code == 400
    assert len(store) == 1


def test_operation_name_must_be_a_string(client):
    response = client.post('/graphql/', json={'query': '{ hello }', 'operationName': 3})
    assert response.status_code == 400
    assert response.text == 'Operation name must be a string'

import json
import random as _random
import typing

from graphql import GraphQLError, GraphQLSchema, OperationType, graphql, parse
from graphql.utilities import get_operation_ast
from starlette import status
from starlette.applications import Starlette
from starlette.background import BackgroundTasks
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response
from starlette.routing import BaseRoute, Route
from starlette.types import Receive, Scope, Send

from .build_schema import build_schema, build_schema_from_file
from .middleware import log_middleware
from .playground import PLAYGROUND_HTML
from .resolver import default_field_resolver
from .schema import SCHEMA_FILE
from .store import UserStore


class GraphQL(Starlette):
    def __init__(
        self,
        *,
        type_defs: str = None,
        schema_file: str = None,
        store: UserStore = None,
        random: _random.Random = None,
        playground: bool = True,
        debug: bool = False,
        routes: typing.List[BaseRoute] = None,
        middleware: typing.List[typing.Callable] = None,
    ):
        routes = routes or []
        if type_defs:
            schema = build_schema(type_defs)
        elif schema_file:
            schema = build_schema_from_file(schema_file)
        else:
            raise Exception('Must provide type def string or file.')

        self.store = store if store is not None else UserStore.with_seed()
        routes.append(
            Route(
                '/graphql/',
                GraphQLApp(
                    schema,
                    store=self.store,
                    random=random,
                    playground=playground,
                    middleware=middleware,
                ),
            )
        )
        super().__init__(debug=debug, routes=routes)


class GraphQLApp:
    def __init__(
        self,
        schema: GraphQLSchema,
        store: UserStore,
        random: _random.Random = None,
        playground: bool = True,
        middleware: typing.List[typing.Callable] = None,
    ) -> None:
        self.schema = schema
        self.store = store
        self.random = random
        self.playground = playground
        self.middleware = [log_middleware] if middleware is None else middleware

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive=receive)
        response = await self.handle_graphql(request)
        await response(scope, receive, send)

    async def handle_graphql(self, request: Request) -> Response:
        if request.method in ('GET', 'HEAD'):
            if 'text/html' in request.headers.get('Accept', ''):
                if not self.playground:
                    return PlainTextResponse('Not Found', status_code=status.HTTP_404_NOT_FOUND)
                return HTMLResponse(PLAYGROUND_HTML)

            data = request.query_params  # type: typing.Mapping[str, typing.Any]

        elif request.method == 'POST':
            content_type = request.headers.get('Content-Type', '')

            if 'application/json' in content_type:
                try:
                    data = await request.json()
                except ValueError:
                    return PlainTextResponse(
                        'Request body is not valid JSON', status_code=status.HTTP_400_BAD_REQUEST,
                    )
            elif 'application/graphql' in content_type:
                body = await request.body()
                data = {'query': body.decode()}
            elif 'query' in request.query_params:
                data = request.query_params
            else:
                return PlainTextResponse(
                    'Unsupported Media Type', status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
                )
        else:
            return PlainTextResponse(
                'Method Not Allowed', status_code=status.HTTP_405_METHOD_NOT_ALLOWED
            )

        try:
            query = data['query']
            variables = data.get('variables')
            operation_name = data.get('operationName')
        except (KeyError, AttributeError, TypeError):
            return PlainTextResponse(
                'No GraphQL query found in the request', status_code=status.HTTP_400_BAD_REQUEST,
            )

        # Query strings carry variables as a JSON encoded string.
        if isinstance(variables, str):
            try:
                variables = json.loads(variables)
            except ValueError:
                return PlainTextResponse(
                    'Variables are invalid JSON', status_code=status.HTTP_400_BAD_REQUEST,
                )

        if not isinstance(query, str):
            return PlainTextResponse(
                'Query must be a string', status_code=status.HTTP_400_BAD_REQUEST
            )
        if variables is not None and not isinstance(variables, dict):
            return PlainTextResponse(
                'Variables must be an object', status_code=status.HTTP_400_BAD_REQUEST
            )
        if operation_name is not None and not isinstance(operation_name, str):
            return PlainTextResponse(
                'Operation name must be a string', status_code=status.HTTP_400_BAD_REQUEST
            )

        if request.method in ('GET', 'HEAD') and is_mutation(query, operation_name):
            return PlainTextResponse(
                'GET supports only query operation',
                status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            )

        background = BackgroundTasks()
        context = {
            'request': request,
            'background': background,
            'store': self.store,
            'random': self.random,
        }

        result = await graphql(
            self.schema,
            query,
            variable_values=variables,
            operation_name=operation_name,
            context_value=context,
            field_resolver=default_field_resolver,
            middleware=self.middleware,
        )
        error_data = [err.formatted for err in result.errors] if result.errors else None
        response_data = {'data': result.data, 'errors': error_data}
        status_code = status.HTTP_400_BAD_REQUEST if result.errors else status.HTTP_200_OK

        return JSONResponse(response_data, status_code=status_code, background=background)


def create_app(**kwargs) -> GraphQL:
    kwargs.setdefault('schema_file', SCHEMA_FILE)
    return GraphQL(**kwargs)


def is_mutation(query: str, operation_name: typing.Optional[str]) -> bool:
    try:
        document = parse(query)
    except GraphQLError:
        # Syntax errors are reported by the execution itself.
        return False
    operation = get_operation_ast(document, operation_name)
    return operation is not None and operation.operation == OperationType.MUTATION

from .asgi import GraphQL, GraphQLApp, create_app  # noqa
from .build_schema import build_schema, build_schema_from_file  # noqa
from .resolver import default_field_resolver, field_resolver, mutate, query  # noqa
from .schema import make_schema  # noqa
from .store import User, UserStore  # noqa

__version__ = '0.1.0'

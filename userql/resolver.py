from collections import defaultdict
from functools import partial, wraps
from inspect import isfunction
from typing import Dict, Mapping, Union

from graphql import (
    GraphQLFieldResolver,
    GraphQLSchema,
    assert_interface_type,
    assert_object_type,
    is_interface_type,
    is_object_type,
)

from .logging import get_logger
from .utils import recursive_to_snake_case, to_camel_case, to_snake_case

FieldResolverMap = Dict[str, Dict[str, GraphQLFieldResolver]]

field_resolver_map: FieldResolverMap = defaultdict(dict)

logger = get_logger(__name__)


def field_resolver(type_name: str, func_or_field: Union[GraphQLFieldResolver, str] = None):
    def wrap(func: GraphQLFieldResolver):
        @wraps(func)
        def resolver(*args, **kwargs):
            kwargs = recursive_to_snake_case(kwargs)
            try:
                return func(*args, **kwargs)
            except Exception:
                logger.exception('resolver failed', type=type_name, field=name)
                raise

        if isinstance(func_or_field, str):
            name = to_camel_case(func_or_field)
        else:
            name = to_camel_case(func.__name__)

        field_resolver_map[type_name][name] = resolver
        return resolver

    if isfunction(func_or_field):
        return wrap(func_or_field)

    return wrap


mutate = partial(field_resolver, 'Mutation')
query = partial(field_resolver, 'Query')


def register_resolvers(schema: GraphQLSchema):
    for type_name, field_resolvers in field_resolver_map.items():
        type_ = schema.get_type(type_name)
        if is_object_type(type_):
            type_ = assert_object_type(type_)
        elif is_interface_type(type_):
            type_ = assert_interface_type(type_)
        else:
            continue

        for name, resolver in field_resolvers.items():
            field = type_.fields.get(name)
            if not field:
                continue
            field.resolve = resolver


def get_field_value(source, field_name):
    return (
        source.get(field_name) if isinstance(source, Mapping) else getattr(source, field_name, None)
    )


def default_field_resolver(source, info, **args):
    """Default field resolver.

    Takes the property of the source object named after the field, trying the
    snake_case spelling first and the schema spelling second. If the value is
    callable it is called with the resolve info and the field arguments.

    For mappings the field names are used as keys, for all other objects they are
    used as attribute names.
    """
    value = get_field_value(source, to_snake_case(info.field_name))
    if value is None:
        value = get_field_value(source, info.field_name)

    if callable(value):
        return value(info, **args)
    return value

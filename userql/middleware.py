from .logging import get_logger

logger = get_logger(__name__)

ROOT_TYPES = ('Query', 'Mutation')


def log_middleware(resolve, parent, info, **kwargs):
    """Log every root field resolution, nested fields pass straight through."""
    if info.parent_type.name in ROOT_TYPES:
        logger.info(
            'resolve',
            type=info.parent_type.name,
            field=info.field_name,
            operation=info.operation.name.value if info.operation.name else None,
        )
    return resolve(parent, info, **kwargs)

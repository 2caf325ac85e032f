"""Database layer - SurrealDB models, query builders and executors."""

from .models import (
    AbstractBaseSurrealEntity,
    BaseSurrealEntity,
    RecordId,
)
from .query_builder import QueryBuilder, query
from .query_executor import execute_builder, execute_query, execute_update
from .specialized_builders import FullTextQueryBuilder, UpdateQueryBuilder

__all__ = [
    "AbstractBaseSurrealEntity",
    "BaseSurrealEntity",
    "FullTextQueryBuilder",
    "QueryBuilder",
    "RecordId",
    "UpdateQueryBuilder",
    "execute_builder",
    "execute_query",
    "execute_update",
    "query",
]

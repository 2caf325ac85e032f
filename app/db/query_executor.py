"""Safe query executor for SurrealDB with parameterized queries."""

import logging
import time
from typing import TYPE_CHECKING

from server.config import Settings

if TYPE_CHECKING:
    from .query_builder import QueryBuilder

logger = logging.getLogger(__name__)


def _normalize_rows(result: object) -> list[dict[str, object]]:
    """
    Turn an SDK query response into a list of rows.

    Depending on the SDK version the response is either the rows of the
    first statement or a list of per-statement ``{"status", "result"}``
    envelopes.
    """
    if result is None:
        return []
    if isinstance(result, dict):
        return [result]
    if not isinstance(result, list) or not result:
        return []

    first = result[0]
    if isinstance(first, dict) and "result" in first and "status" in first:
        if first["status"] != "OK":
            raise RuntimeError(f"SurrealDB query failed: {first['result']}")
        rows = first["result"]
        if rows is None:
            return []
        return rows if isinstance(rows, list) else [rows]
    return result


def _detect_query_type(query: str) -> str:
    """
    Detect query type from query string.

    Args:
        query: SurrealQL query string

    Returns:
        Query type identifier

    """
    query_upper = query.lstrip().upper()
    if query_upper.startswith("CREATE"):
        return "create"
    if query_upper.startswith("UPDATE"):
        return "update"
    if "SEARCH::SCORE" in query_upper:
        return "fulltext"
    if "STRING::CONTAINS" in query_upper:
        return "substring"
    return "exact_match"


async def execute_query(
    query: str, variables: dict[str, object] | None = None
) -> list[dict[str, object]]:
    """
    Execute a parameterized SurrealDB query safely with performance monitoring.

    Args:
        query: SurrealQL query with $param placeholders
        variables: Dictionary of parameters to bind

    Returns:
        List of result rows

    Example:
        ```python
        rows = await execute_query(
            "SELECT * FROM mentor WHERE status = $status LIMIT 10",
            {"status": True},
        )
        ```

    """
    from server.db import db_manager

    db = db_manager.get_db()
    start_time = time.perf_counter()
    query_type = _detect_query_type(query)

    try:
        if variables:
            result = await db.query(query, variables)
        else:
            result = await db.query(query)
        rows = _normalize_rows(result)
    except Exception:
        execution_time = time.perf_counter() - start_time
        logger.exception(
            "Query execution failed: type=%s, time=%.3fs, query=%s",
            query_type,
            execution_time,
            query[:200],
        )
        raise

    execution_time = time.perf_counter() - start_time
    logger.debug(
        "Query executed: type=%s, time=%.3fs, rows=%d, query_length=%d",
        query_type,
        execution_time,
        len(rows),
        len(query),
    )
    if execution_time > Settings.slow_query_seconds:
        logger.warning(
            "Slow query detected: type=%s, time=%.3fs, rows=%d, query=%s",
            query_type,
            execution_time,
            len(rows),
            query[:200],
        )
    return rows


async def execute_builder(builder: "QueryBuilder") -> list[dict[str, object]]:
    """Build and run a query builder."""
    query, params = builder.build()
    return await execute_query(query, params)


async def execute_update(builder: "QueryBuilder") -> dict[str, object] | None:
    """
    Run a single-record update and return the updated row.

    Returns:
        The record after the update, or None when nothing matched

    """
    rows = await execute_builder(builder)
    return rows[0] if rows else None

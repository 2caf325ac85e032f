"""Base query builder for safe SurrealDB queries."""

import logging
import re
from collections.abc import Iterable
from typing import Self

from .field_validation import sanitize_field_name, validate_field_name
from .metadata import _get_table_name, _model_classes
from .models import to_surreal_value

logger = logging.getLogger(__name__)

_TABLE_NAME = re.compile(r"^[a-zA-Z0-9_-]+$")


class QueryBuilder:
    """ORM-like query builder for safe SurrealDB queries."""

    allowed_operators = frozenset({"=", "!=", ">", "<", ">=", "<=", "IN", "NOT IN"})

    def __init__(self, table: str) -> None:
        """
        Initialize query builder.

        Args:
            table: Table name

        """
        self._validate_table(table)
        self.table = table
        self._where_parts: list[str] = []
        self._params: dict[str, object] = {}
        self._param_counter = 0
        self._omit_fields: list[str] = []
        self._order_by: list[str] = []
        self._limit_value: int | None = None
        self._skip_value: int | None = None

    @staticmethod
    def _validate_table(table: str) -> None:
        """Validate table name format and warn about unknown tables."""
        if not isinstance(table, str) or not _TABLE_NAME.match(table):
            raise ValueError(f"Invalid table name format: {table}")

        allowed_tables = {_get_table_name(model) for model in _model_classes()}
        if table not in allowed_tables:
            logger.warning(
                "Table '%s' not found in registered models. Allowed: %s",
                table,
                sorted(allowed_tables),
            )

    @staticmethod
    def _field(field: str) -> str:
        if not validate_field_name(field):
            raise ValueError(f"Unsafe field name: {field}")
        return sanitize_field_name(field)

    def _add_param(self, value: object) -> str:
        """
        Bind a value and return its placeholder.

        Args:
            value: Parameter value (record ids are converted for the SDK)

        Returns:
            Parameter placeholder name (e.g., "$param_0")

        """
        param_name = f"param_{self._param_counter}"
        self._params[param_name] = to_surreal_value(value)
        self._param_counter += 1
        return f"${param_name}"

    def where_eq(self, field: str, value: object) -> Self:
        """Add WHERE field = value condition."""
        return self.where(field, value, operator="=")

    def where(self, field: str, value: object, operator: str = "=") -> Self:
        """
        Add a WHERE condition.

        Args:
            field: Field name (must be validated)
            value: Value to compare
            operator: Comparison operator (=, !=, >, <, IN, etc.)

        Returns:
            Self for method chaining

        """
        sanitized_field = self._field(field)

        operator = operator.upper() if isinstance(operator, str) else operator
        if operator not in self.allowed_operators:
            raise ValueError(f"Unsafe operator: {operator}")
        if operator in {"IN", "NOT IN"} and not isinstance(value, list | tuple | set):
            raise ValueError(f"{operator} operator requires a list value")

        if operator in {"IN", "NOT IN"}:
            value = list(value)
        placeholder = self._add_param(value)
        self._where_parts.append(" ".join([sanitized_field, operator, placeholder]))
        return self

    def where_in(self, field: str, values: Iterable[object]) -> Self:
        """Add WHERE IN condition."""
        return self.where(field, list(values), operator="IN")

    def where_contains_any(self, fields: Iterable[str], text: str) -> Self:
        """
        Match records where any of ``fields`` contains ``text``.

        The comparison is case-insensitive and literal: ``text`` is bound as a
        parameter and never interpreted as a pattern.

        Args:
            fields: Fields to look in (OR-ed together)
            text: Substring to look for

        Returns:
            Self for method chaining

        """
        sanitized_fields = [self._field(field) for field in fields]
        if not sanitized_fields:
            raise ValueError("At least one field is required")

        needle = self._add_param(str(text).lower())
        clauses = [
            f"string::contains(string::lowercase({field}), {needle})"
            for field in sanitized_fields
        ]
        self._where_parts.append("(" + " OR ".join(clauses) + ")")
        return self

    def omit(self, *fields: str) -> Self:
        """Exclude fields from the selected records."""
        self._omit_fields = [self._field(field) for field in fields]
        return self

    def order_by(self, field: str, direction: str = "ASC") -> Self:
        """
        Add ORDER BY clause.

        Args:
            field: Field name to order by
            direction: ASC or DESC

        Returns:
            Self for method chaining

        """
        sanitized_field = self._field(field)
        if direction.upper() not in {"ASC", "DESC"}:
            raise ValueError(f"Invalid direction: {direction}")

        self._order_by.append(f"{sanitized_field} {direction.upper()}")
        return self

    def limit(self, count: int) -> Self:
        """Add LIMIT clause."""
        if not isinstance(count, int) or isinstance(count, bool) or count < 0:
            raise ValueError("Limit must be a non-negative integer")
        self._limit_value = count
        return self

    def skip(self, count: int) -> Self:
        """Add START clause."""
        if not isinstance(count, int) or isinstance(count, bool) or count < 0:
            raise ValueError("Skip must be a non-negative integer")
        self._skip_value = count
        return self

    def _build_select_clause(self) -> str:
        return "*"

    def _build_omit_clause(self) -> str:
        if not self._omit_fields:
            return ""
        return "OMIT " + ", ".join(self._omit_fields)

    def _build_where_clause(self, where_parts: list[str] | None = None) -> str:
        parts = self._where_parts if where_parts is None else where_parts
        if not parts:
            return ""
        return "WHERE " + " AND ".join(parts)

    def _build_order_by_clause(self) -> str:
        if not self._order_by:
            return ""
        return "ORDER BY " + ", ".join(self._order_by)

    def _build_paging_clause(self) -> str:
        # SurrealQL expects LIMIT before START
        parts = []
        if self._limit_value is not None:
            parts.append(f"LIMIT {self._limit_value}")
        if self._skip_value is not None:
            parts.append(f"START {self._skip_value}")
        return " ".join(parts)

    def _join(self, *parts: str) -> str:
        return " ".join(part for part in parts if part)

    def build(self) -> tuple[str, dict[str, object]]:
        """
        Build the final query string and parameters.

        Returns:
            Tuple of (query string, parameters dict)

        """
        query = self._join(
            "SELECT",
            self._build_select_clause(),
            self._build_omit_clause(),
            "FROM",
            self.table,
            self._build_where_clause(),
            self._build_order_by_clause(),
            self._build_paging_clause(),
        )
        return query, self._params


def query(table: str) -> QueryBuilder:
    """
    Create a QueryBuilder instance (functional entry point).

    Example:
        ```python
        query_sql, params = (
            query("mentor")
            .where_eq("status", True)
            .order_by("updated_at", "DESC")
            .skip(10)
            .limit(10)
            .build()
        )
        ```

    """
    return QueryBuilder(table)

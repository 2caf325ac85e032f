"""Specialized query builders for fulltext search and conditional updates."""

from typing import Self

from .metadata import _get_fulltext_fields, _get_model_for_table, _model_classes
from .models import RecordId
from .query_builder import QueryBuilder


class FullTextQueryBuilder(QueryBuilder):
    """Specialized query builder for fulltext search."""

    def __init__(
        self, table: str | None = None, fields: list[str] | None = None
    ) -> None:
        """
        Initialize fulltext query builder.

        Args:
            table: Table name (auto-detected from model with fulltext fields if None)
            fields: Indexed fields to match (read from model metadata if None)

        """
        if table is None:
            for model_class in _model_classes():
                if _get_fulltext_fields(model_class):
                    table = model_class._get_table_name()
                    break
            else:
                raise ValueError(
                    "No model with 'surreal_fulltext_field' metadata found. "
                    "Please specify table name explicitly or add "
                    "'surreal_fulltext_field: True' to field json_schema_extra."
                )

        if fields is None:
            model_class = _get_model_for_table(table)
            fields = _get_fulltext_fields(model_class) if model_class else []
        if not fields:
            raise ValueError(f"No fulltext fields configured for table '{table}'")

        super().__init__(table)
        self._text_fields = [self._field(field) for field in fields]
        self._query_text_param: str | None = None

    def search(self, query_text: str) -> Self:
        """
        Add fulltext search condition.

        Args:
            query_text: Text to search for

        Returns:
            Self for method chaining

        """
        self._query_text_param = self._add_param(query_text)
        return self

    def _build_score_expression(self) -> str:
        return " + ".join(
            f"search::score({ref})" for ref in range(len(self._text_fields))
        )

    def build(self) -> tuple[str, dict[str, object]]:
        """
        Build fulltext search query.

        Each indexed field gets its own match reference so the relevance score
        is the sum of the per-field BM25 scores.

        Returns:
            Tuple of (query string, parameters dict)

        """
        where_parts = list(self._where_parts)
        select_clause = self._build_select_clause()
        order_by_clause = self._build_order_by_clause()

        if self._query_text_param:
            matches = [
                f"{field} @{ref}@ {self._query_text_param}"
                for ref, field in enumerate(self._text_fields)
            ]
            where_parts.insert(0, "(" + " OR ".join(matches) + ")")
            select_clause = " ".join([
                select_clause + ",",
                "(" + self._build_score_expression() + ")",
                "AS",
                "relevance_score",
            ])
            if not order_by_clause:
                order_by_clause = "ORDER BY relevance_score DESC"

        query = self._join(
            "SELECT",
            select_clause,
            self._build_omit_clause(),
            "FROM",
            self.table,
            self._build_where_clause(where_parts),
            order_by_clause,
            self._build_paging_clause(),
        )
        return query, self._params


class UpdateQueryBuilder(QueryBuilder):
    """Builder for a single-record ``UPDATE ... MERGE`` guarded by conditions."""

    def __init__(self, record_id: RecordId | str) -> None:
        """
        Initialize update builder.

        Args:
            record_id: Record to update (``table:key``)

        """
        record_id = RecordId(record_id)
        super().__init__(record_id.table)
        self.record_id = record_id
        self._record_param = self._add_param(record_id)
        self._merge_param: str | None = None

    def merge(self, data: dict[str, object]) -> Self:
        """
        Set the fields to merge into the record.

        Args:
            data: Field values; unspecified fields are left untouched

        Returns:
            Self for method chaining

        """
        for field in data:
            self._field(field)
        self._merge_param = self._add_param(dict(data))
        return self

    def build(self) -> tuple[str, dict[str, object]]:
        """
        Build the update statement.

        The statement returns the record after the update, or nothing when the
        record is missing or the conditions do not hold.

        Returns:
            Tuple of (query string, parameters dict)

        """
        if self._merge_param is None:
            raise ValueError("Nothing to update: call merge() first")

        query = self._join(
            "UPDATE",
            self._record_param,
            "MERGE",
            self._merge_param,
            self._build_where_clause(),
            "RETURN AFTER",
        )
        return query, self._params

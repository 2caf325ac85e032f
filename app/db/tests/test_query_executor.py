"""Tests for the query executor."""

import pytest

from db.query_executor import _detect_query_type, _normalize_rows, execute_query


class TestNormalizeRows:
    """Test cases for SDK response normalization."""

    def test_plain_rows(self) -> None:
        """Test rows returned directly."""
        assert _normalize_rows([{"id": "mentor:1"}]) == [{"id": "mentor:1"}]

    def test_statement_envelope(self) -> None:
        """Test per-statement envelopes are unwrapped."""
        result = [{"status": "OK", "time": "1ms", "result": [{"id": "mentor:1"}]}]

        assert _normalize_rows(result) == [{"id": "mentor:1"}]

    def test_failed_statement(self) -> None:
        """Test an error envelope raises."""
        with pytest.raises(RuntimeError, match="boom"):
            _normalize_rows([{"status": "ERR", "result": "boom"}])

    @pytest.mark.parametrize("result", [None, [], "", 0])
    def test_empty(self, result: object) -> None:
        """Test empty responses."""
        assert _normalize_rows(result) == []

    def test_single_record(self) -> None:
        """Test a single record dict."""
        assert _normalize_rows({"id": "mentor:1"}) == [{"id": "mentor:1"}]


class TestDetectQueryType:
    """Test cases for query classification."""

    @pytest.mark.parametrize(
        ("query_sql", "expected"),
        [
            ("CREATE type::table($table) CONTENT $data", "create"),
            ("UPDATE $param_0 MERGE $param_1 RETURN AFTER", "update"),
            ("SELECT *, (search::score(0)) AS relevance_score FROM mentor", "fulltext"),
            ("SELECT * FROM mentor WHERE (string::contains(a, $p))", "substring"),
            ("SELECT * FROM mentor WHERE status = $param_0", "exact_match"),
        ],
    )
    def test_types(self, query_sql: str, expected: str) -> None:
        """Test each query family."""
        assert _detect_query_type(query_sql) == expected


class TestExecuteQuery:
    """Test cases for execute_query."""

    @pytest.mark.asyncio
    async def test_passes_variables(self, fake_db) -> None:  # noqa: ANN001
        """Test the query and parameters reach the connection."""
        fake_db.respond([{"id": "mentor:1"}])

        rows = await execute_query("SELECT * FROM mentor WHERE a = $a", {"a": 1})

        assert rows == [{"id": "mentor:1"}]
        assert fake_db.calls == [("SELECT * FROM mentor WHERE a = $a", {"a": 1})]

    @pytest.mark.asyncio
    async def test_errors_propagate(self, fake_db) -> None:  # noqa: ANN001
        """Test persistence failures are re-raised unchanged."""
        fake_db.error = ConnectionError("socket closed")

        with pytest.raises(ConnectionError, match="socket closed"):
            await execute_query("SELECT * FROM mentor")

    @pytest.mark.asyncio
    async def test_requires_connection(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test using the executor before connecting."""
        from server.db import db_manager

        monkeypatch.setattr(db_manager, "async_db", None)

        with pytest.raises(RuntimeError, match="Database not connected"):
            await execute_query("SELECT * FROM mentor")

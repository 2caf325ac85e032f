"""Tests for UpdateQueryBuilder."""

import pytest

from db.models import RecordId
from db.specialized_builders import UpdateQueryBuilder


class TestUpdateQueryBuilder:
    """Test cases for UpdateQueryBuilder."""

    def test_conditional_merge(self) -> None:
        """Test the update is guarded and returns the new record."""
        builder = (
            UpdateQueryBuilder("mentor:abc")
            .merge({"name": "X"})
            .where_eq("status", True)
        )
        query_sql, params = builder.build()

        assert query_sql == (
            "UPDATE $param_0 MERGE $param_1 WHERE status = $param_2 RETURN AFTER"
        )
        assert (params["param_0"].table_name, params["param_0"].id) == (
            "mentor",
            "abc",
        )
        assert params["param_1"] == {"name": "X"}
        assert params["param_2"] is True

    def test_merge_converts_record_ids(self) -> None:
        """Test record ids inside the merged data are converted."""
        builder = UpdateQueryBuilder(RecordId("mentor:abc")).merge(
            {"updated_by": RecordId("user:1")}
        )
        _query_sql, params = builder.build()

        updated_by = params["param_1"]["updated_by"]
        assert (updated_by.table_name, updated_by.id) == ("user", "1")

    def test_table_from_record(self) -> None:
        """Test the table is taken from the record id."""
        assert UpdateQueryBuilder("mentor:abc").table == "mentor"

    def test_requires_merge(self) -> None:
        """Test building without data."""
        with pytest.raises(ValueError, match="Nothing to update"):
            UpdateQueryBuilder("mentor:abc").build()

    def test_unsafe_merge_field(self) -> None:
        """Test merged field names are validated."""
        with pytest.raises(ValueError, match="Unsafe field name"):
            UpdateQueryBuilder("mentor:abc").merge({"name = 1; --": "x"})

    def test_invalid_record_id(self) -> None:
        """Test a record id without a table."""
        with pytest.raises(ValueError, match="Invalid record id"):
            UpdateQueryBuilder("abc")

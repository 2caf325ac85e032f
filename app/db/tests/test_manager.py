"""Tests for DatabaseManager and settings wiring."""

import pytest

from db.manager import DatabaseManager
from server.config import Settings
from server.db import db_manager, init_db_manager


class TestDatabaseManager:
    """Test cases for the connection holder."""

    def test_singleton(self) -> None:
        """Test the manager is shared by the process."""
        assert init_db_manager() is db_manager
        assert isinstance(db_manager, DatabaseManager)
        assert db_manager.surrealdb_namespace == Settings().surrealdb_namespace

    def test_not_connected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test using the manager before connecting."""
        monkeypatch.setattr(db_manager, "async_db", None)

        assert not db_manager.is_connected
        with pytest.raises(RuntimeError, match="Database not connected"):
            db_manager.get_db()

    @pytest.mark.asyncio
    async def test_init_schema(self, fake_db) -> None:  # noqa: ANN001
        """Test the schema is sent in a single query."""
        assert db_manager.is_connected

        await db_manager.ainit_schema()

        assert len(fake_db.calls) == 1
        assert fake_db.last_query.startswith("DEFINE ANALYZER IF NOT EXISTS")


class TestSettings:
    """Test cases for settings."""

    def test_log_config(self) -> None:
        """Test console and file handlers share the root logger."""
        log_config = Settings.get_log_config(console_level="DEBUG")

        assert log_config["handlers"]["console"]["level"] == "DEBUG"
        assert log_config["handlers"]["file"]["filename"].endswith("app.log")
        assert log_config["loggers"][""]["handlers"] == ["console", "file"]

    def test_page_limits(self) -> None:
        """Test pagination defaults."""
        settings = Settings()

        assert settings.page_max_limit > 0
        assert 0 < settings.search_default_limit <= settings.page_max_limit

"""SurrealDB connection for the catalog service."""

import logging

from db.manager import DatabaseManager

from . import config

logger = logging.getLogger(__name__)


def init_db_manager(settings: config.Settings | None = None) -> DatabaseManager:
    """
    Build the database manager from settings.

    Args:
        settings: The settings holding the SurrealDB connection details.

    Returns:
        The process-wide DatabaseManager.

    """
    if settings is None:
        settings = config.Settings()

    return DatabaseManager(
        settings.surrealdb_uri,
        settings.surrealdb_username,
        settings.surrealdb_password,
        settings.surrealdb_namespace,
        settings.surrealdb_database,
    )


# Global database manager instance
db_manager = init_db_manager()

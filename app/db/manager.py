"""SurrealDB connection module."""

import logging

import surrealdb
from singleton import Singleton

AsyncSurrealConnection = (
    surrealdb.AsyncEmbeddedSurrealConnection
    | surrealdb.AsyncWsSurrealConnection
    | surrealdb.AsyncHttpSurrealConnection
)
logger = logging.getLogger(__name__)


class DatabaseManager(metaclass=Singleton):
    """Owns the async SurrealDB connection of the process."""

    def __init__(
        self,
        surrealdb_uri: str,
        surrealdb_username: str,
        surrealdb_password: str,
        surrealdb_namespace: str,
        surrealdb_database: str,
    ) -> None:
        """
        Initialize the database manager.

        Args:
            surrealdb_uri: SurrealDB connection URI
            surrealdb_username: SurrealDB username for authentication
            surrealdb_password: SurrealDB password for authentication
            surrealdb_namespace: SurrealDB namespace to use
            surrealdb_database: SurrealDB database name to use

        """
        self.async_db: AsyncSurrealConnection | None = None
        self.surrealdb_uri = surrealdb_uri
        self.surrealdb_username = surrealdb_username
        self.surrealdb_password = surrealdb_password
        self.surrealdb_namespace = surrealdb_namespace
        self.surrealdb_database = surrealdb_database

    @property
    def is_connected(self) -> bool:
        """Whether a connection is open."""
        return self.async_db is not None

    async def aconnect(self) -> None:
        """Open the connection, sign in and select namespace/database."""
        self.async_db = surrealdb.AsyncSurreal(self.surrealdb_uri)
        await self.async_db.connect()
        await self.async_db.signin({
            "username": self.surrealdb_username,
            "password": self.surrealdb_password,
        })
        await self.async_db.use(
            self.surrealdb_namespace,
            self.surrealdb_database,
        )
        logger.info(
            "Connected to SurrealDB %s (%s/%s)",
            self.surrealdb_uri,
            self.surrealdb_namespace,
            self.surrealdb_database,
        )

    async def ainit_schema(self) -> None:
        """Define tables and indexes for the registered models."""
        from .schema_generator import init_schema

        await init_schema(self.get_db())

    async def adisconnect(self) -> None:
        """Close database connection."""
        if self.async_db:
            await self.async_db.close()
            self.async_db = None
            logger.info("Disconnected from SurrealDB")

    def get_db(self) -> AsyncSurrealConnection:
        """Get the database connection."""
        if not self.async_db:
            raise RuntimeError("Database not connected")
        return self.async_db

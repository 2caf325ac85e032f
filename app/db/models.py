"""Pydantic base models for SurrealDB records."""

import logging
from datetime import datetime
from typing import Any, Self

import surrealdb
from pydantic import BaseModel, Field, GetCoreSchemaHandler
from pydantic_core import core_schema

from .utils import camel_to_snake, utc_now

logger = logging.getLogger(__name__)


class RecordId(str):
    """Record identifier in ``table:key`` form."""

    def __new__(cls, value: object, table: str | None = None) -> Self:
        """
        Build a record id from a string or a SurrealDB SDK record id.

        Args:
            value: ``table:key`` string, bare key, or SDK ``RecordID``
            table: Table to prefix when ``value`` is a bare key

        Raises:
            ValueError: If no table can be determined or the key is empty

        """
        if isinstance(value, RecordId):
            return value

        table_name = getattr(value, "table_name", None)
        if table_name is not None:
            text = f"{table_name}:{value.id}"
        else:
            text = str(value).strip()
            if ":" not in text and table:
                text = f"{table}:{text}"

        prefix, sep, key = text.partition(":")
        if not sep or not prefix or not key:
            raise ValueError(f"Invalid record id: {value!r}")
        return super().__new__(cls, text)

    @property
    def table(self) -> str:
        """Table part of the id."""
        return self.partition(":")[0]

    @property
    def key(self) -> str:
        """Key part of the id."""
        return self.partition(":")[2]

    def to_surreal(self) -> surrealdb.RecordID:
        """Convert to the SDK type used for query parameters."""
        return surrealdb.RecordID(self.table, self.key)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls, serialization=core_schema.to_string_ser_schema()
        )


def to_surreal_value(value: object) -> object:
    """Recursively convert ``RecordId`` values for the SDK."""
    if isinstance(value, RecordId):
        return value.to_surreal()
    if isinstance(value, dict):
        return {k: to_surreal_value(v) for k, v in value.items()}
    if isinstance(value, list | tuple | set):
        return [to_surreal_value(v) for v in value]
    return value


class AbstractBaseSurrealEntity(BaseModel):
    """Root of every model that maps to a SurrealDB table."""

    class Settings:
        __abstract__ = True

        table_name: str | None = None

    id: RecordId | None = Field(None, description="Record ID")

    @classmethod
    def _get_table_name(cls) -> str:
        """Table name from ``Settings.table_name`` or the snake-cased class."""
        table_name = getattr(cls.Settings, "table_name", None)
        return table_name or camel_to_snake(cls.__name__)

    @classmethod
    def table(cls) -> str:
        """Public accessor for the table name."""
        return cls._get_table_name()

    @classmethod
    def record_id(cls, value: object) -> RecordId | None:
        """Normalize ``value`` to an id of this table; None when it cannot be one."""
        try:
            record_id = RecordId(value, table=cls._get_table_name())
        except ValueError:
            return None
        return record_id if record_id.table == cls._get_table_name() else None

    def to_record(self) -> dict[str, object]:
        """Dump the model as SDK-ready record content (without ``id``)."""
        return to_surreal_value(self.model_dump(exclude={"id"}))

    async def save(self) -> Self:
        """Create the record, or replace its content when it already has an id."""
        from .query_executor import execute_query

        if self.id is None:
            rows = await execute_query(
                "CREATE type::table($table) CONTENT $data",
                {"table": self._get_table_name(), "data": self.to_record()},
            )
        else:
            rows = await execute_query(
                "UPDATE $record CONTENT $data RETURN AFTER",
                {"record": self.id.to_surreal(), "data": self.to_record()},
            )
        if not rows:
            raise RuntimeError(f"No record returned when saving {self!r}")

        self.id = RecordId(rows[0]["id"])
        logger.debug("Saved %s", self.id)
        return self

    @classmethod
    async def find_many(
        cls,
        limit: int | None = None,
        **filters: object,
    ) -> list[Self]:
        """Find records whose fields equal the given filters."""
        from .query_builder import QueryBuilder
        from .query_executor import execute_query

        builder = QueryBuilder(cls._get_table_name())
        for field, value in filters.items():
            if isinstance(value, list):
                builder.where_in(field, value)
            else:
                builder.where_eq(field, value)
        if limit is not None:
            builder.limit(limit)

        query, params = builder.build()
        rows = await execute_query(query, params)
        return [cls.model_validate(row) for row in rows]

    @classmethod
    async def find_one(cls, **filters: object) -> Self | None:
        """Find the first record matching the filters."""
        items = await cls.find_many(limit=1, **filters)
        return items[0] if items else None

    @classmethod
    async def get_by_id(
        cls, id: RecordId | str, **filters: object  # noqa: A002
    ) -> Self | None:
        """Get a record of this table by id."""
        record_id = cls.record_id(id)
        if record_id is None:
            return None
        return await cls.find_one(id=record_id, **filters)


class BaseSurrealEntity(AbstractBaseSurrealEntity):
    """Timestamped SurrealDB record."""

    class Settings(AbstractBaseSurrealEntity.Settings):
        __abstract__ = True

    created_at: datetime = Field(
        default_factory=utc_now,
        description="Creation timestamp",
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        description="Last update timestamp",
        json_schema_extra={"surreal_index": "idx_updated_at"},
    )

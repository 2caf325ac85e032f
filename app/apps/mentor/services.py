"""Mentor catalog service."""

import logging
from collections.abc import Iterable

from apps.base.schemas import PaginationSchema
from apps.subscription.services import USER_TABLE, SubscriptionService
from db import (
    FullTextQueryBuilder,
    QueryBuilder,
    RecordId,
    UpdateQueryBuilder,
    execute_builder,
    execute_update,
    query,
)
from db.utils import utc_now
from server.config import Settings

from .exceptions import MentorNotFoundError
from .models import Mentor
from .schemas import (
    MentorCreateSchema,
    MentorInfoSchema,
    MentorSubscriptionSchema,
    MentorUpdateSchema,
)

logger = logging.getLogger(__name__)

# Fields left out of the summary projection
INFO_OMIT_FIELDS = ("description", "status")
SEARCH_LIKE_FIELDS = ("name", "occupation", "title")


class MentorService:
    """Create, update, soft-delete and query catalog mentors."""

    def __init__(
        self,
        subscription_service: SubscriptionService | None = None,
        settings: Settings | None = None,
    ) -> None:
        """
        Initialize the service.

        Args:
            subscription_service: Subscription lookup (defaults to SubscriptionService)
            settings: Application settings (defaults to Settings() if not provided)

        """
        if subscription_service is None:
            subscription_service = SubscriptionService()
        if settings is None:
            settings = Settings()
        self.subscription_service = subscription_service
        self.settings = settings

    @staticmethod
    def _active() -> QueryBuilder:
        return query(Mentor.table()).where_eq("status", True)

    @staticmethod
    async def _fetch_info(builder: QueryBuilder) -> list[MentorInfoSchema]:
        rows = await execute_builder(builder.omit(*INFO_OMIT_FIELDS))
        return [MentorInfoSchema.model_validate(row) for row in rows]

    async def create(
        self, admin: RecordId | str, payload: MentorCreateSchema
    ) -> Mentor:
        """
        Add a mentor to the catalog.

        Args:
            admin: User creating the mentor
            payload: Validated mentor fields

        Returns:
            The stored mentor with its id and timestamps

        """
        admin_id = RecordId(admin, table=USER_TABLE)
        now = utc_now()
        mentor = Mentor(
            **payload.model_dump(),
            created_by=admin_id,
            updated_by=admin_id,
            created_at=now,
            updated_at=now,
            status=True,
        )
        await mentor.save()
        logger.info("Mentor %s created by %s", mentor.id, admin_id)
        return mentor

    async def update(
        self,
        admin: RecordId | str,
        mentor_id: RecordId | str,
        payload: MentorUpdateSchema,
    ) -> Mentor:
        """
        Replace the given fields of an active mentor.

        The change is applied only while the mentor is active, in a single
        statement; concurrent updates are last-writer-wins.

        Raises:
            MentorNotFoundError: If no active mentor has this id

        """
        record_id = Mentor.record_id(mentor_id)
        if record_id is None:
            raise MentorNotFoundError(mentor_id)

        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        changes["updated_by"] = RecordId(admin, table=USER_TABLE)
        changes["updated_at"] = utc_now()

        builder = UpdateQueryBuilder(record_id).merge(changes).where_eq("status", True)
        row = await execute_update(builder)
        if row is None:
            logger.info("Update skipped, mentor %s not found", record_id)
            raise MentorNotFoundError(record_id)

        logger.info("Mentor %s updated by %s", record_id, changes["updated_by"])
        return Mentor.model_validate(row)

    async def deactivate(
        self, mentor_id: RecordId | str, admin: RecordId | str | None = None
    ) -> Mentor:
        """
        Soft-delete a mentor; the record is kept but leaves every read path.

        Raises:
            MentorNotFoundError: If no active mentor has this id, including
                one that was already deactivated

        """
        record_id = Mentor.record_id(mentor_id)
        if record_id is None:
            raise MentorNotFoundError(mentor_id)

        changes: dict[str, object] = {"status": False, "updated_at": utc_now()}
        if admin is not None:
            changes["updated_by"] = RecordId(admin, table=USER_TABLE)

        builder = UpdateQueryBuilder(record_id).merge(changes).where_eq("status", True)
        row = await execute_update(builder)
        if row is None:
            logger.info("Deactivation skipped, mentor %s not found", record_id)
            raise MentorNotFoundError(record_id)

        logger.info("Mentor %s deactivated", record_id)
        return Mentor.model_validate(row)

    async def find_by_id(self, mentor_id: RecordId | str) -> Mentor | None:
        """Get an active mentor, or None."""
        return await Mentor.get_by_id(mentor_id, status=True)

    async def find_by_ids(
        self, mentor_ids: Iterable[RecordId | str]
    ) -> list[MentorInfoSchema]:
        """Get the active mentors among ``mentor_ids``; unknown ids are skipped."""
        record_ids = []
        for mentor_id in mentor_ids:
            record_id = Mentor.record_id(mentor_id)
            if record_id is not None and record_id not in record_ids:
                record_ids.append(record_id)
        if not record_ids:
            return []

        return await self._fetch_info(self._active().where_in("id", record_ids))

    async def find_paginated(
        self, pagination: PaginationSchema
    ) -> list[MentorInfoSchema]:
        """Active mentors, most recently updated first."""
        builder = (
            self._active()
            .order_by("updated_at", "DESC")
            .skip(pagination.skip)
            .limit(pagination.limit)
        )
        return await self._fetch_info(builder)

    async def search(
        self, query_text: str, limit: int | None = None
    ) -> list[MentorInfoSchema]:
        """
        Fulltext search over the indexed mentor fields.

        Results are ranked by the engine's relevance score.
        """
        if limit is None:
            limit = self.settings.search_default_limit
        builder = (
            FullTextQueryBuilder(Mentor.table())
            .search(query_text)
            .where_eq("status", True)
            .limit(limit)
        )
        return await self._fetch_info(builder)

    async def search_like(
        self, query_text: str, limit: int | None = None
    ) -> list[MentorInfoSchema]:
        """
        Case-insensitive substring search on name, occupation and title.

        ``query_text`` is matched literally; pattern characters such as
        ``.*`` have no special meaning.
        """
        if limit is None:
            limit = self.settings.search_default_limit
        builder = (
            self._active()
            .where_contains_any(SEARCH_LIKE_FIELDS, query_text)
            .limit(limit)
        )
        return await self._fetch_info(builder)

    async def find_recommended(self, limit: int) -> list[MentorInfoSchema]:
        """Active mentors with the highest score first."""
        builder = self._active().order_by("score", "DESC").limit(limit)
        return await self._fetch_info(builder)

    async def find_recommended_paginated(
        self, pagination: PaginationSchema
    ) -> list[MentorInfoSchema]:
        """Paginated variant of ``find_recommended``."""
        builder = (
            self._active()
            .order_by("score", "DESC")
            .skip(pagination.skip)
            .limit(pagination.limit)
        )
        return await self._fetch_info(builder)

    async def find_subscription_status(
        self, mentor_id: RecordId | str, user_id: RecordId | str
    ) -> MentorSubscriptionSchema:
        """
        Tell whether a user is subscribed to a mentor.

        Raises:
            MentorNotFoundError: If no active mentor has this id

        """
        mentor = await self.find_by_id(mentor_id)
        if mentor is None:
            raise MentorNotFoundError(mentor_id)

        subscription = await self.subscription_service.find_subscription_for_user(
            user_id
        )
        subscribed = subscription is not None and subscription.has_topic(mentor.id)

        return MentorSubscriptionSchema(
            mentor=MentorInfoSchema.model_validate(mentor),
            subscribed=subscribed,
        )

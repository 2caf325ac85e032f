"""Subscription lookup used by the mentor catalog."""

import logging

from db import RecordId, execute_builder, query

from .models import Subscription

logger = logging.getLogger(__name__)

USER_TABLE = "user"


class SubscriptionService:
    """Read-only access to user subscriptions."""

    async def find_subscription_for_user(
        self, user_id: RecordId | str
    ) -> Subscription | None:
        """
        Load the most recent subscription of a user.

        Args:
            user_id: Record id of the user

        Returns:
            The subscription, or None when the user has none or the id is
            not a valid user id

        """
        try:
            user_record_id = RecordId(user_id, table=USER_TABLE)
        except ValueError:
            logger.debug("Invalid user id %r, no subscription", user_id)
            return None

        builder = (
            query(Subscription.table())
            .where_eq("user_id", user_record_id)
            .order_by("updated_at", "DESC")
            .limit(1)
        )
        rows = await execute_builder(builder)
        if not rows:
            logger.debug("No subscription for user %s", user_id)
            return None
        return Subscription.model_validate(rows[0])

"""Subscription records, read by the mentor catalog."""

from pydantic import Field

from db.models import BaseSurrealEntity, RecordId


class Subscription(BaseSurrealEntity):
    """Topics (mentors) a user is subscribed to."""

    user_id: RecordId = Field(
        ...,
        description="Subscribing user",
        json_schema_extra={"surreal_index": "idx_subscription_user_id"},
    )
    topics: list[RecordId] = Field(
        default_factory=list, description="Subscribed mentor ids"
    )

    def has_topic(self, topic_id: RecordId | str) -> bool:
        """Whether ``topic_id`` is one of the subscribed topics."""
        return RecordId(topic_id) in set(self.topics)

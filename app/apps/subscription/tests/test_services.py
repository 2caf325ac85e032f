"""Tests for SubscriptionService."""

import pytest
import surrealdb

from apps.subscription.models import Subscription
from apps.subscription.services import SubscriptionService


class TestFindSubscriptionForUser:
    """Test cases for find_subscription_for_user."""

    @pytest.mark.asyncio
    async def test_latest_subscription(self, fake_db) -> None:  # noqa: ANN001
        """Test the most recent subscription of the user is loaded."""
        fake_db.respond([
            {
                "id": surrealdb.RecordID("subscription", "s1"),
                "user_id": surrealdb.RecordID("user", "1"),
                "topics": [surrealdb.RecordID("mentor", "a")],
            }
        ])

        subscription = await SubscriptionService().find_subscription_for_user("1")

        assert fake_db.last_query == (
            "SELECT * FROM subscription WHERE user_id = $param_0 "
            "ORDER BY updated_at DESC LIMIT 1"
        )
        user_param = fake_db.last_params["param_0"]
        assert (user_param.table_name, user_param.id) == ("user", "1")
        assert isinstance(subscription, Subscription)
        assert subscription.user_id == "user:1"
        assert subscription.topics == ["mentor:a"]

    @pytest.mark.asyncio
    async def test_no_subscription(self, fake_db) -> None:  # noqa: ANN001
        """Test a user without subscription."""
        assert await SubscriptionService().find_subscription_for_user("user:2") is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("user_id", ["", "   ", ":1", "user:"])
    async def test_invalid_user_id(self, fake_db, user_id: str) -> None:  # noqa: ANN001
        """Test a malformed user id has no subscription and sends no query."""
        assert await SubscriptionService().find_subscription_for_user(user_id) is None
        assert fake_db.calls == []


class TestSubscription:
    """Test cases for the Subscription model."""

    def test_has_topic(self) -> None:
        """Test topic membership by record id."""
        subscription = Subscription(user_id="user:1", topics=["mentor:a", "mentor:b"])

        assert subscription.has_topic("mentor:b")
        assert subscription.has_topic(surrealdb.RecordID("mentor", "a"))
        assert not subscription.has_topic("mentor:c")

    def test_empty_topics(self) -> None:
        """Test a subscription without topics."""
        assert not Subscription(user_id="user:1").has_topic("mentor:a")

"""Fixtures for mentor catalog tests."""

from datetime import datetime, timezone

import pytest

from apps.mentor.services import MentorService
from apps.subscription.models import Subscription


def mentor_row(key: str, **overrides: object) -> dict[str, object]:
    """A mentor record as returned by the database."""
    row: dict[str, object] = {
        "id": f"mentor:{key}",
        "name": f"Mentor {key}",
        "title": "Staff engineer",
        "thumbnail": "https://cdn.example.com/thumb.png",
        "occupation": "Engineer",
        "description": "Long form description",
        "cover_img_url": "https://cdn.example.com/cover.png",
        "score": 0.5,
        "status": True,
        "created_by": "user:admin",
        "updated_by": "user:admin",
        "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),  # noqa: UP017
        "updated_at": datetime(2024, 1, 2, tzinfo=timezone.utc),  # noqa: UP017
    }
    row.update(overrides)
    return row


def info_row(key: str, **overrides: object) -> dict[str, object]:
    """A mentor record under the summary projection."""
    row = mentor_row(key, **overrides)
    row.pop("description")
    row.pop("status")
    return row


class FakeSubscriptionService:
    """Subscription lookup returning a fixed subscription."""

    def __init__(self, subscription: Subscription | None = None) -> None:
        self.subscription = subscription
        self.calls: list[object] = []

    async def find_subscription_for_user(self, user_id: object) -> Subscription | None:
        self.calls.append(user_id)
        return self.subscription


@pytest.fixture
def subscriptions() -> FakeSubscriptionService:
    """Subscription lookup without any subscription."""
    return FakeSubscriptionService()


@pytest.fixture
def service(subscriptions: FakeSubscriptionService) -> MentorService:
    """Mentor service wired to the fake subscription lookup."""
    return MentorService(subscription_service=subscriptions)


@pytest.fixture
def make_mentor_row():  # noqa: ANN201
    """Factory of full mentor rows."""
    return mentor_row


@pytest.fixture
def make_info_row():  # noqa: ANN201
    """Factory of summary mentor rows."""
    return info_row

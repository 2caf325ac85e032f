"""Shared pytest fixtures."""

import pytest

import apps.mentor.models  # noqa: F401
import apps.subscription.models  # noqa: F401


class FakeSurrealConnection:
    """Stand-in for the async SurrealDB connection.

    Every query is recorded; responses are replayed in order and an empty
    result is returned once they run out.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, object]]] = []
        self._responses: list[object] = []
        self.error: Exception | None = None

    def respond(self, *responses: object) -> None:
        """Queue the responses of the next queries."""
        self._responses.extend(responses)

    async def query(
        self, query: str, variables: dict[str, object] | None = None
    ) -> object:
        self.calls.append((query, variables or {}))
        if self.error is not None:
            raise self.error
        if self._responses:
            return self._responses.pop(0)
        return []

    @property
    def last_query(self) -> str:
        return self.calls[-1][0]

    @property
    def last_params(self) -> dict[str, object]:
        return self.calls[-1][1]


@pytest.fixture
def fake_db(monkeypatch: pytest.MonkeyPatch) -> FakeSurrealConnection:
    """Route executor queries to a fake connection."""
    from server.db import db_manager

    connection = FakeSurrealConnection()
    monkeypatch.setattr(db_manager, "async_db", connection)
    return connection

"""Errors raised by the mentor catalog."""

from fastapi_mongo_base.core.exceptions import BaseHTTPException


class MentorNotFoundError(BaseHTTPException):
    """No active mentor exists for the requested id."""

    def __init__(self, mentor_id: object) -> None:
        self.mentor_id = mentor_id
        super().__init__(
            status_code=404,
            error="mentor_not_found",
            detail="Mentor not found",
        )

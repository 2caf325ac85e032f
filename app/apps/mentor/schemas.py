"""Request and response schemas of the mentor catalog."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from db.models import RecordId

from .models import MENTOR_FIELD_CONSTRAINTS


def constraint_field(name: str, *, partial: bool = False) -> Any:  # noqa: ANN401
    """
    Build a pydantic ``Field`` from the mentor constraint table.

    Args:
        name: Field name in ``MENTOR_FIELD_CONSTRAINTS``
        partial: Make the field optional (used by update payloads)

    """
    constraint = MENTOR_FIELD_CONSTRAINTS[name]
    if partial:
        default = None
    elif constraint.required:
        default = ...
    else:
        default = constraint.default

    return Field(
        default,
        max_length=constraint.max_length,
        ge=constraint.ge,
        le=constraint.le,
        description=constraint.description,
    )


class MentorCreateSchema(BaseModel):
    """Payload to create a mentor."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    name: str = constraint_field("name")
    title: str = constraint_field("title")
    thumbnail: str = constraint_field("thumbnail")
    occupation: str = constraint_field("occupation")
    description: str = constraint_field("description")
    cover_img_url: str = constraint_field("cover_img_url")
    score: float = constraint_field("score")


class MentorUpdateSchema(BaseModel):
    """Payload to update a mentor; only the given fields are replaced."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    name: str | None = constraint_field("name", partial=True)
    title: str | None = constraint_field("title", partial=True)
    thumbnail: str | None = constraint_field("thumbnail", partial=True)
    occupation: str | None = constraint_field("occupation", partial=True)
    description: str | None = constraint_field("description", partial=True)
    cover_img_url: str | None = constraint_field("cover_img_url", partial=True)
    score: float | None = constraint_field("score", partial=True)


class MentorInfoSchema(BaseModel):
    """Summary view of a mentor, without description and status."""

    model_config = ConfigDict(from_attributes=True)

    id: RecordId
    name: str
    title: str
    thumbnail: str
    occupation: str
    cover_img_url: str
    score: float
    created_by: RecordId | None = None
    updated_by: RecordId | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class MentorSubscriptionSchema(BaseModel):
    """A mentor together with the caller's subscription state."""

    mentor: MentorInfoSchema
    subscribed: bool = Field(
        False, description="Whether the mentor is one of the user's topics"
    )

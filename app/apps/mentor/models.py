"""Mentor catalog records."""

import dataclasses

from pydantic import Field

from db.models import BaseSurrealEntity, RecordId

DEFAULT_SCORE = 0.01


@dataclasses.dataclass(frozen=True)
class FieldConstraint:
    """Validation rule for one mentor field."""

    name: str
    type: type
    max_length: int | None = None
    required: bool = True
    default: object = None
    ge: float | None = None
    le: float | None = None
    description: str = ""


MENTOR_FIELD_CONSTRAINTS: dict[str, FieldConstraint] = {
    constraint.name: constraint
    for constraint in (
        FieldConstraint("name", str, max_length=50, description="Mentor name"),
        FieldConstraint("title", str, max_length=300, description="Headline"),
        FieldConstraint(
            "thumbnail", str, max_length=300, description="Thumbnail image URL"
        ),
        FieldConstraint("occupation", str, max_length=50, description="Occupation"),
        FieldConstraint(
            "description", str, max_length=10000, description="Long description"
        ),
        FieldConstraint(
            "cover_img_url", str, max_length=300, description="Cover image URL"
        ),
        FieldConstraint(
            "score",
            float,
            required=False,
            default=DEFAULT_SCORE,
            ge=0,
            le=1,
            description="Recommendation score",
        ),
    )
}


class Mentor(BaseSurrealEntity):
    """Mentor entry of the catalog."""

    name: str = Field(
        ...,
        description="Mentor name",
        json_schema_extra={"surreal_fulltext_field": True},
    )
    title: str = Field(
        ...,
        description="Headline",
        json_schema_extra={"surreal_fulltext_field": True},
    )
    thumbnail: str = Field(..., description="Thumbnail image URL")
    occupation: str = Field(
        ...,
        description="Occupation",
        json_schema_extra={"surreal_fulltext_field": True},
    )
    description: str = Field(
        ...,
        description="Long description",
        json_schema_extra={"surreal_fulltext_field": True},
    )
    cover_img_url: str = Field(..., description="Cover image URL")
    score: float = Field(
        DEFAULT_SCORE,
        description="Recommendation score",
        json_schema_extra={"surreal_index": "idx_mentor_score"},
    )
    created_by: RecordId = Field(..., description="User who created the mentor")
    updated_by: RecordId = Field(..., description="User who last updated the mentor")
    status: bool = Field(
        True,
        description="False once the mentor is deleted",
        json_schema_extra={"surreal_index": "idx_mentor_status"},
    )

"""Pydantic request/response schemas for the Reviews API.

These are separate from the use-case commands (anti-corruption pattern).
The API layer is the external contract and speaks camelCase JSON; commands
and aggregates are internal domain concepts.

Request fields only check JSON types. Range and length rules belong to the
domain, so a bad rating reaches ``validate`` and comes back as a domain
message instead of a schema error. A rating must be a JSON number: booleans
and numeric strings are schema errors, and whole floats such as ``4.0`` are
the same number as ``4``.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, field_validator
from pydantic.alias_generators import to_camel

from reviews.review.review import Review


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class AddReviewRequest(_CamelModel):
    rating: StrictInt | StrictFloat
    title: str
    comment: str

    @field_validator("rating")
    @classmethod
    def whole_number_as_int(cls, value: int | float) -> int | float:
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class ReviewSchema(_CamelModel):
    id: str
    rating: int
    title: str
    comment: str
    created_at: datetime

    @classmethod
    def from_review(cls, review: Review) -> ReviewSchema:
        return cls(
            id=review.id,
            rating=review.rating,
            title=review.title,
            comment=review.comment,
            created_at=review.created_at,
        )


class ReviewResponse(_CamelModel):
    review: ReviewSchema


class ReviewListResponse(_CamelModel):
    reviews: list[ReviewSchema]
    total_count: int


class ErrorResponse(_CamelModel):
    errors: list[str]
    kind: str

"""Use-case results: tagged success and failure variants.

Use cases never raise for expected failures. They return one of these
values and the caller branches on ``success`` (or on the type). ``ErrorKind``
lets the HTTP layer choose a status code without parsing messages.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from reviews.review.review import Review


class ErrorKind(Enum):
    VALIDATION_FAILED = "ValidationFailed"
    CONFLICT_EXISTS = "ConflictExists"
    STORAGE_UNAVAILABLE = "StorageUnavailable"


@dataclass(frozen=True)
class Failure:
    errors: tuple[str, ...]
    kind: ErrorKind

    success: ClassVar[bool] = False


@dataclass(frozen=True)
class AddReviewSuccess:
    review: Review

    success: ClassVar[bool] = True


@dataclass(frozen=True)
class ListReviewsSuccess:
    reviews: tuple[Review, ...]
    total_count: int

    success: ClassVar[bool] = True


AddReviewResult = AddReviewSuccess | Failure
ListReviewsResult = ListReviewsSuccess | Failure

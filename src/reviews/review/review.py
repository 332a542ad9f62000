"""Review aggregate: the core of the Reviews domain.

A Review is immutable: it is built once through ``create`` (the only place
its invariants are enforced) and afterwards only read, overwritten wholesale
by the repository, or deleted by id.

The query helpers at the bottom operate on collections that are already in
memory; they never touch persistence.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import ClassVar

RATING_MIN = 1
RATING_MAX = 5
TITLE_MAX_LENGTH = 200
COMMENT_MAX_LENGTH = 5000


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class SortOrder(Enum):
    ASC = "asc"
    DESC = "desc"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
class InvalidReviewError(ValueError):
    """Raised when a Review cannot be constructed from the given values."""

    def __init__(self, errors):
        self.errors = tuple(errors)
        super().__init__(f"Invalid review content: {', '.join(self.errors)}")


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ReviewContent:
    """The user-supplied part of a review, before identity and time are assigned."""

    rating: int
    title: str
    comment: str


@dataclass(frozen=True)
class Valid:
    success: ClassVar[bool] = True


@dataclass(frozen=True)
class Invalid:
    errors: tuple[str, ...]

    success: ClassVar[bool] = False


ValidationResult = Valid | Invalid


# ---------------------------------------------------------------------------
# Aggregate
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Review:
    """A customer's rated text review."""

    id: str
    rating: int
    title: str
    comment: str
    created_at: datetime

    @property
    def content(self) -> ReviewContent:
        return ReviewContent(rating=self.rating, title=self.title, comment=self.comment)


# ---------------------------------------------------------------------------
# Validation rules
# ---------------------------------------------------------------------------
def is_valid_rating(rating) -> bool:
    # bool is an int subclass but never a rating
    if isinstance(rating, bool) or not isinstance(rating, int):
        return False
    return RATING_MIN <= rating <= RATING_MAX


def is_valid_title(title) -> bool:
    return isinstance(title, str) and len(title.strip()) > 0 and len(title) <= TITLE_MAX_LENGTH


def is_valid_comment(comment) -> bool:
    return isinstance(comment, str) and len(comment.strip()) > 0 and len(comment) <= COMMENT_MAX_LENGTH


def validate(content: ReviewContent) -> ValidationResult:
    """Check review content against every rule and collect all violations.

    Messages come out in a fixed order: rating, title, comment.
    """
    errors = []

    if not is_valid_rating(content.rating):
        errors.append(f"Rating must be an integer between {RATING_MIN} and {RATING_MAX}")

    if not is_valid_title(content.title):
        errors.append(f"Title must be between 1 and {TITLE_MAX_LENGTH} characters")

    if not is_valid_comment(content.comment):
        errors.append(f"Comment must be between 1 and {COMMENT_MAX_LENGTH} characters")

    if errors:
        return Invalid(errors=tuple(errors))
    return Valid()


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------
def create(*, id: str, rating: int, title: str, comment: str, created_at: datetime) -> Review:
    """Build a Review, raising InvalidReviewError with every violation found.

    Uniqueness of ``id`` is a repository concern and is not checked here.
    """
    errors = []

    if not isinstance(id, str) or len(id.strip()) == 0:
        errors.append("ID is required and cannot be empty")

    if not isinstance(created_at, datetime):
        errors.append("Created date must be a valid datetime")

    result = validate(ReviewContent(rating=rating, title=title, comment=comment))
    if not result.success:
        errors.extend(result.errors)

    if errors:
        raise InvalidReviewError(errors)

    return Review(id=id, rating=rating, title=title, comment=comment, created_at=created_at)


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------
def get_average_rating(reviews) -> float:
    """Mean rating of the collection, or 0 when it is empty."""
    reviews = list(reviews)
    if not reviews:
        return 0
    return sum(review.rating for review in reviews) / len(reviews)


def filter_by_rating(reviews, rating: int) -> list[Review]:
    return [review for review in reviews if review.rating == rating]


def sort_by_date(reviews, order=SortOrder.DESC) -> list[Review]:
    """Sort by creation time, newest first unless ``order`` is ascending.

    ``sorted`` is stable in both directions, so reviews created at the same
    instant keep their input order.
    """
    return sorted(reviews, key=lambda review: review.created_at, reverse=SortOrder(order) == SortOrder.DESC)


def sort_by_rating(reviews, order=SortOrder.DESC) -> list[Review]:
    """Sort by rating, highest first unless ``order`` is ascending."""
    return sorted(reviews, key=lambda review: review.rating, reverse=SortOrder(order) == SortOrder.DESC)

"""ListReviews: return every stored review with its count."""

from dataclasses import dataclass

import structlog

from reviews.review.results import ErrorKind, Failure, ListReviewsResult, ListReviewsSuccess

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ListReviews:
    """List all reviews. Takes no parameters yet."""


class ListReviewsHandler:
    def __init__(self, repository):
        self.repository = repository

    async def list_reviews(self, command: ListReviews | None = None) -> ListReviewsResult:
        try:
            reviews = await self.repository.find_all()
        except Exception as exc:
            logger.error("review_repository_error", operation="list_reviews", error=str(exc), exc_info=True)
            message = str(exc) or "Unknown error fetching reviews"
            return Failure(errors=(message,), kind=ErrorKind.STORAGE_UNAVAILABLE)

        reviews = tuple(reviews)
        return ListReviewsSuccess(reviews=reviews, total_count=len(reviews))

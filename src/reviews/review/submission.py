"""AddReview: validate, identify, and persist a new review.

The id and timestamp are generated only after the content passes validation,
and before the duplicate check. The check-then-save sequence is not atomic:
two concurrent submissions that draw the same id both pass ``exists`` and
the later ``save`` wins.
"""

from dataclasses import dataclass

import structlog

from reviews.review import review as review_model
from reviews.review.review import InvalidReviewError, ReviewContent
from reviews.review.results import AddReviewResult, AddReviewSuccess, ErrorKind, Failure

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class AddReview(ReviewContent):
    """Submit a new review with the given content."""


class AddReviewHandler:
    def __init__(self, repository, generate_id, now):
        self.repository = repository
        self.generate_id = generate_id
        self.now = now

    async def add_review(self, command: AddReview) -> AddReviewResult:
        content = ReviewContent(rating=command.rating, title=command.title, comment=command.comment)

        validation = review_model.validate(content)
        if not validation.success:
            logger.info("review_rejected", errors=list(validation.errors))
            return Failure(errors=validation.errors, kind=ErrorKind.VALIDATION_FAILED)

        review_id = self.generate_id().strip()
        created_at = self.now()

        try:
            if await self.repository.exists(review_id):
                logger.warning("review_conflict", review_id=review_id)
                return Failure(
                    errors=(f"Review with id '{review_id}' already exists",),
                    kind=ErrorKind.CONFLICT_EXISTS,
                )

            try:
                review = review_model.create(
                    id=review_id,
                    rating=content.rating,
                    title=content.title,
                    comment=content.comment,
                    created_at=created_at,
                )
            except InvalidReviewError as exc:
                return Failure(errors=exc.errors, kind=ErrorKind.VALIDATION_FAILED)
            except Exception as exc:
                message = str(exc) or "Unknown error creating review"
                return Failure(errors=(message,), kind=ErrorKind.VALIDATION_FAILED)

            saved = await self.repository.save(review)
        except Exception as exc:
            logger.error("review_repository_error", operation="add_review", error=str(exc), exc_info=True)
            message = str(exc) or "Unknown error accessing repository"
            return Failure(errors=(message,), kind=ErrorKind.STORAGE_UNAVAILABLE)

        logger.info("review_added", review_id=saved.id, rating=saved.rating)
        return AddReviewSuccess(review=saved)

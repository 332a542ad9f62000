"""Sample reviews for populating a fresh store."""

from datetime import UTC, datetime

import structlog

from reviews.review.review import create

logger = structlog.get_logger(__name__)

SAMPLE_REVIEWS = (
    create(
        id="1",
        rating=5,
        title="Excellent service",
        comment="Everything was perfect. Highly recommended!",
        created_at=datetime(2025, 10, 1, 10, 0, tzinfo=UTC),
    ),
    create(
        id="2",
        rating=4,
        title="Very good",
        comment="Good experience overall, but room for improvement.",
        created_at=datetime(2025, 10, 2, 12, 30, tzinfo=UTC),
    ),
    create(
        id="3",
        rating=2,
        title="Not satisfied",
        comment="Service was slow and the staff was not friendly.",
        created_at=datetime(2025, 10, 3, 15, 45, tzinfo=UTC),
    ),
    create(
        id="4",
        rating=3,
        title="Average",
        comment="It was okay, nothing special.",
        created_at=datetime(2025, 10, 4, 9, 20, tzinfo=UTC),
    ),
    create(
        id="5",
        rating=5,
        title="Outstanding!",
        comment="Best experience I have ever had.",
        created_at=datetime(2025, 10, 5, 18, 0, tzinfo=UTC),
    ),
)


async def seed_reviews(repository, reviews=None) -> int:
    """Save each review (upsert, so re-seeding is harmless) and return how many were written."""
    count = 0
    for review in SAMPLE_REVIEWS if reviews is None else reviews:
        await repository.save(review)
        logger.info("review_seeded", review_id=review.id, title=review.title)
        count += 1
    return count

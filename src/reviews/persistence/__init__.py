"""Review storage adapters: pluggable implementations of ReviewRepository."""

from reviews.config import Settings
from reviews.review.repository import ReviewRepository


def build_repository(settings: Settings) -> ReviewRepository:
    """Return a new repository for the configured adapter.

    Uses the in-memory store by default. Select Cosmos DB with
    REVIEW_REPOSITORY=cosmos and the COSMOS_* variables.
    """
    if settings.repository == "memory":
        from reviews.persistence.memory import InMemoryReviewRepository

        return InMemoryReviewRepository()
    if settings.repository == "cosmos":
        from reviews.persistence.cosmos import CosmosOptions, CosmosReviewRepository

        return CosmosReviewRepository.from_options(
            CosmosOptions(
                endpoint=settings.cosmos_endpoint,
                key=settings.cosmos_key,
                database_id=settings.cosmos_database,
                container_id=settings.cosmos_container,
            )
        )
    raise ValueError(f"Unknown review repository: {settings.repository}")

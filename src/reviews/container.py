"""Composition root: wires the repository, id generator, and clock into use cases.

One ``ReviewServices`` is built at process start (by the web app or the
management CLI) and owns the repository's lifecycle. Tests build their own
with substitute collaborators.
"""

from datetime import UTC, datetime
from uuid import uuid4

from reviews.config import Settings
from reviews.persistence import build_repository
from reviews.review.listing import ListReviewsHandler
from reviews.review.submission import AddReviewHandler


def _uuid() -> str:
    return str(uuid4())


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ReviewServices:
    def __init__(self, repository, generate_id=None, now=None):
        self.repository = repository
        self.generate_id = generate_id or _uuid
        self.now = now or _utcnow

        # Use cases bound to their dependencies: ``await services.add_review(command)``
        self.add_review = AddReviewHandler(self.repository, self.generate_id, self.now).add_review
        self.list_reviews = ListReviewsHandler(self.repository).list_reviews

    async def close(self) -> None:
        await self.repository.close()


def build_services(settings: Settings) -> ReviewServices:
    return ReviewServices(build_repository(settings))

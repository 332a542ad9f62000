"""In-memory review repository: for tests, development, and seeding demos.

Reviews live in an ordered list and are looked up by linear scan. Nothing
survives the process. Mutations are serialised with an ``asyncio.Lock`` so
concurrent saves and deletes of one id leave a consistent list.
"""

import asyncio

from reviews.review.repository import ReviewRepository
from reviews.review.review import Review


class InMemoryReviewRepository(ReviewRepository):
    def __init__(self, reviews=None):
        self._reviews: list[Review] = list(reviews or [])
        self._lock = asyncio.Lock()

    def _index_of(self, review_id: str) -> int:
        for index, review in enumerate(self._reviews):
            if review.id == review_id:
                return index
        return -1

    async def find_by_id(self, review_id: str) -> Review | None:
        index = self._index_of(review_id)
        return self._reviews[index] if index >= 0 else None

    async def find_all(self) -> list[Review]:
        return list(self._reviews)

    async def save(self, review: Review) -> Review:
        async with self._lock:
            index = self._index_of(review.id)
            if index >= 0:
                self._reviews[index] = review
            else:
                self._reviews.append(review)
        return review

    async def delete(self, review_id: str) -> bool:
        async with self._lock:
            index = self._index_of(review_id)
            if index < 0:
                return False
            del self._reviews[index]
        return True

    async def exists(self, review_id: str) -> bool:
        return self._index_of(review_id) >= 0

from datetime import UTC, datetime

import pytest
from reviews.container import ReviewServices
from reviews.persistence.memory import InMemoryReviewRepository

FIXED_NOW = datetime(2025, 10, 19, 12, 0, tzinfo=UTC)


class SequentialIds:
    """Id generator that hands out review-1, review-2, ... and counts calls."""

    def __init__(self, prefix="review"):
        self.prefix = prefix
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return f"{self.prefix}-{self.calls}"


class FixedClock:
    def __init__(self, now=FIXED_NOW):
        self.now = now
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.now


class BrokenRepository(InMemoryReviewRepository):
    """In-memory repository whose selected operations raise."""

    def __init__(self, failing=("find_by_id", "find_all", "save", "delete", "exists"), error=None):
        super().__init__()
        self.failing = set(failing)
        self.error = error or ConnectionError("Storage unavailable")

    def _maybe_fail(self, operation):
        if operation in self.failing:
            raise self.error

    async def find_by_id(self, review_id):
        self._maybe_fail("find_by_id")
        return await super().find_by_id(review_id)

    async def find_all(self):
        self._maybe_fail("find_all")
        return await super().find_all()

    async def save(self, review):
        self._maybe_fail("save")
        return await super().save(review)

    async def delete(self, review_id):
        self._maybe_fail("delete")
        return await super().delete(review_id)

    async def exists(self, review_id):
        self._maybe_fail("exists")
        return await super().exists(review_id)


@pytest.fixture()
def repository():
    return InMemoryReviewRepository()


@pytest.fixture()
def id_generator():
    return SequentialIds()


@pytest.fixture()
def clock():
    return FixedClock()


@pytest.fixture()
def services(repository, id_generator, clock):
    return ReviewServices(repository, generate_id=id_generator, now=clock)


@pytest.fixture()
def failing_repository():
    """Factory: ``failing_repository("save")`` breaks only ``save``; no arguments breaks everything."""

    def _build(*operations, error=None):
        if operations:
            return BrokenRepository(failing=operations, error=error)
        return BrokenRepository(error=error)

    return _build

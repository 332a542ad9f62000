"""Review repository port: abstract interface for review persistence.

All storage adapters must implement this interface. Use cases program against
the port; adapters are swapped via configuration.

Every operation may suspend on I/O and may raise for storage failures.
"Not found" is never an error: lookups return ``None`` or ``False``.
"""

from abc import ABC, abstractmethod

from reviews.review.review import Review


class ReviewRepository(ABC):
    """Abstract interface for review storage adapters."""

    @abstractmethod
    async def find_by_id(self, review_id: str) -> Review | None:
        """Return the review with the given id, or None if there is none."""
        ...

    @abstractmethod
    async def find_all(self) -> list[Review]:
        """Return every stored review.

        No ordering is guaranteed; callers that need one must sort.
        """
        ...

    @abstractmethod
    async def save(self, review: Review) -> Review:
        """Insert the review, or overwrite the stored one with the same id."""
        ...

    @abstractmethod
    async def delete(self, review_id: str) -> bool:
        """Remove the review. Returns False when the id was not stored."""
        ...

    @abstractmethod
    async def exists(self, review_id: str) -> bool:
        ...

    async def close(self) -> None:
        """Release connections held by the adapter."""
        return None

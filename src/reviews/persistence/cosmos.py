"""Azure Cosmos DB review repository.

Reviews are stored one document per review in a container partitioned on
``/id``. The document mirrors the aggregate except that ``createdAt`` is an
ISO-8601 string. A 404 from Cosmos means "not found" and is translated into
``None``/``False``; every other failure propagates to the caller.
"""

from dataclasses import dataclass
from datetime import datetime

import structlog
from azure.cosmos.aio import CosmosClient
from azure.cosmos.exceptions import CosmosResourceNotFoundError

from reviews.review.repository import ReviewRepository
from reviews.review.review import Review

logger = structlog.get_logger(__name__)

ALL_REVIEWS_QUERY = "SELECT * FROM c"


@dataclass(frozen=True)
class CosmosOptions:
    endpoint: str
    key: str
    database_id: str
    container_id: str

    def missing(self) -> list[str]:
        return [name for name in ("endpoint", "key", "database_id", "container_id") if not getattr(self, name)]


def to_document(review: Review) -> dict:
    return {
        "id": review.id,
        "rating": review.rating,
        "title": review.title,
        "comment": review.comment,
        "createdAt": review.created_at.isoformat(),
    }


def from_document(document: dict) -> Review:
    # Cosmos adds system properties (_rid, _etag, _ts, ...) that are ignored here
    return Review(
        id=document["id"],
        rating=document["rating"],
        title=document["title"],
        comment=document["comment"],
        created_at=datetime.fromisoformat(document["createdAt"]),
    )


class CosmosReviewRepository(ReviewRepository):
    def __init__(self, container, client=None):
        self._container = container
        self._client = client

    @classmethod
    def from_options(cls, options: CosmosOptions) -> "CosmosReviewRepository":
        missing = options.missing()
        if missing:
            raise ValueError(f"CosmosReviewRepository: Missing required options: {', '.join(missing)}")

        client = CosmosClient(options.endpoint, credential=options.key)
        container = client.get_database_client(options.database_id).get_container_client(options.container_id)
        logger.debug(
            "cosmos_repository_configured",
            endpoint=options.endpoint,
            database_id=options.database_id,
            container_id=options.container_id,
        )
        return cls(container, client=client)

    async def find_by_id(self, review_id: str) -> Review | None:
        try:
            document = await self._container.read_item(item=review_id, partition_key=review_id)
        except CosmosResourceNotFoundError:
            return None
        return from_document(document) if document else None

    async def find_all(self) -> list[Review]:
        return [from_document(document) async for document in self._container.query_items(query=ALL_REVIEWS_QUERY)]

    async def save(self, review: Review) -> Review:
        await self._container.upsert_item(body=to_document(review))
        return review

    async def delete(self, review_id: str) -> bool:
        try:
            await self._container.delete_item(item=review_id, partition_key=review_id)
        except CosmosResourceNotFoundError:
            return False
        return True

    async def exists(self, review_id: str) -> bool:
        try:
            document = await self._container.read_item(item=review_id, partition_key=review_id)
        except CosmosResourceNotFoundError:
            return False
        return bool(document)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()

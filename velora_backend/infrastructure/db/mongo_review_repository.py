# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.repositories.review_repository import ReviewRepository
from ...domain.models.review import Review
from ...domain.constants import ReviewFields
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import get_review_collection


class MongoReviewRepository(ReviewRepository):
    """MongoDB implementation of ReviewRepository"""

    def __init__(self, review_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.review_collection = review_collection if review_collection is not None else get_review_collection()

    async def create(self, review: Review) -> Review:
        if not review:
            raise ValueError("Review cannot be None")

        doc = {
            ReviewFields.AUTHOR: review.author.strip(),
            ReviewFields.TEXT: review.text.strip(),
            ReviewFields.CREATED_AT: review.created_at or utc_now(),
        }

        try:
            result = await self.review_collection.insert_one(doc)
        except Exception as e:
            raise RuntimeError(f"Error creating review: {str(e)}") from e

        doc[ReviewFields.MONGO_ID] = result.inserted_id
        return self._document_to_review(doc)

    async def list_recent(self, limit: int) -> List[Review]:
        try:
            cursor = (
                self.review_collection.find({})
                .sort([(ReviewFields.CREATED_AT, -1), (ReviewFields.MONGO_ID, -1)])
                .limit(max(1, int(limit)))
            )
            reviews = []
            async for document in cursor:
                reviews.append(self._document_to_review(document))
            return reviews
        except Exception as e:
            raise RuntimeError(f"Error listing reviews: {str(e)}") from e

    def _document_to_review(self, document: Dict[str, Any]) -> Review:
        if not document or ReviewFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return Review(
            id=str(document[ReviewFields.MONGO_ID]),
            author=document.get(ReviewFields.AUTHOR, ""),
            text=document.get(ReviewFields.TEXT, ""),
            created_at=ensure_utc(document.get(ReviewFields.CREATED_AT)),
        )

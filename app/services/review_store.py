import logging
from typing import Any, List, Mapping
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import errors

from app.models.review.review import validate_review
from app.utilities.convert_object_id import convert_object_ids
from app.utilities.errors import StoreUnavailableError

logger = logging.getLogger(__name__)


class ReviewStore:
    """Persistence for review documents held in a single Mongo collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def create(self, candidate: Mapping[str, Any]) -> dict:
        review = validate_review(candidate)
        review_doc = review.model_dump()

        try:
            result = await self.collection.insert_one(review_doc)
        except errors.PyMongoError as e:
            raise StoreUnavailableError(f"Unable to save review: {e}") from e

        review_doc["_id"] = result.inserted_id
        logger.debug("Stored review %s", result.inserted_id)
        return convert_object_ids(review_doc)

    async def list_all(self) -> List[dict]:
        # Natural order, no sort applied
        try:
            reviews = await self.collection.find({}).to_list(length=None)
        except errors.PyMongoError as e:
            raise StoreUnavailableError(f"Unable to read reviews: {e}") from e

        return convert_object_ids(reviews)

"""
MongoDB Blog Repository

Wraps a pymongo Collection handed in by the caller. The repository never
opens its own connection; connect_repository() in config.py owns the
MongoClient lifecycle.
"""

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.collection import Collection

from .base import BlogRepositoryInterface, WriteResult

logger = logging.getLogger(__name__)


class MongoBlogRepository(BlogRepositoryInterface):
    """
    Blog repository over a single MongoDB collection.

    Error Handling:
    - Fail-fast: PyMongoError propagates to caller
    - No retries; the HTTP layer maps driver errors to a 500
    """

    def __init__(self, collection: Collection):
        """
        Args:
            collection: pymongo (or API-compatible) collection holding blogs
        """
        self._collection = collection

    def find_all(self) -> List[Dict[str, Any]]:
        return list(self._collection.find({}))

    def find_by_id(self, blog_id: ObjectId) -> Optional[Dict[str, Any]]:
        return self._collection.find_one({"_id": blog_id})

    def insert(self, document: Dict[str, Any]) -> WriteResult:
        # insert_one mutates its argument by adding _id
        result = self._collection.insert_one(dict(document))
        logger.debug(f"Inserted blog {result.inserted_id}")

        return WriteResult(
            matched_count=0,
            modified_count=1,
            inserted_id=str(result.inserted_id),
        )

    def insert_many(self, documents: List[Dict[str, Any]]) -> List[str]:
        if not documents:
            return []
        result = self._collection.insert_many([dict(d) for d in documents])
        return [str(i) for i in result.inserted_ids]

    def replace(self, blog_id: ObjectId, document: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Full replace of a blog's fields.

        find_one_and_replace keeps `_id` and swaps every other field, so
        fields absent from `document` are removed.
        """
        return self._collection.find_one_and_replace(
            {"_id": blog_id},
            dict(document),
            return_document=ReturnDocument.AFTER,
        )

    def delete(self, blog_id: ObjectId) -> WriteResult:
        result = self._collection.delete_one({"_id": blog_id})

        return WriteResult(
            matched_count=result.deleted_count,
            modified_count=result.deleted_count,
        )

    def delete_all(self) -> WriteResult:
        result = self._collection.delete_many({})

        return WriteResult(
            matched_count=result.deleted_count,
            modified_count=result.deleted_count,
        )

    def count(self) -> int:
        return self._collection.count_documents({})

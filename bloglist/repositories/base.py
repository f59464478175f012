"""
Repository Interface Definitions

Defines the abstract interface for blog repository operations so the
resource handler never talks to a driver directly. The concrete store is
injected at construction time.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidId

from ..errors import MalformedIdentifierError


@dataclass
class WriteResult:
    """
    Result of a write operation.

    Attributes:
        matched_count: Number of documents that matched the filter
        modified_count: Number of documents actually modified (or deleted)
        inserted_id: ID of the inserted document (if any)
    """
    matched_count: int
    modified_count: int
    inserted_id: Optional[str] = None


def parse_object_id(value: Any) -> ObjectId:
    """
    Convert a path parameter to an ObjectId.

    Raises:
        MalformedIdentifierError: If value is not a valid ObjectId
    """
    if isinstance(value, ObjectId):
        return value
    # ObjectId(None) generates a fresh id and 12 raw bytes are accepted as-is
    if not isinstance(value, str):
        raise MalformedIdentifierError(value)
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise MalformedIdentifierError(value) from e


class BlogRepositoryInterface(ABC):
    """
    Abstract interface for the blogs collection.

    All methods follow fail-fast semantics: driver errors propagate to
    the caller untouched.
    """

    @abstractmethod
    def find_all(self) -> List[Dict[str, Any]]:
        """Every blog document, in store-native order."""
        pass

    @abstractmethod
    def find_by_id(self, blog_id: ObjectId) -> Optional[Dict[str, Any]]:
        """Find a single blog document."""
        pass

    @abstractmethod
    def insert(self, document: Dict[str, Any]) -> WriteResult:
        """Insert a single document."""
        pass

    @abstractmethod
    def insert_many(self, documents: List[Dict[str, Any]]) -> List[str]:
        """Insert several documents, returning their ids."""
        pass

    @abstractmethod
    def replace(self, blog_id: ObjectId, document: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Replace a document's fields, returning the new document or None if absent."""
        pass

    @abstractmethod
    def delete(self, blog_id: ObjectId) -> WriteResult:
        """Delete a single document."""
        pass

    @abstractmethod
    def delete_all(self) -> WriteResult:
        """Delete every document."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Count stored documents."""
        pass

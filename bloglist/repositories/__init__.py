"""
Repository pattern for the blogs collection.

Public API:
- BlogRepositoryInterface: Abstract interface for the blogs collection
- MongoBlogRepository: pymongo implementation over an injected collection
- WriteResult: Result dataclass for write operations
- parse_object_id(): Path parameter to ObjectId, or MalformedIdentifierError
- connect_repository(): Open a MongoClient and build the repository
"""

from .base import BlogRepositoryInterface, WriteResult, parse_object_id
from .config import RepositoryConfig, connect_repository
from .mongo_repository import MongoBlogRepository

__all__ = [
    "BlogRepositoryInterface",
    "MongoBlogRepository",
    "WriteResult",
    "parse_object_id",
    "RepositoryConfig",
    "connect_repository",
]

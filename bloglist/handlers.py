"""
Collection resource handler for blog entries.

Maps the CRUD verbs onto the injected repository. Identifier parsing and
validation happen here, before any query reaches the store, so a client
error never costs a round trip. Driver errors are not caught.
"""

import logging
from typing import Any, List

from .errors import BlogNotFoundError
from .models import BlogEntry
from .repositories import BlogRepositoryInterface, parse_object_id
from .validation import normalize

logger = logging.getLogger(__name__)


class BlogResourceHandler:
    """CRUD operations over the blogs collection."""

    def __init__(self, repository: BlogRepositoryInterface):
        self.repository = repository

    def list(self) -> List[BlogEntry]:
        """Every stored entry in store-native order."""
        return [BlogEntry.from_document(doc) for doc in self.repository.find_all()]

    def get(self, blog_id: str) -> BlogEntry:
        object_id = parse_object_id(blog_id)
        doc = self.repository.find_by_id(object_id)
        if doc is None:
            raise BlogNotFoundError(blog_id)
        return BlogEntry.from_document(doc)

    def create(self, candidate: Any) -> BlogEntry:
        """
        Validate and persist a new entry.

        Raises:
            ValidationError: Candidate failed validation (nothing is written)
        """
        entry = normalize(candidate)
        result = self.repository.insert(entry.to_document())
        entry.id = result.inserted_id
        logger.info(f"Created blog {entry.id}: {entry.title!r}")
        return entry

    def update(self, blog_id: str, replacement: Any) -> BlogEntry:
        """
        Fully replace a stored entry.

        Raises:
            MalformedIdentifierError: blog_id is not an ObjectId (checked first)
            ValidationError: Replacement failed validation
            BlogNotFoundError: No entry with that id
        """
        object_id = parse_object_id(blog_id)
        entry = normalize(replacement)

        doc = self.repository.replace(object_id, entry.to_document())
        if doc is None:
            raise BlogNotFoundError(blog_id)

        logger.info(f"Replaced blog {blog_id}")
        return BlogEntry.from_document(doc)

    def delete(self, blog_id: str) -> None:
        """Remove an entry. Deleting an absent entry still succeeds."""
        object_id = parse_object_id(blog_id)
        result = self.repository.delete(object_id)
        if result.modified_count:
            logger.info(f"Deleted blog {blog_id}")
        else:
            logger.debug(f"Delete of absent blog {blog_id} ignored")

"""
Data model for blog entries.

BlogEntry is the typed record every layer passes around. MongoDB
documents are converted at the repository boundary so the raw `_id`
ObjectId never leaves the persistence layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class FieldError:
    """A single failed field rule."""
    field: str
    message: str


@dataclass
class BlogEntry:
    """
    A single blog record.

    Attributes:
        title: Blog title (required, non-empty)
        author: Blog author (required, non-empty)
        url: Link to the blog post (required, non-empty)
        likes: Like count, never negative
        id: Store-assigned identifier as a hex string (None until persisted)
    """
    title: str
    author: str
    url: str
    likes: int = 0
    id: Optional[str] = None

    def to_document(self) -> Dict[str, Any]:
        """Fields to persist. The identifier is owned by the store."""
        return {
            "title": self.title,
            "author": self.author,
            "url": self.url,
            "likes": self.likes,
        }

    def to_json(self) -> Dict[str, Any]:
        """Serialize for an HTTP response; `id` is always plain text."""
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "url": self.url,
            "likes": self.likes,
        }

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "BlogEntry":
        """
        Build an entry from a MongoDB document.

        Unknown fields are dropped and a missing `likes` reads as 0.
        """
        raw_id = doc.get("_id")
        return cls(
            id=str(raw_id) if raw_id is not None else None,
            title=doc.get("title", ""),
            author=doc.get("author", ""),
            url=doc.get("url", ""),
            likes=doc.get("likes") or 0,
        )


@dataclass
class ValidationResult:
    """Outcome of validating a candidate: an entry or a list of field errors."""
    entry: Optional[BlogEntry] = None
    errors: List[FieldError] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.errors

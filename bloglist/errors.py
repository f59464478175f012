"""
Error taxonomy for the blog list service.

Every error raised by the validator, the resource handler or the
repository layer derives from BlogListError and carries the HTTP status
the Flask error handler should answer with.
"""

from typing import List, Optional

from .models import FieldError


class BlogListError(Exception):
    """Base class for client-facing errors."""

    status_code: int = 400

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        """Convert to the JSON error body."""
        return {"error": self.message}


class ValidationError(BlogListError):
    """A candidate blog entry is missing a required field or has a bad value."""

    status_code = 400

    def __init__(self, errors: List[FieldError]):
        self.errors = list(errors)
        details = ", ".join(f"{e.field}: {e.message}" for e in self.errors)
        super().__init__(f"Blog validation failed: {details}")


class MalformedIdentifierError(BlogListError):
    """An identifier cannot be parsed into a MongoDB ObjectId."""

    status_code = 400

    def __init__(self, value: object):
        self.value = value
        super().__init__("malformatted id")


class BlogNotFoundError(BlogListError):
    status_code = 404

    def __init__(self, blog_id: str):
        self.blog_id = blog_id
        super().__init__(f"blog {blog_id} not found")

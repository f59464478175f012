"""
Validation rules for candidate blog entries.

validate_blog() is pure and returns a ValidationResult; normalize() is
the raising variant the resource handler calls. Rules:
- title, author and url are required non-empty strings
- likes defaults to 0 and must otherwise be a non-negative int64
- unknown fields (including a client-sent id) are ignored
"""

from typing import Any, List, Mapping, Optional

from .errors import ValidationError
from .models import BlogEntry, FieldError, ValidationResult

REQUIRED_TEXT_FIELDS = ("title", "author", "url")

# BSON stores integers in at most 8 signed bytes
MAX_LIKES = 2**63 - 1


def _check_required_text(candidate: Mapping[str, Any], name: str) -> Optional[FieldError]:
    value = candidate.get(name)
    if value is None:
        return FieldError(name, f"Path `{name}` is required.")
    if not isinstance(value, str):
        return FieldError(name, f"Path `{name}` must be a string.")
    if not value.strip():
        return FieldError(name, f"Path `{name}` must not be empty.")
    return None


def _check_likes(candidate: Mapping[str, Any]) -> Optional[FieldError]:
    likes = candidate.get("likes")
    if likes is None:
        return None
    # bool is an int subclass; true/false are not like counts
    if isinstance(likes, bool) or not isinstance(likes, int):
        return FieldError("likes", "Path `likes` must be an integer.")
    if likes < 0:
        return FieldError("likes", f"Path `likes` ({likes}) is less than minimum allowed value (0).")
    if likes > MAX_LIKES:
        return FieldError("likes", f"Path `likes` ({likes}) is more than maximum allowed value ({MAX_LIKES}).")
    return None


def validate_blog(candidate: Any) -> ValidationResult:
    """
    Check a candidate blog entry and fill defaults.

    Args:
        candidate: Parsed JSON body (expected to be a mapping)

    Returns:
        ValidationResult with the normalized entry, or every failing field
    """
    if not isinstance(candidate, Mapping):
        return ValidationResult(errors=[FieldError("body", "blog entry must be a JSON object")])

    errors: List[FieldError] = []
    for name in REQUIRED_TEXT_FIELDS:
        error = _check_required_text(candidate, name)
        if error:
            errors.append(error)

    likes_error = _check_likes(candidate)
    if likes_error:
        errors.append(likes_error)

    if errors:
        return ValidationResult(errors=errors)

    return ValidationResult(
        entry=BlogEntry(
            title=candidate["title"],
            author=candidate["author"],
            url=candidate["url"],
            likes=candidate.get("likes") or 0,
        )
    )


def normalize(candidate: Any) -> BlogEntry:
    """Return the normalized entry or raise ValidationError."""
    result = validate_blog(candidate)
    if not result.passed:
        raise ValidationError(result.errors)
    return result.entry

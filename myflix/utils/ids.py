"""
Document Identifiers
====================

Ids are MongoDB ObjectIds exposed as 24-character hex strings, whichever
storage backend is active.
"""
from bson import ObjectId
from bson.errors import InvalidId

from myflix.domain.exceptions import InvalidIdentifierError


def new_id() -> str:
    """Generate a fresh document id."""
    return str(ObjectId())


def is_valid_id(value: str) -> bool:
    return ObjectId.is_valid(value)


def require_valid_id(value: str, kind: str) -> str:
    """
    Return the canonical (lowercase) form of a well-formed id.

    Raises:
        InvalidIdentifierError: If `value` is not a 24-character hex ObjectId
    """
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise InvalidIdentifierError(kind, str(value))
    return str(ObjectId(value))


def to_object_id(value: str) -> ObjectId:
    """Convert a validated id string to an ObjectId."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise InvalidIdentifierError("document", str(value))

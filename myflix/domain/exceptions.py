"""
Exception Hierarchy
===================

Application-specific exceptions raised by use cases and repositories.

Each exception carries a message that is safe to return to API consumers and
an optional context dict that is only logged. Exception handlers registered on
the FastAPI application translate them into HTTP responses:

    MyFlixError (base)
    ├── ValidationFailedError   → 422 (every violation batched)
    ├── InvalidIdentifierError  → 400
    ├── NotFoundError           → 404
    ├── ConflictError           → 409
    └── AuthenticationError     → 401
"""
from typing import Any, Dict, List, Optional


class MyFlixError(Exception):
    """Base exception for all application errors."""

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationFailedError(MyFlixError):
    """
    Raised when client input breaks one or more field rules.

    Attributes:
        errors: every violation found, each {"field", "message", "value"}
    """

    def __init__(self, errors: List[Dict[str, Any]]):
        self.errors = errors
        fields = ", ".join(sorted({e["field"] for e in errors}))
        super().__init__(message=f"Invalid input for: {fields}", context={"errors": errors})


class InvalidIdentifierError(MyFlixError):
    """Raised when a path identifier is not a well-formed document id."""

    def __init__(self, kind: str, value: str):
        super().__init__(
            message=f"'{value}' is not a valid {kind} id",
            context={"kind": kind, "value": value},
        )


class NotFoundError(MyFlixError):
    """Raised when a requested user, movie, beer or brewery does not exist."""

    def __init__(self, resource: str, key: Optional[str] = None):
        message = f"{resource} was not found."
        if key is not None:
            message = f"{resource} '{key}' was not found."
        super().__init__(message=message, context={"resource": resource, "key": key})


class ConflictError(MyFlixError):
    """Raised when a write would duplicate a unique value."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message=message, context={"field": field})
        self.field = field


class AuthenticationError(MyFlixError):
    """Raised for missing, invalid or expired credentials."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message=message)

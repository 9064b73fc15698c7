"""
Failure classification for the request-handling layer.

Every failure a request can end in is one of the ApiError subclasses below.
They are raised where the failure is detected and rendered once, at the
application boundary, as ``{"error": message}`` with the matching status.

StorageError is not an ApiError. The store raises it and the CRUD handler
translates it into an operation-specific OperationFailedError; storage detail
never reaches a response body.
"""

from enum import Enum
from typing import Any


class FailureKind(str, Enum):
    """Classification of failure types."""

    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    INVALID_INPUT = "invalid_input"
    OPERATION_FAILED = "operation_failed"


class ApiError(Exception):
    """
    Base class for failures that end a request with a known status.

    Subclass this rather than raising HTTPException from services.
    """

    kind: FailureKind = FailureKind.OPERATION_FAILED
    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_body(self) -> dict[str, Any]:
        """Render as a response body."""
        return {"error": self.message}


class AuthorizationError(ApiError):
    """Missing or rejected bearer credential on a mutating route."""

    kind = FailureKind.UNAUTHORIZED
    status_code = 401


class NotFoundError(ApiError):
    """No record matches the requested identifier."""

    kind = FailureKind.NOT_FOUND
    status_code = 404


class ValidationError(ApiError):
    """Request body failed shape checks before reaching storage."""

    kind = FailureKind.INVALID_INPUT
    status_code = 400

    def __init__(self, message: str, details: list[dict[str, str]] | None = None):
        super().__init__(message)
        self.details = details or []

    def to_body(self) -> dict[str, Any]:
        return {"error": self.message, "details": self.details}


class OperationFailedError(ApiError):
    """A storage call failed; message is fixed per resource and operation."""

    kind = FailureKind.OPERATION_FAILED
    status_code = 500


class StorageError(Exception):
    """The store failed for any reason. Never inspected for sub-kind."""


class RecordNotFoundError(StorageError):
    """The store was asked to mutate a record that does not exist."""

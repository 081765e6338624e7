"""
Exception hierarchy for the take-off backend.

Data-layer errors carry an error code so API boundaries can map them to HTTP
status codes; the WebSocket gateway errors are turned into `error` frames.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


class ErrorCode:
    """Error code constants"""
    NOT_FOUND = "NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    INVALID_INPUT = "INVALID_INPUT"
    FOREIGN_KEY_VIOLATION = "FOREIGN_KEY_VIOLATION"
    DATABASE_ERROR = "DATABASE_ERROR"
    MALFORMED_MESSAGE = "MALFORMED_MESSAGE"
    UNKNOWN_MESSAGE_TYPE = "UNKNOWN_MESSAGE_TYPE"


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class TakeoffError(Exception):
    """Base exception for all take-off backend errors."""

    code: str = ErrorCode.DATABASE_ERROR

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause


# -----------------------------------------------------------------------------
# Data layer
# -----------------------------------------------------------------------------


class NotFoundError(TakeoffError):
    """Raised when a requested entity does not exist."""
    code = ErrorCode.NOT_FOUND


class AlreadyExistsError(TakeoffError):
    """Raised when a uniqueness constraint would be broken."""
    code = ErrorCode.ALREADY_EXISTS


class InvalidInputError(TakeoffError):
    """Raised when input validation fails."""
    code = ErrorCode.INVALID_INPUT


class OptimisticLockError(InvalidInputError):
    """Raised when an entity was modified since the client last read it."""

    def __init__(self, message: str = "Resource has been modified by another user", **kwargs):
        super().__init__(message, **kwargs)


class ForeignKeyViolationError(TakeoffError):
    """Raised when a referenced entity does not exist."""
    code = ErrorCode.FOREIGN_KEY_VIOLATION


class DatabaseError(TakeoffError):
    """Raised when the underlying store rejects an operation."""

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation


# -----------------------------------------------------------------------------
# WebSocket gateway
# -----------------------------------------------------------------------------


class MalformedMessageError(TakeoffError):
    """Raised when an inbound WebSocket frame is not a JSON object with a type."""
    code = ErrorCode.MALFORMED_MESSAGE


class UnknownMessageTypeError(TakeoffError):
    """Raised when an inbound WebSocket frame has an unsupported type."""
    code = ErrorCode.UNKNOWN_MESSAGE_TYPE

    def __init__(self, message_type: Any):
        super().__init__(
            f"Unknown message type: {message_type}",
            details={"type": message_type},
        )
        self.message_type = message_type

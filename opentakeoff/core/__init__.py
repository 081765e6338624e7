from .config import Settings, get_settings
from .exceptions import (
    ErrorCode,
    TakeoffError,
    NotFoundError,
    AlreadyExistsError,
    InvalidInputError,
    OptimisticLockError,
    ForeignKeyViolationError,
    DatabaseError,
    MalformedMessageError,
    UnknownMessageTypeError,
)

__all__ = [
    "Settings",
    "get_settings",
    "ErrorCode",
    "TakeoffError",
    "NotFoundError",
    "AlreadyExistsError",
    "InvalidInputError",
    "OptimisticLockError",
    "ForeignKeyViolationError",
    "DatabaseError",
    "MalformedMessageError",
    "UnknownMessageTypeError",
]

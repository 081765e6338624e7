"""Translation of domain errors into HTTP responses"""

import logging
from typing import NoReturn

from fastapi import HTTPException, status

from ...core.exceptions import (
    AlreadyExistsError,
    DatabaseError,
    ForeignKeyViolationError,
    InvalidInputError,
    NotFoundError,
    OptimisticLockError,
    TakeoffError,
)

logger = logging.getLogger(__name__)

# Most specific first: OptimisticLockError is an InvalidInputError
_STATUS_BY_ERROR = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (OptimisticLockError, status.HTTP_409_CONFLICT),
    (AlreadyExistsError, status.HTTP_409_CONFLICT),
    (InvalidInputError, status.HTTP_400_BAD_REQUEST),
    (ForeignKeyViolationError, status.HTTP_400_BAD_REQUEST),
    (DatabaseError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_for(exception: TakeoffError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exception, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def raise_http_error(exception: TakeoffError) -> NoReturn:
    """
    Raise the HTTPException matching a domain error.

    The response body is `{"detail": {"error", "code", "details"}}`.
    """
    status_code = status_for(exception)
    if status_code >= 500:
        logger.error(f"Request failed: {exception.message}", exc_info=exception.cause or exception)

    raise HTTPException(
        status_code=status_code,
        detail={
            "error": exception.message,
            "code": exception.code,
            "details": exception.details,
        },
    ) from exception

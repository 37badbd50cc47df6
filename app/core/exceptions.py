# app/core/exceptions.py

from fastapi import status


class AppError(Exception):
    """Base class for errors surfaced to API clients.

    Every subclass carries the HTTP status it maps to; the message is shown to
    the caller verbatim, so it must be stable and human readable.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Malformed or missing input"""

    status_code = status.HTTP_400_BAD_REQUEST


class SelfActionError(AppError):
    """Actor and target coincide where that is not allowed"""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class ForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN


class ConflictError(AppError):
    """Uniqueness violation or a request that contradicts current state"""

    status_code = status.HTTP_409_CONFLICT


class InternalError(AppError):
    """Persistence or unexpected failure; detail stays in the server log"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)

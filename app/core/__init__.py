# app/core/__init__.py

from .config import get_settings, Settings
from .auth import (
    verify_password,
    get_password_hash,
    create_access_token,
    verify_token,
)
from .exceptions import (
    AppError,
    ValidationError,
    SelfActionError,
    NotFoundError,
    ForbiddenError,
    ConflictError,
    InternalError,
)

__all__ = [
    "get_settings",
    "Settings",
    "verify_password",
    "get_password_hash",
    "create_access_token",
    "verify_token",
    "AppError",
    "ValidationError",
    "SelfActionError",
    "NotFoundError",
    "ForbiddenError",
    "ConflictError",
    "InternalError",
]

"""Core modules for the application."""

from bilemo.core.dependencies import DBSession, Hasher
from bilemo.core.exceptions import (
    AppException,
    NotFoundException,
    ValidationException,
    DuplicateException,
    InternalException,
    EnterpriseNotFoundException,
    UserNotFoundException,
    ProductNotFoundException,
)
from bilemo.core.security import (
    PasswordHasher,
    get_password_hasher,
    generate_temporary_password,
)

__all__ = [
    "DBSession",
    "Hasher",
    "AppException",
    "NotFoundException",
    "ValidationException",
    "DuplicateException",
    "InternalException",
    "EnterpriseNotFoundException",
    "UserNotFoundException",
    "ProductNotFoundException",
    "PasswordHasher",
    "get_password_hasher",
    "generate_temporary_password",
]

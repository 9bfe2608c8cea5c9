"""
Password hashing utilities
"""

import secrets
import string

from passlib.context import CryptContext

from bilemo.config import settings


class PasswordHasher:
    """
    One-way salted credential hasher.

    Services receive an instance at construction instead of reaching for a
    module-level context, so tests can swap in a cheaper cost factor.
    """

    def __init__(self, rounds: int | None = None):
        self.context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds or settings.bcrypt_rounds,
        )

    def hash(self, password: str) -> str:
        """Hash a password using bcrypt."""
        return self.context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        return self.context.verify(plain_password, hashed_password)


_default_hasher: PasswordHasher | None = None


def get_password_hasher() -> PasswordHasher:
    """Shared hasher built from settings."""
    global _default_hasher
    if _default_hasher is None:
        _default_hasher = PasswordHasher()
    return _default_hasher


def generate_temporary_password(length: int = 12) -> str:
    """Generate a secure temporary password."""
    alphabet = string.ascii_letters + string.digits + "!@#$%^&*"

    # Ensure at least one of each required character type
    password = [
        secrets.choice(string.ascii_lowercase),
        secrets.choice(string.ascii_uppercase),
        secrets.choice(string.digits),
        secrets.choice("!@#$%^&*"),
    ]

    password.extend(secrets.choice(alphabet) for _ in range(length - 4))

    secrets.SystemRandom().shuffle(password)

    return ''.join(password)

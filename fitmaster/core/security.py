"""Password hashing and HTTP Basic credential checks."""

from __future__ import annotations

import uuid

from passlib.context import CryptContext

password_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

# Verified against when the email is unknown, so both paths do one hash check.
_UNKNOWN_USER_HASH = password_context.hash("unknown-user")


def hash_password(plain: str) -> str:
    return password_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    return password_context.verify(plain, hashed)


def authenticate(account: tuple[uuid.UUID, str] | None, password: str) -> uuid.UUID | None:
    """User id when `password` matches the stored (id, hash) pair, else None."""
    if account is None:
        verify_password(password, _UNKNOWN_USER_HASH)
        return None
    user_id, hashed = account
    return user_id if verify_password(password, hashed) else None

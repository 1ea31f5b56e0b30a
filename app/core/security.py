"""
Password hashing (bcrypt via passlib).
"""

from __future__ import annotations

from passlib.context import CryptContext

from app.core.config import settings

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


# ── Passwords ───────────────────────────────────────────────────────
def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def get_password_hash(plain: str) -> str:
    return pwd_context.hash(plain)


def is_password_hash(value: str) -> bool:
    """Return ``True`` if *value* is a hash this context can verify against."""
    return pwd_context.identify(value) is not None

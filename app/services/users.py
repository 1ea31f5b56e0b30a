"""
User persistence — the only path through which a User row is written.

``save_user`` runs field validation, checks account / email uniqueness,
hashes a changed password and commits, in that order.  A failure at any
step raises :class:`UserValidationError` before anything is written.
"""

from __future__ import annotations

import logging

from sqlalchemy import inspect, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.exceptions import UserValidationError
from app.core.security import get_password_hash
from app.models.user import User, UserRole
from app.services.validation import FieldError, FieldErrorKind, field_error, validate_user

logger = logging.getLogger(__name__)


def password_modified(user: User) -> bool:
    """True for a new user, or when ``password`` was assigned since load."""
    state = inspect(user)
    if state.transient or state.pending:
        return True
    return state.attrs.password.history.has_changes()


async def _find_conflicts(
    db: AsyncSession, user_id: int | None, account: str, email: str
) -> list[FieldError]:
    stmt = select(User.account, User.email).where(
        or_(User.account == account, User.email == email)
    )
    if user_id is not None:
        stmt = stmt.where(User.id != user_id)

    # The user being saved may be dirty; never flush it from here.
    with db.no_autoflush:
        rows = (await db.execute(stmt)).all()

    errors: list[FieldError] = []
    if any(row.account == account for row in rows):
        errors.append(field_error("account", FieldErrorKind.not_unique))
    if any(row.email == email for row in rows):
        errors.append(field_error("email", FieldErrorKind.not_unique))
    return errors


async def _discard_changes(db: AsyncSession, user: User) -> None:
    state = inspect(user)
    if state.persistent:
        with db.no_autoflush:
            await db.refresh(user)
    elif state.pending:
        db.expunge(user)


async def save_user(db: AsyncSession, user: User) -> User:
    """Validate, hash the password if it changed, and persist *user*.

    A rejected save leaves both the stored row and the session untouched:
    unsaved changes on a loaded user are discarded before raising.
    """
    modified = password_modified(user)
    result = validate_user(
        account=user.account,
        password=user.password,
        email=user.email,
        password_modified=modified,
    )
    if not result.ok:
        await _discard_changes(db, user)
        raise UserValidationError(result.errors)

    user_id, account, email = user.id, user.account, user.email
    conflicts = await _find_conflicts(db, user_id, account, email)
    if conflicts:
        await _discard_changes(db, user)
        raise UserValidationError(conflicts)

    if modified:
        user.password = get_password_hash(user.password)

    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        # Lost a race against a concurrent insert of the same account / email.
        await db.rollback()
        conflicts = await _find_conflicts(db, user_id, account, email)
        if not conflicts:
            raise
        raise UserValidationError(conflicts) from None

    await db.refresh(user)
    logger.info("Saved user %s (id=%s)", user.account, user.id)
    return user


async def get_user(db: AsyncSession, user_id: int) -> User | None:
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_user_by_account(db: AsyncSession, account: str) -> User | None:
    result = await db.execute(select(User).where(User.account == account))
    return result.scalar_one_or_none()


async def create_user(
    db: AsyncSession,
    *,
    account: str | None,
    password: str | None,
    email: str | None,
    role: UserRole = UserRole.USER,
) -> User:
    user = User(
        account=account,
        password=password,
        email=email,
        role=int(role),
        tokens=[],
        cart=[],
    )
    return await save_user(db, user)


async def update_user(
    db: AsyncSession,
    user: User,
    *,
    email: str | None = None,
    password: str | None = None,
) -> User:
    """Apply the given changes; the password is only re-hashed if supplied."""
    if email is not None:
        user.email = email
    if password is not None:
        user.password = password
    return await save_user(db, user)


async def ensure_first_admin(db: AsyncSession) -> User:
    """Create the configured admin account unless it already exists."""
    existing = await get_user_by_account(db, settings.FIRST_ADMIN_ACCOUNT)
    if existing is not None:
        return existing
    admin = await create_user(
        db,
        account=settings.FIRST_ADMIN_ACCOUNT,
        password=settings.FIRST_ADMIN_PASSWORD,
        email=settings.FIRST_ADMIN_EMAIL,
        role=UserRole.ADMIN,
    )
    logger.info(
        "Default admin created: %s (password: <redacted>)",
        settings.FIRST_ADMIN_ACCOUNT,
    )
    return admin

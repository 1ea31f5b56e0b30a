"""
User endpoints — registration, profile lookup and credential updates.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.deps import get_db, get_user_or_404
from app.models.user import User
from app.schemas.user import UserCreate, UserRead, UserUpdate
from app.services.users import create_user, update_user

router = APIRouter(prefix="/users", tags=["users"])
logger = logging.getLogger(__name__)


@router.post("", response_model=UserRead, status_code=201)
async def register_user(
    body: UserCreate,
    db: AsyncSession = Depends(get_db),
) -> User:
    """Register a new account with the default USER role."""
    return await create_user(
        db,
        account=body.account,
        password=body.password,
        email=body.email,
    )


@router.get("/{user_id}", response_model=UserRead)
async def read_user(user: User = Depends(get_user_or_404)) -> User:
    return user


@router.patch("/{user_id}", response_model=UserRead)
async def patch_user(
    body: UserUpdate,
    user: User = Depends(get_user_or_404),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Change email and / or password. Omitted fields are left untouched."""
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    user = await update_user(db, user, **changes)
    logger.info("User %s updated fields: %s", user.id, sorted(changes))
    return user

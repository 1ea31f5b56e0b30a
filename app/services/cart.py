"""
Cart mutations.  Every line keeps ``quantity >= 1``; a line set to zero
is removed instead of stored.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import UserValidationError
from app.models.cart import CartItem
from app.models.user import User
from app.services.validation import (MAX_INT, FieldErrorKind, field_error,
                                     validate_cart_item)

logger = logging.getLogger(__name__)


async def _commit(db: AsyncSession, user: User) -> None:
    # Cart lines are part of the user record.
    user.updated_at = datetime.now(timezone.utc)
    await db.commit()


def find_cart_line(user: User, product_id: int) -> CartItem | None:
    for item in user.cart:
        if item.product_id == product_id:
            return item
    return None


async def add_to_cart(
    db: AsyncSession, user: User, product_id: int | None, quantity: int | None
) -> User:
    """Add *quantity* units of a product, merging into an existing line."""
    result = validate_cart_item(product_id=product_id, quantity=quantity)
    if not result.ok:
        raise UserValidationError(result.errors)

    line = find_cart_line(user, product_id)  # type: ignore[arg-type]
    if line is not None:
        if line.quantity + quantity > MAX_INT:  # type: ignore[operator]
            raise UserValidationError([field_error("quantity", FieldErrorKind.out_of_range)])
        line.quantity += quantity
    else:
        user.cart.append(CartItem(product_id=product_id, quantity=quantity))

    await _commit(db, user)
    logger.info("User %s added %s x product %s", user.id, quantity, product_id)
    return user


async def set_item_quantity(
    db: AsyncSession, user: User, line: CartItem, quantity: int
) -> User:
    if not 0 <= quantity <= MAX_INT:
        raise UserValidationError([field_error("quantity", FieldErrorKind.out_of_range)])
    if quantity == 0:
        user.cart.remove(line)
    else:
        line.quantity = quantity
    await _commit(db, user)
    return user


async def remove_from_cart(db: AsyncSession, user: User, line: CartItem) -> User:
    user.cart.remove(line)
    await _commit(db, user)
    return user


async def clear_cart(db: AsyncSession, user: User) -> User:
    user.cart.clear()
    await _commit(db, user)
    logger.info("Cleared cart of user %s", user.id)
    return user

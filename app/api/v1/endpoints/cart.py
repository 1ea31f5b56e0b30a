"""
Shopping cart endpoints, nested under a user.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.deps import get_db, get_user_or_404
from app.models.cart import CartItem
from app.models.user import User
from app.schemas.cart import CartItemCreate, CartItemUpdate, CartRead
from app.services.cart import (add_to_cart, clear_cart, find_cart_line,
                               remove_from_cart, set_item_quantity)

router = APIRouter(prefix="/users/{user_id}/cart", tags=["cart"])


def _cart_response(user: User) -> CartRead:
    return CartRead.model_validate(
        {"items": user.cart, "cart_quantity": user.cart_quantity},
        from_attributes=True,
    )


def _line_or_404(user: User, product_id: int) -> CartItem:
    line = find_cart_line(user, product_id)
    if line is None:
        raise HTTPException(status_code=404, detail="Product not in cart")
    return line


@router.get("", response_model=CartRead)
async def read_cart(user: User = Depends(get_user_or_404)) -> CartRead:
    return _cart_response(user)


@router.post("", response_model=CartRead)
async def add_cart_item(
    body: CartItemCreate,
    user: User = Depends(get_user_or_404),
    db: AsyncSession = Depends(get_db),
) -> CartRead:
    """Add units of a product; an existing line for it is incremented."""
    user = await add_to_cart(db, user, body.product_id, body.quantity)
    return _cart_response(user)


@router.put("/{product_id}", response_model=CartRead)
async def update_cart_item(
    product_id: int,
    body: CartItemUpdate,
    user: User = Depends(get_user_or_404),
    db: AsyncSession = Depends(get_db),
) -> CartRead:
    """Set a line's quantity; 0 removes the line."""
    line = _line_or_404(user, product_id)
    user = await set_item_quantity(db, user, line, body.quantity)
    return _cart_response(user)


@router.delete("/{product_id}", response_model=CartRead)
async def delete_cart_item(
    product_id: int,
    user: User = Depends(get_user_or_404),
    db: AsyncSession = Depends(get_db),
) -> CartRead:
    line = _line_or_404(user, product_id)
    user = await remove_from_cart(db, user, line)
    return _cart_response(user)


@router.delete("", response_model=CartRead)
async def empty_cart(
    user: User = Depends(get_user_or_404),
    db: AsyncSession = Depends(get_db),
) -> CartRead:
    user = await clear_cart(db, user)
    return _cart_response(user)

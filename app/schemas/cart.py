"""Pydantic schemas for cart lines."""

from __future__ import annotations

from pydantic import BaseModel


class CartItemCreate(BaseModel):
    product_id: int | None = None
    quantity: int | None = None


class CartItemUpdate(BaseModel):
    # 0 removes the line
    quantity: int


class CartItemRead(BaseModel):
    product_id: int
    quantity: int

    model_config = {"from_attributes": True}


class CartRead(BaseModel):
    items: list[CartItemRead]
    cart_quantity: int

"""Pydantic schemas for User CRUD.

Field rules (length, format, uniqueness) live in
``app.services.validation`` so the API and internal callers share them;
these models only shape and normalise the payload.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, field_validator

from app.schemas.cart import CartItemRead


class UserCreate(BaseModel):
    account: str | None = None
    password: str | None = None
    email: str | None = None

    @field_validator("account")
    @classmethod
    def _strip_account(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else v

    @field_validator("email")
    @classmethod
    def _normalise_email(cls, v: str | None) -> str | None:
        return v.strip().lower() if v is not None else v


class UserUpdate(BaseModel):
    email: str | None = None
    password: str | None = None

    @field_validator("email")
    @classmethod
    def _normalise_email(cls, v: str | None) -> str | None:
        return v.strip().lower() if v is not None else v


class UserRead(BaseModel):
    id: int
    account: str
    email: str
    role: int
    cart: list[CartItemRead]
    cart_quantity: int
    created_at: datetime | None
    updated_at: datetime | None

    model_config = {"from_attributes": True}

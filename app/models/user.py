"""
User model — account credentials, role and shopping cart.
"""

from __future__ import annotations

import enum
from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, Integer, String
from sqlalchemy.ext.mutable import MutableList
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship

from app.db.base import Base
from app.models.cart import CartItem, cart_quantity


class UserRole(enum.IntEnum):
    USER = 0
    ADMIN = 1


class User(Base):
    __tablename__ = "users"

    id: int = Column(Integer, primary_key=True, index=True)  # type: ignore[assignment]
    account: str = Column(String(20), unique=True, nullable=False, index=True)  # type: ignore[assignment]
    # Plaintext only between assignment and save_user(); bcrypt hash once stored.
    password: str = Column(String(128), nullable=False)  # type: ignore[assignment]
    email: str = Column(String(320), unique=True, nullable=False, index=True)  # type: ignore[assignment]
    tokens: list[str] = Column(  # type: ignore[assignment]
        MutableList.as_mutable(JSON),
        nullable=False,
        default=lambda: [],
    )
    role: int = Column(  # type: ignore[assignment]
        Integer,
        nullable=False,
        default=int(UserRole.USER),
        server_default=str(int(UserRole.USER)),
    )
    created_at: datetime = Column(  # type: ignore[assignment]
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: datetime = Column(  # type: ignore[assignment]
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    cart = relationship(
        CartItem,
        back_populates="user",
        order_by=CartItem.position,
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def cart_quantity(self) -> int:
        return cart_quantity(self.cart)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

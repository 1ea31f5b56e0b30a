"""
CartItem model — one line of a user's shopping cart.

Lines are owned by exactly one user and deleted with it.  ``product_id``
points at a product in the external catalogue; there is no foreign key
because the catalogue does not live in this database.
"""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from app.db.base import Base


class CartItem(Base):
    __tablename__ = "cart_items"
    __table_args__ = (
        UniqueConstraint("user_id", "product_id", name="uq_cart_user_product"),
        CheckConstraint("quantity >= 1", name="ck_cart_quantity_positive"),
    )

    id: int = Column(Integer, primary_key=True, index=True)  # type: ignore[assignment]
    user_id: int = Column(  # type: ignore[assignment]
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    product_id: int = Column(Integer, nullable=False)  # type: ignore[assignment]
    quantity: int = Column(Integer, nullable=False, default=1)  # type: ignore[assignment]
    position: int = Column(Integer, nullable=False, default=0)  # type: ignore[assignment]

    user = relationship("User", back_populates="cart")


def cart_quantity(items: Iterable[CartItem]) -> int:
    """Total number of units across all cart lines (0 for an empty cart)."""
    return sum(item.quantity for item in items)

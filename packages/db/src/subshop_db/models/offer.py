"""Offer model."""

from __future__ import annotations

from decimal import Decimal  # noqa: TC003
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .order import Order
    from .product import Product


class Offer(TimestampMixin, Base):
    """Offers table - a priced number of terms of a product."""

    __tablename__ = "offers"

    offer_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    product_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("products.product_id"), nullable=False
    )
    description: Mapped[str | None] = mapped_column(String(100))
    price: Mapped[Decimal] = mapped_column(Numeric(6, 2), nullable=False)
    number_of_terms: Mapped[int] = mapped_column(Integer, nullable=False)

    # Relationships
    product: Mapped[Product] = relationship(back_populates="offers")
    orders: Mapped[list[Order]] = relationship(back_populates="offer")

    __table_args__ = (Index("ix_offers_product_id", "product_id"),)

    def __repr__(self) -> str:
        return f"<Offer {self.offer_id} product_id={self.product_id} price={self.price}>"

"""Order model."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Date, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .customer import Customer
    from .offer import Offer


class Order(TimestampMixin, Base):
    """Orders table - a customer's subscription to an offer."""

    __tablename__ = "orders"

    order_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    offer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("offers.offer_id"), nullable=False
    )
    customer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("customers.customer_id"), nullable=False
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    cancelled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    paid: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    reason: Mapped[str | None] = mapped_column(String(50))

    # Relationships
    offer: Mapped[Offer] = relationship(back_populates="orders")
    customer: Mapped[Customer] = relationship(back_populates="orders")

    __table_args__ = (
        Index("ix_orders_offer_id", "offer_id"),
        Index("ix_orders_customer_id", "customer_id"),
    )

    def __repr__(self) -> str:
        return f"<Order {self.order_id} offer_id={self.offer_id} customer_id={self.customer_id}>"

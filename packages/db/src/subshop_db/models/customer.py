"""Customer model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .order import Order


class Customer(TimestampMixin, Base):
    """Customers table."""

    __tablename__ = "customers"

    customer_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    email_address: Mapped[str] = mapped_column(String(100), nullable=False)
    first_name: Mapped[str | None] = mapped_column(String(100))
    last_name: Mapped[str | None] = mapped_column(String(100))

    # Relationships
    orders: Mapped[list[Order]] = relationship(back_populates="customer")

    __table_args__ = (Index("ix_customers_email_address", "email_address"),)

    def __repr__(self) -> str:
        return f"<Customer {self.customer_id} {self.email_address}>"

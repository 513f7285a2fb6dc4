"""Brand model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .product import Product


class Brand(TimestampMixin, Base):
    """Brands table - the merchant a product is sold under."""

    __tablename__ = "brands"

    brand_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)

    # Relationships
    products: Mapped[list[Product]] = relationship(back_populates="brand")

    def __repr__(self) -> str:
        return f"<Brand {self.brand_id} ({self.name})>"

"""Product model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Enum, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from subshop_core.enums import Term

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .brand import Brand
    from .offer import Offer


class Product(TimestampMixin, Base):
    """Products table - a subscription product billed per term."""

    __tablename__ = "products"

    product_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    term: Mapped[Term] = mapped_column(
        Enum(
            Term,
            name="term",
            native_enum=False,
            length=50,
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
    )
    brand_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("brands.brand_id"), nullable=False
    )

    # Relationships
    brand: Mapped[Brand] = relationship(back_populates="products")
    offers: Mapped[list[Offer]] = relationship(back_populates="product")

    __table_args__ = (Index("ix_products_brand_id", "brand_id"),)

    def __repr__(self) -> str:
        return f"<Product {self.product_id} ({self.name}, {self.term})>"

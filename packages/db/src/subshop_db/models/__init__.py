"""SQLAlchemy ORM models for Subshop."""

from .base import Base, TimestampMixin
from .brand import Brand
from .customer import Customer
from .offer import Offer
from .order import Order
from .product import Product

__all__ = [
    "Base",
    "Brand",
    "Customer",
    "Offer",
    "Order",
    "Product",
    "TimestampMixin",
]

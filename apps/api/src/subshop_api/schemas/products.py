"""Product request/response schemas."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003

from pydantic import BaseModel, ConfigDict, Field

from subshop_core.enums import Term  # noqa: TC001


class ProductResponse(BaseModel):
    """Public view of a product."""

    product_id: int
    name: str
    is_active: bool
    term: Term
    brand_id: int
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class ProductRequest(BaseModel):
    """Create or update a product.

    ``term`` stays a plain string here so an unknown value is reported by
    the product validator alongside the other field errors.
    """

    name: str = Field(max_length=50)
    is_active: bool = True
    term: str = Field(max_length=50)
    brand_id: int

"""Offer request/response schemas."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003
from decimal import Decimal  # noqa: TC003

from pydantic import BaseModel, ConfigDict, Field


class OfferResponse(BaseModel):
    """Public view of an offer."""

    offer_id: int
    product_id: int
    description: str | None = None
    price: Decimal
    number_of_terms: int
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class OfferRequest(BaseModel):
    """Create or update an offer."""

    product_id: int
    description: str | None = Field(default=None, max_length=100)
    price: Decimal = Field(max_digits=6, decimal_places=2)
    number_of_terms: int

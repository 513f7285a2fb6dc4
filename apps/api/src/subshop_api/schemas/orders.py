"""Order request/response schemas."""

from __future__ import annotations

from datetime import date, datetime  # noqa: TC003

from pydantic import BaseModel, ConfigDict, Field


class OrderResponse(BaseModel):
    """Public view of an order."""

    order_id: int
    offer_id: int
    customer_id: int
    start_date: date
    end_date: date
    updated_at: datetime
    cancelled: bool
    reason: str | None = None
    paid: bool
    model_config = ConfigDict(from_attributes=True)


class CreateOrderRequest(BaseModel):
    """Place an order for an offer."""

    offer_id: int
    customer_id: int
    start_date: date


class UpdateOrderRequest(BaseModel):
    """Change the payment / cancellation state of an order."""

    cancelled: bool
    paid: bool
    reason: str | None = Field(default=None, max_length=50)

"""Customer request/response schemas."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003

from pydantic import BaseModel, ConfigDict, Field


class CustomerResponse(BaseModel):
    """Public view of a customer."""

    customer_id: int
    email_address: str
    first_name: str | None = None
    last_name: str | None = None
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class CustomerRequest(BaseModel):
    """Create or update a customer."""

    email_address: str = Field(max_length=100)
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)

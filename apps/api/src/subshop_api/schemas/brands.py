"""Brand request/response schemas."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003

from pydantic import BaseModel, ConfigDict, Field


class BrandResponse(BaseModel):
    """Public view of a brand."""

    brand_id: int
    name: str
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class BrandRequest(BaseModel):
    """Create or update a brand."""

    name: str = Field(max_length=50)

"""Shared response schemas."""

from __future__ import annotations

from pydantic import BaseModel


class PageResponse[T](BaseModel):
    """Generic paginated list response."""

    items: list[T]
    page_index: int
    total_pages: int
    total_count: int
    has_previous_page: bool
    has_next_page: bool


class ErrorResponse(BaseModel):
    """Standard error payload."""

    detail: str | list[str]
    code: str | None = None

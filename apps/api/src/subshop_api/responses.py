"""Mapping of validation errors, results and pages onto HTTP responses."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import HTTPException, status
from pydantic import BaseModel

from subshop_api.schemas.common import PageResponse

if TYPE_CHECKING:
    from subshop_core.pagination import PaginatedList
    from subshop_core.result import Result

logger = logging.getLogger(__name__)


def ensure_valid(errors: list[str]) -> None:
    """Raise 400 carrying every validation message, if there are any."""
    if errors:
        logger.info("Rejected request: %s", "; ".join(errors))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=errors,
        )


def unwrap[T](result: Result[T]) -> T:
    """Return the result's data, or raise 400 with its failure message."""
    if not result:
        logger.info("Operation failed: %s", result.message)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=result.message,
        )
    return result.data  # type: ignore[return-value]


def not_found(entity: str, entity_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{entity} with id = {entity_id} not found",
    )


def page_response[M: BaseModel](
    page: PaginatedList[object],
    schema: type[M],
) -> PageResponse[M]:
    """Project a page of ORM rows onto ``PageResponse[schema]``."""
    return PageResponse[schema](  # type: ignore[valid-type]
        items=[schema.model_validate(item) for item in page],
        page_index=page.page_index,
        total_pages=page.total_pages,
        total_count=page.total_count,
        has_previous_page=page.has_previous_page,
        has_next_page=page.has_next_page,
    )

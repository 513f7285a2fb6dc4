"""Paginate an ordered SELECT into a :class:`PaginatedList`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import func, select

from subshop_core.pagination import PaginatedList, check_page_arguments

if TYPE_CHECKING:
    from sqlalchemy import Select
    from sqlalchemy.ext.asyncio import AsyncSession


async def paginate(
    session: AsyncSession,
    statement: Select[Any],
    page_number: int,
    page_size: int,
) -> PaginatedList[Any]:
    """Count the rows of *statement*, then fetch page *page_number* of it.

    *statement* must already carry its ORDER BY; a page past the end
    comes back empty.
    """
    check_page_arguments(page_number, page_size)

    count_stmt = select(func.count()).select_from(
        statement.order_by(None).subquery()
    )
    total_count = (await session.execute(count_stmt)).scalar_one()

    offset = (page_number - 1) * page_size
    if offset >= total_count:
        # Nothing to fetch; also keeps huge offsets away from the driver.
        return PaginatedList.from_page((), page_number, page_size, total_count)

    result = await session.execute(statement.offset(offset).limit(page_size))
    items = result.scalars().all()

    return PaginatedList.from_page(items, page_number, page_size, total_count)

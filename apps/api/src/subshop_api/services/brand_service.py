"""Brand repository service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import exists, select

from subshop_core.result import Result
from subshop_db.models import Brand, Product
from subshop_db.pagination import paginate

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from subshop_core.pagination import PaginatedList

logger = logging.getLogger(__name__)


class BrandService:
    """Reads and writes brands."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def list_brands(
        self,
        page_number: int,
        page_size: int,
        name: str | None = None,
    ) -> PaginatedList[Brand]:
        logger.debug("list_brands %s %s %s", page_number, page_size, name)

        stmt = select(Brand).order_by(Brand.brand_id)
        if name is not None:
            stmt = stmt.where(Brand.name.contains(name))

        return await paginate(self._db, stmt, page_number, page_size)

    async def get_brand(self, brand_id: int) -> Brand | None:
        logger.debug("get_brand %s", brand_id)
        return await self._db.get(Brand, brand_id)

    async def create_brand(self, name: str) -> Result[Brand]:
        logger.debug("create_brand %s", name)

        brand = Brand(name=name)
        self._db.add(brand)
        await self._db.flush()
        await self._db.refresh(brand)
        return Result.ok(brand)

    async def update_brand(self, brand_id: int, name: str) -> Result[Brand]:
        logger.debug("update_brand %s %s", brand_id, name)

        brand = await self._db.get(Brand, brand_id)
        if brand is None:
            return Result.fail(f"Brand with id = {brand_id} does not exist")

        brand.name = name
        await self._db.flush()
        await self._db.refresh(brand)
        return Result.ok(brand)

    async def delete_brand(self, brand_id: int) -> Result[int]:
        logger.debug("delete_brand %s", brand_id)

        brand = await self._db.get(Brand, brand_id)
        if brand is None:
            return Result.ok(brand_id)

        referenced = await self._db.scalar(
            select(exists().where(Product.brand_id == brand_id))
        )
        if referenced:
            return Result.fail(
                f"Brand with id = {brand_id} can't be deleted (referenced by some Product)"
            )

        await self._db.delete(brand)
        await self._db.flush()
        return Result.ok(brand_id)

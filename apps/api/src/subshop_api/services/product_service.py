"""Product repository service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import exists, select

from subshop_core.enums import Term
from subshop_core.result import Result
from subshop_db.models import Brand, Offer, Product
from subshop_db.pagination import paginate

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from subshop_core.pagination import PaginatedList

logger = logging.getLogger(__name__)


class ProductService:
    """Reads and writes products; every product belongs to a brand."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def list_products(
        self,
        page_number: int,
        page_size: int,
        name: str | None = None,
        brand: str | None = None,
        is_active: bool | None = None,
    ) -> PaginatedList[Product]:
        """List products ordered by id.

        ``name`` and ``brand`` are substring filters on the product name and
        the owning brand's name.
        """
        logger.debug(
            "list_products %s %s %s %s %s",
            page_number,
            page_size,
            name,
            brand,
            is_active,
        )

        stmt = select(Product).order_by(Product.product_id)
        if name is not None:
            stmt = stmt.where(Product.name.contains(name))
        if brand is not None:
            stmt = stmt.join(Product.brand).where(Brand.name.contains(brand))
        if is_active is not None:
            stmt = stmt.where(Product.is_active == is_active)

        return await paginate(self._db, stmt, page_number, page_size)

    async def get_product(self, product_id: int) -> Product | None:
        logger.debug("get_product %s", product_id)
        return await self._db.get(Product, product_id)

    async def create_product(
        self,
        name: str,
        is_active: bool,
        term: Term | str,
        brand_id: int,
    ) -> Result[Product]:
        logger.debug("create_product %s %s %s %s", name, is_active, term, brand_id)

        if await self._db.get(Brand, brand_id) is None:
            return Result.fail(f"Brand with id = {brand_id} does not exist")

        product = Product(
            name=name,
            is_active=is_active,
            term=Term(term),
            brand_id=brand_id,
        )
        self._db.add(product)
        await self._db.flush()
        await self._db.refresh(product)
        return Result.ok(product)

    async def update_product(
        self,
        product_id: int,
        name: str,
        is_active: bool,
        term: Term | str,
        brand_id: int,
    ) -> Result[Product]:
        logger.debug(
            "update_product %s %s %s %s %s",
            product_id,
            name,
            is_active,
            term,
            brand_id,
        )

        if await self._db.get(Brand, brand_id) is None:
            return Result.fail(f"Brand with id = {brand_id} does not exist")

        product = await self._db.get(Product, product_id)
        if product is None:
            return Result.fail(f"Product with id = {product_id} does not exist")

        product.name = name
        product.is_active = is_active
        product.term = Term(term)
        product.brand_id = brand_id
        await self._db.flush()
        await self._db.refresh(product)
        return Result.ok(product)

    async def delete_product(self, product_id: int) -> Result[int]:
        logger.debug("delete_product %s", product_id)

        product = await self._db.get(Product, product_id)
        if product is None:
            return Result.ok(product_id)

        referenced = await self._db.scalar(
            select(exists().where(Offer.product_id == product_id))
        )
        if referenced:
            return Result.fail(
                f"Product with id = {product_id} can't be deleted (referenced by some Offer)"
            )

        await self._db.delete(product)
        await self._db.flush()
        return Result.ok(product_id)

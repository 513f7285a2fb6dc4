"""Offer repository service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import exists, select

from subshop_core.result import Result
from subshop_db.models import Offer, Order, Product
from subshop_db.pagination import paginate

if TYPE_CHECKING:
    from decimal import Decimal

    from sqlalchemy.ext.asyncio import AsyncSession

    from subshop_core.pagination import PaginatedList

logger = logging.getLogger(__name__)


class OfferService:
    """Reads and writes offers."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def list_offers(
        self,
        page_number: int,
        page_size: int,
        description: str | None = None,
        product_id: int | None = None,
        active_product: bool | None = None,
    ) -> PaginatedList[Offer]:
        logger.debug(
            "list_offers %s %s %s %s %s",
            page_number,
            page_size,
            description,
            product_id,
            active_product,
        )

        stmt = select(Offer).order_by(Offer.offer_id)
        if description is not None:
            stmt = stmt.where(Offer.description.contains(description))
        if product_id is not None:
            stmt = stmt.where(Offer.product_id == product_id)
        if active_product is not None:
            stmt = stmt.join(Offer.product).where(Product.is_active == active_product)

        return await paginate(self._db, stmt, page_number, page_size)

    async def get_offer(self, offer_id: int) -> Offer | None:
        logger.debug("get_offer %s", offer_id)
        return await self._db.get(Offer, offer_id)

    async def create_offer(
        self,
        product_id: int,
        description: str | None,
        price: Decimal,
        number_of_terms: int,
    ) -> Result[Offer]:
        logger.debug(
            "create_offer %s %s %s %s", product_id, description, price, number_of_terms
        )

        if await self._db.get(Product, product_id) is None:
            return Result.fail(f"Product with id = {product_id} does not exist")

        offer = Offer(
            product_id=product_id,
            description=description,
            price=price,
            number_of_terms=number_of_terms,
        )
        self._db.add(offer)
        await self._db.flush()
        await self._db.refresh(offer)
        return Result.ok(offer)

    async def update_offer(
        self,
        offer_id: int,
        product_id: int,
        description: str | None,
        price: Decimal,
        number_of_terms: int,
    ) -> Result[Offer]:
        logger.debug(
            "update_offer %s %s %s %s %s",
            offer_id,
            product_id,
            description,
            price,
            number_of_terms,
        )

        if await self._db.get(Product, product_id) is None:
            return Result.fail(f"Product with id = {product_id} does not exist")

        offer = await self._db.get(Offer, offer_id)
        if offer is None:
            return Result.fail(f"Offer with id = {offer_id} does not exist")

        offer.product_id = product_id
        offer.description = description
        offer.price = price
        offer.number_of_terms = number_of_terms
        await self._db.flush()
        await self._db.refresh(offer)
        return Result.ok(offer)

    async def delete_offer(self, offer_id: int) -> Result[int]:
        logger.debug("delete_offer %s", offer_id)

        offer = await self._db.get(Offer, offer_id)
        if offer is None:
            return Result.ok(offer_id)

        referenced = await self._db.scalar(
            select(exists().where(Order.offer_id == offer_id))
        )
        if referenced:
            return Result.fail(
                f"Offer with id = {offer_id} can't be deleted (referenced by some Order)"
            )

        await self._db.delete(offer)
        await self._db.flush()
        return Result.ok(offer_id)

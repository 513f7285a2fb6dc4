"""Order repository service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import select

from subshop_core.billing import subscription_end
from subshop_core.result import Result
from subshop_db.models import Customer, Offer, Order, Product
from subshop_db.pagination import paginate

if TYPE_CHECKING:
    from datetime import date

    from sqlalchemy.ext.asyncio import AsyncSession

    from subshop_core.pagination import PaginatedList

logger = logging.getLogger(__name__)


class OrderService:
    """Places, updates and cancels orders."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def list_orders(
        self,
        page_number: int,
        page_size: int,
        offer_id: int | None = None,
        customer_id: int | None = None,
    ) -> PaginatedList[Order]:
        logger.debug(
            "list_orders %s %s %s %s", page_number, page_size, offer_id, customer_id
        )

        stmt = select(Order).order_by(Order.order_id)
        if offer_id is not None:
            stmt = stmt.where(Order.offer_id == offer_id)
        if customer_id is not None:
            stmt = stmt.where(Order.customer_id == customer_id)

        return await paginate(self._db, stmt, page_number, page_size)

    async def get_order(self, order_id: int) -> Order | None:
        logger.debug("get_order %s", order_id)
        return await self._db.get(Order, order_id)

    async def create_order(
        self,
        offer_id: int,
        start_date: date,
        customer_id: int,
    ) -> Result[Order]:
        """Place an order; the end date spans the offer's number of terms."""
        logger.debug("create_order %s %s %s", offer_id, start_date, customer_id)

        if await self._db.get(Customer, customer_id) is None:
            return Result.fail(f"Customer with id = {customer_id} does not exist")

        row = (
            await self._db.execute(
                select(Offer, Product)
                .join(Product, Offer.product_id == Product.product_id)
                .where(Offer.offer_id == offer_id)
            )
        ).first()
        if row is None:
            return Result.fail(f"Offer with id = {offer_id} does not exist")

        offer, product = row
        if not product.is_active:
            return Result.fail(f"Offer with id = {offer_id} linked to inactive Product")

        order = Order(
            offer_id=offer_id,
            customer_id=customer_id,
            start_date=start_date,
            end_date=subscription_end(start_date, product.term, offer.number_of_terms),
        )
        self._db.add(order)
        await self._db.flush()
        await self._db.refresh(order)
        return Result.ok(order)

    async def update_order(
        self,
        order_id: int,
        paid: bool,
        cancelled: bool,
        reason: str | None,
    ) -> Result[Order]:
        logger.debug("update_order %s %s %s %s", order_id, paid, cancelled, reason)

        order = await self._db.get(Order, order_id)
        if order is None:
            return Result.fail(f"Order with id = {order_id} does not exist")

        order.paid = paid
        order.cancelled = cancelled
        order.reason = reason
        await self._db.flush()
        await self._db.refresh(order)
        return Result.ok(order)

    async def delete_order(self, order_id: int) -> Result[int]:
        """Cancel an order. Orders are kept for history, never removed."""
        logger.debug("delete_order %s", order_id)

        order = await self._db.get(Order, order_id)
        if order is None:
            return Result.ok(order_id)

        order.cancelled = True
        await self._db.flush()
        return Result.ok(order_id)

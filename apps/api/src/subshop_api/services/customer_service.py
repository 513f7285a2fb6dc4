"""Customer repository service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import exists, or_, select

from subshop_core.result import Result
from subshop_db.models import Customer, Order
from subshop_db.pagination import paginate

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from subshop_core.pagination import PaginatedList

logger = logging.getLogger(__name__)


class CustomerService:
    """Reads and writes customers. E-mail addresses are unique."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def list_customers(
        self,
        page_number: int,
        page_size: int,
        name: str | None = None,
        email: str | None = None,
        offer_id: int | None = None,
    ) -> PaginatedList[Customer]:
        """List customers ordered by id.

        ``name`` matches either first or last name; ``offer_id`` keeps only
        customers holding an order for that offer.
        """
        logger.debug(
            "list_customers %s %s %s %s %s",
            page_number,
            page_size,
            name,
            email,
            offer_id,
        )

        stmt = select(Customer).order_by(Customer.customer_id)
        if name is not None:
            stmt = stmt.where(
                or_(Customer.first_name.contains(name), Customer.last_name.contains(name))
            )
        if email is not None:
            stmt = stmt.where(Customer.email_address.contains(email))
        if offer_id is not None:
            stmt = stmt.where(
                exists().where(
                    Order.customer_id == Customer.customer_id,
                    Order.offer_id == offer_id,
                )
            )

        return await paginate(self._db, stmt, page_number, page_size)

    async def get_customer(self, customer_id: int) -> Customer | None:
        logger.debug("get_customer %s", customer_id)
        return await self._db.get(Customer, customer_id)

    async def _email_taken(self, email_address: str, exclude_id: int | None = None) -> bool:
        stmt = select(Customer.customer_id).where(Customer.email_address == email_address)
        if exclude_id is not None:
            stmt = stmt.where(Customer.customer_id != exclude_id)
        return await self._db.scalar(select(stmt.exists())) or False

    async def create_customer(
        self,
        email_address: str,
        first_name: str | None,
        last_name: str | None,
    ) -> Result[Customer]:
        logger.debug("create_customer %s %s %s", email_address, first_name, last_name)

        if await self._email_taken(email_address):
            return Result.fail(f"e-mail {email_address} already registered")

        customer = Customer(
            email_address=email_address,
            first_name=first_name,
            last_name=last_name,
        )
        self._db.add(customer)
        await self._db.flush()
        await self._db.refresh(customer)
        return Result.ok(customer)

    async def update_customer(
        self,
        customer_id: int,
        email_address: str,
        first_name: str | None,
        last_name: str | None,
    ) -> Result[Customer]:
        logger.debug(
            "update_customer %s %s %s %s",
            customer_id,
            email_address,
            first_name,
            last_name,
        )

        customer = await self._db.get(Customer, customer_id)
        if customer is None:
            return Result.fail(f"Customer with id = {customer_id} does not exist")

        if await self._email_taken(email_address, exclude_id=customer_id):
            return Result.fail(f"e-mail {email_address} already registered")

        customer.email_address = email_address
        customer.first_name = first_name
        customer.last_name = last_name
        await self._db.flush()
        await self._db.refresh(customer)
        return Result.ok(customer)

    async def delete_customer(self, customer_id: int) -> Result[int]:
        logger.debug("delete_customer %s", customer_id)

        customer = await self._db.get(Customer, customer_id)
        if customer is None:
            return Result.ok(customer_id)

        referenced = await self._db.scalar(
            select(exists().where(Order.customer_id == customer_id))
        )
        if referenced:
            return Result.fail(
                f"Customer with id = {customer_id} can't be deleted (referenced by some Order)"
            )

        await self._db.delete(customer)
        await self._db.flush()
        return Result.ok(customer_id)

"""CLI for creating and seeding the Subshop database."""

from __future__ import annotations

import asyncio
import logging
import os
from datetime import date
from decimal import Decimal

import click
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: TC002

from subshop_core.billing import subscription_end
from subshop_core.enums import Term

from .database import DEFAULT_DATABASE_URL, make_engine, make_session_factory
from .models import Base, Brand, Customer, Offer, Order, Product

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)

SEED_BRANDS = ["Northwind", "Contoso"]

# (name, term, brand index, is_active)
SEED_PRODUCTS = [
    ("Daily News", Term.MONTHLY, 0, True),
    ("Weekend Edition", Term.ANNUALLY, 0, True),
    ("Cloud Backup", Term.MONTHLY, 1, False),
]

# (product index, description, price, number_of_terms)
SEED_OFFERS = [
    (0, "Daily News - 3 months", Decimal("9.99"), 3),
    (1, "Weekend Edition - 1 year", Decimal("49.00"), 1),
]

SEED_CUSTOMERS = [
    ("ada@example.com", "Ada", "Lovelace"),
    ("alan@example.com", "Alan", "Turing"),
]


async def seed(session: AsyncSession) -> int:
    """Insert sample rows unless brands already exist. Returns rows added."""
    existing = (await session.execute(select(Brand))).scalars().all()
    if existing:
        logger.info("Brands already loaded (%d rows), skipping.", len(existing))
        return 0

    brands = [Brand(name=name) for name in SEED_BRANDS]
    session.add_all(brands)
    await session.flush()

    products = [
        Product(name=name, term=term, brand_id=brands[b].brand_id, is_active=active)
        for name, term, b, active in SEED_PRODUCTS
    ]
    session.add_all(products)
    await session.flush()

    offers = [
        Offer(
            product_id=products[p].product_id,
            description=description,
            price=price,
            number_of_terms=terms,
        )
        for p, description, price, terms in SEED_OFFERS
    ]
    customers = [
        Customer(email_address=email, first_name=first, last_name=last)
        for email, first, last in SEED_CUSTOMERS
    ]
    session.add_all([*offers, *customers])
    await session.flush()

    start = date.today()
    order = Order(
        offer_id=offers[0].offer_id,
        customer_id=customers[0].customer_id,
        start_date=start,
        end_date=subscription_end(start, products[0].term, offers[0].number_of_terms),
    )
    session.add(order)
    await session.flush()

    added = len(brands) + len(products) + len(offers) + len(customers) + 1
    logger.info("Loaded %d seed rows.", added)
    return added


async def _run(database_url: str, *, create: bool, load: bool) -> None:
    engine = make_engine(database_url)
    try:
        if create:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Schema created.")
        if load:
            session_factory = make_session_factory(engine)
            async with session_factory() as session:
                await seed(session)
                await session.commit()
    finally:
        await engine.dispose()


@click.group()
@click.option(
    "--database-url",
    default=lambda: os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
    show_default="$DATABASE_URL",
    help="SQLAlchemy async database URL",
)
@click.pass_context
def cli(ctx: click.Context, database_url: str) -> None:
    """Subshop database CLI."""
    ctx.obj = database_url


@cli.command("init")
@click.pass_obj
def init_db(database_url: str) -> None:
    """Create all tables from the ORM metadata."""
    asyncio.run(_run(database_url, create=True, load=False))


@cli.command("seed")
@click.option("--create", is_flag=True, help="Create tables before seeding")
@click.pass_obj
def seed_db(database_url: str, create: bool) -> None:
    """Load sample brands, products, offers, customers and an order."""
    asyncio.run(_run(database_url, create=create, load=True))


if __name__ == "__main__":
    cli()

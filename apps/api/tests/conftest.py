"""Shared fixtures for API and service tests (in-memory SQLite)."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select
from sqlalchemy.pool import StaticPool

from subshop_api.dependencies import get_db
from subshop_api.main import create_app
from subshop_core.enums import Term
from subshop_db.database import make_engine, make_session_factory
from subshop_db.models import Base, Brand, Customer, Offer, Order, Product

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker


@pytest.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession]]:
    """Fresh in-memory database, seeded with a small catalog.

    Brand 1 owns active products 1 and 2 and inactive product 3.
    Offer 1 (product 1) has order 1 by customer 1; offer 2 sells product 3.
    """
    engine = make_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = make_session_factory(engine)
    async with factory() as session:
        session.add(Brand(brand_id=1, name="US"))
        session.add_all(
            [
                Product(product_id=1, name="Test product", brand_id=1, is_active=True, term=Term.MONTHLY),
                Product(product_id=2, name="Test product", brand_id=1, is_active=True, term=Term.MONTHLY),
                Product(product_id=3, name="Legacy plan", brand_id=1, is_active=False, term=Term.ANNUALLY),
            ]
        )
        session.add_all(
            [
                Offer(offer_id=1, product_id=1, description="Test offer", price=Decimal("1.00"), number_of_terms=10),
                Offer(offer_id=2, product_id=3, description="Legacy offer", price=Decimal("20.00"), number_of_terms=2),
            ]
        )
        session.add_all(
            [
                Customer(customer_id=1, email_address="test@test.com", first_name="fn", last_name="ln"),
                Customer(customer_id=2, email_address="jane@test.com", first_name="Jane", last_name="Doe"),
            ]
        )
        session.add(
            Order(
                order_id=1,
                offer_id=1,
                customer_id=1,
                start_date=date(2026, 1, 15),
                end_date=date(2026, 11, 15),
            )
        )
        await session.commit()

    yield factory
    await engine.dispose()


@pytest.fixture
async def session(session_factory) -> AsyncGenerator[AsyncSession]:
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient]:
    """HTTP client bound to the app with ``get_db`` pointed at the test DB."""
    app = create_app()

    async def _test_db() -> AsyncGenerator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _test_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def count_rows(session_factory):
    """Return an async helper counting the rows of a model."""

    async def _count(model: type[Base]) -> int:
        async with session_factory() as session:
            return (await session.execute(select(func.count()).select_from(model))).scalar_one()

    return _count

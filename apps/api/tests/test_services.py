"""Repository service tests against the seeded database."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from subshop_api.services.brand_service import BrandService
from subshop_api.services.customer_service import CustomerService
from subshop_api.services.offer_service import OfferService
from subshop_api.services.order_service import OrderService
from subshop_api.services.product_service import ProductService
from subshop_core.enums import Term
from subshop_core.result import Result
from subshop_db.models import Brand, Customer, Offer, Order, Product

MISSING_ID = 2147483647


# ---------------------------------------------------------------------------
# Deletes
# ---------------------------------------------------------------------------


async def test_delete_missing_is_idempotent_success(session):
    assert await BrandService(session).delete_brand(-1) == Result.ok(-1)
    assert await ProductService(session).delete_product(-1) == Result.ok(-1)
    assert await OfferService(session).delete_offer(-1) == Result.ok(-1)
    assert await CustomerService(session).delete_customer(-1) == Result.ok(-1)
    assert await OrderService(session).delete_order(-1) == Result.ok(-1)


async def test_delete_blocked_by_references(session):
    brand = await BrandService(session).delete_brand(1)
    product = await ProductService(session).delete_product(1)
    offer = await OfferService(session).delete_offer(1)
    customer = await CustomerService(session).delete_customer(1)

    assert not brand
    assert brand.message == "Brand with id = 1 can't be deleted (referenced by some Product)"
    assert product.message == "Product with id = 1 can't be deleted (referenced by some Offer)"
    assert offer.message == "Offer with id = 1 can't be deleted (referenced by some Order)"
    assert customer.message == "Customer with id = 1 can't be deleted (referenced by some Order)"


async def test_delete_unreferenced_product(session):
    service = ProductService(session)
    result = await service.delete_product(2)

    assert result == Result.ok(2)
    assert await service.get_product(2) is None


async def test_delete_order_cancels_it(session):
    service = OrderService(session)
    result = await service.delete_order(1)

    assert result == Result.ok(1)
    order = await service.get_order(1)
    assert order is not None
    assert order.cancelled is True


# ---------------------------------------------------------------------------
# Creates / updates
# ---------------------------------------------------------------------------


async def test_create_product_with_missing_brand_fails(session, count_rows):
    result = await ProductService(session).create_product(
        "New", True, Term.MONTHLY, MISSING_ID
    )

    assert not result
    assert result.message == f"Brand with id = {MISSING_ID} does not exist"
    assert result.data is None
    await session.commit()
    assert await count_rows(Product) == 3


async def test_create_product_returns_entity(session):
    result = await ProductService(session).create_product("Plus", False, "annually", 1)

    assert result
    product = result.data
    assert product.product_id is not None
    assert product.term is Term.ANNUALLY
    assert product.is_active is False
    assert product.updated_at is not None


async def test_update_product_checks_brand_then_product(session):
    service = ProductService(session)

    missing_brand = await service.update_product(1, "x", True, "monthly", MISSING_ID)
    missing_product = await service.update_product(MISSING_ID, "x", True, "monthly", 1)

    assert missing_brand.message == f"Brand with id = {MISSING_ID} does not exist"
    assert missing_product.message == f"Product with id = {MISSING_ID} does not exist"


async def test_update_brand(session):
    result = await BrandService(session).update_brand(1, "EU")
    assert result.data.name == "EU"


async def test_create_offer_with_missing_product_fails(session, count_rows):
    result = await OfferService(session).create_offer(
        MISSING_ID, "x", Decimal("1.00"), 1
    )
    assert result.message == f"Product with id = {MISSING_ID} does not exist"
    await session.commit()
    assert await count_rows(Offer) == 2


async def test_duplicate_customer_email(session, count_rows):
    service = CustomerService(session)

    created = await service.create_customer("test@test.com", "A", "B")
    assert created.message == "e-mail test@test.com already registered"
    await session.commit()
    assert await count_rows(Customer) == 2

    updated = await service.update_customer(2, "test@test.com", "Jane", "Doe")
    assert updated.message == "e-mail test@test.com already registered"

    unchanged = await service.update_customer(1, "test@test.com", "New", "Name")
    assert unchanged
    assert unchanged.data.first_name == "New"


async def test_create_order_computes_end_date(session):
    result = await OrderService(session).create_order(1, date(2026, 1, 31), 2)

    assert result
    order = result.data
    assert order.start_date == date(2026, 1, 31)
    # product 1 is monthly, offer 1 runs 10 terms
    assert order.end_date == date(2026, 11, 30)
    assert order.cancelled is False
    assert order.paid is False


async def test_create_order_rules(session, count_rows):
    service = OrderService(session)

    no_customer = await service.create_order(1, date(2026, 1, 1), MISSING_ID)
    no_offer = await service.create_order(MISSING_ID, date(2026, 1, 1), 1)
    inactive = await service.create_order(2, date(2026, 1, 1), 1)

    assert no_customer.message == f"Customer with id = {MISSING_ID} does not exist"
    assert no_offer.message == f"Offer with id = {MISSING_ID} does not exist"
    assert inactive.message == "Offer with id = 2 linked to inactive Product"
    await session.commit()
    assert await count_rows(Order) == 1


async def test_update_order(session):
    service = OrderService(session)

    result = await service.update_order(1, paid=True, cancelled=True, reason="moved")
    missing = await service.update_order(MISSING_ID, paid=True, cancelled=False, reason=None)

    assert result.data.paid is True
    assert result.data.reason == "moved"
    assert missing.message == f"Order with id = {MISSING_ID} does not exist"


# ---------------------------------------------------------------------------
# Lists
# ---------------------------------------------------------------------------


async def test_list_products_filters(session):
    service = ProductService(session)

    by_brand = await service.list_products(1, 10, brand="US")
    inactive = await service.list_products(1, 10, is_active=False)
    by_name = await service.list_products(1, 10, name="est")

    assert [p.product_id for p in by_brand] == [1, 2, 3]
    assert [p.product_id for p in inactive] == [3]
    assert [p.product_id for p in by_name] == [1, 2]


async def test_list_offers_by_active_product(session):
    service = OfferService(session)

    active = await service.list_offers(1, 10, active_product=True)
    by_product = await service.list_offers(1, 10, product_id=3)

    assert [o.offer_id for o in active] == [1]
    assert [o.offer_id for o in by_product] == [2]


async def test_list_customers_filters(session):
    service = CustomerService(session)

    by_offer = await service.list_customers(1, 10, offer_id=1)
    by_name = await service.list_customers(1, 10, name="Doe")
    by_email = await service.list_customers(1, 10, email="jane")

    assert [c.customer_id for c in by_offer] == [1]
    assert [c.customer_id for c in by_name] == [2]
    assert [c.customer_id for c in by_email] == [2]


async def test_list_orders_filters(session):
    service = OrderService(session)

    assert [o.order_id for o in await service.list_orders(1, 10, customer_id=1)] == [1]
    assert len(await service.list_orders(1, 10, offer_id=2)) == 0


async def test_get_missing_returns_none(session):
    assert await BrandService(session).get_brand(MISSING_ID) is None
    assert await session.get(Brand, 1) is not None

"""Tests for paginating SQL statements."""

from __future__ import annotations

import pytest
from sqlalchemy import select

from subshop_db.models import Brand
from subshop_db.pagination import paginate


@pytest.fixture
async def many_brands(session):
    # Brand 1 is seeded; add 24 more for 25 in total.
    session.add_all([Brand(name=f"Brand {i:02d}") for i in range(2, 26)])
    await session.commit()


@pytest.mark.usefixtures("many_brands")
async def test_first_page(session):
    stmt = select(Brand).order_by(Brand.brand_id)
    page = await paginate(session, stmt, 1, 10)

    assert [b.brand_id for b in page] == list(range(1, 11))
    assert page.total_count == 25
    assert page.total_pages == 3
    assert page.has_next_page
    assert not page.has_previous_page


@pytest.mark.usefixtures("many_brands")
async def test_last_page_is_partial(session):
    stmt = select(Brand).order_by(Brand.brand_id)
    page = await paginate(session, stmt, 3, 10)

    assert [b.brand_id for b in page] == [21, 22, 23, 24, 25]
    assert not page.has_next_page
    assert page.has_previous_page


@pytest.mark.usefixtures("many_brands")
async def test_page_past_end_is_empty(session):
    stmt = select(Brand).order_by(Brand.brand_id)
    page = await paginate(session, stmt, 4, 10)

    assert len(page) == 0
    assert page.total_pages == 3
    assert not page.has_next_page


@pytest.mark.usefixtures("many_brands")
async def test_count_respects_filters(session):
    stmt = select(Brand).where(Brand.name.contains("Brand 1")).order_by(Brand.brand_id)
    page = await paginate(session, stmt, 1, 100)

    # "Brand 10" .. "Brand 19"
    assert page.total_count == 10
    assert page.total_pages == 1


@pytest.mark.usefixtures("many_brands")
async def test_huge_page_number_is_empty(session):
    stmt = select(Brand).order_by(Brand.brand_id)
    page = await paginate(session, stmt, 2**62, 10)

    assert len(page) == 0
    assert page.page_index == 2**62
    assert page.total_count == 25
    assert page.has_previous_page


async def test_rejects_bad_arguments(session):
    with pytest.raises(ValueError):
        await paginate(session, select(Brand).order_by(Brand.brand_id), 0, 10)

"""HTTP tests for /api/v1/customers."""

from __future__ import annotations

from subshop_db.models import Customer

BASE = "/api/v1/customers"


async def test_list_by_offer(client):
    resp = await client.get(BASE, params={"offerId": 1})

    assert resp.status_code == 200
    assert [c["customer_id"] for c in resp.json()["items"]] == [1]


async def test_list_by_name_matches_first_or_last(client):
    by_first = await client.get(BASE, params={"name": "Jan"})
    by_last = await client.get(BASE, params={"name": "ln"})

    assert [c["customer_id"] for c in by_first.json()["items"]] == [2]
    assert [c["customer_id"] for c in by_last.json()["items"]] == [1]


async def test_create(client):
    resp = await client.post(
        BASE,
        json={"email_address": "new@test.com", "first_name": "New", "last_name": "User"},
    )

    assert resp.status_code == 201
    assert resp.json()["email_address"] == "new@test.com"


async def test_create_duplicate_email(client, count_rows):
    resp = await client.post(
        BASE,
        json={"email_address": "test@test.com", "first_name": "A", "last_name": "B"},
    )

    assert resp.status_code == 400
    assert resp.json()["detail"] == "e-mail test@test.com already registered"
    assert await count_rows(Customer) == 2


async def test_create_invalid_email(client):
    resp = await client.post(
        BASE,
        json={"email_address": "nope", "first_name": "A", "last_name": "B"},
    )

    assert resp.status_code == 400
    assert resp.json()["detail"] == ["Invalid Email Address"]


async def test_create_rejects_blank_names(client, count_rows):
    resp = await client.post(
        BASE,
        json={"email_address": "blank@test.com", "first_name": " ", "last_name": "  "},
    )

    assert resp.status_code == 400
    assert resp.json()["detail"] == [
        "FirstName should not be empty",
        "LastName should not be empty",
    ]
    assert await count_rows(Customer) == 2


async def test_update(client):
    resp = await client.put(
        f"{BASE}/2",
        json={"email_address": "jane.doe@test.com", "first_name": "Jane", "last_name": "Doe"},
    )

    assert resp.status_code == 200
    assert resp.json()["email_address"] == "jane.doe@test.com"


async def test_delete_customer_with_orders(client):
    resp = await client.delete(f"{BASE}/1")

    assert resp.status_code == 400
    assert resp.json()["detail"] == (
        "Customer with id = 1 can't be deleted (referenced by some Order)"
    )


async def test_delete_customer(client):
    resp = await client.delete(f"{BASE}/2")

    assert resp.status_code == 200
    assert resp.json() == 2

"""Integration tests for the customer API."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from factories import add_project

from leave_planner.models import Customer

if TYPE_CHECKING:
    from httpx import AsyncClient
    from sqlalchemy.ext.asyncio import AsyncSession

CUSTOMERS_URL = "/api/customers"


async def test_create_and_get_customer(async_client: AsyncClient) -> None:
    resp = await async_client.post(CUSTOMERS_URL, json={"name": "Customer A"})
    assert resp.status_code == 201
    customer_id = resp.json()["id"]

    resp = await async_client.get(f"{CUSTOMERS_URL}/{customer_id}")
    assert resp.status_code == 200
    assert resp.json() == {"id": customer_id, "name": "Customer A"}


async def test_list_customers_sorted(async_client: AsyncClient) -> None:
    for name in ("Beta", "Alpha"):
        await async_client.post(CUSTOMERS_URL, json={"name": name})

    resp = await async_client.get(CUSTOMERS_URL)
    data = resp.json()
    assert data["total"] == 2
    assert [c["name"] for c in data["items"]] == ["Alpha", "Beta"]


async def test_update_customer(async_client: AsyncClient) -> None:
    resp = await async_client.post(CUSTOMERS_URL, json={"name": "Old"})
    customer_id = resp.json()["id"]

    resp = await async_client.put(f"{CUSTOMERS_URL}/{customer_id}", json={"name": "New"})
    assert resp.status_code == 200
    assert resp.json()["name"] == "New"


async def test_update_missing_customer(async_client: AsyncClient) -> None:
    resp = await async_client.put(f"{CUSTOMERS_URL}/{uuid.uuid4()}", json={"name": "New"})
    assert resp.status_code == 404


async def test_delete_customer(async_client: AsyncClient) -> None:
    resp = await async_client.post(CUSTOMERS_URL, json={"name": "Gone"})
    customer_id = resp.json()["id"]

    resp = await async_client.delete(f"{CUSTOMERS_URL}/{customer_id}")
    assert resp.status_code == 204

    resp = await async_client.get(f"{CUSTOMERS_URL}/{customer_id}")
    assert resp.status_code == 404


async def test_delete_customer_with_projects(async_client: AsyncClient, db_session: AsyncSession) -> None:
    customer = Customer(name="Busy")
    db_session.add(customer)
    await db_session.flush()
    await add_project(db_session, "Apollo", customer=customer)

    resp = await async_client.delete(f"{CUSTOMERS_URL}/{customer.id}")
    assert resp.status_code == 409
    assert resp.json()["error"] == "StateConflictError"

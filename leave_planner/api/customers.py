# ruff: noqa: TC001, TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter, status

from leave_planner.db import SessionDep
from leave_planner.schemas.customer import CustomerListResponse, CustomerPayload, CustomerResponse
from leave_planner.services import customer as customer_service

customers_router = APIRouter(prefix="/customers", tags=["customers"])


@customers_router.get("", response_model=CustomerListResponse)
async def list_customers(session: SessionDep) -> CustomerListResponse:
    return await customer_service.list_customers(session)


@customers_router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create_customer(payload: CustomerPayload, session: SessionDep) -> CustomerResponse:
    return await customer_service.create_customer(session, payload)


@customers_router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(customer_id: uuid.UUID, session: SessionDep) -> CustomerResponse:
    return await customer_service.get_customer(session, customer_id)


@customers_router.put("/{customer_id}", response_model=CustomerResponse)
async def update_customer(
    customer_id: uuid.UUID,
    payload: CustomerPayload,
    session: SessionDep,
) -> CustomerResponse:
    return await customer_service.update_customer(session, customer_id, payload)


@customers_router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(customer_id: uuid.UUID, session: SessionDep) -> None:
    """Delete a customer that no longer owns any projects."""
    await customer_service.delete_customer(session, customer_id)

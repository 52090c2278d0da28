# ruff: noqa: TC003
from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlmodel import col

from leave_planner.exceptions import NotFoundError, StateConflictError
from leave_planner.models.customer import Customer
from leave_planner.models.project import Project
from leave_planner.schemas.customer import CustomerListResponse, CustomerResponse

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from leave_planner.schemas.customer import CustomerPayload


def _build_customer_response(customer: Customer) -> CustomerResponse:
    return CustomerResponse(id=customer.id, name=customer.name)


async def _get_customer_or_404(session: AsyncSession, customer_id: uuid.UUID) -> Customer:
    customer = await session.get(Customer, customer_id)
    if customer is None:
        raise NotFoundError("Customer not found")
    return customer


async def customer_exists(session: AsyncSession, customer_id: uuid.UUID) -> bool:
    result = await session.execute(select(col(Customer.id)).where(col(Customer.id) == customer_id))
    return result.scalar_one_or_none() is not None


async def create_customer(session: AsyncSession, payload: CustomerPayload) -> CustomerResponse:
    customer = Customer(name=payload.name)
    session.add(customer)
    await session.commit()
    await session.refresh(customer)
    return _build_customer_response(customer)


async def update_customer(
    session: AsyncSession,
    customer_id: uuid.UUID,
    payload: CustomerPayload,
) -> CustomerResponse:
    customer = await _get_customer_or_404(session, customer_id)
    customer.name = payload.name
    await session.commit()
    await session.refresh(customer)
    return _build_customer_response(customer)


async def delete_customer(session: AsyncSession, customer_id: uuid.UUID) -> None:
    """Delete a customer. Customers that still own projects cannot be deleted."""
    customer = await _get_customer_or_404(session, customer_id)

    result = await session.execute(select(col(Project.id)).where(col(Project.customer_id) == customer_id).limit(1))
    if result.scalar_one_or_none() is not None:
        raise StateConflictError("Customer still has projects")

    await session.delete(customer)
    await session.commit()


async def get_customer(session: AsyncSession, customer_id: uuid.UUID) -> CustomerResponse:
    customer = await _get_customer_or_404(session, customer_id)
    return _build_customer_response(customer)


async def list_customers(session: AsyncSession) -> CustomerListResponse:
    result = await session.execute(select(Customer).order_by(col(Customer.name), col(Customer.id)))
    customers = list(result.scalars().all())
    return CustomerListResponse(
        items=[_build_customer_response(c) for c in customers],
        total=len(customers),
    )

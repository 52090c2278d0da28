"""Storage-level queries over leave requests.

Only the leave workflow mutates rows; everything here is read-only.
"""

# ruff: noqa: TC003
from __future__ import annotations

import uuid
from collections.abc import Collection
from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlmodel import col

from leave_planner.exceptions import NotFoundError
from leave_planner.models.leave import LeaveRequest

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from leave_planner.models.enums import LeaveStatus


async def leave_exists(session: AsyncSession, employee_id: uuid.UUID, on_date: date) -> bool:
    """Return True if the employee already has a leave request for the date, in any status."""
    result = await session.execute(
        select(col(LeaveRequest.id)).where(
            col(LeaveRequest.employee_id) == employee_id,
            col(LeaveRequest.date) == on_date,
        )
    )
    return result.scalar_one_or_none() is not None


async def find_employee_ids_on_date(
    session: AsyncSession,
    on_date: date,
    statuses: Collection[LeaveStatus],
    employee_ids: Collection[uuid.UUID],
) -> list[uuid.UUID]:
    """Return the distinct employees among employee_ids with a leave on on_date in one of statuses."""
    if not statuses or not employee_ids:
        return []
    result = await session.execute(
        select(col(LeaveRequest.employee_id))
        .where(
            col(LeaveRequest.date) == on_date,
            col(LeaveRequest.status).in_([s.value for s in statuses]),
            col(LeaveRequest.employee_id).in_(list(employee_ids)),
        )
        .distinct()
    )
    return list(result.scalars().all())


async def get_leave_or_404(
    session: AsyncSession,
    leave_id: uuid.UUID,
    *,
    for_update: bool = False,
) -> LeaveRequest:
    """Fetch a leave request by ID, optionally locking the row. Raises 404 if not found."""
    query = select(LeaveRequest).where(col(LeaveRequest.id) == leave_id)
    if for_update:
        query = query.with_for_update()
    result = await session.execute(query)
    leave = result.scalar_one_or_none()
    if leave is None:
        raise NotFoundError("Leave request not found")
    return leave


async def list_leaves(
    session: AsyncSession,
    employee_id: uuid.UUID | None = None,
    on_date: date | None = None,
) -> list[LeaveRequest]:
    """List leave requests with optional filters, ordered by date."""
    query = select(LeaveRequest)
    if employee_id is not None:
        query = query.where(col(LeaveRequest.employee_id) == employee_id)
    if on_date is not None:
        query = query.where(col(LeaveRequest.date) == on_date)
    result = await session.execute(query.order_by(col(LeaveRequest.date), col(LeaveRequest.created_at)))
    return list(result.scalars().all())

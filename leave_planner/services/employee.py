# ruff: noqa: TC003
from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import delete, func, select
from sqlmodel import col

from leave_planner.exceptions import ForbiddenError, NotFoundError, StateConflictError
from leave_planner.models.employee import Employee
from leave_planner.models.enums import AuditAction, AuditEntityType, UserRole
from leave_planner.models.leave import LeaveRequest
from leave_planner.models.notification import Notification
from leave_planner.models.project import ProjectAssignment
from leave_planner.schemas.employee import EmployeeListResponse, EmployeeResponse
from leave_planner.services.audit import model_to_audit_dict, write_audit_log

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from leave_planner.schemas.auth import CallerContext
    from leave_planner.schemas.employee import EmployeePayload

logger = logging.getLogger(__name__)


def _build_employee_response(employee: Employee) -> EmployeeResponse:
    return EmployeeResponse(
        id=employee.id,
        name=employee.name,
        job_title=employee.job_title,
        role=UserRole(employee.role),
        created_at=employee.created_at,
    )


async def get_employee(session: AsyncSession, employee_id: uuid.UUID) -> Employee | None:
    """Fetch an employee by ID. Returns None if not found."""
    return await session.get(Employee, employee_id)


async def employee_exists(session: AsyncSession, employee_id: uuid.UUID) -> bool:
    result = await session.execute(select(col(Employee.id)).where(col(Employee.id) == employee_id))
    return result.scalar_one_or_none() is not None


async def _get_employee_or_404(session: AsyncSession, employee_id: uuid.UUID) -> Employee:
    employee = await get_employee(session, employee_id)
    if employee is None:
        raise NotFoundError("Employee not found")
    return employee


async def _count_admins(session: AsyncSession) -> int:
    result = await session.execute(
        select(func.count()).select_from(Employee).where(col(Employee.role) == UserRole.ADMIN.value)
    )
    return result.scalar_one()


async def create_employee(session: AsyncSession, payload: EmployeePayload) -> EmployeeResponse:
    """Create an employee with the default EMPLOYEE role."""
    employee = Employee(name=payload.name, job_title=payload.job_title)
    session.add(employee)
    await session.commit()
    await session.refresh(employee)
    return _build_employee_response(employee)


async def update_employee(
    session: AsyncSession,
    employee_id: uuid.UUID,
    payload: EmployeePayload,
) -> EmployeeResponse:
    """Update an employee's name and job title."""
    employee = await _get_employee_or_404(session, employee_id)
    employee.name = payload.name
    employee.job_title = payload.job_title
    await session.commit()
    await session.refresh(employee)
    return _build_employee_response(employee)


async def change_role(
    session: AsyncSession,
    caller: CallerContext,
    employee_id: uuid.UUID,
    role: UserRole,
) -> EmployeeResponse:
    """Change an employee's role (admin only). The last remaining admin cannot be demoted."""
    if not caller.is_admin:
        raise ForbiddenError("Admin role required to change roles")

    employee = await _get_employee_or_404(session, employee_id)

    if employee.role == UserRole.ADMIN and role != UserRole.ADMIN and await _count_admins(session) <= 1:
        raise StateConflictError("The last remaining admin cannot be demoted")

    before_dict = model_to_audit_dict(employee)
    employee.role = role.value
    await session.flush()

    await write_audit_log(
        session,
        actor_id=caller.id,
        entity_type=AuditEntityType.EMPLOYEE,
        entity_id=employee.id,
        action=AuditAction.CHANGE_ROLE,
        before_json=before_dict,
        after_json=model_to_audit_dict(employee),
    )

    await session.commit()
    await session.refresh(employee)
    logger.info("Employee %s role changed to %s by %s", employee.id, role, caller.id)
    return _build_employee_response(employee)


async def delete_employee(session: AsyncSession, employee_id: uuid.UUID) -> None:
    """Delete an employee along with their assignments, leave requests and notifications."""
    employee = await _get_employee_or_404(session, employee_id)

    if employee.role == UserRole.ADMIN and await _count_admins(session) <= 1:
        raise StateConflictError("The last remaining admin cannot be deleted")

    await session.execute(delete(ProjectAssignment).where(col(ProjectAssignment.employee_id) == employee_id))
    await session.execute(delete(LeaveRequest).where(col(LeaveRequest.employee_id) == employee_id))
    await session.execute(delete(Notification).where(col(Notification.user_id) == employee_id))
    await session.delete(employee)
    await session.commit()


async def get_employee_response(session: AsyncSession, employee_id: uuid.UUID) -> EmployeeResponse:
    employee = await _get_employee_or_404(session, employee_id)
    return _build_employee_response(employee)


async def list_employees(session: AsyncSession) -> EmployeeListResponse:
    """List all employees ordered by name."""
    result = await session.execute(select(Employee).order_by(col(Employee.name), col(Employee.id)))
    employees = list(result.scalars().all())
    return EmployeeListResponse(
        items=[_build_employee_response(e) for e in employees],
        total=len(employees),
    )

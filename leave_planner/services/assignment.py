# ruff: noqa: TC003
from __future__ import annotations

import uuid
from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlmodel import col

from leave_planner.exceptions import DuplicateError, NotFoundError, ValidationError
from leave_planner.models.employee import Employee
from leave_planner.models.project import Project, ProjectAssignment
from leave_planner.schemas.assignment import AssignmentListResponse, AssignmentResponse
from leave_planner.schemas.project import ProjectListResponse, ProjectResponse
from leave_planner.services.employee import employee_exists
from leave_planner.services.project import get_project_or_404

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement
    from sqlalchemy.ext.asyncio import AsyncSession


def project_active_on(on_date: date) -> ColumnElement[bool]:
    """SQL condition for a project whose [start_date, end_date] range contains on_date.

    end_date is inclusive; a null end_date means open-ended.
    """
    return (col(Project.start_date) <= on_date) & or_(
        col(Project.end_date).is_(None),
        col(Project.end_date) >= on_date,
    )


async def get_active_project_ids(
    session: AsyncSession,
    employee_id: uuid.UUID,
    on_date: date,
) -> set[uuid.UUID]:
    """Return the projects an employee is assigned to that are active on the given date."""
    result = await session.execute(
        select(col(ProjectAssignment.project_id))
        .join(Project, col(Project.id) == col(ProjectAssignment.project_id))
        .where(
            col(ProjectAssignment.employee_id) == employee_id,
            project_active_on(on_date),
        )
        .distinct()
    )
    return set(result.scalars().all())


async def list_active_projects(
    session: AsyncSession,
    employee_id: uuid.UUID,
    on_date: date,
) -> ProjectListResponse:
    """List the projects an employee is actively assigned to on a date."""
    if not await employee_exists(session, employee_id):
        raise NotFoundError("Employee not found")

    result = await session.execute(
        select(Project)
        .join(ProjectAssignment, col(ProjectAssignment.project_id) == col(Project.id))
        .where(
            col(ProjectAssignment.employee_id) == employee_id,
            project_active_on(on_date),
        )
        .order_by(col(Project.name), col(Project.id))
    )
    projects = list(result.scalars().all())
    return ProjectListResponse(
        items=[
            ProjectResponse(
                id=p.id,
                name=p.name,
                customer_id=p.customer_id,
                start_date=p.start_date,
                end_date=p.end_date,
            )
            for p in projects
        ],
        total=len(projects),
    )


async def _find_assignment(
    session: AsyncSession,
    project_id: uuid.UUID,
    employee_id: uuid.UUID,
) -> ProjectAssignment | None:
    result = await session.execute(
        select(ProjectAssignment).where(
            col(ProjectAssignment.project_id) == project_id,
            col(ProjectAssignment.employee_id) == employee_id,
        )
    )
    return result.scalar_one_or_none()


async def assign_employee(
    session: AsyncSession,
    project_id: uuid.UUID,
    employee_id: uuid.UUID,
) -> AssignmentResponse:
    """Assign an employee to a project. Each (employee, project) pair is unique."""
    await get_project_or_404(session, project_id)

    employee = await session.get(Employee, employee_id)
    if employee is None:
        raise ValidationError("Employee does not exist")

    if await _find_assignment(session, project_id, employee_id) is not None:
        raise DuplicateError("Employee is already assigned to this project")

    session.add(ProjectAssignment(project_id=project_id, employee_id=employee_id))
    try:
        await session.flush()
    except IntegrityError:
        await session.rollback()
        raise DuplicateError("Employee is already assigned to this project") from None

    await session.commit()
    return AssignmentResponse(employee_id=employee.id, employee_name=employee.name)


async def unassign_employee(
    session: AsyncSession,
    project_id: uuid.UUID,
    employee_id: uuid.UUID,
) -> None:
    await get_project_or_404(session, project_id)

    assignment = await _find_assignment(session, project_id, employee_id)
    if assignment is None:
        raise NotFoundError("Assignment not found")

    await session.delete(assignment)
    await session.commit()


async def list_project_assignments(
    session: AsyncSession,
    project_id: uuid.UUID,
) -> AssignmentListResponse:
    """List the employees assigned to a project, ordered by name."""
    await get_project_or_404(session, project_id)

    result = await session.execute(
        select(col(Employee.id), col(Employee.name))
        .join(ProjectAssignment, col(ProjectAssignment.employee_id) == col(Employee.id))
        .where(col(ProjectAssignment.project_id) == project_id)
        .order_by(col(Employee.name), col(Employee.id))
    )
    items = [AssignmentResponse(employee_id=row[0], employee_name=row[1]) for row in result.all()]
    return AssignmentListResponse(items=items, total=len(items))

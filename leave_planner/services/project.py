# ruff: noqa: TC003
from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import delete, select
from sqlmodel import col

from leave_planner.exceptions import NotFoundError, ValidationError
from leave_planner.models.customer import Customer
from leave_planner.models.project import Project, ProjectAssignment
from leave_planner.schemas.project import ProjectListResponse, ProjectResponse
from leave_planner.services.customer import customer_exists

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from leave_planner.schemas.project import ProjectPayload


def _build_project_response(project: Project, customer_name: str | None = None) -> ProjectResponse:
    return ProjectResponse(
        id=project.id,
        name=project.name,
        customer_id=project.customer_id,
        customer_name=customer_name,
        start_date=project.start_date,
        end_date=project.end_date,
    )


async def get_project(session: AsyncSession, project_id: uuid.UUID) -> Project | None:
    """Fetch a project by ID. Returns None if not found."""
    return await session.get(Project, project_id)


async def get_project_or_404(session: AsyncSession, project_id: uuid.UUID) -> Project:
    project = await get_project(session, project_id)
    if project is None:
        raise NotFoundError("Project not found")
    return project


async def _verify_customer(session: AsyncSession, customer_id: uuid.UUID) -> None:
    if not await customer_exists(session, customer_id):
        raise ValidationError("Customer does not exist")


async def create_project(session: AsyncSession, payload: ProjectPayload) -> ProjectResponse:
    """Create a project for an existing customer."""
    await _verify_customer(session, payload.customer_id)

    project = Project(
        name=payload.name,
        customer_id=payload.customer_id,
        start_date=payload.start_date,
        end_date=payload.end_date,
    )
    session.add(project)
    await session.commit()
    await session.refresh(project)
    return _build_project_response(project)


async def update_project(
    session: AsyncSession,
    project_id: uuid.UUID,
    payload: ProjectPayload,
) -> ProjectResponse:
    project = await get_project_or_404(session, project_id)
    await _verify_customer(session, payload.customer_id)

    project.name = payload.name
    project.customer_id = payload.customer_id
    project.start_date = payload.start_date
    project.end_date = payload.end_date
    await session.commit()
    await session.refresh(project)
    return _build_project_response(project)


async def delete_project(session: AsyncSession, project_id: uuid.UUID) -> None:
    """Delete a project and its assignments."""
    project = await get_project_or_404(session, project_id)
    await session.execute(delete(ProjectAssignment).where(col(ProjectAssignment.project_id) == project_id))
    await session.delete(project)
    await session.commit()


async def get_project_response(session: AsyncSession, project_id: uuid.UUID) -> ProjectResponse:
    result = await session.execute(
        select(Project, col(Customer.name))
        .join(Customer, col(Customer.id) == col(Project.customer_id), isouter=True)
        .where(col(Project.id) == project_id)
    )
    row = result.one_or_none()
    if row is None:
        raise NotFoundError("Project not found")
    project, customer_name = row
    return _build_project_response(project, customer_name)


async def list_projects(session: AsyncSession) -> ProjectListResponse:
    """List all projects with their customer names, ordered by start date then name."""
    result = await session.execute(
        select(Project, col(Customer.name))
        .join(Customer, col(Customer.id) == col(Project.customer_id), isouter=True)
        .order_by(col(Project.start_date), col(Project.name))
    )
    rows = result.all()
    return ProjectListResponse(
        items=[_build_project_response(project, customer_name) for project, customer_name in rows],
        total=len(rows),
    )

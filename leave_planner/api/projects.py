# ruff: noqa: TC001, TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter, status

from leave_planner.db import SessionDep
from leave_planner.schemas.assignment import AssignmentListResponse, AssignmentResponse, CreateAssignmentRequest
from leave_planner.schemas.project import ProjectListResponse, ProjectPayload, ProjectResponse
from leave_planner.services import assignment as assignment_service
from leave_planner.services import project as project_service

projects_router = APIRouter(prefix="/projects", tags=["projects"])


@projects_router.get("", response_model=ProjectListResponse)
async def list_projects(session: SessionDep) -> ProjectListResponse:
    """List all projects with their customers."""
    return await project_service.list_projects(session)


@projects_router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(payload: ProjectPayload, session: SessionDep) -> ProjectResponse:
    return await project_service.create_project(session, payload)


@projects_router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(project_id: uuid.UUID, session: SessionDep) -> ProjectResponse:
    return await project_service.get_project_response(session, project_id)


@projects_router.put("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: uuid.UUID,
    payload: ProjectPayload,
    session: SessionDep,
) -> ProjectResponse:
    return await project_service.update_project(session, project_id, payload)


@projects_router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(project_id: uuid.UUID, session: SessionDep) -> None:
    """Delete a project together with its assignments."""
    await project_service.delete_project(session, project_id)


@projects_router.get("/{project_id}/assignments", response_model=AssignmentListResponse)
async def list_assignments(project_id: uuid.UUID, session: SessionDep) -> AssignmentListResponse:
    """List employees assigned to a project."""
    return await assignment_service.list_project_assignments(session, project_id)


@projects_router.post(
    "/{project_id}/assignments",
    response_model=AssignmentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def assign_employee(
    project_id: uuid.UUID,
    payload: CreateAssignmentRequest,
    session: SessionDep,
) -> AssignmentResponse:
    """Assign an employee to a project."""
    return await assignment_service.assign_employee(session, project_id, payload.employee_id)


@projects_router.delete("/{project_id}/assignments/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def unassign_employee(project_id: uuid.UUID, employee_id: uuid.UUID, session: SessionDep) -> None:
    """Remove an employee from a project."""
    await assignment_service.unassign_employee(session, project_id, employee_id)

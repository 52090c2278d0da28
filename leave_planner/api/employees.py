# ruff: noqa: B008, TC001, TC003
from __future__ import annotations

import uuid
from datetime import date

from fastapi import APIRouter, Query, status

from leave_planner.api.deps import AdminDep
from leave_planner.db import SessionDep
from leave_planner.schemas.employee import EmployeeListResponse, EmployeePayload, EmployeeResponse, RolePayload
from leave_planner.schemas.project import ProjectListResponse
from leave_planner.services import assignment as assignment_service
from leave_planner.services import employee as employee_service

employees_router = APIRouter(prefix="/employees", tags=["employees"])


@employees_router.get("", response_model=EmployeeListResponse)
async def list_employees(session: SessionDep) -> EmployeeListResponse:
    """List all employees."""
    return await employee_service.list_employees(session)


@employees_router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(payload: EmployeePayload, session: SessionDep) -> EmployeeResponse:
    """Create an employee with the EMPLOYEE role."""
    return await employee_service.create_employee(session, payload)


@employees_router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(employee_id: uuid.UUID, session: SessionDep) -> EmployeeResponse:
    return await employee_service.get_employee_response(session, employee_id)


@employees_router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: uuid.UUID,
    payload: EmployeePayload,
    session: SessionDep,
) -> EmployeeResponse:
    """Update an employee's name and job title."""
    return await employee_service.update_employee(session, employee_id, payload)


@employees_router.put("/{employee_id}/role", response_model=EmployeeResponse)
async def change_role(
    employee_id: uuid.UUID,
    payload: RolePayload,
    session: SessionDep,
    caller: AdminDep,
) -> EmployeeResponse:
    """Change an employee's role (admin only)."""
    return await employee_service.change_role(session, caller, employee_id, payload.role)


@employees_router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(employee_id: uuid.UUID, session: SessionDep) -> None:
    """Delete an employee and everything that belongs to them."""
    await employee_service.delete_employee(session, employee_id)


@employees_router.get("/{employee_id}/projects", response_model=ProjectListResponse)
async def list_active_projects(
    employee_id: uuid.UUID,
    session: SessionDep,
    on: date | None = Query(default=None),
) -> ProjectListResponse:
    """List the projects an employee is actively assigned to on a date (default today)."""
    return await assignment_service.list_active_projects(session, employee_id, on or date.today())

# ruff: noqa: TC003
from __future__ import annotations

import uuid

from pydantic import BaseModel


class CreateAssignmentRequest(BaseModel):
    """Request body for assigning an employee to a project."""

    employee_id: uuid.UUID


class AssignmentResponse(BaseModel):
    """An employee assigned to a project."""

    employee_id: uuid.UUID
    employee_name: str


class AssignmentListResponse(BaseModel):
    items: list[AssignmentResponse]
    total: int

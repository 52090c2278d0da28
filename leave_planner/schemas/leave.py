# ruff: noqa: TC001, TC003
from __future__ import annotations

import uuid
from datetime import date, datetime

from pydantic import BaseModel, Field

from leave_planner.models.enums import LeaveStatus

# ---------------------------------------------------------------------------
# Request payloads
# ---------------------------------------------------------------------------


class CreateLeavePayload(BaseModel):
    """Request body for submitting a leave request."""

    employee_id: uuid.UUID
    date: date


class DecisionPayload(BaseModel):
    """Request body for the reject action."""

    comment: str | None = Field(default=None, max_length=1000)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class LeaveResponse(BaseModel):
    """Response schema for a single leave request."""

    id: uuid.UUID
    employee_id: uuid.UUID
    date: date
    status: LeaveStatus
    decided_by: uuid.UUID | None
    decided_at: datetime | None
    decision_comment: str | None
    created_at: datetime


class ConflictEmployee(BaseModel):
    employee_id: uuid.UUID
    employee_name: str


class ConflictHint(BaseModel):
    """Teammates on one project whose leave collides with the candidate date."""

    project_id: uuid.UUID
    project_name: str
    employees: list[ConflictEmployee]


class LeaveWithConflictsResponse(BaseModel):
    """A leave request together with the conflicts found when it was created or approved."""

    leave: LeaveResponse
    conflict_hints: list[ConflictHint]


class LeaveListResponse(BaseModel):
    items: list[LeaveResponse]
    total: int


class ConflictPreviewResponse(BaseModel):
    """Read-only conflict check for a prospective leave date."""

    employee_id: uuid.UUID
    date: date
    include_requested: bool
    conflict_hints: list[ConflictHint]

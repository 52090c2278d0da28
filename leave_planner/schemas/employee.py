# ruff: noqa: TC003
from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from leave_planner.models.enums import UserRole


class EmployeePayload(BaseModel):
    """Request body for creating or updating an employee."""

    name: str = Field(min_length=1, max_length=200)
    job_title: str | None = Field(default=None, max_length=200)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            msg = "name must not be blank"
            raise ValueError(msg)
        return value

    @field_validator("job_title")
    @classmethod
    def _strip_job_title(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None


class RolePayload(BaseModel):
    """Request body for changing an employee's role."""

    role: UserRole


class EmployeeResponse(BaseModel):
    """Response schema for an employee."""

    id: uuid.UUID
    name: str
    job_title: str | None
    role: UserRole
    created_at: datetime


class EmployeeListResponse(BaseModel):
    """List of employees."""

    items: list[EmployeeResponse]
    total: int

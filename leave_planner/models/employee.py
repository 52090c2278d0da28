from __future__ import annotations

from sqlmodel import Field

from leave_planner.models.base import TimestampMixin, UUIDBase
from leave_planner.models.enums import UserRole


class Employee(UUIDBase, TimestampMixin, table=True):
    """A person who can request leave and, depending on role, decide on it."""

    __tablename__ = "employee"

    name: str = Field(max_length=200)
    job_title: str | None = Field(default=None, max_length=200)
    role: str = Field(
        default=UserRole.EMPLOYEE, max_length=50, index=True, sa_column_kwargs={"server_default": "EMPLOYEE"}
    )

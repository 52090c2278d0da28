# ruff: noqa: TC003
from __future__ import annotations

import datetime
import uuid

import sqlalchemy as sa
from sqlmodel import Field

from leave_planner.models.base import TimestampMixin, UUIDBase
from leave_planner.models.enums import LeaveStatus


class LeaveRequest(UUIDBase, TimestampMixin, table=True):
    """A single-day leave request with its approval workflow state."""

    __tablename__ = "leave_request"
    __table_args__ = (
        sa.UniqueConstraint("employee_id", "date", name="uq_leave_employee_date"),
        sa.Index("ix_leave_date_status", "date", "status"),
    )

    employee_id: uuid.UUID = Field(
        sa_column=sa.Column(
            sa.Uuid, sa.ForeignKey("employee.id", ondelete="CASCADE"), nullable=False, index=True
        ),
    )
    date: datetime.date
    status: str = Field(
        default=LeaveStatus.REQUESTED, max_length=50, index=True, sa_column_kwargs={"server_default": "REQUESTED"}
    )
    decided_by: uuid.UUID | None = None
    decided_at: datetime.datetime | None = Field(default=None, sa_type=sa.DateTime(timezone=True))  # ty: ignore[invalid-argument-type]
    decision_comment: str | None = Field(default=None, max_length=1000)

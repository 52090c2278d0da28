# ruff: noqa: TC003
from __future__ import annotations

import uuid
from datetime import date

import sqlalchemy as sa
from sqlmodel import Field

from leave_planner.models.base import TimestampMixin, UUIDBase


class Project(UUIDBase, TimestampMixin, table=True):
    """A customer project, active from start_date through end_date (open-ended when null)."""

    __tablename__ = "project"
    __table_args__ = (
        sa.CheckConstraint("end_date IS NULL OR end_date >= start_date", name="ck_project_period"),
    )

    name: str = Field(max_length=200)
    customer_id: uuid.UUID = Field(
        sa_column=sa.Column(
            sa.Uuid, sa.ForeignKey("customer.id", ondelete="RESTRICT"), nullable=False, index=True
        ),
    )
    start_date: date
    end_date: date | None = None


class ProjectAssignment(UUIDBase, TimestampMixin, table=True):
    """Links an employee to a project. Activity derives from the project's date range."""

    __tablename__ = "project_assignment"
    __table_args__ = (
        sa.UniqueConstraint("employee_id", "project_id", name="uq_assignment_employee_project"),
    )

    employee_id: uuid.UUID = Field(
        sa_column=sa.Column(
            sa.Uuid, sa.ForeignKey("employee.id", ondelete="CASCADE"), nullable=False, index=True
        ),
    )
    project_id: uuid.UUID = Field(
        sa_column=sa.Column(
            sa.Uuid, sa.ForeignKey("project.id", ondelete="CASCADE"), nullable=False, index=True
        ),
    )

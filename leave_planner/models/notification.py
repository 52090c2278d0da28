# ruff: noqa: TC003
from __future__ import annotations

import datetime
import uuid

import sqlalchemy as sa
from sqlmodel import Field

from leave_planner.models.base import UUIDBase, utc_now


class Notification(UUIDBase, table=True):
    """Inbox entry telling an employee what happened to one of their leave requests."""

    __tablename__ = "notification"
    __table_args__ = (sa.Index("ix_notification_user_read", "user_id", "is_read"),)

    user_id: uuid.UUID = Field(
        sa_column=sa.Column(sa.Uuid, sa.ForeignKey("employee.id", ondelete="CASCADE"), nullable=False),
    )
    leave_request_id: uuid.UUID = Field(index=True)
    kind: str = Field(max_length=50)
    date: datetime.date
    actor_id: uuid.UUID | None = None
    actor_name: str | None = Field(default=None, max_length=200)
    comment: str | None = Field(default=None, max_length=1000)
    created_at: datetime.datetime = Field(
        default_factory=utc_now,
        sa_type=sa.DateTime(timezone=True),  # ty: ignore[invalid-argument-type]
        sa_column_kwargs={"server_default": sa.func.now()},
    )
    is_read: bool = Field(default=False, sa_column_kwargs={"server_default": sa.false()})

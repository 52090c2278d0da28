# ruff: noqa: TC001, TC003
from __future__ import annotations

import uuid
from datetime import date, datetime

from pydantic import BaseModel, Field

from leave_planner.models.enums import NotificationKind


class MarkReadPayload(BaseModel):
    """Request body for marking notifications as read."""

    ids: list[uuid.UUID] = Field(default_factory=list)


class NotificationResponse(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    leave_request_id: uuid.UUID
    kind: NotificationKind
    date: date
    actor_id: uuid.UUID | None
    actor_name: str | None
    comment: str | None
    created_at: datetime
    is_read: bool


class NotificationListResponse(BaseModel):
    items: list[NotificationResponse]
    total: int

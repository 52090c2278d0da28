# ruff: noqa: B008, TC001, TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter, Query, status

from leave_planner.api.deps import CallerDep
from leave_planner.db import SessionDep
from leave_planner.schemas.notification import MarkReadPayload, NotificationListResponse
from leave_planner.services import notification as notification_service

notifications_router = APIRouter(prefix="/notifications", tags=["notifications"])


@notifications_router.get("", response_model=NotificationListResponse)
async def list_notifications(
    session: SessionDep,
    caller: CallerDep,
    user_id: uuid.UUID | None = Query(default=None),
    only_unread: bool = Query(default=False),
) -> NotificationListResponse:
    """List the caller's notifications (admins may pass user_id), newest first."""
    return await notification_service.list_notifications(session, caller, user_id, only_unread)


@notifications_router.post("/mark-read", status_code=status.HTTP_204_NO_CONTENT)
async def mark_read(payload: MarkReadPayload, session: SessionDep, caller: CallerDep) -> None:
    """Mark notifications as read."""
    await notification_service.mark_read(session, caller, payload.ids)

# ruff: noqa: TC003
from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pydantic import BaseModel
from sqlalchemy import func, select, update
from sqlmodel import col

from leave_planner.config import get_settings
from leave_planner.exceptions import ForbiddenError, ValidationError
from leave_planner.models.enums import NotificationKind
from leave_planner.models.notification import Notification
from leave_planner.schemas.notification import NotificationListResponse, NotificationResponse

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from leave_planner.schemas.auth import CallerContext

logger = logging.getLogger(__name__)


class NotificationEvent(BaseModel):
    """Something that happened to a leave request, addressed to one user."""

    user_id: uuid.UUID
    leave_request_id: uuid.UUID
    kind: NotificationKind
    date: date
    actor_id: uuid.UUID | None = None
    actor_name: str | None = None
    comment: str | None = None


@runtime_checkable
class NotificationSink(Protocol):
    """Interface for delivering leave notifications."""

    async def notify(self, session: AsyncSession, event: NotificationEvent) -> None:
        """Deliver a notification. May raise; callers treat delivery as best effort."""
        ...


class DatabaseNotificationSink:
    """Persists notifications as inbox rows.

    Commits on the request session, after the leave transition has already been
    committed, so a failed insert never undoes the transition.
    """

    async def notify(self, session: AsyncSession, event: NotificationEvent) -> None:
        comment = event.comment.strip() if event.comment else None
        session.add(
            Notification(
                user_id=event.user_id,
                leave_request_id=event.leave_request_id,
                kind=event.kind.value,
                date=event.date,
                actor_id=event.actor_id,
                actor_name=event.actor_name,
                comment=comment or None,
            )
        )
        try:
            await session.commit()
        except Exception:
            await session.rollback()
            raise


_notification_sink: NotificationSink = DatabaseNotificationSink()


def get_notification_sink() -> NotificationSink:
    return _notification_sink


def set_notification_sink(sink: NotificationSink) -> None:
    """Override the sink (for testing or production wiring)."""
    global _notification_sink
    _notification_sink = sink


async def dispatch_notification(session: AsyncSession, event: NotificationEvent) -> None:
    """Send a notification without letting delivery failures escape.

    Must be called after the leave transition has been committed.
    """
    try:
        await get_notification_sink().notify(session, event)
    except Exception:
        logger.exception(
            "Failed to deliver %s notification for leave request %s to %s",
            event.kind,
            event.leave_request_id,
            event.user_id,
        )


def _build_notification_response(notification: Notification) -> NotificationResponse:
    return NotificationResponse(
        id=notification.id,
        user_id=notification.user_id,
        leave_request_id=notification.leave_request_id,
        kind=NotificationKind(notification.kind),
        date=notification.date,
        actor_id=notification.actor_id,
        actor_name=notification.actor_name,
        comment=notification.comment,
        created_at=notification.created_at,
        is_read=notification.is_read,
    )


async def list_notifications(
    session: AsyncSession,
    caller: CallerContext,
    user_id: uuid.UUID | None = None,
    only_unread: bool = False,
) -> NotificationListResponse:
    """List a user's notifications, newest first.

    Callers read their own inbox; only admins may read another user's.
    """
    target_id = caller.id if user_id is None else user_id
    if target_id != caller.id and not caller.is_admin:
        raise ForbiddenError("Only admins may read other users' notifications")

    filters = [col(Notification.user_id) == target_id]
    if only_unread:
        filters.append(col(Notification.is_read).is_(False))

    count_result = await session.execute(select(func.count()).select_from(Notification).where(*filters))
    total = count_result.scalar_one()

    result = await session.execute(
        select(Notification)
        .where(*filters)
        .order_by(col(Notification.created_at).desc(), col(Notification.id))
        .limit(get_settings().notification_list_limit)
    )
    notifications = list(result.scalars().all())
    return NotificationListResponse(
        items=[_build_notification_response(n) for n in notifications],
        total=total,
    )


async def mark_read(
    session: AsyncSession,
    caller: CallerContext,
    ids: list[uuid.UUID],
) -> None:
    """Mark notifications as read. Unknown IDs are ignored; non-admins may only mark their own."""
    if not ids:
        raise ValidationError("ids must not be empty")

    result = await session.execute(select(col(Notification.user_id)).where(col(Notification.id).in_(ids)))
    owners = set(result.scalars().all())
    if not owners:
        return

    if not caller.is_admin and owners != {caller.id}:
        raise ForbiddenError("You can only mark your own notifications as read")

    await session.execute(update(Notification).where(col(Notification.id).in_(ids)).values(is_read=True))
    await session.commit()

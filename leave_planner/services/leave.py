# ruff: noqa: TC003
from __future__ import annotations

import logging
import uuid
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError

from leave_planner.exceptions import DuplicateError, ForbiddenError, StateConflictError, ValidationError
from leave_planner.models.enums import AuditAction, AuditEntityType, LeaveStatus, NotificationKind
from leave_planner.models.leave import LeaveRequest
from leave_planner.schemas.leave import (
    ConflictPreviewResponse,
    LeaveListResponse,
    LeaveResponse,
    LeaveWithConflictsResponse,
)
from leave_planner.services import leave_ledger
from leave_planner.services.audit import model_to_audit_dict, write_audit_log
from leave_planner.services.conflict import compute_conflicts
from leave_planner.services.employee import employee_exists
from leave_planner.services.notification import NotificationEvent, dispatch_notification

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from leave_planner.schemas.auth import CallerContext

logger = logging.getLogger(__name__)

_DUPLICATE_MESSAGE = "A leave request already exists for this employee and date"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _build_leave_response(leave: LeaveRequest) -> LeaveResponse:
    """Map a leave model to its response schema."""
    return LeaveResponse(
        id=leave.id,
        employee_id=leave.employee_id,
        date=leave.date,
        status=LeaveStatus(leave.status),
        decided_by=leave.decided_by,
        decided_at=leave.decided_at,
        decision_comment=leave.decision_comment,
        created_at=leave.created_at,
    )


def _authorize_decision(caller: CallerContext, leave: LeaveRequest, verb: str) -> None:
    """Raise 403 when the caller is the employee who owns the leave request."""
    if leave.employee_id == caller.id:
        raise ForbiddenError(f"You cannot {verb} your own leave request")


def _require_decider(caller: CallerContext) -> None:
    if not caller.can_decide:
        raise ForbiddenError("Approver or admin role required")


def _normalize_comment(comment: str | None) -> str | None:
    """Trim a decision comment; blank comments are stored as null."""
    if comment is None:
        return None
    return comment.strip() or None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


async def create_leave(
    session: AsyncSession,
    employee_id: uuid.UUID,
    on_date: date,
) -> LeaveWithConflictsResponse:
    """Submit a leave request and report conflicts with teammates' approved leave.

    1. Validate the employee reference.
    2. Reject duplicates for (employee, date).
    3. Insert the REQUESTED record and audit log, then commit.
    4. Compute conflicts counting only APPROVED teammate leave.
    5. Notify the employee (best effort).
    """
    if employee_id.int == 0:
        raise ValidationError("employee_id is required")
    if not await employee_exists(session, employee_id):
        raise ValidationError("Employee does not exist")

    if await leave_ledger.leave_exists(session, employee_id, on_date):
        raise DuplicateError(_DUPLICATE_MESSAGE)

    leave = LeaveRequest(employee_id=employee_id, date=on_date, status=LeaveStatus.REQUESTED.value)
    session.add(leave)

    # The unique constraint is the authoritative guard against concurrent submissions.
    try:
        await session.flush()
    except IntegrityError:
        await session.rollback()
        # The employee may have been deleted since the existence check.
        if not await employee_exists(session, employee_id):
            raise ValidationError("Employee does not exist") from None
        raise DuplicateError(_DUPLICATE_MESSAGE) from None

    await write_audit_log(
        session,
        actor_id=employee_id,
        entity_type=AuditEntityType.LEAVE_REQUEST,
        entity_id=leave.id,
        action=AuditAction.SUBMIT,
        after_json=model_to_audit_dict(leave),
    )

    await session.commit()
    await session.refresh(leave)
    logger.info("Leave request %s submitted for employee %s on %s", leave.id, employee_id, on_date)

    conflict_hints = await compute_conflicts(session, employee_id, on_date, include_requested=False)
    response = LeaveWithConflictsResponse(leave=_build_leave_response(leave), conflict_hints=conflict_hints)

    await dispatch_notification(
        session,
        NotificationEvent(
            user_id=leave.employee_id,
            leave_request_id=leave.id,
            kind=NotificationKind.SUBMITTED,
            date=leave.date,
        ),
    )
    return response


async def approve_leave(
    session: AsyncSession,
    caller: CallerContext,
    leave_id: uuid.UUID,
) -> LeaveWithConflictsResponse:
    """Approve a REQUESTED leave request.

    Conflicts are computed before the status changes and count both APPROVED
    and REQUESTED teammate leave, so they describe the situation the approver
    decided on.
    """
    _require_decider(caller)

    leave = await leave_ledger.get_leave_or_404(session, leave_id, for_update=True)
    _authorize_decision(caller, leave, "approve")

    if leave.status == LeaveStatus.APPROVED:
        raise StateConflictError("Leave request is already approved")
    if leave.status == LeaveStatus.REJECTED:
        raise StateConflictError("Rejected leave requests cannot be approved")

    conflict_hints = await compute_conflicts(session, leave.employee_id, leave.date, include_requested=True)

    before_dict = model_to_audit_dict(leave)
    leave.status = LeaveStatus.APPROVED.value
    leave.decided_by = caller.id
    leave.decided_at = datetime.now(UTC)
    leave.decision_comment = None
    await session.flush()

    await write_audit_log(
        session,
        actor_id=caller.id,
        entity_type=AuditEntityType.LEAVE_REQUEST,
        entity_id=leave.id,
        action=AuditAction.APPROVE,
        before_json=before_dict,
        after_json=model_to_audit_dict(leave),
    )

    await session.commit()
    await session.refresh(leave)
    logger.info("Leave request %s approved by %s (%d conflict hints)", leave.id, caller.id, len(conflict_hints))

    response = LeaveWithConflictsResponse(leave=_build_leave_response(leave), conflict_hints=conflict_hints)
    await dispatch_notification(
        session,
        NotificationEvent(
            user_id=leave.employee_id,
            leave_request_id=leave.id,
            kind=NotificationKind.APPROVED,
            date=leave.date,
            actor_id=caller.id,
            actor_name=caller.name,
        ),
    )
    return response


async def reject_leave(
    session: AsyncSession,
    caller: CallerContext,
    leave_id: uuid.UUID,
    comment: str | None = None,
) -> LeaveResponse:
    """Reject a REQUESTED leave request with an optional comment. No conflicts are computed."""
    _require_decider(caller)

    leave = await leave_ledger.get_leave_or_404(session, leave_id, for_update=True)
    _authorize_decision(caller, leave, "reject")

    if leave.status == LeaveStatus.REJECTED:
        raise StateConflictError("Leave request is already rejected")
    if leave.status == LeaveStatus.APPROVED:
        raise StateConflictError("Approved leave requests cannot be rejected")

    before_dict = model_to_audit_dict(leave)
    leave.status = LeaveStatus.REJECTED.value
    leave.decided_by = caller.id
    leave.decided_at = datetime.now(UTC)
    leave.decision_comment = _normalize_comment(comment)
    await session.flush()

    await write_audit_log(
        session,
        actor_id=caller.id,
        entity_type=AuditEntityType.LEAVE_REQUEST,
        entity_id=leave.id,
        action=AuditAction.REJECT,
        before_json=before_dict,
        after_json=model_to_audit_dict(leave),
    )

    await session.commit()
    await session.refresh(leave)
    logger.info("Leave request %s rejected by %s", leave.id, caller.id)

    response = _build_leave_response(leave)
    await dispatch_notification(
        session,
        NotificationEvent(
            user_id=leave.employee_id,
            leave_request_id=leave.id,
            kind=NotificationKind.REJECTED,
            date=leave.date,
            actor_id=caller.id,
            actor_name=caller.name,
            comment=leave.decision_comment,
        ),
    )
    return response


async def get_leave(session: AsyncSession, leave_id: uuid.UUID) -> LeaveResponse:
    """Get a single leave request by ID."""
    leave = await leave_ledger.get_leave_or_404(session, leave_id)
    return _build_leave_response(leave)


async def list_leaves(
    session: AsyncSession,
    employee_id: uuid.UUID | None = None,
    on_date: date | None = None,
) -> LeaveListResponse:
    """List leave requests with optional employee and date filters."""
    leaves = await leave_ledger.list_leaves(session, employee_id, on_date)
    return LeaveListResponse(items=[_build_leave_response(lr) for lr in leaves], total=len(leaves))


async def preview_conflicts(
    session: AsyncSession,
    employee_id: uuid.UUID,
    on_date: date,
    include_requested: bool = False,
) -> ConflictPreviewResponse:
    """Compute conflicts for a prospective leave without persisting anything."""
    if not await employee_exists(session, employee_id):
        raise ValidationError("Employee does not exist")

    conflict_hints = await compute_conflicts(session, employee_id, on_date, include_requested=include_requested)
    return ConflictPreviewResponse(
        employee_id=employee_id,
        date=on_date,
        include_requested=include_requested,
        conflict_hints=conflict_hints,
    )

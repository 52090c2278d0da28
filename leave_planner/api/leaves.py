# ruff: noqa: B008, TC001, TC003
from __future__ import annotations

import uuid
from datetime import date

from fastapi import APIRouter, Query, status

from leave_planner.api.deps import CallerDep
from leave_planner.db import SessionDep
from leave_planner.schemas.leave import (
    ConflictPreviewResponse,
    CreateLeavePayload,
    DecisionPayload,
    LeaveListResponse,
    LeaveResponse,
    LeaveWithConflictsResponse,
)
from leave_planner.services import leave as leave_service

leaves_router = APIRouter(prefix="/leaves", tags=["leaves"])


@leaves_router.post("", response_model=LeaveWithConflictsResponse, status_code=status.HTTP_201_CREATED)
async def create_leave(payload: CreateLeavePayload, session: SessionDep) -> LeaveWithConflictsResponse:
    """Submit a leave request; the response lists teammates already on approved leave that day."""
    return await leave_service.create_leave(session, payload.employee_id, payload.date)


@leaves_router.get("", response_model=LeaveListResponse)
async def list_leaves(
    session: SessionDep,
    employee_id: uuid.UUID | None = Query(default=None),
    on_date: date | None = Query(default=None, alias="date"),
) -> LeaveListResponse:
    """List leave requests, optionally filtered by employee and date."""
    return await leave_service.list_leaves(session, employee_id, on_date)


@leaves_router.get("/conflicts", response_model=ConflictPreviewResponse)
async def preview_conflicts(
    session: SessionDep,
    employee_id: uuid.UUID = Query(),
    on_date: date = Query(alias="date"),
    include_requested: bool = Query(default=False),
) -> ConflictPreviewResponse:
    """Preview conflicts for a prospective leave date without creating anything."""
    return await leave_service.preview_conflicts(session, employee_id, on_date, include_requested)


@leaves_router.get("/{leave_id}", response_model=LeaveResponse)
async def get_leave(leave_id: uuid.UUID, session: SessionDep) -> LeaveResponse:
    return await leave_service.get_leave(session, leave_id)


@leaves_router.post("/{leave_id}/approve", response_model=LeaveWithConflictsResponse)
async def approve_leave(
    leave_id: uuid.UUID,
    session: SessionDep,
    caller: CallerDep,
) -> LeaveWithConflictsResponse:
    """Approve a requested leave (approver or admin, never one's own)."""
    return await leave_service.approve_leave(session, caller, leave_id)


@leaves_router.post("/{leave_id}/reject", response_model=LeaveResponse)
async def reject_leave(
    leave_id: uuid.UUID,
    session: SessionDep,
    caller: CallerDep,
    payload: DecisionPayload | None = None,
) -> LeaveResponse:
    """Reject a requested leave with an optional comment (approver or admin, never one's own)."""
    return await leave_service.reject_leave(session, caller, leave_id, payload.comment if payload else None)

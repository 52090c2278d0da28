"""Conflict detection for leave requests.

A conflict is a teammate (another employee assigned to a project the requester
is actively assigned to on the candidate date) who already has leave on that
date. Which teammate leaves count depends on the inclusion policy:

* at creation time only APPROVED leave counts, since other pending requests
  may still be rejected;
* at approval time REQUESTED leave counts too, so the approver sees every
  absence that could pile up on the same day.
"""

# ruff: noqa: TC003
from __future__ import annotations

import uuid
from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlmodel import col

from leave_planner.models.employee import Employee
from leave_planner.models.enums import LeaveStatus
from leave_planner.models.project import Project, ProjectAssignment
from leave_planner.schemas.leave import ConflictEmployee, ConflictHint
from leave_planner.services.assignment import get_active_project_ids
from leave_planner.services.leave_ledger import find_employee_ids_on_date

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

CREATION_STATUSES: frozenset[LeaveStatus] = frozenset({LeaveStatus.APPROVED})
APPROVAL_STATUSES: frozenset[LeaveStatus] = frozenset({LeaveStatus.APPROVED, LeaveStatus.REQUESTED})


def inclusion_statuses(include_requested: bool) -> frozenset[LeaveStatus]:
    """Return the teammate leave statuses that count as conflicting."""
    return APPROVAL_STATUSES if include_requested else CREATION_STATUSES


async def compute_conflicts(
    session: AsyncSession,
    requester_id: uuid.UUID,
    on_date: date,
    *,
    include_requested: bool,
) -> list[ConflictHint]:
    """Compute per-project conflict hints for a requester and candidate date.

    1. Resolve the requester's active projects on on_date; none means no conflicts.
    2. Load every other employee assigned to those projects.
    3. Find which of them have leave on on_date in the selected statuses.
    4. Group the matches by project, one hint per project with at least one match.

    Projects are ordered by (name, id) and employees within a hint by (name, id).
    The requester never appears in their own hints.
    """
    project_ids = await get_active_project_ids(session, requester_id, on_date)
    if not project_ids:
        return []

    result = await session.execute(
        select(
            col(Project.id),
            col(Project.name),
            col(Employee.id),
            col(Employee.name),
        )
        .select_from(ProjectAssignment)
        .join(Project, col(Project.id) == col(ProjectAssignment.project_id))
        .join(Employee, col(Employee.id) == col(ProjectAssignment.employee_id))
        .where(
            col(ProjectAssignment.project_id).in_(list(project_ids)),
            col(ProjectAssignment.employee_id) != requester_id,
        )
        .order_by(col(Project.name), col(Project.id), col(Employee.name), col(Employee.id))
    )
    team = result.all()
    if not team:
        return []

    teammate_ids = {employee_id for _, _, employee_id, _ in team}
    conflicting = set(
        await find_employee_ids_on_date(session, on_date, inclusion_statuses(include_requested), teammate_ids)
    )
    if not conflicting:
        return []

    hints: dict[uuid.UUID, ConflictHint] = {}
    seen: set[tuple[uuid.UUID, uuid.UUID]] = set()
    for project_id, project_name, employee_id, employee_name in team:
        if employee_id not in conflicting or (project_id, employee_id) in seen:
            continue
        seen.add((project_id, employee_id))
        hint = hints.get(project_id)
        if hint is None:
            hint = hints[project_id] = ConflictHint(project_id=project_id, project_name=project_name, employees=[])
        hint.employees.append(ConflictEmployee(employee_id=employee_id, employee_name=employee_name))

    return list(hints.values())

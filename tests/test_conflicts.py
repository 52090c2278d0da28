"""Tests for the conflict resolver and the assignment index it builds on."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from factories import add_employee, add_leave, add_project, assign

from leave_planner.models import LeaveStatus
from leave_planner.services.assignment import get_active_project_ids
from leave_planner.services.conflict import (
    APPROVAL_STATUSES,
    CREATION_STATUSES,
    compute_conflicts,
    inclusion_statuses,
)
from leave_planner.services.leave_ledger import find_employee_ids_on_date, leave_exists

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

DAY = date(2025, 6, 10)


# ---------------------------------------------------------------------------
# Assignment index
# ---------------------------------------------------------------------------


async def test_active_projects_respect_inclusive_range(db_session: AsyncSession) -> None:
    emp = await add_employee(db_session, "Erin")
    project = await add_project(db_session, "Bounded", date(2025, 3, 1), date(2025, 3, 31))
    await assign(db_session, project, emp)

    assert await get_active_project_ids(db_session, emp.id, date(2025, 2, 28)) == set()
    assert await get_active_project_ids(db_session, emp.id, date(2025, 3, 1)) == {project.id}
    assert await get_active_project_ids(db_session, emp.id, date(2025, 3, 31)) == {project.id}
    assert await get_active_project_ids(db_session, emp.id, date(2025, 4, 1)) == set()


async def test_active_projects_open_ended(db_session: AsyncSession) -> None:
    emp = await add_employee(db_session, "Erin")
    project = await add_project(db_session, "Forever", date(2024, 1, 1), None)
    await assign(db_session, project, emp)

    assert await get_active_project_ids(db_session, emp.id, date(2030, 1, 1)) == {project.id}


async def test_active_projects_only_own_assignments(db_session: AsyncSession) -> None:
    emp = await add_employee(db_session, "Erin")
    other = await add_employee(db_session, "Otto")
    project = await add_project(db_session, "P")
    await assign(db_session, project, other)

    assert await get_active_project_ids(db_session, emp.id, DAY) == set()


# ---------------------------------------------------------------------------
# Leave ledger
# ---------------------------------------------------------------------------


async def test_leave_exists_any_status(db_session: AsyncSession) -> None:
    emp = await add_employee(db_session, "Erin")
    await add_leave(db_session, emp, DAY, LeaveStatus.REJECTED)

    assert await leave_exists(db_session, emp.id, DAY) is True
    assert await leave_exists(db_session, emp.id, date(2025, 6, 11)) is False


async def test_find_employee_ids_filters_status_and_candidates(db_session: AsyncSession) -> None:
    a = await add_employee(db_session, "A")
    b = await add_employee(db_session, "B")
    c = await add_employee(db_session, "C")
    await add_leave(db_session, a, DAY, LeaveStatus.APPROVED)
    await add_leave(db_session, b, DAY, LeaveStatus.REQUESTED)
    await add_leave(db_session, c, DAY, LeaveStatus.APPROVED)

    found = await find_employee_ids_on_date(db_session, DAY, {LeaveStatus.APPROVED}, {a.id, b.id})
    assert found == [a.id]

    found = await find_employee_ids_on_date(db_session, DAY, APPROVAL_STATUSES, {a.id, b.id})
    assert set(found) == {a.id, b.id}

    assert await find_employee_ids_on_date(db_session, DAY, APPROVAL_STATUSES, set()) == []


# ---------------------------------------------------------------------------
# Conflict resolver
# ---------------------------------------------------------------------------


def test_inclusion_statuses() -> None:
    assert inclusion_statuses(include_requested=False) == CREATION_STATUSES == {LeaveStatus.APPROVED}
    assert inclusion_statuses(include_requested=True) == {LeaveStatus.APPROVED, LeaveStatus.REQUESTED}


async def test_no_assignments_short_circuits(db_session: AsyncSession) -> None:
    """Without active projects the result is empty whatever other employees do."""
    emp = await add_employee(db_session, "Erin")
    mate = await add_employee(db_session, "Mia")
    project = await add_project(db_session, "P")
    await assign(db_session, project, mate)
    await add_leave(db_session, mate, DAY, LeaveStatus.APPROVED)

    assert await compute_conflicts(db_session, emp.id, DAY, include_requested=False) == []
    assert await compute_conflicts(db_session, emp.id, DAY, include_requested=True) == []


async def test_assignment_inactive_on_date(db_session: AsyncSession) -> None:
    emp = await add_employee(db_session, "Erin")
    mate = await add_employee(db_session, "Mia")
    project = await add_project(db_session, "Old", date(2024, 1, 1), date(2024, 12, 31))
    await assign(db_session, project, emp, mate)
    await add_leave(db_session, mate, DAY, LeaveStatus.APPROVED)

    assert await compute_conflicts(db_session, emp.id, DAY, include_requested=True) == []


async def test_approved_teammate_is_reported(db_session: AsyncSession) -> None:
    emp = await add_employee(db_session, "Erin")
    mate = await add_employee(db_session, "Mia")
    project = await add_project(db_session, "P")
    await assign(db_session, project, emp, mate)
    await add_leave(db_session, mate, DAY, LeaveStatus.APPROVED)

    hints = await compute_conflicts(db_session, emp.id, DAY, include_requested=False)

    assert len(hints) == 1
    assert hints[0].project_id == project.id
    assert hints[0].project_name == "P"
    assert [(e.employee_id, e.employee_name) for e in hints[0].employees] == [(mate.id, "Mia")]


async def test_leave_on_other_date_is_ignored(db_session: AsyncSession) -> None:
    emp = await add_employee(db_session, "Erin")
    mate = await add_employee(db_session, "Mia")
    project = await add_project(db_session, "P")
    await assign(db_session, project, emp, mate)
    await add_leave(db_session, mate, date(2025, 6, 11), LeaveStatus.APPROVED)

    assert await compute_conflicts(db_session, emp.id, DAY, include_requested=True) == []


async def test_status_set_asymmetry(db_session: AsyncSession) -> None:
    emp = await add_employee(db_session, "Erin")
    mate = await add_employee(db_session, "Mia")
    project = await add_project(db_session, "P")
    await assign(db_session, project, emp, mate)
    await add_leave(db_session, mate, DAY, LeaveStatus.REQUESTED)

    assert await compute_conflicts(db_session, emp.id, DAY, include_requested=False) == []

    hints = await compute_conflicts(db_session, emp.id, DAY, include_requested=True)
    assert [e.employee_id for e in hints[0].employees] == [mate.id]


async def test_rejected_teammate_never_counts(db_session: AsyncSession) -> None:
    emp = await add_employee(db_session, "Erin")
    mate = await add_employee(db_session, "Mia")
    project = await add_project(db_session, "P")
    await assign(db_session, project, emp, mate)
    await add_leave(db_session, mate, DAY, LeaveStatus.REJECTED)

    assert await compute_conflicts(db_session, emp.id, DAY, include_requested=True) == []


async def test_own_leave_is_excluded(db_session: AsyncSession) -> None:
    emp = await add_employee(db_session, "Erin")
    mate = await add_employee(db_session, "Mia")
    project = await add_project(db_session, "P")
    await assign(db_session, project, emp, mate)
    await add_leave(db_session, emp, DAY, LeaveStatus.APPROVED)

    assert await compute_conflicts(db_session, emp.id, DAY, include_requested=True) == []


async def test_teammates_grouped_under_one_hint(db_session: AsyncSession) -> None:
    emp = await add_employee(db_session, "Erin")
    zed = await add_employee(db_session, "Zed")
    amy = await add_employee(db_session, "Amy")
    project = await add_project(db_session, "P")
    await assign(db_session, project, emp, zed, amy)
    await add_leave(db_session, zed, DAY, LeaveStatus.APPROVED)
    await add_leave(db_session, amy, DAY, LeaveStatus.APPROVED)

    hints = await compute_conflicts(db_session, emp.id, DAY, include_requested=False)

    assert len(hints) == 1
    assert [e.employee_name for e in hints[0].employees] == ["Amy", "Zed"]


async def test_teammate_on_two_shared_projects_listed_under_each(db_session: AsyncSession) -> None:
    emp = await add_employee(db_session, "Erin")
    mate = await add_employee(db_session, "Mia")
    beta = await add_project(db_session, "Beta")
    alpha = await add_project(db_session, "Alpha")
    await assign(db_session, alpha, emp, mate)
    await assign(db_session, beta, emp, mate)
    await add_leave(db_session, mate, DAY, LeaveStatus.APPROVED)

    hints = await compute_conflicts(db_session, emp.id, DAY, include_requested=False)

    assert [h.project_name for h in hints] == ["Alpha", "Beta"]
    for hint in hints:
        assert [e.employee_id for e in hint.employees] == [mate.id]


async def test_projects_without_matches_are_omitted(db_session: AsyncSession) -> None:
    emp = await add_employee(db_session, "Erin")
    mate = await add_employee(db_session, "Mia")
    idle = await add_employee(db_session, "Ian")
    busy_project = await add_project(db_session, "Busy")
    quiet_project = await add_project(db_session, "Quiet")
    await assign(db_session, busy_project, emp, mate)
    await assign(db_session, quiet_project, emp, idle)
    await add_leave(db_session, mate, DAY, LeaveStatus.APPROVED)

    hints = await compute_conflicts(db_session, emp.id, DAY, include_requested=True)

    assert [h.project_id for h in hints] == [busy_project.id]


async def test_teammate_only_on_unshared_project_is_ignored(db_session: AsyncSession) -> None:
    emp = await add_employee(db_session, "Erin")
    stranger = await add_employee(db_session, "Stan")
    mine = await add_project(db_session, "Mine")
    theirs = await add_project(db_session, "Theirs")
    await assign(db_session, mine, emp)
    await assign(db_session, theirs, stranger)
    await add_leave(db_session, stranger, DAY, LeaveStatus.APPROVED)

    assert await compute_conflicts(db_session, emp.id, DAY, include_requested=True) == []


async def test_results_are_deterministic(db_session: AsyncSession) -> None:
    emp = await add_employee(db_session, "Erin")
    mates = [await add_employee(db_session, name) for name in ("Nora", "Abe", "Kim")]
    project = await add_project(db_session, "P")
    await assign(db_session, project, emp, *mates)
    for mate in mates:
        await add_leave(db_session, mate, DAY, LeaveStatus.APPROVED)

    first = await compute_conflicts(db_session, emp.id, DAY, include_requested=False)
    second = await compute_conflicts(db_session, emp.id, DAY, include_requested=False)

    assert first == second
    assert [e.employee_name for e in first[0].employees] == ["Abe", "Kim", "Nora"]

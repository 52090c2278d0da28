from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from factories import add_leave
from sqlalchemy import func, select

from leave_planner.models import Employee, LeaveStatus, ProjectAssignment
from leave_planner.seed import ASSIGNMENTS, DEV_IDS, EMPLOYEES, seed_data
from leave_planner.services.conflict import compute_conflicts

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


async def _count(session: AsyncSession, model: type) -> int:
    result = await session.execute(select(func.count()).select_from(model))
    return result.scalar_one()


async def test_seed_inserts_data_once(db_session: AsyncSession) -> None:
    assert await seed_data(db_session) is True
    assert await _count(db_session, Employee) == len(EMPLOYEES)
    assert await _count(db_session, ProjectAssignment) == len(ASSIGNMENTS)

    assert await seed_data(db_session) is False
    assert await _count(db_session, Employee) == len(EMPLOYEES)


async def test_seeded_teams_overlap(db_session: AsyncSession) -> None:
    """Bob sits on Project A1 and Project B2, so both teams can collide with his leave."""
    await seed_data(db_session)
    on_date = date(2025, 10, 1)
    alice = await db_session.get(Employee, DEV_IDS[0])
    daria = await db_session.get(Employee, DEV_IDS[3])
    assert alice is not None
    assert daria is not None
    await add_leave(db_session, alice, on_date, LeaveStatus.APPROVED)
    await add_leave(db_session, daria, on_date, LeaveStatus.APPROVED)

    hints = await compute_conflicts(db_session, DEV_IDS[1], on_date, include_requested=False)

    assert [h.project_name for h in hints] == ["Project A1", "Project B2"]
    assert [e.employee_name for e in hints[0].employees] == ["Alice Nguyen"]
    assert [e.employee_name for e in hints[1].employees] == ["Daria Novak"]

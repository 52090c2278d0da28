"""Seed script for development data.

Run with:  python -m leave_planner.seed

Inserts one admin, two approvers, six developers, two customers and three
projects with overlapping teams. Does nothing if any employee already exists.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import func, select

from leave_planner.db import dispose_engine, get_session_factory
from leave_planner.models import Customer, Employee, Project, ProjectAssignment, UserRole

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

# Well-known UUIDs so that client sessions can use them in the X-Employee-Id header.
ADMIN_ID = uuid.UUID("aaaaaaaa-aaaa-aaaa-aaaa-aaaaaaaaaaa1")
APPROVER_1_ID = uuid.UUID("bbbbbbbb-bbbb-bbbb-bbbb-bbbbbbbbbbb1")
APPROVER_2_ID = uuid.UUID("bbbbbbbb-bbbb-bbbb-bbbb-bbbbbbbbbbb2")
DEV_IDS = [uuid.UUID(f"cccccccc-cccc-cccc-cccc-ccccccccccc{n}") for n in range(1, 7)]

CUSTOMER_A_ID = uuid.UUID("dddddddd-dddd-dddd-dddd-dddddddddd01")
CUSTOMER_B_ID = uuid.UUID("dddddddd-dddd-dddd-dddd-dddddddddd02")

PROJECT_A1_ID = uuid.UUID("eeeeeeee-eeee-eeee-eeee-eeeeeeeeeee1")
PROJECT_B1_ID = uuid.UUID("eeeeeeee-eeee-eeee-eeee-eeeeeeeeeee2")
PROJECT_B2_ID = uuid.UUID("eeeeeeee-eeee-eeee-eeee-eeeeeeeeeee3")

EMPLOYEES = [
    (ADMIN_ID, "Amira Admin", "Admin", UserRole.ADMIN),
    (APPROVER_1_ID, "Peter Product", "Approver", UserRole.APPROVER),
    (APPROVER_2_ID, "Sofia Supervisor", "Approver", UserRole.APPROVER),
    (DEV_IDS[0], "Alice Nguyen", "Developer", UserRole.EMPLOYEE),
    (DEV_IDS[1], "Bob Meier", "Developer", UserRole.EMPLOYEE),
    (DEV_IDS[2], "Carlos Diaz", "Developer", UserRole.EMPLOYEE),
    (DEV_IDS[3], "Daria Novak", "Developer", UserRole.EMPLOYEE),
    (DEV_IDS[4], "Eren Kaya", "Developer", UserRole.EMPLOYEE),
    (DEV_IDS[5], "Fatima Ali", "Developer", UserRole.EMPLOYEE),
]

CUSTOMERS = [
    (CUSTOMER_A_ID, "Customer A"),
    (CUSTOMER_B_ID, "Customer B"),
]

PROJECTS = [
    (PROJECT_A1_ID, "Project A1", CUSTOMER_A_ID, date(2025, 1, 1), date(2025, 12, 31)),
    (PROJECT_B1_ID, "Project B1", CUSTOMER_B_ID, date(2025, 3, 1), date(2025, 11, 30)),
    # Runs into 2026.
    (PROJECT_B2_ID, "Project B2", CUSTOMER_B_ID, date(2025, 9, 1), date(2026, 3, 31)),
]

# At least three developers per project; Bob, Daria and Fatima sit on two.
ASSIGNMENTS = [
    (PROJECT_A1_ID, DEV_IDS[0]),
    (PROJECT_A1_ID, DEV_IDS[1]),
    (PROJECT_A1_ID, DEV_IDS[2]),
    (PROJECT_B1_ID, DEV_IDS[3]),
    (PROJECT_B1_ID, DEV_IDS[4]),
    (PROJECT_B1_ID, DEV_IDS[5]),
    (PROJECT_B2_ID, DEV_IDS[1]),
    (PROJECT_B2_ID, DEV_IDS[3]),
    (PROJECT_B2_ID, DEV_IDS[5]),
]


async def seed_data(session: AsyncSession) -> bool:
    """Insert the development data set. Returns False if the database was already seeded."""
    result = await session.execute(select(func.count()).select_from(Employee))
    if result.scalar_one() > 0:
        logger.info("Employees already present, skipping seed")
        return False

    session.add_all(
        Employee(id=emp_id, name=name, job_title=title, role=role.value) for emp_id, name, title, role in EMPLOYEES
    )
    session.add_all(Customer(id=cust_id, name=name) for cust_id, name in CUSTOMERS)
    await session.flush()

    session.add_all(
        Project(id=proj_id, name=name, customer_id=cust_id, start_date=start, end_date=end)
        for proj_id, name, cust_id, start, end in PROJECTS
    )
    await session.flush()

    session.add_all(ProjectAssignment(project_id=proj_id, employee_id=emp_id) for proj_id, emp_id in ASSIGNMENTS)
    await session.commit()

    logger.info(
        "Seeded %d employees, %d customers, %d projects, %d assignments",
        len(EMPLOYEES),
        len(CUSTOMERS),
        len(PROJECTS),
        len(ASSIGNMENTS),
    )
    return True


async def main() -> None:
    try:
        async with get_session_factory()() as session:
            await seed_data(session)
    finally:
        await dispose_engine()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    asyncio.run(main())

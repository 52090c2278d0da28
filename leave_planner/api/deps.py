# ruff: noqa: B008, TC003
from __future__ import annotations

import uuid
from typing import Annotated

from fastapi import Depends, Header

from leave_planner.db import SessionDep
from leave_planner.exceptions import ForbiddenError, UnauthorizedError
from leave_planner.models.enums import UserRole
from leave_planner.schemas.auth import CallerContext
from leave_planner.services.employee import get_employee

CALLER_HEADER = "X-Employee-Id"


async def get_caller_context(
    session: SessionDep,
    x_employee_id: uuid.UUID | None = Header(default=None),
) -> CallerContext:
    """Resolve the calling employee from the X-Employee-Id header."""
    if x_employee_id is None:
        raise UnauthorizedError(f"Missing {CALLER_HEADER} header")
    employee = await get_employee(session, x_employee_id)
    if employee is None:
        raise UnauthorizedError("Unknown employee in caller header")
    return CallerContext(id=employee.id, name=employee.name, role=UserRole(employee.role))


CallerDep = Annotated[CallerContext, Depends(get_caller_context)]


async def require_admin(
    caller: CallerDep,
) -> CallerContext:
    """Require admin role for the request."""
    if not caller.is_admin:
        raise ForbiddenError("Admin access required")
    return caller


AdminDep = Annotated[CallerContext, Depends(require_admin)]

# ruff: noqa: TC003
from __future__ import annotations

import uuid

from pydantic import BaseModel

from leave_planner.models.enums import UserRole, can_decide


class CallerContext(BaseModel):
    """Resolved identity of the employee making the request."""

    id: uuid.UUID
    name: str
    role: UserRole = UserRole.EMPLOYEE

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def can_decide(self) -> bool:
        return can_decide(self.role)

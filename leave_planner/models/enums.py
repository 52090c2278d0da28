from __future__ import annotations

import enum


class UserRole(enum.StrEnum):
    """Role of an employee; governs workflow permissions."""

    EMPLOYEE = "EMPLOYEE"
    APPROVER = "APPROVER"
    ADMIN = "ADMIN"


class LeaveStatus(enum.StrEnum):
    """State machine for leave requests. APPROVED and REJECTED are terminal."""

    REQUESTED = "REQUESTED"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class NotificationKind(enum.StrEnum):
    """Event a notification informs its recipient about."""

    SUBMITTED = "SUBMITTED"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class AuditEntityType(enum.StrEnum):
    """Entity type recorded in the audit log."""

    EMPLOYEE = "EMPLOYEE"
    LEAVE_REQUEST = "LEAVE_REQUEST"


class AuditAction(enum.StrEnum):
    """Action recorded in the audit log."""

    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    SUBMIT = "SUBMIT"
    APPROVE = "APPROVE"
    REJECT = "REJECT"
    CHANGE_ROLE = "CHANGE_ROLE"


def can_decide(role: UserRole | str) -> bool:
    """Return True if the role may approve or reject leave requests."""
    return role in (UserRole.APPROVER, UserRole.ADMIN)

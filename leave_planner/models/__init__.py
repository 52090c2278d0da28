from sqlmodel import SQLModel

from leave_planner.models.audit import AuditLog
from leave_planner.models.base import TimestampMixin, UUIDBase
from leave_planner.models.customer import Customer
from leave_planner.models.employee import Employee
from leave_planner.models.enums import (
    AuditAction,
    AuditEntityType,
    LeaveStatus,
    NotificationKind,
    UserRole,
    can_decide,
)
from leave_planner.models.leave import LeaveRequest
from leave_planner.models.notification import Notification
from leave_planner.models.project import Project, ProjectAssignment

__all__ = [
    "AuditAction",
    "AuditEntityType",
    "AuditLog",
    "Customer",
    "Employee",
    "LeaveRequest",
    "LeaveStatus",
    "Notification",
    "NotificationKind",
    "Project",
    "ProjectAssignment",
    "SQLModel",
    "TimestampMixin",
    "UUIDBase",
    "UserRole",
    "can_decide",
]
